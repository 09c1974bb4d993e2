"""Tests for domain models (dataclasses, progress messages, config)."""

from pathlib import Path

import pytest

from pygit_find import (
    DEFAULT_MAX_CONCURRENCY,
    Done,
    FinderConfig,
    MatchFound,
    MatchResult,
    Remote,
    ScanningDirectory,
    ScanWarning,
    load_config_file,
    results_to_dict,
)


class TestRemote:
    def test_to_dict(self):
        assert Remote("origin", "https://x/a/b").to_dict() == {"name": "origin", "url": "https://x/a/b"}

    def test_frozen(self):
        remote = Remote("origin", "u")
        with pytest.raises(AttributeError):
            remote.name = "upstream"


class TestMatchResult:
    def test_to_dict(self):
        result = MatchResult(Path("/src/widget"), (Remote("origin", "git@h:acme/widget.git"),))
        assert result.to_dict() == {
            "path": "/src/widget",
            "remotes": [{"name": "origin", "url": "git@h:acme/widget.git"}],
        }

    def test_remote_order_preserved(self):
        remotes = (Remote("upstream", "u1"), Remote("origin", "u2"))
        result = MatchResult(Path("/r"), remotes)
        assert [r["name"] for r in result.to_dict()["remotes"]] == ["upstream", "origin"]

    def test_results_to_dict_empty(self):
        assert results_to_dict([], "acme/widget") == {
            "pattern": "acme/widget",
            "count": 0,
            "repositories": [],
        }


class TestProgressMessages:
    def test_variants_carry_payloads(self):
        result = MatchResult(Path("/r"))
        assert ScanningDirectory(Path("/d")).path == Path("/d")
        assert MatchFound(result).result is result
        assert ScanWarning("careful").message == "careful"
        assert Done() == Done()


class TestFinderConfig:
    def test_defaults(self):
        config = FinderConfig()
        assert config.max_concurrency == DEFAULT_MAX_CONCURRENCY == 100
        assert config.verbose == 0
        assert config.json_output is False
        assert config.show_progress is True

    def test_rejects_zero_concurrency(self):
        with pytest.raises(ValueError):
            FinderConfig(max_concurrency=0)

    def test_streaming_and_tracker(self):
        assert FinderConfig().streaming is True
        assert FinderConfig().wants_tracker is True
        json_config = FinderConfig(json_output=True)
        assert json_config.streaming is False
        assert json_config.wants_tracker is False
        assert FinderConfig(json_output=True, verbose=1).wants_tracker is True
        assert FinderConfig(show_progress=False).wants_tracker is False


class TestLoadConfigFile:
    def test_loads_from_search_dir(self, tmp_path):
        (tmp_path / ".pygitfindrc.toml").write_text("max_concurrency = 8\nverbose = 1\n")
        loaded = load_config_file(tmp_path)
        assert loaded == {"max_concurrency": 8, "verbose": 1}

    def test_explicit_path(self, tmp_path):
        custom = tmp_path / "custom.toml"
        custom.write_text("json_output = true\n")
        assert load_config_file(tmp_path, config_path=str(custom)) == {"json_output": True}

    def test_missing_explicit_path(self, tmp_path, capsys):
        assert load_config_file(tmp_path, config_path=str(tmp_path / "nope.toml")) == {}
        assert "not found" in capsys.readouterr().err

    def test_unparseable_file(self, tmp_path, capsys):
        (tmp_path / ".pygitfindrc.toml").write_text("max_concurrency = = 3\n")
        assert load_config_file(tmp_path) == {}
        assert "Failed to parse" in capsys.readouterr().err
