"""Tests for RepositoryPattern parsing and remote URL matching."""

import pytest

from pygit_find import InvalidPatternError, RepositoryPattern


class TestPatternParsing:
    def test_valid_pattern(self):
        pattern = RepositoryPattern.parse("anthropics/claude-code")
        assert pattern.owner == "anthropics"
        assert pattern.repo == "claude-code"

    def test_halves_are_trimmed(self):
        pattern = RepositoryPattern.parse("  acme / widget ")
        assert pattern.owner == "acme"
        assert pattern.repo == "widget"

    def test_case_is_preserved(self):
        pattern = RepositoryPattern.parse("Acme/Widget")
        assert str(pattern) == "Acme/Widget"

    @pytest.mark.parametrize("text", ["a", "a/b/c", "/b", "a/", "/", "", " / ", "owner/ "])
    def test_invalid_patterns(self, text):
        with pytest.raises(InvalidPatternError):
            RepositoryPattern.parse(text)

    def test_invalid_pattern_message(self):
        with pytest.raises(InvalidPatternError, match="Expected format: owner/repo"):
            RepositoryPattern.parse("invalid")

    def test_invalid_pattern_is_value_error(self):
        with pytest.raises(ValueError):
            RepositoryPattern.parse("invalid")

    def test_frozen(self):
        pattern = RepositoryPattern.parse("a/b")
        with pytest.raises(AttributeError):
            pattern.owner = "c"


class TestUrlMatching:
    @pytest.fixture
    def pattern(self):
        return RepositoryPattern.parse("anthropics/claude-code")

    def test_scp_style_urls(self, pattern):
        assert pattern.matches("git@github.com:anthropics/claude-code.git")
        assert pattern.matches("git@github.com:anthropics/claude-code")

    def test_scp_style_path_with_leading_slash(self, pattern):
        assert pattern.matches("git@github.com:/anthropics/claude-code.git")
        assert not pattern.matches("git@github.com:/different/claude-code.git")

    def test_ssh_urls(self, pattern):
        assert pattern.matches("ssh://git@github.com/anthropics/claude-code.git")
        assert pattern.matches("ssh://git@github.com:2222/anthropics/claude-code")

    def test_https_urls(self, pattern):
        assert pattern.matches("https://github.com/anthropics/claude-code.git")
        assert pattern.matches("https://github.com/anthropics/claude-code")
        assert pattern.matches("http://github.com/anthropics/claude-code.git")
        assert pattern.matches("https://github.com/anthropics/claude-code/")

    def test_case_and_suffix_insensitive(self, pattern):
        for url in (
            "git@github.com:Anthropics/Claude-Code.GIT",
            "git@github.com:ANTHROPICS/claude-code.Git",
            "https://github.com/ANTHROPICS/CLAUDE-CODE.git",
            "https://github.com/anthropics/Claude-Code",
        ):
            assert pattern.matches(url), url

    def test_mixed_case_pattern(self):
        pattern = RepositoryPattern.parse("Anthropics/Claude-Code")
        assert pattern.matches("git@github.com:anthropics/claude-code.git")

    def test_non_matching_urls(self, pattern):
        assert not pattern.matches("git@github.com:different/repo.git")
        assert not pattern.matches("https://github.com/different/repo.git")
        assert not pattern.matches("git@github.com:anthropics/different-repo.git")
        assert not pattern.matches("https://github.com/anthropics/claude-code-extra.git")

    def test_fallback_for_schemeless_host_path(self, pattern):
        assert pattern.matches("github.com/anthropics/claude-code.git")

    def test_fallback_for_url_without_repo_path(self, pattern):
        assert not pattern.matches("https://github.com")

    def test_no_delimiters_never_matches(self, pattern):
        assert not pattern.matches("claude-code")
        assert not pattern.matches("")
