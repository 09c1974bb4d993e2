"""Domain models: match results, configuration, and progress messages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

DEFAULT_MAX_CONCURRENCY = 100


@dataclass(frozen=True)
class Remote:
    """A named git remote and its URL"""
    name: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {'name': self.name, 'url': self.url}


@dataclass(frozen=True)
class MatchResult:
    """A repository whose remotes reference the searched owner/repo.

    ``remotes`` holds only the matching remotes, in the order the
    repository reports them.
    """
    path: Path
    remotes: tuple[Remote, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict for JSON output."""
        return {
            'path': str(self.path),
            'remotes': [remote.to_dict() for remote in self.remotes],
        }


@dataclass(frozen=True)
class FinderConfig:
    """Configuration for a search run"""
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    verbose: int = 0
    json_output: bool = False
    show_progress: bool = True

    def __post_init__(self):
        if self.max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {self.max_concurrency}")

    @property
    def streaming(self) -> bool:
        """True when matches are printed live under a status line."""
        return self.show_progress and not self.json_output

    @property
    def wants_tracker(self) -> bool:
        """True when scan events should flow through a progress channel."""
        return self.streaming or self.verbose >= 1


# Progress messages sent from scan tasks to the tracker

@dataclass(frozen=True)
class ScanningDirectory:
    """A directory visit has started"""
    path: Path


@dataclass(frozen=True)
class MatchFound:
    """A matching repository was discovered"""
    result: MatchResult


@dataclass(frozen=True)
class ScanWarning:
    """A soft failure local to one directory or subtree"""
    message: str


@dataclass(frozen=True)
class Done:
    """The scan has completed; the tracker should stop"""


ProgressMessage = Union[ScanningDirectory, MatchFound, ScanWarning, Done]
