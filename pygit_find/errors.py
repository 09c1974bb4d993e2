"""Exception hierarchy for pygit-find."""

from __future__ import annotations


class FinderError(Exception):
    """Base class for all pygit-find errors"""


class InvalidPatternError(FinderError, ValueError):
    """Raised when a search pattern is not in owner/repo form"""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"Invalid search pattern: {pattern}. Expected format: owner/repo")


class RemoteReadError(FinderError):
    """Raised when a repository cannot be opened or its remotes cannot be read"""

    def __init__(self, path, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to read remotes from git repo at {path}{detail}")


class ScanError(FinderError):
    """Raised when the scan cannot continue at all"""
