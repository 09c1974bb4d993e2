"""Protocols for dependency injection."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pygit_find.models import Remote


class RemoteReader(Protocol):
    """Protocol for reading the configured remotes of a repository.

    Implementations are blocking; the scanner runs them in a worker thread.
    Raise RemoteReadError when the path is not a usable repository.
    """

    def get_remotes(self, repo_path: Path) -> list[Remote]: ...


class OutputHandler(Protocol):
    """Protocol for handling output"""

    def info(self, message: str, indent: int = 0) -> None: ...
    def success(self, message: str, indent: int = 0) -> None: ...
    def warning(self, message: str, indent: int = 0) -> None: ...
    def error(self, message: str, indent: int = 0) -> None: ...
    def debug(self, message: str) -> None: ...
