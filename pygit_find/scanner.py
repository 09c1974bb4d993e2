"""Repository scanner: concurrently walks a tree looking for matching repos."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from pygit_find.errors import RemoteReadError, ScanError
from pygit_find.matcher import RepositoryPattern
from pygit_find.models import (
    DEFAULT_MAX_CONCURRENCY,
    MatchFound,
    MatchResult,
    ProgressMessage,
    ScanningDirectory,
    ScanWarning,
)
from pygit_find.output import NullOutputHandler
from pygit_find.progress import ProgressChannel
from pygit_find.protocols import OutputHandler, RemoteReader
from pygit_find.remotes import GitPythonRemoteReader

logger = logging.getLogger(__name__)

GIT_ENTRY = '.git'


@dataclass(frozen=True)
class DirectoryListing:
    """Result of one listing pass over a directory"""
    is_repository: bool
    subdirectories: tuple[Path, ...] = ()


def list_directory(path: Path) -> DirectoryListing:
    """List a directory once, stopping early if it is a repository root.

    Symlinks are not followed. Raises OSError if the directory cannot be read.
    """
    subdirs = []
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.name == GIT_ENTRY:
                return DirectoryListing(is_repository=True)
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
            except OSError:
                # entry vanished or is unreadable; it is not a subdirectory we can visit
                continue
    return DirectoryListing(is_repository=False, subdirectories=tuple(subdirs))


@dataclass
class _ScanState:
    """Shared state for one scan run"""
    limiter: asyncio.Semaphore
    progress: ProgressChannel | None
    results: list[MatchResult] = field(default_factory=list)
    seen: set[Path] = field(default_factory=set)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


class RepositoryScanner:
    """Responsible for finding repositories whose remotes match a pattern"""

    def __init__(
        self,
        pattern: RepositoryPattern,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        remote_reader: RemoteReader = None,
        output: OutputHandler = None,
        verbose: int = 0,
    ):
        """Create a scanner.

        ``output`` receives warnings directly (gated by ``verbose``) when a
        scan runs without a progress channel.
        """
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")
        self.pattern = pattern
        self.max_concurrency = max_concurrency
        self.remote_reader = remote_reader or GitPythonRemoteReader()
        self.output = output or NullOutputHandler()
        self.verbose = verbose

    async def scan(self, root: Path, progress: ProgressChannel | None = None) -> list[MatchResult]:
        """Scan the tree under root and return all matching repositories.

        Returns only after every spawned directory visit has finished.
        Per-directory failures are reported as warnings; an exception
        escaping the root visit is raised as ScanError.
        """
        state = _ScanState(limiter=asyncio.Semaphore(self.max_concurrency), progress=progress)
        try:
            await self._visit(Path(root), state)
        except Exception as e:
            raise ScanError(f"Scan of {root} failed: {e}") from e
        return list(state.results)

    def find_matches(self, root: Path) -> list[MatchResult]:
        """Blocking wrapper around scan() without progress reporting."""
        return asyncio.run(self.scan(root))

    async def _visit(self, path: Path, state: _ScanState) -> None:
        """Visit one directory: inspect it as a repository or fan out to its children."""
        self._emit(state, ScanningDirectory(path))

        # max_concurrency bounds visits doing I/O (listing, remote read), not
        # open visits: the permit is released before children are joined,
        # otherwise a tree deeper than the limit would deadlock.
        async with state.limiter:
            try:
                listing = await asyncio.to_thread(list_directory, path)
            except OSError as e:
                self._warn(state, f"Warning: Cannot read directory {path}: {e}")
                return

            if listing.is_repository:
                await self._inspect_repository(path, state)
                # never descend into a repository
                return

        children = [asyncio.create_task(self._visit(subdir, state))
                    for subdir in listing.subdirectories]
        if not children:
            return

        outcomes = await asyncio.gather(*children, return_exceptions=True)
        for subdir, outcome in zip(listing.subdirectories, outcomes):
            if isinstance(outcome, Exception):
                logger.debug("Visit of %s failed", subdir, exc_info=outcome)
                self._warn(state, f"Warning: Scan task failed: {subdir}: {outcome}")
            elif isinstance(outcome, BaseException):
                raise outcome

    async def _inspect_repository(self, path: Path, state: _ScanState) -> None:
        """Read a repository's remotes and record a match if any remote matches."""
        try:
            remotes = await asyncio.to_thread(self.remote_reader.get_remotes, path)
        except RemoteReadError as e:
            logger.debug("%s", e)
            self._warn(state, f"Warning: Failed to read remotes from git repo at {path}")
            return

        matching = tuple(remote for remote in remotes if self.pattern.matches(remote.url))
        if not matching:
            return

        result = MatchResult(path=path, remotes=matching)
        async with state.lock:
            if path in state.seen:
                return
            state.seen.add(path)
            state.results.append(result)
        self._emit(state, MatchFound(result))

    def _emit(self, state: _ScanState, message: ProgressMessage) -> None:
        if state.progress is not None:
            state.progress.send(message)

    def _warn(self, state: _ScanState, message: str) -> None:
        """Route a warning to the progress channel, or print it directly if verbose."""
        if state.progress is not None:
            state.progress.send(ScanWarning(message))
        elif self.verbose >= 1:
            self.output.warning(message)
