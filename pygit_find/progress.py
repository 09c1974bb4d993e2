"""Progress channel and tracker: live reporting decoupled from scan tasks."""

from __future__ import annotations

import asyncio

from tqdm import tqdm

from pygit_find.models import (
    Done,
    MatchFound,
    MatchResult,
    ProgressMessage,
    ScanningDirectory,
    ScanWarning,
)
from pygit_find.protocols import OutputHandler
from pygit_find.reporter import format_match


class ProgressChannel:
    """Unbounded many-producer, single-consumer queue of progress messages.

    Sending never blocks. Once the consumer has stopped, further messages
    are dropped.
    """

    def __init__(self):
        self._queue: asyncio.Queue[ProgressMessage] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, message: ProgressMessage) -> bool:
        """Enqueue a message; return False if the consumer is gone."""
        if self._closed:
            return False
        self._queue.put_nowait(message)
        return True

    async def receive(self) -> ProgressMessage:
        return await self._queue.get()

    def close(self) -> None:
        self._closed = True


class ProgressTracker:
    """Consumes progress messages, keeps counters, and drives the status line"""

    def __init__(
        self,
        channel: ProgressChannel,
        output: OutputHandler,
        show_progress: bool = True,
        verbose: int = 0,
        pattern: str = '',
    ):
        """Create a tracker reading from channel and printing through output.

        With show_progress, a live status line is drawn and matches are
        printed as soon as they arrive. Scanned directories are reported
        through output.debug; the handler decides whether they are shown.
        """
        self.channel = channel
        self.output = output
        self.show_progress = show_progress
        self.verbose = verbose
        self.pattern = pattern
        self.dirs_scanned = 0
        self.matches: list[MatchResult] = []
        self._status: tqdm | None = None

    async def run(self) -> list[MatchResult]:
        """Consume messages until Done, then return the matches seen."""
        self._status = self._open_status()
        try:
            while True:
                message = await self.channel.receive()
                if isinstance(message, Done):
                    break
                self._handle(message)
        finally:
            self.channel.close()
            self._close_status()
        return self.matches

    def _handle(self, message: ProgressMessage) -> None:
        if isinstance(message, ScanningDirectory):
            self.dirs_scanned += 1
            self.output.debug(f"Scanning: {message.path}")
            if self._status is not None:
                self._status.update(1)
        elif isinstance(message, MatchFound):
            if self.show_progress:
                self.output.info(format_match(message.result, len(self.matches) + 1))
            self.matches.append(message.result)
        elif isinstance(message, ScanWarning):
            if self.verbose >= 1:
                self.output.warning(message.message)
        self._refresh_status()

    def _open_status(self) -> tqdm | None:
        if not self.show_progress:
            return None
        return tqdm(
            total=None,
            desc=f"Searching for {self.pattern}" if self.pattern else "Scanning",
            unit="dir",
            leave=False,
        )

    def _refresh_status(self) -> None:
        if self._status is not None:
            self._status.set_postfix_str(f"found {len(self.matches)} matches", refresh=False)

    def _close_status(self) -> None:
        if self._status is None:
            return
        self._status.close()
        self._status = None
        self.output.info(
            f"Scan complete: {self.dirs_scanned} directories scanned, "
            f"{len(self.matches)} matches found"
        )
