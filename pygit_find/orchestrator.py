"""SearchOrchestrator: wires the scanner, progress channel, and tracker together."""

from __future__ import annotations

import asyncio
from pathlib import Path

from pygit_find.matcher import RepositoryPattern
from pygit_find.models import Done, FinderConfig, MatchResult
from pygit_find.progress import ProgressChannel, ProgressTracker
from pygit_find.protocols import OutputHandler, RemoteReader
from pygit_find.scanner import RepositoryScanner


class SearchOrchestrator:
    """Main orchestrator - runs one search and collects its results"""

    def __init__(
        self,
        pattern: RepositoryPattern,
        config: FinderConfig,
        output: OutputHandler,
        remote_reader: RemoteReader = None,
        pattern_text: str | None = None,
    ):
        """Create an orchestrator for the given pattern, config, and output handler."""
        self.pattern = pattern
        self.config = config
        self.output = output
        self.pattern_text = pattern_text or str(pattern)
        self.scanner = RepositoryScanner(
            pattern,
            max_concurrency=config.max_concurrency,
            remote_reader=remote_reader,
            output=output,
            verbose=config.verbose,
        )

    def search(self, search_dir: Path) -> list[MatchResult]:
        """Blocking entry point: run the search to completion."""
        return asyncio.run(self.run(search_dir))

    async def run(self, search_dir: Path) -> list[MatchResult]:
        """Scan search_dir, streaming events to a tracker when one is wanted."""
        if not self.config.wants_tracker:
            return await self.scanner.scan(search_dir)

        channel = ProgressChannel()
        tracker = ProgressTracker(
            channel,
            self.output,
            show_progress=self.config.streaming,
            verbose=self.config.verbose,
            pattern=self.pattern_text,
        )
        tracker_task = asyncio.create_task(tracker.run())
        try:
            await self.scanner.scan(search_dir, channel)
        finally:
            channel.send(Done())
            matches = await tracker_task
        return matches
