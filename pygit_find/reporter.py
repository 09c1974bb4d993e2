"""ResultsReporter: renders search results as colored text or JSON."""

from __future__ import annotations

import json
from typing import Any

from colorama import Fore, Style

from pygit_find.models import MatchResult
from pygit_find.protocols import OutputHandler


def _plural(count: int) -> str:
    return "repository" if count == 1 else "repositories"


def format_match(result: MatchResult, index: int) -> str:
    """Format one match as a numbered block for streaming output."""
    lines = [f"\n{Fore.YELLOW}{index}{Style.RESET_ALL}. {Style.BRIGHT}{result.path}{Style.RESET_ALL}"]
    for remote in result.remotes:
        lines.append(f"   {Fore.BLUE}{remote.name}{Style.RESET_ALL}: {remote.url}")
    return "\n".join(lines)


def results_to_dict(results: list[MatchResult], pattern: str) -> dict[str, Any]:
    """Build the JSON document for a result set."""
    return {
        'pattern': pattern,
        'count': len(results),
        'repositories': [result.to_dict() for result in results],
    }


class ResultsReporter:
    """Generates and displays search reports"""

    def __init__(self, output: OutputHandler):
        """Create a reporter that writes to the given output handler."""
        self.output = output

    def print_results(self, results: list[MatchResult], pattern: str) -> None:
        """Print the full numbered list of matches."""
        if not results:
            self._print_none_found(pattern)
            return

        self.output.info(
            f"Found {Fore.GREEN}{Style.BRIGHT}{len(results)}{Style.RESET_ALL} matching "
            f"{_plural(len(results))} for '{Fore.CYAN}{pattern}{Style.RESET_ALL}':\n"
        )
        for index, result in enumerate(results, start=1):
            self.output.info(f"{Fore.YELLOW}{index}{Style.RESET_ALL}. {Style.BRIGHT}{result.path}{Style.RESET_ALL}")
            for remote in result.remotes:
                self.output.info(f"   {Fore.BLUE}{remote.name}{Style.RESET_ALL}: {remote.url}")
            self.output.info("")

    def print_summary(self, results: list[MatchResult], pattern: str) -> None:
        """Print the one-line summary shown after streamed matches."""
        if not results:
            self.output.info("")
            self._print_none_found(pattern)
            return

        self.output.info("")
        self.output.success(
            f"{Style.BRIGHT}Found{Style.NORMAL} {len(results)} {_plural(len(results))} "
            f"matching '{Fore.CYAN}{pattern}{Fore.GREEN}'"
        )

    def print_json(self, results: list[MatchResult], pattern: str) -> None:
        """Print results as a JSON document on stdout."""
        print(json.dumps(results_to_dict(results, pattern), indent=2))

    def _print_none_found(self, pattern: str) -> None:
        self.output.warning(f"{Style.BRIGHT}No repositories found matching '{pattern}'")
