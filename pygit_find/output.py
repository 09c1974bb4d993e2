"""Output handler implementations: console, null, buffered."""

from __future__ import annotations

from typing import TextIO

from colorama import Fore, Style
from tqdm import tqdm


class ConsoleOutputHandler:
    """Console output with colors.

    Messages go through tqdm.write so they never corrupt a live status line.
    """

    def __init__(self, verbose: bool = False, stream: TextIO | None = None):
        """Create a console handler. Set verbose=True to enable debug output.

        ``stream`` defaults to stdout at write time.
        """
        self.verbose = verbose
        self.stream = stream

    def _write(self, text: str) -> None:
        tqdm.write(text, file=self.stream)

    def info(self, message: str, indent: int = 0) -> None:
        """Print an informational message."""
        self._write("  " * indent + message)

    def success(self, message: str, indent: int = 0) -> None:
        """Print a green success message."""
        self._write("  " * indent + f"{Fore.GREEN}{message}{Style.RESET_ALL}")

    def warning(self, message: str, indent: int = 0) -> None:
        """Print a yellow warning message."""
        self._write("  " * indent + f"{Fore.YELLOW}{message}{Style.RESET_ALL}")

    def error(self, message: str, indent: int = 0) -> None:
        """Print a red error message."""
        self._write("  " * indent + f"{Fore.RED}{message}{Style.RESET_ALL}")

    def debug(self, message: str) -> None:
        """Print a cyan trace message (only when verbose is enabled)."""
        if self.verbose:
            self._write(f"{Fore.CYAN}{message}{Style.RESET_ALL}")


class NullOutputHandler:
    """Silent output handler for testing and JSON mode."""

    def info(self, message: str, indent: int = 0) -> None:
        pass

    def success(self, message: str, indent: int = 0) -> None:
        pass

    def warning(self, message: str, indent: int = 0) -> None:
        pass

    def error(self, message: str, indent: int = 0) -> None:
        pass

    def debug(self, message: str) -> None:
        pass


class BufferedOutputHandler:
    """Collects output messages in memory instead of printing them."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.messages: list[str] = []
        self.warnings: list[str] = []

    def info(self, message: str, indent: int = 0) -> None:
        self.messages.append("  " * indent + message)

    def success(self, message: str, indent: int = 0) -> None:
        self.messages.append("  " * indent + message)

    def warning(self, message: str, indent: int = 0) -> None:
        self.messages.append("  " * indent + message)
        self.warnings.append(message)

    def error(self, message: str, indent: int = 0) -> None:
        self.messages.append("  " * indent + message)

    def debug(self, message: str) -> None:
        """Buffer a trace message (only when verbose is enabled)."""
        if self.verbose:
            self.messages.append(message)
