"""Configuration: argument parser and config file loader."""

from __future__ import annotations

import argparse
import sys
import tomllib
from pathlib import Path
from typing import Any

from pygit_find.models import DEFAULT_MAX_CONCURRENCY

CONFIG_FILENAME = '.pygitfindrc.toml'


def create_argument_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all pygit-find flags."""
    # Lazy import to avoid circular dependency with __init__.py
    from pygit_find import __version__

    parser = argparse.ArgumentParser(
        description="Find git repositories whose remotes reference an owner/repo pattern",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Supports SSH (git@github.com:owner/repo.git) and HTTPS
(https://github.com/owner/repo.git) remote URLs. All remotes (origin,
upstream, ...) are checked, and the contents of a repository are never
scanned.

Examples:
  %(prog)s anthropics/claude-code                 # Search the current directory
  %(prog)s anthropics/claude-code ~/src           # Search ~/src
  %(prog)s anthropics/claude-code ~/src --json    # JSON output
  %(prog)s anthropics/claude-code ~/src -j 16 -v  # Limit concurrency, show warnings
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('pattern', metavar='PATTERN',
                       help="Repository pattern in owner/repo format (e.g. 'anthropics/claude-code')")
    parser.add_argument('search_path', metavar='PATH', nargs='?', default=None,
                       help='Directory to search (default: current)')
    parser.add_argument('-j', '--max-concurrency', dest='max_concurrency', type=int,
                       default=DEFAULT_MAX_CONCURRENCY,
                       help=f'Maximum number of concurrent scan tasks (default: {DEFAULT_MAX_CONCURRENCY})')
    parser.add_argument('--json', dest='json_output', action='store_true',
                       help='Output results as JSON')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                       help='Show warnings; repeat (-vv) to also list every scanned directory')
    parser.add_argument('--no-progress', dest='show_progress', action='store_false',
                       help='Disable the live progress display')
    parser.add_argument('--config', type=str, default=None,
                       help=f'Path to config file (default: {CONFIG_FILENAME} in search dir or home)')

    return parser


def load_config_file(search_dir: Path, config_path: str | None = None) -> dict[str, Any]:
    """Load .pygitfindrc.toml from explicit path, search dir, or home dir.

    Returns empty dict if not found or unparseable.
    """
    candidates = [Path(config_path)] if config_path else [search_dir / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME]
    for path in candidates:
        if path.is_file():
            try:
                with open(path, 'rb') as f:
                    return tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
                return {}
    if config_path:
        print(f"Warning: Config file '{config_path}' not found. Ignoring.", file=sys.stderr)
    return {}
