"""CLI entry point: main() function."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

from colorama import Fore, Style

from pygit_find.config import create_argument_parser, load_config_file
from pygit_find.errors import InvalidPatternError
from pygit_find.matcher import RepositoryPattern
from pygit_find.models import FinderConfig
from pygit_find.orchestrator import SearchOrchestrator
from pygit_find.output import ConsoleOutputHandler, NullOutputHandler
from pygit_find.reporter import ResultsReporter


def _fail(message: str) -> NoReturn:
    print(f"{Fore.RED}Error: {message}{Style.RESET_ALL}", file=sys.stderr)
    sys.exit(1)


def _names_option(arg: str, option: str) -> bool:
    """True if a raw argv token sets the given option ('-j8', '--json', '--max-concurrency=8')."""
    if arg == option or arg.startswith(option + '='):
        return True
    return len(option) == 2 and not arg.startswith('--') and arg.startswith(option)


def main(argv: list[str] | None = None):
    """Main entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    raw_argv = sys.argv[1:] if argv is None else argv

    search_dir = Path(args.search_path) if args.search_path else Path.cwd()
    if not search_dir.exists():
        _fail(f"Search path does not exist: {search_dir}")

    try:
        pattern = RepositoryPattern.parse(args.pattern)
    except InvalidPatternError as e:
        _fail(str(e))

    file_config = load_config_file(search_dir, args.config)

    # Determine which args were explicitly set on CLI
    cli_explicit = set()
    for action in parser._actions:
        if action.dest in ('help', 'version'):
            continue
        for opt_string in action.option_strings:
            if any(_names_option(arg, opt_string) for arg in raw_argv):
                cli_explicit.add(action.dest)
                break

    def effective(dest: str):
        if dest in cli_explicit:
            return getattr(args, dest)
        if dest in file_config:
            return file_config[dest]
        return getattr(args, dest)

    try:
        config = FinderConfig(
            max_concurrency=int(effective('max_concurrency')),
            verbose=int(effective('verbose')),
            json_output=bool(effective('json_output')),
            show_progress=bool(effective('show_progress')),
        )
    except ValueError as e:
        _fail(str(e))

    logging.basicConfig(
        level=logging.DEBUG if config.verbose >= 2 else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if config.json_output:
        # keep stdout clean for the JSON document
        output = ConsoleOutputHandler(verbose=config.verbose >= 2, stream=sys.stderr) if config.verbose else NullOutputHandler()
    else:
        output = ConsoleOutputHandler(verbose=config.verbose >= 2)

    orchestrator = SearchOrchestrator(pattern, config, output, pattern_text=args.pattern)
    reporter = ResultsReporter(output)

    try:
        results = orchestrator.search(search_dir)

        if config.json_output:
            reporter.print_json(results, args.pattern)
        elif config.streaming:
            reporter.print_summary(results, args.pattern)
        else:
            reporter.print_results(results, args.pattern)

        sys.exit(0 if results else 1)

    except KeyboardInterrupt:
        if not config.json_output:
            output.warning("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        if config.json_output:
            print(json.dumps({'error': str(e)}, indent=2))
        else:
            output.error(f"\nUnexpected error: {e}")
            if config.verbose:
                import traceback
                traceback.print_exc()
        sys.exit(1)
