"""
pygit-find: Git Repository Finder

Concurrently searches a directory tree for git repositories whose remotes
reference a given owner/repo, regardless of remote name or URL scheme.
"""

from colorama import init as colorama_init

colorama_init(autoreset=True)

__version__ = "1.0.0"

# Re-export public API so `from pygit_find import X` keeps working.
from pygit_find.cli import main  # noqa: E402
from pygit_find.config import create_argument_parser, load_config_file  # noqa: E402
from pygit_find.errors import (  # noqa: E402
    FinderError,
    InvalidPatternError,
    RemoteReadError,
    ScanError,
)
from pygit_find.matcher import RepositoryPattern  # noqa: E402
from pygit_find.models import (  # noqa: E402
    DEFAULT_MAX_CONCURRENCY,
    Done,
    FinderConfig,
    MatchFound,
    MatchResult,
    ProgressMessage,
    Remote,
    ScanningDirectory,
    ScanWarning,
)
from pygit_find.orchestrator import SearchOrchestrator  # noqa: E402
from pygit_find.output import (  # noqa: E402
    BufferedOutputHandler,
    ConsoleOutputHandler,
    NullOutputHandler,
)
from pygit_find.progress import ProgressChannel, ProgressTracker  # noqa: E402
from pygit_find.protocols import OutputHandler, RemoteReader  # noqa: E402
from pygit_find.remotes import GitPythonRemoteReader  # noqa: E402
from pygit_find.reporter import ResultsReporter, format_match, results_to_dict  # noqa: E402
from pygit_find.scanner import DirectoryListing, RepositoryScanner, list_directory  # noqa: E402

__all__ = [
    "__version__",
    # Models
    "DEFAULT_MAX_CONCURRENCY",
    "FinderConfig",
    "MatchResult",
    "Remote",
    "RepositoryPattern",
    "DirectoryListing",
    # Progress messages
    "ProgressMessage",
    "ScanningDirectory",
    "MatchFound",
    "ScanWarning",
    "Done",
    # Errors
    "FinderError",
    "InvalidPatternError",
    "RemoteReadError",
    "ScanError",
    # Protocols
    "OutputHandler",
    "RemoteReader",
    # Implementations
    "GitPythonRemoteReader",
    "BufferedOutputHandler",
    "ConsoleOutputHandler",
    "NullOutputHandler",
    # Services
    "ProgressChannel",
    "ProgressTracker",
    "RepositoryScanner",
    "ResultsReporter",
    "SearchOrchestrator",
    "format_match",
    "list_directory",
    "results_to_dict",
    # Config / CLI
    "create_argument_parser",
    "load_config_file",
    "main",
]
