"""Repository pattern: parses owner/repo and matches remote URLs against it."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from pygit_find.errors import InvalidPatternError

logger = logging.getLogger(__name__)

# user@host:owner/repo(.git), no scheme
_SCP_LIKE = re.compile(r'^(?:[^@/:]+@)?(?P<host>[^@/:]+):(?P<path>.+)$')

_FALLBACK_PREFIXES = ('https://', 'http://', 'ssh://', 'git@')


def _strip_git_suffix(name: str) -> str:
    if name.lower().endswith('.git'):
        return name[:-4]
    return name


@dataclass(frozen=True)
class RepositoryPattern:
    """Immutable owner/repo identity, compared case-insensitively"""
    owner: str
    repo: str

    @classmethod
    def parse(cls, pattern: str) -> RepositoryPattern:
        """Build a pattern from an ``owner/repo`` string.

        Exactly one ``/`` is required and both trimmed halves must be
        non-empty, otherwise InvalidPatternError is raised.
        """
        parts = pattern.split('/')
        if len(parts) != 2:
            raise InvalidPatternError(pattern)

        owner, repo = parts[0].strip(), parts[1].strip()
        if not owner or not repo:
            raise InvalidPatternError(pattern)

        return cls(owner=owner, repo=repo)

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"

    def matches(self, remote_url: str) -> bool:
        """Return True if the remote URL designates this owner/repo."""
        segments = self._structured_segments(remote_url)
        if segments is None:
            logger.debug("Falling back to heuristic parsing for %r", remote_url)
            return self._heuristic_match(remote_url)

        url_owner, url_repo = segments
        return self._same_identity(url_owner, url_repo)

    def _same_identity(self, owner: str, repo: str) -> bool:
        return (self.owner.casefold() == owner.casefold()
                and self.repo.casefold() == _strip_git_suffix(repo).casefold())

    @staticmethod
    def _structured_segments(remote_url: str) -> tuple[str, str] | None:
        """Extract (owner, name) from a well-formed URL, or None if it isn't one."""
        url = remote_url.strip()
        if '://' in url:
            try:
                path = urlsplit(url).path
            except ValueError:
                return None
        else:
            scp = _SCP_LIKE.match(url)
            if scp is None:
                return None
            path = scp.group('path')

        segments = [s for s in path.split('/') if s]
        if len(segments) < 2:
            return None
        return segments[-2], segments[-1]

    def _heuristic_match(self, remote_url: str) -> bool:
        url = remote_url
        for prefix in _FALLBACK_PREFIXES:
            url = url.removeprefix(prefix)

        # ':' takes priority over '/' (scp form before path form)
        if ':' in url:
            rest = url.split(':', 1)[1]
        elif '/' in url:
            rest = url.split('/', 1)[1]
        else:
            return False

        parts = rest.split('/')
        if len(parts) < 2:
            return False
        return self._same_identity(parts[0], parts[1])
