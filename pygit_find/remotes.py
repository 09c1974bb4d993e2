"""Concrete GitPython-based remote reader."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path

from git import GitError, InvalidGitRepositoryError, NoSuchPathError, Repo

from pygit_find.errors import RemoteReadError
from pygit_find.models import Remote


class GitPythonRemoteReader:
    """Reads remote names and URLs using GitPython"""

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    def get_remotes(self, repo_path: Path) -> list[Remote]:
        """Return (name, url) for every remote that has a URL, in config order."""
        try:
            with Repo(repo_path) as repo:
                self._logger.debug("Opened repository %s", repo_path)
                remotes = []
                for remote in repo.remotes:
                    url = self._first_url(remote)
                    if url is None:
                        self._logger.debug("Remote %s in %s has no url; skipped", remote.name, repo_path)
                        continue
                    remotes.append(Remote(remote.name, url))
                return remotes
        except (InvalidGitRepositoryError, NoSuchPathError, GitError, OSError,
                configparser.Error, ValueError) as e:
            raise RemoteReadError(repo_path, e) from e

    @staticmethod
    def _first_url(remote) -> str | None:
        """Return the remote's configured url, or None if it has none."""
        reader = remote.config_reader
        if not reader.has_option('url'):
            return None
        return reader.get('url')
