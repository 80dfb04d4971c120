"""Executable lookup over a colon-delimited search path."""

from __future__ import annotations

import logging
import os
from pathlib import Path

SEARCH_PATH_SEPARATOR = ":"

_LOGGER = logging.getLogger(__name__)


class LocatorError(RuntimeError):
    """Raised when an executable lookup cannot be carried out."""


class SearchPathMissingError(LocatorError):
    """Raised when no search path is configured."""


def split_search_path(search_path: str) -> tuple[str, ...]:
    """Split a search path into candidate directories, keeping order.

    Empty components are dropped.

    Args:
        search_path: Colon-delimited directory list.

    Returns:
        Candidate directories in search order.
    """
    return tuple(part for part in search_path.split(SEARCH_PATH_SEPARATOR) if part)


class ExecutableLocator:
    """Find the first directory on a search path holding a named file."""

    def __init__(self, *, skip_unreadable_dirs: bool = True) -> None:
        """Configure how unreadable candidates are treated.

        Args:
            skip_unreadable_dirs: Skip directories that cannot be listed
                instead of failing the lookup.
        """
        self._skip_unreadable_dirs = skip_unreadable_dirs

    def locate(self, name: str, search_path: str | None) -> Path | None:
        """Resolve ``name`` against ``search_path``.

        Args:
            name: Exact file name to look for.
            search_path: Colon-delimited directory list, ``None`` when unset.

        Returns:
            Full path of the first match, or ``None`` when no directory holds it.

        Raises:
            LocatorError: If the name is empty, the search path is missing, or a
                directory cannot be listed while skipping is disabled.
        """
        if not name:
            raise LocatorError("command name is required")
        if search_path is None:
            raise SearchPathMissingError("missing search path")
        for directory in split_search_path(search_path):
            match = self._scan_directory(directory, name)
            if match is not None:
                _LOGGER.debug("Resolved %r to %s", name, match)
                return match
        _LOGGER.debug("No match for %r on search path", name)
        return None

    def _scan_directory(self, directory: str, name: str) -> Path | None:
        """Return the entry named ``name`` in ``directory`` if it is a file.

        Args:
            directory: Candidate directory.
            name: Exact file name to match.

        Returns:
            Matching path, or ``None``.

        Raises:
            LocatorError: If listing fails and skipping is disabled.
        """
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.name == name and entry.is_file():
                        return Path(entry.path)
        except OSError as exc:
            if not self._skip_unreadable_dirs:
                raise LocatorError(
                    f"cannot read directory {directory}: {exc.strerror or exc}"
                ) from exc
            _LOGGER.debug("Skipping unreadable directory %s: %s", directory, exc)
        return None
