"""Filesystem access used by the binary locator.

The locator never touches the disk directly. It goes through a
``FilesystemProbe`` so tests can describe a directory tree in memory.
"""

import logging
import os
from typing import Protocol

logger = logging.getLogger(__name__)


class FilesystemProbe(Protocol):
    """The two filesystem questions the locator asks."""

    def is_executable_file(self, path: str) -> bool:
        """Return True if ``path`` is a regular file the current user may execute."""
        ...

    def list_directory(self, path: str) -> list[str]:
        """Return the entry names in ``path``, or an empty list if it cannot be read."""
        ...


class OSFilesystemProbe:
    """FilesystemProbe backed by the real filesystem."""

    def is_executable_file(self, path: str) -> bool:
        """Check the path is a file with the execute bit available to us."""
        return os.path.isfile(path) and os.access(path, os.X_OK)

    def list_directory(self, path: str) -> list[str]:
        """List a directory, treating any OS error as an empty directory."""
        try:
            return os.listdir(path)
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return []
