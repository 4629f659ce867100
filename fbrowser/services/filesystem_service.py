"""Filesystem operations service.

Date: 2026-10-18

Qt-free filesystem primitives used by the directory model: listing a
directory, deleting a file and renaming files or directories. Every OSError,
and the TypeError or ValueError raised for an unusable path, is caught here
and turned into an empty listing or a failed OperationResult, so callers
never see filesystem exceptions.

Usage:
    from fbrowser.services.filesystem_service import FilesystemService

    service = FilesystemService()
    entries = service.scan_directory("/home/user")
    result = service.rename_file("/home/user/a.txt", "/home/user/b.txt")
    if not result:
        print(result.error)
"""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass

from fbrowser.config import HIDDEN_NAME_PREFIX
from fbrowser.models.dir_entry import DirEntry
from fbrowser.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# Raised for unusable paths: OS failures, non-string values, embedded NUL bytes
_PATH_ERRORS = (OSError, TypeError, ValueError)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a single filesystem mutation.

    Truthy when the operation succeeded. On failure, error carries the OS
    message and code its errno when the OS provided one.
    """

    success: bool
    error: str | None = None
    code: int | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls) -> OperationResult:
        return cls(True)

    @classmethod
    def from_exception(cls, exc: Exception) -> OperationResult:
        """Failed result from an OSError, or from the TypeError/ValueError
        raised for paths that are not strings or contain a NUL byte."""
        if isinstance(exc, OSError):
            return cls(False, exc.strerror or str(exc), exc.errno)
        return cls(False, str(exc))


class FilesystemService:
    """Filesystem operations service.

    This is a Qt-free service that can be tested in isolation.
    """

    def __init__(self, hidden_prefix: str = HIDDEN_NAME_PREFIX) -> None:
        """Initialize the filesystem service.

        Args:
            hidden_prefix: Entries whose name starts with this are skipped.

        """
        self._hidden_prefix = hidden_prefix

    def is_hidden(self, name: str) -> bool:
        return bool(self._hidden_prefix) and name.startswith(self._hidden_prefix)

    def scan_directory(self, path: str) -> list[DirEntry]:
        """List the visible immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Unsorted list of DirEntry objects. Empty if the directory does
            not exist or cannot be read.

        """
        entries: list[DirEntry] = []
        try:
            with os.scandir(path) as it:
                for child in it:
                    if self.is_hidden(child.name):
                        continue
                    entries.append(DirEntry.from_scandir(path, child))
        except _PATH_ERRORS as e:
            logger.warning("[FilesystemService] Cannot list %r: %s", path, e)
            return []
        return entries

    def remove_file(self, path: str) -> OperationResult:
        """Delete a single file.

        Directories are refused, never removed recursively.

        Args:
            path: File to delete.

        Returns:
            OperationResult, truthy on success.

        """
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), path)
            os.remove(path)
        except _PATH_ERRORS as e:
            logger.warning("[FilesystemService] Failed to remove %s: %s", path, e)
            return OperationResult.from_exception(e)

        logger.debug("[FilesystemService] Removed %s", path)
        return OperationResult.ok()

    def rename_file(self, source: str, target: str) -> OperationResult:
        """Rename a file, refusing to overwrite an existing target.

        Args:
            source: Current file path.
            target: New file path.

        Returns:
            OperationResult, truthy on success.

        """
        try:
            if os.path.lexists(target):
                raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), target)
            os.rename(source, target)
        except _PATH_ERRORS as e:
            logger.warning(
                "[FilesystemService] Failed to rename %s to %s (errno %s): %s",
                source,
                target,
                getattr(e, "errno", None),
                getattr(e, "strerror", None) or e,
            )
            return OperationResult.from_exception(e)

        logger.debug("[FilesystemService] Renamed %s -> %s", source, target)
        return OperationResult.ok()

    def rename_directory(self, source: str, target: str) -> OperationResult:
        """Rename a directory with a plain os.rename().

        The OS decides what happens when target exists (on POSIX an empty
        target directory is replaced).

        Args:
            source: Current directory path.
            target: New directory path.

        Returns:
            OperationResult, truthy on success.

        """
        try:
            os.rename(source, target)
        except _PATH_ERRORS as e:
            logger.warning(
                "[FilesystemService] Failed to rename directory %s to %s: %s",
                source,
                target,
                getattr(e, "strerror", None) or e,
            )
            return OperationResult.from_exception(e)

        logger.debug("[FilesystemService] Renamed directory %s -> %s", source, target)
        return OperationResult.ok()
