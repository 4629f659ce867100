"""fbrowser.models.dir_model.model_file_operations.

Mutating operations of the directory model.

Every operation re-reads the directory afterwards instead of editing the
snapshot in place, except a failed file rename, which leaves the snapshot
untouched.

Date: 2026-10-18
"""

import os
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fbrowser.services.filesystem_service import FilesystemService

from fbrowser.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def is_valid_new_name(new_name: str) -> bool:
    """A new name must be a single, non-empty path component."""
    if not isinstance(new_name, str) or not new_name:
        return False
    if new_name in (".", "..") or "\0" in new_name:
        return False
    separators = {os.sep, os.altsep} - {None}
    return not any(sep in new_name for sep in separators)


class FileOperationsManager:
    """Manages remove and rename for the directory model.

    Responsibilities:
        - Delete a batch of files, attempting every path once
        - Rename the file or directory at a row
        - Report failures through the model's operation_failed signal
        - Refresh the model after mutations
    """

    def __init__(self, model, filesystem: "FilesystemService"):
        """Initialize the FileOperationsManager.

        Args:
            model: Reference to DirModel (for entries, refresh and signals)
            filesystem: Service performing the filesystem calls

        """
        self.model = model
        self.filesystem = filesystem

    def remove(self, paths: Iterable[str]) -> list[str]:
        """Delete each path in order, then refresh the model.

        A failure is logged and reported but does not stop the batch.
        Directories are not removed.

        Args:
            paths: Paths of the files to delete

        Returns:
            The paths that could not be deleted

        """
        failed: list[str] = []
        for path in paths:
            result = self.filesystem.remove_file(path)
            if not result:
                logger.warning("[FileOperations] Failed to remove %s: %s", path, result.error)
                failed.append(path)
                self.model.operation_failed.emit(str(path), result.error or "")

        if failed:
            logger.info("[FileOperations] %d path(s) could not be removed", len(failed))

        self.model.refresh()
        return failed

    def rename(self, row: int, new_name: str) -> bool:
        """Rename the entry at row to new_name inside the same directory.

        Args:
            row: Row of the entry in the current snapshot
            new_name: New base name

        Returns:
            True if the rename succeeded

        """
        logger.debug("[FileOperations] Renaming row %r to %r", row, new_name)

        entry = self.model.entry(row)
        if entry is None:
            logger.warning("[FileOperations] Rename rejected, row %r out of bounds", row)
            return False

        if not is_valid_new_name(new_name):
            logger.warning("[FileOperations] Rename rejected, invalid name %r", new_name)
            return False

        target = os.path.join(os.path.dirname(entry.path), new_name)

        if not entry.is_dir:
            result = self.filesystem.rename_file(entry.path, target)
            if not result:
                logger.warning(
                    "[FileOperations] Rename returned error code %s: %s",
                    result.code,
                    result.error,
                )
                self.model.operation_failed.emit(entry.path, result.error or "")
                return False

            self.model.refresh()
            return True

        # Directory renames refresh whatever the outcome
        result = self.filesystem.rename_directory(entry.path, target)
        if not result:
            self.model.operation_failed.emit(entry.path, result.error or "")
        self.model.refresh()
        return result.success
