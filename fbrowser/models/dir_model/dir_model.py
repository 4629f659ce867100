"""fbrowser.models.dir_model.dir_model.

Directory snapshot model for file browser views.

This module provides the DirModel class, a QAbstractListModel holding the
sorted, non-hidden members of one directory. The model delegates to
specialized managers for ordering, field projection, icons and filesystem
mutations.

Listing is synchronous: set_path(), rename() and remove() block the calling
thread until the filesystem calls return.

Date: 2026-10-18
"""

import os
from collections.abc import Iterable
from typing import Any

from fbrowser.core.pyqt_imports import (
    QAbstractListModel,
    QModelIndex,
    Qt,
    pyqtProperty,
    pyqtSignal,
    pyqtSlot,
)
from fbrowser.models.dir_entry import DirEntry
from fbrowser.models.dir_model.data_provider import DataProvider
from fbrowser.models.dir_model.icon_manager import IconManager
from fbrowser.models.dir_model.model_file_operations import FileOperationsManager
from fbrowser.models.dir_model.sort_manager import SortManager
from fbrowser.services.filesystem_service import FilesystemService
from fbrowser.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _normalize_path(path: Any) -> str:
    """Absolute path string for path; "" for None or an empty value."""
    if path is None:
        return ""
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    path = str(path)
    if not path:
        return ""
    return os.path.abspath(path)


class DirModel(QAbstractListModel):
    """List model of one directory's entries.

    Directories are listed before files, names in locale order, hidden
    entries are left out. The snapshot is only re-read by set_path(),
    refresh(), rename() and remove(); between those calls it may be stale.

    This class acts as an orchestrator, delegating to:
    - SortManager: Entry ordering
    - DataProvider: Field projection and Qt roles
    - IconManager: iconSource identifiers
    - FileOperationsManager: remove/rename
    """

    path_changed = pyqtSignal()  # Emitted after every completed set_path()
    operation_failed = pyqtSignal(str, str)  # path, error message

    def __init__(
        self,
        parent=None,
        filesystem: FilesystemService | None = None,
        sort_manager: SortManager | None = None,
        icon_manager: IconManager | None = None,
    ) -> None:
        """Initialize the DirModel.

        Args:
            parent: Qt parent object (optional)
            filesystem: Filesystem service, a default one if None
            sort_manager: Ordering policy, a default one if None
            icon_manager: Icon identifiers, a default one if None

        """
        super().__init__(parent)
        self._path: str = ""
        self._entries: list[DirEntry] = []

        self._filesystem = filesystem or FilesystemService()
        self._sort_manager = sort_manager or SortManager()
        self._icon_manager = icon_manager or IconManager()
        self._data_provider = DataProvider(self, self._icon_manager)
        self._file_ops = FileOperationsManager(self, self._filesystem)

    # ==================== Snapshot ====================

    def get_path(self) -> str:
        return self._path

    def set_path(self, path: Any) -> None:
        """Replace the snapshot with the contents of path.

        The new entry list is built before the model reset starts, so views
        see either the old snapshot or the new one. A missing or unreadable
        directory gives an empty snapshot.

        Args:
            path: Directory to list

        """
        path = _normalize_path(path)
        logger.debug("[DirModel] Changing to %s", path)

        entries = self._sort_manager.sort_entries(self._filesystem.scan_directory(path))

        self.beginResetModel()
        self._path = path
        self._entries = entries
        self.endResetModel()

        logger.debug(
            "[DirModel] Changed successfully; %d entries: %s",
            len(entries),
            [entry.name for entry in entries],
            extra={"dev_only": True},
        )
        self.path_changed.emit()

    path = pyqtProperty(str, fget=get_path, fset=set_path, notify=path_changed)

    @pyqtSlot()
    def refresh(self) -> None:
        """Re-read the current directory."""
        self.set_path(self._path)

    def entries(self) -> list[DirEntry]:
        """Return a copy of the current snapshot's entries."""
        return list(self._entries)

    def row_count(self) -> int:
        return self._data_provider.row_count()

    def entry(self, row: int) -> DirEntry | None:
        """Return the entry at row, or None if row is out of range."""
        return self._data_provider.entry(row)

    def field_value(self, row: int, field_name: str) -> Any:
        """Return one named field of the entry at row, or None."""
        return self._data_provider.field_value(row, field_name)

    @pyqtSlot(int, str, result="QVariant")
    def fieldValue(self, row: int, field_name: str) -> Any:
        return self.field_value(row, field_name)

    # ==================== Qt Model Interface ====================

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        """Return the number of entries (0 for any valid parent)."""
        if parent.isValid():
            return 0
        return self.row_count()

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        """Get data for the given index and role."""
        return self._data_provider.data(index, role)

    def roleNames(self) -> dict[int, Any]:
        """Default Qt role names plus one role per entry field."""
        roles = dict(super().roleNames())
        roles.update(self._data_provider.role_names())
        return roles

    # ==================== File Operations (delegated) ====================

    @pyqtSlot(list)
    def remove(self, paths: Iterable[str]) -> None:
        """Delete the given files, then refresh.

        Every path is attempted once; failures are logged and emitted through
        operation_failed without stopping the batch.
        """
        self._file_ops.remove(paths)

    @pyqtSlot(int, str, result=bool)
    def rename(self, row: int, new_name: str) -> bool:
        """Rename the entry at row within its directory.

        Returns:
            True on success. A failed file rename leaves the snapshot as it
            was; a directory rename always refreshes.

        """
        return self._file_ops.rename(row, new_name)
