"""fbrowser.models.dir_model.data_provider

Field projection for the directory model.

The field names below are the data contract with the views (QML role names
and fieldValue() keys); renaming one breaks every consumer. Each field is
also a Qt item role, numbered from Qt.UserRole in declaration order.

Date: 2026-10-18
"""

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fbrowser.models.dir_entry import DirEntry
    from fbrowser.models.dir_model.icon_manager import IconManager

from fbrowser.core.pyqt_imports import QModelIndex, Qt
from fbrowser.utils.filesystem.file_size_formatter import format_entry_size
from fbrowser.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class Field(Enum):
    """Fields exposed for every entry, valued by their wire name."""

    FILE_NAME = "fileName"
    CREATION_DATE = "creationDate"
    MODIFIED_DATE = "modifiedDate"
    FILE_SIZE = "fileSize"
    ICON_SOURCE = "iconSource"
    FILE_PATH = "filePath"
    IS_DIR = "isDir"
    IS_FILE = "isFile"


FieldAccessor = Callable[["DataProvider", "DirEntry"], Any]

FIELD_TABLE: tuple[tuple[Field, FieldAccessor], ...] = (
    (Field.FILE_NAME, lambda provider, entry: entry.name),
    (Field.CREATION_DATE, lambda provider, entry: entry.created),
    (Field.MODIFIED_DATE, lambda provider, entry: entry.modified),
    (Field.FILE_SIZE, lambda provider, entry: format_entry_size(entry.size)),
    (Field.ICON_SOURCE, lambda provider, entry: provider.icon_manager.icon_source(entry)),
    (Field.FILE_PATH, lambda provider, entry: entry.path),
    (Field.IS_DIR, lambda provider, entry: entry.is_dir),
    (Field.IS_FILE, lambda provider, entry: entry.is_file),
)


def _check_field_table() -> None:
    """Fail at import if FIELD_TABLE does not cover every Field exactly once."""
    listed = [field for field, _ in FIELD_TABLE]
    if len(listed) != len(set(listed)) or set(listed) != set(Field):
        missing = sorted(f.value for f in set(Field) - set(listed))
        raise RuntimeError(f"Field table incomplete or duplicated (missing: {missing})")


_check_field_table()

ROLE_BASE = int(Qt.UserRole)
FIELD_ACCESSORS: dict[Field, FieldAccessor] = dict(FIELD_TABLE)
FIELD_BY_NAME: dict[str, Field] = {field.value: field for field in Field}
FIELD_BY_ROLE: dict[int, Field] = {ROLE_BASE + i: field for i, (field, _) in enumerate(FIELD_TABLE)}
ROLE_BY_FIELD: dict[Field, int] = {field: role for role, field in FIELD_BY_ROLE.items()}


class DataProvider:
    """Provides Qt model data for the directory model.

    Responsibilities:
        - Bounds-checked row access (stale rows degrade to None)
        - Project one named field of an entry
        - Map Qt item roles to fields and expose role names
    """

    def __init__(self, model, icon_manager: "IconManager"):
        """Initialize the DataProvider.

        Args:
            model: Reference to DirModel (for the entries list)
            icon_manager: Reference to IconManager (for iconSource)

        """
        self.model = model
        self.icon_manager = icon_manager

    def row_count(self) -> int:
        return len(self.model._entries)

    def entry(self, row: int) -> "DirEntry | None":
        """Return the entry at row, or None if row is out of range.

        Out-of-range access is expected when a view races a refresh, so it
        only logs a warning.
        """
        entries = self.model._entries
        if not isinstance(row, int) or row < 0 or row >= len(entries):
            logger.warning(
                "[DataProvider] Out of range row %r (row count %d)", row, len(entries)
            )
            return None
        return entries[row]

    def project(self, entry: "DirEntry", field: Field) -> Any:
        return FIELD_ACCESSORS[field](self, entry)

    def field_value(self, row: int, field_name: str) -> Any:
        """Project one named field of the entry at row.

        Args:
            row: Row index in the current snapshot
            field_name: One of the Field wire names

        Returns:
            The field value, or None for an unknown field or invalid row

        """
        field = FIELD_BY_NAME.get(field_name)
        if field is None:
            logger.debug(
                "[DataProvider] Unknown field name %r", field_name, extra={"dev_only": True}
            )
            return None

        entry = self.entry(row)
        if entry is None:
            return None
        return self.project(entry, field)

    def data(self, index: QModelIndex, role: int) -> Any:
        """Qt data() for the given index and role.

        Qt.DisplayRole shows the file name. Other standard Qt roles have no
        value; an unknown custom role is logged.
        """
        if not index.isValid() or index.column() != 0:
            return None

        if role == Qt.DisplayRole:
            field = Field.FILE_NAME
        else:
            field = FIELD_BY_ROLE.get(role)
            if field is None:
                if role >= ROLE_BASE:
                    logger.warning("[DataProvider] Got an out of range role: %d", role)
                return None

        entry = self.entry(index.row())
        if entry is None:
            return None
        return self.project(entry, field)

    def role_names(self) -> dict[int, bytes]:
        return {role: field.value.encode("utf-8") for role, field in FIELD_BY_ROLE.items()}
