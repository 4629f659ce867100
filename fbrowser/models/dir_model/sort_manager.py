"""fbrowser.models.dir_model.sort_manager.

Ordering policy for directory snapshots.

Directories come before files. Within the same kind, names are compared
with the user's collation (locale.strxfrm); equal collation keys fall back to
the raw name so that the order stays strict.

Date: 2026-10-18
"""

import locale
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fbrowser.models.dir_entry import DirEntry

from fbrowser.config import USE_LOCALE_COLLATION
from fbrowser.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# Global locale setup flag to avoid repeated initialization
_collation_setup_attempted = False


def _ensure_collation_setup() -> None:
    """Adopt the user's LC_COLLATE once per process."""
    global _collation_setup_attempted

    if _collation_setup_attempted:
        return
    _collation_setup_attempted = True

    try:
        locale.setlocale(locale.LC_COLLATE, "")
        logger.debug(
            "[SortManager] Collation locale: %s",
            locale.setlocale(locale.LC_COLLATE),
            extra={"dev_only": True},
        )
    except locale.Error as e:
        logger.warning("[SortManager] Failed to set collation locale: %s, using default", e)


class SortManager:
    """Sorts directory entries for display.

    Responsibilities:
        - Put directories before files
        - Order same-kind entries by locale-aware name comparison
    """

    def __init__(self, use_locale: bool | None = None) -> None:
        """Initialize the SortManager.

        Args:
            use_locale: Use locale collation for names. None = use config.

        """
        self.use_locale = USE_LOCALE_COLLATION if use_locale is None else use_locale
        if self.use_locale:
            _ensure_collation_setup()

    def name_key(self, name: str) -> str:
        """Collation key for a name."""
        if not self.use_locale:
            return name
        try:
            return locale.strxfrm(name)
        except ValueError:
            # embedded NUL or unencodable name
            return name

    def sort_key(self, entry: "DirEntry") -> tuple[bool, str, str]:
        return (not entry.is_dir, self.name_key(entry.name), entry.name)

    def sort_entries(self, entries: list["DirEntry"]) -> list["DirEntry"]:
        """Return a new list with entries in display order.

        Args:
            entries: Unsorted entries

        Returns:
            Sorted list of DirEntry objects

        """
        return sorted(entries, key=self.sort_key)
