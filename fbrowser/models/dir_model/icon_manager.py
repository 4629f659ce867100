"""fbrowser.models.dir_model.icon_manager.

Icon resource identifiers for directory entries.

Image files use themselves as icon (a local file URL); everything else gets
one of two symbolic theme identifiers, which the presentation layer resolves.

Date: 2026-10-18
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fbrowser.models.dir_entry import DirEntry

from fbrowser.config import IMAGE_ICON_SUFFIXES, THEME_ICON_DIRECTORY, THEME_ICON_FILE
from fbrowser.core.pyqt_imports import QUrl


class IconManager:
    """Maps entries to their iconSource value."""

    def __init__(
        self,
        image_suffixes: tuple[str, ...] = IMAGE_ICON_SUFFIXES,
        directory_icon: str = THEME_ICON_DIRECTORY,
        file_icon: str = THEME_ICON_FILE,
    ) -> None:
        self.image_suffixes = tuple(image_suffixes)
        self.directory_icon = directory_icon
        self.file_icon = file_icon

    def is_image_name(self, name: str) -> bool:
        # Case-sensitive: "photo.JPG" gets the generic file icon
        return name.endswith(self.image_suffixes)

    def icon_source(self, entry: "DirEntry") -> QUrl | str:
        """Return the icon identifier for an entry.

        Args:
            entry: Entry to get the icon for

        Returns:
            QUrl for image files, otherwise the directory or file theme id

        """
        if self.is_image_name(entry.name):
            return QUrl.fromLocalFile(entry.path)
        if entry.is_dir:
            return self.directory_icon
        return self.file_icon
