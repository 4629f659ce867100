"""fbrowser.models.dir_model package.

Modular implementation of the directory model.

Components:
- DirModel: Main model class (thin orchestrator)
- SortManager: Entry ordering
- DataProvider: Field projection and Qt roles
- IconManager: iconSource identifiers
- FileOperationsManager: remove/rename

Date: 2026-10-18
"""

from fbrowser.models.dir_model.data_provider import DataProvider, Field
from fbrowser.models.dir_model.dir_model import DirModel
from fbrowser.models.dir_model.icon_manager import IconManager
from fbrowser.models.dir_model.model_file_operations import FileOperationsManager
from fbrowser.models.dir_model.sort_manager import SortManager

__all__ = [
    "DirModel",
    "DataProvider",
    "Field",
    "IconManager",
    "FileOperationsManager",
    "SortManager",
]
