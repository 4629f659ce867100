"""Module: pyqt_imports.py

Date: 2026-10-18

Centralized PyQt5 imports so models import Qt names from one place.
"""

from PyQt5.QtCore import (
    QAbstractListModel,
    QModelIndex,
    Qt,
    QUrl,
    pyqtProperty,
    pyqtSignal,
    pyqtSlot,
)

__all__ = [
    "QAbstractListModel",
    "QModelIndex",
    "Qt",
    "QUrl",
    "pyqtProperty",
    "pyqtSignal",
    "pyqtSlot",
]
