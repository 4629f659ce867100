"""Module: dir_entry.py

Date: 2026-10-18

Dataclass representation of one directory member as shown by the browser.
Entries are snapshots: they are built during a directory scan and are not
updated afterwards.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime

from fbrowser.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_EPOCH = datetime.fromtimestamp(0)


@dataclass(slots=True, frozen=True)
class DirEntry:
    """One entry of a directory snapshot.

    Attributes:
        name: Base name, never contains a path separator
        path: Owning directory path joined with name
        is_dir: True for directories (symlinks are followed)
        size: st_size in bytes; inode size for directories
        created: Birth time where available, otherwise st_ctime
        modified: Last modification time

    """

    name: str
    path: str
    is_dir: bool
    size: int = 0
    created: datetime = _EPOCH
    modified: datetime = _EPOCH

    @property
    def is_file(self) -> bool:
        return not self.is_dir

    @classmethod
    def from_scandir(cls, directory: str, entry: os.DirEntry) -> "DirEntry":
        """Create a DirEntry from an os.scandir() result inside directory.

        An entry that cannot be stat-ed (dangling symlink, race with a
        delete) is still returned, as a non-directory with size 0 and
        epoch timestamps.
        """
        path = os.path.join(directory, entry.name)
        try:
            st = entry.stat()
        except OSError as e:
            logger.debug(
                "[DirEntry] stat failed for %s: %s", path, e, extra={"dev_only": True}
            )
            return cls(name=entry.name, path=path, is_dir=False)
        return cls._from_stat(entry.name, path, st)

    @classmethod
    def _from_stat(cls, name: str, path: str, st: os.stat_result) -> "DirEntry":
        created_ts = getattr(st, "st_birthtime", None)
        if created_ts is None:
            created_ts = st.st_ctime

        return cls(
            name=name,
            path=path,
            is_dir=stat.S_ISDIR(st.st_mode),
            size=st.st_size,
            created=datetime.fromtimestamp(created_ts),
            modified=datetime.fromtimestamp(st.st_mtime),
        )
