"""Module: home_paths.py

Date: 2026-10-18

Ancestor chain of the user's home directory, used by views to build
breadcrumb navigation. Stateless and independent of the directory model.
"""

import os
from pathlib import Path

from fbrowser.config import FALLBACK_ROOT_PATH
from fbrowser.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _resolve_home_path() -> Path:
    """Return the home directory, or the fallback root if it is unusable."""
    home = os.path.expanduser("~")

    if not home or home == "~" or not os.path.exists(home):
        logger.warning("[HomePaths] Home path empty or nonexistent: %r", home)
        return Path(FALLBACK_ROOT_PATH)

    if not os.access(home, os.R_OK):
        logger.warning("[HomePaths] Home path %s not readable", home)
        return Path(FALLBACK_ROOT_PATH)

    return Path(home)


def paths_to_home() -> list[str]:
    """List the directories from the filesystem root down to the home directory.

    Returns:
        Paths ordered root first, e.g. ["/", "/home", "/home/user"].
        Just the root when the home directory is missing or unreadable.

    """
    home = _resolve_home_path()
    chain = [str(home)] + [str(parent) for parent in home.parents]
    chain.reverse()

    logger.debug("[HomePaths] %s", chain, extra={"dev_only": True})
    return chain
