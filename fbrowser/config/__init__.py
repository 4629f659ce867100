"""Module: fbrowser.config

Date: 2026-10-18

Configuration package for fbrowser.

This package organizes configuration into logical modules:
- app: Application info, logging
- browser: Directory listing rules, icon identifiers, collation

All settings are re-exported from this module:
    from fbrowser.config import APP_NAME, THEME_ICON_DIRECTORY
"""

from fbrowser.config.app import *  # noqa: F401, F403
from fbrowser.config.browser import *  # noqa: F401, F403
