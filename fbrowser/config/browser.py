"""Module: fbrowser.config.browser

Date: 2026-10-18

Directory listing configuration: which entries are shown, how names are
ordered and which resource identifiers the views receive for icons.
"""

# =====================================
# LISTING
# =====================================

# Entries whose name starts with this prefix never enter a snapshot
HIDDEN_NAME_PREFIX = "."

# Compare names with the user's collation (LC_COLLATE) instead of code points
USE_LOCALE_COLLATION = True

# =====================================
# ICONS
# =====================================

# Names ending with these suffixes use the file itself as icon (case-sensitive)
IMAGE_ICON_SUFFIXES = (".jpg", ".png")

# Symbolic identifiers, resolved to theme assets by the presentation layer
THEME_ICON_DIRECTORY = "image://theme/icon-m-common-directory"
THEME_ICON_FILE = "image://theme/icon-m-content-document"

# =====================================
# HOME PATH CHAIN
# =====================================

# Used when the home directory is missing or unreadable
FALLBACK_ROOT_PATH = "/"
