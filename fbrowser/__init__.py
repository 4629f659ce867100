"""fbrowser: directory listing model for file browser views."""

__version__ = "0.1.0"
