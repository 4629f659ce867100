"""Filesystem helpers: size formatting and the home directory chain."""
