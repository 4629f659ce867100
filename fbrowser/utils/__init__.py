"""Utility packages for fbrowser (logging, filesystem helpers)."""
