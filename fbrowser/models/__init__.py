"""Data models for fbrowser.

This package contains:
- DirEntry: One member of a listed directory
- DirModel: Qt list model holding the directory snapshot
"""
