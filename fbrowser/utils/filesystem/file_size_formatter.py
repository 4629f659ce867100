"""Module: file_size_formatter.py

Date: 2026-10-18

file_size_formatter.py
Compact file size formatting for the directory listing views.

The format is deliberately lossy and is part of the view contract, so it
must stay byte-for-byte stable:
- below 1 KiB: "<bytes> bytes"
- below 1 MiB: "<kib> kb"
- otherwise:   "<mib>mb" (no space)

Each step truncates (integer division); there is no rounding and no
decimal part.
"""

BYTES_PER_KB = 1024


def format_entry_size(size_bytes: int) -> str:
    """Format a byte count the way the directory model exposes it.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string (e.g. "500 bytes", "2 kb", "3mb")

    """
    kb = size_bytes // BYTES_PER_KB
    if kb < 1:
        return f"{size_bytes} bytes"
    if kb < BYTES_PER_KB:
        return f"{kb} kb"
    return f"{kb // BYTES_PER_KB}mb"
