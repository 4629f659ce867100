"""Module: logger_setup.py

Date: 2026-10-18

ConfigureLogger sets up application-wide logging on the root logger:
INFO and higher to the console, ERROR and higher to <log_name>_<timestamp>.log,
and optionally DEBUG and higher to <log_name>_debug_<timestamp>.log.
Defaults come from fbrowser.config and can be overridden per call.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from fbrowser.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from fbrowser.utils.logging.logger_file_helper import add_file_handler
from fbrowser.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Configures application-wide logging."""

    def __init__(
        self,
        log_name: str = "fbrowser",
        log_dir: str = "logs",
        console_enabled: bool = LOG_TO_CONSOLE,
        console_level: int | None = None,
        file_enabled: bool = LOG_TO_FILE,
        file_level: int | None = None,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
        max_bytes: int = LOG_FILE_MAX_BYTES,
        backup_count: int = LOG_FILE_BACKUP_COUNT,
    ):
        """Initialize and configure the root logger.

        Handlers are only installed if the root logger has none yet, so
        creating a second ConfigureLogger is harmless.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            console_enabled (bool): Log to stdout.
            console_level (int): Console level, LOG_CONSOLE_LEVEL if None.
            file_enabled (bool): Log to a rotating file.
            file_level (int): File level, LOG_FILE_LEVEL if None.
            debug_enabled (bool): Add a DEBUG-level rotating file.
            max_bytes (int): Max size in bytes for the rotating file.
            backup_count (int): Number of backup log files to keep.

        """
        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO)
        if file_level is None:
            file_level = getattr(logging, LOG_FILE_LEVEL, logging.ERROR)

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.log_file_path: str | None = None
        self.debug_file_path: str | None = None

        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(console_level)

        if file_enabled:
            self.log_file_path = os.path.join(log_dir, f"{log_name}_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.log_file_path,
                level=file_level,
                max_bytes=max_bytes,
                backup_count=backup_count,
            )

        if debug_enabled:
            self.debug_file_path = os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log")
            add_file_handler(
                logger=self.logger,
                log_path=self.debug_file_path,
                level=logging.DEBUG,
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int) -> None:
        """Set up a console handler with UTF-8 output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
