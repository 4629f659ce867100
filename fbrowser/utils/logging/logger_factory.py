"""Module: logger_factory.py

Date: 2026-10-18

Logger factory with caching. Keeps one patched logger per module name and
guards the cache with a lock.
"""

import logging
import sys
import threading

from fbrowser.utils.logging.logger_helper import get_logger


def _caller_module_name(depth: int) -> str:
    """Module name of the frame depth levels above the caller."""
    frame = sys._getframe(depth + 1)
    return frame.f_globals.get("__name__", "unknown")


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name instead of patching
    a new one on every lookup.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance

        """
        if name is None:
            name = _caller_module_name(1)

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)

                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)

                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers, current and future."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_logger_count(cls) -> int:
        return len(cls._loggers)

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all cached loggers and the global level."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None

    @classmethod
    def get_cached_names(cls) -> list[str]:
        return list(cls._loggers.keys())


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting a cached logger.

    Args:
        name (str): Logger name, the calling module's name if None

    Returns:
        logging.Logger: Cached logger instance

    """
    if name is None:
        name = _caller_module_name(1)
    return LoggerFactory.get_logger(name)
