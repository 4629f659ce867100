"""Module: logger_helper.py

Date: 2026-10-18

Helpers for working with loggers in a safe and consistent way.

Directory listings routinely carry arbitrary Unicode file names, so logging
methods are wrapped to fall back to ASCII-safe text when the console encoding
cannot represent a name.

Functions:
    safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
    safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.
    get_logger(name): Returns a logger with UTF-8-safe logging methods.

DevOnlyFilter:
    Hides records logged with extra={"dev_only": True} from the console,
    while still letting file handlers store them.
"""

import logging
import re
from functools import partial

from fbrowser.config import SHOW_DEV_ONLY_IN_CONSOLE

_REPLACEMENTS = {
    "\u2192": "->",  # right arrow
    "\u2014": "--",  # em dash
    "\u2013": "-",  # en dash
    "\u2026": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives.

    Characters without a known replacement are escaped with backslash
    sequences so the message can always be encoded.

    Args:
        text (str): The original text.

    Returns:
        str: ASCII-safe version of the text.

    """
    replaced = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return replaced.encode("ascii", "backslashreplace").decode("ascii")


def safe_log(logger_func, message, *args, **kwargs):
    """Log a message with the given logger method (e.g. logger.info),
    retrying with ASCII-safe text if a UnicodeEncodeError occurs.

    Args:
        logger_func (Callable): A logger method like logger.info or logger.error.
        message (str): The message to log.

    """
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        safe_args = tuple(safe_text(str(arg)) for arg in args)
        logger_func(safe_text(message), *safe_args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replace the logger's logging methods with safe_log-wrapped versions."""
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger that propagates to the root logger for output.

    Args:
        name (str): Optional logger name (defaults to this module)

    Returns:
        logging.Logger: Patched logger instance

    """
    logger = logging.getLogger(name or __name__)
    logger.setLevel(logging.DEBUG)

    # Root logger handles all output (console + files)
    logger.propagate = True
    if logger.handlers:
        logger.handlers.clear()

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Drop dev-only records unless SHOW_DEV_ONLY_IN_CONSOLE is enabled."""

    def filter(self, record: logging.LogRecord) -> bool:
        if SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
