"""Process-wide logger slot.

Code that has no logger of its own writes through :func:`log_print`, which
forwards to whatever :class:`Logger` was installed with :func:`set_logger`.
"""

from typing import Any

from .logger import DefaultLogger, Logger

_logger: Logger = DefaultLogger()


def set_logger(logger: Logger) -> None:
    """Install the process-wide logger."""
    global _logger
    _logger = logger


def get_logger() -> Logger:
    """Get the process-wide logger."""
    return _logger


def log_print(*values: Any) -> None:
    """Write values through the process-wide logger."""
    _logger.write(*values)


def log_printf(fmt: str, *args: Any) -> None:
    """Write a formatted message through the process-wide logger."""
    _logger.writef(fmt, *args)
