"""Custom log level utilities for rolegraph logging.

This module registers extra log levels with Python's logging system so role
dumps can be filtered separately from ordinary INFO records.
"""

import logging
from typing import Any, Optional, Set

# Registry of custom log levels
_custom_levels: Set[str] = set()


def add_custom_log_level(
    level_name: str, level_number: int, method_name: Optional[str] = None
) -> int:
    """Add a custom log level to Python's logging system.

    Registers ``level_name`` with the logging module and adds a matching
    method to the Logger class. Calling it again with the same name and
    number is a no-op.

    Args:
        level_name: Name of the log level (e.g., "ROLES")
        level_number: Numeric value for the level
        method_name: Optional method name to add to the Logger class.
            Defaults to ``level_name.lower()``

    Returns:
        The level number that was registered

    Raises:
        ValueError: If ``level_name`` is already bound to a different number
    """
    if method_name is None:
        method_name = level_name.lower()

    existing_level = logging.getLevelName(level_name)
    if existing_level != f"Level {level_name}":
        if existing_level == level_number:
            _custom_levels.add(level_name)
            return level_number
        raise ValueError(
            f"Log level '{level_name}' already exists with number {existing_level}"
        )

    logging.addLevelName(level_number, level_name)
    setattr(logging, level_name, level_number)

    def log_for_level(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a message at the custom level."""
        if self.isEnabledFor(level_number):
            self._log(level_number, message, args, **kwargs)

    setattr(logging.getLoggerClass(), method_name, log_for_level)

    _custom_levels.add(level_name)
    return level_number


def get_custom_levels() -> Set[str]:
    """Get all registered custom log levels."""
    return _custom_levels.copy()


def is_custom_level(level_name: str) -> bool:
    """Check if a log level was registered through this module."""
    return level_name in _custom_levels


# ROLES sits between INFO=20 and WARNING=30
ROLES_LEVEL_NUMBER = 25
add_custom_log_level("ROLES", ROLES_LEVEL_NUMBER)


__all__ = [
    "add_custom_log_level",
    "get_custom_levels",
    "is_custom_level",
    "ROLES_LEVEL_NUMBER",
]
