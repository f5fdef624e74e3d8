"""Logging collaborator for rolegraph.

Exports:
    - Logger / DefaultLogger: sink interface and stdlib-backed implementation
    - set_logger / get_logger: process-wide logger slot
    - log_print / log_printf: write through the process-wide logger
    - add_custom_log_level: register extra levels such as ROLES
"""

from .custom_levels import (
    ROLES_LEVEL_NUMBER,
    add_custom_log_level,
    get_custom_levels,
    is_custom_level,
)
from .log import get_logger, log_print, log_printf, set_logger
from .logger import DefaultLogger, Logger

__all__ = [
    "Logger",
    "DefaultLogger",
    "set_logger",
    "get_logger",
    "log_print",
    "log_printf",
    "add_custom_log_level",
    "get_custom_levels",
    "is_custom_level",
    "ROLES_LEVEL_NUMBER",
]
