"""Logger interface used by rolegraph to emit role dumps."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Union


class Logger(ABC):
    """Sink for diagnostic text produced by the role manager."""

    @abstractmethod
    def enable_log(self, enable: bool) -> None:
        """Turn output on or off."""

    @abstractmethod
    def is_enabled(self) -> bool:
        """Whether output is on."""

    @abstractmethod
    def write(self, *values: Any) -> None:
        """Write values joined by spaces."""

    @abstractmethod
    def writef(self, fmt: str, *args: Any) -> None:
        """Write a %-style formatted message."""


class DefaultLogger(Logger):
    """Forwards to a standard library logger.

    Args:
        enabled: Whether to emit anything at all
        level: Level name or number records are emitted at
        name: Name of the standard library logger to use
    """

    def __init__(
        self,
        enabled: bool = False,
        level: Union[int, str] = logging.INFO,
        name: str = "rolegraph",
    ) -> None:
        self._enabled = enabled
        self._level = (
            logging.getLevelName(level.upper()) if isinstance(level, str) else level
        )
        if not isinstance(self._level, int):
            raise ValueError(f"Unknown log level: {level}")
        self._logger = logging.getLogger(name)

    @property
    def level(self) -> int:
        return self._level

    def enable_log(self, enable: bool) -> None:
        self._enabled = enable

    def is_enabled(self) -> bool:
        return self._enabled

    def write(self, *values: Any) -> None:
        if self._enabled:
            self._logger.log(self._level, " ".join(str(v) for v in values))

    def writef(self, fmt: str, *args: Any) -> None:
        if self._enabled:
            self._logger.log(self._level, fmt, *args)
