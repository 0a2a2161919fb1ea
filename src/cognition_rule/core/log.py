"""
Decision Logger

Leveled pass-through logging for the decision client.

A single threshold decides which calls are emitted; everything that passes
is forwarded to the standard library logger ``cognition`` so hosts keep
control of handlers and formatting.

Severity order
--------------
NONE (0) < ERROR (1) < WARN (2) < INFO (3) < DEBUG (4)

A call is a no-op whenever its severity is greater than the configured
threshold. NONE therefore suppresses everything.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Optional, Union

SDK_NAME = "Cognition"

_stdlib_logger = logging.getLogger("cognition")


class LogLevel(IntEnum):
    """Client log thresholds, ordered by verbosity."""

    NONE = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4

    @classmethod
    def parse(cls, value: Union["LogLevel", int, str, None]) -> "LogLevel":
        """
        Coerce a configuration value into a LogLevel.

        Accepts LogLevel members, their integer values, or names in any case
        ("WARNING" is accepted as an alias of WARN). None maps to NONE.

        Raises
        ------
        ValueError
            If the value does not name a known level.
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)

        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(
                f"Unknown log level '{value}'; expected one of "
                f"{', '.join(level.name for level in cls)}"
            ) from None


class DecisionLogger:
    """
    Threshold-gated logger used by DecisionClient.

    Holds no state beyond its threshold and the stdlib logger it forwards to.
    """

    def __init__(
        self,
        level: Union[LogLevel, int, str, None] = LogLevel.NONE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.level = LogLevel.parse(level)
        self._logger = logger or _stdlib_logger

    def is_enabled(self, severity: LogLevel) -> bool:
        return self.level >= severity

    def debug(self, message: Any, *args: Any) -> None:
        if self.is_enabled(LogLevel.DEBUG):
            self._logger.debug(f"{SDK_NAME} DEBUG: {message}", *args)

    def info(self, message: Any, *args: Any) -> None:
        if self.is_enabled(LogLevel.INFO):
            self._logger.info(f"{SDK_NAME} INFO: {message}", *args)

    def warn(self, message: Any, *args: Any) -> None:
        if self.is_enabled(LogLevel.WARN):
            self._logger.warning(f"{SDK_NAME} WARN: {message}", *args)

    # stdlib spelling, so a DecisionLogger can stand in where logging.Logger is expected
    warning = warn

    def error(self, message: Any, *args: Any) -> None:
        if self.is_enabled(LogLevel.ERROR):
            self._logger.error(f"{SDK_NAME} ERROR: {message}", *args)
