"""Log levels and structured log entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from mcp_types.protocol import _is_str, _mapping, _optional, _required


class LoggingLevel(str, Enum):
    """Severity of a log message, lowest first."""

    DEBUG = "debug"
    INFO = "info"
    NOTICE = "notice"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    ALERT = "alert"
    EMERGENCY = "emergency"


def _level(data: Mapping, what: str) -> LoggingLevel:
    value = _required(data, "level", _is_str, what)
    try:
        return LoggingLevel(value)
    except ValueError:
        raise ValueError(f"{what}: unknown logging level {value!r}") from None


@dataclass
class LogEntry:
    """A structured log message."""

    level: LoggingLevel
    data: Any
    logger: str | None = None

    def __post_init__(self) -> None:
        self.level = LoggingLevel(self.level)

    @classmethod
    def with_logger(cls, level: LoggingLevel, data: Any, logger: str) -> LogEntry:
        return cls(level, data, logger)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"level": self.level.value, "data": self.data}
        if self.logger is not None:
            out["logger"] = self.logger
        return out

    @classmethod
    def from_dict(cls, data: Any) -> LogEntry:
        what = "log entry"
        data = _mapping(data, what)
        return cls(
            _level(data, what),
            _required(data, "data", lambda _: True, what),
            _optional(data, "logger", _is_str, what),
        )


@dataclass
class SetLoggingLevelRequest:
    """Request to change the logging level."""

    level: LoggingLevel

    def __post_init__(self) -> None:
        self.level = LoggingLevel(self.level)

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level.value}

    @classmethod
    def from_dict(cls, data: Any) -> SetLoggingLevelRequest:
        what = "set logging level request"
        return cls(_level(_mapping(data, what), what))