"""Severity levels and their filtering priorities.

``ERROR`` and ``SUCCESS`` share a priority but stay distinct string-valued
members with their own colors, icons and streams.
"""

from __future__ import annotations

from enum import StrEnum

from .exceptions import InvalidLevelError


class LogLevel(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SUCCESS = "success"

    @property
    def priority(self) -> int:
        return PRIORITIES[self.value]

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: object) -> LogLevel:
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in PRIORITIES:
            return cls(value)
        raise InvalidLevelError(value, cls.names())


PRIORITIES: dict[str, int] = {
    "debug": 0,
    "info": 1,
    "warn": 2,
    "error": 3,
    "success": 3,
}


def priority_of(level: object) -> int | None:
    """Return the filtering priority of ``level``, or None when it is unknown."""
    if isinstance(level, str):
        return PRIORITIES.get(str(level))
    return None


def should_log(level: LogLevel, threshold: object) -> bool:
    threshold_priority = priority_of(threshold)
    if threshold_priority is None:
        return False
    return level.priority >= threshold_priority
