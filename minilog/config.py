from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
import warnings

from .constants import Defaults

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})

KNOWN_KEYS: tuple[str, ...] = ("prefix", "timestamp", "level", "icons")


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    prefix: str = Defaults.PREFIX
    timestamp: bool = Defaults.TIMESTAMP
    level: str = Defaults.LEVEL
    icons: bool = Defaults.ICONS

    def merged(self, overrides: Mapping[str, object] | None = None) -> LoggerConfig:
        """Return a copy with every non-None recognized override applied.

        Args:
            overrides: Mapping of configuration keys to new values

        Returns:
            A new LoggerConfig; ``self`` is left untouched
        """
        if not overrides:
            return self
        return LoggerConfig.from_mapping(overrides, base=self)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, object], base: LoggerConfig | None = None
    ) -> LoggerConfig:
        config = base if base is not None else cls()
        unknown = sorted(str(key) for key in data if key not in KNOWN_KEYS)
        if unknown:
            warnings.warn(
                f"Ignoring unknown logger options: {', '.join(unknown)}",
                stacklevel=3,
            )
        changes: dict[str, object] = {}
        if (value := data.get("prefix")) is not None:
            changes["prefix"] = str(value)
        if (value := data.get("timestamp")) is not None:
            changes["timestamp"] = _coerce_bool(value, key="timestamp")
        if (value := data.get("level")) is not None:
            changes["level"] = _coerce_level(value)
        if (value := data.get("icons")) is not None:
            changes["icons"] = _coerce_bool(value, key="icons")
        if not changes:
            return config
        return replace(config, **changes)


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_STRINGS:
            return True
        if cleaned in _FALSE_STRINGS:
            return False
        raise ValueError(f"{key} must be a boolean string, got {value!r}")
    raise ValueError(f"{key} must be bool-like, got {type(value).__name__}")


def _coerce_level(value: object) -> str:
    # Accepted verbatim; only Logger.set_level validates.
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
