"""Conversion of arbitrary log arguments into message text.

Strings pass through untouched. Everything else goes through an ordered set
of type checks (exceptions, mappings, sets, patterns, datetimes, big
integers) before falling back to indented JSON. JSON output is guarded
against reference cycles: a container reached twice in the same pass is
replaced by ``[Circular]``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from collections.abc import Set as AbstractSet
import dataclasses
from datetime import UTC, date, datetime, time
from enum import Enum
import json
import math
import numbers
import re
import traceback
from typing import Any, Final

from .constants import Json, Markers

__all__ = [
    "UNDEFINED",
    "BigInt",
    "format_args",
    "format_datetime",
    "format_pattern",
    "safe_stringify",
]

_PATTERN_FLAGS: tuple[tuple[int, str], ...] = (
    (re.ASCII, "a"),
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


class BigInt(int):
    """An ``int`` that renders in big-integer notation, e.g. ``123n``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{int(self)}{Markers.BIGINT_SUFFIX}"

    __str__ = __repr__


class _Undefined:
    __slots__ = ()

    def __repr__(self) -> str:
        return Markers.UNDEFINED

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


def format_args(args: Iterable[object]) -> str:
    return " ".join(safe_stringify(arg) for arg in args)


def safe_stringify(value: object) -> str:
    """Convert a single log argument to text.

    Never raises: if conversion fails, the plain ``str()`` of the value is
    returned instead.

    Args:
        value: Any object passed to an emit call

    Returns:
        The text placed in the message segment
    """
    try:
        return _stringify(value)
    except Exception:
        return _plain_text(value)


def format_datetime(value: datetime) -> str:
    if value.utcoffset() is None:
        return value.isoformat()
    utc_value = value.astimezone(UTC).replace(tzinfo=None)
    return f"{utc_value.isoformat(timespec='milliseconds')}Z"


def format_pattern(pattern: re.Pattern[Any]) -> str:
    source = pattern.pattern
    if isinstance(source, bytes):
        source = source.decode("latin-1")
    flags = "".join(letter for flag, letter in _PATTERN_FLAGS if pattern.flags & flag)
    return f"/{source}/{flags}"


def _stringify(value: object) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return Markers.NULL
    if value is UNDEFINED:
        return Markers.UNDEFINED
    if isinstance(value, BigInt):
        return repr(value)
    if isinstance(value, BaseException):
        return _dump(_to_jsonable(value, set()))
    if isinstance(value, re.Pattern):
        return format_pattern(value)
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, Mapping) and type(value) is not dict:
        return f"Map({len(value)}) {_dump(_to_jsonable(value, set()))}"
    if isinstance(value, AbstractSet):
        return f"Set({len(value)}) {_dump(_to_jsonable(value, set()))}"
    if isinstance(value, (Enum, numbers.Number)):
        return str(value)
    return _dump(_to_jsonable(value, set()))


def _to_jsonable(value: object, seen: set[int]) -> object:
    if value is None or isinstance(value, (str, bool)):
        return value
    if value is UNDEFINED:
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return _to_jsonable(value.value, seen)
    if isinstance(value, re.Pattern):
        return format_pattern(value)

    if id(value) in seen:
        return Markers.CIRCULAR
    seen.add(id(value))

    if isinstance(value, BaseException):
        return _error_fields(value, seen)
    if isinstance(value, Mapping):
        return {
            _key_text(key): _to_jsonable(item, seen) for key, item in value.items()
        }
    if isinstance(value, (list, tuple, AbstractSet)):
        return [_to_jsonable(item, seen) for item in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _to_jsonable(getattr(value, field.name), seen)
            for field in dataclasses.fields(value)
        }
    if not isinstance(value, type) and hasattr(value, "__dict__"):
        return {
            _key_text(key): _to_jsonable(item, seen)
            for key, item in vars(value).items()
            if not (isinstance(key, str) and key.startswith("_"))
        }
    return str(value)


def _error_fields(error: BaseException, seen: set[int]) -> dict[str, object]:
    fields: dict[str, object] = {
        "name": type(error).__name__,
        "message": str(error),
    }
    if error.__traceback__ is not None:
        fields["stack"] = "".join(traceback.format_exception(error)).rstrip()
    for key, item in vars(error).items():
        if key.startswith("__"):
            continue
        fields[key] = _to_jsonable(item, seen)
    return fields


def _key_text(key: object) -> str:
    if isinstance(key, str):
        return key
    return safe_stringify(key)


def _dump(value: object) -> str:
    return json.dumps(value, indent=Json.INDENT, ensure_ascii=False)


def _plain_text(value: object) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)
