from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .config import LoggerConfig


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def debug(self, *args: object) -> None: ...

    def info(self, *args: object) -> None: ...

    def warn(self, *args: object) -> None: ...

    def warning(self, *args: object) -> None: ...

    def error(self, *args: object) -> None: ...

    def success(self, *args: object) -> None: ...

    def create(
        self,
        options: LoggerConfig | Mapping[str, object] | None = None,
        **overrides: object,
    ) -> LoggerPort: ...

    def set_level(self, level: str) -> None: ...

    def get_level(self) -> str: ...
