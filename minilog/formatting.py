from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from rich.segment import Segment
from rich.text import Text

from .constants import Colors, Icons
from .serialization import format_args, format_datetime

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rich.console import Console, ConsoleOptions, RenderResult

    from .config import LoggerConfig
    from .levels import LogLevel


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """One log line: a styled header and the message body.

    The body is emitted as a raw segment so control characters and tabs
    reach the stream unchanged.
    """

    header: Text
    body: str

    @property
    def plain(self) -> str:
        return f"{self.header.plain} {self.body}"

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        yield from self.header.render(console)
        yield Segment(" ")
        yield Segment(self.body)
        yield Segment.line()


def format_timestamp(moment: datetime | None = None) -> str:
    """Render ``moment`` (default: now) as ISO-8601 UTC with milliseconds.

    Args:
        moment: Timezone-aware datetime; naive values are taken as UTC

    Returns:
        Text such as ``2024-01-15T10:30:00.000Z``
    """
    if moment is None:
        moment = datetime.now(UTC)
    elif moment.utcoffset() is None:
        moment = moment.replace(tzinfo=UTC)
    return format_datetime(moment)


def render_header(
    level: LogLevel, config: LoggerConfig, *, now: datetime | None = None
) -> Text:
    color = Colors.BY_LEVEL[level.value]
    parts: list[Text] = []
    if config.icons:
        parts.append(Text(Icons.BY_LEVEL[level.value]))
    if config.timestamp:
        parts.append(Text(f"[{format_timestamp(now)}]", style=Colors.TIMESTAMP))
    if config.prefix:
        parts.append(Text(config.prefix, style=color))
    parts.append(Text(f"[{level.value.upper()}]", style=color))
    return Text(" ").join(parts)


def render_line(
    level: LogLevel,
    args: Iterable[object],
    config: LoggerConfig,
    *,
    now: datetime | None = None,
) -> RenderedLine:
    return RenderedLine(
        header=render_header(level, config, now=now), body=format_args(args)
    )
