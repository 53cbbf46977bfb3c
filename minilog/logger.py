from __future__ import annotations

from dataclasses import asdict, replace
from typing import TYPE_CHECKING, override

from rich.console import Console

from .config import LoggerConfig
from .constants import Streams
from .formatting import render_line
from .levels import LogLevel, should_log
from .ports import LoggerPort

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "Logger",
    "create_logger",
    "get_logger",
    "set_logger",
]


class Logger(LoggerPort):
    pass

    def __init__(
        self,
        config: LoggerConfig | None = None,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        super().__init__()
        self._config = config or LoggerConfig()
        self._level: str = self._config.level
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    @property
    def config(self) -> LoggerConfig:
        return replace(self._config, level=self._level)

    @property
    def level(self) -> str:
        return self._level

    @override
    def debug(self, *args: object) -> None:
        self._log(LogLevel.DEBUG, args)

    @override
    def info(self, *args: object) -> None:
        self._log(LogLevel.INFO, args)

    @override
    def warn(self, *args: object) -> None:
        self._log(LogLevel.WARN, args)

    @override
    def warning(self, *args: object) -> None:
        self._log(LogLevel.WARN, args)

    @override
    def error(self, *args: object) -> None:
        self._log(LogLevel.ERROR, args)

    @override
    def success(self, *args: object) -> None:
        self._log(LogLevel.SUCCESS, args)

    @override
    def create(
        self,
        options: LoggerConfig | Mapping[str, object] | None = None,
        *,
        console: Console | None = None,
        error_console: Console | None = None,
        **overrides: object,
    ) -> Logger:
        """Create an independent child logger.

        The child starts from this logger's current configuration, including
        a level changed via ``set_level``. Fields in ``options`` and
        ``overrides`` take precedence. Consoles are shared unless replaced.

        Args:
            options: LoggerConfig or mapping of configuration overrides
            console: Console for standard output
            error_console: Console for warnings and errors
            **overrides: Individual configuration overrides

        Returns:
            The new logger
        """
        return Logger(
            _resolve_config(self.config, options, overrides),
            console=console if console is not None else self.console,
            error_console=(
                error_console if error_console is not None else self.error_console
            ),
        )

    @override
    def set_level(self, level: str) -> None:
        self._level = LogLevel.parse(level).value

    @override
    def get_level(self) -> str:
        return self._level

    def _log(self, level: LogLevel, args: tuple[object, ...]) -> None:
        if not should_log(level, self._level):
            return
        line = render_line(level, args, self._config)
        if level.value in Streams.STDERR_LEVELS:
            self.error_console.print(line, soft_wrap=True)
        else:
            self.console.print(line, soft_wrap=True)


def create_logger(
    options: LoggerConfig | Mapping[str, object] | None = None,
    *,
    console: Console | None = None,
    error_console: Console | None = None,
    **overrides: object,
) -> Logger:
    """Create a new logger.

    Args:
        options: LoggerConfig or mapping with ``prefix``, ``timestamp``,
            ``level`` and ``icons``
        console: Console for standard output
        error_console: Console for warnings and errors
        **overrides: Individual configuration values

    Returns:
        The new logger
    """
    return Logger(
        _resolve_config(LoggerConfig(), options, overrides),
        console=console,
        error_console=error_console,
    )


def _resolve_config(
    base: LoggerConfig,
    options: LoggerConfig | Mapping[str, object] | None,
    overrides: Mapping[str, object],
) -> LoggerConfig:
    config = base
    if isinstance(options, LoggerConfig):
        config = config.merged(asdict(options))
    elif options:
        config = config.merged(options)
    return config.merged(overrides)


# Global logger instance (can be replaced with set_logger)
_default_logger: Logger | None = None


def get_logger() -> Logger:
    """Get the global logger instance.

    Returns:
        The default Logger, built with the default configuration on first use
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = Logger()
    return _default_logger


def set_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use globally
    """
    global _default_logger
    _default_logger = logger
