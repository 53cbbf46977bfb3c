"""minilog package.

A small colorful console logger. Each call renders one line with an optional
icon, timestamp and prefix, a colored level tag, and the message arguments.
Non-string arguments are serialized to readable text.

Features:
- Level filtering (debug < info < warn < error = success)
- Child loggers that inherit the current configuration
- Circular-reference-safe JSON for objects
- Readable output for exceptions, mappings, sets, datetimes and patterns
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("minilog")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from minilog.config import LoggerConfig
from minilog.exceptions import InvalidLevelError, MinilogError
from minilog.levels import LogLevel
from minilog.logger import Logger, create_logger, get_logger, set_logger
from minilog.ports import LoggerPort
from minilog.serialization import UNDEFINED, BigInt, format_args, safe_stringify

create = create_logger


def debug(*args: object) -> None:
    get_logger().debug(*args)


def info(*args: object) -> None:
    get_logger().info(*args)


def warn(*args: object) -> None:
    get_logger().warn(*args)


def warning(*args: object) -> None:
    get_logger().warning(*args)


def error(*args: object) -> None:
    get_logger().error(*args)


def success(*args: object) -> None:
    get_logger().success(*args)


def set_level(level: str) -> None:
    get_logger().set_level(level)


def get_level() -> str:
    return get_logger().get_level()


__all__ = [
    "__version__",
    # Factory and default instance
    "create",
    "create_logger",
    "get_logger",
    "set_logger",
    # Default-instance shortcuts
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "success",
    "set_level",
    "get_level",
    # Types
    "Logger",
    "LoggerConfig",
    "LoggerPort",
    "LogLevel",
    # Errors
    "MinilogError",
    "InvalidLevelError",
    # Serialization
    "UNDEFINED",
    "BigInt",
    "format_args",
    "safe_stringify",
]
