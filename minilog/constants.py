from typing import ClassVar


class Defaults:
    PREFIX = ""
    TIMESTAMP = False
    LEVEL = "debug"
    ICONS = True


class Colors:
    TIMESTAMP = "bright_black"
    BY_LEVEL: ClassVar[dict[str, str]] = {
        "debug": "bright_black",
        "info": "cyan",
        "warn": "yellow",
        "error": "red",
        "success": "green",
    }


class Icons:
    BY_LEVEL: ClassVar[dict[str, str]] = {
        "debug": "🔍",
        "info": "ℹ️",
        "warn": "⚠️",
        "error": "❌",
        "success": "✅",
    }


class Markers:
    NULL = "null"
    UNDEFINED = "undefined"
    CIRCULAR = "[Circular]"
    BIGINT_SUFFIX = "n"


class Json:
    INDENT = 2


class Streams:
    STDERR_LEVELS: ClassVar[frozenset[str]] = frozenset({"warn", "error"})
