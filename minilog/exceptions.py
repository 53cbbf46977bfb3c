from collections.abc import Iterable


class MinilogError(Exception):
    pass


class InvalidLevelError(MinilogError, ValueError):
    def __init__(self, level: object, valid_levels: Iterable[str]) -> None:
        self.level = level
        self.valid_levels = tuple(valid_levels)
        super().__init__(
            f"Invalid log level: {level!r}. "
            f"Valid levels: {', '.join(self.valid_levels)}"
        )
