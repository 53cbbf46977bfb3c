from dataclasses import dataclass
from io import StringIO

import pytest
from rich.console import Console

from minilog import logger as logger_module


@dataclass
class CapturedConsoles:
    out: StringIO
    err: StringIO
    console: Console
    error_console: Console


def make_consoles(*, color: bool = False) -> CapturedConsoles:
    out = StringIO()
    err = StringIO()
    options: dict[str, object] = {"width": 80, "highlight": False}
    if color:
        options.update(force_terminal=True, color_system="standard")
    return CapturedConsoles(
        out=out,
        err=err,
        console=Console(file=out, **options),
        error_console=Console(file=err, **options),
    )


@pytest.fixture(autouse=True)
def _fresh_default_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test its own lazily built default logger.

    Color-forcing variables are cleared so console output depends only on
    the options each test passes to rich.
    """
    for name in ("NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(logger_module, "_default_logger", None)


@pytest.fixture
def consoles() -> CapturedConsoles:
    return make_consoles()


@pytest.fixture
def color_consoles() -> CapturedConsoles:
    return make_consoles(color=True)
