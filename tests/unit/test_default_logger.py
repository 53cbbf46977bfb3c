"""Unit tests for the package-level default logger."""

from io import StringIO

import pytest
from rich.console import Console

import minilog
from minilog.logger import Logger, create_logger, get_logger, set_logger


class TestDefaultLogger:
    """Tests for the lazily built global logger."""

    def test_default_logger_has_all_methods(self):
        for name in (
            "debug",
            "info",
            "warn",
            "warning",
            "error",
            "success",
            "create",
            "set_level",
            "get_level",
        ):
            assert callable(getattr(minilog, name))

    def test_get_logger_is_a_singleton(self):
        first = get_logger()

        assert isinstance(first, Logger)
        assert get_logger() is first

    def test_default_configuration(self):
        assert get_logger().config == minilog.LoggerConfig()
        assert minilog.get_level() == "debug"

    def test_module_functions_write_to_streams(self, capsys):
        minilog.info("to stdout")
        minilog.error("to stderr")

        captured = capsys.readouterr()
        assert "[INFO] to stdout" in captured.out
        assert "[ERROR] to stderr" in captured.err

    def test_module_set_level(self, capsys):
        minilog.set_level("error")

        minilog.warn("dropped")
        minilog.success("kept")

        captured = capsys.readouterr()
        assert minilog.get_level() == "error"
        assert "dropped" not in captured.err
        assert "kept" in captured.out

    def test_module_set_level_invalid(self):
        with pytest.raises(minilog.InvalidLevelError):
            minilog.set_level("loud")

        assert minilog.get_level() == "debug"

    def test_set_logger_replaces_default(self):
        buffer = StringIO()
        custom = create_logger(
            prefix="[Custom]",
            icons=False,
            console=Console(file=buffer, width=80),
            error_console=Console(file=buffer, width=80),
        )

        set_logger(custom)
        minilog.warning("swapped")

        assert get_logger() is custom
        assert "[Custom] [WARN] swapped" in buffer.getvalue()

    def test_create_alias(self):
        logger = minilog.create({"prefix": "[Test]"})

        assert logger is not get_logger()
        assert logger.config.prefix == "[Test]"

    def test_version(self):
        assert isinstance(minilog.__version__, str)
