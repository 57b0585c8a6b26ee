from __future__ import annotations

import io
import os
import logging
from typing import Generator
from unittest.mock import patch

import pytest

import reqlint.utils.logger as logger_module
from reqlint.utils.logger import (
    ColoredFormatter,
    get_logger,
    level_for_verbosity,
    setup_logging,
)


@pytest.fixture
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the ``reqlint`` logger around a test."""
    root_logger = logging.getLogger("reqlint")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


def _record(level: int = logging.INFO, msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="reqlint.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_plain_when_color_disabled(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record(logging.WARNING, "careful")) == "WARNING: careful"

    def test_colors_level_on_terminal(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch.object(logger_module, "_stderr_supports_color", return_value=True):
            result = formatter.format(_record(logging.ERROR, "bad"))

        assert result == f"{ColoredFormatter.COLORS['ERROR']}ERROR{ColoredFormatter.RESET}: bad"

    def test_record_level_name_restored(self) -> None:
        """Coloring must not leak into other handlers sharing the record."""
        formatter = ColoredFormatter("%(levelname)s")
        record = _record(logging.INFO)

        with patch.object(logger_module, "_stderr_supports_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "INFO"

    def test_no_color_env_disables_color(self) -> None:
        with patch.dict(os.environ, {"NO_COLOR": "1"}):
            assert logger_module._stderr_supports_color() is False

    def test_ci_env_disables_color(self) -> None:
        with patch.dict(os.environ, {"CI": "true"}, clear=True):
            assert logger_module._stderr_supports_color() is False


@pytest.mark.unit
class TestLevelForVerbosity:
    @pytest.mark.parametrize(
        "verbose,level",
        [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_mapping(self, verbose: int, level: int) -> None:
        assert level_for_verbosity(verbose) == level


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_to_stream(self, clean_logger_state: None) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.INFO, stream=stream)
        get_logger("core.linter").info("Linting %s", "requirements.txt")

        assert "INFO: Linting requirements.txt" in stream.getvalue()

    def test_respects_level(self, clean_logger_state: None) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.WARNING, stream=stream)
        get_logger("config").info("hidden")

        assert stream.getvalue() == ""

    def test_repeated_setup_keeps_one_handler(self, clean_logger_state: None) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("reqlint").handlers) == 1

    def test_verbose_format_includes_logger_name(self, clean_logger_state: None) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.DEBUG, verbose=True, stream=stream)
        get_logger("cli").debug("hello")

        assert "reqlint.cli" in stream.getvalue()


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            (None, "reqlint"),
            ("", "reqlint"),
            ("reqlint", "reqlint"),
            ("core.parser", "reqlint.core.parser"),
            ("reqlint.config", "reqlint.config"),
        ],
    )
    def test_names(self, name, expected: str, clean_logger_state: None) -> None:
        assert get_logger(name).name == expected

    def test_library_default_is_silent(self, clean_logger_state: None) -> None:
        get_logger("core")

        handlers = logging.getLogger("reqlint").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
