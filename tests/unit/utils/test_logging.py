"""Tests for logging configuration utilities."""

import json
import logging
import sys
from io import StringIO
from pathlib import Path

import pytest

from curvekit.core.curves.intuitive import Curve
from curvekit.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _record(
    level: int = logging.INFO, msg: str = "Test message", exc_info=None
) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "test_function"
    record.module = "test_module"
    record.threadName = "MainThread"
    record.process = 9999
    return record


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42
        assert data["context"]["thread_name"] == "MainThread"
        assert data["context"]["process"] == 9999

    def test_log_with_extra_fields(self):
        """Test that extra fields are included in context."""
        record = _record(level=logging.DEBUG)
        record.curve_id = "intro_fade"
        record.percent_inset = 0.01

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["curve_id"] == "intro_fade"
        assert data["context"]["percent_inset"] == 0.01

    def test_standard_attributes_not_duplicated(self):
        """Test that LogRecord internals stay out of the context."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        for key in ("msg", "args", "levelno", "pathname", "created"):
            assert key not in data["context"]

    def test_log_with_exception(self):
        """Test that exception info is captured in context."""
        try:
            raise ValueError("percent_inset must be in (0, 0.5)")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info)
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "percent_inset must be in (0, 0.5)"
        assert "ValueError: percent_inset" in data["context"]["stack_trace"]

    @pytest.mark.parametrize("level_name", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_log_levels(self, level_name):
        """Test different log levels are captured correctly."""
        record = _record(level=getattr(logging, level_name), msg=f"{level_name} message")
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == level_name
        assert data["message"] == f"{level_name} message"


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_standard_logging(self, capsys):
        """Test standard text logging configuration."""
        configure_logging(level="INFO", structured=False)

        logging.getLogger("test.standard").info("Test message")

        captured = capsys.readouterr()
        assert "Test message" in captured.out
        assert "test.standard" in captured.out
        assert "INFO" in captured.out

    def test_level_is_case_insensitive(self):
        """Test that lower-case level names are accepted."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_raises(self):
        """Test that unknown level names are rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="LOUD")

    def test_configure_custom_format_string(self, capsys):
        """Test custom format string for standard logging."""
        configure_logging(level="INFO", format_string="%(levelname)s | %(message)s")

        logging.getLogger("test.custom").info("Custom format test")

        assert "INFO | Custom format test" in capsys.readouterr().out

    def test_configure_structured_logging_to_stdout(self, capsys):
        """Test structured JSON logging to stdout."""
        configure_logging(level="INFO", structured=True)

        logging.getLogger("test.structured").info("Structured test message")

        lines = [line for line in capsys.readouterr().out.strip().split("\n") if line]
        data = json.loads(lines[-1])
        assert data["level"] == "INFO"
        assert data["message"] == "Structured test message"
        assert data["context"]["logger_name"] == "test.structured"

    def test_configure_structured_logging_to_file(self, tmp_path: Path):
        """Test structured JSON logging to file."""
        log_file = tmp_path / "curves.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logger = logging.getLogger("test.file")
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().strip().split("\n") if line]
        levels = [line["level"] for line in lines[-3:]]
        assert levels == ["DEBUG", "INFO", "WARNING"]
        for line in lines[-3:]:
            assert "logger_name" in line["context"]

    def test_solver_debug_output(self, capsys):
        """Test that curve construction emits its resolved parameters at DEBUG."""
        configure_logging(level="DEBUG", structured=True)

        Curve.construct(0, 100)

        lines = [json.loads(line) for line in capsys.readouterr().out.strip().split("\n") if line]
        messages = [line["message"] for line in lines]
        assert any(m.startswith("Resolved curve") for m in messages)


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_without_context(self):
        """Test getting a plain logger without context."""
        logger = get_logger("test.plain")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.plain"

    def test_get_logger_with_context(self):
        """Test getting a LoggerAdapter with context."""
        logger = get_logger("test.context", curve_id="intro_fade", frame=12)
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.logger.name == "test.context"
        assert logger.extra["curve_id"] == "intro_fade"
        assert logger.extra["frame"] == 12

    def test_logger_adapter_includes_context_in_structured_logs(self):
        """Test that LoggerAdapter context appears in structured logs."""
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredJSONFormatter())

        logger = get_logger("test.adapter", curve_id="difficulty", operation="apply")
        assert isinstance(logger, logging.LoggerAdapter)
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.INFO)
        try:
            logger.info("Message with context")
        finally:
            logger.logger.removeHandler(handler)

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "Message with context"
        assert data["context"]["curve_id"] == "difficulty"
        assert data["context"]["operation"] == "apply"
