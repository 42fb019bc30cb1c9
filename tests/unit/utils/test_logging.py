"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

from accelconv.core.utils.logging import (
    DEFAULT_FORMAT,
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


def _record(msg: str = "Test message", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.funcName = "test_function"
    record.module = "test_module"
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["timestamp"].endswith("+00:00")
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["module"] == "test_module"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_standard_attributes_not_in_context(self) -> None:
        data = json.loads(StructuredJSONFormatter().format(_record()))
        assert "thread" not in data["context"]
        assert "pathname" not in data["context"]

    def test_message_args_applied(self) -> None:
        record = _record(msg="Generated %d points")
        record.args = (64,)
        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["message"] == "Generated 64 points"

    def test_extra_fields_in_context(self) -> None:
        record = _record(level=logging.DEBUG, mode="classic", dpi=1600)
        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["level"] == "DEBUG"
        assert data["context"]["mode"] == "classic"
        assert data["context"]["dpi"] == 1600

    def test_private_fields_skipped(self) -> None:
        data = json.loads(StructuredJSONFormatter().format(_record(_hidden=1)))
        assert "_hidden" not in data["context"]

    def test_non_serializable_extra_stringified(self) -> None:
        data = json.loads(StructuredJSONFormatter().format(_record(path=Path("a/b"))))
        assert data["context"]["path"] == str(Path("a/b"))

    def test_exception_info(self) -> None:
        try:
            raise ValueError("bad table")
        except ValueError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(StructuredJSONFormatter().format(record))
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad table"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_sets_level(self) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_default_text_format(self) -> None:
        configure_logging()
        formatter = logging.getLogger().handlers[0].formatter
        assert formatter is not None
        assert formatter._fmt == DEFAULT_FORMAT

    def test_custom_format(self) -> None:
        configure_logging(format_string="%(levelname)s %(message)s")
        assert logging.getLogger().handlers[0].formatter._fmt == "%(levelname)s %(message)s"

    def test_structured(self) -> None:
        configure_logging(structured=True)
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, StructuredJSONFormatter)

    def test_structured_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "curves.jsonl"
        configure_logging(level="INFO", structured=True, filename=str(log_file))
        logging.getLogger("accelconv.test").info("exported", extra={"points": 64})
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "exported"
        assert entry["context"]["points"] == 64

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger(self) -> None:
        logger = get_logger("accelconv.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "accelconv.test"

    def test_adapter_with_context(self) -> None:
        logger = get_logger("accelconv.test", mode="jump")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"mode": "jump"}


class TestLogPerformance:
    """Test suite for log_performance."""

    def test_returns_result_and_keeps_name(self) -> None:
        @log_performance
        def double(x: int) -> int:
            return 2 * x

        assert double(4) == 8
        assert double.__name__ == "double"
