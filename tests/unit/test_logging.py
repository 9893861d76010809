"""Tests for logging setup."""

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from semsearch.utils.logging import (
    ConsoleFormatter,
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


def _record(message: str = "Ranked records", **context: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="semsearch.search.engine",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if context:
        record.context = context
    return record


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter_includes_context(self) -> None:
        """Test context keys become JSON fields."""
        parsed = json.loads(JSONFormatter().format(_record(query="qr", matches=2)))
        assert parsed["message"] == "Ranked records"
        assert parsed["level"] == "INFO"
        assert parsed["query"] == "qr"
        assert parsed["matches"] == 2

    def test_console_formatter_plain(self) -> None:
        """Test uncolored console output."""
        line = ConsoleFormatter(use_color=False).format(_record(query="qr"))
        assert line == "INFO     semsearch.search.engine: Ranked records [query=qr]"

    def test_console_formatter_color(self) -> None:
        """Test colored console output."""
        line = ConsoleFormatter(use_color=True).format(_record())
        assert line.startswith("\033[32m")


class TestSetupLogging:
    """Tests for setup_logging and helpers."""

    @pytest.fixture(autouse=True)
    def restore_logger(self) -> Generator[None, None, None]:
        """Leave the package logger as we found it."""
        logger = logging.getLogger("semsearch")
        handlers, level = list(logger.handlers), logger.level
        yield
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)

    def test_level_and_handlers(self) -> None:
        """Test the package logger is configured."""
        logger = setup_logging(level="debug")
        assert logger.name == "semsearch"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_file_handler_writes_json(self, temp_dir: Path) -> None:
        """Test file logs are JSON lines with context."""
        log_file = temp_dir / "logs" / "semsearch.log"
        setup_logging(level="DEBUG", log_file=log_file)

        log_with_context(get_logger("semsearch.test"), logging.INFO, "hello", query="qr")
        for handler in logging.getLogger("semsearch").handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "hello"
        assert entry["query"] == "qr"

    def test_log_with_context_skips_disabled_levels(self, temp_dir: Path) -> None:
        """Test nothing is emitted below the configured level."""
        log_file = temp_dir / "semsearch.log"
        setup_logging(level="WARNING", log_file=log_file)

        log_with_context(get_logger("semsearch.test"), logging.DEBUG, "quiet")

        assert log_file.read_text() == ""
