"""Unit tests for structured logging setup."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest
import structlog

from src.common.logging import get_logger, setup_logging


@pytest.fixture
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    config = structlog.get_config()
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.configure(**config)


@pytest.mark.usefixtures("_restore_logging")
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_uses_settings_by_default(self):
        # dev.yaml: DEBUG, text
        setup_logging()
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter.processors[-1], structlog.dev.ConsoleRenderer)
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_level_override(self):
        setup_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_json_format_override(self):
        setup_logging(json_format=True)
        formatter = logging.getLogger().handlers[0].formatter

        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
        assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_text_format_override(self):
        setup_logging(json_format=False)
        formatter = logging.getLogger().handlers[0].formatter

        assert isinstance(formatter.processors[-1], structlog.dev.ConsoleRenderer)


class TestGetLogger:
    def test_returns_bound_logger(self):
        logger = get_logger("src.breeding.engine")
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
