"""Structured logging configuration using structlog.

Provides JSON-formatted logging for production and human-readable
output for development.
"""

from __future__ import annotations

import logging
import sys

import structlog

from src.common.config import get_settings


def setup_logging(level: str | None = None, json_format: bool | None = None) -> None:
    """Configure structured logging based on environment settings.

    With format=json: outputs JSON lines.
    With format=text: outputs colored, human-readable logs.

    Args:
        level: Log level name overriding settings.logging.level.
        json_format: Overrides settings.logging.format when given.
    """
    settings = get_settings()
    level_name = level or settings.logging.level
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    use_json = settings.logging.format == "json" if json_format is None else json_format

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # Logs go to stderr so CLI output on stdout stays machine-readable
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)
