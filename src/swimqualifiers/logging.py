"""Structured logging configuration for swimqualifiers.

Usage:
    from swimqualifiers.logging import get_logger, configure_logging

    # Call once at startup
    configure_logging()

    # Get a logger in any module
    logger = get_logger(__name__)
    logger.info("meet_file_parsed", file="CAN-MBSK_...xlsx", results=42)

The level and renderer come from settings (LOG_LEVEL, LOG_FORMAT). Production
environments always render JSON.
"""

import logging
import sys
from typing import Any

import structlog

from swimqualifiers.config import LogFormat, Settings, get_settings


def _resolve_format(settings: Settings) -> LogFormat:
    """JSON for production, otherwise whatever is configured."""
    if settings.is_production:
        return LogFormat.JSON
    return settings.log_format


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the application.

    Call this once at startup (the CLI does it before any command runs).
    """
    settings = settings or get_settings()
    log_format = _resolve_format(settings)
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == LogFormat.JSON:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # openpyxl warns about every unsupported extension in real-world workbooks
    logging.getLogger("openpyxl").setLevel(logging.ERROR)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        A configured structlog logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Example:
        bind_context(meet_file="CAN-MBSK_LCM_M_00-13.xlsx")
        logger.info("sheet_skipped")  # Will include meet_file
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
