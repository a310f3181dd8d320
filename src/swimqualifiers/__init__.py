"""Qualifier counts for age-group swim meets against time standards."""

__version__ = "0.1.0"

from swimqualifiers.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
