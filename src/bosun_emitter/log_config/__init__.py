"""Logging configuration package."""

from .main import (
    LIBRARY_LOGGER,
    EmitContext,
    configure_logging,
    reset_logging,
    get_context_logger,
    redact_url,
)


__all__ = [
    "LIBRARY_LOGGER",
    "get_context_logger",
    "configure_logging",
    "reset_logging",
    "EmitContext",
    "redact_url",
]
