"""Logging configuration and utilities.

Library loggers are structlog loggers wrapping standard-library loggers under
the ``bosun_emitter`` namespace. The package installs a ``NullHandler`` there,
so nothing is written until the host application (or the emit-bosun command,
through ``configure_logging``) attaches a handler.
"""

import logging
import sys
from typing import Any, TextIO
from urllib.parse import urlsplit, urlunsplit

import structlog


LIBRARY_LOGGER = "bosun_emitter"

_library_logger = logging.getLogger(LIBRARY_LOGGER)
_library_logger.addHandler(logging.NullHandler())

# Handler installed by configure_logging, replaced on reconfiguration
_cli_handler: logging.Handler | None = None


def get_context_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name, placed under the ``bosun_emitter`` namespace

    Returns:
        Structured logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(f"{LIBRARY_LOGGER}.{name}"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    level: str = "WARNING", fmt: str = "console", stream: TextIO | None = None
) -> None:
    """Configure structured logging for the emit-bosun command.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR)
        fmt: "console" for human-readable lines, "json" for one JSON object per line
        stream: Destination, standard error by default

    Raises:
        ValueError: If the level or format is unknown
    """
    global _cli_handler

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"unknown log level '{level}'")

    if fmt == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    elif fmt == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        raise ValueError(f"unknown log format '{fmt}'")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    if _cli_handler is not None:
        _library_logger.removeHandler(_cli_handler)
    _library_logger.addHandler(handler)
    _library_logger.setLevel(numeric_level)
    _cli_handler = handler


def reset_logging() -> None:
    """Detach the handler installed by ``configure_logging`` and restore defaults."""
    global _cli_handler

    if _cli_handler is not None:
        _library_logger.removeHandler(_cli_handler)
        _cli_handler = None
    _library_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()


def redact_url(url: str) -> str:
    """Replace any credentials embedded in a URL's authority with ``***``."""
    try:
        parts = urlsplit(url)
        has_credentials = parts.username is not None or parts.password is not None
    except ValueError:
        return "<invalid url>"
    if not has_credentials:
        return url
    host = parts.netloc.rpartition("@")[2]
    return urlunsplit(parts._replace(netloc=f"***@{host}"))


class EmitContext:
    """Context manager binding emission details to the structlog context."""

    def __init__(self, **context: Any):
        """Initialize with context variables.

        Args:
            **context: Context key-value pairs (e.g. metric, mode)
        """
        self.context = context

    def __enter__(self):
        """Enter context."""
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context."""
        structlog.contextvars.unbind_contextvars(*self.context.keys())


__all__ = [
    "LIBRARY_LOGGER",
    "get_context_logger",
    "configure_logging",
    "reset_logging",
    "redact_url",
    "EmitContext",
]
