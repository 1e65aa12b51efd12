"""
Bosun Emitter Package

Sends metric data and the metadata describing it to a Bosun monitoring server.

This package provides:
- BosunClient: HTTP delivery of metadata and datum documents
- Metadata, Datum: metric records and their JSON wire encoding
- resolve_mode, mode_for: decide which documents a configuration may send
- emit: send metadata and/or a datum according to a mode
- emit-bosun: a command line tool for shell scripts and cron jobs

Usage:
    from bosun_emitter import BosunClient, Datum, EmitterError, EmitterErrorKind, Metadata

    client = BosunClient("localhost:8070")
    client.emit_metadata(Metadata("lukas.tests.count", "counter", "Test", "Amount of Lukas Tests"))

    try:
        client.emit_datum(Datum.now("lukas.tests.count", "42", {"host": "test-vm"}))
    except EmitterError as e:
        if e.kind is EmitterErrorKind.RECEIVE:
            print(f"Bosun rejected the datum: {e.status_code}")
"""

__version__ = "0.9.0"

from .client import BosunClient
from .config import BosunConfig, EmitterConfig, build_config, parse_tags
from .emitter import emit
from .exceptions import (
    ConfigError,
    EmitterError,
    EmitterErrorKind,
    ModeError,
    ModeErrorReason,
)
from .mode import mode_for, resolve_mode
from .records import Datum, Metadata, now_in_ms
from .types import Mode, RateType, Tags


__all__ = [
    # Client and records
    "BosunClient",
    "Metadata",
    "Datum",
    "now_in_ms",
    "Tags",
    "RateType",
    # Modes and orchestration
    "Mode",
    "resolve_mode",
    "mode_for",
    "emit",
    # Configuration
    "BosunConfig",
    "EmitterConfig",
    "build_config",
    "parse_tags",
    # Errors
    "EmitterError",
    "EmitterErrorKind",
    "ModeError",
    "ModeErrorReason",
    "ConfigError",
    # Package metadata
    "__version__",
]
