"""Type definitions for the Bosun emitter package."""

from enum import Enum


Tags = dict[str, str]
"""Metric tags: tag key to tag value."""


class RateType(str, Enum):
    """Conventional Bosun rate types."""

    GAUGE = "gauge"
    COUNTER = "counter"
    RATE = "rate"


class Mode(str, Enum):
    """Which documents an emission sends."""

    NORMAL = "normal"
    """Metadata, then datum"""

    METADATA_ONLY = "metadata_only"

    DATUM_ONLY = "datum_only"
    """Datum without metadata; only with --force"""


__all__ = ["Tags", "RateType", "Mode"]
