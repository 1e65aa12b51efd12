"""Metric metadata and datum records and their JSON wire encoding."""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from .exceptions import EmitterError
from .log_config import get_context_logger
from .types import Tags


logger = get_context_logger("records")


def now_in_ms() -> int:
    """Return the current Unix timestamp in milliseconds."""
    seconds, nanos = divmod(time.time_ns(), 1_000_000_000)
    return seconds * 1000 + nanos // 1_000_000


def _dumps(payload: Any) -> str:
    try:
        return json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EmitterError.encode(e) from e


@dataclass(frozen=True)
class Metadata:
    """Describes a metric: its rate type, unit and human description.

    Example:
        >>> Metadata("lukas.tests.count", "counter", "Tests", "Amount of Lukas Tests")
    """

    metric: str
    rate: str
    unit: str
    description: str

    def to_dict(self) -> list[dict[str, str]]:
        """Build the three ``{metric, name, value}`` records Bosun expects."""
        return [
            {"metric": self.metric, "name": "unit", "value": self.unit},
            {"metric": self.metric, "name": "rate", "value": self.rate},
            {"metric": self.metric, "name": "desc", "value": self.description},
        ]

    def to_json(self) -> str:
        """Encode metadata as a JSON array.

        Raises:
            EmitterError: kind ENCODE if serialization fails
        """
        encoded = _dumps(self.to_dict())
        logger.debug("Metadata encoded", metric=self.metric, json=encoded)
        return encoded


@dataclass(frozen=True)
class Datum:
    """A single timestamped metric observation.

    ``value`` is sent as a string; Bosun parses it leniently. ``timestamp`` is
    a Unix timestamp, conventionally in milliseconds.
    """

    metric: str
    timestamp: int
    value: str
    tags: Tags = field(default_factory=dict)

    @classmethod
    def now(
        cls,
        metric: str,
        value: str,
        tags: Tags | None = None,
        clock: Callable[[], int] = now_in_ms,
    ) -> "Datum":
        """Create a datum stamped with the current time."""
        return cls(metric=metric, timestamp=clock(), value=value, tags=dict(tags or {}))

    def to_dict(self) -> dict[str, Any]:
        return {
            "metric": self.metric,
            "timestamp": self.timestamp,
            "value": self.value,
            "tags": dict(self.tags),
        }

    def to_json(self) -> str:
        """Encode datum as a JSON object.

        Raises:
            EmitterError: kind ENCODE if serialization fails
        """
        encoded = _dumps(self.to_dict())
        logger.debug("Datum encoded", metric=self.metric, json=encoded)
        return encoded


__all__ = ["Metadata", "Datum", "now_in_ms"]
