"""Emission orchestration: sends metadata and/or a datum according to a mode."""

from typing import Callable

import httpx

from .client import BosunClient
from .config import EmitterConfig
from .log_config import EmitContext, get_context_logger
from .records import Datum, Metadata, now_in_ms
from .types import Mode


logger = get_context_logger("emitter")


def emit(
    config: EmitterConfig,
    mode: Mode,
    client: httpx.Client | None = None,
    clock: Callable[[], int] = now_in_ms,
) -> None:
    """Send the documents ``mode`` calls for.

    In ``NORMAL`` mode metadata is sent first; if that fails the datum is not
    attempted and the metadata error propagates.

    Args:
        config: Resolved emitter configuration
        mode: Result of ``mode_for(config, force)``
        client: HTTP client to use instead of the pooled one
        clock: Millisecond timestamp source for the datum

    Raises:
        EmitterError: From the first failing send
    """
    bosun = BosunClient(config.host, client=client)

    with EmitContext(metric=config.metric, mode=mode.value):
        if mode in (Mode.NORMAL, Mode.METADATA_ONLY):
            logger.info("Sending meta data.")
            bosun.emit_metadata(metadata_from(config))

        if mode in (Mode.NORMAL, Mode.DATUM_ONLY):
            logger.info("Sending datum.")
            bosun.emit_datum(datum_from(config, clock))


# Mode resolution already checked that the fields used below are set.


def metadata_from(config: EmitterConfig) -> Metadata:
    return Metadata(
        metric=config.metric,
        rate=config.rate,
        unit=config.unit,
        description=config.description,
    )


def datum_from(config: EmitterConfig, clock: Callable[[], int] = now_in_ms) -> Datum:
    return Datum.now(config.metric, config.value, config.tags, clock=clock)


__all__ = ["emit", "metadata_from", "datum_from"]
