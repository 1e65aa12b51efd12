"""Send-mode resolution.

Two modes are supported officially and one unofficially:

1. ``NORMAL``: send metadata, then the datum
2. ``METADATA_ONLY``: send metadata only
3. ``DATUM_ONLY``: send the datum without metadata, only with ``force``

Rules are evaluated top to bottom and the first match wins; several input
combinations satisfy more than one rule.
"""

from .config import EmitterConfig
from .exceptions import ModeError, ModeErrorReason
from .types import Mode


def resolve_mode(
    metric: bool,
    value: bool,
    rate: bool,
    unit: bool,
    description: bool,
    force: bool,
) -> Mode:
    """Decide which documents may be sent, given which fields are present.

    Raises:
        ModeError: If the combination does not describe a legal mode
    """
    metadata = rate and unit and description

    if metric and value and metadata:
        return Mode.NORMAL
    if metric and metadata:
        return Mode.METADATA_ONLY
    if metric and value and force:
        return Mode.DATUM_ONLY
    if metric and value:
        raise ModeError(ModeErrorReason.NO_METADATA)
    if metric:
        raise ModeError(ModeErrorReason.NO_VALUE)
    raise ModeError(ModeErrorReason.NO_SUCH_MODE)


def mode_for(config: EmitterConfig, force: bool = False) -> Mode:
    """Resolve the send mode for a configuration.

    Raises:
        ModeError: If the configuration does not describe a legal mode
    """
    return resolve_mode(
        metric=config.metric is not None,
        value=config.value is not None,
        rate=config.rate is not None,
        unit=config.unit is not None,
        description=config.description is not None,
        force=force,
    )


__all__ = ["Mode", "resolve_mode", "mode_for"]
