"""emit-bosun: emits a single metric datum and its metadata to Bosun."""

import json
from pathlib import Path

import click

from . import __version__
from .config import build_config
from .emitter import emit
from .exceptions import ConfigError, EmitterError, EmitterErrorKind, ModeError, ModeErrorReason
from .http_client_manager import close_http_clients
from .log_config import configure_logging
from .mode import mode_for
from .settings import get_settings
from .types import RateType


EXIT_LOGGER_INIT = -1
EXIT_CONFIG = -2

MODE_EXIT_CODES = {
    ModeErrorReason.NO_METADATA: -11,
    ModeErrorReason.NO_VALUE: -12,
    ModeErrorReason.NO_SUCH_MODE: -13,
}

EMITTER_EXIT_CODES = {
    EmitterErrorKind.ENCODE: 1,
    EmitterErrorKind.EMIT: 2,
    EmitterErrorKind.RECEIVE: 3,
}

EMITTER_MESSAGES = {
    EmitterErrorKind.ENCODE: "Failed to create JSON document, because {}.",
    EmitterErrorKind.EMIT: "Failed to send, because {}.",
    EmitterErrorKind.RECEIVE: "Failed to create resource, because {}.",
}

AFTER_HELP = (
    "Two modes are supported, i.e., sending a datum with meta data or sending "
    "only meta data. The modes are controlled whether a value --value is passed "
    "or not. Please mind that in both cases the meta data is required."
)


def _exit_with_error(ctx: click.Context, msg: str, exit_code: int) -> None:
    if msg:
        click.echo(msg)
    ctx.exit(exit_code)


@click.command(name="emit-bosun", epilog=AFTER_HELP)
@click.version_option(version=__version__, prog_name="emit-bosun")
@click.option("-c", "--config", "config_file", type=click.Path(path_type=Path),
              metavar="FILE", help="Sets a custom config file")
@click.option("--host", metavar="HOST:PORT", help="Sets Bosun server connection parameters")
@click.option("--hostname", metavar="HOSTNAME", help="Sets hostname")
@click.option("-m", "--metric", metavar="METRIC NAME", help="Sets metric name")
@click.option("-v", "--value", metavar="VALUE", help="Sets metric value")
@click.option("-r", "--rate", type=click.Choice([r.value for r in RateType]),
              help="Sets rate type")
@click.option("-u", "--unit", metavar="UNIT", help="Sets metric value unit")
@click.option("-d", "--description", metavar="DESCRIPTION", help="Sets metric description")
@click.option("-t", "--tags", metavar="KEY1=VALUE1,KEY2=VALUE2,...", help="Sets tags")
@click.option("--show-config", is_flag=True, help="Prints config")
@click.option("--verbose", is_flag=True, help="Enables verbose output")
@click.option("--force", is_flag=True, hidden=True,
              help="Forces metric datum to be send even without meta data")
@click.pass_context
def main(
    ctx: click.Context,
    config_file: Path | None,
    host: str | None,
    hostname: str | None,
    metric: str | None,
    value: str | None,
    rate: str | None,
    unit: str | None,
    description: str | None,
    tags: str | None,
    show_config: bool,
    verbose: bool,
    force: bool,
) -> None:
    """Emit a Bosun metric datum and its meta data."""
    try:
        # pydantic's ValidationError is a ValueError too
        settings = get_settings()
        configure_logging("INFO" if verbose else settings.log_level, settings.log_format)
    except ValueError as e:
        _exit_with_error(ctx, f"Could not initialize logger, because {e}.", EXIT_LOGGER_INIT)

    try:
        config = build_config(
            config_file if config_file is not None else settings.config_file,
            host=host,
            hostname=hostname,
            metric=metric,
            value=value,
            rate=rate,
            unit=unit,
            description=description,
            tags=tags,
        )
    except ConfigError as e:
        _exit_with_error(ctx, f"Failed to parse configuration, because {e}.", EXIT_CONFIG)

    if show_config:
        click.echo(f"config: {json.dumps(config.describe(), indent=2)}")

    try:
        mode = mode_for(config, force)
    except ModeError as e:
        if e.reason is ModeErrorReason.NO_SUCH_MODE:
            click.echo(f"{e.message}\n\n{ctx.get_usage()}")
            _exit_with_error(ctx, "", MODE_EXIT_CODES[e.reason])
        _exit_with_error(ctx, e.message, MODE_EXIT_CODES[e.reason])

    try:
        emit(config, mode)
    except EmitterError as e:
        _exit_with_error(ctx, EMITTER_MESSAGES[e.kind].format(e.message), EMITTER_EXIT_CODES[e.kind])
    finally:
        close_http_clients()


__all__ = ["main"]
