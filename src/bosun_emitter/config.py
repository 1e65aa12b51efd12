"""
Bosun Emitter Configuration Module

Loads connection parameters from scollector's TOML configuration file and
merges them with command line values into an ``EmitterConfig``.

Precedence for tags, lowest to highest:
1. ``Tags`` table of the config file
2. ``host=<Hostname>`` from the config file (or the default hostname)
3. ``host=<--hostname>``
4. ``--tags K1=V1,K2=V2``
"""

import tomllib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError
from .log_config import get_context_logger, redact_url
from .types import Tags


DEFAULT_HOST = "localhost:8070"
DEFAULT_HOSTNAME = "localhost"

logger = get_context_logger("config")


class BosunConfig(BaseModel):
    """Connection parameters and default tags from an scollector config file.

    Only ``Host``, ``Hostname`` and ``Tags`` are read; scollector's other
    keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    host: str = Field(default=DEFAULT_HOST, alias="Host")
    """Bosun server, ``[scheme://][user:pass@]host[:port]``"""

    hostname: str = Field(default=DEFAULT_HOSTNAME, alias="Hostname")
    """Local host name, used as the ``host`` tag"""

    tags: dict[str, str] = Field(default_factory=dict, alias="Tags")
    """Tags appended to every datum"""

    @classmethod
    def default(cls) -> "BosunConfig":
        """Configuration for a Bosun server on ``localhost:8070``."""
        return cls()

    @classmethod
    def load(cls, path: Path) -> "BosunConfig":
        """Load configuration from an scollector TOML file.

        Raises:
            ConfigError: If the file cannot be read, parsed or validated
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"cannot read config file: {e.strerror or e}", path=str(path)) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML: {e}", path=str(path)) from e

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            errors = ", ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigError(f"invalid configuration: {errors}", path=str(path)) from e

        logger.debug("Loaded scollector config", path=str(path), tags=list(config.tags))
        return config


@dataclass
class EmitterConfig:
    """Everything one emission needs: where to send and what to send."""

    host: str = DEFAULT_HOST
    hostname: str = DEFAULT_HOSTNAME
    metric: str | None = None
    value: str | None = None
    rate: str | None = None
    unit: str | None = None
    description: str | None = None
    tags: Tags = field(default_factory=dict)

    @classmethod
    def default(cls) -> "EmitterConfig":
        return cls.from_bosun_config(BosunConfig.default())

    @classmethod
    def from_bosun_config(cls, bosun_config: BosunConfig) -> "EmitterConfig":
        return cls(
            host=bosun_config.host,
            hostname=bosun_config.hostname,
            tags=dict(bosun_config.tags),
        )

    def set_hostname(self, hostname: str) -> None:
        """Set the hostname and the ``host`` tag derived from it."""
        self.hostname = hostname
        self.tags["host"] = hostname

    def merge_tags(self, tags: Tags) -> None:
        """Overlay tags; keys already present are overwritten."""
        self.tags.update(tags)

    def describe(self) -> dict[str, Any]:
        """Return the configuration with credentials removed from ``host``."""
        described = asdict(self)
        # urlsplit only finds the authority after "//"
        host = self.host if "://" in self.host else f"//{self.host}"
        described["host"] = redact_url(host).removeprefix("//")
        return described


def parse_tags(tags_string: str) -> Tags:
    """Parse ``K1=V1,K2=V2,...`` into a tag map.

    Raises:
        ConfigError: If any element is not exactly one ``key=value`` pair

    Examples:
        >>> parse_tags("type=mongodb,database=production")
        {'type': 'mongodb', 'database': 'production'}
    """
    tags: Tags = {}
    for tag in tags_string.split(","):
        kv = tag.split("=")
        if len(kv) != 2:
            raise ConfigError(f"unable to parse tags: '{tags_string}'")
        key, value = kv
        tags[key] = value
    return tags


def load_config(config_file: Path) -> EmitterConfig:
    """Load a config file if it exists, otherwise use defaults.

    Raises:
        ConfigError: If the file exists but is unusable
    """
    if config_file.exists():
        return EmitterConfig.from_bosun_config(BosunConfig.load(config_file))
    logger.debug("Config file not found, using defaults", path=str(config_file))
    return EmitterConfig.default()


def build_config(
    config_file: Path,
    host: str | None = None,
    hostname: str | None = None,
    metric: str | None = None,
    value: str | None = None,
    rate: str | None = None,
    unit: str | None = None,
    description: str | None = None,
    tags: str | None = None,
) -> EmitterConfig:
    """Build an emitter configuration from a config file and explicit values.

    Args:
        config_file: scollector config file; missing files mean defaults
        host: Overrides the file's ``Host``
        hostname: Overrides the file's ``Hostname`` and the ``host`` tag
        metric, value, rate, unit, description: Emission fields
        tags: ``K1=V1,K2=V2`` string merged over all other tags

    Returns:
        EmitterConfig with tag precedence applied

    Raises:
        ConfigError: On config file or tag string errors
    """
    config = load_config(config_file)

    if host is not None:
        config.host = host

    config.set_hostname(hostname if hostname is not None else config.hostname)

    config.metric = metric
    config.value = value
    config.rate = rate
    config.unit = unit
    config.description = description

    if tags is not None:
        config.merge_tags(parse_tags(tags))

    return config


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_HOSTNAME",
    "BosunConfig",
    "EmitterConfig",
    "parse_tags",
    "load_config",
    "build_config",
]
