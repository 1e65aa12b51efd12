"""Runtime settings for the Bosun emitter.

Settings come from environment variables prefixed with ``BOSUN_EMITTER_``,
e.g. ``BOSUN_EMITTER_TIMEOUT=2.5`` or ``BOSUN_EMITTER_VERIFY_SSL=false``.
They cover how the emitter runs, not what it sends; the Bosun host, hostname
and tags live in the scollector config file (see ``config.py``).
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CONFIG_FILE = Path("/etc/bosun/scollector.conf")


class EmitterSettings(BaseSettings):
    """Emitter runtime settings."""

    model_config = SettingsConfigDict(
        env_prefix="BOSUN_EMITTER_",
        case_sensitive=False,
        extra="ignore",
    )

    config_file: Path = DEFAULT_CONFIG_FILE
    """scollector config file read when --config is not given"""

    timeout: float = 5.0
    """Connect/read timeout for one POST, in seconds"""

    verify_ssl: bool = True

    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"


@lru_cache
def get_settings() -> EmitterSettings:
    """Get cached settings instance."""
    return EmitterSettings()


__all__ = ["DEFAULT_CONFIG_FILE", "EmitterSettings", "get_settings"]
