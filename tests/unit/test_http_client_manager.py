"""Tests for HTTP client pooling and runtime settings."""

from pathlib import Path

from bosun_emitter.http_client_manager import close_http_clients, get_http_client
from bosun_emitter.settings import DEFAULT_CONFIG_FILE, EmitterSettings, get_settings


class TestEmitterSettings:
    """Test suite for EmitterSettings."""

    def test_defaults(self):
        settings = EmitterSettings()

        assert settings.config_file == DEFAULT_CONFIG_FILE == Path("/etc/bosun/scollector.conf")
        assert settings.timeout == 5.0
        assert settings.verify_ssl is True
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BOSUN_EMITTER_TIMEOUT", "2.5")
        monkeypatch.setenv("BOSUN_EMITTER_VERIFY_SSL", "false")
        monkeypatch.setenv("BOSUN_EMITTER_LOG_FORMAT", "json")

        settings = EmitterSettings()

        assert settings.timeout == 2.5
        assert settings.verify_ssl is False
        assert settings.log_format == "json"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestGetHttpClient:
    """Test suite for pooled HTTP clients."""

    def test_same_scheme_reuses_client(self):
        assert get_http_client("http") is get_http_client("http")

    def test_schemes_get_separate_clients(self):
        assert get_http_client("http") is not get_http_client("https")

    def test_timeout_from_settings(self, monkeypatch):
        monkeypatch.setenv("BOSUN_EMITTER_TIMEOUT", "1.5")
        get_settings.cache_clear()

        client = get_http_client("https")

        assert client.timeout.connect == 1.5
        assert client.timeout.read == 1.5

    def test_overrides_create_new_client(self):
        default = get_http_client("https")

        assert get_http_client("https", timeout=0.5) is not default
        assert get_http_client("https", ssl_verify=False) is not default

    def test_close_http_clients(self):
        client = get_http_client("http")

        close_http_clients()

        assert client.is_closed
        assert get_http_client("http") is not client
