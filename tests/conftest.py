"""Pytest configuration and shared fixtures for Bosun emitter tests."""

import json
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest
import structlog


sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bosun_emitter.config import EmitterConfig
from bosun_emitter.http_client_manager import close_http_clients
from bosun_emitter.log_config import reset_logging
from bosun_emitter.records import Datum, Metadata
from bosun_emitter.settings import get_settings


# ==================== Isolation ====================


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """Give every test fresh settings, HTTP pools and logging defaults."""
    for name in ("CONFIG_FILE", "TIMEOUT", "VERIFY_SSL", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"BOSUN_EMITTER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    close_http_clients()
    get_settings.cache_clear()
    reset_logging()
    structlog.contextvars.clear_contextvars()


# ==================== Bosun Server Stub ====================


class BosunStub:
    """httpx.MockTransport handler standing in for a Bosun server.

    Answers 204 by default. ``statuses`` maps an API path to another status;
    ``error`` is raised instead of answering, to simulate transport failures.
    """

    def __init__(
        self,
        statuses: dict[str, int] | None = None,
        body: str = "",
        error: type[httpx.TransportError] | None = None,
    ):
        self.statuses = statuses or {}
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("Connection refused", request=request)
        return httpx.Response(self.statuses.get(request.url.path, 204), text=self.body)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def json_bodies(self) -> list[Any]:
        return [json.loads(r.content) for r in self.requests]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def make_bosun_stub():
    """Factory for Bosun stubs with custom statuses or transport errors."""
    return BosunStub


@pytest.fixture
def bosun_stub() -> BosunStub:
    """Bosun stub answering 204 No Content to everything."""
    return BosunStub()


@pytest.fixture
def stub_client(bosun_stub) -> httpx.Client:
    """HTTP client routed to ``bosun_stub``."""
    client = bosun_stub.client()
    yield client
    client.close()


# ==================== Record Fixtures ====================


@pytest.fixture
def tags() -> dict[str, str]:
    return {"host": "test-vm", "type": "mongodb"}


@pytest.fixture
def metadata() -> Metadata:
    return Metadata("lukas.tests.count", "counter", "Tests", "Amount of Lukas Tests")


@pytest.fixture
def datum(tags) -> Datum:
    return Datum("lukas.tests.count", 1458066838000, "1", tags)


@pytest.fixture
def full_config() -> EmitterConfig:
    """Configuration with every field needed for NORMAL mode."""
    return EmitterConfig(
        host="localhost:8070",
        hostname="web01",
        metric="app.requests",
        value="42",
        rate="counter",
        unit="count",
        description="Total requests",
        tags={"host": "web01"},
    )


# ==================== scollector Config Fixtures ====================


@pytest.fixture
def scollector_conf(tmp_path) -> Path:
    """A valid scollector TOML config file."""
    path = tmp_path / "scollector.conf"
    path.write_text(
        'Host = "bosun.example.com:8070"\n'
        'Hostname = "backup-server"\n'
        'FullHost = true\n'
        "\n"
        "[Tags]\n"
        'environment = "production"\n'
        'host = "from-file"\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def missing_conf(tmp_path) -> Path:
    return tmp_path / "does-not-exist.conf"
