"""HTTP client pooling for Bosun API requests."""

from typing import Any

import httpx

from .settings import get_settings


# Global HTTP client instances (keyed by config tuple)
_http_clients: dict[tuple[Any, ...], httpx.Client] = {}


def _load_http_config(scheme: str) -> dict[str, Any]:
    """Load HTTP client configuration for a URL scheme ("http" or "https")."""

    settings = get_settings()
    return {
        "timeout": settings.timeout,
        # Plain HTTP never negotiates TLS, so verification is irrelevant there
        "verify": settings.verify_ssl if scheme == "https" else False,
    }


def _client_cache_key(scheme: str, cfg: dict[str, Any]) -> tuple[Any, ...]:
    """Build a cache key tuple from HTTP configuration."""

    return (scheme, cfg.get("verify"), cfg.get("timeout"))


def get_http_client(
    scheme: str,
    *,
    ssl_verify: bool | str | None = None,
    timeout: float | None = None,
) -> httpx.Client:
    """Get a pooled HTTP client suitable for ``scheme``.

    Args:
        scheme: "http" or "https"
        ssl_verify: Override TLS verification (bool or CA bundle path)
        timeout: Override connect/read timeout in seconds

    Returns:
        Shared httpx.Client for this configuration
    """

    cfg = _load_http_config(scheme)
    if ssl_verify is not None and scheme == "https":
        cfg["verify"] = ssl_verify
    if timeout is not None:
        cfg["timeout"] = timeout

    key = _client_cache_key(scheme, cfg)
    if key not in _http_clients:
        _http_clients[key] = httpx.Client(timeout=cfg["timeout"], verify=cfg["verify"])
    return _http_clients[key]


def close_http_clients() -> None:
    """Close and forget all pooled HTTP clients."""

    while _http_clients:
        _, client = _http_clients.popitem()
        client.close()


__all__ = ["get_http_client", "close_http_clients"]
