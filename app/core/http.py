"""Outbound HTTP clients.

The payment provider and the image host each get one pooled
``httpx.AsyncClient``, created on first use and closed at shutdown by
``close_http_clients``. Requests are never retried; a timeout is reported to
the caller like any other provider failure.
"""

from dataclasses import dataclass

import httpx

DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 10.0
DEFAULT_WRITE_TIMEOUT = 10.0
DEFAULT_POOL_TIMEOUT = 5.0

# Image uploads carry base64 payloads of several megabytes.
UPLOAD_WRITE_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientProfile:
    """Pool size and timeouts for one external service."""

    max_connections: int = 20
    max_keepalive_connections: int = 10
    write_timeout: float = DEFAULT_WRITE_TIMEOUT


PAYMENT_PROFILE = ClientProfile()
IMAGE_PROFILE = ClientProfile(
    max_connections=10,
    max_keepalive_connections=5,
    write_timeout=UPLOAD_WRITE_TIMEOUT,
)

_clients: dict[str, httpx.AsyncClient] = {}


def create_http_client(
    base_url: str = "",
    max_connections: int = 20,
    max_keepalive_connections: int = 10,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: float = DEFAULT_READ_TIMEOUT,
    write_timeout: float = DEFAULT_WRITE_TIMEOUT,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=write_timeout,
            pool=pool_timeout,
        ),
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        ),
    )


def _shared_client(
    name: str, base_url: str, profile: ClientProfile
) -> httpx.AsyncClient:
    client = _clients.get(name)
    if client is None:
        client = create_http_client(
            base_url=base_url,
            max_connections=profile.max_connections,
            max_keepalive_connections=profile.max_keepalive_connections,
            write_timeout=profile.write_timeout,
        )
        _clients[name] = client
    return client


def get_payment_client(base_url: str) -> httpx.AsyncClient:
    """Shared client for the payment provider (Stripe)."""
    return _shared_client("payment", base_url, PAYMENT_PROFILE)


def get_image_client(base_url: str) -> httpx.AsyncClient:
    """Shared client for the image host (imgbb)."""
    return _shared_client("image", base_url, IMAGE_PROFILE)


async def close_http_clients() -> None:
    """Close every shared client; the next call creates a fresh one."""
    while _clients:
        _, client = _clients.popitem()
        await client.aclose()
