"""Wrapper around httpx.

Standardizes timeouts and default headers, and adapts `httpx.AsyncClient` to
the `Transport` contract so the pipeline never imports httpx directly. Tests
swap the network for `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from paypal_api.core.config import PayPalSettings
from paypal_api.core.domain.requests import OutgoingRequest, TransportResponse


def build_async_client(
    settings: PayPalSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the client's defaults.

    Without settings a 30 second timeout and the default User-Agent are used.
    """

    timeout = settings.http_timeout_seconds if settings else 30.0
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent if settings else "paypal-api/0.1",
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """`Transport` backed by an `httpx.AsyncClient`.

    Network errors (`httpx.HTTPError`) propagate unchanged.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, request: OutgoingRequest) -> TransportResponse:
        response = await self._client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
            auth=request.auth,
        )
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
