"""Transport contract.

Any HTTP client satisfies it: the pipeline only needs to send an
`OutgoingRequest` and get back status, headers and body.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from paypal_api.core.domain.requests import OutgoingRequest, TransportResponse


@runtime_checkable
class Transport(Protocol):
    """Minimal contract for sending one HTTP request.

    Design rules:
    - `send` is asynchronous because it performs network I/O.
    - Non-2xx statuses are returned, not raised; network failures propagate.
    - `request.auth`, when set, is sent as HTTP Basic credentials.
    """

    async def send(self, request: OutgoingRequest) -> TransportResponse:
        """Send `request` and return the raw response."""

        ...
