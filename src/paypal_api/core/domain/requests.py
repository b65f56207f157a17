"""Values exchanged with a transport.

Both are built fresh per call and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OutgoingRequest:
    """A fully built HTTP request.

    `auth` holds `(username, password)` for HTTP Basic auth; the transport
    turns it into the `Authorization` header, so it never appears in
    `headers`.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    auth: tuple[str, str] | None = field(default=None, repr=False)

    def redacted_headers(self) -> dict[str, str]:
        """Headers safe to log (credentials removed)."""

        return {
            key: ("<redacted>" if key.lower() == "authorization" else value)
            for key, value in self.headers.items()
        }


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and raw body of an HTTP response."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code <= 299

    @property
    def content_type(self) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return None

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
