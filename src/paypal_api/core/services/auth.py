"""OAuth token lifecycle.

The manager owns a single token snapshot shared by every request issued from
one client. A snapshot is replaced as a whole, so readers never see the type
of one token paired with the value of another.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import structlog

from paypal_api.core.config import Configuration
from paypal_api.core.domain.models import OAuthToken
from paypal_api.core.errors import AuthStateError
from paypal_api.core.interfaces.transport import Transport
from paypal_api.core.logging import ClientEvents
from paypal_api.core.services.http import build_request, read_response

TOKEN_PATH = "v1/oauth2/token"

log = structlog.get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AuthToken:
    token_type: str
    access_token: str
    expires_at: datetime

    @property
    def authorization(self) -> str:
        """Value of the `Authorization` header."""

        return f"{self.token_type} {self.access_token}"

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class TokenManager:
    """Holds the bearer token and performs the client-credentials exchange."""

    def __init__(
        self,
        config: Configuration,
        transport: Transport,
        *,
        clock: Callable[[], datetime] = utcnow,
        log_api_error: bool = False,
    ) -> None:
        self._config = config
        self._transport = transport
        self._clock = clock
        self._log_api_error = log_api_error
        self._token: AuthToken | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def token(self) -> AuthToken | None:
        return self._token

    def is_expired(self) -> bool:
        """True if no token was ever obtained or its expiry has passed."""

        token = self._token
        return token is None or token.is_expired(self._clock())

    async def authenticate(self) -> None:
        """Exchange the client credentials for a new bearer token.

        On failure the previous token (if any) is left as it was and the
        error propagates.
        """

        request = build_request(
            self._config,
            "POST",
            TOKEN_PATH,
            basic_auth=(self._config.id, self._config.secret),
            body={"grant_type": "client_credentials"},
            requires_auth=False,
        )
        try:
            response = await self._transport.send(request)
            payload = read_response(response, OAuthToken, request=request, log_api_error=self._log_api_error)
        except Exception as exc:
            log.warning(ClientEvents.TOKEN_REFRESH_FAILED, error=type(exc).__name__)
            raise

        issued_at = self._clock()
        self._token = AuthToken(
            token_type=payload.token_type,
            access_token=payload.access_token,
            expires_at=issued_at + timedelta(seconds=payload.expires_in),
        )
        log.debug(ClientEvents.TOKEN_REFRESHED, expires_in=payload.expires_in, app_id=payload.app_id)

    async def refresh_if_expired(self) -> AuthToken:
        """Return a valid token, authenticating first when needed.

        At most one exchange is in flight: concurrent callers wait for it and
        re-check expiry instead of starting their own.
        """

        if self.is_expired():
            async with self._refresh_lock:
                if self.is_expired():
                    await self.authenticate()
        token = self._token
        if token is None:
            raise AuthStateError("Authentication finished without producing a token.")
        return token
