"""Request pipeline.

`send` is the single path every controller goes through:
refresh the token if needed -> build -> dispatch -> decode or raise.
Nothing is retried: a failed request surfaces its error to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, TypeVar

import structlog

from paypal_api.core.config import Configuration
from paypal_api.core.domain.query import QueryParameters
from paypal_api.core.interfaces.transport import Transport
from paypal_api.core.logging import ClientEvents
from paypal_api.core.services.auth import TokenManager
from paypal_api.core.services.http import build_request, read_response

T = TypeVar("T")

Parameters = QueryParameters | Mapping[str, object] | None

log = structlog.get_logger(__name__)


class RequestPipeline:
    """Sends requests to the PayPal API on behalf of the controllers."""

    def __init__(
        self,
        config: Configuration,
        transport: Transport,
        tokens: TokenManager | None = None,
        *,
        log_api_error: bool = False,
    ) -> None:
        self.config = config
        self.transport = transport
        self.tokens = tokens or TokenManager(config, transport, log_api_error=log_api_error)
        self.log_api_error = log_api_error

    async def send(
        self,
        method: str,
        path: str,
        *,
        parameters: Parameters = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        response_type: type[T] | Any = HTTPStatus,
        requires_auth: bool = True,
    ) -> T:
        """Send a request and decode its response.

        Args:
            method: HTTP method.
            path: Path relative to the environment base URL (e.g. `v1/payments/payment`).
            parameters: Query-string values.
            headers: Extra headers.
            body: Request body; JSON when authenticated, form-encoded otherwise.
            response_type: Model (or any pydantic-compatible type) to decode a
                2xx body into. `HTTPStatus` returns the status without decoding.
            requires_auth: Attach the bearer token, refreshing it first if expired.

        Raises:
            APIError: On a non-2xx status.
            DecodingError: When the body does not match `response_type`.
        """

        authorization = None
        if requires_auth:
            token = await self.tokens.refresh_if_expired()
            authorization = token.authorization

        request = build_request(
            self.config,
            method,
            path,
            parameters=parameters,
            headers=headers,
            body=body,
            authorization=authorization,
            requires_auth=requires_auth,
        )
        log.debug(ClientEvents.API_REQUEST, method=request.method, url=request.url)
        response = await self.transport.send(request)
        return read_response(response, response_type, request=request, log_api_error=self.log_api_error)

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    async def get(self, path: str, *, parameters: Parameters = None, response_type: type[T] | Any = HTTPStatus) -> T:
        return await self.send("GET", path, parameters=parameters, response_type=response_type)

    async def post(
        self,
        path: str,
        *,
        body: Any = None,
        parameters: Parameters = None,
        response_type: type[T] | Any = HTTPStatus,
    ) -> T:
        return await self.send("POST", path, parameters=parameters, body=body, response_type=response_type)

    async def put(self, path: str, *, body: Any = None, response_type: type[T] | Any = HTTPStatus) -> T:
        return await self.send("PUT", path, body=body, response_type=response_type)

    async def patch(self, path: str, *, body: Any = None, response_type: type[T] | Any = HTTPStatus) -> T:
        return await self.send("PATCH", path, body=body, response_type=response_type)

    async def delete(self, path: str, *, response_type: type[T] | Any = HTTPStatus) -> T:
        return await self.send("DELETE", path, response_type=response_type)
