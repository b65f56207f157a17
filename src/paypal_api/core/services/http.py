"""Building blocks shared by the pipeline and the token manager.

- `build_request`: URL, query string, headers and encoded body.
- `read_response`: route a response to the model decoder or the error decoder.
"""

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, TypeVar
from urllib.parse import urlencode

import pydantic_core
import structlog

from paypal_api.core.config import Configuration
from paypal_api.core.domain.codecs import decode_json
from paypal_api.core.domain.query import QueryParameters, encode_query
from paypal_api.core.domain.requests import OutgoingRequest, TransportResponse
from paypal_api.core.errors import AuthStateError, DecodingError
from paypal_api.core.logging import ClientEvents
from paypal_api.core.services.error_decoder import decode_api_error

T = TypeVar("T")

log = structlog.get_logger(__name__)


def encode_json_body(body: Any) -> bytes:
    """Serialize models (by wire name, unset values dropped), dicts and lists."""

    return pydantic_core.to_json(body, by_alias=True, exclude_none=True)


def encode_form_body(body: Any) -> bytes:
    if isinstance(body, Mapping):
        pairs = [(key, str(value)) for key, value in body.items() if value is not None]
    else:
        pairs = [(key, str(value)) for key, value in pydantic_core.to_jsonable_python(body).items()]
    return urlencode(pairs).encode("ascii")


def build_request(
    config: Configuration,
    method: str,
    path: str,
    *,
    parameters: QueryParameters | Mapping[str, object] | None = None,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    authorization: str | None = None,
    basic_auth: tuple[str, str] | None = None,
    requires_auth: bool = True,
) -> OutgoingRequest:
    """Build the outgoing request for `path` under the configured environment.

    With `requires_auth`, `authorization` must hold `<type> <token>` and the
    body is sent as JSON. Without it the body is form-encoded (token exchange),
    with `basic_auth` credentials left to the transport.
    """

    querystring = encode_query(parameters)
    url = f"{config.base_url}/{path.lstrip('/')}"
    if querystring:
        url = f"{url}?{querystring}"

    request_headers: dict[str, str] = {"Accept": "application/json"}
    if headers:
        request_headers.update(headers)

    if requires_auth:
        if not authorization:
            raise AuthStateError("Attempted to make a PayPal request that requires auth before authenticating.")
        request_headers["Authorization"] = authorization

    content: bytes | None = None
    if body is not None:
        if requires_auth:
            content = encode_json_body(body)
            request_headers.setdefault("Content-Type", "application/json")
        else:
            content = encode_form_body(body)
            request_headers.setdefault("Content-Type", "application/x-www-form-urlencoded")

    return OutgoingRequest(
        method=method.upper(),
        url=url,
        headers=request_headers,
        body=content,
        auth=basic_auth,
    )


def read_response(
    response: TransportResponse,
    response_type: type[T] | Any,
    *,
    request: OutgoingRequest | None = None,
    log_api_error: bool = False,
) -> T:
    """Return the decoded result of a 2xx response or raise its typed error."""

    if not response.is_success:
        if log_api_error:
            log.warning(
                ClientEvents.API_ERROR,
                method=request.method if request else None,
                url=request.url if request else None,
                request_headers=request.redacted_headers() if request else None,
                status=response.status_code,
                content_type=response.content_type,
                body=response.text,
            )
        raise decode_api_error(response.status_code, response.content_type, response.body)

    if response_type is HTTPStatus:
        return HTTPStatus(response.status_code)  # type: ignore[return-value]
    if not response.body:
        raise DecodingError(f"HTTP {response.status_code} response has no body to decode")
    return decode_json(response_type, response.body)
