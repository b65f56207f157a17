"""Maps a non-2xx response to a typed `APIError`.

Decision order is fixed:
1. Content type is not JSON -> `UnstructuredAPIError`.
2. Body matches the REST error shape -> `PayPalAPIError`.
3. Body matches the identity error shape -> `IdentityAPIError`.
Anything else is an `ErrorShapeMismatch`.
"""

from __future__ import annotations

from paypal_api.core.domain.codecs import decode_json
from paypal_api.core.domain.models import IdentityErrorBody, PayPalErrorBody
from paypal_api.core.errors import (
    APIError,
    DecodingError,
    ErrorShapeMismatch,
    IdentityAPIError,
    PayPalAPIError,
    UnstructuredAPIError,
)

JSON_MEDIA_TYPE = "application/json"


def is_json(content_type: str | None) -> bool:
    """True for `application/json`, with or without parameters (charset)."""

    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


def decode_api_error(status_code: int, content_type: str | None, body: bytes) -> APIError:
    text = body.decode("utf-8", errors="replace")
    if not is_json(content_type):
        return UnstructuredAPIError(status_code, text)

    try:
        structured = decode_json(PayPalErrorBody, body)
    except DecodingError:
        pass
    else:
        return PayPalAPIError(
            status_code,
            name=structured.name,
            message=structured.message,
            debug_id=structured.debug_id,
            information_link=structured.information_link,
            details=structured.details,
            links=structured.links,
        )

    try:
        identity = decode_json(IdentityErrorBody, body)
    except DecodingError:
        raise ErrorShapeMismatch(status_code, text) from None
    return IdentityAPIError(
        status_code,
        error=identity.error,
        error_description=identity.error_description,
    )
