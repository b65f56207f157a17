"""Error taxonomy of the client.

Every failure the library raises derives from `PayPalError`, so callers can
catch the whole family or branch on the concrete variant:

- `ValidationError`: a value breaks a length/range/pattern constraint.
- `DecodingError`: a payload does not have the expected shape.
- `APIError`: PayPal answered with a non-2xx status.
- `AuthStateError`: an authenticated request was built without a token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from paypal_api.core.domain.models import ErrorDetail, LinkDescription


class PayPalError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PayPalError, ValueError):
    """A value failed a constraint at construction or decode time."""

    def __init__(self, constraint_name: str, reason: str) -> None:
        super().__init__(f"{constraint_name}: {reason}")
        self.constraint_name = constraint_name
        self.reason = reason


class DecodingError(PayPalError, ValueError):
    """A JSON payload did not match the expected type."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ErrorShapeMismatch(DecodingError):
    """A non-2xx JSON body matched none of the known error shapes."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(
            f"HTTP {status} error body matched no known PayPal error shape",
            value=body,
        )
        self.status = status
        self.body = body


class AuthStateError(PayPalError):
    """An authenticated request was attempted before any token existed."""


class APIError(PayPalError):
    """PayPal answered with a status code outside of 200...299."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.message}


class PayPalAPIError(APIError):
    """Structured error returned by the REST resources."""

    def __init__(
        self,
        status: int,
        *,
        name: str,
        message: str,
        debug_id: str | None = None,
        information_link: str | None = None,
        details: list[ErrorDetail] | None = None,
        links: list[LinkDescription] | None = None,
    ) -> None:
        super().__init__(f"{name}: {message}", status)
        self.name = name
        self.error_message = message
        self.debug_id = debug_id
        self.information_link = information_link
        self.details = details or []
        self.links = links or []

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["name"] = self.name
        if self.debug_id:
            result["debug_id"] = self.debug_id
        if self.details:
            result["details"] = [detail.model_dump() for detail in self.details]
        return result


class IdentityAPIError(APIError):
    """Error returned by the identity service (OAuth, userinfo)."""

    def __init__(self, status: int, *, error: str, error_description: str | None = None) -> None:
        super().__init__(f"{error}: {error_description}" if error_description else error, status)
        self.error = error
        self.error_description = error_description


class UnstructuredAPIError(APIError):
    """Error response whose body is not JSON."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(body or f"HTTP {status}", status)
        self.body = body
