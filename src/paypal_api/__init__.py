"""paypal-api - async, typed client for the PayPal REST API.

Layers:
- core: configuration, domain models/codecs and the request pipeline
- adapters: httpx transport and resource controllers
- client: `PayPalClient`, wiring both together
"""

from paypal_api.client import PayPalClient
from paypal_api.core.config import APIVersion, Configuration, Environment, PayPalSettings
from paypal_api.core.errors import (
    APIError,
    AuthStateError,
    DecodingError,
    ErrorShapeMismatch,
    IdentityAPIError,
    PayPalAPIError,
    PayPalError,
    UnstructuredAPIError,
    ValidationError,
)

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "APIVersion",
    "AuthStateError",
    "Configuration",
    "DecodingError",
    "Environment",
    "ErrorShapeMismatch",
    "IdentityAPIError",
    "PayPalAPIError",
    "PayPalClient",
    "PayPalError",
    "PayPalSettings",
    "UnstructuredAPIError",
    "ValidationError",
]
