"""Controller: Identity.

Errors from this service use the identity shape
(`{"error", "error_description"}`) rather than the REST one.
"""

from __future__ import annotations

from paypal_api.adapters.controllers.base import PayPalController
from paypal_api.core.domain.models import UserInfo


class Identity(PayPalController):
    resource = "identity/oauth2"

    async def info(self) -> UserInfo:
        """Profile of the account that owns the access token."""

        return await self.pipeline.get(
            self.endpoint("userinfo"),
            parameters={"schema": "paypalv1.1"},
            response_type=UserInfo,
        )
