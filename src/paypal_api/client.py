"""High-level client.

Wires configuration, token manager, pipeline and controllers together by
constructor injection. One instance shares a single token across all of its
requests.
"""

from __future__ import annotations

from types import TracebackType

from paypal_api.adapters.controllers import BillingAgreements, BillingPlans, Identity
from paypal_api.adapters.http_client import HttpxTransport, build_async_client
from paypal_api.core.config import Configuration, PayPalSettings
from paypal_api.core.interfaces.transport import Transport
from paypal_api.core.services.auth import TokenManager
from paypal_api.core.services.pipeline import RequestPipeline


class PayPalClient:
    """Entry point of the library.

    Example:
        async with PayPalClient.from_settings() as paypal:
            plan = await paypal.billing_plans.details("P-123")
    """

    def __init__(
        self,
        config: Configuration,
        *,
        transport: Transport | None = None,
        settings: PayPalSettings | None = None,
    ) -> None:
        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            self._owned_transport = HttpxTransport(build_async_client(settings))
            transport = self._owned_transport

        log_api_error = settings.log_api_error if settings else False
        self.config = config
        self.tokens = TokenManager(config, transport, log_api_error=log_api_error)
        self.pipeline = RequestPipeline(config, transport, self.tokens, log_api_error=log_api_error)

        self.billing_agreements = BillingAgreements(self.pipeline)
        self.billing_plans = BillingPlans(self.pipeline)
        self.identity = Identity(self.pipeline)

    @classmethod
    def from_settings(
        cls,
        settings: PayPalSettings | None = None,
        *,
        transport: Transport | None = None,
    ) -> "PayPalClient":
        """Build a client from `PAYPAL_*` environment variables (or `settings`)."""

        settings = settings or PayPalSettings()
        return cls(Configuration.from_settings(settings), transport=transport, settings=settings)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""

        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self) -> "PayPalClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
