"""Controller: Billing Agreements.

An agreement is created from an active billing plan and inherits its payment
definitions; the customer approves it through the returned links.

Note:
- The state-change endpoints (`bill_balance`, `cancel`, `reactivate`,
  `suspend`) reject reasons longer than 128 characters before any request is
  sent.
"""

from __future__ import annotations

from http import HTTPStatus

from paypal_api.adapters.controllers.base import PayPalController, note_body
from paypal_api.core.domain.models import (
    AgreementTransaction,
    BillingAgreement,
    CurrencyCodeAmount,
    Patch,
)
from paypal_api.core.domain.query import QueryParameters


class BillingAgreements(PayPalController):
    resource = "payments/billing-agreements"

    async def create(self, agreement: BillingAgreement) -> BillingAgreement:
        """Create an agreement (`201 Created`)."""

        return await self.pipeline.post(self.path, body=agreement, response_type=BillingAgreement)

    async def update(self, agreement_id: str, patches: list[Patch]) -> HTTPStatus:
        """Update the description, shipping address, start date, ... of an agreement."""

        return await self.pipeline.patch(self.endpoint(agreement_id), body={"patch_request": patches})

    async def get(self, agreement_id: str) -> BillingAgreement:
        return await self.pipeline.get(self.endpoint(agreement_id), response_type=BillingAgreement)

    async def bill_balance(self, agreement_id: str, reason: str | None = None) -> HTTPStatus:
        """Bill the outstanding balance of an agreement (`204 No Content`)."""

        body = note_body(reason)
        return await self.pipeline.post(self.endpoint(agreement_id, "bill-balance"), body=body)

    async def cancel(self, agreement_id: str, reason: str | None = None) -> HTTPStatus:
        body = note_body(reason)
        return await self.pipeline.post(self.endpoint(agreement_id, "cancel"), body=body)

    async def reactivate(self, agreement_id: str, reason: str | None = None) -> HTTPStatus:
        body = note_body(reason)
        return await self.pipeline.post(self.endpoint(agreement_id, "re-activate"), body=body)

    async def suspend(self, agreement_id: str, reason: str | None = None) -> HTTPStatus:
        body = note_body(reason)
        return await self.pipeline.post(self.endpoint(agreement_id, "suspend"), body=body)

    async def set_balance(self, agreement_id: str, amount: CurrencyCodeAmount) -> HTTPStatus:
        return await self.pipeline.post(self.endpoint(agreement_id, "set-balance"), body=amount)

    async def transactions(
        self,
        agreement_id: str,
        parameters: QueryParameters | None = None,
    ) -> list[AgreementTransaction]:
        """List the transactions of an agreement, optionally within `start_time`/`end_time`."""

        return await self.pipeline.get(
            self.endpoint(agreement_id, "transactions"),
            parameters=parameters,
            response_type=list[AgreementTransaction],
        )

    async def execute(self, agreement_id: str) -> BillingAgreement:
        """Execute an agreement after the customer approved it."""

        return await self.pipeline.post(
            self.endpoint(agreement_id, "agreement-execute"),
            response_type=BillingAgreement,
        )
