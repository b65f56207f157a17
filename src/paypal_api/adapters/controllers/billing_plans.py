"""Controller: Billing Plans.

A plan holds payment definitions and merchant preferences. New plans are in
the `CREATED` state; set them to `ACTIVE` before creating agreements.
"""

from __future__ import annotations

from http import HTTPStatus

from paypal_api.adapters.controllers.base import PayPalController
from paypal_api.core.domain.models import (
    BillingPlan,
    BillingPlanList,
    Patch,
    PatchOperation,
    PlanState,
)
from paypal_api.core.domain.query import QueryParameters
from paypal_api.core.errors import ValidationError


class BillingPlans(PayPalController):
    resource = "payments/billing-plans"

    async def create(self, plan: BillingPlan) -> BillingPlan:
        if plan.type is None:
            raise ValidationError("required", "BillingPlan `type` value must not be `None`.")
        return await self.pipeline.post(self.path, body=plan, response_type=BillingPlan)

    async def list(
        self,
        state: PlanState | None = None,
        parameters: QueryParameters | None = None,
    ) -> BillingPlanList:
        """List plans, filtered by `state` (PayPal defaults to `CREATED`).

        `parameters` supports `page`, `page_size` and `total_count_required`.
        """

        params = (parameters or QueryParameters()).with_custom(status=state.value if state else None)
        return await self.pipeline.get(self.path, parameters=params, response_type=BillingPlanList)

    async def update(self, plan_id: str, patches: list[Patch]) -> HTTPStatus:
        return await self.pipeline.patch(self.endpoint(plan_id), body=patches)

    async def details(self, plan_id: str) -> BillingPlan:
        return await self.pipeline.get(self.endpoint(plan_id), response_type=BillingPlan)

    async def set_state(self, plan_id: str, state: PlanState) -> HTTPStatus:
        patch = Patch(op=PatchOperation.REPLACE, path="/", value={"state": state.value})
        return await self.update(plan_id, [patch])
