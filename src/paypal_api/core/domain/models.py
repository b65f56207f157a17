"""PayPal models (Pydantic v2).

Only a representative set of resources is modelled here: enough to cover
money amounts, date codecs, length/range-validated fields and the two error
shapes. Wire names are declared as aliases; models accept both the wire name
and the python name.

Note:
- Nested structures outside this set are kept as plain dicts.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, Field

from paypal_api.core.domain.codecs import (
    ISO8601,
    DecimalString,
    FlexibleInt,
    IntString,
    PayPalModel,
    TimelessDate,
)
from paypal_api.core.domain.frequency import CurrencyField, FrequencyField
from paypal_api.core.domain.validation import (
    TEN_DIGITS,
    TEN_DIGITS_TWO_DECIMALS,
    InRange,
    Optional17String,
    Optional127String,
    Optional128String,
    Pattern,
    String128,
)

PAYER_ID = Pattern(r"^[2-9A-HJ-NP-Z]{13}$", "payer_id")


# =============================================================================
# Shared
# =============================================================================


class LinkDescription(PayPalModel):
    """A HATEOAS link to a related resource."""

    href: str
    rel: str
    method: str | None = None


class CurrencyAmount(PayPalModel):
    """A currency and a value, serialized with 2 decimal places."""

    currency: CurrencyField
    value: DecimalString


class CurrencyCodeAmount(PayPalModel):
    currency_code: CurrencyField
    value: DecimalString


class PaymentSummary(PayPalModel):
    """The totals of a payment split by funding source."""

    paypal: CurrencyAmount | None = None
    other: CurrencyAmount | None = None


class PatchOperation(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class Patch(PayPalModel):
    """A JSON patch operation, see RFC 6902."""

    op: PatchOperation
    path: str
    value: Any = None
    from_: str | None = Field(default=None, alias="from")


# =============================================================================
# Auth
# =============================================================================


class OAuthToken(PayPalModel):
    """Response body of `POST /v1/oauth2/token`."""

    token_type: str = Field(..., min_length=1)
    access_token: str = Field(..., min_length=1)
    expires_in: Annotated[FlexibleInt, AfterValidator(InRange(minimum=0))] = Field(
        ...,
        description="Lifetime of the token in seconds.",
    )
    scope: str | None = None
    app_id: str | None = None
    nonce: str | None = None


class UserInfo(PayPalModel):
    """Identity details of the account that owns the access token."""

    user_id: str | None = None
    name: str | None = None
    payer_id: str | None = None
    email: str | None = None
    verified_account: bool | None = None
    emails: list[dict[str, Any]] = Field(default_factory=list)


# =============================================================================
# Errors
# =============================================================================


class ErrorDetail(PayPalModel):
    field: str | None = None
    issue: str


class PayPalErrorBody(PayPalModel):
    """Error shape returned by the REST resources."""

    name: str
    message: str
    debug_id: str | None = None
    information_link: str | None = None
    details: list[ErrorDetail] = Field(default_factory=list)
    links: list[LinkDescription] = Field(default_factory=list)


class IdentityErrorBody(PayPalModel):
    """Error shape returned by the identity service."""

    error: str
    error_description: str | None = None


# =============================================================================
# Payments
# =============================================================================


class PaymentItem(PayPalModel):
    """An item being purchased with its parent payment.

    `quantity` and `price` are sent as strings; `price` is rounded to 2
    decimal places on the wire.
    """

    quantity: Annotated[IntString, AfterValidator(TEN_DIGITS)]
    price: Annotated[DecimalString, AfterValidator(TEN_DIGITS_TWO_DECIMALS)]
    currency: CurrencyField
    sku: Optional127String = None
    name: Optional127String = None
    description: Optional127String = None
    tax: str | None = None


class Payment(PayPalModel):
    id: str | None = None
    intent: str | None = None
    state: str | None = None
    cart: str | None = None
    transactions: list[dict[str, Any]] = Field(default_factory=list)
    create_time: ISO8601 | None = None
    update_time: ISO8601 | None = None
    links: list[LinkDescription] = Field(default_factory=list)


class PaymentList(PayPalModel):
    """Response of `GET /v1/payments/payment`."""

    next_id: str | None = None
    payments: list[Payment] | None = None
    count: Annotated[FlexibleInt, AfterValidator(InRange(0, 20))] | None = Field(
        default=None,
        description="Number of items in this range of results (at most 20).",
    )


class RefundState(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class Refund(PayPalModel):
    """Refund details for a transaction."""

    id: Optional17String = None
    state: RefundState | None = None
    sale_id: str | None = None
    capture_id: str | None = None
    parent_payment: str | None = None
    create_time: ISO8601 | None = None
    update_time: ISO8601 | None = None
    links: list[LinkDescription] = Field(default_factory=list)
    amount: CurrencyAmount | None = None
    reason: str | None = None
    invoice_number: Optional127String = None
    description: str | None = None


class BalanceResponse(PayPalModel):
    """The current balance of an account."""

    payer_id: Annotated[str, AfterValidator(PAYER_ID)] | None = None
    available_balances: list[CurrencyCodeAmount] = Field(default_factory=list)
    pending_balances: list[CurrencyCodeAmount] = Field(default_factory=list)


# =============================================================================
# Billing
# =============================================================================


class PlanType(str, Enum):
    FIXED = "FIXED"
    INFINITE = "INFINITE"


class PlanState(str, Enum):
    CREATED = "CREATED"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "DELETED"


class PaymentDefinition(PayPalModel):
    """How often and for how long a customer is charged."""

    id: str | None = None
    name: String128
    type: str = Field(..., description="TRIAL or REGULAR.")
    frequency: FrequencyField
    frequency_interval: Annotated[FlexibleInt, AfterValidator(InRange(minimum=1))]
    cycles: Annotated[FlexibleInt, AfterValidator(InRange(minimum=0))]
    amount: CurrencyAmount
    charge_models: list[dict[str, Any]] = Field(default_factory=list)


class BillingPlan(PayPalModel):
    id: str | None = None
    name: Optional128String = None
    description: Optional128String = None
    type: PlanType | None = None
    state: PlanState | None = None
    payment_definitions: list[PaymentDefinition] = Field(default_factory=list)
    merchant_preferences: dict[str, Any] | None = None
    create_time: ISO8601 | None = None
    update_time: ISO8601 | None = None
    links: list[LinkDescription] = Field(default_factory=list)


class BillingPlanList(PayPalModel):
    plans: list[BillingPlan] = Field(default_factory=list)
    total_items: FlexibleInt | None = None
    total_pages: FlexibleInt | None = None
    links: list[LinkDescription] = Field(default_factory=list)


class AgreementState(str, Enum):
    ACTIVE = "Active"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"
    CREATED = "Created"
    PENDING = "Pending"
    REACTIVATED = "Reactivated"
    SUSPENDED = "Suspended"


class AgreementDetails(PayPalModel):
    outstanding_balance: CurrencyAmount | None = None
    cycles_remaining: FlexibleInt | None = None
    cycles_completed: FlexibleInt | None = None
    next_billing_date: ISO8601 | None = None
    last_payment_date: ISO8601 | None = None
    last_payment_amount: CurrencyAmount | None = None
    final_payment_date: ISO8601 | None = None
    failed_payment_count: FlexibleInt | None = None


class BillingAgreement(PayPalModel):
    """An agreement for a recurring PayPal or debit card payment."""

    id: Optional128String = None
    state: AgreementState | None = None
    links: list[LinkDescription] = Field(default_factory=list)
    name: Optional128String = None
    description: Optional128String = None
    start_date: ISO8601 | None = None
    agreement_details: AgreementDetails | None = None
    payer: dict[str, Any] | None = None
    shipping_address: dict[str, Any] | None = None
    override_merchant_preferences: dict[str, Any] | None = None
    override_charge_models: list[dict[str, Any]] | None = None
    plan: BillingPlan | None = None


class AgreementTransaction(PayPalModel):
    transaction_id: str | None = None
    status: str | None = None
    transaction_type: str | None = None
    amount: CurrencyAmount | None = None
    fee_amount: CurrencyAmount | None = None
    net_amount: CurrencyAmount | None = None
    payer_email: str | None = None
    payer_name: str | None = None
    time_stamp: ISO8601 | None = None
    time_zone: str | None = None


class InvoiceDate(PayPalModel):
    """Invoice dates are sent as date-only values."""

    invoice_date: TimelessDate | None = None
    due_date: TimelessDate | None = None
