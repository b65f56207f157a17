"""Resource controllers.

Each module wraps one PayPal resource and only calls
`RequestPipeline.send` with a path and the expected response type.
"""

from paypal_api.adapters.controllers.base import PayPalController
from paypal_api.adapters.controllers.billing_agreements import BillingAgreements
from paypal_api.adapters.controllers.billing_plans import BillingPlans
from paypal_api.adapters.controllers.identity import Identity

__all__ = [
    "BillingAgreements",
    "BillingPlans",
    "Identity",
    "PayPalController",
]
