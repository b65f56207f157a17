"""Base class of the resource controllers."""

from __future__ import annotations

from paypal_api.core.config import APIVersion
from paypal_api.core.domain.validation import MaxLength
from paypal_api.core.services.pipeline import RequestPipeline

NOTE_MAX_LENGTH = MaxLength(128)


class PayPalController:
    """Binds a resource path to the request pipeline.

    Subclasses set `resource` (e.g. `"payments/billing-plans"`); every request
    path is built as `{version}/{resource}/{suffix}`.
    """

    resource: str = ""

    def __init__(self, pipeline: RequestPipeline, version: APIVersion | None = None) -> None:
        self.pipeline = pipeline
        self.version = version or pipeline.config.version or APIVersion.V1

    @property
    def path(self) -> str:
        return f"{self.version.value}/{self.resource}/"

    def endpoint(self, *parts: str) -> str:
        return self.path + "/".join(part.strip("/") for part in parts if part)


def note_body(reason: str | None) -> dict[str, str]:
    """Body of the agreement state-change endpoints.

    Raises `ValidationError` when `reason` is longer than 128 characters.
    """

    if reason is None:
        return {}
    return {"note": NOTE_MAX_LENGTH(reason)}
