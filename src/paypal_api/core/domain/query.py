"""Query-string parameters shared by the list endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Annotated
from urllib.parse import urlencode

from pydantic import AfterValidator
from pydantic.config import ConfigDict

from paypal_api.core.domain.codecs import ISO8601, PayPalModel, format_iso8601
from paypal_api.core.domain.validation import InRange

NonNegativeInt = Annotated[int, AfterValidator(InRange(minimum=0))]


def _query_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_iso8601(value)
    return str(value)


class QueryParameters(PayPalModel):
    """Optional paging, filtering and sorting values.

    Unset values are not sent. `custom` holds endpoint-specific keys and is
    appended after the standard ones.
    """

    model_config = ConfigDict(extra="forbid")

    count: NonNegativeInt | None = None
    start_id: str | None = None
    start_index: NonNegativeInt | None = None
    start_time: ISO8601 | None = None
    end_time: ISO8601 | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    page: NonNegativeInt | None = None
    page_size: NonNegativeInt | None = None
    total_count_required: bool | None = None
    custom: dict[str, str] | None = None

    def with_custom(self, **values: str | None) -> "QueryParameters":
        """Return a copy with `values` merged into `custom` (None removes a key)."""

        custom = dict(self.custom or {})
        for key, value in values.items():
            if value is None:
                custom.pop(key, None)
            else:
                custom[key] = value
        return self.model_copy(update={"custom": custom or None})

    def encode(self) -> str:
        pairs: list[tuple[str, str]] = []
        for name in type(self).model_fields:
            if name == "custom":
                continue
            value = getattr(self, name)
            if value is not None:
                pairs.append((name, _query_value(value)))
        for key, value in (self.custom or {}).items():
            pairs.append((key, value))
        return urlencode(pairs)


def encode_query(parameters: QueryParameters | Mapping[str, object] | None) -> str:
    if parameters is None:
        return ""
    if isinstance(parameters, QueryParameters):
        return parameters.encode()
    return urlencode([(key, _query_value(value)) for key, value in parameters.items() if value is not None])
