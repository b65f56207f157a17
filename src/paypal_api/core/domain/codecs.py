"""Encode/decode strategies for values that are not plain JSON primitives.

- `FlexibleInt`: a number sent either as a JSON number or a numeric string.
- `DecimalString`: money values sent as strings, encoded with 2 decimal places
  (round-half-to-even).
- `ISO8601`: RFC 3339 timestamps with an offset.
- `DateOnly` / `TimelessDate`: calendar dates with no time component.
- `UppercaseEnum`: enums whose decode ignores case.

`translate_error` turns pydantic failures into this library's
`ValidationError`/`DecodingError`; `decode_as`, `decode_json` and the
`PayPalModel` constructor all go through it.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Any, TypeVar

import pydantic
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, TypeAdapter

from paypal_api.core.errors import DecodingError, PayPalError

T = TypeVar("T")
E = TypeVar("E", bound="UppercaseEnum")

_TWO_PLACES = Decimal("0.01")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_EPOCH = date(1970, 1, 1)


# =============================================================================
# Numbers
# =============================================================================


def parse_flexible_int(value: Any) -> int:
    """Accept a JSON number or a numeric string."""

    if isinstance(value, bool):
        raise DecodingError("Expected an integer, got a boolean", value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise DecodingError(f"Given value {value!r} not convertible to int", value=value)


def parse_decimal_string(value: Any) -> Decimal:
    """Accept a `Decimal`, an int or a numeric string that fits 2 decimal places."""

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or not isinstance(value, (str, int)):
        raise DecodingError(f"Given value {value!r} not convertible to decimal", value=value)
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise DecodingError(f"Given string {value!r} not convertible to decimal", value=value) from None
    if not result.is_finite():
        raise DecodingError(f"Given value {value!r} is not a finite decimal", value=value)
    try:
        result.quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN)
    except InvalidOperation:
        raise DecodingError(f"Given value {value!r} is too large to hold 2 decimal places", value=value) from None
    return result


def format_decimal(value: Decimal) -> str:
    """Round to exactly 2 fractional digits using banker's rounding."""

    return str(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_EVEN))


FlexibleInt = Annotated[int, BeforeValidator(parse_flexible_int)]
IntString = Annotated[int, BeforeValidator(parse_flexible_int), PlainSerializer(str, return_type=str)]
DecimalString = Annotated[
    Decimal,
    BeforeValidator(parse_decimal_string),
    PlainSerializer(format_decimal, return_type=str),
]


# =============================================================================
# Dates
# =============================================================================


def parse_iso8601(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise DecodingError(f"Given string {value!r} is not an ISO8601 date", value=value) from None
    else:
        raise DecodingError(f"Expected an ISO8601 string, got {value!r}", value=value)
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise DecodingError(f"ISO8601 date {value!r} has no offset", value=value)
    return parsed


def format_iso8601(value: datetime) -> str:
    if value.microsecond == 0:
        timespec = "seconds"
    elif value.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    text = value.isoformat(timespec=timespec)
    if value.utcoffset() == timedelta(0):
        text = text.rsplit("+", 1)[0] + "Z"
    return text


def parse_date_only(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise DecodingError(f"Given value {value!r} does not match yyyy-MM-dd", value=value)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise DecodingError(f"Given value {value!r} is not a calendar date", value=value) from None


def format_date_only(value: date) -> str:
    return value.strftime("%Y-%m-%d")


ISO8601 = Annotated[
    datetime,
    BeforeValidator(parse_iso8601),
    PlainSerializer(format_iso8601, return_type=str),
]
DateOnly = Annotated[
    date,
    BeforeValidator(parse_date_only),
    PlainSerializer(format_date_only, return_type=str),
]


class PayPalModel(BaseModel):
    """Base of the wire models.

    Unknown keys are ignored and fields accept both wire and python names. A
    failing constructor raises this library's `ValidationError`/`DecodingError`,
    never pydantic's own error.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except pydantic.ValidationError as exc:
            raise translate_error(exc, type(self)) from exc


class TimelessDate(PayPalModel):
    """A date with no time-of-day or time zone.

    Serialized as `{"date_no_time": "YYYY-MM-DD"}`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: DateOnly = Field(..., alias="date_no_time")

    @classmethod
    def parse(cls, value: str) -> "TimelessDate":
        return cls(date_no_time=value)

    @classmethod
    def from_timestamp(cls, timestamp: float) -> "TimelessDate":
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
        return cls(date_no_time=moment.date())

    @property
    def timestamp(self) -> float:
        """Seconds since the Unix epoch at midnight UTC."""

        return float((self.date - _EPOCH).days * 86_400)

    def __str__(self) -> str:
        return format_date_only(self.date)


# =============================================================================
# Enums
# =============================================================================


class UppercaseEnum(str, Enum):
    """String enum whose values are upper-case and whose decode ignores case."""

    @classmethod
    def decode(cls: type[E], raw: Any) -> E:
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise DecodingError(f"Cannot get `{cls.__name__}` case from value {raw!r}", value=raw)
        member = cls._value2member_map_.get(raw.upper())
        if member is None:
            raise DecodingError(f"Cannot get `{cls.__name__}` case from value '{raw}'", value=raw)
        return member  # type: ignore[return-value]

    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            return cls._value2member_map_.get(value.upper())
        return None


def case_insensitive(enum_cls: type[E]) -> Any:
    """Annotated type decoding `enum_cls` without regard to case."""

    return Annotated[enum_cls, BeforeValidator(enum_cls.decode)]


# =============================================================================
# Decoding entry points
# =============================================================================


def translate_error(exc: pydantic.ValidationError, tp: Any) -> PayPalError:
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        if isinstance(cause, PayPalError):
            return cause
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    name = getattr(tp, "__name__", repr(tp))
    return DecodingError(f"Cannot decode {name}: {location}: {first.get('msg', exc)}", value=first.get("input"))


def decode_as(tp: type[T] | Any, data: Any) -> T:
    """Validate python data (already parsed JSON) as `tp`."""

    try:
        return TypeAdapter(tp).validate_python(data)
    except pydantic.ValidationError as exc:
        raise translate_error(exc, tp) from exc


def decode_json(tp: type[T] | Any, body: bytes | str) -> T:
    """Parse and validate a JSON document as `tp`."""

    try:
        return TypeAdapter(tp).validate_json(body)
    except pydantic.ValidationError as exc:
        raise translate_error(exc, tp) from exc
