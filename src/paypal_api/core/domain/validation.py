"""Validated value wrappers.

Each constraint is a small callable attached to a type via `Annotated`, so
pydantic runs it whenever a model is built or decoded. The same constraint
can also be applied to a bare value with `validate_value`.

Optional variants (`Optional128String`, ...) accept `None` and only check the
constraint when a value is present.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import AfterValidator

from paypal_api.core.domain.codecs import decode_as
from paypal_api.core.errors import ValidationError


@dataclass(frozen=True)
class MaxLength:
    """String must be no longer than `limit` characters."""

    limit: int

    @property
    def name(self) -> str:
        return f"max_length_{self.limit}"

    def __call__(self, value: str) -> str:
        if len(value) > self.limit:
            raise ValidationError(
                self.name,
                f"value has a length of {len(value)}, the maximum is {self.limit}",
            )
        return value


@dataclass(frozen=True)
class InRange:
    """Integer must fall in the inclusive range [minimum, maximum]."""

    minimum: int | None = None
    maximum: int | None = None

    @property
    def name(self) -> str:
        low = "-inf" if self.minimum is None else str(self.minimum)
        high = "inf" if self.maximum is None else str(self.maximum)
        return f"in_range[{low},{high}]"

    def __call__(self, value: int) -> int:
        if self.minimum is not None and value < self.minimum:
            raise ValidationError(self.name, f"{value} is less than {self.minimum}")
        if self.maximum is not None and value > self.maximum:
            raise ValidationError(self.name, f"{value} is greater than {self.maximum}")
        return value


@dataclass(frozen=True)
class Pattern:
    """String must match `regex`.

    `label` names the constraint in errors, e.g. `pattern_payer_id`.
    """

    regex: str
    label: str

    @property
    def name(self) -> str:
        return f"pattern_{self.label}"

    def __call__(self, value: str) -> str:
        if not re.match(self.regex, value):
            raise ValidationError(self.name, f"'{value}' does not match {self.regex}")
        return value


@dataclass(frozen=True)
class DigitPattern:
    """Numeric value whose wire form has at most `digits` integer digits.

    Decimals are checked against their rounded wire form, so a value held with
    more precision in memory is accepted as long as it fits once rounded to
    `decimals` places.
    """

    digits: int
    decimals: int = 0

    @property
    def name(self) -> str:
        return f"digits_{self.digits}_{self.decimals}"

    @property
    def pattern(self) -> re.Pattern[str]:
        if self.decimals:
            return re.compile(rf"^[0-9]{{0,{self.digits}}}(\.[0-9]{{0,{self.decimals}}})?$")
        return re.compile(rf"^[0-9]{{0,{self.digits}}}$")

    def __call__(self, value: int | Decimal) -> int | Decimal:
        if isinstance(value, Decimal):
            exponent = Decimal(1).scaleb(-self.decimals)
            try:
                wire = str(value.quantize(exponent, rounding=ROUND_HALF_EVEN))
            except InvalidOperation:
                raise ValidationError(self.name, f"{value} has too many digits") from None
        else:
            wire = str(value)
        if not self.pattern.match(wire):
            raise ValidationError(self.name, f"'{wire}' does not match {self.pattern.pattern}")
        return value


def validate_value(tp: Any, value: Any) -> Any:
    """Build a validated value outside of a model.

    Raises `ValidationError` (or `DecodingError`) exactly like a model decode
    would.
    """

    return decode_as(tp, value)


String17 = Annotated[str, AfterValidator(MaxLength(17))]
String24 = Annotated[str, AfterValidator(MaxLength(24))]
String38 = Annotated[str, AfterValidator(MaxLength(38))]
String127 = Annotated[str, AfterValidator(MaxLength(127))]
String128 = Annotated[str, AfterValidator(MaxLength(128))]

Optional17String = String17 | None
Optional24String = String24 | None
Optional38String = String38 | None
Optional127String = String127 | None
Optional128String = String128 | None

TEN_DIGITS = DigitPattern(10)
TEN_DIGITS_TWO_DECIMALS = DigitPattern(10, 2)
