"""Validated value wrappers: length, range and digit-pattern constraints."""

from decimal import Decimal
from typing import Annotated

import pytest
from pydantic import AfterValidator

from paypal_api.core.domain.validation import (
    TEN_DIGITS,
    TEN_DIGITS_TWO_DECIMALS,
    DigitPattern,
    InRange,
    MaxLength,
    Optional128String,
    Pattern,
    String17,
    String128,
    validate_value,
)
from paypal_api.core.errors import ValidationError

ItemCount = Annotated[int, AfterValidator(InRange(0, 20))]


@pytest.mark.parametrize("length", [0, 1, 64, 127, 128])
def test_string128_accepts_values_within_bound(length):
    value = "x" * length
    assert validate_value(String128, value) == value


@pytest.mark.parametrize("length", [129, 200])
def test_string128_rejects_values_over_bound(length):
    with pytest.raises(ValidationError) as info:
        validate_value(String128, "x" * length)
    assert info.value.constraint_name == "max_length_128"
    assert str(length) in info.value.reason


def test_string17_bound():
    assert validate_value(String17, "a" * 17) == "a" * 17
    with pytest.raises(ValidationError):
        validate_value(String17, "a" * 18)


def test_optional_variant_accepts_absence():
    assert validate_value(Optional128String, None) is None
    assert validate_value(Optional128String, "note") == "note"
    with pytest.raises(ValidationError):
        validate_value(Optional128String, "n" * 129)


def test_max_length_called_directly():
    check = MaxLength(3)
    assert check("abc") == "abc"
    with pytest.raises(ValidationError) as info:
        check("abcd")
    assert info.value.constraint_name == "max_length_3"


@pytest.mark.parametrize("count", [0, 1, 19, 20])
def test_in_range_accepts_bounds(count):
    assert validate_value(ItemCount, count) == count


@pytest.mark.parametrize("count", [-1, 21, 1000])
def test_in_range_rejects_outside(count):
    with pytest.raises(ValidationError) as info:
        validate_value(ItemCount, count)
    assert info.value.constraint_name == "in_range[0,20]"


def test_in_range_open_ended():
    at_least_one = InRange(minimum=1)
    assert at_least_one(10_000) == 10_000
    with pytest.raises(ValidationError):
        at_least_one(0)
    assert InRange(maximum=5).name == "in_range[-inf,5]"


def test_ten_digit_integer():
    assert TEN_DIGITS(9_999_999_999) == 9_999_999_999
    with pytest.raises(ValidationError):
        TEN_DIGITS(10_000_000_000)
    with pytest.raises(ValidationError):
        TEN_DIGITS(-1)


def test_ten_digit_decimal_checks_rounded_wire_form():
    assert TEN_DIGITS_TWO_DECIMALS(Decimal("8.455")) == Decimal("8.455")
    assert TEN_DIGITS_TWO_DECIMALS(Decimal("9999999999.99")) == Decimal("9999999999.99")
    with pytest.raises(ValidationError):
        TEN_DIGITS_TWO_DECIMALS(Decimal("12345678901.00"))
    with pytest.raises(ValidationError):
        TEN_DIGITS_TWO_DECIMALS(Decimal("-1.00"))


def test_digit_pattern_name_and_regex():
    pattern = DigitPattern(4, 1)
    assert pattern.name == "digits_4_1"
    assert pattern(Decimal("1234.5")) == Decimal("1234.5")
    with pytest.raises(ValidationError):
        pattern(Decimal("12345"))


def test_digit_pattern_rejects_decimal_beyond_precision():
    with pytest.raises(ValidationError) as info:
        TEN_DIGITS_TWO_DECIMALS(Decimal("1e30"))
    assert info.value.constraint_name == "digits_10_2"


def test_pattern_constraint():
    upper = Pattern(r"^[A-Z]{3}$", "upper3")
    assert upper("ABC") == "ABC"
    with pytest.raises(ValidationError) as info:
        upper("abc")
    assert info.value.constraint_name == "pattern_upper3"
    assert "abc" in info.value.reason
