"""Interval units and currency codes.

Both are decoded case-insensitively: PayPal is not consistent about the case
of these values across endpoints.
"""

from __future__ import annotations

from paypal_api.core.domain.codecs import UppercaseEnum, case_insensitive


class Frequency(UppercaseEnum):
    """An interval unit, i.e. every _n_ `DAY`."""

    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class Currency(UppercaseEnum):
    """ISO-4217 codes of the currencies supported by the REST API."""

    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CHF = "CHF"
    CNY = "CNY"
    CZK = "CZK"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    HUF = "HUF"
    ILS = "ILS"
    INR = "INR"
    JPY = "JPY"
    MXN = "MXN"
    MYR = "MYR"
    NOK = "NOK"
    NZD = "NZD"
    PHP = "PHP"
    PLN = "PLN"
    RUB = "RUB"
    SEK = "SEK"
    SGD = "SGD"
    THB = "THB"
    TWD = "TWD"
    USD = "USD"


FrequencyField = case_insensitive(Frequency)
CurrencyField = case_insensitive(Currency)
