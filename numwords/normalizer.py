"""
Turn heterogeneous numeric input into a canonical ``NumericValue``.

Accepted inputs:
    int              → exact
    float            → via repr(), so 0.1 stays "0.1"
    Decimal          → exact, including NaN / ±Infinity
    str              → "1234.5", "-1,000,000", "1_000", "1e3", "NaN", "-inf"

Everything else (None, bool, lists, unparsable strings, more than
``MAX_DIGITS`` digits on either side of the point) is rejected with
``None`` and the orchestrator substitutes the fallback string.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from .models import NonFinite, NumericValue, Sign

logger = logging.getLogger(__name__)

_NAN_WORDS = {"nan"}
_INFINITY_WORDS = {"inf", "infinity"}

# Digits allowed on either side of the decimal point; longer input is not a number
MAX_DIGITS = 10_000
_MAGNITUDE_LIMIT = 10**MAX_DIGITS


def normalize(value: object) -> NumericValue | NonFinite | None:
    """Normalize *value*; ``None`` means the input is not a number.

    Examples:
        normalize(-12)        → NumericValue(sign=NEGATIVE, integer_magnitude=12)
        normalize("3.50")     → NumericValue(integer_magnitude=3, fractional_digits="50")
        normalize(float("inf")) → NonFinite.POSITIVE_INFINITY
        normalize("twelve")   → None
    """
    # bool is an int subclass, but True is not a number anyone means to spell
    if isinstance(value, bool):
        logger.debug("Rejected boolean input %r", value)
        return None

    if isinstance(value, int):
        return _from_int(value)

    if isinstance(value, float):
        if math.isnan(value):
            return NonFinite.NOT_A_NUMBER
        if math.isinf(value):
            return NonFinite.POSITIVE_INFINITY if value > 0 else NonFinite.NEGATIVE_INFINITY
        return _from_decimal(Decimal(repr(value)))

    if isinstance(value, Decimal):
        return _from_decimal(value)

    if isinstance(value, str):
        return _from_string(value)

    logger.debug("Rejected input of type %s", type(value).__name__)
    return None


def _from_int(value: int) -> NumericValue | None:
    magnitude = abs(value)
    if magnitude >= _MAGNITUDE_LIMIT:
        logger.debug("Rejected %d-bit integer input", magnitude.bit_length())
        return None
    sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
    return NumericValue(sign=sign, integer_magnitude=magnitude)


def _from_string(raw: str) -> NumericValue | NonFinite | None:
    text = raw.strip().replace("_", "").replace(",", "")
    if not text:
        logger.debug("Rejected empty string input")
        return None

    unsigned = text.lstrip("+-").lower()
    if unsigned in _NAN_WORDS:
        return NonFinite.NOT_A_NUMBER
    if unsigned in _INFINITY_WORDS:
        return NonFinite.NEGATIVE_INFINITY if text.startswith("-") else NonFinite.POSITIVE_INFINITY

    try:
        parsed = Decimal(text)
    except InvalidOperation:
        logger.debug("Rejected unparsable string %r", raw)
        return None
    return _from_decimal(parsed)


def _from_decimal(value: Decimal) -> NumericValue | NonFinite | None:
    if value.is_nan():
        return NonFinite.NOT_A_NUMBER
    if value.is_infinite():
        return NonFinite.NEGATIVE_INFINITY if value.is_signed() else NonFinite.POSITIVE_INFINITY

    sign_bit, digits, exponent = value.as_tuple()
    if (value and value.adjusted() >= MAX_DIGITS) or -exponent > MAX_DIGITS:
        logger.debug("Rejected decimal input with exponent %d", value.adjusted())
        return None

    # Exponents are expanded arithmetically: "1.5E+3" and "15E2" both give 1500
    magnitude = int(value.copy_abs().to_integral_value(rounding=ROUND_DOWN))
    fraction_part = ""
    if exponent < 0:
        fraction_part = "".join(str(d) for d in digits)[exponent:].rjust(-exponent, "0")

    if magnitude == 0 and not fraction_part.strip("0"):
        return NumericValue()

    return NumericValue(
        sign=Sign.NEGATIVE if sign_bit else Sign.POSITIVE,
        integer_magnitude=magnitude,
        fractional_digits=fraction_part,
    )
