"""
Normalizer tests — every accepted input type and the canonical zero.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from numwords.models import NonFinite, NumericValue, Sign
from numwords.normalizer import MAX_DIGITS, normalize


class TestIntegers:
    def test_positive(self) -> None:
        assert normalize(42) == NumericValue(integer_magnitude=42)

    def test_negative(self) -> None:
        value = normalize(-7)
        assert value.sign == Sign.NEGATIVE
        assert value.integer_magnitude == 7

    def test_huge_integer_is_exact(self) -> None:
        assert normalize(10**40 + 1).integer_magnitude == 10**40 + 1

    def test_bool_is_rejected(self) -> None:
        assert normalize(True) is None
        assert normalize(False) is None


    def test_integer_past_the_digit_limit_is_rejected(self) -> None:
        assert normalize(10**MAX_DIGITS) is None
        assert normalize(-(10**MAX_DIGITS)) is None
        assert normalize(10**MAX_DIGITS - 1).integer_magnitude == 10**MAX_DIGITS - 1


class TestFloats:
    def test_shortest_repr_is_used(self) -> None:
        value = normalize(0.1)
        assert value.integer_magnitude == 0
        assert value.fractional_digits == "1"

    def test_exponent_repr_is_expanded(self) -> None:
        assert normalize(1e20).integer_magnitude == 10**20

    def test_non_finite(self) -> None:
        assert normalize(float("nan")) is NonFinite.NOT_A_NUMBER
        assert normalize(float("inf")) is NonFinite.POSITIVE_INFINITY
        assert normalize(float("-inf")) is NonFinite.NEGATIVE_INFINITY


class TestDecimals:
    def test_exact_digits_are_kept(self) -> None:
        value = normalize(Decimal("12.340"))
        assert value.integer_magnitude == 12
        assert value.fractional_digits == "340"
        assert value.trimmed_fraction() == "34"

    def test_non_finite(self) -> None:
        assert normalize(Decimal("NaN")) is NonFinite.NOT_A_NUMBER
        assert normalize(Decimal("-Infinity")) is NonFinite.NEGATIVE_INFINITY


class TestStrings:
    def test_thousands_separators(self) -> None:
        value = normalize("1,234.50")
        assert value.integer_magnitude == 1234
        assert value.fractional_digits == "50"
        assert normalize("1_000_000").integer_magnitude == 1_000_000

    def test_whitespace_and_sign(self) -> None:
        value = normalize("  -12 ")
        assert value.sign == Sign.NEGATIVE
        assert value.integer_magnitude == 12
        assert normalize("+3").integer_magnitude == 3

    def test_scientific_notation(self) -> None:
        assert normalize("1e3").integer_magnitude == 1000
        small = normalize("1.5E-2")
        assert small.integer_magnitude == 0
        assert small.fractional_digits == "015"

    def test_large_exponent_is_expanded_arithmetically(self) -> None:
        assert normalize("1e5000").integer_magnitude == 10**5000
        assert normalize("-2.5e4300").integer_magnitude == 25 * 10**4299

    @pytest.mark.parametrize("text", ["1e20000", "1e-20000", "9" * 10_001], ids=["exponent", "fraction", "digits"])
    def test_past_the_digit_limit(self, text: str) -> None:
        assert normalize(text) is None

    def test_beyond_float_precision(self) -> None:
        value = normalize("12345678901234567890.05")
        assert value.integer_magnitude == 12345678901234567890
        assert value.fractional_digits == "05"

    @pytest.mark.parametrize(
        "text, marker",
        [
            ("NaN", NonFinite.NOT_A_NUMBER),
            ("inf", NonFinite.POSITIVE_INFINITY),
            ("Infinity", NonFinite.POSITIVE_INFINITY),
            ("-inf", NonFinite.NEGATIVE_INFINITY),
        ],
    )
    def test_non_finite_words(self, text: str, marker: NonFinite) -> None:
        assert normalize(text) is marker

    @pytest.mark.parametrize("text", ["", "   ", "twelve", "1.2.3", "--5"])
    def test_unparsable(self, text: str) -> None:
        assert normalize(text) is None


class TestCanonicalZero:
    @pytest.mark.parametrize("value", [0, "-0", "0.000", -0.0, Decimal("-0.00"), "0e5"])
    def test_zero_forms(self, value: object) -> None:
        zero = normalize(value)
        assert zero == NumericValue()
        assert zero.sign == Sign.POSITIVE
        assert zero.is_zero

    def test_fraction_only_is_not_zero(self) -> None:
        value = normalize("-0.5")
        assert not value.is_zero
        assert value.is_negative
        assert value.fractional_scale == 1


class TestOtherTypes:
    @pytest.mark.parametrize("value", [None, [1], {"n": 1}, object(), b"12"])
    def test_rejected(self, value: object) -> None:
        assert normalize(value) is None
