"""
Locale registry tests — lookup, caching and the rule sets themselves.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from numwords.exceptions import UnknownCurrencyError, UnknownLocaleError
from numwords.locales import available_locales, load_locale
from numwords.models import ConversionOptions, DecimalSeparatorStyle


class TestRegistry:
    def test_available_locales(self) -> None:
        assert available_locales() == ["en", "fil", "he", "hi", "it", "ru", "vi", "zh"]

    def test_rule_sets_are_shared(self) -> None:
        assert load_locale("ru") is load_locale("ru")

    @pytest.mark.parametrize("code", ["EN", "en-GB", "en_US", " en "])
    def test_codes_are_normalised(self, code: str) -> None:
        assert load_locale(code).code == "en"

    def test_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError) as exc_info:
            load_locale("xx")
        assert exc_info.value.code == "UNKNOWN_LOCALE"
        assert "en" in exc_info.value.details["available"]


class TestRuleSets:
    @pytest.mark.parametrize("code", available_locales())
    def test_every_locale_is_complete(self, code: str) -> None:
        rules = load_locale(code)
        assert rules.code == code
        assert rules.zero
        assert rules.currencies
        assert rules.default_currency in rules.currencies
        for style in DecimalSeparatorStyle:
            assert rules.decimal_word(style)

    @pytest.mark.parametrize("code", available_locales())
    def test_every_locale_spells_digits(self, code: str) -> None:
        rules = load_locale(code)
        context = rules.number_context(ConversionOptions())
        for digit in range(10):
            assert rules.digit_word(digit, context)

    def test_unknown_currency(self) -> None:
        with pytest.raises(UnknownCurrencyError) as exc_info:
            load_locale("ru").currency("USD")
        assert exc_info.value.details["available"] == ["RUB"]

    def test_currency_code_is_case_insensitive(self) -> None:
        assert load_locale("en").currency("gbp").code == "GBP"
