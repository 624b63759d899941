"""
Russian, Italian and Hebrew — agreement, plural classes, construct forms
and conjunctions, end to end through NumberToWords.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from numwords.converter import NumberToWords
from numwords.locales import load_locale
from numwords.models import ConversionOptions, DecimalSeparatorStyle, Gender, OutputFormat

RU = NumberToWords(load_locale("ru"))
IT = NumberToWords(load_locale("it"))
HE = NumberToWords(load_locale("he"))

CURRENCY = ConversionOptions(currency=True)
YEAR = ConversionOptions(format=OutputFormat.YEAR)


# ─── Russian ─────────────────────────────────────────────────────────


class TestRussian:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "ноль"),
            (1, "один"),
            (1_000, "одна тысяча"),
            (2_000, "две тысячи"),
            (21_000, "двадцать одна тысяча"),
            (1_000_000, "один миллион"),
            (345_678, "триста сорок пять тысяч шестьсот семьдесят восемь"),
        ],
    )
    def test_cardinals(self, value: int, expected: str) -> None:
        assert RU.convert(value) == expected

    def test_feminine_option(self) -> None:
        assert RU.convert(2, ConversionOptions(gender=Gender.FEMININE)) == "две"

    def test_default_decimal_word_is_comma(self) -> None:
        assert RU.convert(1.5) == "один запятая пять"
        assert RU.convert(1.5, ConversionOptions(decimal_separator=DecimalSeparatorStyle.POINT)) == "один точка пять"

    def test_rubles_and_kopecks(self) -> None:
        assert RU.convert(2.5, CURRENCY) == "два рубля пятьдесят копеек"
        assert RU.convert("1.01", CURRENCY) == "один рубль одна копейка"
        assert RU.convert("21.22", CURRENCY) == "двадцать один рубль двадцать две копейки"
        assert RU.convert(5, CURRENCY) == "пять рублей"

    def test_zero_rubles(self) -> None:
        assert RU.convert(0, CURRENCY) == "ноль рублей"

    def test_year_is_cardinal(self) -> None:
        assert RU.convert(1984, YEAR) == "одна тысяча девятьсот восемьдесят четыре"

    def test_fixed_words(self) -> None:
        assert RU.convert(float("nan")) == "Не число"
        assert RU.convert(-5) == "минус пять"
        assert RU.convert(float("inf")) == "Бесконечность"

    def test_overflow_past_septillion(self) -> None:
        assert RU.convert_detailed(10**27).error_code == "MAGNITUDE_TOO_LARGE"


# ─── Italian ─────────────────────────────────────────────────────────


class TestItalian:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "zero"),
            (21, "ventuno"),
            (1_000, "mille"),
            (1_001, "milleuno"),
            (2_000, "duemila"),
            (1_000_000, "un milione"),
            (3_000_000, "tre milioni"),
            (2_000_000_000, "due miliardi"),
            (10**12, "un milione di milioni"),
            (10**15, "un milione di miliardi"),
            (10**18, "un milione di milioni di milioni"),
        ],
    )
    def test_cardinals(self, value: int, expected: str) -> None:
        assert IT.convert(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (111, "centoundici"),
            (1_111, "millecentoundici"),
            (201, "duecentouno"),
            (23, "ventitré"),
            (23_000, "ventitremila"),
            (123_456, "centoventitremilaquattrocentocinquantasei"),
            (23_000_000, "ventitré milioni"),
        ],
    )
    def test_elision_and_accent_stay_local(self, value: int, expected: str) -> None:
        assert IT.convert(value) == expected

    def test_default_decimal_word_is_virgola(self) -> None:
        assert IT.convert(0.5) == "zero virgola cinque"

    def test_euro(self) -> None:
        assert IT.convert(1, CURRENCY) == "un euro"
        assert IT.convert(2.5, CURRENCY) == "due euro e cinquanta centesimi"
        assert IT.convert("1.01", CURRENCY) == "un euro e un centesimo"

    def test_era(self) -> None:
        assert IT.convert(-44, YEAR) == "quarantaquattro a.C."


# ─── Hebrew ──────────────────────────────────────────────────────────


class TestHebrew:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "אפס"),
            (1, "אחד"),
            (23, "עשרים ושלושה"),
            (200, "מאתיים"),
            (1_001, "אלף ואחד"),
            (2_000, "אלפיים"),
            (5_000, "חמשת אלפים"),
            (1_000_000, "מיליון"),
            (3_000_000, "שלושה מיליון"),
        ],
    )
    def test_cardinals(self, value: int, expected: str) -> None:
        assert HE.convert(value) == expected

    def test_feminine_option(self) -> None:
        options = ConversionOptions(gender=Gender.FEMININE)
        assert HE.convert(3, options) == "שלוש"
        assert HE.convert(21, options) == "עשרים ואחת"

    def test_shekels(self) -> None:
        assert HE.convert(1, CURRENCY) == "שקל חדש אחד"
        assert HE.convert(2.5, CURRENCY) == "שני שקלים חדשים וחמישים אגורות"
        assert HE.convert("1.01", CURRENCY) == "שקל חדש אחד ואגורה אחת"
        assert HE.convert(5, CURRENCY) == "חמישה שקלים חדשים"

    def test_decimal_and_negative(self) -> None:
        assert HE.convert(-1.5) == "מינוס אחד נקודה חמש"

    def test_digits_after_the_point_are_feminine(self) -> None:
        assert HE.convert(123.456) == "מאה עשרים ושלושה נקודה ארבע חמש שש"
        assert HE.convert(1.05) == "אחד נקודה אפס חמש"

    def test_year_with_era(self) -> None:
        options = ConversionOptions(format=OutputFormat.YEAR, include_era_suffix=True)
        assert HE.convert(1984, options) == "אלף תשע מאות שמונים וארבעה לספירה"
