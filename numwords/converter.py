"""
Format orchestrator — the top-level entry point.

Flow:
  ┌───────────┐
  │ raw input │   int / float / Decimal / str
  └─────┬─────┘
        │
  ┌─────▼─────┐
  │ Normalize │   → NumericValue | NaN | ±Infinity | invalid
  └─────┬─────┘
        │            NaN / invalid → fallback string
        │            ±Infinity     → locale's fixed words
  ┌─────▼─────┐
  │ Dispatch  │   YEAR  ─► century compression / cardinal + era marker
  │           │   CURRENCY ─► main + sub-unit amounts with unit names
  │           │   STANDARD ─► cardinal + fractional digits
  └─────┬─────┘
        │            zero short-circuits every mode
  ┌─────▼─────┐
  │  Compose  │   grouping → chunk renderer → scale composer
  └───────────┘

Design principles:
  - One NumberToWords per locale; it holds nothing but the rule set, so
    instances are safe to share between threads.
  - ``convert`` never raises for bad input or oversized magnitudes; it
    resolves to the fallback string. ``render`` raises the structured
    error instead.
  - Negativity is a prefix in STANDARD and CURRENCY modes and an era
    marker in YEAR mode, never both.
"""

from __future__ import annotations

import logging
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal
from typing import Optional

from .exceptions import InvalidNumberError, NumberConversionError
from .grouping import digit_count
from .lexicon import RenderSettings
from .models import (
    DEFAULT_OPTIONS,
    ConversionOptions,
    ConversionResult,
    GrammaticalContext,
    NonFinite,
    NounClass,
    NumericValue,
    OutputFormat,
)
from .normalizer import normalize
from .rules import CurrencyInfo, LocaleRuleSet
from .scales import ScaleWord, compose_number, count_noun

logger = logging.getLogger(__name__)


class NumberToWords:
    """Converts numbers to words for one locale.

    Usage:
        converter = NumberToWords(load_locale("en"))
        converter.convert(1234)                                  # "one thousand two hundred thirty-four"
        converter.convert("-5")                                  # "minus five"
        converter.convert(1.5, ConversionOptions(currency=True)) # "one dollar and fifty cents"
        converter.convert(1984, ConversionOptions(format=OutputFormat.YEAR))
    """

    def __init__(self, rules: LocaleRuleSet):
        self.rules = rules

    @property
    def locale(self) -> str:
        return self.rules.code

    # ─── Public API ─────────────────────────────────────────────────

    def convert(self, value: object, options: Optional[ConversionOptions] = None) -> str:
        """Spell *value*; failures resolve to the fallback string."""
        return self.convert_detailed(value, options).text

    def convert_detailed(self, value: object, options: Optional[ConversionOptions] = None) -> ConversionResult:
        """Like ``convert`` but reports whether the fallback was used and why."""
        options = options or DEFAULT_OPTIONS
        try:
            text = self.render(value, options)
        except NumberConversionError as exc:
            fallback = self._fallback(options)
            logger.warning(
                "Conversion of %s (%s) fell back to %r: [%s] %s",
                _preview(value),
                self.rules.code,
                fallback,
                exc.code,
                exc,
            )
            return ConversionResult(
                text=fallback,
                locale=self.rules.code,
                ok=False,
                error_code=exc.code,
                error_message=str(exc),
            )
        return ConversionResult(text=text, locale=self.rules.code)

    def render(self, value: object, options: Optional[ConversionOptions] = None) -> str:
        """Spell *value* or raise.

        Raises:
            InvalidNumberError: *value* is not a number, or is NaN.
            MagnitudeTooLarge: the locale has no scale word big enough.
            UnknownCurrencyError: ``options.currency_code`` is not defined.
        """
        options = options or DEFAULT_OPTIONS
        normalized = value if isinstance(value, (NumericValue, NonFinite)) else normalize(value)

        if normalized is None:
            raise InvalidNumberError(f"{_preview(value)} is not a number", details={"value": _preview(value)})
        if normalized is NonFinite.NOT_A_NUMBER:
            raise InvalidNumberError("NaN has no spoken form", details={"value": _preview(value)})
        if normalized is NonFinite.POSITIVE_INFINITY:
            return self.rules.infinity
        if normalized is NonFinite.NEGATIVE_INFINITY:
            return self.rules.negative_infinity

        return self.render_numeric(normalized, options)

    def render_numeric(self, number: NumericValue, options: ConversionOptions = DEFAULT_OPTIONS) -> str:
        if options.format == OutputFormat.YEAR:
            logger.debug("%s: year mode for %s", self.rules.code, number)
            return self._year(number, options)
        if options.currency:
            logger.debug("%s: currency mode for %s", self.rules.code, number)
            return self._currency(number, options)
        logger.debug("%s: standard mode for %s", self.rules.code, number)
        return self._standard(number, options)

    # ─── Standard ───────────────────────────────────────────────────

    def _standard(self, number: NumericValue, options: ConversionOptions) -> str:
        rules = self.rules
        if number.is_zero:
            return rules.zero

        context = rules.number_context(options)
        text = self._integer(number.integer_magnitude, context, rules.settings(options))

        # Fractional digits are read one at a time, never grouped
        fraction = number.trimmed_fraction()
        if fraction:
            if rules.fraction_gender is not None:
                context = context.evolve(gender=rules.fraction_gender)
            digits = [rules.digit_word(int(d), context) for d in fraction]
            text = rules.join_words(text, rules.decimal_word(options.decimal_separator), *digits)

        return self._signed(text, number, options)

    # ─── Currency ───────────────────────────────────────────────────

    def _currency(self, number: NumericValue, options: ConversionOptions) -> str:
        rules = self.rules
        currency = rules.currency(options.currency_code)
        main, sub = split_currency(number, currency, options.round_currency_subunit)
        settings = rules.settings(options)

        if main == 0 and sub == 0:
            plural = currency.main.form(currency.main.classify(0, rules.classifier))
            return rules.join_words(rules.zero, plural, currency.whole_suffix or "")

        main_text = self._amount(main, currency.main, NounClass.CURRENCY_MAIN, settings) if main else ""
        sub_text = self._subunits(sub, currency, settings, has_main=bool(main))

        if main_text and sub_text:
            text = currency.separator.join(main_text, sub_text)
        elif main_text:
            text = rules.join_words(main_text, currency.whole_suffix or "")
        else:
            text = sub_text

        return self._signed(text, number, options)

    def _subunits(self, amount: int, currency: CurrencyInfo, settings: RenderSettings, has_main: bool) -> str:
        """Spell the sub-unit amount across the currency's denominations."""
        phrases: list[str] = []
        remaining = amount
        gap = False

        for subunit in currency.subunits:
            count, remaining = divmod(remaining, subunit.ratio)
            if count:
                phrase = self._amount(count, subunit.noun, NounClass.CURRENCY_SUB, settings)
                if gap and currency.gap_marker:
                    phrase = self.rules.join_words(currency.gap_marker, phrase)
                phrases.append(phrase)
                gap = False
            elif has_main or phrases:
                gap = True

        return self.rules.join_words(*phrases)

    def _amount(self, amount: int, noun: ScaleWord, noun_class: NounClass, settings: RenderSettings) -> str:
        def spell(value: int, context: GrammaticalContext) -> str:
            return compose_number(value, self.rules, context, settings)

        return count_noun(amount, noun, self.rules, noun_class, spell)

    # ─── Year ───────────────────────────────────────────────────────

    def _year(self, number: NumericValue, options: ConversionOptions) -> str:
        rules = self.rules
        year = number.integer_magnitude  # fractional part ignored
        if year == 0:
            return rules.zero_year or rules.zero

        context = rules.number_context(options)
        settings = rules.settings(options)

        text = None
        if rules.year_style is not None:
            text = rules.year_style.render(year, lambda n: self._integer(n, context, settings), settings)
        if text is None:
            text = compose_number(year, rules, context, settings)

        if number.is_negative:
            return rules.era.attach(text, rules.era.before)
        if options.include_era_suffix:
            return rules.era.attach(text, rules.era.after)
        return text

    # ─── Helpers ────────────────────────────────────────────────────

    def _integer(self, magnitude: int, context: GrammaticalContext, settings: RenderSettings) -> str:
        if magnitude == 0:
            return self.rules.zero
        return compose_number(magnitude, self.rules, context, settings)

    def _signed(self, text: str, number: NumericValue, options: ConversionOptions) -> str:
        if not number.is_negative:
            return text
        prefix = options.negative_prefix if options.negative_prefix is not None else self.rules.negative_prefix
        return self.rules.join_words(prefix, text)

    def _fallback(self, options: ConversionOptions) -> str:
        if options.fallback_on_error is not None:
            return options.fallback_on_error
        return self.rules.not_a_number


def split_currency(number: NumericValue, currency: CurrencyInfo, round_subunit: bool) -> tuple[int, int]:
    """Split into (main, sub) amounts; the sub-unit is rounded half-up or truncated."""
    base = currency.subunit_base
    fraction = Decimal("0." + (number.fractional_digits or "0"))
    rounding = ROUND_HALF_UP if round_subunit else ROUND_DOWN
    sub = int((fraction * base).to_integral_value(rounding=rounding))
    main = number.integer_magnitude
    if sub >= base:
        main, sub = main + 1, sub - base
    return main, sub


def _preview(value: object, limit: int = 60) -> str:
    """Short repr for logs and error details."""
    magnitude = value.integer_magnitude if isinstance(value, NumericValue) else value
    if isinstance(magnitude, int) and magnitude.bit_length() > 4 * limit:
        return f"<{digit_count(magnitude)}-digit number>"
    text = repr(value)
    return text if len(text) <= limit else f"{text[:limit - 3]}..."
