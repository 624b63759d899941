"""
LocaleRuleSet — the immutable bundle describing one language.

The engine is written once against this value; every language-specific
decision (grouping, word tables, classifiers, linkers, bridges, year
style, currencies) is a field holding data or a small strategy object.
Rule sets are built once per process and shared read-only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from .exceptions import UnknownCurrencyError
from .grouping import GroupingScheme
from .lexicon import SPACE, ChunkLexicon, Joiner, RenderSettings
from .models import (
    NEUTRAL_CONTEXT,
    ConversionOptions,
    DecimalSeparatorStyle,
    Gender,
    GrammaticalContext,
    OutputFormat,
)
from .scales import JoinPolicy, PluralClassifier, ScaleTable, ScaleWord, one_other
from .years import YearStyle


# ─── Currency ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class SubUnit:
    """A fractional denomination worth ``ratio`` of the smallest unit."""

    noun: ScaleWord
    ratio: int = 1


@dataclass(frozen=True)
class CurrencyInfo:
    """Unit names and joining rules for one currency.

    ``subunit_base`` is how many of the smallest denomination make one main
    unit (100 cents; 1 when the currency has no sub-units). Chinese yuan
    has two denominations, 角 (ratio 10) and 分 (ratio 1), out of 100.
    """

    code: str
    main: ScaleWord
    subunits: tuple[SubUnit, ...] = ()
    subunit_base: int = 100
    separator: Joiner = SPACE  # between main and sub-unit phrases
    gap_marker: Optional[str] = None  # 一元零五分
    whole_suffix: Optional[str] = None  # 一百元整

    def __post_init__(self) -> None:
        assert self.subunits or self.subunit_base == 1, "a currency without sub-units has base 1"


# ─── Era Markers ────────────────────────────────────────────────────


@dataclass(frozen=True)
class EraMarkers:
    """Before/after era words, their position and an optional linking word."""

    before: str
    after: str
    leads: bool = False  # 公元前四十四 rather than "forty-four BC"
    linker: Optional[str] = None  # word between the year and the marker (年)
    separator: str = " "

    def attach(self, year_text: str, marker: str) -> str:
        sep = self.separator
        if self.leads:
            tail = f"{sep}{self.linker}" if self.linker else ""
            return f"{marker}{sep}{year_text}{tail}"
        middle = f"{self.linker}{sep}" if self.linker else ""
        return f"{year_text}{sep}{middle}{marker}"


# ─── Rule Set ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class LocaleRuleSet:
    code: str
    name: str

    # ── Integer engine ──────────────────────────────────────────────
    grouping: GroupingScheme
    lexicon: ChunkLexicon
    scales: ScaleTable
    joins: JoinPolicy = field(default_factory=JoinPolicy)
    classifier: PluralClassifier = one_other
    default_gender: Optional[Gender] = None
    fraction_gender: Optional[Gender] = None  # gender of digits read after the separator

    # ── Fixed words ─────────────────────────────────────────────────
    zero: str = "zero"
    negative_prefix: str = "minus"
    decimal_words: Mapping[DecimalSeparatorStyle, str] = field(default_factory=dict)
    default_decimal: DecimalSeparatorStyle = DecimalSeparatorStyle.POINT
    word_separator: str = " "
    not_a_number: str = "Not a Number"
    infinity: str = "Infinity"
    negative_infinity: str = "Negative Infinity"

    # ── Years ───────────────────────────────────────────────────────
    era: EraMarkers = field(default_factory=lambda: EraMarkers(before="BC", after="AD"))
    year_style: Optional[YearStyle] = None
    zero_year: Optional[str] = None

    # ── Currency ────────────────────────────────────────────────────
    currencies: Mapping[str, CurrencyInfo] = field(default_factory=dict)
    default_currency: Optional[str] = None

    def currency(self, code: Optional[str] = None) -> CurrencyInfo:
        key = (code or self.default_currency or "").upper()
        if key not in self.currencies:
            raise UnknownCurrencyError(
                f"Locale {self.code!r} has no currency {key or '(none)'}",
                details={"locale": self.code, "currency": key, "available": sorted(self.currencies)},
            )
        return self.currencies[key]

    def number_context(self, options: ConversionOptions) -> GrammaticalContext:
        gender = options.gender or self.default_gender
        if gender is None:
            return NEUTRAL_CONTEXT
        return GrammaticalContext(gender=gender)

    def settings(self, options: ConversionOptions) -> RenderSettings:
        return RenderSettings(
            year=options.format == OutputFormat.YEAR,
            include_conjunction=options.include_conjunction,
            alternate_connector=options.alternate_connector,
        )

    def digit_word(self, digit: int, context: GrammaticalContext = NEUTRAL_CONTEXT) -> str:
        """Single digit as read after the decimal separator."""
        if digit == 0:
            return self.zero
        return self.lexicon.units.lookup(digit, context)

    def decimal_word(self, style: Optional[DecimalSeparatorStyle]) -> str:
        return self.decimal_words[style or self.default_decimal]

    def join_words(self, *words: str) -> str:
        return self.word_separator.join(w for w in words if w)
