"""
English — short scale, three-digit groups, hyphenated tens.

    1234            → one thousand two hundred thirty-four
    105 (+and)      → one hundred and five
    1984 (year)     → nineteen eighty-four
    2.50 USD        → two dollars and fifty cents
"""

from __future__ import annotations

from ..grouping import GroupingScheme
from ..lexicon import HYPHEN, ChunkLexicon, Conjunction, PlaceRule, RenderSettings, WordTable
from ..models import DecimalSeparatorStyle
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet, SubUnit
from ..scales import JoinPolicy, PluralCategory, ScaleTable, ScaleWord, one_other
from ..years import CenturyPairs

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: dict[int, str] = {
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
}

_TENS: dict[int, str] = {
    2: "twenty",
    3: "thirty",
    4: "forty",
    5: "fifty",
    6: "sixty",
    7: "seventy",
    8: "eighty",
    9: "ninety",
}

_SCALES: tuple[str, ...] = (
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
)

# "and" is British usage; it is off unless the caller asks for it
_AND = Conjunction("and", optional=True)


def _and_before_units(value: int, settings: RenderSettings) -> bool:
    return value < 100


def _currency(code: str, main: tuple[str, str], sub: tuple[str, str]) -> CurrencyInfo:
    def noun(singular: str, plural: str) -> ScaleWord:
        return ScaleWord(forms={PluralCategory.ONE: singular, PluralCategory.OTHER: plural})

    return CurrencyInfo(
        code=code,
        main=noun(*main),
        subunits=(SubUnit(noun(*sub)),),
        separator=Conjunction("and"),
    )


RULES = LocaleRuleSet(
    code="en",
    name="English",
    grouping=GroupingScheme(group_sizes=(3,), max_tiers=len(_SCALES) + 1),
    lexicon=ChunkLexicon(
        units=WordTable(_ONES),
        tens=WordTable(_TENS),
        places={100: PlaceRule("hundred")},
        tens_join=HYPHEN,
        conjunction=_AND,
    ),
    scales=ScaleTable(words=(None, *(ScaleWord.plain(word) for word in _SCALES))),
    joins=JoinPolicy(final_conjunction=_AND, final_conjunction_when=_and_before_units),
    classifier=one_other,
    zero="zero",
    negative_prefix="minus",
    decimal_words={DecimalSeparatorStyle.POINT: "point", DecimalSeparatorStyle.COMMA: "comma"},
    default_decimal=DecimalSeparatorStyle.POINT,
    era=EraMarkers(before="BC", after="AD"),
    year_style=CenturyPairs(
        ranges=(range(1100, 2000), range(2010, 2100)),
        hundred="hundred",
        conjunction=_AND,
    ),
    currencies={
        "USD": _currency("USD", ("dollar", "dollars"), ("cent", "cents")),
        "GBP": _currency("GBP", ("pound", "pounds"), ("penny", "pence")),
        "EUR": _currency("EUR", ("euro", "euros"), ("cent", "cents")),
    },
    default_currency="USD",
)
