"""
Filipino — the linker between a number and its noun depends on sound.

    vowel-final   isa + libo      → isang libo
    n-final       isang daan + libo → isang daang libo
    other         apat + daan     → apat na raan
    27            → dalawampu't pito
    105           → isang daan at lima
    1900 (year)   → labing siyam na raan
"""

from __future__ import annotations

from dataclasses import dataclass

from ..grouping import GroupingScheme
from ..lexicon import ChunkLexicon, Conjunction, PlaceRule, RenderSettings, TokenJoin, WordTable
from ..models import DecimalSeparatorStyle
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet, SubUnit
from ..scales import JoinPolicy, ScaleTable, ScaleWord, invariant
from ..years import CenturyPairs

_UNITS: dict[int, str] = {
    1: "isa",
    2: "dalawa",
    3: "tatlo",
    4: "apat",
    5: "lima",
    6: "anim",
    7: "pito",
    8: "walo",
    9: "siyam",
    10: "sampu",
    11: "labing-isa",
    12: "labing-dalawa",
    13: "labing-tatlo",
    14: "labing-apat",
    15: "labinlima",
    16: "labing-anim",
    17: "labimpito",
    18: "labing-walo",
    19: "labinsiyam",
}

# spelled apart when they multiply "daan" in a year: labing siyam na raan
_DESCRIPTIVE_TEENS: dict[int, str] = {
    11: "labing isa",
    12: "labing dalawa",
    13: "labing tatlo",
    14: "labing apat",
    15: "labing lima",
    16: "labing anim",
    17: "labing pito",
    18: "labing walo",
    19: "labing siyam",
}

_TENS: dict[int, str] = {
    2: "dalawampu",
    3: "tatlumpu",
    4: "apatnapu",
    5: "limampu",
    6: "animnapu",
    7: "pitumpu",
    8: "walumpu",
    9: "siyamnapu",
}

_SCALES: tuple[str, ...] = (
    "libo",
    "milyon",
    "bilyon",
    "trilyon",
    "kuwadrilyon",
    "kwintilyon",
    "sekstilyon",
    "septilyon",
)

_VOWELS = "aeiou"


@dataclass(frozen=True)
class FilipinoLinker:
    """Choose -ng / na between a number and the noun it counts.

    After "na", a noun starting with "d" softens to "r" (daan → raan).
    """

    def join(self, left: str, right: str) -> str:
        last = left[-1:].lower()
        if last in _VOWELS:
            return f"{left}ng {right}"
        if last == "n":
            return f"{left}g {right}"
        if right.startswith("d"):
            right = "r" + right[1:]
        return f"{left} na {right}"


_LINKER = FilipinoLinker()
_AT = Conjunction("at")


def _at_before_small_units(value: int, settings: RenderSettings) -> bool:
    return value < 100 and not settings.year


def _noun(word: str) -> ScaleWord:
    return ScaleWord.plain(word, linker=_LINKER)


RULES = LocaleRuleSet(
    code="fil",
    name="Filipino",
    grouping=GroupingScheme(group_sizes=(3,), max_tiers=len(_SCALES) + 1),
    lexicon=ChunkLexicon(
        units=WordTable(_UNITS),
        tens=WordTable(_TENS),
        places={100: PlaceRule("daan", linker=_LINKER)},
        tens_join=TokenJoin("'t "),
        conjunction=_AT,
    ),
    scales=ScaleTable(words=(None, *(_noun(word) for word in _SCALES))),
    joins=JoinPolicy(final_conjunction=_AT, final_conjunction_when=_at_before_small_units),
    classifier=invariant,
    zero="sero",
    negative_prefix="negatibo",
    decimal_words={DecimalSeparatorStyle.POINT: "punto", DecimalSeparatorStyle.COMMA: "koma"},
    default_decimal=DecimalSeparatorStyle.POINT,
    not_a_number="Hindi isang Numero",
    era=EraMarkers(before="BC", after="AD"),
    year_style=CenturyPairs(
        ranges=(range(1100, 2000),),
        hundred="daan",
        linker=_LINKER,
        round_only=True,
        high_words=_DESCRIPTIVE_TEENS,
    ),
    currencies={
        "PHP": CurrencyInfo(
            code="PHP",
            main=_noun("piso"),
            subunits=(SubUnit(_noun("sentimo")),),
            separator=_AT,
        ),
    },
    default_currency="PHP",
)
