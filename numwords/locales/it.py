"""
Italian — words within a thousand run together, with vowel elision.

    21      → ventuno          (venti + uno)
    108     → centotto         (cento + otto)
    111     → centoundici      (elision only before uno and otto)
    23      → ventitré;  23000 → ventitremila
    1000    → mille;  2000 → duemila
    10**6   → un milione
    10**15  → un milione di miliardi
"""

from __future__ import annotations

from dataclasses import dataclass

from ..grouping import GroupingScheme
from ..lexicon import CONCAT, ChunkLexicon, Conjunction, ElidingJoin, PlaceRule, RenderSettings, TokenJoin, WordTable
from ..models import DecimalSeparatorStyle, GrammaticalContext, NounClass, WordForm
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet, SubUnit
from ..scales import JoinPolicy, PluralCategory, ScaleTable, ScaleWord, StackedScale, one_other

_UNITS: dict[int, str] = {
    1: "uno",
    2: "due",
    3: "tre",
    4: "quattro",
    5: "cinque",
    6: "sei",
    7: "sette",
    8: "otto",
    9: "nove",
    10: "dieci",
    11: "undici",
    12: "dodici",
    13: "tredici",
    14: "quattordici",
    15: "quindici",
    16: "sedici",
    17: "diciassette",
    18: "diciotto",
    19: "diciannove",
}

_TENS: dict[int, str] = {
    2: "venti",
    3: "trenta",
    4: "quaranta",
    5: "cinquanta",
    6: "sessanta",
    7: "settanta",
    8: "ottanta",
    9: "novanta",
}

_HUNDRED = "cento"

# "un" stands directly before a counted noun: un milione, un euro
_UN = {1: "un"}


@dataclass(frozen=True)
class ItalianUnits:
    """A compound ending in "tre" is accented (ventitré, centotré) unless fused into "mila"."""

    def unit(
        self, unit: int, tens: int, has_higher: bool, settings: RenderSettings, context: GrammaticalContext
    ) -> str | None:
        if unit == 3 and (tens or has_higher) and context.form != WordForm.CONSTRUCT:
            return "tré"
        return None


# Tens and bare "cento" lose their final vowel before uno and otto only
_JOIN = ElidingJoin(stems=frozenset([*_TENS.values(), _HUNDRED]), before=frozenset([_UNITS[1], _UNITS[8]]))


def _noun(singular: str, plural: str, **kwargs) -> ScaleWord:
    return ScaleWord(forms={PluralCategory.ONE: singular, PluralCategory.OTHER: plural}, **kwargs)


RULES = LocaleRuleSet(
    code="it",
    name="Italiano",
    grouping=GroupingScheme(group_sizes=(3,)),
    lexicon=ChunkLexicon(
        units=WordTable(
            _UNITS,
            by_noun_class={NounClass.SCALE_NOUN: _UN, NounClass.CURRENCY_MAIN: _UN, NounClass.CURRENCY_SUB: _UN},
        ),
        tens=WordTable(_TENS),
        places={100: PlaceRule(_HUNDRED, irregular={1: _HUNDRED}, linker=CONCAT)},
        tens_join=_JOIN,
        place_join=_JOIN,
        unit_variants=ItalianUnits(),
    ),
    scales=ScaleTable(
        words=(
            None,
            ScaleWord.plain(
                "mila", overrides={1: "mille"}, construct_for=frozenset({PluralCategory.OTHER}), linker=CONCAT
            ),
            _noun("milione", "milioni"),
            _noun("miliardo", "miliardi"),
        ),
        extension=StackedScale(period=2, anchor_tier=2, joiner=TokenJoin(" di "), anchor_leads=True),
    ),
    joins=JoinPolicy(tier_separators={1: ""}),
    classifier=one_other,
    zero="zero",
    negative_prefix="meno",
    decimal_words={DecimalSeparatorStyle.COMMA: "virgola", DecimalSeparatorStyle.POINT: "punto"},
    default_decimal=DecimalSeparatorStyle.COMMA,
    not_a_number="Non un numero",
    infinity="Infinito",
    negative_infinity="Infinito negativo",
    era=EraMarkers(before="a.C.", after="d.C."),
    currencies={
        "EUR": CurrencyInfo(
            code="EUR",
            main=_noun("euro", "euro"),
            subunits=(SubUnit(_noun("centesimo", "centesimi")),),
            separator=Conjunction("e"),
        ),
    },
    default_currency="EUR",
)
