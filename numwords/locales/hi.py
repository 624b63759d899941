"""
Hindi — Indian grouping (3 digits, then 2), atomic words for 1–99.

    1,23,456        → एक लाख तेईस हज़ार चार सौ छप्पन
    10**18          → दस शंख             (शंख takes any multiplier)
    1900 (year)     → उन्नीस सौ
"""

from __future__ import annotations

from ..grouping import GroupingScheme
from ..lexicon import ChunkLexicon, Conjunction, PlaceRule, WordTable
from ..models import DecimalSeparatorStyle
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet, SubUnit
from ..scales import JoinPolicy, PluralCategory, ScaleTable, ScaleWord, one_other
from ..years import CenturyPairs

# 0–99 are lexical items in their own right; index == value
_WORDS_UNDER_100: tuple[str, ...] = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तैंतालीस", "चौवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सतासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानबे", "बानबे", "तिरानबे", "चौरानबे", "पंचानबे", "छियानवे", "सत्तानबे", "अठ्ठानवे", "निन्यानवे",
)  # fmt: skip

_HUNDRED = "सौ"

_SCALES = (
    None,
    ScaleWord.plain("हज़ार"),  # 10^3
    ScaleWord.plain("लाख"),  # 10^5
    ScaleWord.plain("करोड़"),  # 10^7
    ScaleWord.plain("अरब"),  # 10^9
    ScaleWord.plain("खरब"),  # 10^11
    ScaleWord.plain("नील"),  # 10^13
    ScaleWord.plain("पद्म"),  # 10^15
    ScaleWord.plain("शंख"),  # 10^17
)


def _noun(singular: str, plural: str) -> ScaleWord:
    return ScaleWord(forms={PluralCategory.ONE: singular, PluralCategory.OTHER: plural})


RULES = LocaleRuleSet(
    code="hi",
    name="हिन्दी",
    grouping=GroupingScheme(group_sizes=(3, 2), max_tiers=len(_SCALES), absorb_overflow=True),
    lexicon=ChunkLexicon(
        units=WordTable(dict(enumerate(_WORDS_UNDER_100))),
        tens=WordTable({}),
        places={100: PlaceRule(_HUNDRED)},
        atomic_limit=100,
    ),
    scales=ScaleTable(words=_SCALES),
    joins=JoinPolicy(),
    classifier=one_other,
    zero="शून्य",
    negative_prefix="ऋण",
    decimal_words={DecimalSeparatorStyle.POINT: "दशमलव", DecimalSeparatorStyle.COMMA: "अल्पविराम"},
    default_decimal=DecimalSeparatorStyle.POINT,
    not_a_number="अमान्य संख्या",
    infinity="अनंत",
    negative_infinity="ऋण अनंत",
    era=EraMarkers(before="ईसा पूर्व", after="ईस्वी"),
    year_style=CenturyPairs(ranges=(range(1100, 2000),), hundred=_HUNDRED, round_only=True),
    currencies={
        "INR": CurrencyInfo(
            code="INR",
            main=_noun("रुपया", "रुपये"),
            subunits=(SubUnit(_noun("पैसा", "पैसे")),),
            separator=Conjunction("और"),
        ),
    },
    default_currency="INR",
)
