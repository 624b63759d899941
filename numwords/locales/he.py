"""
Hebrew — gendered numerals, construct thousands, attached "ו".

    23      → עשרים ושלושה
    123     → מאה עשרים ושלושה
    300     → שלוש מאות                 (hundreds take the feminine digit)
    2000    → אלפיים                    (dual)
    3000    → שלושת אלפים               (construct state)
    1001    → אלף ואחד
    2.50 ILS → שני שקלים חדשים וחמישים אגורות
"""

from __future__ import annotations

from ..grouping import GroupingScheme
from ..lexicon import ChunkLexicon, Conjunction, PlaceRule, RenderSettings, WordTable
from ..models import DecimalSeparatorStyle, Gender, GrammaticalContext
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet, SubUnit
from ..scales import JoinPolicy, PluralCategory, ScaleTable, ScaleWord

_MASCULINE: dict[int, str] = {
    1: "אחד",
    2: "שניים",
    3: "שלושה",
    4: "ארבעה",
    5: "חמישה",
    6: "שישה",
    7: "שבעה",
    8: "שמונה",
    9: "תשעה",
    10: "עשרה",
    11: "אחד עשר",
    12: "שנים עשר",
    13: "שלושה עשר",
    14: "ארבעה עשר",
    15: "חמישה עשר",
    16: "שישה עשר",
    17: "שבעה עשר",
    18: "שמונה עשר",
    19: "תשעה עשר",
}

_FEMININE: dict[int, str] = {
    1: "אחת",
    2: "שתיים",
    3: "שלוש",
    4: "ארבע",
    5: "חמש",
    6: "שש",
    7: "שבע",
    8: "שמונה",
    9: "תשע",
    10: "עשר",
    11: "אחת עשרה",
    12: "שתים עשרה",
    13: "שלוש עשרה",
    14: "ארבע עשרה",
    15: "חמש עשרה",
    16: "שש עשרה",
    17: "שבע עשרה",
    18: "שמונה עשרה",
    19: "תשע עשרה",
}

# construct state: the number leans on the noun after it
_CONSTRUCT = {
    Gender.MASCULINE: {
        2: "שני",
        3: "שלושת",
        4: "ארבעת",
        5: "חמשת",
        6: "ששת",
        7: "שבעת",
        8: "שמונת",
        9: "תשעת",
        10: "עשרת",
    },
    Gender.FEMININE: {2: "שתי"},
}

_TENS: dict[int, str] = {
    2: "עשרים",
    3: "שלושים",
    4: "ארבעים",
    5: "חמישים",
    6: "שישים",
    7: "שבעים",
    8: "שמונים",
    9: "תשעים",
}

_VE = Conjunction("ו", attached=True)


def _thousands_category(value: int) -> PluralCategory:
    """אלף, אלפיים, שלושת..עשרת אלפים, then back to אלף from eleven."""
    if value == 1:
        return PluralCategory.ONE
    if value == 2:
        return PluralCategory.TWO
    if 3 <= value <= 10:
        return PluralCategory.FEW
    return PluralCategory.OTHER


def _dual_category(value: int) -> PluralCategory:
    if value == 1:
        return PluralCategory.ONE
    if value == 2:
        return PluralCategory.TWO
    return PluralCategory.OTHER


def _scale(word: str) -> ScaleWord:
    return ScaleWord(
        forms={PluralCategory.OTHER: word},
        gender=Gender.MASCULINE,
        classifier=_dual_category,
        overrides={1: word},
        construct_for=frozenset({PluralCategory.TWO}),
    )


def _currency_noun(singular: str, plural: str, gender: Gender, one: str) -> ScaleWord:
    # the noun comes first for exactly one: שקל חדש אחד
    return ScaleWord(
        forms={PluralCategory.ONE: singular, PluralCategory.OTHER: plural},
        gender=gender,
        classifier=_dual_category,
        overrides={1: f"{singular} {one}"},
        construct_for=frozenset({PluralCategory.TWO}),
    )


_LEXICON = ChunkLexicon(
    units=WordTable(_MASCULINE, gendered={Gender.FEMININE: _FEMININE}, construct=_CONSTRUCT),
    tens=WordTable(_TENS),
    places={
        100: PlaceRule(
            "מאות",
            irregular={1: "מאה", 2: "מאתיים"},
            digit_context=GrammaticalContext(gender=Gender.FEMININE),
        )
    },
    tens_join=_VE,
    conjunction=_VE,
    final_only=True,
)


def _ve_before_last_word(value: int, settings: RenderSettings) -> bool:
    return _LEXICON.is_single_word(value)


RULES = LocaleRuleSet(
    code="he",
    name="עברית",
    grouping=GroupingScheme(group_sizes=(3,), max_tiers=9),
    lexicon=_LEXICON,
    scales=ScaleTable(
        words=(
            None,
            ScaleWord(
                forms={PluralCategory.FEW: "אלפים", PluralCategory.OTHER: "אלף"},
                gender=Gender.MASCULINE,
                classifier=_thousands_category,
                overrides={1: "אלף", 2: "אלפיים"},
                construct_for=frozenset({PluralCategory.FEW}),
            ),
            _scale("מיליון"),
            _scale("מיליארד"),
            _scale("טריליון"),
            _scale("קוודריליון"),
            _scale("קווינטיליון"),
            _scale("סקסטיליון"),
            _scale("ספטיליון"),
        )
    ),
    joins=JoinPolicy(final_conjunction=_VE, final_conjunction_when=_ve_before_last_word),
    classifier=_dual_category,
    default_gender=Gender.MASCULINE,
    fraction_gender=Gender.FEMININE,
    zero="אפס",
    negative_prefix="מינוס",
    decimal_words={DecimalSeparatorStyle.POINT: "נקודה", DecimalSeparatorStyle.COMMA: "פסיק"},
    default_decimal=DecimalSeparatorStyle.POINT,
    not_a_number="לא מספר",
    infinity="אינסוף",
    negative_infinity="אינסוף שלילי",
    era=EraMarkers(before="לפנה״ס", after="לספירה"),
    currencies={
        "ILS": CurrencyInfo(
            code="ILS",
            main=_currency_noun("שקל חדש", "שקלים חדשים", Gender.MASCULINE, "אחד"),
            subunits=(SubUnit(_currency_noun("אגורה", "אגורות", Gender.FEMININE, "אחת")),),
            separator=_VE,
        ),
    },
    default_currency="ILS",
)
