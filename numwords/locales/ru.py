"""
Russian — three-digit groups, gendered one/two, three-form plurals.

    21 000   → двадцать одна тысяча        (тысяча is feminine)
    2 000 000 → два миллиона
    5 копеек, 2 копейки, 1 копейка         (sub-unit is feminine)
"""

from __future__ import annotations

from ..grouping import GroupingScheme
from ..lexicon import ChunkLexicon, PlaceRule, WordTable
from ..models import DecimalSeparatorStyle, Gender
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet, SubUnit
from ..scales import JoinPolicy, PluralCategory, ScaleTable, ScaleWord, slavic

_UNITS: dict[int, str] = {
    1: "один",
    2: "два",
    3: "три",
    4: "четыре",
    5: "пять",
    6: "шесть",
    7: "семь",
    8: "восемь",
    9: "девять",
    10: "десять",
    11: "одиннадцать",
    12: "двенадцать",
    13: "тринадцать",
    14: "четырнадцать",
    15: "пятнадцать",
    16: "шестнадцать",
    17: "семнадцать",
    18: "восемнадцать",
    19: "девятнадцать",
}

_GENDERED: dict[Gender, dict[int, str]] = {
    Gender.FEMININE: {1: "одна", 2: "две"},
    Gender.NEUTER: {1: "одно"},
}

_TENS: dict[int, str] = {
    2: "двадцать",
    3: "тридцать",
    4: "сорок",
    5: "пятьдесят",
    6: "шестьдесят",
    7: "семьдесят",
    8: "восемьдесят",
    9: "девяносто",
}

_HUNDREDS: dict[int, str] = {
    1: "сто",
    2: "двести",
    3: "триста",
    4: "четыреста",
    5: "пятьсот",
    6: "шестьсот",
    7: "семьсот",
    8: "восемьсот",
    9: "девятьсот",
}


def _noun(one: str, few: str, many: str, gender: Gender = Gender.MASCULINE) -> ScaleWord:
    return ScaleWord(
        forms={PluralCategory.ONE: one, PluralCategory.FEW: few, PluralCategory.MANY: many, PluralCategory.OTHER: many},
        gender=gender,
    )


_SCALES = (
    None,
    _noun("тысяча", "тысячи", "тысяч", Gender.FEMININE),
    _noun("миллион", "миллиона", "миллионов"),
    _noun("миллиард", "миллиарда", "миллиардов"),
    _noun("триллион", "триллиона", "триллионов"),
    _noun("квадриллион", "квадриллиона", "квадриллионов"),
    _noun("квинтиллион", "квинтиллиона", "квинтиллионов"),
    _noun("секстиллион", "секстиллиона", "секстиллионов"),
    _noun("септиллион", "септиллиона", "септиллионов"),
)


RULES = LocaleRuleSet(
    code="ru",
    name="Русский",
    grouping=GroupingScheme(group_sizes=(3,), max_tiers=len(_SCALES)),
    lexicon=ChunkLexicon(
        units=WordTable(_UNITS, gendered=_GENDERED),
        tens=WordTable(_TENS),
        places={100: PlaceRule("", irregular=_HUNDREDS)},
    ),
    scales=ScaleTable(words=_SCALES),
    joins=JoinPolicy(),
    classifier=slavic,
    default_gender=Gender.MASCULINE,
    zero="ноль",
    negative_prefix="минус",
    decimal_words={DecimalSeparatorStyle.COMMA: "запятая", DecimalSeparatorStyle.POINT: "точка"},
    default_decimal=DecimalSeparatorStyle.COMMA,
    not_a_number="Не число",
    infinity="Бесконечность",
    negative_infinity="Минус бесконечность",
    era=EraMarkers(before="до н. э.", after="н. э."),
    currencies={
        "RUB": CurrencyInfo(
            code="RUB",
            main=_noun("рубль", "рубля", "рублей"),
            subunits=(SubUnit(_noun("копейка", "копейки", "копеек", Gender.FEMININE)),),
        ),
    },
    default_currency="RUB",
)
