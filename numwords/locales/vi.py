"""
Vietnamese — three-digit groups with zero bridging and unit variants.

    105     → một trăm linh năm          ("lẻ" with alternate_connector)
    1001    → một nghìn không trăm linh một
    21      → hai mươi mốt
    15      → mười lăm
    2024 (year) → hai nghìn không trăm hai mươi tư
    10**12  → một nghìn tỷ                (scales stack on "tỷ")
"""

from __future__ import annotations

from dataclasses import dataclass

from ..grouping import GroupingScheme
from ..lexicon import ChunkLexicon, PlaceRule, RenderSettings, WordTable
from ..models import DecimalSeparatorStyle, GrammaticalContext
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet
from ..scales import JoinPolicy, PaddedHundredsBridge, ScaleTable, ScaleWord, StackedScale, invariant

_ZERO = "không"
_HUNDRED = "trăm"
_LINH = "linh"
_LE = "lẻ"

_UNITS: dict[int, str] = {
    1: "một",
    2: "hai",
    3: "ba",
    4: "bốn",
    5: "năm",
    6: "sáu",
    7: "bảy",
    8: "tám",
    9: "chín",
}

_TENS: dict[int, str] = {1: "mười", **{d: f"{word} mươi" for d, word in _UNITS.items() if d > 1}}


@dataclass(frozen=True)
class VietnameseUnits:
    """mốt (1 after twenty+), lăm (5 after ten+), tư (4 in years)."""

    def unit(
        self, unit: int, tens: int, has_higher: bool, settings: RenderSettings, context: GrammaticalContext
    ) -> str | None:
        if unit == 1 and tens >= 2:
            return "mốt"
        if unit == 5 and tens >= 1:
            return "lăm"
        if unit == 4 and settings.year and (tens >= 2 or (tens == 0 and has_higher)):
            return "tư"
        return None


RULES = LocaleRuleSet(
    code="vi",
    name="Tiếng Việt",
    grouping=GroupingScheme(group_sizes=(3,)),
    lexicon=ChunkLexicon(
        units=WordTable(_UNITS),
        tens=WordTable(_TENS),
        places={100: PlaceRule(_HUNDRED)},
        atomic_limit=10,
        gap_connector=_LINH,
        alternate_gap_connector=_LE,
        unit_variants=VietnameseUnits(),
    ),
    scales=ScaleTable(
        words=(None, ScaleWord.plain("nghìn"), ScaleWord.plain("triệu"), ScaleWord.plain("tỷ")),
        extension=StackedScale(period=3, anchor_tier=3),
    ),
    joins=JoinPolicy(zero_bridge=PaddedHundredsBridge(_ZERO, _HUNDRED, _LINH, _LE)),
    classifier=invariant,
    zero=_ZERO,
    negative_prefix="âm",
    decimal_words={DecimalSeparatorStyle.COMMA: "phẩy", DecimalSeparatorStyle.POINT: "chấm"},
    default_decimal=DecimalSeparatorStyle.COMMA,
    not_a_number="Không Phải Là Số",
    infinity="Vô Cực",
    negative_infinity="Âm Vô Cực",
    era=EraMarkers(before="Trước Công Nguyên", after="Sau Công Nguyên"),
    currencies={
        "VND": CurrencyInfo(code="VND", main=ScaleWord.plain("đồng"), subunit_base=1),
    },
    default_currency="VND",
)
