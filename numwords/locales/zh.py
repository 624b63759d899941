"""
Chinese (Simplified) — myriad grouping, 零 bridging, no spaces.

    10       → 十               (一十 inside larger numbers: 一百一十)
    1001     → 一千零一
    100000   → 十万
    10001    → 一万零一
    10**16   → 一亿亿
    2024 (year) → 二零二四
    1.05 CNY → 一元零五分
"""

from __future__ import annotations

from ..grouping import GroupingScheme
from ..lexicon import CONCAT, ChunkLexicon, PlaceRule, WordTable
from ..models import DecimalSeparatorStyle
from ..rules import CurrencyInfo, EraMarkers, LocaleRuleSet, SubUnit
from ..scales import JoinPolicy, ScaleTable, ScaleWord, StackedScale, ZeroMarkerBridge, invariant
from ..years import DigitByDigit

_LING = "零"
_DIGITS: tuple[str, ...] = ("零", "一", "二", "三", "四", "五", "六", "七", "八", "九")
_SHI = "十"

_UNITS = {d: _DIGITS[d] for d in range(1, 10)}
_TENS = {d: f"{_DIGITS[d]}{_SHI}" for d in range(1, 10)}
_LEADING_TEENS = {10: _SHI, **{10 + d: f"{_SHI}{_DIGITS[d]}" for d in range(1, 10)}}


def _unit(word: str) -> ScaleWord:
    return ScaleWord.plain(word, linker=CONCAT)


RULES = LocaleRuleSet(
    code="zh",
    name="中文",
    grouping=GroupingScheme(group_sizes=(4,)),
    lexicon=ChunkLexicon(
        units=WordTable(_UNITS),
        tens=WordTable(_TENS),
        places={1000: PlaceRule("千", linker=CONCAT), 100: PlaceRule("百", linker=CONCAT)},
        atomic_limit=10,
        tens_join=CONCAT,
        place_join=CONCAT,
        gap_connector=_LING,
        leading_atomic=_LEADING_TEENS,
    ),
    scales=ScaleTable(
        words=(None, _unit("万"), _unit("亿")),
        extension=StackedScale(period=2, anchor_tier=2, joiner=CONCAT),
    ),
    joins=JoinPolicy(separator="", zero_bridge=ZeroMarkerBridge(_LING, full_place=1000)),
    classifier=invariant,
    zero=_LING,
    negative_prefix="负",
    decimal_words={DecimalSeparatorStyle.POINT: "点", DecimalSeparatorStyle.COMMA: "逗号"},
    default_decimal=DecimalSeparatorStyle.POINT,
    word_separator="",
    not_a_number="不是一个数字",
    infinity="无穷大",
    negative_infinity="负无穷大",
    era=EraMarkers(before="公元前", after="公元", leads=True, linker="年", separator=""),
    year_style=DigitByDigit(_DIGITS),
    currencies={
        "CNY": CurrencyInfo(
            code="CNY",
            main=_unit("元"),
            subunits=(SubUnit(_unit("角"), ratio=10), SubUnit(_unit("分"), ratio=1)),
            separator=CONCAT,
            gap_marker=_LING,
            whole_suffix="整",
        ),
    },
    default_currency="CNY",
)
