"""
Scale composer tests — plural classes, stacked scale words, zero bridges
and the joins between composed chunks.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from numwords.exceptions import MagnitudeTooLarge
from numwords.grouping import Chunk
from numwords.lexicon import DEFAULT_SETTINGS, Conjunction, RenderSettings
from numwords.locales import load_locale
from numwords.models import NEUTRAL_CONTEXT, Gender, GrammaticalContext, RenderedChunk
from numwords.scales import (
    JoinPolicy,
    PluralCategory,
    ScaleWord,
    compose_chunk,
    compose_number,
    join_chunks,
    one_other,
    slavic,
)


def _compose(locale: str, magnitude: int, settings: RenderSettings = DEFAULT_SETTINGS) -> str:
    rules = load_locale(locale)
    context = GrammaticalContext(gender=rules.default_gender) if rules.default_gender else NEUTRAL_CONTEXT
    return compose_number(magnitude, rules, context, settings)


def _chunk(text: str, tier: int, value: int) -> RenderedChunk:
    return RenderedChunk(text=text, scale_tier=tier, numeric_value=value)


# ─── Plural Classification ───────────────────────────────────────────


class TestClassifiers:
    @pytest.mark.parametrize(
        "value, category",
        [
            (1, PluralCategory.ONE),
            (21, PluralCategory.ONE),
            (2, PluralCategory.FEW),
            (24, PluralCategory.FEW),
            (5, PluralCategory.MANY),
            (11, PluralCategory.MANY),
            (12, PluralCategory.MANY),
            (111, PluralCategory.MANY),
            (0, PluralCategory.MANY),
        ],
    )
    def test_slavic(self, value: int, category: PluralCategory) -> None:
        assert slavic(value) == category

    def test_one_other(self) -> None:
        assert one_other(1) == PluralCategory.ONE
        assert one_other(0) == PluralCategory.OTHER
        assert one_other(2) == PluralCategory.OTHER

    def test_missing_form_falls_back_to_other(self) -> None:
        word = ScaleWord(forms={PluralCategory.ONE: "cent", PluralCategory.OTHER: "cents"})
        assert word.form(PluralCategory.FEW) == "cents"
        assert word.form(PluralCategory.ONE) == "cent"

    def test_noun_classifier_overrides_locale(self) -> None:
        word = ScaleWord.plain("x", classifier=lambda n: PluralCategory.TWO)
        assert word.classify(5, one_other) == PluralCategory.TWO


# ─── Scale Tables ────────────────────────────────────────────────────


class TestStackedScales:
    def test_vietnamese_stacks_on_ty(self) -> None:
        scales = load_locale("vi").scales
        assert scales.word(3).form(PluralCategory.OTHER) == "tỷ"
        assert scales.word(4).form(PluralCategory.OTHER) == "nghìn tỷ"
        assert scales.word(5).form(PluralCategory.OTHER) == "triệu tỷ"
        assert scales.word(6).form(PluralCategory.OTHER) == "tỷ tỷ"
        assert scales.word(7).form(PluralCategory.OTHER) == "nghìn tỷ tỷ"

    def test_chinese_stacks_on_yi(self) -> None:
        scales = load_locale("zh").scales
        assert scales.word(3).form(PluralCategory.OTHER) == "万亿"
        assert scales.word(4).form(PluralCategory.OTHER) == "亿亿"

    def test_italian_anchor_leads(self) -> None:
        word = load_locale("it").scales.word(5)
        assert word.form(PluralCategory.ONE) == "milione di miliardi"
        assert word.form(PluralCategory.OTHER) == "milioni di miliardi"

    def test_table_without_extension_raises(self) -> None:
        with pytest.raises(MagnitudeTooLarge):
            load_locale("en").scales.word(17)


# ─── Composition ─────────────────────────────────────────────────────


class TestComposeNumber:
    def test_english(self) -> None:
        assert _compose("en", 1_234_567) == "one million two hundred thirty-four thousand five hundred sixty-seven"
        assert _compose("en", 1_000_001) == "one million one"

    def test_russian_agreement_with_scale_word(self) -> None:
        assert _compose("ru", 21_000) == "двадцать одна тысяча"
        assert _compose("ru", 2_000) == "две тысячи"
        assert _compose("ru", 5_000) == "пять тысяч"
        assert _compose("ru", 2_000_000) == "два миллиона"
        assert _compose("ru", 11_000_000) == "одиннадцать миллионов"

    def test_hebrew_overrides_and_construct(self) -> None:
        assert _compose("he", 1_000) == "אלף"
        assert _compose("he", 2_000) == "אלפיים"
        assert _compose("he", 3_000) == "שלושת אלפים"
        assert _compose("he", 10_000) == "עשרת אלפים"
        assert _compose("he", 11_000) == "אחד עשר אלף"
        assert _compose("he", 2_000_000) == "שני מיליון"

    def test_hebrew_final_conjunction_before_one_word(self) -> None:
        assert _compose("he", 1_001) == "אלף ואחד"
        assert _compose("he", 1_020) == "אלף ועשרים"
        assert _compose("he", 1_023) == "אלף עשרים ושלושה"

    def test_italian_mille_and_un_milione(self) -> None:
        assert _compose("it", 1_000) == "mille"
        assert _compose("it", 2_001) == "duemilauno"
        assert _compose("it", 1_000_000) == "un milione"
        assert _compose("it", 21_000_000) == "ventuno milioni"
        assert _compose("it", 10**15) == "un milione di miliardi"

    def test_filipino_linkers_on_scale_words(self) -> None:
        assert _compose("fil", 1_000) == "isang libo"
        assert _compose("fil", 400_000) == "apat na raang libo"
        assert _compose("fil", 1_005) == "isang libo at lima"

    def test_hindi_indian_scales(self) -> None:
        assert _compose("hi", 123_456) == "एक लाख तेईस हज़ार चार सौ छप्पन"
        assert _compose("hi", 10**7) == "एक करोड़"

    def test_hindi_top_tier_takes_any_multiplier(self) -> None:
        assert _compose("hi", 10**18) == "दस शंख"
        assert _compose("hi", 10**20) == "एक हज़ार शंख"
        assert _compose("hi", 10**35) == "दस शंख शंख"

    def test_hindi_deep_nesting_does_not_recurse(self) -> None:
        assert _compose("hi", 10**4000) == " ".join(["एक लाख"] + ["शंख"] * 235)


class TestZeroBridges:
    def test_chinese_marker_after_silent_tier(self) -> None:
        assert _compose("zh", 10_001) == "一万零一"
        assert _compose("zh", 100_000_001) == "一亿零一"
        assert _compose("zh", 100_010_000) == "一亿零一万"

    def test_chinese_no_marker_for_full_chunk(self) -> None:
        assert _compose("zh", 11_000_000) == "一千一百万"
        assert _compose("zh", 12_345) == "一万二千三百四十五"

    def test_chinese_leading_ten(self) -> None:
        assert _compose("zh", 100_000) == "十万"
        assert _compose("zh", 110_000) == "十一万"

    def test_vietnamese_padded_hundreds(self) -> None:
        assert _compose("vi", 1_001) == "một nghìn không trăm linh một"
        assert _compose("vi", 1_050) == "một nghìn không trăm năm mươi"
        assert _compose("vi", 1_100) == "một nghìn một trăm"
        assert _compose("vi", 1_000_001) == "một triệu không trăm linh một"

    def test_vietnamese_alternate_bridge(self) -> None:
        settings = RenderSettings(alternate_connector=True)
        assert _compose("vi", 1_001, settings) == "một nghìn không trăm lẻ một"

    def test_vietnamese_stacked_scale_in_number(self) -> None:
        assert _compose("vi", 10**12) == "một nghìn tỷ"

    def test_chinese_stacked_scale_far_past_the_table(self) -> None:
        assert _compose("zh", 10**4000) == "一" + "亿" * 500


class TestJoinChunks:
    def test_empty_chunks_are_skipped(self) -> None:
        composed = [_chunk("one million", 2, 1), _chunk("", 1, 0), _chunk("five", 0, 5)]
        assert join_chunks(composed, JoinPolicy(), DEFAULT_SETTINGS) == "one million five"

    def test_tier_separator(self) -> None:
        composed = [_chunk("duemila", 1, 2), _chunk("uno", 0, 1)]
        policy = JoinPolicy(tier_separators={1: ""})
        assert join_chunks(composed, policy, DEFAULT_SETTINGS) == "duemilauno"

    def test_final_conjunction_needs_settings_when_optional(self) -> None:
        composed = [_chunk("one thousand", 1, 1), _chunk("five", 0, 5)]
        policy = JoinPolicy(final_conjunction=Conjunction("and", optional=True))
        assert join_chunks(composed, policy, DEFAULT_SETTINGS) == "one thousand five"
        with_and = RenderSettings(include_conjunction=True)
        assert join_chunks(composed, policy, with_and) == "one thousand and five"

    def test_attached_conjunction(self) -> None:
        composed = [_chunk("אלף", 1, 1), _chunk("אחד", 0, 1)]
        policy = JoinPolicy(final_conjunction=Conjunction("ו", attached=True))
        assert join_chunks(composed, policy, DEFAULT_SETTINGS) == "אלף ואחד"

    def test_all_silent_is_a_contract_violation(self) -> None:
        with pytest.raises(AssertionError):
            join_chunks([_chunk("", 1, 0)], JoinPolicy(), DEFAULT_SETTINGS)


class TestComposeChunk:
    def test_routes_through_the_chunk_renderer(self) -> None:
        rules = load_locale("en")
        chunk = compose_chunk(Chunk(value=42, tier=1, place_value=1000), rules, NEUTRAL_CONTEXT, DEFAULT_SETTINGS)
        assert chunk.text == "forty-two thousand"
        assert chunk.numeric_value == 42

    def test_silent_chunk_has_no_scale_word(self) -> None:
        rules = load_locale("en")
        chunk = compose_chunk(Chunk(value=0, tier=2, place_value=10**6), rules, NEUTRAL_CONTEXT, DEFAULT_SETTINGS)
        assert chunk.is_empty
        assert chunk.scale_tier == 2

    @pytest.mark.parametrize("tier", [0, 1])
    def test_chunk_bound_is_enforced(self, tier: int) -> None:
        rules = load_locale("en")
        chunk = Chunk(value=1000, tier=tier, place_value=1000**tier)
        with pytest.raises(AssertionError):
            compose_chunk(chunk, rules, NEUTRAL_CONTEXT, DEFAULT_SETTINGS)
