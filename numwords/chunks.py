"""
Chunk renderer — spell one bounded digit group.

A chunk is decomposed into positions and each position is resolved
through the locale's tables:

    1234 (zh)  →  一千 | 二百 | 三十 | 四          → 一千二百三十四
    105  (vi)  →  một trăm | (linh) | năm          → một trăm linh năm
    123  (he)  →  מאה | עשרים | ושלושה              → מאה עשרים ושלושה
    21   (it)  →  venti + uno (elided)             → ventuno

Values below the lexicon's ``atomic_limit`` are looked up whole; larger
remainders are tens + units joined by the locale's tens joiner.
"""

from __future__ import annotations

from .lexicon import DEFAULT_SETTINGS, ChunkLexicon, RenderSettings
from .models import GrammaticalContext, RenderedChunk


def render_chunk(
    value: int,
    tier: int,
    lexicon: ChunkLexicon,
    context: GrammaticalContext,
    settings: RenderSettings = DEFAULT_SETTINGS,
    *,
    bound: int,
    leading: bool = False,
) -> RenderedChunk:
    """Render *value* (``0 <= value < bound``) at *tier*.

    A zero chunk renders as empty text: the group is silent, which is not
    the same as saying "zero". ``leading`` marks the most significant
    chunk of the number (Chinese shortens 一十五 to 十五 only there).
    """
    assert 0 <= value < bound, f"chunk value {value} outside [0, {bound})"
    if value == 0:
        return RenderedChunk(text="", scale_tier=tier, numeric_value=0)
    text = spell_chunk(value, lexicon, context, settings, leading=leading)
    return RenderedChunk(text=text, scale_tier=tier, numeric_value=value)


def spell_chunk(
    value: int,
    lexicon: ChunkLexicon,
    context: GrammaticalContext,
    settings: RenderSettings = DEFAULT_SETTINGS,
    leading: bool = False,
) -> str:
    if leading and value in lexicon.leading_atomic:
        return lexicon.leading_atomic[value]

    connector = lexicon.connector(settings)
    head: list[str] = []
    remainder = value
    gap = False

    # ── Hundreds / thousands positions ──────────────────────────────
    for place, rule in lexicon.place_rules():
        digit, remainder = divmod(remainder, place)
        if digit:
            if gap and connector:
                head.append(connector)
            head.append(rule.render(digit, lexicon.units, context))
            gap = False
        elif head:
            gap = True

    places_text = _join_all(head, lexicon)
    if not remainder:
        return places_text

    # ── Tens and units ──────────────────────────────────────────────
    rest = _below_hundred(remainder, lexicon, context, settings, has_higher=bool(head))
    if not head:
        return rest

    if remainder < 10:
        gap = True  # the tens position is silent
    if gap and connector:
        return lexicon.place_join.join(lexicon.place_join.join(places_text, connector), rest)

    conjunction = lexicon.conjunction
    if conjunction is not None and conjunction.applies(settings):
        if not lexicon.final_only or lexicon.is_single_word(remainder):
            return conjunction.join(places_text, rest)
    return lexicon.place_join.join(places_text, rest)


def _below_hundred(
    value: int,
    lexicon: ChunkLexicon,
    context: GrammaticalContext,
    settings: RenderSettings,
    has_higher: bool,
) -> str:
    variants = lexicon.unit_variants

    if value < lexicon.atomic_limit:
        if variants is not None and value < 10:
            word = variants.unit(value, 0, has_higher, settings, context)
            if word is not None:
                return word
        return lexicon.units.lookup(value, context, whole=not has_higher)

    tens, unit = divmod(value, 10)
    tens_word = lexicon.tens.lookup(tens, context)
    if not unit:
        return tens_word

    unit_word = variants.unit(unit, tens, has_higher, settings, context) if variants is not None else None
    if unit_word is None:
        unit_word = lexicon.units.lookup(unit, context)
    return lexicon.tens_join.join(tens_word, unit_word)


def _join_all(words: list[str], lexicon: ChunkLexicon) -> str:
    if not words:
        return ""
    text = words[0]
    for word in words[1:]:
        text = lexicon.place_join.join(text, word)
    return text
