"""
Scale composer — attach scale words to rendered chunks and join them.

Flow for one integer magnitude:

    split_magnitude ──► chunks (tier 0 .. n)
          │
          ▼  most significant first
    ┌──────────────┐   classify(value) → ONE / TWO / FEW / MANY / OTHER
    │ count_noun   │   override table   → "mille", "אלפיים"
    │              │   linker           → "isang libo", "apat na raan"
    └──────┬───────┘
           ▼
    ┌──────────────┐   zero bridge      → "không trăm linh", "零"
    │ join_chunks  │   separator        → " " / "" per tier
    │              │   final conjunction→ "and", attached "ו", "at"
    └──────────────┘

Scale words past a locale's table are derived by ``StackedScale``
("nghìn tỷ", "万亿", "milione di miliardi"); a locale with neither a word
nor an extension raises ``MagnitudeTooLarge``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Protocol

from .chunks import render_chunk
from .exceptions import MagnitudeTooLarge
from .grouping import Chunk, split_magnitude
from .lexicon import SPACE, Conjunction, Joiner, RenderSettings
from .models import Gender, GrammaticalContext, NounClass, RenderedChunk, WordForm

if TYPE_CHECKING:
    from .rules import LocaleRuleSet


# ─── Plural Classification ──────────────────────────────────────────


class PluralCategory(str, Enum):
    ONE = "ONE"
    TWO = "TWO"  # dual
    FEW = "FEW"  # paucal
    MANY = "MANY"  # plural genitive
    OTHER = "OTHER"


PluralClassifier = Callable[[int], PluralCategory]


def one_other(value: int) -> PluralCategory:
    return PluralCategory.ONE if value == 1 else PluralCategory.OTHER


def invariant(value: int) -> PluralCategory:
    return PluralCategory.OTHER


def slavic(value: int) -> PluralCategory:
    """Last-two-digit / last-digit rule: 1, 21 → ONE; 2–4, 22 → FEW; 0, 5–20 → MANY."""
    if 11 <= value % 100 <= 19:
        return PluralCategory.MANY
    last = value % 10
    if last == 1:
        return PluralCategory.ONE
    if 2 <= last <= 4:
        return PluralCategory.FEW
    return PluralCategory.MANY


# ─── Scale Words ────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScaleWord:
    """A counted noun: a scale word ("тысяча") or a currency unit ("dollar").

    forms:          word per plural category; missing categories fall back
                    to OTHER
    gender:         gender the multiplier agrees with
    classifier:     overrides the locale's classifier for this noun
    overrides:      complete phrases for specific multipliers
    construct_for:  categories whose multiplier takes the construct form
    linker:         joins multiplier and noun
    """

    forms: Mapping[PluralCategory, str]
    gender: Optional[Gender] = None
    classifier: Optional[PluralClassifier] = None
    overrides: Mapping[int, str] = field(default_factory=dict)
    construct_for: frozenset[PluralCategory] = frozenset()
    linker: Joiner = SPACE

    @classmethod
    def plain(cls, word: str, **kwargs) -> ScaleWord:
        return cls(forms={PluralCategory.OTHER: word}, **kwargs)

    def form(self, category: PluralCategory) -> str:
        if category in self.forms:
            return self.forms[category]
        return self.forms[PluralCategory.OTHER]

    def classify(self, value: int, fallback: PluralClassifier) -> PluralCategory:
        return (self.classifier or fallback)(value)


@dataclass(frozen=True)
class StackedScale:
    """Derive scale words past the table by stacking a lower tier with an anchor.

    anchor_leads=False:  word(t) = word(t - period) + anchor
                         vi: nghìn tỷ, triệu tỷ, tỷ tỷ ...   zh: 万亿, 亿亿 ...
    anchor_leads=True:   word(t) = anchor + plural(word(t - period))
                         it: milione di milioni, milione di miliardi ...
    """

    period: int
    anchor_tier: int
    joiner: Joiner = SPACE
    anchor_leads: bool = False

    def extend(self, table: ScaleTable, tier: int) -> ScaleWord:
        # word(t) stacks once on word(t - period); walk down to a table word, then back up
        base, steps = tier, 0
        while base >= len(table.words):
            base -= self.period
            steps += 1
        word = table.word(base)
        anchor = table.word(self.anchor_tier)
        for _ in range(steps):
            word = self._stack(word, anchor)
        return word

    def _stack(self, lower: ScaleWord, anchor: ScaleWord) -> ScaleWord:
        if self.anchor_leads:
            tail = lower.form(PluralCategory.OTHER)
            forms = {cat: self.joiner.join(word, tail) for cat, word in anchor.forms.items()}
            return replace(anchor, forms=forms, overrides={})

        tail = anchor.form(PluralCategory.OTHER)
        forms = {cat: self.joiner.join(word, tail) for cat, word in lower.forms.items()}
        overrides = {n: self.joiner.join(word, tail) for n, word in lower.overrides.items()}
        return replace(lower, forms=forms, overrides=overrides)


@dataclass(frozen=True)
class ScaleTable:
    """Scale word per tier; index 0 (the units group) is None."""

    words: tuple[Optional[ScaleWord], ...]
    extension: Optional[StackedScale] = None

    def word(self, tier: int) -> ScaleWord:
        assert tier > 0, "the units group has no scale word"
        if tier < len(self.words):
            word = self.words[tier]
            assert word is not None
            return word
        if self.extension is not None:
            return self.extension.extend(self, tier)
        raise MagnitudeTooLarge(
            f"no scale word for tier {tier}",
            details={"tier": tier, "max_tier": len(self.words) - 1},
        )


# ─── Zero Bridging ──────────────────────────────────────────────────


class ZeroBridge(Protocol):
    """Spoken filler placed before a lower chunk after a silent stretch."""

    def bridge(self, piece: RenderedChunk, skipped: bool, settings: RenderSettings) -> RenderedChunk | None: ...


@dataclass(frozen=True)
class PaddedHundredsBridge:
    """Pad a small non-leading chunk with "zero hundred" (+ connector below ten).

    vi: 1001 → một nghìn | không trăm linh | một
    """

    zero: str
    hundred: str
    connector: str
    alternate_connector: Optional[str] = None

    def bridge(self, piece: RenderedChunk, skipped: bool, settings: RenderSettings) -> RenderedChunk | None:
        if piece.numeric_value >= 100:
            return None
        words = [self.zero, self.hundred]
        if piece.numeric_value < 10:
            use_alternate = settings.alternate_connector and self.alternate_connector
            words.append(self.alternate_connector if use_alternate else self.connector)
        return RenderedChunk(
            text=" ".join(words), scale_tier=piece.scale_tier, numeric_value=0, is_explicit_zero=True
        )


@dataclass(frozen=True)
class ZeroMarkerBridge:
    """Insert a single zero marker when a chunk's leading positions are empty.

    zh: 10001 → 一万 | 零 | 一;  100010000 → 一亿 | 零 | 一万
    """

    marker: str
    full_place: int  # a chunk at or above this value starts with a non-zero digit

    def bridge(self, piece: RenderedChunk, skipped: bool, settings: RenderSettings) -> RenderedChunk | None:
        if skipped or piece.numeric_value < self.full_place:
            return RenderedChunk(text=self.marker, scale_tier=piece.scale_tier, numeric_value=0, is_explicit_zero=True)
        return None


# ─── Join Policy ────────────────────────────────────────────────────


@dataclass(frozen=True)
class JoinPolicy:
    """How composed chunks meet each other.

    tier_separators:         separator after a chunk of the given tier,
                             overriding ``separator`` (it: "duemila" + "tre")
    final_conjunction:       placed before the units chunk when
                             ``final_conjunction_when(value, settings)``
    zero_bridge:             filler before chunks following a silent stretch
    """

    separator: str = " "
    tier_separators: Mapping[int, str] = field(default_factory=dict)
    final_conjunction: Optional[Conjunction] = None
    final_conjunction_when: Optional[Callable[[int, RenderSettings], bool]] = None
    zero_bridge: Optional[ZeroBridge] = None

    def separator_after(self, tier: int) -> str:
        return self.tier_separators.get(tier, self.separator)

    def wants_conjunction(self, piece: RenderedChunk, settings: RenderSettings) -> bool:
        conjunction = self.final_conjunction
        if conjunction is None or not conjunction.applies(settings):
            return False
        if piece.scale_tier != 0 or piece.is_explicit_zero:
            return False
        return self.final_conjunction_when is None or self.final_conjunction_when(piece.numeric_value, settings)


# ─── Composition ────────────────────────────────────────────────────


def noun_context(
    value: int, noun: ScaleWord, rules: LocaleRuleSet, noun_class: NounClass
) -> tuple[PluralCategory, GrammaticalContext]:
    """Plural category of *noun* after *value*, and the context its multiplier agrees with."""
    category = noun.classify(value, rules.classifier)
    context = GrammaticalContext(
        gender=noun.gender,
        form=WordForm.CONSTRUCT if category in noun.construct_for else WordForm.STANDALONE,
        noun_class=noun_class,
    )
    return category, context


def count_noun(
    value: int,
    noun: ScaleWord,
    rules: LocaleRuleSet,
    noun_class: NounClass,
    spell: Callable[[int, GrammaticalContext], str],
) -> str:
    """Spell "*value* *noun*" with the noun form and multiplier agreement it needs."""
    if value in noun.overrides:
        return noun.overrides[value]
    category, context = noun_context(value, noun, rules, noun_class)
    return noun.linker.join(spell(value, context), noun.form(category))


def compose_chunk(
    chunk: Chunk,
    rules: LocaleRuleSet,
    context: GrammaticalContext,
    settings: RenderSettings,
    leading: bool = False,
) -> RenderedChunk:
    """Render *chunk* through the chunk renderer and attach its scale word."""
    bound = rules.grouping.group_base(chunk.tier)

    if chunk.tier == 0 or chunk.value == 0:
        return render_chunk(chunk.value, chunk.tier, rules.lexicon, context, settings, bound=bound, leading=leading)

    def spell(value: int, agreement: GrammaticalContext) -> str:
        return render_chunk(value, chunk.tier, rules.lexicon, agreement, settings, bound=bound, leading=leading).text

    scale = rules.scales.word(chunk.tier)
    text = count_noun(chunk.value, scale, rules, NounClass.SCALE_NOUN, spell)
    return RenderedChunk(text=text, scale_tier=chunk.tier, numeric_value=chunk.value)


def compose_number(
    magnitude: int,
    rules: LocaleRuleSet,
    context: GrammaticalContext,
    settings: RenderSettings,
) -> str:
    """Spell a positive integer magnitude: group, render, compose, join.

    *context* governs the units group; higher groups agree with their
    scale word instead.

    An absorbed top tier spells its multiplier as a number of its own
    (दस शंख शंख). Those nested numbers are peeled off outermost first and
    folded back innermost first, so nesting depth never grows the stack.
    """
    nested: list[tuple[Chunk, ScaleWord, PluralCategory, list[RenderedChunk]]] = []

    while True:
        chunks = split_magnitude(magnitude, rules.grouping)
        top = chunks[-1]
        if top.value < rules.grouping.group_base(top.tier):
            break
        scale = rules.scales.word(top.tier)
        if top.value in scale.overrides:
            break
        lower = [compose_chunk(chunk, rules, context, settings) for chunk in reversed(chunks[:-1])]
        category, context = noun_context(top.value, scale, rules, NounClass.SCALE_NOUN)
        nested.append((top, scale, category, lower))
        magnitude = top.value

    composed = [
        compose_chunk(chunk, rules, context, settings, leading=chunk is top)
        for chunk in reversed(chunks)
    ]
    text = join_chunks(composed, rules.joins, settings)

    for top, scale, category, lower in reversed(nested):
        head = RenderedChunk(
            text=scale.linker.join(text, scale.form(category)),
            scale_tier=top.tier,
            numeric_value=top.value,
        )
        text = join_chunks([head, *lower], rules.joins, settings)
    return text


def join_chunks(composed: list[RenderedChunk], policy: JoinPolicy, settings: RenderSettings) -> str:
    """Join composed chunks (most significant first); empty chunks are skipped."""
    pieces: list[RenderedChunk] = []
    previous_tier: Optional[int] = None

    for piece in composed:
        if piece.is_empty:
            continue
        if previous_tier is not None and policy.zero_bridge is not None:
            skipped = previous_tier - piece.scale_tier > 1
            filler = policy.zero_bridge.bridge(piece, skipped, settings)
            if filler is not None:
                pieces.append(filler)
        pieces.append(piece)
        previous_tier = piece.scale_tier

    assert pieces, "a non-zero magnitude always has a non-empty chunk"

    text = pieces[0].text
    last = len(pieces) - 1
    for index in range(1, len(pieces)):
        piece = pieces[index]
        if index == last and policy.wants_conjunction(piece, settings):
            text = policy.final_conjunction.join(text, piece.text)
        else:
            text = f"{text}{policy.separator_after(pieces[index - 1].scale_tier)}{piece.text}"
    return text
