"""
Word tables and joining rules a locale hands to the chunk renderer.

A locale never branches inside the engine. It describes itself with:

    WordTable      → digit/teen/tens words with gender, construct and
                     counted-noun variants
    Joiner         → how two adjacent words meet: a token ("-", " ", "'t "),
                     an elision ("venti" + "uno" → "ventuno"), a conjunction
                     ("and", attached "ו"), or a linker chosen by sound
    PlaceRule      → hundreds / thousands positions inside one chunk
    UnitVariants   → context-dependent unit words (Vietnamese "mốt", "lăm")
    ChunkLexicon   → the bundle of the above for one locale

Everything here is frozen and built once per locale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

from .models import GrammaticalContext, NounClass, WordForm


# ─── Render Settings ────────────────────────────────────────────────


@dataclass(frozen=True)
class RenderSettings:
    """Per-call switches that reach below the orchestrator."""

    year: bool = False
    include_conjunction: bool = False
    alternate_connector: bool = False


DEFAULT_SETTINGS = RenderSettings()


# ─── Word Tables ────────────────────────────────────────────────────


@dataclass(frozen=True)
class WordTable:
    """Numeral words keyed by value, with grammatical variants.

    Lookup order:
        1. construct forms        (only when the word is the whole chunk)
        2. counted-noun variants  (only when the word is the whole chunk)
        3. gendered forms
        4. base form

    Construct and noun-class variants describe a number standing directly
    before its noun ("un milione", "שלושת אלפים"); inside a compound such
    as "ventuno milioni" the ordinary form is kept. Gender agreement
    applies everywhere ("двадцать одна тысяча").
    """

    base: Mapping[int, str]
    gendered: Mapping = field(default_factory=dict)  # Gender -> {value: word}
    construct: Mapping = field(default_factory=dict)  # Gender | None -> {value: word}
    by_noun_class: Mapping = field(default_factory=dict)  # NounClass -> {value: word}

    def lookup(self, value: int, context: GrammaticalContext, whole: bool = False) -> str:
        if whole:
            if context.form == WordForm.CONSTRUCT:
                forms = self.construct.get(context.gender) or self.construct.get(None) or {}
                if value in forms:
                    return forms[value]
            if context.noun_class != NounClass.NONE:
                forms = self.by_noun_class.get(context.noun_class, {})
                if value in forms:
                    return forms[value]
        if context.gender is not None:
            forms = self.gendered.get(context.gender, {})
            if value in forms:
                return forms[value]
        assert value in self.base, f"no word for {value}"
        return self.base[value]

    def __contains__(self, value: int) -> bool:
        return value in self.base


# ─── Joiners ────────────────────────────────────────────────────────


class Joiner(Protocol):
    """Combines two adjacent words into one string."""

    def join(self, left: str, right: str) -> str: ...


@dataclass(frozen=True)
class TokenJoin:
    token: str = " "

    def join(self, left: str, right: str) -> str:
        return f"{left}{self.token}{right}"


SPACE = TokenJoin(" ")
CONCAT = TokenJoin("")
HYPHEN = TokenJoin("-")


@dataclass(frozen=True)
class ElidingJoin:
    """Drop the left word's final vowel before certain right words.

    Only the exact words in ``stems`` elide, and only before a word in
    ``before``: "venti" + "otto" → "ventotto", "cento" + "uno" → "centuno",
    but "cento" + "undici" and "duecento" + "uno" stay whole.
    """

    stems: frozenset[str]
    before: frozenset[str]
    vowels: str = "aeiou"
    separator: str = ""

    def join(self, left: str, right: str) -> str:
        if left in self.stems and right in self.before and left[-1:] in self.vowels:
            left = left[:-1]
        return f"{left}{self.separator}{right}"


@dataclass(frozen=True)
class Conjunction:
    """A conjunction placed between two words.

    ``attached`` glues the token to the following word (Hebrew "ו").
    ``optional`` conjunctions only appear when the caller asks for them.
    """

    token: str
    attached: bool = False
    optional: bool = False
    separator: str = " "

    def join(self, left: str, right: str) -> str:
        tail = "" if self.attached else self.separator
        return f"{left}{self.separator}{self.token}{tail}{right}"

    def applies(self, settings: RenderSettings) -> bool:
        return not self.optional or settings.include_conjunction


# ─── Positions Inside a Chunk ───────────────────────────────────────


@dataclass(frozen=True)
class PlaceRule:
    """A hundreds or thousands position: irregular words, else digit + noun."""

    noun: str
    irregular: Mapping[int, str] = field(default_factory=dict)
    linker: Joiner = SPACE
    digit_context: Optional[GrammaticalContext] = None  # Hebrew "שלוש מאות" takes the feminine digit

    def render(self, digit: int, units: WordTable, context: GrammaticalContext) -> str:
        if digit in self.irregular:
            return self.irregular[digit]
        digit_word = units.lookup(digit, self.digit_context or context)
        return self.linker.join(digit_word, self.noun)


class UnitVariants(Protocol):
    """Replacement unit words that depend on the surrounding digits."""

    def unit(
        self, unit: int, tens: int, has_higher: bool, settings: RenderSettings, context: GrammaticalContext
    ) -> str | None: ...


# ─── Chunk Lexicon ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ChunkLexicon:
    """Everything the chunk renderer needs to spell one digit group.

    ``units`` covers every value below ``atomic_limit`` (1–19 for most
    locales, 1–99 for Hindi, 1–9 for Vietnamese and Chinese). ``tens`` is
    keyed by the tens digit.
    """

    units: WordTable
    tens: WordTable
    places: Mapping[int, PlaceRule]  # place value (100, 1000) -> rule
    atomic_limit: int = 20
    tens_join: Joiner = SPACE
    place_join: Joiner = SPACE
    conjunction: Optional[Conjunction] = None  # places → remainder ("one hundred and five")
    final_only: bool = False  # conjunction only before a one-word remainder
    gap_connector: Optional[str] = None  # bridges skipped zero positions ("linh", "零")
    alternate_gap_connector: Optional[str] = None
    leading_atomic: Mapping[int, str] = field(default_factory=dict)  # "十五" when the chunk leads
    unit_variants: Optional[UnitVariants] = None

    def place_rules(self) -> list[tuple[int, PlaceRule]]:
        return sorted(self.places.items(), reverse=True)

    def connector(self, settings: RenderSettings) -> str | None:
        if settings.alternate_connector and self.alternate_gap_connector:
            return self.alternate_gap_connector
        return self.gap_connector

    def is_single_word(self, value: int) -> bool:
        """True when *value* renders as one lexical item (no internal joins)."""
        if value < 100:
            return value < self.atomic_limit or value % 10 == 0
        place = max(p for p in self.places if p <= value)
        return value % place == 0
