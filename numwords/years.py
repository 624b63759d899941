"""
Year reading styles that differ from plain cardinals.

    CenturyPairs   1984 → "nineteen eighty-four", 1900 → "उन्नीस सौ"
    DigitByDigit   2024 → "二零二四"

A style returns ``None`` for years it does not cover and the orchestrator
falls back to the ordinary cardinal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Protocol, Sequence

from .lexicon import SPACE, Conjunction, Joiner, RenderSettings

SpellNumber = Callable[[int], str]


class YearStyle(Protocol):
    def render(self, year: int, spell: SpellNumber, settings: RenderSettings) -> str | None: ...


@dataclass(frozen=True)
class CenturyPairs:
    """Split a four-digit year into hundreds and remainder.

    ranges:      years the compressed form applies to
    round_only:  only xx00 years are compressed ("nineteen hundred")
    high_words:  replacement words for the hundreds multiplier
    conjunction: placed before a single-digit remainder ("nineteen hundred and five")
    """

    ranges: tuple[range, ...]
    hundred: str
    linker: Joiner = SPACE
    joiner: Joiner = SPACE
    round_only: bool = False
    conjunction: Optional[Conjunction] = None
    high_words: Mapping[int, str] = field(default_factory=dict)

    def render(self, year: int, spell: SpellNumber, settings: RenderSettings) -> str | None:
        if not any(year in span for span in self.ranges):
            return None
        high, low = divmod(year, 100)
        if low and self.round_only:
            return None

        high_text = self.high_words.get(high) or spell(high)
        if low == 0:
            return self.linker.join(high_text, self.hundred)
        if low < 10:
            head = self.linker.join(high_text, self.hundred)
            if self.conjunction is not None and self.conjunction.applies(settings):
                return self.conjunction.join(head, spell(low))
            return self.joiner.join(head, spell(low))
        return self.joiner.join(high_text, spell(low))


@dataclass(frozen=True)
class DigitByDigit:
    """Read every digit of the year on its own."""

    digits: Sequence[str]
    separator: str = ""

    def render(self, year: int, spell: SpellNumber, settings: RenderSettings) -> str | None:
        return self.separator.join(self.digits[int(d)] for d in _decimal_digits(year))


_BLOCK_DIGITS = 18


def _decimal_digits(value: int) -> str:
    """``str(value)`` in blocks, so ints past the string-conversion limit still work."""
    blocks: list[str] = []
    while value >= 10**_BLOCK_DIGITS:
        value, block = divmod(value, 10**_BLOCK_DIGITS)
        blocks.append(f"{block:0{_BLOCK_DIGITS}d}")
    blocks.append(str(value))
    return "".join(reversed(blocks))
