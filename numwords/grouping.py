"""
Grouping engine — split an unsigned magnitude into scale-tier chunks.

    1234567  (3-digit groups)   → [567 @ tier 0, 234 @ tier 1, 1 @ tier 2]
    1234567  (Indian 3,2,2,...) → [567 @ tier 0, 34 @ tier 1, 12 @ tier 2]
    123456789 (myriad, 4-digit) → [6789 @ tier 0, 2345 @ tier 1, 1 @ tier 2]

Chunks come back least-significant first. Zero never reaches this module;
the orchestrator answers it before grouping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .exceptions import MagnitudeTooLarge


@dataclass(frozen=True)
class GroupingScheme:
    """Digits per tier, plus what happens past the last named tier.

    group_sizes:      digits in tier 0, 1, 2, ...; tiers past the tuple
                      reuse its last entry
    max_tiers:        number of tiers the locale can name; None when scale
                      words extend compositionally without limit
    absorb_overflow:  the top tier swallows every remaining digit and its
                      multiplier is spelled as a number of its own
                      (Hindi "दस शंख")
    """

    group_sizes: tuple[int, ...]
    max_tiers: Optional[int] = None
    absorb_overflow: bool = False

    def group_size(self, tier: int) -> int:
        if tier < len(self.group_sizes):
            return self.group_sizes[tier]
        return self.group_sizes[-1]

    def group_base(self, tier: int) -> int:
        return 10 ** self.group_size(tier)

    def place_value(self, tier: int) -> int:
        """Value of one unit at *tier* (1, 1000, 10**6 ... or 1, 10**3, 10**5 ...)."""
        return 10 ** sum(self.group_size(t) for t in range(tier))

    def is_top_tier(self, tier: int) -> bool:
        return self.max_tiers is not None and tier == self.max_tiers - 1


@dataclass(frozen=True)
class Chunk:
    """One group of digits. ``value`` exceeds the group base only for an absorbed top tier."""

    value: int
    tier: int
    place_value: int


def split_magnitude(magnitude: int, scheme: GroupingScheme) -> list[Chunk]:
    """Split *magnitude* into chunks, least-significant tier first.

    Raises:
        MagnitudeTooLarge: the magnitude needs more tiers than the scheme
            names and the scheme does not absorb overflow.
    """
    assert magnitude > 0, "zero and negative magnitudes are handled upstream"

    chunks: list[Chunk] = []
    remaining = magnitude
    tier = 0
    place = 1

    while remaining:
        if scheme.max_tiers is not None and tier >= scheme.max_tiers:
            raise MagnitudeTooLarge(
                f"{digit_count(magnitude)}-digit magnitude exceeds the largest scale word",
                details={
                    "digits": digit_count(magnitude),
                    "max_tiers": scheme.max_tiers,
                    "max_digits": _max_digits(scheme),
                },
            )

        if scheme.absorb_overflow and scheme.is_top_tier(tier):
            value, remaining = remaining, 0
        else:
            remaining, value = divmod(remaining, scheme.group_base(tier))

        chunks.append(Chunk(value=value, tier=tier, place_value=place))
        place *= scheme.group_base(tier)
        tier += 1

    return chunks


def recompose(chunks: list[Chunk]) -> int:
    """Inverse of ``split_magnitude``."""
    return sum(chunk.value * chunk.place_value for chunk in chunks)


def _max_digits(scheme: GroupingScheme) -> Optional[int]:
    if scheme.max_tiers is None or scheme.absorb_overflow:
        return None
    return sum(scheme.group_size(t) for t in range(scheme.max_tiers))


def digit_count(value: int) -> int:
    """Decimal digits in a positive int.

    ``len(str(value))`` is refused for ints past the interpreter's
    string-conversion limit (4300 digits by default), so the count comes
    from the bit length: it is either the estimate or one more.
    """
    estimate = value.bit_length() * 30103 // 100000
    return estimate + 1 if value >= 10**estimate else estimate
