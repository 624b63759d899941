"""
Pydantic models for conversion inputs, options and results.

Everything the engine receives or returns crosses this boundary as a
frozen model. A ``NumericValue`` is produced once by the normalizer and
never mutated; options are validated when they are built, so the engine
itself only ever sees well-formed values.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Numeric Value ──────────────────────────────────────────────────


class Sign(str, Enum):
    """Sign of a normalized value. The magnitude itself is always unsigned."""

    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


class NonFinite(str, Enum):
    """Markers for inputs that never enter the grouping pipeline."""

    NOT_A_NUMBER = "NOT_A_NUMBER"
    POSITIVE_INFINITY = "POSITIVE_INFINITY"
    NEGATIVE_INFINITY = "NEGATIVE_INFINITY"


class NumericValue(BaseModel):
    """Canonical form of a finite number.

    Zero is ``integer_magnitude == 0`` with no fractional digits and a
    positive sign; the normalizer guarantees that canonical shape.
    """

    model_config = {"frozen": True}

    sign: Sign = Sign.POSITIVE
    integer_magnitude: int = Field(default=0, ge=0)
    fractional_digits: str = Field(default="", pattern=r"^[0-9]*$")

    @property
    def fractional_scale(self) -> int:
        return len(self.fractional_digits)

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return self.integer_magnitude == 0 and not self.trimmed_fraction()

    def trimmed_fraction(self) -> str:
        """Fractional digits without trailing zeros ("50" -> "5", "00" -> "")."""
        return self.fractional_digits.rstrip("0")


# ─── Grammatical Context ────────────────────────────────────────────


class Gender(str, Enum):
    MASCULINE = "MASCULINE"
    FEMININE = "FEMININE"
    NEUTER = "NEUTER"


class WordForm(str, Enum):
    """Standalone numerals versus the construct state used before a noun."""

    STANDALONE = "STANDALONE"
    CONSTRUCT = "CONSTRUCT"


class NounClass(str, Enum):
    """What the number is counting, if anything."""

    NONE = "NONE"
    CURRENCY_MAIN = "CURRENCY_MAIN"
    CURRENCY_SUB = "CURRENCY_SUB"
    SCALE_NOUN = "SCALE_NOUN"


class GrammaticalContext(BaseModel):
    """Agreement attributes the chunk renderer resolves word forms against.

    ``gender=None`` means the locale's numerals carry no gender here, and
    the renderer uses the base table.
    """

    model_config = {"frozen": True}

    gender: Optional[Gender] = None
    form: WordForm = WordForm.STANDALONE
    noun_class: NounClass = NounClass.NONE

    def evolve(self, **changes) -> GrammaticalContext:
        return self.model_copy(update=changes)


NEUTRAL_CONTEXT = GrammaticalContext()


# ─── Rendered Chunk ─────────────────────────────────────────────────


class RenderedChunk(BaseModel):
    """Words for one digit group, before or after its scale word is attached.

    ``text == ""`` means the group is silent (its value is zero).
    ``is_explicit_zero`` marks a group whose zero is spoken aloud.
    """

    model_config = {"frozen": True}

    text: str
    scale_tier: int = Field(ge=0)
    numeric_value: int = Field(ge=0)
    is_explicit_zero: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.text


# ─── Options ────────────────────────────────────────────────────────


class OutputFormat(str, Enum):
    STANDARD = "STANDARD"
    YEAR = "YEAR"


class DecimalSeparatorStyle(str, Enum):
    COMMA = "COMMA"
    POINT = "POINT"


class ConversionOptions(BaseModel):
    """Per-call configuration.

    ``None`` for ``decimal_separator``, ``negative_prefix``,
    ``fallback_on_error`` and ``currency_code`` means "use the locale's
    default".
    """

    model_config = {"frozen": True}

    currency: bool = False
    format: OutputFormat = OutputFormat.STANDARD
    decimal_separator: Optional[DecimalSeparatorStyle] = None
    include_era_suffix: bool = False
    round_currency_subunit: bool = False
    negative_prefix: Optional[str] = None
    fallback_on_error: Optional[str] = None
    currency_code: Optional[str] = Field(default=None, min_length=3, max_length=3)
    gender: Optional[Gender] = None
    include_conjunction: bool = False  # e.g. British "one hundred and five"
    alternate_connector: bool = False  # e.g. Vietnamese "lẻ" instead of "linh"


DEFAULT_OPTIONS = ConversionOptions()


# ─── Result ─────────────────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Outcome of one conversion, with the failure code when it fell back."""

    text: str
    locale: str
    ok: bool = True
    error_code: Optional[str] = None  # e.g. "MAGNITUDE_TOO_LARGE"
    error_message: Optional[str] = None
