"""
numwords — FastAPI Server
=========================

HTTP surface for the number-to-words engine.

Endpoints:
    POST /convert           Spell a number in one locale
    GET  /locales           Registered locale codes
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numwords import __version__
from numwords.converter import NumberToWords
from numwords.exceptions import UnknownLocaleError
from numwords.locales import available_locales, load_locale
from numwords.models import ConversionOptions, ConversionResult, DecimalSeparatorStyle, Gender, OutputFormat

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = os.getenv("NUMWORDS_DEFAULT_LOCALE", "en")


# ─── Application Lifespan (pre-build rule sets) ─────────────────────

_converters: dict[str, NumberToWords] | None = None


def build_converters() -> dict[str, NumberToWords]:
    """One converter per registered locale; rule sets are built once here."""
    return {code: NumberToWords(load_locale(code)) for code in available_locales()}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build every locale's rule set on startup."""
    global _converters  # noqa: PLW0603
    _converters = build_converters()
    logger.info("Serving %d locales (default %s)", len(_converters), DEFAULT_LOCALE)
    yield
    _converters = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="numwords API",
    description=(
        "Spell numbers as words. Standard cardinals with fractional digits, "
        "currency amounts with unit names, and years with era markers, "
        "across eight languages."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: Union[int, float, str] = Field(
        ...,
        description="The number to spell. Strings keep full precision (\"12345678901234567890.05\").",
        json_schema_extra={"example": "1234.5"},
    )
    locale: Optional[str] = Field(default=None, description="Locale code; defaults to NUMWORDS_DEFAULT_LOCALE.")
    currency: bool = False
    currency_code: Optional[str] = Field(default=None, min_length=3, max_length=3)
    format: OutputFormat = OutputFormat.STANDARD
    decimal_separator: Optional[DecimalSeparatorStyle] = None
    include_era_suffix: bool = False
    round_currency_subunit: bool = False
    negative_prefix: Optional[str] = None
    fallback_on_error: Optional[str] = None
    gender: Optional[Gender] = None
    include_conjunction: bool = False
    alternate_connector: bool = False

    def options(self) -> ConversionOptions:
        return ConversionOptions(**self.model_dump(exclude={"value", "locale"}))


class LocaleOut(BaseModel):
    code: str
    name: str
    currencies: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    locales_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converters() -> dict[str, NumberToWords]:
    if _converters is None:
        raise HTTPException(status_code=503, detail="Rule sets not initialised")
    return _converters


def _get_converter(code: Optional[str]) -> NumberToWords:
    converters = _get_converters()
    try:
        rules = load_locale(code or DEFAULT_LOCALE)
    except UnknownLocaleError as exc:
        raise HTTPException(status_code=404, detail={"code": exc.code, "message": str(exc), **exc.details})
    return converters[rules.code]


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell a number as words",
    tags=["Conversion"],
    responses={
        404: {"description": "Unknown locale"},
        503: {"description": "Rule sets not yet initialised"},
    },
)
def convert_number(request: ConvertRequest) -> ConversionResult:
    """Convert one value with the requested options.

    Conversion failures (not a number, magnitude beyond the locale's
    largest scale word, unknown currency) still answer 200 with the
    fallback text, `ok: false` and the error code.
    """
    converter = _get_converter(request.locale)
    return converter.convert_detailed(request.value, request.options())


@app.get(
    "/locales",
    summary="List registered locales",
    tags=["Conversion"],
    responses={503: {"description": "Rule sets not yet initialised"}},
)
def list_locales() -> list[LocaleOut]:
    converters = _get_converters()
    return [
        LocaleOut(code=code, name=c.rules.name, currencies=sorted(c.rules.currencies))
        for code, c in sorted(converters.items())
    ]


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Rule sets not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    converters = _get_converters()
    return HealthResponse(status="healthy", version=__version__, locales_loaded=len(converters))
