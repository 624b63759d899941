"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to one category of conversion failure. The
orchestrator resolves all of them to the locale's fallback string in
``NumberToWords.convert``; ``NumberToWords.render`` lets them propagate
so callers can inspect ``code`` and ``details``.
"""

from __future__ import annotations


class NumberConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MagnitudeTooLarge(NumberConversionError):
    """The magnitude needs a scale tier the locale cannot name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_TOO_LARGE", message, details)


class InvalidNumberError(NumberConversionError):
    """The input is not a number the normalizer understands."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class UnknownLocaleError(NumberConversionError):
    """No rule set is registered for the requested locale code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_LOCALE", message, details)


class UnknownCurrencyError(NumberConversionError):
    """The locale defines no currency with the requested code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_CURRENCY", message, details)
