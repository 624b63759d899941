"""
Locale registry — rule sets are imported on first use and cached.

    available_locales()  → ["en", "fil", "he", "hi", "it", "ru", "vi", "zh"]
    load_locale("vi")    → LocaleRuleSet (same object on every call)
"""

from __future__ import annotations

import importlib
import logging
from functools import lru_cache

from ..exceptions import UnknownLocaleError
from ..rules import LocaleRuleSet

logger = logging.getLogger(__name__)

# locale code -> module under numwords.locales
_MODULES: dict[str, str] = {
    "en": "en",
    "fil": "fil",
    "he": "he",
    "hi": "hi",
    "it": "it",
    "ru": "ru",
    "vi": "vi",
    "zh": "zh",
}


def available_locales() -> list[str]:
    return sorted(_MODULES)


@lru_cache(maxsize=None)
def load_locale(code: str) -> LocaleRuleSet:
    """Return the rule set for *code* ("en", "zh", ...; case-insensitive).

    Raises:
        UnknownLocaleError: no rule set is registered for *code*.
    """
    key = code.strip().lower().replace("_", "-").split("-")[0]
    if key not in _MODULES:
        raise UnknownLocaleError(
            f"No rule set for locale {code!r}",
            details={"locale": code, "available": available_locales()},
        )
    module = importlib.import_module(f"{__name__}.{_MODULES[key]}")
    rules: LocaleRuleSet = module.RULES
    logger.info("Loaded rule set %s (%s)", rules.code, rules.name)
    return rules
