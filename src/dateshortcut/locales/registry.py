"""Built-in locale tables and locale resolution."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Mapping, Union

from dateshortcut.errors import LocaleAlreadyRegisteredError, UnknownLocaleError
from dateshortcut.locales.models import DatePattern, FieldOrder, Localization

logger = logging.getLogger(__name__)

LocaleSpec = Union[str, Localization, Mapping[str, Any]]

DEFAULT_LOCALE = "en"


# ---------------------------------------------------------------------------
# Date Patterns
# ---------------------------------------------------------------------------

SLASH_MONTH_FIRST = DatePattern(
    regex=r"^(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?", field_order=FieldOrder.MONTH_FIRST
)
SLASH_DAY_FIRST = DatePattern(
    regex=r"^(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?", field_order=FieldOrder.DAY_FIRST
)
DOTTED_DAY_FIRST = DatePattern(
    regex=r"^(\d{1,2})\.(\d{1,2})(?:\.(\d{2,4}))?", field_order=FieldOrder.DAY_FIRST
)


# ---------------------------------------------------------------------------
# Built-in Tables
# ---------------------------------------------------------------------------

ENGLISH = Localization(
    name="en",
    year=["y", "yr", "year", "years"],
    month=["m", "mo", "month", "months"],
    week=["w", "wk", "week", "weeks"],
    day=["d", "day", "days"],
    today=["t", "today", "now"],
    weekday=["wd", "weekday", "weekdays"],
    am=["am"],
    pm=["pm"],
    date_patterns=[SLASH_MONTH_FIRST],
)

GERMAN = Localization(
    name="de",
    year=["j", "jahr", "jahre"],
    month=["m", "monat", "monate"],
    week=["w", "woche", "wochen"],
    day=["t", "tag", "tage", "d"],
    today=["h", "heute", "jetzt"],
    weekday=["wt", "werktag", "werktage"],
    date_patterns=[DOTTED_DAY_FIRST],
)

# "a" is listed for both year and today; as a unit it resolves to year.
FRENCH = Localization(
    name="fr",
    year=["a", "an", "année", "années"],
    month=["m", "mois"],
    week=["s", "sem", "semaine", "semaines"],
    day=["j", "jour", "jours"],
    today=["a", "aujourdhui", "maintenant"],
    weekday=["jo", "jourouvrable", "joursouvrables"],
    date_patterns=[SLASH_DAY_FIRST],
)

TURKISH = Localization(
    name="tr",
    year=["y", "yıl"],
    month=["a", "ay"],
    week=["h", "hafta"],
    day=["g", "gün"],
    today=["b", "bugün", "şimdi"],
    weekday=["ig", "işgünü", "işgünleri"],
    date_patterns=[DOTTED_DAY_FIRST],
)

_BUILTIN: Dict[str, Localization] = {
    "en": ENGLISH,
    "de": GERMAN,
    "fr": FRENCH,
    "tr": TURKISH,
}

_registry: Dict[str, Localization] = dict(_BUILTIN)
_registry_lock = threading.Lock()


# ---------------------------------------------------------------------------
# Registry API
# ---------------------------------------------------------------------------


def available_locales() -> List[str]:
    """Return registered locale tags, built-ins first."""
    with _registry_lock:
        return list(_registry)


def get_locale(tag: str) -> Localization:
    """Look up a registered locale by tag (case-insensitive)."""
    key = tag.strip().lower()
    with _registry_lock:
        localization = _registry.get(key)
    if localization is None:
        raise UnknownLocaleError(tag)
    return localization


def register_locale(tag: str, localization: LocaleSpec, *, replace: bool = False) -> Localization:
    """Register a host-supplied locale under ``tag``.

    Args:
        tag: Locale tag used with ``DateShortcutParser(locale=tag)``
        localization: ``Localization`` or a mapping with the same fields
        replace: Overwrite an existing registration instead of failing

    Returns:
        The registered ``Localization``
    """
    key = tag.strip().lower()
    if not isinstance(localization, Localization):
        localization = Localization.model_validate({"name": key, **dict(localization)})

    with _registry_lock:
        if key in _registry and not replace:
            raise LocaleAlreadyRegisteredError(tag)
        _registry[key] = localization

    logger.info(f"Registered locale '{key}'")
    return localization


def unregister_locale(tag: str) -> None:
    """Remove a host locale. Built-in tables are restored, not removed."""
    key = tag.strip().lower()
    with _registry_lock:
        if key in _BUILTIN:
            _registry[key] = _BUILTIN[key]
        elif key in _registry:
            del _registry[key]
        else:
            raise UnknownLocaleError(tag)


def resolve_locale(locale: LocaleSpec) -> Localization:
    """Return the ``Localization`` for a tag, record or mapping.

    A ``Localization`` passes through unchanged; a mapping is validated as a
    custom locale record.
    """
    if isinstance(locale, Localization):
        return locale
    if isinstance(locale, str):
        return get_locale(locale)
    return Localization.model_validate(dict(locale))


__all__ = [
    "DEFAULT_LOCALE",
    "ENGLISH",
    "GERMAN",
    "FRENCH",
    "TURKISH",
    "LocaleSpec",
    "available_locales",
    "get_locale",
    "register_locale",
    "unregister_locale",
    "resolve_locale",
]
