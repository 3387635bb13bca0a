"""Locale tables for the shortcut parser."""

from dateshortcut.locales.models import (
    DatePattern,
    FieldOrder,
    Localization,
    UnitType,
)
from dateshortcut.locales.registry import (
    DEFAULT_LOCALE,
    ENGLISH,
    FRENCH,
    GERMAN,
    TURKISH,
    LocaleSpec,
    available_locales,
    get_locale,
    register_locale,
    resolve_locale,
    unregister_locale,
)

__all__ = [
    # Models
    "DatePattern",
    "FieldOrder",
    "Localization",
    "UnitType",
    # Built-in tables
    "DEFAULT_LOCALE",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "TURKISH",
    # Registry
    "LocaleSpec",
    "available_locales",
    "get_locale",
    "register_locale",
    "resolve_locale",
    "unregister_locale",
]
