"""Tests for locale models and the locale registry."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from dateshortcut.errors import LocaleAlreadyRegisteredError, UnknownLocaleError
from dateshortcut.locales import (
    DatePattern,
    FieldOrder,
    Localization,
    available_locales,
    get_locale,
    register_locale,
    resolve_locale,
    unregister_locale,
)
from dateshortcut.locales.registry import ENGLISH, GERMAN, TURKISH
from dateshortcut.parsing.parser import DateShortcutParser


DUTCH = {
    "year": ["j", "jaar"],
    "month": ["m", "maand"],
    "week": ["w", "week"],
    "day": ["d", "dag"],
    "today": ["v", "vandaag"],
    "weekday": ["wd", "werkdag"],
    "datePatterns": [{"regex": r"^(\d{1,2})-(\d{1,2})(?:-(\d{2,4}))?", "format": "dd-mm-yyyy"}],
}


@pytest.fixture
def dutch():
    localization = register_locale("nl", DUTCH)
    yield localization
    unregister_locale("nl")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TestLocalization:
    """Validation of keyword tables."""

    def test_keywords_are_normalized(self):
        localization = Localization(day=[" D ", "day", "DAY"])
        assert localization.day == ("d", "day")

    def test_missing_units_default_to_empty(self):
        localization = Localization(day=["d"])
        assert localization.year == ()
        assert localization.has_am_pm is False

    @pytest.mark.parametrize("keyword", ["", "  ", "12"])
    def test_rejects_unusable_keywords(self, keyword):
        with pytest.raises(ValidationError):
            Localization(day=[keyword])

    def test_frozen(self):
        with pytest.raises(ValidationError):
            ENGLISH.day = ("x",)

    def test_today_keywords_longest_first(self):
        assert TURKISH.today_keywords_longest_first()[0] in {"bugün", "şimdi"}
        assert TURKISH.today_keywords_longest_first()[-1] == "b"

    def test_only_english_has_am_pm(self):
        assert ENGLISH.has_am_pm
        assert not GERMAN.has_am_pm


class TestDatePattern:
    def test_format_string_sets_field_order(self):
        pattern = DatePattern.model_validate({"regex": r"^(\d+)/(\d+)", "format": "mm/dd/yyyy"})
        assert pattern.field_order is FieldOrder.MONTH_FIRST

    def test_enum_value_accepted(self):
        pattern = DatePattern(regex=r"^(\d+)\.(\d+)", field_order="day_first")
        assert pattern.field_order is FieldOrder.DAY_FIRST

    def test_unsupported_format(self):
        with pytest.raises(ValidationError):
            DatePattern.model_validate({"regex": r"^(\d+)/(\d+)", "format": "yyyy-mm-dd"})

    def test_needs_two_groups(self):
        with pytest.raises(ValidationError):
            DatePattern(regex=r"^(\d+)")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    """Built-in tables and host-registered locales."""

    def test_builtins_listed_first(self):
        assert available_locales()[:4] == ["en", "de", "fr", "tr"]

    def test_lookup_is_case_insensitive(self):
        assert get_locale("EN") is ENGLISH
        assert resolve_locale(" De ") is GERMAN

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocaleError, match='"xx"'):
            get_locale("xx")

    def test_resolve_passes_records_through(self):
        assert resolve_locale(ENGLISH) is ENGLISH
        assert resolve_locale({"day": ["dd"]}).day == ("dd",)

    def test_register_and_parse(self, dutch):
        assert "nl" in available_locales()
        assert dutch.name == "nl"
        parser = DateShortcutParser(
            from_date=datetime(2024, 5, 15, 10, tzinfo=timezone.utc), locale="nl"
        )
        assert parser.parse("vandaag +2dag") == datetime(2024, 5, 17, tzinfo=timezone.utc)
        assert parser.parse("23-03 1w") == datetime(2024, 3, 30, tzinfo=timezone.utc)

    def test_duplicate_registration(self, dutch):
        with pytest.raises(LocaleAlreadyRegisteredError):
            register_locale("NL", DUTCH)

    def test_replace_registration(self, dutch):
        replacement = register_locale("nl", {**DUTCH, "day": ["d"]}, replace=True)
        assert get_locale("nl") is replacement

    def test_unregister_restores_builtin(self):
        register_locale("de", {"day": ["x"]}, replace=True)
        unregister_locale("de")
        assert get_locale("de") is GERMAN

    def test_unregister_unknown(self):
        with pytest.raises(UnknownLocaleError):
            unregister_locale("zz")
