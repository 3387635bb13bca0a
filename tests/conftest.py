"""Shared fixtures for the dateshortcut test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from dateshortcut.parsing.parser import DateShortcutParser


@pytest.fixture
def reference() -> datetime:
    """Wednesday 2024-05-15 10:00 UTC."""
    return datetime(2024, 5, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def en_parser(reference: datetime) -> DateShortcutParser:
    return DateShortcutParser(from_date=reference, locale="en")


@pytest.fixture
def de_parser(reference: datetime) -> DateShortcutParser:
    return DateShortcutParser(from_date=reference, locale="de")
