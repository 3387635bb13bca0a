"""Typed settings for the shortcut parser.

Wraps the parser options (locale, default time, pinned reference instant)
in Pydantic models so the CLI and host applications share one validated
configuration file. Environment variables override file values.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from dateshortcut.errors import ConfigurationError, InvalidConfigError, LocaleError
from dateshortcut.locales.registry import DEFAULT_LOCALE, get_locale
from dateshortcut.parsing.parser import DateShortcutParser
from dateshortcut.parsing.time_of_day import parse_default_time

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".dateshortcut" / "config.json"


class ParserSettings(BaseModel):
    """Options passed to ``DateShortcutParser``."""

    locale: str = Field(DEFAULT_LOCALE, description="Registered locale tag")
    default_time: Optional[str] = Field(
        default=None, description="HH[:MM[:SS]] applied when a shortcut has no time"
    )
    from_date: Optional[datetime] = Field(
        default=None, description="Pinned reference instant; unset means now"
    )

    @field_validator("locale")
    @classmethod
    def _validate_locale(cls, v: str) -> str:
        try:
            get_locale(v)
        except LocaleError as exc:
            raise ValueError(exc.message) from exc
        return v.strip().lower()

    @field_validator("default_time")
    @classmethod
    def _validate_default_time(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        try:
            parse_default_time(v)
        except ConfigurationError as exc:
            raise ValueError(exc.message) from exc
        return v.strip()


class Settings(BaseModel):
    """Root configuration state."""

    parser: ParserSettings = Field(default_factory=ParserSettings)

    def build_parser(self, from_date: Optional[datetime] = None) -> DateShortcutParser:
        """Create a parser; an explicit ``from_date`` wins over the pinned one."""
        return DateShortcutParser(
            from_date=from_date or self.parser.from_date,
            locale=self.parser.locale,
            default_time=self.parser.default_time,
        )


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from disk or raise if invalid."""

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc
    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc


def save_settings(settings: Settings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings to disk."""

    payload = settings.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def bootstrap_settings(
    *,
    path: Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Create or load settings respecting explicit and environment overrides."""

    overrides = overrides or {}

    if path.exists():
        settings = load_settings(path)
    else:
        settings = Settings()
        logger.info(f"Creating default settings at {path}")

    merged = settings.model_dump(mode="python")
    merged = _apply_overrides(merged, overrides)
    merged = _apply_env_overrides(merged)

    try:
        resolved = Settings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc
    save_settings(resolved, path)
    return resolved


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = base.copy()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _apply_overrides(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    parser = data.setdefault("parser", {})
    _set_env_override(parser, "locale", "DATESHORTCUT_LOCALE")
    _set_env_override(parser, "default_time", "DATESHORTCUT_DEFAULT_TIME")
    _set_env_override(parser, "from_date", "DATESHORTCUT_FROM_DATE")
    return data


def _set_env_override(mapping: Dict[str, Any], key: str, env_name: str) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    mapping[key] = raw


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ParserSettings",
    "Settings",
    "bootstrap_settings",
    "load_settings",
    "save_settings",
]
