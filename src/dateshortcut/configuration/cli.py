"""CLI commands for managing dateshortcut settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from dateshortcut.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    Settings,
    bootstrap_settings,
    load_settings,
    save_settings,
)
from dateshortcut.errors import InvalidConfigError


config_app = typer.Typer(help="Manage dateshortcut configuration")


@config_app.command("init")
def init_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
    locale: Optional[str] = typer.Option(None, help="Override locale tag"),
    default_time: Optional[str] = typer.Option(None, help="Override default time (HH[:MM[:SS]])"),
) -> None:
    """Initialize the settings file."""

    overrides: dict = {}
    if locale:
        overrides.setdefault("parser", {})["locale"] = locale
    if default_time:
        overrides.setdefault("parser", {})["default_time"] = default_time

    try:
        settings = bootstrap_settings(path=config_path, overrides=overrides)
    except InvalidConfigError as e:
        typer.echo(f"❌ {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Configuration initialized at {config_path}")
    typer.echo(_summarize_settings(settings))


@config_app.command("show")
def show_config(config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config")) -> None:
    """Display effective configuration."""

    settings = load_settings(config_path)
    typer.echo(_summarize_settings(settings))


@config_app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key, e.g. parser.locale"),
    value: str = typer.Argument(..., help="New value"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config"),
) -> None:
    """Update a configuration value."""

    settings = load_settings(config_path)
    payload = settings.model_dump(mode="python")
    _assign(payload, key.split("."), value)
    try:
        updated = Settings.model_validate(payload)
    except ValidationError as e:
        typer.echo(f"❌ Invalid value for {key}: {e.errors()[0]['msg']}", err=True)
        raise typer.Exit(code=1)
    save_settings(updated, config_path)
    typer.echo(f"Updated {key}")


@config_app.command("validate")
def validate_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
) -> None:
    """Validate configuration file for correctness."""

    try:
        settings = load_settings(config_path)
    except (FileNotFoundError, InvalidConfigError) as e:
        typer.echo(f"❌ Configuration invalid: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✅ Configuration valid at {config_path}")
    typer.echo(f"   Locale: {settings.parser.locale}")
    typer.echo(f"   Default time: {settings.parser.default_time or '-'}")


def _summarize_settings(settings: Settings) -> str:
    data = settings.model_dump(mode="json")
    return json.dumps(data, indent=2)


def _assign(payload: dict, keys: list[str], value: str) -> None:
    current = payload
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value
