"""Shortcut CLI commands.

Commands:
    dateshortcut parse "t+3d." --from 2024-05-15 --json
    dateshortcut locales
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dateutil import parser as dateutil_parser
from rich.console import Console
from rich.table import Table

from dateshortcut.configuration.settings import DEFAULT_CONFIG_PATH, Settings, load_settings
from dateshortcut.errors import ShortcutError
from dateshortcut.errors.user_messages import format_error_for_cli
from dateshortcut.locales.models import UnitType
from dateshortcut.locales.registry import available_locales, get_locale
from dateshortcut.parsing.parser import to_utc

logger = logging.getLogger(__name__)

console = Console()


def _load_effective_settings(config_path: Path) -> Settings:
    """Settings from ``config_path`` when it exists, defaults otherwise."""
    if config_path.exists():
        return load_settings(config_path)
    logger.debug(f"No settings file at {config_path}, using defaults")
    return Settings()


def _parse_reference(value: str) -> datetime:
    try:
        return to_utc(dateutil_parser.parse(value))
    except (ValueError, OverflowError) as e:
        raise typer.BadParameter(f"Cannot read reference instant '{value}': {e}")


def parse_command(
    text: str = typer.Argument(..., help="Shortcut to resolve, e.g. 't+3d.'"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale tag (en, de, fr, tr)"),
    from_date: Optional[str] = typer.Option(
        None, "--from", "-f", help="Reference instant (any format dateutil understands)"
    ),
    default_time: Optional[str] = typer.Option(
        None, "--default-time", "-t", help="Time applied when the shortcut has none"
    ),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each parsing step"),
) -> None:
    """Resolve a date shortcut to an ISO 8601 timestamp."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    reference = _parse_reference(from_date) if from_date else None

    try:
        settings = _load_effective_settings(config_path)
        overrides = {}
        if locale:
            overrides["locale"] = locale
        if default_time:
            overrides["default_time"] = default_time
        if overrides:
            settings = Settings.model_validate(
                {"parser": {**settings.parser.model_dump(), **overrides}}
            )
        parser = settings.build_parser(from_date=reference)
        result = parser.parse(text)
    except ShortcutError as e:
        if output_json:
            typer.echo(json.dumps({"success": False, "input": text, "error": e.to_dict()}))
        else:
            typer.echo(e.message, err=True)
            typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        # pydantic ValidationError for bad --locale / --default-time values
        typer.echo(f"Invalid option: {e}", err=True)
        raise typer.Exit(code=2)

    if output_json:
        typer.echo(json.dumps({
            "success": True,
            "input": text,
            "locale": parser.localization.name,
            "reference": parser.from_date.isoformat(),
            "result": result.isoformat(),
        }))
    else:
        typer.echo(result.isoformat())


def locales_command(
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List registered locales and their keywords."""
    tables = {tag: get_locale(tag) for tag in available_locales()}

    if output_json:
        typer.echo(json.dumps(
            {tag: loc.model_dump(mode="json", exclude={"date_patterns"}) for tag, loc in tables.items()},
            ensure_ascii=False,
        ))
        return

    table = Table(title=f"Locales ({len(tables)} registered)")
    table.add_column("Locale", style="cyan")
    for unit in UnitType:
        table.add_column(unit.value.capitalize())
    table.add_column("AM/PM")

    for tag, localization in tables.items():
        row = [tag]
        row.extend(", ".join(localization.keywords_for(unit)) for unit in UnitType)
        row.append(" / ".join(", ".join(m) for m in (localization.am, localization.pm) if m) or "-")
        table.add_row(*row)

    console.print(table)
