"""Command line entry points for dateshortcut."""

from typer import Typer

from ..configuration.cli import config_app
from .shortcuts import locales_command, parse_command


cli = Typer(help="Resolve typed date shortcuts")
cli.command("parse")(parse_command)
cli.command("locales")(locales_command)
cli.add_typer(config_app, name="config")

__all__ = ["cli", "config_app", "parse_command", "locales_command"]
