from __future__ import annotations

import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from . import __version__
from .config import Settings, load_config
from .constants import DEMO_CONNECTION_STRINGS, DEMO_DATAGRAM_CONVERSIONS
from .core import ServerConfig, parse_config, to_datagram_config
from .core.server_parser import ServerConfigParser
from .exceptions import ConversionError
from .logging_config import setup_logging
from .output import render

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
OUTPUT_FORMATS = ["table", "json", "yaml"]


def _print_config(config: ServerConfig, fmt: str, title: str | None = None) -> None:
    rendered = render(config, fmt, title=title)
    if isinstance(rendered, str):
        click.echo(rendered.rstrip("\n"))
    else:
        console.print(rendered)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    default=None,
    help="Path to a YAML settings file.",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--log-level",
    "log_level",
    default=None,
    help="Override the configured log level.",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None):
    """
    serverconf: parse server connection strings into typed configs.
    """
    try:
        settings = load_config(config_path)
    except ValidationError as exc:
        click.echo(f"✗ Invalid settings: {exc}", err=True)
        sys.exit(1)
    setup_logging(log_level or settings.logging.level, settings.logging.file)
    ctx.obj = settings


@cli.command()
@click.argument("value")
@click.option(
    "--protocol",
    "protocol",
    default=None,
    help="Force the parser for this scheme instead of detecting it.",
    type=click.Choice(ServerConfigParser().supported_schemes()),
)
@click.option(
    "--to-udp",
    "to_udp",
    is_flag=True,
    default=False,
    help="Convert the parsed config into a udp config.",
)
@click.option(
    "--format",
    "fmt",
    default=None,
    help="Output format (defaults to the configured one).",
    type=click.Choice(OUTPUT_FORMATS),
)
@click.pass_obj
def parse(settings: Settings, value: str, protocol: str | None, to_udp: bool, fmt: str | None):
    """
    Parse a single connection string and print the resulting config.
    """
    try:
        config = parse_config(value, protocol)
    except ConversionError as exc:
        click.echo(f"✗ {exc}", err=True)
        sys.exit(1)

    if to_udp or settings.output.convert_to_udp:
        try:
            config = to_datagram_config(config)
        except TypeError as exc:
            click.echo(f"✗ {exc}", err=True)
            sys.exit(1)

    _print_config(config, fmt or settings.output.format)


@cli.command()
@click.option(
    "--format",
    "fmt",
    default=None,
    help="Output format (defaults to the configured one).",
    type=click.Choice(OUTPUT_FORMATS),
)
@click.pass_obj
def demo(settings: Settings, fmt: str | None):
    """
    Parse the bundled example connection strings and print every result.
    """
    fmt = fmt or settings.output.format
    for value in DEMO_CONNECTION_STRINGS:
        click.echo(f"{value!r}:")
        _print_config(parse_config(value), fmt, title=value)

    for value in DEMO_DATAGRAM_CONVERSIONS:
        click.echo(f"{value!r} (into udp):")
        _print_config(to_datagram_config(parse_config(value)), fmt, title=value)


def main() -> None:
    """Entry point for the ``serverconf`` console script."""
    cli()
