"""Rendering of parsed server configs for the command line."""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml
from rich.table import Table

from .core.types import ServerConfig


def config_to_dict(config: ServerConfig) -> Dict[str, Any]:
    """Return a plain, serializable dict with the config type included."""
    return {"type": type(config).__name__, **config.to_dict()}


def render_json(config: ServerConfig) -> str:
    return json.dumps(config_to_dict(config), indent=2)


def render_yaml(config: ServerConfig) -> str:
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)


def render_table(config: ServerConfig, title: str | None = None) -> Table:
    """Build a two-column rich table of the config's fields."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")
    for key, value in config_to_dict(config).items():
        table.add_row(key, str(value))
    return table


def render(config: ServerConfig, fmt: str = "table", title: str | None = None) -> str | Table:
    """Render ``config`` as JSON or YAML text, or as a rich table."""
    if fmt == "json":
        return render_json(config)
    if fmt == "yaml":
        return render_yaml(config)
    if fmt == "table":
        return render_table(config, title=title)
    raise ValueError(f"Unknown output format: {fmt}")
