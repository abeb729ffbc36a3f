from __future__ import annotations

"""Shared helpers for loading builder settings with CLI-friendly errors."""

import typer
from rich.console import Console

from hoptree.core.settings import BuilderSettings
from hoptree.io.loaders import ConfigError, load_settings


def load_settings_or_exit(
    path: str | None,
    *,
    console: Console,
    weight_bits: int | None = None,
    max_nodes: int | None = None,
) -> BuilderSettings:
    """Load settings from ``path`` (defaults when None) and apply CLI overrides."""
    try:
        settings = load_settings(path)
    except ConfigError as err:
        console.print(f"[red]Failed to load settings:[/red] {err}")
        raise typer.Exit(code=2)
    return settings.with_overrides(weight_bits=weight_bits, max_nodes=max_nodes)


__all__ = ["load_settings_or_exit"]
