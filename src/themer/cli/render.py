"""CLI command: themer render -- print the stylesheet text for a theme file."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from themer.config import ThemerConfig
from themer.errors import ThemeDepthError, ThemeLoadError
from themer.loader import load_theme
from themer.transformer import Themer


@click.command()
@click.argument("theme_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--legacy", is_flag=True, help="Inline breakpoints and disable keyframes.")
@click.option("--close-keyframes", is_flag=True, help="Close @keyframes blocks.")
@click.option("--unit", default="px", show_default=True, help="Unit for bare numbers.")
def render(theme_file: str, legacy: bool, close_keyframes: bool, unit: str) -> None:
    """Render THEME_FILE (a JSON object) to stylesheet text on stdout."""
    try:
        theme = load_theme(theme_file)
    except ThemeLoadError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)

    base = ThemerConfig.legacy() if legacy else ThemerConfig()
    config = replace(base, unit=unit, close_keyframes=close_keyframes)

    try:
        click.echo(Themer(config).transform(theme))
    except ThemeDepthError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
