"""CLI command: themer validate -- lint a theme file before rendering it."""

from __future__ import annotations

import sys
from collections import Counter

import click

from themer.config import ThemerConfig
from themer.errors import ThemeDepthError, ThemeLoadError
from themer.loader import load_theme
from themer.validation import ThemeValidator


@click.command()
@click.argument("theme_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--legacy", is_flag=True, help="Judge keys the way `render --legacy` reads them.")
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors.")
@click.option("--hints", is_flag=True, help="Append a suggested fix to each finding.")
def validate(theme_file: str, legacy: bool, strict: bool, hints: bool) -> None:
    """Report keys in THEME_FILE that would be dropped or render broken.

    Exits with code 1 when there are errors (or, with --strict, warnings).
    """
    validator = ThemeValidator(ThemerConfig.legacy() if legacy else ThemerConfig())
    try:
        diagnostics = validator.check(load_theme(theme_file))
    except ThemeLoadError as exc:
        click.echo(f"Load error: {exc}", err=True)
        sys.exit(1)
    except ThemeDepthError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not diagnostics:
        click.echo(f"OK: {theme_file} renders every key")
        return

    for diag in diagnostics:
        click.echo(diag.format(hint=hints))

    counts = Counter(d.severity.value for d in diagnostics)
    click.echo()
    click.echo(f"Summary: {counts['ERROR']} error(s), {counts['WARNING']} warning(s)")

    if validator.blocking(diagnostics, strict=strict):
        sys.exit(1)
