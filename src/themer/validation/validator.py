"""Theme validator: lints a theme under the key rules of a ThemerConfig."""

from __future__ import annotations

from collections.abc import Iterable

from themer.config import ThemerConfig
from themer.errors import ThemerError
from themer.model import ThemeNode
from themer.validation.diagnostic import Diagnostic
from themer.validation.rules import ALL_RULES, Rule, walk


class ValidationError(ThemerError):
    """Raised by :func:`validate_or_raise` when a theme has blocking findings."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        listing = "; ".join(d.format() for d in diagnostics)
        super().__init__(f"Theme has {len(diagnostics)} blocking problem(s): {listing}")


class ThemeValidator:
    """Runs validation rules over a theme.

    The config decides how keys are classified (keyframes on or off, case
    of keyword keys) and how deep the theme may nest, so a theme is judged
    by the same switches it will be rendered with.
    """

    def __init__(
        self, config: ThemerConfig | None = None, rules: Iterable[Rule] | None = None
    ) -> None:
        self.config = config or ThemerConfig()
        self.rules = tuple(rules) if rules is not None else ALL_RULES

    def check(self, theme: ThemeNode) -> list[Diagnostic]:
        """Return every finding, errors first, then by key path."""
        entries = list(walk(theme, self.config))
        found = [diag for rule in self.rules for diag in rule(entries)]
        return sorted(found, key=Diagnostic.sort_key)

    def blocking(self, diagnostics: list[Diagnostic], strict: bool = False) -> list[Diagnostic]:
        """Findings that fail validation; warnings too when *strict*."""
        return [d for d in diagnostics if d.is_error or (strict and d.is_warning)]


def validate(theme: ThemeNode, config: ThemerConfig | None = None) -> list[Diagnostic]:
    return ThemeValidator(config).check(theme)


def validate_or_raise(
    theme: ThemeNode, config: ThemerConfig | None = None, strict: bool = False
) -> list[Diagnostic]:
    """Validate *theme*, raising :class:`ValidationError` on blocking findings.

    Returns the remaining (non-blocking) diagnostics otherwise.
    """
    validator = ThemeValidator(config)
    diagnostics = validator.check(theme)
    blocking = validator.blocking(diagnostics, strict=strict)
    if blocking:
        raise ValidationError(blocking)
    return diagnostics
