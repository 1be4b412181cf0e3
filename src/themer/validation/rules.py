"""Validation rules for themes.

The transformer never rejects input; malformed pieces silently render as
empty or partial text. These rules surface those pieces instead.

A theme is flattened once by :func:`walk` into :class:`Entry` records, each
carrying the category the transformer would give the key under a given
:class:`~themer.config.ThemerConfig`. Every rule takes that list of entries
and returns a list of Diagnostic objects.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

from themer.classify import classify
from themer.config import ThemerConfig
from themer.errors import ThemeDepthError
from themer.model import Category, ThemeNode
from themer.tables import KEYFRAMES_IDENT_KEY
from themer.validation.diagnostic import Diagnostic, Severity

# Keys that carry selector metadata inside a nested category rather than
# style declarations. They are dropped by the transformer on purpose.
_METADATA_KEYS: dict[Category, str] = {
    Category.PSEUDO_CLASS: "param",
    Category.MODIFIER_CLASS: "name",
    Category.CHILD_SELECTOR: "selector",
}

_SEQUENCE_CATEGORIES = frozenset({Category.MODIFIER_CLASS, Category.CHILD_SELECTOR})


@dataclass(frozen=True)
class Entry:
    """One key/value pair of a theme, located by its dotted path."""

    path: str
    key: str
    value: Any
    category: Category
    parent: Category | None
    depth: int = 0

    def elements(self) -> list[tuple[str, Any]]:
        """``(path, element)`` pairs of a class/child value, skipping empty slots."""
        if isinstance(self.value, (list, tuple)):
            return [
                (f"{self.path}[{i}]", element)
                for i, element in enumerate(self.value)
                if element is not None
            ]
        return [(self.path, self.value)]


Rule = Callable[[Sequence[Entry]], list[Diagnostic]]


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _children(entry: Entry) -> Iterator[tuple[str, Any]]:
    """Yield ``(path, node)`` for every nested node the transformer recurses into."""
    value = entry.value
    if entry.category in _SEQUENCE_CATEGORIES:
        yield from entry.elements()
    elif entry.category is Category.KEYFRAMES and isinstance(value, Mapping):
        for key, frame in value.items():
            if str(key).lower() != KEYFRAMES_IDENT_KEY:
                yield _join(entry.path, str(key)), frame
    elif entry.category.is_nested:
        yield entry.path, value


def walk(
    theme: ThemeNode,
    config: ThemerConfig | None = None,
    prefix: str = "",
    parent: Category | None = None,
    depth: int = 0,
) -> Iterator[Entry]:
    """Yield every entry of *theme*, depth first, in mapping order.

    Keys are classified with the same switches the transformer reads from
    *config*. Raises :class:`~themer.errors.ThemeDepthError` past
    ``config.max_depth``, at the same depth the transformer would.
    """
    config = config or ThemerConfig()
    if depth > config.max_depth:
        raise ThemeDepthError(depth, config.max_depth)
    if not isinstance(theme, Mapping):
        return
    for raw_key, value in theme.items():
        key = str(raw_key)
        entry = Entry(
            path=_join(prefix, key),
            key=key,
            value=value,
            category=classify(
                key,
                keyframes=config.keyframes,
                case_sensitive=config.case_sensitive_keys,
            ),
            parent=parent,
            depth=depth,
        )
        yield entry
        for path, child in _children(entry):
            yield from walk(child, config, path, entry.category, depth + 1)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_nested_shapes(entries: Sequence[Entry]) -> list[Diagnostic]:
    """Nested categories must hold a mapping (or a sequence of mappings)."""
    diagnostics: list[Diagnostic] = []
    for entry in entries:
        if not entry.category.is_nested:
            continue
        if entry.category in _SEQUENCE_CATEGORIES:
            for path, element in entry.elements():
                if not isinstance(element, Mapping):
                    diagnostics.append(
                        Diagnostic(
                            rule="check_nested_shapes",
                            severity=Severity.ERROR,
                            message=f"'{entry.key}' entry is {type(element).__name__}, not a mapping.",
                            path=path,
                            fix="Replace the entry with a mapping of style rules.",
                        )
                    )
        elif not isinstance(entry.value, Mapping):
            diagnostics.append(
                Diagnostic(
                    rule="check_nested_shapes",
                    severity=Severity.ERROR,
                    message=(
                        f"'{entry.key}' expects nested style rules but got "
                        f"{type(entry.value).__name__}."
                    ),
                    path=entry.path,
                    fix="Use a mapping of style rules as the value.",
                )
            )
    return diagnostics


def _missing_selector_field(
    entries: Sequence[Entry], category: Category, field: str, rule: str
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for entry in entries:
        if entry.category is not category:
            continue
        for path, element in entry.elements():
            if isinstance(element, Mapping) and element.get(field) in (None, ""):
                diagnostics.append(
                    Diagnostic(
                        rule=rule,
                        severity=Severity.ERROR,
                        message=f"'{entry.key}' block has no '{field}'.",
                        path=path,
                        fix=f"Add a '{field}' key to the block.",
                    )
                )
    return diagnostics


def check_class_names(entries: Sequence[Entry]) -> list[Diagnostic]:
    """Every modifier-class block needs a ``name``."""
    return _missing_selector_field(
        entries, Category.MODIFIER_CLASS, "name", "check_class_names"
    )


def check_child_selectors(entries: Sequence[Entry]) -> list[Diagnostic]:
    """Every child block needs a ``selector``."""
    return _missing_selector_field(
        entries, Category.CHILD_SELECTOR, "selector", "check_child_selectors"
    )


def check_keyframes_ident(entries: Sequence[Entry]) -> list[Diagnostic]:
    """A keyframes block without ``ident`` renders nothing."""
    diagnostics: list[Diagnostic] = []
    for entry in entries:
        if entry.category is not Category.KEYFRAMES or not isinstance(entry.value, Mapping):
            continue
        if not any(str(k).lower() == KEYFRAMES_IDENT_KEY for k in entry.value):
            diagnostics.append(
                Diagnostic(
                    rule="check_keyframes_ident",
                    severity=Severity.ERROR,
                    message="Keyframes block has no 'ident'; it will produce no output.",
                    path=entry.path,
                    fix="Add an 'ident' key naming the animation.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_unknown_keys(entries: Sequence[Entry]) -> list[Diagnostic]:
    """Keys matching no category are dropped from the output. WARNING."""
    diagnostics: list[Diagnostic] = []
    for entry in entries:
        if entry.category is not Category.UNKNOWN:
            continue
        if entry.parent is not None and _METADATA_KEYS.get(entry.parent) == entry.key:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_unknown_keys",
                severity=Severity.WARNING,
                message=f"Unknown key '{entry.key}' will be ignored.",
                path=entry.path,
                fix="Use a camelCase CSS property, pseudo-class or breakpoint name.",
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES: tuple[Rule, ...] = (
    check_nested_shapes,
    check_class_names,
    check_child_selectors,
    check_keyframes_ident,
    check_unknown_keys,
)
