"""Recursive theme-to-stylesheet transformer.

A theme is a nested mapping of style rules::

    {
        "color": "red",
        "padding": 8,
        "hover": {"color": "blue"},
        "mobile": {"display": "none"},
    }

Each key is resolved to a :class:`~themer.model.Category` and rendered to a
fragment of CSS-in-code text; the fragments are concatenated in key order::

    color: red;padding: 8px;&:hover {color: blue;}@media screen and (max-width: 767px) { display: none; }

Breakpoint fragments are hoisted to the end of their block and emitted in
canonical mobile -> print order unless ``hoist_breakpoints`` is disabled.

Malformed input never raises: keys that match no category are dropped and
misshapen values render as empty or partial fragments. Two historical
quirks are kept for output compatibility:

* ``@keyframes`` blocks are left unclosed unless ``close_keyframes`` is set.
* A pseudo-class ``param`` is not stripped before recursing into the
  pseudo-class body; it matches no category and is dropped there.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Callable

from themer.classify import classify
from themer.config import ThemerConfig
from themer.errors import ThemeDepthError
from themer.media import BREAKPOINT_ORDER, wrap_media
from themer.model import Category, ThemeNode
from themer.tables import (
    CSS_PROPERTIES,
    CSS_PSEUDO_CLASSES,
    KEYFRAMES_IDENT_KEY,
    PIXEL_PROPERTIES,
    PLACEHOLDER_SELECTORS,
)

__all__ = ["Themer", "format_value", "themer", "transform"]

logger = logging.getLogger(__name__)

Handler = Callable[[str, Any, int], str]

_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def format_value(value: Any) -> str:
    """Render a primitive theme value as CSS text.

    Integral floats drop their fractional part (``10.0`` -> ``"10"``),
    booleans render lowercase and ``None`` renders as ``null`` (the JSON
    spelling); everything else goes through ``str``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(text: str) -> bool:
    """Numeric test for keyframe keys with JavaScript ``isFinite`` rules.

    Blank text counts as 0, ``0x``/``0o``/``0b`` integer literals are
    accepted and digit-group underscores are not.
    """
    stripped = text.strip()
    if not stripped:
        return True
    if "_" in stripped:
        return False
    radix = _RADIX_PREFIXES.get(stripped[:2].lower())
    if radix is not None:
        digits = stripped[2:]
        if not digits.isalnum():
            return False
        try:
            int(digits, radix)
        except ValueError:
            return False
        return True
    try:
        return math.isfinite(float(stripped))
    except ValueError:
        return False


def _elements(value: Any) -> list[Any]:
    """Normalise a single node or a sequence of nodes into a list."""
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return [value]


class Themer:
    """Transforms theme nodes into stylesheet text.

    Instances are stateless apart from their configuration and can be
    shared freely between threads.
    """

    def __init__(self, config: ThemerConfig | None = None) -> None:
        self.config = config or ThemerConfig()
        self._handlers: dict[Category, Handler] = {
            Category.PROPERTY: self._handle_property,
            Category.PSEUDO_CLASS: self._handle_pseudo_class,
            Category.PLACEHOLDER: self._handle_placeholder,
            Category.BREAKPOINT: self._handle_breakpoint,
            Category.MODIFIER_CLASS: self._handle_modifier_class,
            Category.CHILD_SELECTOR: self._handle_child_selector,
            Category.KEYFRAMES: self._handle_keyframes,
        }

    def transform(self, theme: ThemeNode) -> str:
        """Return the stylesheet text for *theme*.

        Raises :class:`~themer.errors.ThemeDepthError` if *theme* is nested
        deeper than ``config.max_depth``.
        """
        return self._transform(theme, 0)

    __call__ = transform

    # --- traversal ------------------------------------------------------------

    def _transform(self, node: Any, depth: int) -> str:
        if depth > self.config.max_depth:
            raise ThemeDepthError(depth, self.config.max_depth)
        if not isinstance(node, Mapping):
            logger.debug("Ignoring non-mapping theme node of type %s", type(node).__name__)
            return ""

        fragments: list[str] = []
        hoisted: dict[str, str] = {}
        for raw_key, value in node.items():
            key = format_value(raw_key)
            category = classify(
                key,
                keyframes=self.config.keyframes,
                case_sensitive=self.config.case_sensitive_keys,
            )
            if category is Category.UNKNOWN:
                logger.debug("Dropping unclassified theme key %r", key)
                continue
            fragment = self._handlers[category](key, value, depth)
            if category is Category.BREAKPOINT and self.config.hoist_breakpoints:
                hoisted[key] = fragment
            else:
                fragments.append(fragment)

        fragments.extend(hoisted[name] for name in BREAKPOINT_ORDER if name in hoisted)
        return "".join(fragments)

    # --- handlers -------------------------------------------------------------

    def _handle_property(self, key: str, value: Any, depth: int) -> str:
        prop = CSS_PROPERTIES[key]
        if prop in PIXEL_PROPERTIES and _is_number(value) and value != 0:
            return f"{prop}: {format_value(value)}{self.config.unit};"
        return f"{prop}: {format_value(value)};"

    def _handle_pseudo_class(self, key: str, value: Any, depth: int) -> str:
        param = ""
        if isinstance(value, Mapping) and value.get("param") is not None:
            param = f"({format_value(value['param'])})"
        body = self._transform(value, depth + 1)
        return f"&:{CSS_PSEUDO_CLASSES[key]}{param} {{{body}}}"

    def _handle_placeholder(self, key: str, value: Any, depth: int) -> str:
        body = self._transform(value, depth + 1)
        return "".join(f"{selector} {{{body}}}" for selector in PLACEHOLDER_SELECTORS)

    def _handle_breakpoint(self, key: str, value: Any, depth: int) -> str:
        return wrap_media(key, self._transform(value, depth + 1), self.config.breakpoints)

    def _handle_modifier_class(self, key: str, value: Any, depth: int) -> str:
        return self._render_selectors(value, "name", "&.", depth)

    def _handle_child_selector(self, key: str, value: Any, depth: int) -> str:
        return self._render_selectors(value, "selector", "", depth)

    def _render_selectors(self, value: Any, field: str, prefix: str, depth: int) -> str:
        output = ""
        for element in _elements(value):
            if not isinstance(element, Mapping):
                logger.debug("Skipping non-mapping %s entry: %r", field, element)
                continue
            selector = format_value(element.get(field, ""))
            output += f"{prefix}{selector} {{{self._transform(element, depth + 1)}}}"
        return output

    def _handle_keyframes(self, key: str, value: Any, depth: int) -> str:
        if not isinstance(value, Mapping):
            logger.debug("Ignoring keyframes value of type %s", type(value).__name__)
            return ""
        frames = {format_value(k): v for k, v in value.items()}
        ident = next(
            (v for k, v in frames.items() if k.lower() == KEYFRAMES_IDENT_KEY), None
        )
        if ident is None:
            logger.debug("Keyframes block has no %r; emitting nothing", KEYFRAMES_IDENT_KEY)
            return ""

        output = f"@keyframes {format_value(ident)} {{"
        # Frames keep mapping order; numeric keys are not moved to the front
        # in ascending order the way JavaScript object iteration would.
        for selector, frame in frames.items():
            if _is_finite_number(selector):
                output += f"{selector}% {{{self._transform(frame, depth + 1)}}}"
            elif selector.lower() != KEYFRAMES_IDENT_KEY:
                output += f"{selector} {{{self._transform(frame, depth + 1)}}}"
        if self.config.close_keyframes:
            output += "}"
        return output


_DEFAULT = Themer()


def transform(theme: ThemeNode, config: ThemerConfig | None = None) -> str:
    """Transform *theme* into stylesheet text using *config* (or the defaults)."""
    if config is None:
        return _DEFAULT.transform(theme)
    return Themer(config).transform(theme)


themer = transform
