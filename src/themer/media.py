"""Responsive breakpoints and the media queries they expand to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# Canonical breakpoint order, least to most specific. Hoisted breakpoint
# blocks are always emitted in this order.
BREAKPOINT_ORDER: tuple[str, ...] = ("mobile", "tablet", "small", "large", "print")

BREAKPOINTS = frozenset(BREAKPOINT_ORDER)


@dataclass(frozen=True)
class BreakpointLimits:
    """Upper width limits (in px) of the named screen ranges.

    ``mobile`` ends below 768px, ``tablet`` below 1280px and ``small``
    below 1630px; ``large`` is everything from ``small`` upward.
    """

    mobile: int = 768
    tablet: int = 1280
    small: int = 1630


QueryBuilder = Callable[[BreakpointLimits], str]

_QUERIES: dict[str, QueryBuilder] = {
    "mobile": lambda limits: f"screen and (max-width: {limits.mobile - 1}px)",
    "tablet": lambda limits: f"print, screen and (min-width: {limits.mobile}px)",
    "small": lambda limits: f"screen and (min-width: {limits.tablet}px)",
    "large": lambda limits: f"screen and (min-width: {limits.small}px)",
    "print": lambda limits: "print",
}


def is_breakpoint(key: str) -> bool:
    return key in BREAKPOINTS


def media_query(name: str, limits: BreakpointLimits | None = None) -> str:
    """Return the media query text for breakpoint *name*.

    Raises ``KeyError`` for names outside :data:`BREAKPOINTS`.
    """
    return _QUERIES[name](limits or BreakpointLimits())


def wrap_media(name: str, rules: str, limits: BreakpointLimits | None = None) -> str:
    """Wrap *rules* in an ``@media`` block for breakpoint *name*."""
    return f"@media {media_query(name, limits)} {{ {rules} }}"

