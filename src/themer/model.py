"""Theme model: value type aliases and the key Category enum."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Union

Primitive = Union[str, int, float]
ThemeValue = Union[Primitive, "ThemeNode", Sequence["ThemeNode | None"]]
ThemeNode = Mapping[str, ThemeValue]


class Category(Enum):
    """Rule category a theme key resolves to.

    Members are declared in classification priority order.
    """

    PROPERTY = "property"
    PSEUDO_CLASS = "pseudo_class"
    PLACEHOLDER = "placeholder"
    BREAKPOINT = "breakpoint"
    MODIFIER_CLASS = "modifier_class"
    CHILD_SELECTOR = "child_selector"
    KEYFRAMES = "keyframes"
    UNKNOWN = "unknown"

    @property
    def is_nested(self) -> bool:
        """True for categories whose value holds further style rules."""
        return self not in (Category.PROPERTY, Category.UNKNOWN)
