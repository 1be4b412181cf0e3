"""Resolve theme keys to rule categories."""

from __future__ import annotations

from themer.media import is_breakpoint
from themer.model import Category
from themer.tables import (
    CHILD_SELECTOR_KEY,
    CSS_PROPERTIES,
    CSS_PSEUDO_CLASSES,
    KEYFRAMES_KEY,
    MODIFIER_CLASS_KEY,
    PLACEHOLDER_KEY,
)

__all__ = ["classify"]


def classify(key: str, keyframes: bool = True, case_sensitive: bool = False) -> Category:
    """Return the :class:`Category` for theme key *key*.

    Categories are tested in a fixed order and the first match wins:
    property, pseudo-class, placeholder, breakpoint, modifier class,
    child selector, keyframes. Keyword categories match case-insensitively
    unless *case_sensitive* is set. With *keyframes* disabled a
    ``keyframes`` key is ``UNKNOWN``.
    """
    if key in CSS_PROPERTIES:
        return Category.PROPERTY
    if key in CSS_PSEUDO_CLASSES:
        return Category.PSEUDO_CLASS
    keyword = key if case_sensitive else key.lower()
    if keyword == PLACEHOLDER_KEY:
        return Category.PLACEHOLDER
    if is_breakpoint(key):
        return Category.BREAKPOINT
    if keyword == MODIFIER_CLASS_KEY:
        return Category.MODIFIER_CLASS
    if keyword == CHILD_SELECTOR_KEY:
        return Category.CHILD_SELECTOR
    if keyframes and keyword == KEYFRAMES_KEY:
        return Category.KEYFRAMES
    return Category.UNKNOWN
