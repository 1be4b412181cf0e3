"""Themer error types."""

from __future__ import annotations


class ThemerError(Exception):
    """Base class for errors raised by themer."""


class ThemeDepthError(ThemerError):
    """Raised when a theme is nested deeper than the configured limit."""

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(f"Theme nesting depth {depth} exceeds limit of {limit}")


class ThemeLoadError(ThemerError):
    """Raised when a theme file cannot be read or decoded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
