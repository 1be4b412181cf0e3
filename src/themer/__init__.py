"""Themer: turn nested theme objects into CSS-in-code stylesheet text."""

__version__ = "0.2.0"

from themer.config import ThemerConfig  # noqa: E402
from themer.errors import ThemeDepthError, ThemeLoadError, ThemerError  # noqa: E402
from themer.media import BreakpointLimits  # noqa: E402
from themer.model import Category  # noqa: E402
from themer.transformer import Themer, themer, transform  # noqa: E402
from themer.validation import validate, validate_or_raise  # noqa: E402

__all__ = [
    "BreakpointLimits",
    "Category",
    "ThemeDepthError",
    "ThemeLoadError",
    "Themer",
    "ThemerConfig",
    "ThemerError",
    "__version__",
    "themer",
    "transform",
    "validate",
    "validate_or_raise",
]
