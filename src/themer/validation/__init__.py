from themer.validation.diagnostic import Diagnostic, Severity
from themer.validation.validator import (
    ThemeValidator,
    ValidationError,
    validate,
    validate_or_raise,
)

__all__ = [
    "Diagnostic",
    "Severity",
    "ThemeValidator",
    "ValidationError",
    "validate",
    "validate_or_raise",
]
