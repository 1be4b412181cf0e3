"""Diagnostic model: findings about a theme, located by key path."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """How a finding affects the rendered stylesheet.

    ERROR: the fragment renders empty or with a broken selector.
    WARNING: a key is dropped from the output.
    """

    ERROR = "ERROR"
    WARNING = "WARNING"

    @property
    def rank(self) -> int:
        return 0 if self is Severity.ERROR else 1


@dataclass(frozen=True)
class Diagnostic:
    rule: str
    severity: Severity
    message: str
    path: str = ""  # dotted key path, e.g. ``hover.class[1]``
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def sort_key(self) -> tuple[int, str]:
        return self.severity.rank, self.path

    def format(self, hint: bool = False) -> str:
        """One-line report; with *hint*, the suggested fix is appended."""
        location = f" [{self.path}]" if self.path else ""
        line = f"{self.severity.value}{location}: {self.message}"
        if hint and self.fix:
            line += f" ({self.fix})"
        return line

    def __str__(self) -> str:
        return self.format()
