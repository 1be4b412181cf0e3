from __future__ import annotations

from dataclasses import dataclass, field

from themer.media import BreakpointLimits


@dataclass(frozen=True)
class ThemerConfig:
    unit: str = "px"
    breakpoints: BreakpointLimits = field(default_factory=BreakpointLimits)
    hoist_breakpoints: bool = True  # append breakpoints last, in canonical order
    keyframes: bool = True
    close_keyframes: bool = False  # the historical output leaves @keyframes open
    case_sensitive_keys: bool = False  # exact match for placeholder/class/child
    max_depth: int = 200

    @classmethod
    def legacy(cls) -> ThemerConfig:
        """First-generation behaviour.

        Breakpoints stay inline, ``keyframes`` is not recognised and the
        ``placeholder``/``class``/``child`` keys must be written in lowercase.
        """
        return cls(hoist_breakpoints=False, keyframes=False, case_sensitive_keys=True)
