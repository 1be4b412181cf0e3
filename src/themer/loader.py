"""Load theme mappings from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from themer.errors import ThemeLoadError


def load_theme(path: str | Path) -> dict[str, Any]:
    """Read a JSON theme file whose top level is an object.

    Raises :class:`ThemeLoadError` if the file is unreadable, is not UTF-8,
    is not valid JSON or does not hold an object.
    """
    theme_path = Path(path)
    try:
        data = json.loads(theme_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ThemeLoadError(f"Cannot read {theme_path}: {exc}", path=str(theme_path)) from exc
    except UnicodeDecodeError as exc:
        raise ThemeLoadError(
            f"{theme_path} is not UTF-8 text (byte offset {exc.start})", path=str(theme_path)
        ) from exc
    except json.JSONDecodeError as exc:
        raise ThemeLoadError(
            f"Invalid JSON in {theme_path} at line {exc.lineno}: {exc.msg}",
            path=str(theme_path),
        ) from exc
    if not isinstance(data, dict):
        raise ThemeLoadError(
            f"Theme in {theme_path} must be a JSON object, got {type(data).__name__}",
            path=str(theme_path),
        )
    return data
