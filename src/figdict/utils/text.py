"""Text helpers for field keys, CSV cells and file names."""

from __future__ import annotations

import re
from typing import Any

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def to_field_key(name: str) -> str:
    """Convert a Figma layer name into a snake_case API field name.

    May return an empty string when the name holds no word characters.
    """
    name = _NON_WORD.sub("", name)
    name = _WHITESPACE.sub("_", name)
    return name.lower()


def escape_csv(value: Any) -> str:
    """Render a value as a CSV cell, quoting when needed."""
    if value is None:
        return ""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    if '"' in text or "," in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def safe_filename(text: str) -> str:
    """Replace anything that is not an ASCII letter or digit with ``_``."""
    return _NON_ALNUM.sub("_", text)
