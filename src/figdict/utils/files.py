"""Utility helpers for writing output artifacts."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from figdict.models import TargetKind, TargetSelector
from figdict.utils.text import safe_filename

DICTIONARY_PREFIX = "figma-data-dictionary"


def output_prefix(selector: TargetSelector) -> str:
    """Base file name for data dictionary artifacts of a selector."""
    if selector.kind is TargetKind.FILE:
        return DICTIONARY_PREFIX
    return f"{DICTIONARY_PREFIX}-{selector.kind.value}-{safe_filename(selector.identifier or '')}"


def write_text_atomic(path: Path, content: str) -> Path:
    """Write text to ``path`` through a temporary file in the same directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return path
