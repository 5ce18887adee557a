"""Heuristics that decide whether a text layer is a dynamic data field."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from figdict.classify.patterns import (
    CHAR_WIDTH_RATIO,
    DEFAULT_FONT_SIZE,
    MIN_LENGTH_CAP,
    NO_CATEGORY,
    REQUIRED_PATTERNS,
    VALIDATION_RULES,
    has_placeholder_text,
    infer_data_type,
    match_category,
)
from figdict.classify.scoring import score_confidence
from figdict.models import ClassifiedField, TextLeafRecord
from figdict.utils.text import to_field_key

LOGGER = logging.getLogger(__name__)


def is_likely_required(name: str) -> bool:
    return any(pattern.search(name) for pattern in REQUIRED_PATTERNS)


def estimate_max_length(leaf: TextLeafRecord) -> Optional[int]:
    """Rough character capacity of the layer: width / (font size * 0.6)."""
    box = leaf.bounding_box
    if box is None:
        return None
    width = box.width or 0
    font_size = (leaf.style.font_size if leaf.style else None) or DEFAULT_FONT_SIZE
    return math.floor(width / (font_size * CHAR_WIDTH_RATIO))


def suggest_validation_rules(category: str, text: str) -> List[str]:
    rules = list(VALIDATION_RULES.get(category, ()))
    if text:
        rules.append(f"max_length: {max(len(text) * 2, MIN_LENGTH_CAP)}")
    return rules


def classify_leaf(leaf: TextLeafRecord) -> Optional[ClassifiedField]:
    """Classify a text layer.

    Returns None when the layer matches no category and does not look like
    placeholder text.
    """
    name = leaf.name.lower()
    original = leaf.characters or ""
    text = original.lower()

    category = match_category(name, text)
    is_placeholder = has_placeholder_text(text)
    if category == NO_CATEGORY and not is_placeholder:
        LOGGER.debug("Skipping static text layer %s (%s)", leaf.id, leaf.name)
        return None

    box = leaf.bounding_box
    style = leaf.style
    return ClassifiedField(
        key=to_field_key(leaf.name),
        source_id=leaf.id,
        source_name=leaf.name,
        original_text=original,
        category=category,
        data_type=infer_data_type(original),
        max_length=estimate_max_length(leaf),
        is_required=is_likely_required(leaf.name),
        validation_rules=suggest_validation_rules(category, text),
        is_placeholder=is_placeholder,
        confidence=score_confidence(category, text, leaf.name),
        font_size=style.font_size if style else None,
        font_family=style.font_family if style else None,
        position={"x": box.x if box else None, "y": box.y if box else None},
        dimensions={
            "width": box.width if box else None,
            "height": box.height if box else None,
        },
    )
