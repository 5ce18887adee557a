"""Confidence scoring for classified fields."""

from __future__ import annotations

from figdict.classify.patterns import (
    DEFAULT_DATA_TYPE,
    FIELD_PATTERNS,
    NO_CATEGORY,
    has_placeholder_text,
    infer_data_type,
)

CATEGORY_WEIGHT = 40
PLACEHOLDER_WEIGHT = 30
NAME_MATCH_WEIGHT = 20
TYPED_CONTENT_WEIGHT = 10
MAX_CONFIDENCE = 100


def score_confidence(category: str, text: str, name: str) -> int:
    """Combine classification signals into a 0-100 confidence score.

    ``text`` is the lower-cased text content of the layer.
    """
    confidence = 0
    has_category = category != NO_CATEGORY
    if has_category:
        confidence += CATEGORY_WEIGHT
    if has_placeholder_text(text):
        confidence += PLACEHOLDER_WEIGHT
    if has_category and FIELD_PATTERNS[category].search(name.lower()):
        confidence += NAME_MATCH_WEIGHT
    if infer_data_type(text) != DEFAULT_DATA_TYPE:
        confidence += TYPED_CONTENT_WEIGHT
    return min(confidence, MAX_CONFIDENCE)
