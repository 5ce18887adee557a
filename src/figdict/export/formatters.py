"""Serialize field dictionaries and text layers to CSV and JSON."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from figdict.models import ClassifiedField, TextLeafRecord
from figdict.utils.text import escape_csv

SUMMARY_HEADERS = (
    "Field Name",
    "Figma Name",
    "Suggested Type",
    "Data Type",
    "Confidence",
    "Is Required",
    "Max Length",
    "Placeholder",
)

TEXT_LAYER_HEADERS = (
    "id",
    "name",
    "characters",
    "fontFamily",
    "fontSize",
    "positionX",
    "positionY",
    "width",
    "height",
)

FieldPairs = Sequence[Tuple[str, ClassifiedField]]


def _csv_line(values: Iterable[Any]) -> str:
    return ",".join(escape_csv(value) for value in values)


def summary_row(key: str, field: ClassifiedField) -> List[Any]:
    return [
        key,
        field.source_name,
        field.category,
        field.data_type,
        field.confidence,
        field.is_required,
        field.max_length,
        field.is_placeholder,
    ]


def dictionary_to_csv(pairs: FieldPairs) -> str:
    """Summary CSV with one row per field, in the given order."""
    lines = [",".join(SUMMARY_HEADERS)]
    lines.extend(_csv_line(summary_row(key, field)) for key, field in pairs)
    return "\n".join(lines)


def dictionary_to_dict(pairs: FieldPairs) -> Dict[str, Dict[str, Any]]:
    return {key: field.to_dict() for key, field in pairs}


def dictionary_to_json(pairs: FieldPairs) -> str:
    return json.dumps(dictionary_to_dict(pairs), indent=2, ensure_ascii=False)


def text_layer_row(leaf: TextLeafRecord) -> Dict[str, Any]:
    style = leaf.style
    box = leaf.bounding_box
    return {
        "id": leaf.id,
        "name": leaf.name,
        "characters": leaf.characters,
        "fontFamily": style.font_family if style else None,
        "fontSize": style.font_size if style else None,
        "positionX": box.x if box else None,
        "positionY": box.y if box else None,
        "width": box.width if box else None,
        "height": box.height if box else None,
    }


def text_layers_to_csv(leaves: Iterable[TextLeafRecord]) -> str:
    lines = [",".join(TEXT_LAYER_HEADERS)]
    for leaf in leaves:
        row = text_layer_row(leaf)
        lines.append(_csv_line(row[header] for header in TEXT_LAYER_HEADERS))
    return "\n".join(lines)


def text_layer_to_dict(leaf: TextLeafRecord) -> Dict[str, Any]:
    style = leaf.style
    box = leaf.bounding_box
    return {
        "id": leaf.id,
        "name": leaf.name,
        "characters": leaf.characters,
        "style": (
            {"fontFamily": style.font_family, "fontSize": style.font_size} if style else None
        ),
        "absoluteBoundingBox": (
            {"x": box.x, "y": box.y, "width": box.width, "height": box.height} if box else None
        ),
    }


def text_layers_to_json(leaves: Iterable[TextLeafRecord]) -> str:
    return json.dumps([text_layer_to_dict(leaf) for leaf in leaves], indent=2, ensure_ascii=False)
