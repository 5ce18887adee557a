"""Core FigDict data models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class NodeKind(Enum):
    """Coarse classification of Figma node types."""

    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    FRAME = "FRAME"
    TEXT = "TEXT"
    OTHER = "OTHER"

    @classmethod
    def from_type(cls, node_type: str | None) -> "NodeKind":
        try:
            return cls(node_type)
        except ValueError:
            return cls.OTHER


class TargetKind(Enum):
    """Which part of the document should be analyzed."""

    FILE = "file"
    PAGE = "page"
    FRAME = "frame"
    NODE = "node"


def _as_float(value: Any) -> Optional[float]:
    """Coerce a numeric JSON value, returning ``None`` when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass(slots=True)
class TextStyle:
    font_family: Optional[str] = None
    font_size: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: Any) -> Optional["TextStyle"]:
        if not isinstance(payload, dict):
            return None
        family = payload.get("fontFamily")
        return cls(
            font_family=family if isinstance(family, str) else None,
            font_size=_as_float(payload.get("fontSize")),
        )


@dataclass(slots=True)
class BoundingBox:
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: Any) -> Optional["BoundingBox"]:
        if not isinstance(payload, dict):
            return None
        return cls(
            x=_as_float(payload.get("x")),
            y=_as_float(payload.get("y")),
            width=_as_float(payload.get("width")),
            height=_as_float(payload.get("height")),
        )


@dataclass(slots=True)
class DocumentNode:
    """A node of a Figma document tree."""

    id: str
    name: str
    type: str
    characters: Optional[str] = None
    style: Optional[TextStyle] = None
    bounding_box: Optional[BoundingBox] = None
    children: List["DocumentNode"] = field(default_factory=list)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.from_type(self.type)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DocumentNode":
        """Build a node tree from the JSON shape returned by the Figma API.

        Uses an explicit stack so arbitrarily deep documents do not hit the
        recursion limit. Missing keys fall back to empty defaults, and values of
        the wrong type are dropped rather than raising.
        """
        root = cls._shallow(payload)
        stack = [(root, payload)]
        while stack:
            node, raw = stack.pop()
            raw_children = raw.get("children")
            if not isinstance(raw_children, list):
                continue
            for raw_child in raw_children:
                if not isinstance(raw_child, dict):
                    continue
                child = cls._shallow(raw_child)
                node.children.append(child)
                stack.append((child, raw_child))
        return root

    @classmethod
    def _shallow(cls, raw: Dict[str, Any]) -> "DocumentNode":
        characters = raw.get("characters")
        return cls(
            id=str(raw.get("id") or ""),
            name=str(raw.get("name") or ""),
            type=str(raw.get("type") or ""),
            characters=characters if isinstance(characters, str) else None,
            style=TextStyle.from_dict(raw.get("style")),
            bounding_box=BoundingBox.from_dict(raw.get("absoluteBoundingBox")),
        )


@dataclass(slots=True, frozen=True)
class TargetSelector:
    """Selects the subtree of a document to analyze."""

    kind: TargetKind = TargetKind.FILE
    identifier: Optional[str] = None

    def describe(self) -> str:
        if self.kind is TargetKind.FILE:
            return "file"
        return f"{self.kind.value}: {self.identifier}"


@dataclass(slots=True)
class TextLeafRecord:
    """Flat view of a TEXT node collected during traversal."""

    id: str
    name: str
    characters: str
    style: Optional[TextStyle] = None
    bounding_box: Optional[BoundingBox] = None

    @classmethod
    def from_node(cls, node: DocumentNode) -> "TextLeafRecord":
        return cls(
            id=node.id,
            name=node.name,
            characters=node.characters or "",
            style=node.style,
            bounding_box=node.bounding_box,
        )


@dataclass(slots=True)
class ClassifiedField:
    """A text layer identified as a probable dynamic data field."""

    key: str
    source_id: str
    source_name: str
    original_text: str
    category: str
    data_type: str
    max_length: Optional[int]
    is_required: bool
    validation_rules: List[str]
    is_placeholder: bool
    confidence: int
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    position: Dict[str, Optional[float]] = field(default_factory=dict)
    dimensions: Dict[str, Optional[float]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Full-fidelity JSON form, keyed like the Figma data dictionary export."""
        return {
            "figmaId": self.source_id,
            "figmaName": self.source_name,
            "originalText": self.original_text,
            "suggestedFieldType": self.category,
            "dataType": self.data_type,
            "maxLength": self.max_length,
            "isRequired": self.is_required,
            "validationRules": list(self.validation_rules),
            "fontSize": self.font_size,
            "fontFamily": self.font_family,
            "position": dict(self.position),
            "dimensions": dict(self.dimensions),
            "isPlaceholder": self.is_placeholder,
            "confidence": self.confidence,
        }
