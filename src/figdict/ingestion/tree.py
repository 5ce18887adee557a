"""Navigation helpers over Figma document trees."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from figdict.errors import NotFoundError
from figdict.models import DocumentNode, NodeKind, TargetKind, TargetSelector, TextLeafRecord

LOGGER = logging.getLogger(__name__)

_KIND_FOR_TARGET = {
    TargetKind.PAGE: NodeKind.CANVAS,
    TargetKind.FRAME: NodeKind.FRAME,
}


def iter_nodes(root: DocumentNode) -> Iterator[DocumentNode]:
    """Yield nodes depth-first in pre-order, each node at most once."""
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            LOGGER.warning("Skipping node %s visited twice", node.id)
            continue
        seen.add(id(node))
        yield node
        # Reversed so the first child is popped first.
        stack.extend(reversed(node.children))


def _matches(node: DocumentNode, selector: TargetSelector) -> bool:
    if selector.kind is TargetKind.NODE:
        return node.id == selector.identifier
    if node.kind is not _KIND_FOR_TARGET[selector.kind]:
        return False
    return node.id == selector.identifier or node.name == selector.identifier


def locate_target(root: DocumentNode, selector: TargetSelector) -> Optional[DocumentNode]:
    """Return the first node in pre-order matching the selector, or None."""
    if selector.kind is TargetKind.FILE:
        return root
    for node in iter_nodes(root):
        if _matches(node, selector):
            return node
    return None


def resolve_target(root: DocumentNode, selector: TargetSelector) -> DocumentNode:
    """Like :func:`locate_target` but raises :class:`NotFoundError`."""
    node = locate_target(root, selector)
    if node is None:
        raise NotFoundError(selector)
    LOGGER.info("Found target: %s (%s)", node.name, node.type)
    return node


def collect_text_leaves(root: DocumentNode) -> List[TextLeafRecord]:
    """Collect every TEXT node under ``root`` in visitation order."""
    return [TextLeafRecord.from_node(node) for node in iter_nodes(root) if node.kind is NodeKind.TEXT]
