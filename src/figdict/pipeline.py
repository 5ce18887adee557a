"""End-to-end analysis of a fetched Figma payload."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from figdict.classify.dictionary import FieldDictionary, build_data_dictionary
from figdict.errors import FetchError, NotFoundError
from figdict.ingestion.figma_client import FigmaClient
from figdict.ingestion.tree import collect_text_leaves, resolve_target
from figdict.models import ClassifiedField, DocumentNode, TargetKind, TargetSelector, TextLeafRecord

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    selector: TargetSelector
    target: DocumentNode
    text_layers: List[TextLeafRecord]
    dictionary: FieldDictionary

    def sorted_fields(self) -> List[Tuple[str, ClassifiedField]]:
        return self.dictionary.sorted_fields()


def _document_root(payload: Dict[str, Any]) -> DocumentNode:
    document = payload.get("document")
    if not isinstance(document, dict):
        raise FetchError("Figma response is missing the root document")
    return DocumentNode.from_dict(document)


def root_for_selector(payload: Dict[str, Any], selector: TargetSelector) -> DocumentNode:
    """Resolve the node to analyze from a files or nodes API payload."""
    nodes = payload.get("nodes")
    if selector.kind is TargetKind.NODE and isinstance(nodes, dict):
        entry = nodes.get(selector.identifier)
        if not isinstance(entry, dict) or not isinstance(entry.get("document"), dict):
            raise NotFoundError(selector)
        return DocumentNode.from_dict(entry["document"])

    root = _document_root(payload)
    return resolve_target(root, selector)


def analyze_document(payload: Dict[str, Any], selector: TargetSelector) -> AnalysisResult:
    """Classify the text layers of the selected part of a payload."""
    target = root_for_selector(payload, selector)
    leaves = collect_text_leaves(target)
    LOGGER.info("Found %d text layers in %s", len(leaves), selector.describe())
    dictionary = build_data_dictionary(leaves)
    return AnalysisResult(selector=selector, target=target, text_layers=leaves, dictionary=dictionary)


def fetch_payload(
    client: FigmaClient, file_key: str, selector: TargetSelector, *, use_nodes_endpoint: bool = True
) -> Dict[str, Any]:
    """Fetch the nodes endpoint for node ids, the whole file otherwise.

    With ``use_nodes_endpoint`` off, a node selector is matched by id in the
    full file tree instead.
    """
    if use_nodes_endpoint and selector.kind is TargetKind.NODE and selector.identifier:
        return client.fetch_nodes(file_key, [selector.identifier])
    return client.fetch_file(file_key)


def analyze_file(
    client: FigmaClient, file_key: str, selector: TargetSelector, *, use_nodes_endpoint: bool = True
) -> AnalysisResult:
    payload = fetch_payload(client, file_key, selector, use_nodes_endpoint=use_nodes_endpoint)
    return analyze_document(payload, selector)
