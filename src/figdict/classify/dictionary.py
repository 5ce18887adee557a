"""Assemble classified fields into a data dictionary."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from figdict.classify.classifier import classify_leaf
from figdict.models import ClassifiedField, TextLeafRecord

LOGGER = logging.getLogger(__name__)


class FieldDictionary:
    """Insertion-ordered mapping of field key to classified field.

    Adding a field under an existing key replaces the earlier field but keeps
    its original position.
    """

    def __init__(self) -> None:
        self._fields: Dict[str, ClassifiedField] = {}

    def add(self, field: ClassifiedField) -> None:
        if field.key in self._fields:
            LOGGER.debug(
                "Field key %r from %s overwrites %s",
                field.key,
                field.source_id,
                self._fields[field.key].source_id,
            )
        self._fields[field.key] = field

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __getitem__(self, key: str) -> ClassifiedField:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def items(self) -> List[Tuple[str, ClassifiedField]]:
        return list(self._fields.items())

    def sorted_fields(self) -> List[Tuple[str, ClassifiedField]]:
        """Entries by descending confidence; ties keep insertion order."""
        return sorted(self._fields.items(), key=lambda item: -item[1].confidence)


def build_data_dictionary(leaves: Iterable[TextLeafRecord]) -> FieldDictionary:
    """Classify text layers and collect the likely dynamic fields."""
    dictionary = FieldDictionary()
    for leaf in leaves:
        field = classify_leaf(leaf)
        if field is not None:
            dictionary.add(field)
    LOGGER.info("Identified %d potential dynamic fields", len(dictionary))
    return dictionary
