"""Tests for data dictionary assembly."""

from __future__ import annotations

from typing import Any, Dict

from figdict.classify.dictionary import FieldDictionary, build_data_dictionary
from figdict.ingestion.tree import collect_text_leaves
from figdict.models import DocumentNode, TextLeafRecord


def _leaf(leaf_id: str, name: str, text: str) -> TextLeafRecord:
    return TextLeafRecord(id=leaf_id, name=name, characters=text)


class TestBuildDataDictionary:
    """Test build_data_dictionary."""

    def test_sample_document(self, sample_document: Dict[str, Any]) -> None:
        leaves = collect_text_leaves(DocumentNode.from_dict(sample_document))

        dictionary = build_data_dictionary(leaves)

        assert list(dictionary) == ["email_address", "price", "full_name"]
        assert "header" not in dictionary
        assert dictionary["full_name"].confidence == 60

    def test_colliding_keys_overwrite_in_place(self) -> None:
        leaves = [
            _leaf("a", "Email", "first@mail.co"),
            _leaf("b", "Price", "$5"),
            _leaf("c", "Email!", "second@mail.co"),
        ]

        dictionary = build_data_dictionary(leaves)

        assert list(dictionary) == ["email", "price"]
        assert dictionary["email"].source_id == "c"
        assert dictionary["email"].original_text == "second@mail.co"

    def test_empty(self) -> None:
        dictionary = build_data_dictionary([])

        assert len(dictionary) == 0
        assert dictionary.sorted_fields() == []

    def test_idempotent(self, sample_document: Dict[str, Any]) -> None:
        leaves = collect_text_leaves(DocumentNode.from_dict(sample_document))

        first = build_data_dictionary(leaves).sorted_fields()
        second = build_data_dictionary(leaves).sorted_fields()

        assert [(key, field.to_dict()) for key, field in first] == [
            (key, field.to_dict()) for key, field in second
        ]


class TestSortedFields:
    """Test confidence ordering."""

    def test_descending_confidence(self, sample_document: Dict[str, Any]) -> None:
        leaves = collect_text_leaves(DocumentNode.from_dict(sample_document))

        pairs = build_data_dictionary(leaves).sorted_fields()

        assert [key for key, _ in pairs] == ["email_address", "price", "full_name"]
        assert [field.confidence for _, field in pairs] == [100, 100, 60]

    def test_ties_keep_traversal_order(self) -> None:
        leaves = [
            _leaf("1", "Heading", "Welcome"),
            _leaf("2", "Email", "a@b.co"),
            _leaf("3", "Status", "Active"),
        ]

        pairs = build_data_dictionary(leaves).sorted_fields()

        assert [(key, field.confidence) for key, field in pairs] == [
            ("email", 70),
            ("heading", 60),
            ("status", 60),
        ]

    def test_add_and_items(self) -> None:
        dictionary = FieldDictionary()
        leaves = [_leaf("1", "Status", "Active")]
        for field in build_data_dictionary(leaves).items():
            dictionary.add(field[1])

        assert [key for key, _ in dictionary.items()] == ["status"]
