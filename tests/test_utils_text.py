"""Tests for text utility functions."""

from __future__ import annotations

import pytest

from figdict.utils.text import escape_csv, safe_filename, to_field_key


class TestToFieldKey:
    """Test to_field_key function."""

    @pytest.mark.parametrize(
        "name, key",
        [
            ("Email Address", "email_address"),
            ("First-Name!", "firstname"),
            ("user_email", "user_email"),
            ("Total   Amount ($)", "total_amount_"),
            ("  padded ", "_padded_"),
            ("Line\tbreak", "line_break"),
        ],
    )
    def test_keys(self, name: str, key: str) -> None:
        assert to_field_key(name) == key

    @pytest.mark.parametrize("name", ["", "!!!", "$ *"])
    def test_degenerate_names(self, name: str) -> None:
        assert to_field_key(name).strip("_") == ""


class TestEscapeCsv:
    """Test escape_csv function."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ""),
            ("plain", "plain"),
            ("a,b", '"a,b"'),
            ('say "hi"', '"say ""hi"""'),
            ("two\nlines", '"two\nlines"'),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (0, "0"),
        ],
    )
    def test_escape(self, value: object, expected: str) -> None:
        assert escape_csv(value) == expected


class TestSafeFilename:
    """Test safe_filename function."""

    def test_replaces_non_alphanumerics(self) -> None:
        assert safe_filename("Check out/1:2") == "Check_out_1_2"
