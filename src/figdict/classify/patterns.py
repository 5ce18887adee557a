"""Static pattern tables used to classify text layers.

All tables are compiled once at import time and never mutated. Category order
matters: the first category whose pattern matches wins.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Pattern, Tuple

NO_CATEGORY = "none"
DEFAULT_DATA_TYPE = "string"

_I = re.IGNORECASE
_A = re.ASCII

FIELD_PATTERNS: Mapping[str, Pattern[str]] = MappingProxyType(
    {
        "email": re.compile(r".*email.*|.*e-mail.*", _I),
        "phone": re.compile(r".*phone.*|.*mobile.*|.*tel.*", _I),
        "name": re.compile(r".*name.*|.*first.*|.*last.*|.*full.*", _I),
        "date": re.compile(r".*date.*|.*time.*|.*created.*|.*updated.*", _I),
        "price": re.compile(r".*price.*|.*cost.*|.*amount.*|\$|€|£", _I),
        "id": re.compile(r".*id\b.*|.*uuid.*|.*identifier.*", _I | _A),
        "description": re.compile(r".*description.*|.*desc.*|.*summary.*", _I),
        "title": re.compile(r".*title.*|.*heading.*|.*headline.*", _I),
        "status": re.compile(r".*status.*|.*state.*", _I),
        "count": re.compile(r".*count.*|.*number.*|.*quantity.*|.*amount.*", _I),
        "address": re.compile(r".*address.*|.*street.*|.*city.*|.*state.*|.*zip.*", _I),
        "username": re.compile(r".*username.*|.*user\s*name.*", _I),
        "password": re.compile(r".*password.*|.*pin.*", _I),
        "url": re.compile(r".*url.*|.*link.*|.*website.*", _I),
        "image": re.compile(r".*image.*|.*photo.*|.*picture.*|.*avatar.*", _I),
    }
)

# Tested against lower-cased text only.
PLACEHOLDER_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\{.*\}"),
    re.compile(r"\[.*\]"),
    re.compile(r"<%.*%>"),
    re.compile(r"\{\{.*\}\}"),
    re.compile(r"lorem ipsum", _I),
    re.compile(r"example\.com", _I),
    re.compile(r"test@test", _I),
    re.compile(r"xxx", _I),
    re.compile(r"placeholder", _I),
    re.compile(r"sample", _I),
    re.compile(r"your\s+", _I),
    re.compile(r"enter\s+", _I),
    re.compile(r"dummy", _I),
    re.compile(r"tbd", _I),
    re.compile(r"\.\.\."),
    re.compile(r"###"),
    re.compile(r"\$\d+", _A),
    re.compile(r"\d{3}-\d{3}-\d{4}", _A),
    re.compile(r"\([0-9]{3}\)\s*[0-9]{3}-[0-9]{4}"),  # ASCII digits, Unicode \s
    re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}", _A),
    re.compile(r"\d{4}-\d{2}-\d{2}", _A),
)

REQUIRED_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"required", _I),
    re.compile(r"mandatory", _I),
    re.compile(r"\*"),
    re.compile(r"\*\*"),
    re.compile(r"must\s+have", _I),
    re.compile(r"cannot\s+be\s+empty", _I),
)

# Ordered; the first matching predicate decides the concrete data type.
DATA_TYPE_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("integer", re.compile(r"^\d+\Z", re.ASCII)),
    ("float", re.compile(r"^\d*\.\d+\Z", re.ASCII)),
    ("date", re.compile(r"^\d{4}-\d{2}-\d{2}", re.ASCII)),
    ("boolean", re.compile(r"^(true|false)\Z", _I)),
    ("email", re.compile(r"^[\w.-]+@[\w.-]+\.\w+\Z", re.ASCII)),
    ("url", re.compile(r"^https?://.+")),
    ("currency", re.compile(r"^\$\d+(\.\d{2})?\Z", re.ASCII)),
    ("phone", re.compile(r"^\d{3}-\d{3}-\d{4}\Z", re.ASCII)),
)

VALIDATION_RULES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "email": ("valid_email_format", "min_length: 5"),
        "phone": ("valid_phone_format", "digits_only"),
        "date": ("valid_date_format", "not_future_date"),
        "price": ("positive_number", "max_decimal_places: 2"),
        "currency": ("positive_number", "max_decimal_places: 2"),
        "url": ("valid_url_format",),
        "password": (
            "min_length: 8",
            "contains_uppercase",
            "contains_lowercase",
            "contains_number",
        ),
    }
)

DEFAULT_FONT_SIZE = 12
CHAR_WIDTH_RATIO = 0.6
MIN_LENGTH_CAP = 50


def match_category(name: str, text: str) -> str:
    """Return the first category matching the name or the text, else ``"none"``."""
    for category, pattern in FIELD_PATTERNS.items():
        if pattern.search(name) or pattern.search(text):
            return category
    return NO_CATEGORY


def has_placeholder_text(text: str | None) -> bool:
    if not text:
        return False
    text = text.lower()
    return any(pattern.search(text) for pattern in PLACEHOLDER_PATTERNS)


def infer_data_type(text: str | None) -> str:
    """Guess the concrete data type of a text value."""
    if not text:
        return DEFAULT_DATA_TYPE
    for data_type, pattern in DATA_TYPE_PATTERNS:
        if pattern.search(text):
            return data_type
    return DEFAULT_DATA_TYPE
