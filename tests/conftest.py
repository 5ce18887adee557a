"""Shared fixtures for FigDict tests."""

from __future__ import annotations

import copy
from typing import Any, Dict

import pytest

SAMPLE_DOCUMENT: Dict[str, Any] = {
    "id": "0:0",
    "name": "Document",
    "type": "DOCUMENT",
    "children": [
        {
            "id": "1:1",
            "name": "Page 1",
            "type": "CANVAS",
            "children": [
                {
                    "id": "2:1",
                    "name": "Signup",
                    "type": "FRAME",
                    "children": [
                        {
                            "id": "3:1",
                            "name": "Email Address",
                            "type": "TEXT",
                            "characters": "john@example.com",
                            "style": {"fontFamily": "Inter", "fontSize": 16},
                            "absoluteBoundingBox": {"x": 10, "y": 20, "width": 200, "height": 24},
                        },
                        {
                            "id": "3:2",
                            "name": "Header",
                            "type": "TEXT",
                            "characters": "Welcome",
                        },
                        {
                            "id": "3:3",
                            "name": "Price",
                            "type": "TEXT",
                            "characters": "$19.99",
                            "style": {"fontFamily": "Inter", "fontSize": 10},
                            "absoluteBoundingBox": {"x": 10, "y": 60, "width": 120, "height": 14},
                        },
                    ],
                }
            ],
        },
        {
            "id": "1:2",
            "name": "Page 2",
            "type": "CANVAS",
            "children": [
                {
                    "id": "2:2",
                    "name": "Profile",
                    "type": "FRAME",
                    "children": [
                        {
                            "id": "4:1",
                            "name": "Avatar Group",
                            "type": "GROUP",
                            "children": [
                                {
                                    "id": "3:4",
                                    "name": "Full Name",
                                    "type": "TEXT",
                                    "characters": "Jane Doe",
                                }
                            ],
                        }
                    ],
                }
            ],
        },
    ],
}


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_payload(sample_document: Dict[str, Any]) -> Dict[str, Any]:
    return {"name": "Sample file", "document": sample_document}
