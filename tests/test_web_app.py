"""Tests for the FastAPI web application."""

from __future__ import annotations

from typing import Any, Dict

from fastapi.testclient import TestClient

from figdict.web.app import app


client = TestClient(app)


class TestHealth:
    """Tests for GET /health."""

    def test_health(self) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestAnalyzeEndpoint:
    """Tests for POST /analyze."""

    def test_analyze_whole_document(self, sample_document: Dict[str, Any]) -> None:
        response = client.post("/analyze", json={"document": sample_document})

        assert response.status_code == 200
        body = response.json()
        assert body["target"] == {"id": "0:0", "name": "Document", "type": "DOCUMENT"}
        assert body["text_layer_count"] == 4
        assert [field["key"] for field in body["fields"]] == ["email_address", "price", "full_name"]
        assert body["fields"][0]["confidence"] == 100

    def test_analyze_frame(self, sample_document: Dict[str, Any]) -> None:
        response = client.post(
            "/analyze",
            json={"document": sample_document, "target_type": "frame", "target_name": "Profile"},
        )

        assert response.status_code == 200
        assert [field["key"] for field in response.json()["fields"]] == ["full_name"]

    def test_analyze_nodes_payload(self, sample_document: Dict[str, Any]) -> None:
        text = sample_document["children"][0]["children"][0]["children"][0]
        response = client.post(
            "/analyze",
            json={"nodes": {"3:1": {"document": text}}, "target_type": "node", "target_id": "3:1"},
        )

        assert response.status_code == 200
        assert response.json()["fields"][0]["figmaId"] == "3:1"

    def test_analyze_missing_frame(self, sample_document: Dict[str, Any]) -> None:
        response = client.post(
            "/analyze",
            json={"document": sample_document, "target_type": "frame", "target_name": "Checkout"},
        )

        assert response.status_code == 404
        assert "frame: Checkout" in response.json()["detail"]

    def test_analyze_malformed_nodes(self) -> None:
        """Wrongly typed values in present nodes are tolerated."""
        document = {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {"id": "1:1", "name": "Broken", "type": "CANVAS", "children": 5},
                {
                    "id": "3:1",
                    "name": "Email",
                    "type": "TEXT",
                    "characters": "a@b.co",
                    "style": {"fontSize": "10"},
                    "absoluteBoundingBox": {"width": "120"},
                },
            ],
        }
        response = client.post("/analyze", json={"document": document})

        assert response.status_code == 200
        fields = response.json()["fields"]
        assert [field["key"] for field in fields] == ["email"]
        assert fields[0]["maxLength"] == 20

    def test_analyze_missing_document(self) -> None:
        response = client.post("/analyze", json={})

        assert response.status_code == 422
        assert "root document" in response.json()["detail"]

    def test_analyze_bad_target_type(self, sample_document: Dict[str, Any]) -> None:
        response = client.post(
            "/analyze", json={"document": sample_document, "target_type": "component"}
        )

        assert response.status_code == 400
        assert "Unknown target type" in response.json()["detail"]


class TestTextLayersEndpoint:
    """Tests for POST /text-layers."""

    def test_text_layers(self, sample_document: Dict[str, Any]) -> None:
        response = client.post("/text-layers", json={"document": sample_document})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 4
        assert body["text_layers"][2]["characters"] == "$19.99"

    def test_text_layers_page(self, sample_document: Dict[str, Any]) -> None:
        response = client.post(
            "/text-layers",
            json={"document": sample_document, "target_type": "page", "target_id": "1:2"},
        )

        assert response.status_code == 200
        assert [layer["id"] for layer in response.json()["text_layers"]] == ["3:4"]
