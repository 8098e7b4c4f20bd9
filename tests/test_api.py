# -*- coding: utf-8 -*-
"""
Tests for the FastAPI API.
"""
from unittest.mock import patch

from release_notes import __version__


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_returns_status(self, client):
        """Health endpoint should return status and version."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__

    def test_request_id_is_generated(self, client):
        """Responses should carry a request ID."""
        response = client.get("/health")
        assert response.headers.get("X-Request-ID")

    def test_request_id_is_echoed(self, client):
        """A caller-supplied request ID should be returned unchanged."""
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestFormatEndpoint:
    """Tests for /format endpoint."""

    def test_format_success(self, client):
        """Should return formatted notes."""
        response = client.post("/format", json={"body": "## Title\n\n- Bullet point 1"})

        assert response.status_code == 200
        data = response.json()
        assert data["notes"] == "Title\n- Bullet point 1"
        assert data["has_content"] is True
        assert data["line_count"] == 2
        assert "assembly" in data["steps_applied"]

    def test_format_null_body(self, client):
        """A null body should yield null notes."""
        response = client.post("/format", json={"body": None})

        assert response.status_code == 200
        data = response.json()
        assert data["notes"] is None
        assert data["has_content"] is False
        assert data["line_count"] == 0

    def test_format_missing_body(self, client):
        """An omitted body is treated as absent."""
        response = client.post("/format", json={})

        assert response.status_code == 200
        assert response.json()["notes"] is None

    def test_format_no_surviving_content(self, client):
        """Content that is all filtered out should yield null notes."""
        response = client.post("/format", json={"body": "<html> </html>"})

        assert response.status_code == 200
        assert response.json()["notes"] is None

    def test_format_validates_body_type(self, client):
        """A non-string body should be rejected."""
        response = client.post("/format", json={"body": ["- a"]})
        assert response.status_code == 422

    def test_format_rejects_oversized_body(self, client):
        """Bodies over the configured limit should be rejected."""
        with patch("release_notes.api.settings") as mock_settings:
            mock_settings.MAX_BODY_LENGTH = 10
            response = client.post("/format", json={"body": "- " + "a" * 20})

        assert response.status_code == 413

    def test_format_limit_disabled(self, client):
        """A zero limit should accept any size."""
        with patch("release_notes.api.settings") as mock_settings:
            mock_settings.MAX_BODY_LENGTH = 0
            response = client.post("/format", json={"body": "- " + "a" * 500})

        assert response.status_code == 200
        assert response.json()["notes"] == "- " + "a" * 500


class TestFormatBatchEndpoint:
    """Tests for /format/batch endpoint."""

    def test_batch_preserves_order(self, client):
        """Should return one response per request, in order."""
        response = client.post(
            "/format/batch",
            json=[
                {"body": "- **First**"},
                {"body": None},
                {"body": "- One. Two."},
            ],
        )

        assert response.status_code == 200
        data = response.json()
        assert [item["notes"] for item in data] == [
            "- First",
            None,
            "- One.\n  Two.",
        ]

    def test_batch_empty(self, client):
        """An empty batch returns an empty list."""
        response = client.post("/format/batch", json=[])

        assert response.status_code == 200
        assert response.json() == []

    def test_batch_too_large(self, client):
        """Batches over the configured size should be rejected."""
        with patch("release_notes.api.settings") as mock_settings:
            mock_settings.MAX_BATCH_SIZE = 1
            mock_settings.MAX_BODY_LENGTH = 0
            response = client.post(
                "/format/batch", json=[{"body": "- a"}, {"body": "- b"}]
            )

        assert response.status_code == 413

    def test_batch_rejects_oversized_item(self, client):
        """One oversized body fails the whole batch."""
        with patch("release_notes.api.settings") as mock_settings:
            mock_settings.MAX_BATCH_SIZE = 10
            mock_settings.MAX_BODY_LENGTH = 5
            response = client.post(
                "/format/batch", json=[{"body": "- a"}, {"body": "- " + "b" * 10}]
            )

        assert response.status_code == 413
