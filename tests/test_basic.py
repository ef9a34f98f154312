"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

from fastapi.testclient import TestClient

from forgery.core.config import Settings
from forgery.main import app, create_app

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body

    def test_health_reports_configured_version(self) -> None:
        """The version comes from the settings the app was built with."""
        local = TestClient(create_app(Settings(version="9.9.9")))
        assert local.get("/health").json() == {"status": "ok", "version": "9.9.9"}


class TestApiDocs:
    """Docs are only served in debug mode."""

    def test_docs_hidden_by_default(self) -> None:
        local = TestClient(create_app(Settings(debug=False)))
        assert local.get("/docs").status_code == 404

    def test_docs_served_in_debug(self) -> None:
        local = TestClient(create_app(Settings(debug=True)))
        assert local.get("/docs").status_code == 200
