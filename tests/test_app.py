"""
Tests for Application-Level Behavior

Health check, root endpoint and the shared failure envelope.
"""

from unittest.mock import MagicMock

from fastapi import status
from sqlalchemy.exc import OperationalError

from catalog_api import __version__
from catalog_api.database import get_db
from catalog_api.main import INTERNAL_ERROR_MESSAGE, app


def broken_session() -> MagicMock:
    """A session whose every query fails as if the database were down."""
    session = MagicMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
    return session


class TestHealth:
    """Tests for GET /health."""

    def test_health_ok(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "ok"
        assert data["version"] == __version__

    def test_health_degraded(self, client):
        app.dependency_overrides[get_db] = broken_session

        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unavailable"


class TestRoot:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Welcome to Catalog API"
        assert data["docs"] == "/docs"


class TestErrorEnvelope:
    """Every failure is reported as {error, message}."""

    def test_unknown_route(self, client):
        response = client.get("/api/Nothing/Here")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert set(response.json()) == {"error", "message"}
        assert response.json()["error"] == "NotFound"

    def test_wrong_method(self, client):
        response = client.delete("/api/Books/List")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json()["error"] == "MethodNotAllowed"

    def test_non_integer_id(self, client):
        response = client.get("/api/Books/Find/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error"] == "InvalidRequest"
        assert body["message"].startswith("Invalid request payload.")

    def test_malformed_json(self, client):
        response = client.post(
            "/api/Authors/Add",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_database_failure_hides_details(self, client):
        """Storage errors become a fixed 500 message without internals."""
        app.dependency_overrides[get_db] = broken_session

        response = client.get("/api/Books/List")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        body = response.json()
        assert body == {
            "error": "InternalServerError",
            "message": INTERNAL_ERROR_MESSAGE,
        }
        assert "down" not in response.text
