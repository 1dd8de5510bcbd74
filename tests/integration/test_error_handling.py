"""
Integration tests for error handling.

Tests that errors come back as {"error": ...} JSON with the right status:
- Missing resources and malformed IDs
- Malformed bodies
- Unhandled exceptions
"""
import uuid
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.main import app


class TestInvalidIdHandling:
    """Tests for invalid ID handling."""

    def test_booking_not_found(self, auth_client: TestClient):
        response = auth_client.get(f"/api/bookings/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Booking not found"}

    def test_invalid_id_format(self, auth_client: TestClient):
        response = auth_client.get("/api/vehicles/12345")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_method_not_allowed(self, client: TestClient):
        response = client.delete("/api/services")

        assert response.status_code == 405
        assert "error" in response.json()


class TestMalformedRequests:
    """Tests for malformed request handling."""

    def test_invalid_json_body(self, client: TestClient):
        response = client.post(
            "/api/auth/login",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_missing_required_fields(self, auth_client: TestClient):
        response = auth_client.post("/api/vehicles", json={"make": "Ford"})

        assert response.status_code == 400
        fields = {tuple(d["loc"])[-1] for d in response.json()["details"]}
        assert {"model", "year"} <= fields

    def test_wrong_type(self, auth_client: TestClient):
        response = auth_client.post(
            "/api/vehicles", json={"make": "Ford", "model": "Focus", "year": "old"}
        )

        assert response.status_code == 400

    def test_invalid_status_value(self, admin_client: TestClient):
        response = admin_client.patch(
            f"/api/bookings/{uuid.uuid4()}", json={"status": "teleported"}
        )

        assert response.status_code == 400


class TestUnhandledErrors:
    """Tests for the catch-all handler."""

    def test_unexpected_exception_returns_500(self, db):
        def override_get_db():
            yield db

        from app.database import get_db
        app.dependency_overrides[get_db] = override_get_db

        try:
            with TestClient(app, raise_server_exceptions=False) as client, \
                 patch(
                     "app.api.services.catalog_service.get_services",
                     side_effect=RuntimeError("database exploded"),
                 ):
                response = client.get("/api/services")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
        assert "exploded" not in response.text
