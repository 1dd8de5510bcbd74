"""
Security tests for input validation.

Tests protection against:
- SQL injection
- Stored markup in free-text fields
- Oversized input
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models import User, Vehicle
from tests.factories import create_service, create_user


@pytest.mark.security
class TestSQLInjection:
    """Tests for SQL injection prevention."""

    payloads = [
        "' OR '1'='1",
        "'; DROP TABLE users; --",
        "admin'--",
        "1' OR '1'='1' --",
        "' UNION SELECT * FROM users --",
    ]

    def test_login_sql_injection_username(self, client: TestClient, db: Session):
        create_user(db, username="admin", password="password123")

        for payload in self.payloads:
            response = client.post(
                "/api/auth/login", json={"username": payload, "password": "password123"}
            )

            assert response.status_code == 401

        assert db.query(User).count() == 1

    def test_login_sql_injection_password(self, client: TestClient, db: Session):
        create_user(db, username="admin", password="password123")

        for payload in self.payloads:
            response = client.post(
                "/api/auth/login", json={"username": "admin", "password": payload}
            )

            assert response.status_code == 401

    def test_category_sql_injection(self, client: TestClient, db: Session):
        create_service(db)

        response = client.get("/api/services/category/' OR 1=1 --")

        assert response.status_code == 200
        assert response.json() == []

    def test_injection_in_token_header(self, client: TestClient, db: Session):
        create_user(db)

        response = client.get(
            "/api/auth/me", headers={"Authorization": "Bearer ' OR '1'='1"}
        )

        assert response.status_code == 401

    def test_username_stored_literally(self, client: TestClient, db: Session):
        payload = "robert'); DROP TABLE users;--"

        response = client.post(
            "/api/auth/register", json={"username": payload, "password": "password1"}
        )

        assert response.status_code == 201
        assert db.query(User).filter(User.username == payload).count() == 1


@pytest.mark.security
class TestStoredMarkup:
    """Free text is stored and returned verbatim as JSON data."""

    def test_vehicle_fields_returned_verbatim(self, auth_client: TestClient, db: Session):
        payload = "<script>alert('xss')</script>"

        response = auth_client.post(
            "/api/vehicles", json={"make": payload, "model": "Model 3", "year": 2022}
        )

        assert response.status_code == 201
        assert response.json()["make"] == payload
        assert response.headers["content-type"].startswith("application/json")
        assert db.query(Vehicle).first().make == payload


@pytest.mark.security
class TestOversizedInput:
    """Tests for length limits."""

    def test_long_username_rejected(self, client: TestClient, db: Session):
        response = client.post(
            "/api/auth/register", json={"username": "a" * 65, "password": "password1"}
        )

        assert response.status_code == 400
        assert db.query(User).count() == 0

    def test_long_license_plate_rejected(self, auth_client: TestClient):
        response = auth_client.post(
            "/api/vehicles",
            json={"make": "VW", "model": "Golf", "year": 2019, "license_plate": "X" * 40},
        )

        assert response.status_code == 400

    def test_long_booking_time_rejected(self, auth_client: TestClient, db: Session):
        service = create_service(db)

        response = auth_client.post(
            "/api/bookings",
            json={"service_id": str(service.id), "date": "2026-11-02", "time": "9" * 50},
        )

        assert response.status_code == 400
