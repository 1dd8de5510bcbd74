"""
Unit tests for the auth middleware dependency and authorization guards.

A small FastAPI app is used so guard behavior is observed through real
requests, including whether the handler ran.
"""
import uuid

import pytest
from fastapi import Depends, FastAPI, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import UserRole
from app.services.auth.dependencies import (
    authenticate_request,
    ensure_owner_or_admin,
    get_optional_user,
    require_admin,
    require_auth,
)
from app.services.auth.local_provider import extract_bearer_token
from app.services.auth.sessions import SessionUser, create_session
from tests.factories import create_user


@pytest.fixture
def guarded(db: Session):
    """A throwaway app with one route per guard, recording handler calls."""
    calls = []
    app = FastAPI(dependencies=[Depends(authenticate_request)])

    @app.get("/open")
    async def open_route(user=Depends(get_optional_user)):
        calls.append("open")
        return {"user": user.username if user else None}

    @app.get("/private")
    async def private_route(user=Depends(require_auth)):
        calls.append("private")
        return {"user": user.username}

    @app.get("/admin")
    async def admin_route(user=Depends(require_admin)):
        calls.append("admin")
        return {"user": user.username}

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client, calls


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestExtractBearerToken:
    """Tests for parsing the Authorization header."""

    def test_bearer_token(self):
        assert extract_bearer_token("Bearer abc123") == "abc123"

    def test_token_taken_verbatim(self):
        assert extract_bearer_token("Bearer  abc123") == " abc123"
        assert extract_bearer_token("Bearer abc123 ") == "abc123 "

    @pytest.mark.parametrize(
        "header", [None, "", "Bearer", "Bearer ", "Basic abc", "bearerabc", "Token abc"]
    )
    def test_malformed_headers(self, header):
        assert extract_bearer_token(header) is None


class TestAuthenticateRequest:
    """Tests for attaching the user to the request."""

    def test_no_header_attaches_nothing(self, guarded):
        client, calls = guarded

        response = client.get("/open")

        assert response.status_code == 200
        assert response.json() == {"user": None}
        assert calls == ["open"]

    def test_valid_token_attaches_user(self, guarded, db: Session):
        client, _ = guarded
        user = create_user(db, username="alice")
        token = create_session(db, user.id)

        response = client.get("/open", headers=bearer(token))

        assert response.json() == {"user": "alice"}

    def test_invalid_token_does_not_reject(self, guarded):
        client, _ = guarded

        response = client.get("/open", headers=bearer("bogus"))

        assert response.status_code == 200
        assert response.json() == {"user": None}

    def test_malformed_header_does_not_reject(self, guarded):
        client, _ = guarded

        response = client.get("/open", headers={"Authorization": "Basic dXNlcjpwYXNz"})

        assert response.status_code == 200


class TestRequireAuth:
    """Tests for require_auth."""

    def test_no_user_returns_401_without_calling_handler(self, guarded):
        client, calls = guarded

        response = client.get("/private")

        assert response.status_code == 401
        assert calls == []

    def test_authenticated_user_passes(self, guarded, db: Session):
        client, calls = guarded
        user = create_user(db)
        token = create_session(db, user.id)

        response = client.get("/private", headers=bearer(token))

        assert response.status_code == 200
        assert calls == ["private"]


class TestRequireAdmin:
    """Tests for require_admin."""

    def test_no_user_returns_401(self, guarded):
        client, calls = guarded

        response = client.get("/admin")

        assert response.status_code == 401
        assert calls == []

    def test_non_admin_returns_403(self, guarded, db: Session):
        client, calls = guarded
        user = create_user(db)
        token = create_session(db, user.id)

        response = client.get("/admin", headers=bearer(token))

        assert response.status_code == 403
        assert calls == []

    def test_admin_passes(self, guarded, db: Session):
        client, calls = guarded
        admin = create_user(db, role=UserRole.ADMIN)
        token = create_session(db, admin.id)

        response = client.get("/admin", headers=bearer(token))

        assert response.status_code == 200
        assert calls == ["admin"]


class TestEnsureOwnerOrAdmin:
    """Tests for resource ownership checks."""

    def test_owner_allowed(self):
        user = SessionUser(id=uuid.uuid4(), username="u", role=UserRole.USER)

        ensure_owner_or_admin(user, user.id)

    def test_admin_allowed_for_any_owner(self):
        admin = SessionUser(id=uuid.uuid4(), username="a", role=UserRole.ADMIN)

        ensure_owner_or_admin(admin, uuid.uuid4())

    def test_non_owner_forbidden(self):
        user = SessionUser(id=uuid.uuid4(), username="u", role=UserRole.USER)

        with pytest.raises(HTTPException) as exc_info:
            ensure_owner_or_admin(user, uuid.uuid4())

        assert exc_info.value.status_code == 403

    def test_missing_owner_forbidden(self):
        user = SessionUser(id=uuid.uuid4(), username="u", role=UserRole.USER)

        with pytest.raises(HTTPException) as exc_info:
            ensure_owner_or_admin(user, None)

        assert exc_info.value.status_code == 403
