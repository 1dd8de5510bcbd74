"""
Unit tests for LocalAuthProvider.

Tests authentication functionality including:
- Credential checks
- User creation
- Session management through the provider
- Password changes
"""
import asyncio
from types import SimpleNamespace

from sqlalchemy.orm import Session

from app.models import User, UserRole, Session as UserSession
from app.services.auth import get_auth_provider
from app.services.auth.local_provider import LocalAuthProvider, local_auth_provider
from app.services.auth.passwords import verify_password
from tests.factories import create_user


def fake_request(headers=None, host="127.0.0.1"):
    return SimpleNamespace(
        headers=headers or {},
        client=SimpleNamespace(host=host) if host else None,
    )


class TestProviderFactory:
    def test_returns_local_provider(self):
        assert get_auth_provider() is local_auth_provider
        assert isinstance(local_auth_provider, LocalAuthProvider)


class TestAuthenticate:
    """Tests for username/password authentication."""

    def test_valid_credentials(self, db: Session):
        user = create_user(db, username="alice", password="password1")

        result = asyncio.run(local_auth_provider.authenticate(db, "alice", "password1"))

        assert result is not None
        assert result.id == user.id

    def test_wrong_password(self, db: Session):
        create_user(db, username="alice", password="password1")

        result = asyncio.run(local_auth_provider.authenticate(db, "alice", "wrong"))

        assert result is None

    def test_unknown_user(self, db: Session):
        result = asyncio.run(local_auth_provider.authenticate(db, "nobody", "password1"))

        assert result is None

    def test_corrupted_hash_fails_closed(self, db: Session):
        create_user(db, username="alice", password_hash="corrupted")

        result = asyncio.run(local_auth_provider.authenticate(db, "alice", "password1"))

        assert result is None


class TestCreateUser:
    """Tests for user creation."""

    def test_password_is_hashed(self, db: Session):
        user = asyncio.run(
            local_auth_provider.create_user(db, "bob", "password1", email="bob@example.com")
        )

        assert user.password_hash != "password1"
        assert verify_password("password1", user.password_hash)
        assert user.email == "bob@example.com"
        assert user.role == UserRole.USER

    def test_admin_role(self, db: Session):
        user = asyncio.run(
            local_auth_provider.create_user(db, "root", "password1", role=UserRole.ADMIN)
        )

        assert user.is_admin is True


class TestProviderSessions:
    """Tests for session handling via the provider."""

    def test_create_session_records_request_metadata(self, db: Session):
        user = create_user(db)
        request = fake_request({"user-agent": "DetailingApp/2.1"}, host="192.168.1.5")

        token = asyncio.run(local_auth_provider.create_session(db, user, request))

        row = db.query(UserSession).filter(UserSession.token == token).first()
        assert row.user_agent == "DetailingApp/2.1"
        assert row.ip_address == "192.168.1.5"

    def test_get_user_from_request(self, db: Session):
        user = create_user(db, username="carol")
        token = asyncio.run(local_auth_provider.create_session(db, user, fake_request()))

        resolved = asyncio.run(
            local_auth_provider.get_user_from_request(
                db, fake_request({"authorization": f"Bearer {token}"})
            )
        )

        assert resolved.username == "carol"

    def test_get_user_from_request_without_header(self, db: Session):
        resolved = asyncio.run(
            local_auth_provider.get_user_from_request(db, fake_request())
        )

        assert resolved is None

    def test_revoke_session(self, db: Session):
        user = create_user(db)
        token = asyncio.run(local_auth_provider.create_session(db, user, fake_request()))

        assert asyncio.run(local_auth_provider.revoke_session(db, token)) is True
        assert asyncio.run(local_auth_provider.revoke_session(db, token)) is False

    def test_revoke_all_sessions(self, db: Session):
        user = create_user(db)
        keep = asyncio.run(local_auth_provider.create_session(db, user, fake_request()))
        asyncio.run(local_auth_provider.create_session(db, user, fake_request()))

        count = asyncio.run(
            local_auth_provider.revoke_all_sessions(db, user.id, except_token=keep)
        )

        assert count == 1
        assert db.query(UserSession).count() == 1


class TestChangePassword:
    """Tests for password changes."""

    def test_change_password_success(self, db: Session):
        user = create_user(db, password="oldpassword")

        success = asyncio.run(
            local_auth_provider.change_password(db, user, "oldpassword", "newpassword")
        )

        assert success is True
        db.refresh(user)
        assert verify_password("newpassword", user.password_hash)

    def test_change_password_wrong_current(self, db: Session):
        user = create_user(db, password="oldpassword")
        original_hash = user.password_hash

        success = asyncio.run(
            local_auth_provider.change_password(db, user, "wrong", "newpassword")
        )

        assert success is False
        assert db.query(User).filter(User.id == user.id).first().password_hash == original_hash
