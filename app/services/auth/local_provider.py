"""Local password-based authentication provider."""
from typing import Optional
from uuid import UUID

from fastapi import Request
from sqlalchemy.orm import Session as DBSession
from starlette.concurrency import run_in_threadpool

from app.models.user import User, UserRole
from app.services.auth import sessions
from app.services.auth.base import AuthProvider
from app.services.auth.passwords import hash_password, verify_password
from app.services.auth.sessions import SessionUser

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):]
    return token or None


class LocalAuthProvider(AuthProvider):
    """
    Local authentication provider using password hashing and database sessions.

    Passwords are hashed with PBKDF2-HMAC-SHA512 off the event loop. Sessions
    are stored in the database and presented as bearer tokens.
    """

    async def authenticate(self, db: DBSession, username: str, password: str) -> Optional[User]:
        """Authenticate user with username and password."""
        user = db.query(User).filter(User.username == username).first()
        if not user or not user.password_hash:
            return None
        if not await run_in_threadpool(verify_password, password, user.password_hash):
            return None
        return user

    async def create_user(
        self,
        db: DBSession,
        username: str,
        password: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a new user with hashed password."""
        user = User(
            username=username,
            password_hash=await run_in_threadpool(hash_password, password),
            email=email,
            phone=phone,
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[SessionUser]:
        """Resolve the bearer token on the request to a user."""
        token = extract_bearer_token(request.headers.get("authorization"))
        if not token:
            return None
        return sessions.get_session_user(db, token)

    async def create_session(self, db: DBSession, user: User, request: Request) -> str:
        """Create a new session for the user."""
        user_agent = request.headers.get("user-agent", "")
        client_ip = request.client.host if request.client else None
        return sessions.create_session(
            db, user.id, user_agent=user_agent, ip_address=client_ip
        )

    async def revoke_session(self, db: DBSession, token: str) -> bool:
        """Revoke a session by its token."""
        return sessions.delete_session(db, token)

    async def revoke_all_sessions(
        self,
        db: DBSession,
        user_id: UUID,
        except_token: Optional[str] = None
    ) -> int:
        """Revoke all sessions for a user."""
        return sessions.delete_user_sessions(db, user_id, except_token=except_token)

    async def change_password(
        self,
        db: DBSession,
        user: User,
        current_password: str,
        new_password: str
    ) -> bool:
        """Change user's password after verifying current password."""
        if not await run_in_threadpool(verify_password, current_password, user.password_hash):
            return False
        user.password_hash = await run_in_threadpool(hash_password, new_password)
        db.commit()
        return True


# Singleton instance
local_auth_provider = LocalAuthProvider()
