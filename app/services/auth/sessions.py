"""Database-backed bearer token sessions."""
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session as DBSession

from app.config import settings
from app.models.session import Session
from app.models.user import User, UserRole

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32


@dataclass(frozen=True)
class SessionUser:
    """The identity a valid token resolves to. Never carries the password hash."""

    id: UUID
    username: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def to_dict(self) -> dict:
        return {"id": str(self.id), "username": self.username, "role": self.role.value}


def generate_token() -> str:
    """Generate a cryptographically secure session token (64 hex chars)."""
    return secrets.token_hex(TOKEN_BYTES)


def create_session(
    db: DBSession,
    user_id: UUID,
    user_agent: Optional[str] = None,
    ip_address: Optional[str] = None,
) -> str:
    """Persist a new session for the user and return its token."""
    token = generate_token()
    expires_at = datetime.now(timezone.utc) + timedelta(seconds=settings.session_max_age)

    session = Session(
        user_id=user_id,
        token=token,
        expires_at=expires_at,
        user_agent=user_agent[:512] if user_agent else None,
        ip_address=ip_address,
    )
    db.add(session)
    db.commit()

    return token


def delete_session(db: DBSession, token: str) -> bool:
    """Delete the session with this token. Returns False if there was none."""
    deleted = (
        db.query(Session)
        .filter(Session.token == token)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def get_session_user(db: DBSession, token: str) -> Optional[SessionUser]:
    """Resolve a token to its user, ignoring expired sessions."""
    if not token:
        return None

    now = datetime.now(timezone.utc)
    row = (
        db.query(User.id, User.username, User.role)
        .join(Session, Session.user_id == User.id)
        .filter(Session.token == token, Session.expires_at > now)
        .first()
    )

    if not row:
        return None

    return SessionUser(id=row.id, username=row.username, role=UserRole(row.role))


def delete_user_sessions(
    db: DBSession, user_id: UUID, except_token: Optional[str] = None
) -> int:
    """Delete every session belonging to a user, optionally sparing one token."""
    query = db.query(Session).filter(Session.user_id == user_id)
    if except_token:
        query = query.filter(Session.token != except_token)
    count = query.delete(synchronize_session=False)
    db.commit()
    return count


def purge_expired_sessions(db: DBSession) -> int:
    """Remove sessions whose expiry has passed. Lookups already ignore them."""
    now = datetime.now(timezone.utc)
    count = (
        db.query(Session)
        .filter(Session.expires_at <= now)
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Purged %d expired sessions", count)
    return count
