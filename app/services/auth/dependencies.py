"""FastAPI dependencies for authentication and authorization."""
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.auth import get_auth_provider
from app.services.auth.local_provider import extract_bearer_token
from app.services.auth.sessions import SessionUser


async def authenticate_request(
    request: Request,
    db: Session = Depends(get_db)
) -> None:
    """
    Attach the bearer token's user to ``request.state``.

    Installed app-wide, so it runs before every route. It never rejects: a
    missing, malformed or expired token just leaves ``request.state.user``
    as None. Routes decide whether that is acceptable.
    """
    request.state.session_token = extract_bearer_token(
        request.headers.get("authorization")
    )
    request.state.user = None

    if request.state.session_token:
        auth_provider = get_auth_provider()
        request.state.user = await auth_provider.get_user_from_request(db, request)


async def get_optional_user(
    request: Request,
    _: None = Depends(authenticate_request)
) -> Optional[SessionUser]:
    """Get the current user if authenticated, None otherwise."""
    return request.state.user


async def require_auth(
    user: Optional[SessionUser] = Depends(get_optional_user)
) -> SessionUser:
    """
    Require an authenticated user.

    Raises 401 if no user is attached to the request.
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required"
        )
    return user


async def require_admin(
    user: SessionUser = Depends(require_auth)
) -> SessionUser:
    """
    Require the current user to be an admin.

    Raises 401 if not authenticated, 403 if user is not an admin.
    """
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return user


def ensure_owner_or_admin(user: SessionUser, owner_id: Optional[UUID]) -> None:
    """Raise 403 unless the user owns the resource or is an admin."""
    if user.is_admin:
        return
    if owner_id is None or owner_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied"
        )
