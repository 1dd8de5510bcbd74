"""Authentication routes for registration, login, logout and account management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.schemas import (
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    UserRead,
)
from app.database import get_db
from app.models.user import User
from app.services.auth import get_auth_provider
from app.services.auth.dependencies import require_auth
from app.services.auth.sessions import SessionUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


# =============================================================================
# Registration / Login / Logout
# =============================================================================


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """Create an account and log it in."""
    existing_user = db.query(User).filter(User.username == body.username).first()
    if existing_user:
        raise HTTPException(status_code=409, detail="Username already exists")

    auth_provider = get_auth_provider()
    try:
        user = await auth_provider.create_user(
            db, body.username, body.password, email=body.email, phone=body.phone
        )
    except IntegrityError:
        # Lost a race with a concurrent registration for the same username
        db.rollback()
        raise HTTPException(status_code=409, detail="Username already exists")

    token = await auth_provider.create_session(db, user, request)
    logger.info("Registered user %s", user.username)

    return {"user": UserRead.model_validate(user), "token": token}


@router.post("/login")
async def login(
    body: LoginRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """Exchange credentials for a bearer token."""
    auth_provider = get_auth_provider()
    user = await auth_provider.authenticate(db, body.username, body.password)

    if not user:
        logger.warning("Failed login for username=%s", body.username)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = await auth_provider.create_session(db, user, request)

    return {"user": UserRead.model_validate(user), "token": token}


@router.post("/logout")
async def logout(
    request: Request,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Revoke the session whose token authenticated this request."""
    auth_provider = get_auth_provider()
    await auth_provider.revoke_session(db, request.state.session_token)
    logger.info("User %s logged out", user.username)

    return {"success": True}


# =============================================================================
# Account
# =============================================================================


@router.get("/me")
async def me(
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Return the authenticated user."""
    account = db.query(User).filter(User.id == user.id).first()
    if not account:
        raise HTTPException(status_code=401, detail="Authentication required")

    return {"user": UserRead.model_validate(account)}


@router.post("/change-password")
async def change_password(
    body: ChangePasswordRequest,
    request: Request,
    user: SessionUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Change the caller's password and sign out their other sessions."""
    account = db.query(User).filter(User.id == user.id).first()
    if not account:
        raise HTTPException(status_code=401, detail="Authentication required")

    auth_provider = get_auth_provider()
    success = await auth_provider.change_password(
        db, account, body.current_password, body.new_password
    )
    if not success:
        raise HTTPException(status_code=401, detail="Current password is incorrect")

    revoked = await auth_provider.revoke_all_sessions(
        db, account.id, except_token=request.state.session_token
    )
    logger.info("User %s changed password, revoked %d other sessions", user.username, revoked)

    return {"success": True}
