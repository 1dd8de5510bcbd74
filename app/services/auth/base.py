"""Abstract base class for authentication providers."""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from fastapi import Request
from sqlalchemy.orm import Session as DBSession

from app.models.user import User, UserRole
from app.services.auth.sessions import SessionUser


class AuthProvider(ABC):
    """
    Abstract authentication provider interface.

    Route code talks to this interface so the credential check and session
    storage can be swapped without touching handlers.
    """

    @abstractmethod
    async def authenticate(self, db: DBSession, username: str, password: str) -> Optional[User]:
        """
        Authenticate user with username and password.

        Returns User if credentials are valid, None otherwise.
        """
        pass

    @abstractmethod
    async def create_user(
        self,
        db: DBSession,
        username: str,
        password: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        role: UserRole = UserRole.USER,
    ) -> User:
        """
        Create a new user with the given credentials.

        Returns the created User.
        """
        pass

    @abstractmethod
    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[SessionUser]:
        """
        Extract and validate the bearer token on the request.

        Returns the session's user if authenticated, None otherwise.
        """
        pass

    @abstractmethod
    async def create_session(self, db: DBSession, user: User, request: Request) -> str:
        """
        Create a new session for the user.

        Returns the bearer token handed to the client.
        """
        pass

    @abstractmethod
    async def revoke_session(self, db: DBSession, token: str) -> bool:
        """
        Revoke/invalidate a session by its token.

        Returns True if session was revoked, False if not found.
        """
        pass

    @abstractmethod
    async def revoke_all_sessions(self, db: DBSession, user_id: UUID, except_token: Optional[str] = None) -> int:
        """
        Revoke all sessions for a user, optionally excluding current session.

        Returns count of sessions revoked.
        """
        pass

    @abstractmethod
    async def change_password(
        self,
        db: DBSession,
        user: User,
        current_password: str,
        new_password: str
    ) -> bool:
        """
        Change user's password.

        Validates current password before changing.
        Returns True if successful, False if current password incorrect.
        """
        pass
