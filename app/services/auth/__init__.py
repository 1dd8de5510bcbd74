"""
Authentication service package.

Provides bearer-token session auth:
- PBKDF2 password hashing (passwords)
- Database sessions (sessions)
- Request dependencies and guards (dependencies)

Usage:
    from app.services.auth import get_auth_provider
    from app.services.auth.dependencies import require_auth, require_admin

    # In routes:
    @router.get("/protected")
    async def protected_route(user: SessionUser = Depends(require_auth)):
        ...
"""
from app.services.auth.base import AuthProvider
from app.services.auth.local_provider import local_auth_provider


def get_auth_provider() -> AuthProvider:
    """Factory function to get the configured auth provider."""
    return local_auth_provider


__all__ = [
    "AuthProvider",
    "get_auth_provider",
    "local_auth_provider",
]
