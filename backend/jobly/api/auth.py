"""
Authorization gate.

Session issuance lives outside this service; requests arrive with an
httpOnly `auth_token` cookie naming the user. These dependencies resolve that
cookie into a SessionIdentity and enforce the three tiers:

- public: no dependency
- logged-in: ensure_logged_in
- admin: require_admin
"""
import logging
from typing import Optional

from fastapi import Cookie, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.database import get_db
from jobly.errors import ForbiddenError, UnauthorizedError
from jobly.models.user import User
from jobly.schemas.auth import SessionIdentity

logger = logging.getLogger(__name__)


async def get_current_user(
    auth_token: Optional[str] = Cookie(None),
    db: AsyncSession = Depends(get_db)
) -> Optional[SessionIdentity]:
    """
    Resolve the session cookie to an identity.

    Returns:
        SessionIdentity, or None when no cookie was sent

    Raises:
        UnauthorizedError: Cookie names a user that does not exist
    """
    if not auth_token:
        return None

    result = await db.execute(
        select(User).where(User.username == auth_token)
    )
    user = result.scalar_one_or_none()

    if not user:
        raise UnauthorizedError("Invalid token. User not found.")

    return SessionIdentity(username=user.username, is_admin=user.is_admin())


async def ensure_logged_in(
    identity: Optional[SessionIdentity] = Depends(get_current_user)
) -> SessionIdentity:
    """Dependency to require any authenticated user."""
    if identity is None:
        raise UnauthorizedError("Authentication required")
    return identity


async def require_admin(
    identity: SessionIdentity = Depends(ensure_logged_in)
) -> SessionIdentity:
    """
    Dependency to require admin role.

    Raises:
        UnauthorizedError: Not logged in
        ForbiddenError: Logged in but not an admin
    """
    if not identity.is_admin:
        logger.warning(f"User {identity.username} attempted to access admin endpoint")
        raise ForbiddenError(
            "Admin access required. You do not have permission to access this resource."
        )
    return identity
