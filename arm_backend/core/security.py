"""
Request authentication for the A.R.M API.

Two layers:
- require_session: a bearer token issued by /api/auth (any signed-in user)
- require_admin: a session plus the admin password and secret code headers
"""
import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.config import get_settings
from arm_backend.core.exceptions import AdminAuthError, AuthenticationError
from arm_backend.dependencies import get_db
from arm_backend.models.user import UserSession
from arm_backend.services.auth_service import AuthService

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)

ADMIN_PASSWORD_HEADER = "X-Admin-Password"
ADMIN_SECRET_HEADER = "X-Admin-Secret"


@dataclass
class AdminIdentity:
    user_id: str
    username: str


async def require_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> UserSession:
    """
    Resolve the bearer token to a live session.
    Usage: session: UserSession = Depends(require_session)
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError("Unauthorized")

    user_session = await AuthService(db).get_session(credentials.credentials)
    if not user_session:
        raise AuthenticationError("Unauthorized")
    return user_session


def _matches(supplied: str, expected: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf8"), expected.encode("utf8"))


def has_admin_headers(request: Request) -> bool:
    return bool(request.headers.get(ADMIN_PASSWORD_HEADER) and request.headers.get(ADMIN_SECRET_HEADER))


async def require_admin(
    request: Request,
    user_session: UserSession = Depends(require_session),
) -> AdminIdentity:
    """
    Verify the admin password and secret code on top of a user session.
    Usage: admin: AdminIdentity = Depends(require_admin)
    """
    settings = get_settings()
    password = request.headers.get(ADMIN_PASSWORD_HEADER)
    secret = request.headers.get(ADMIN_SECRET_HEADER)

    if not password or not secret:
        raise AdminAuthError("Missing admin credentials")

    if not _matches(password, settings.ADMIN_PASSWORD):
        logger.warning(f"Invalid admin password from user {user_session.user_id}")
        raise AdminAuthError("Invalid admin password")

    if not _matches(secret, settings.ADMIN_SECRET_CODE):
        logger.warning(f"Invalid admin secret code from user {user_session.user_id}")
        raise AdminAuthError("Invalid secret code")

    user = user_session.user
    return AdminIdentity(
        user_id=str(user_session.user_id),
        username=(user.email if user and user.email else "admin"),
    )
