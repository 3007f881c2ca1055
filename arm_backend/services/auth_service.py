# arm_backend/services/auth_service.py
"""
Email / password accounts with opaque bearer session tokens.

Passwords are hashed with bcrypt. A session is a random token stored in
the user_sessions table with an expiry; sign-out deletes the row.
"""
import logging
import secrets
from datetime import timedelta
from typing import Optional, Tuple

import bcrypt
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.config import get_settings
from arm_backend.core.exceptions import AuthenticationError, ConflictError
from arm_backend.core.utils import ensure_utc, utcnow
from arm_backend.models.user import User, UserSession

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.settings = get_settings()

    async def _create_session(self, user: User) -> UserSession:
        user_session = UserSession(
            token=secrets.token_urlsafe(32),
            user_id=user.id,
            expires_at=utcnow() + timedelta(days=self.settings.SESSION_TTL_DAYS),
        )
        self.db.add(user_session)
        await self.db.flush()
        return user_session

    async def sign_up(self, email: str, password: str, name: str) -> Tuple[User, UserSession]:
        email = email.lower()
        existing = await self.db.scalar(select(User).where(User.email == email))
        if existing:
            logger.warning(f"Sign-up rejected, email already registered: {email}")
            raise ConflictError("User already exists")

        try:
            user = User(email=email, name=name, password_hash=hash_password(password))
            self.db.add(user)
            await self.db.flush()
            user_session = await self._create_session(user)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"User signed up: {email}")
        return user, user_session

    async def sign_in(self, email: str, password: str) -> Tuple[User, UserSession]:
        email = email.lower()
        user = await self.db.scalar(select(User).where(User.email == email))
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed sign-in for {email}")
            raise AuthenticationError("Invalid email or password")

        try:
            user_session = await self._create_session(user)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"User signed in: {email}")
        return user, user_session

    async def get_session(self, token: str) -> Optional[UserSession]:
        """Return the live session for a token, or None if unknown or expired."""
        if not token:
            return None
        user_session = await self.db.scalar(select(UserSession).where(UserSession.token == token))
        if not user_session:
            return None
        if ensure_utc(user_session.expires_at) <= utcnow():
            logger.info(f"Session expired for user {user_session.user_id}")
            return None
        return user_session

    async def sign_out(self, token: str) -> None:
        await self.db.execute(delete(UserSession).where(UserSession.token == token))
        await self.db.commit()
        logger.info("User signed out")
