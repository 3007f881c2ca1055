# arm_backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.security import AdminIdentity, bearer, require_admin, require_session
from arm_backend.dependencies import get_db
from arm_backend.models.user import UserSession
from arm_backend.schemas.auth import (
    AdminVerifyResponse,
    AuthResponse,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
)
from arm_backend.schemas.base import SuccessResponse
from arm_backend.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/auth/sign-up/email", response_model=AuthResponse)
async def sign_up(data: SignUpRequest, db: AsyncSession = Depends(get_db)):
    user, user_session = await AuthService(db).sign_up(data.email, data.password, data.name)
    return {"token": user_session.token, "user": user}


@router.post("/auth/sign-in/email", response_model=AuthResponse)
async def sign_in(data: SignInRequest, db: AsyncSession = Depends(get_db)):
    user, user_session = await AuthService(db).sign_in(data.email, data.password)
    return {"token": user_session.token, "user": user}


@router.get("/auth/get-session", response_model=SessionResponse)
async def get_session(user_session: UserSession = Depends(require_session)):
    return {"session": user_session, "user": user_session.user}


@router.post("/auth/sign-out", response_model=SuccessResponse)
async def sign_out(
    user_session: UserSession = Depends(require_session),
    credentials: HTTPAuthorizationCredentials = Depends(bearer),
    db: AsyncSession = Depends(get_db),
):
    await AuthService(db).sign_out(credentials.credentials)
    return SuccessResponse()


@router.post("/admin/verify", response_model=AdminVerifyResponse)
async def verify_admin(admin: AdminIdentity = Depends(require_admin)):
    """Lets the client check the admin password and secret code before showing admin screens."""
    logger.info(f"Admin credentials verified for {admin.username}")
    return AdminVerifyResponse(username=admin.username)
