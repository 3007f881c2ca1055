# arm_backend/routes/messages.py
import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import MessageStatus
from arm_backend.core.security import AdminIdentity, require_admin, require_session
from arm_backend.dependencies import get_db
from arm_backend.models.user import UserSession
from arm_backend.schemas.base import SuccessResponse
from arm_backend.schemas.message import (
    ContactMessageCreate,
    ContactMessageRead,
    ContactMessageStatusUpdate,
    InternalMessageCreate,
    InternalMessageRead,
)
from arm_backend.services.member_service import MemberService
from arm_backend.services.message_service import ContactMessageService, InternalMessageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["messages"])


# --- Contact form ---

@router.post("/messages", response_model=ContactMessageRead)
async def send_contact_message(data: ContactMessageCreate, db: AsyncSession = Depends(get_db)):
    return await ContactMessageService(db).create(data)


@router.get("/messages", response_model=List[ContactMessageRead], dependencies=[Depends(require_session)])
async def list_contact_messages(status: Optional[MessageStatus] = None, db: AsyncSession = Depends(get_db)):
    return await ContactMessageService(db).list(status)


@router.put("/messages/{message_id}/status", response_model=ContactMessageRead,
            dependencies=[Depends(require_session)])
async def update_contact_message_status(
    message_id: uuid.UUID,
    data: ContactMessageStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await ContactMessageService(db).update_status(message_id, data.status)


# --- Internal messaging ---

@router.post("/admin/messages/send", response_model=InternalMessageRead)
async def send_internal_message(
    data: InternalMessageCreate,
    admin: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await InternalMessageService(db).send(data, sender_id=admin.username)


@router.get("/messages/my-messages", response_model=List[InternalMessageRead])
async def my_messages(
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    profile = await MemberService(db).require_profile_for_user(str(user_session.user_id))
    return await InternalMessageService(db).for_member(profile)


@router.post("/messages/mark-read/{message_id}", response_model=SuccessResponse)
async def mark_message_read(message_id: str, user_session: UserSession = Depends(require_session)):
    # Read state is not stored
    logger.info(f"User {user_session.user_id} read internal message {message_id}")
    return SuccessResponse(message="Message marked as read")
