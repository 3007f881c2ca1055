# arm_backend/routes/membership.py
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import ApplicationStatus
from arm_backend.core.security import require_session
from arm_backend.dependencies import get_db
from arm_backend.schemas.membership import (
    MembershipApplicationCreate,
    MembershipApplicationRead,
    MembershipStatusUpdate,
)
from arm_backend.services.membership_service import MembershipService

router = APIRouter(prefix="/api/membership", tags=["membership"])


@router.post("", response_model=MembershipApplicationRead)
async def apply_for_membership(data: MembershipApplicationCreate, db: AsyncSession = Depends(get_db)):
    return await MembershipService(db).create_application(data)


@router.get("", response_model=List[MembershipApplicationRead], dependencies=[Depends(require_session)])
async def list_applications(status: Optional[ApplicationStatus] = None, db: AsyncSession = Depends(get_db)):
    return await MembershipService(db).list_applications(status)


@router.put("/{member_id}/status", response_model=MembershipApplicationRead, dependencies=[Depends(require_session)])
async def update_application_status(
    member_id: uuid.UUID,
    data: MembershipStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await MembershipService(db).update_status(member_id, data.status)
