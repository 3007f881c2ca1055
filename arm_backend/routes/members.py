# arm_backend/routes/members.py
"""
Member profiles, cards and cotisations, plus the admin member registry.
"""
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import MemberRole, MemberStatus
from arm_backend.core.exceptions import NotFoundError
from arm_backend.core.security import AdminIdentity, require_admin, require_session
from arm_backend.dependencies import get_db
from arm_backend.models.user import UserSession
from arm_backend.schemas.membership import (
    CotisationConfirmRequest,
    CotisationInitiateRequest,
    CotisationInitiateResponse,
    CotisationRead,
    MemberCard,
    MemberProfileRead,
    MemberProfileUpdate,
    MemberRegisterRequest,
    MemberRegisterResponse,
    MemberRoleUpdate,
    MemberStatistics,
    MemberStatusUpdate,
)
from arm_backend.services.member_service import MemberService
from arm_backend.services.qr_codes import decode_data_url

router = APIRouter(prefix="/api", tags=["members"])


@router.post("/members/register", response_model=MemberRegisterResponse)
async def register_member(
    data: MemberRegisterRequest,
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    profile = await MemberService(db).register(str(user_session.user_id), data)
    return {
        "member": profile,
        "membership_number": profile.membership_number,
        "qr_code": profile.qr_code,
    }


@router.get("/members/card/{membership_number}", response_model=MemberCard)
async def get_member_card(membership_number: str, db: AsyncSession = Depends(get_db)):
    return await MemberService(db).get_by_membership_number(membership_number)


@router.get("/members/card/download/{membership_number}")
async def download_member_card(membership_number: str, db: AsyncSession = Depends(get_db)):
    profile = await MemberService(db).get_by_membership_number(membership_number)
    try:
        image = decode_data_url(profile.qr_code)
    except ValueError:
        raise NotFoundError("Member card not available")

    return Response(
        content=image,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="card-{membership_number}.png"'},
    )


@router.get("/members/me", response_model=MemberProfileRead)
async def get_my_profile(
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    return await MemberService(db).require_profile_for_user(str(user_session.user_id))


@router.put("/members/me", response_model=MemberProfileRead)
async def update_my_profile(
    data: MemberProfileUpdate,
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    return await MemberService(db).update_own_profile(str(user_session.user_id), data)


@router.get("/members/all-members", response_model=List[MemberCard])
async def list_all_members(db: AsyncSession = Depends(get_db)):
    return await MemberService(db).list_all()


# --- Cotisations ---

@router.post("/cotisations/initiate", response_model=CotisationInitiateResponse)
async def initiate_cotisation(
    data: CotisationInitiateRequest,
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    cotisation, instructions = await MemberService(db).initiate_cotisation(str(user_session.user_id), data)
    return {"cotisation_id": cotisation.id, "payment_instructions": instructions}


@router.post("/cotisations/confirm", response_model=CotisationRead, dependencies=[Depends(require_session)])
async def confirm_cotisation(data: CotisationConfirmRequest, db: AsyncSession = Depends(get_db)):
    return await MemberService(db).confirm_cotisation(data.cotisation_id, data.transaction_id)


@router.get("/cotisations/my-history", response_model=List[CotisationRead])
async def cotisation_history(
    user_session: UserSession = Depends(require_session),
    db: AsyncSession = Depends(get_db),
):
    return await MemberService(db).cotisation_history(str(user_session.user_id))


# --- Admin ---

@router.get("/admin/members", response_model=List[MemberProfileRead], dependencies=[Depends(require_admin)])
async def admin_list_members(
    status: Optional[MemberStatus] = None,
    role: Optional[MemberRole] = None,
    region: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    return await MemberService(db).list_members(status=status, role=role, region=region)


@router.put("/admin/members/{member_id}/role", response_model=MemberProfileRead)
async def admin_set_member_role(
    member_id: uuid.UUID,
    data: MemberRoleUpdate,
    admin: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await MemberService(db).set_role(member_id, data.role, changed_by=admin.username)


@router.put("/admin/members/{member_id}/status", response_model=MemberProfileRead)
async def admin_set_member_status(
    member_id: uuid.UUID,
    data: MemberStatusUpdate,
    admin: AdminIdentity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await MemberService(db).set_status(member_id, data.status, changed_by=admin.username)


@router.get("/admin/statistics", response_model=MemberStatistics, dependencies=[Depends(require_admin)])
async def admin_statistics(db: AsyncSession = Depends(get_db)):
    return await MemberService(db).statistics()
