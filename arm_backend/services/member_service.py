# arm_backend/services/member_service.py
"""
Purpose: Member profiles, membership cards and cotisations.

A signed-in user registers once and receives a membership number
(ARM-<year>-<sequence>) plus a QR code encoding their card. Cotisations
are recorded as pending with payment instructions, then confirmed with
the provider's transaction id.

Also hosts the admin side: listing with filters, role / status changes
and the statistics dashboard.
"""
import logging
import time
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import MemberRole, MemberStatus, PaymentStatus
from arm_backend.core.exceptions import ConflictError, NotFoundError, ValidationError
from arm_backend.core.utils import count_by, ensure_utc, sum_amounts, utcnow
from arm_backend.models.cotisation import Cotisation
from arm_backend.models.member_profile import MemberProfile
from arm_backend.schemas.membership import (
    CotisationInitiateRequest,
    MemberProfileUpdate,
    MemberRegisterRequest,
)
from arm_backend.services.payment_instructions import build_payment_instructions
from arm_backend.services.qr_codes import generate_qr_data_url

logger = logging.getLogger(__name__)

RECENT_SIGNUPS_LIMIT = 10


def format_membership_number(year: int, sequence: int) -> str:
    return f"ARM-{year}-{sequence:05d}"


def build_card_payload(membership_number: str, full_name: str, status: str, issued_at: datetime) -> Dict[str, Any]:
    return {
        "membershipNumber": membership_number,
        "fullName": full_name,
        "status": status,
        "issuedAt": issued_at.isoformat(),
    }


def epoch_millis() -> int:
    return int(time.time() * 1000)


class MemberService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # --- Profiles ---

    async def get_profile_for_user(self, user_id: str) -> Optional[MemberProfile]:
        return await self.db.scalar(
            select(MemberProfile).where(MemberProfile.user_id == str(user_id))
        )

    async def require_profile_for_user(self, user_id: str) -> MemberProfile:
        profile = await self.get_profile_for_user(user_id)
        if not profile:
            raise NotFoundError("Member profile not found")
        return profile

    async def next_membership_number(self) -> str:
        count = await self.db.scalar(select(func.count()).select_from(MemberProfile))
        return format_membership_number(utcnow().year, (count or 0) + 1)

    async def register(self, user_id: str, data: MemberRegisterRequest) -> MemberProfile:
        existing = await self.get_profile_for_user(user_id)
        if existing:
            logger.warning(f"User {user_id} already registered as {existing.membership_number}")
            raise ConflictError("Member already registered", membershipNumber=existing.membership_number)

        membership_number = await self.next_membership_number()
        qr_code = generate_qr_data_url(
            build_card_payload(membership_number, data.full_name, MemberStatus.PENDING.value, utcnow())
        )

        profile = MemberProfile(
            user_id=str(user_id),
            full_name=data.full_name,
            nina=data.nina,
            commune=data.commune,
            profession=data.profession,
            phone=data.phone,
            email=data.email,
            membership_number=membership_number,
            qr_code=qr_code,
            status=MemberStatus.PENDING.value,
            role=MemberRole.MILITANT.value,
        )
        self.db.add(profile)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.error(f"Membership number collision on {membership_number}")
            raise ConflictError("Membership number already assigned, please retry")

        logger.info(f"Registered member {membership_number} for user {user_id}")
        return profile

    async def get_by_membership_number(self, membership_number: str) -> MemberProfile:
        profile = await self.db.scalar(
            select(MemberProfile).where(MemberProfile.membership_number == membership_number)
        )
        if not profile:
            raise NotFoundError("Member not found")
        return profile

    async def update_own_profile(self, user_id: str, data: MemberProfileUpdate) -> MemberProfile:
        profile = await self.require_profile_for_user(user_id)
        number = profile.membership_number
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(profile, key, value)
        profile.updated_at = utcnow()
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Profile update rejected for member {number}: {e.orig}")
            raise ValidationError("Invalid profile update")
        logger.info(f"Member {number} updated their profile")
        return profile

    async def list_all(self) -> List[MemberProfile]:
        result = await self.db.execute(
            select(MemberProfile).order_by(MemberProfile.created_at.desc())
        )
        return list(result.scalars().all())

    async def create_placeholder_profile(self, user_id: str) -> MemberProfile:
        """Profile for a user who submits election results before registering."""
        membership_number = f"TEMP-{epoch_millis()}"
        profile = MemberProfile(
            user_id=str(user_id),
            full_name="Pending Verification",
            commune="",
            profession="Sentinel",
            phone="",
            membership_number=membership_number,
            qr_code="",
            status=MemberStatus.PENDING.value,
            role=MemberRole.MILITANT.value,
        )
        self.db.add(profile)
        await self.db.flush()
        logger.info(f"Created placeholder profile {membership_number} for user {user_id}")
        return profile

    # --- Cotisations ---

    async def initiate_cotisation(
        self, user_id: str, data: CotisationInitiateRequest
    ) -> Tuple[Cotisation, Dict[str, Any]]:
        profile = await self.require_profile_for_user(user_id)

        cotisation = Cotisation(
            member_id=profile.id,
            amount=data.amount,
            type=data.type.value,
            payment_method=data.payment_method.value,
            status=PaymentStatus.PENDING.value,
        )
        self.db.add(cotisation)
        await self.db.commit()

        reference = f"TXN-{epoch_millis()}"
        instructions = build_payment_instructions(data.payment_method, data.amount, reference)
        logger.info(
            f"Cotisation {cotisation.id} initiated by {profile.membership_number}: "
            f"{data.amount} via {data.payment_method.value}"
        )
        return cotisation, instructions

    async def confirm_cotisation(self, cotisation_id: uuid.UUID, transaction_id: str) -> Cotisation:
        cotisation = await self.db.get(Cotisation, cotisation_id)
        if not cotisation:
            raise NotFoundError("Cotisation not found")

        cotisation.status = PaymentStatus.COMPLETED.value
        cotisation.transaction_id = transaction_id
        cotisation.paid_at = utcnow()
        await self.db.commit()
        logger.info(f"Cotisation {cotisation_id} confirmed with transaction {transaction_id}")
        return cotisation

    async def cotisation_history(self, user_id: str) -> List[Cotisation]:
        profile = await self.require_profile_for_user(user_id)
        result = await self.db.execute(
            select(Cotisation)
            .where(Cotisation.member_id == profile.id)
            .order_by(Cotisation.created_at.desc())
        )
        return list(result.scalars().all())

    # --- Admin ---

    async def list_members(
        self,
        status: Optional[MemberStatus] = None,
        role: Optional[MemberRole] = None,
        region: Optional[str] = None,
    ) -> List[MemberProfile]:
        query = select(MemberProfile).order_by(MemberProfile.created_at.desc())
        if status:
            query = query.where(MemberProfile.status == status.value)
        if role:
            query = query.where(MemberProfile.role == role.value)
        if region:
            # Profiles only record a commune
            query = query.where(MemberProfile.commune == region)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def _get_profile(self, member_id: uuid.UUID) -> MemberProfile:
        profile = await self.db.get(MemberProfile, member_id)
        if not profile:
            raise NotFoundError("Member not found")
        return profile

    async def set_role(self, member_id: uuid.UUID, role: MemberRole, changed_by: str) -> MemberProfile:
        profile = await self._get_profile(member_id)
        profile.role = role.value
        profile.updated_at = utcnow()
        await self.db.commit()
        logger.info(f"{changed_by} set role of {profile.membership_number} to {role.value}")
        return profile

    async def set_status(self, member_id: uuid.UUID, status: MemberStatus, changed_by: str) -> MemberProfile:
        profile = await self._get_profile(member_id)
        profile.status = status.value
        profile.updated_at = utcnow()
        await self.db.commit()
        logger.info(f"{changed_by} set status of {profile.membership_number} to {status.value}")
        return profile

    async def statistics(self) -> Dict[str, Any]:
        members = list((await self.db.execute(select(MemberProfile))).scalars().all())
        completed = list((await self.db.execute(
            select(Cotisation).where(Cotisation.status == PaymentStatus.COMPLETED.value)
        )).scalars().all())

        now = utcnow()
        this_month = [
            c for c in completed
            if c.paid_at is not None
            and ensure_utc(c.paid_at).year == now.year
            and ensure_utc(c.paid_at).month == now.month
        ]

        recent = sorted(members, key=lambda m: ensure_utc(m.created_at), reverse=True)[:RECENT_SIGNUPS_LIMIT]

        return {
            "total_members": len(members),
            "active_members": sum(1 for m in members if m.status == MemberStatus.ACTIVE.value),
            "pending_members": sum(1 for m in members if m.status == MemberStatus.PENDING.value),
            "total_cotisations": sum_amounts(completed),
            "monthly_revenue": sum_amounts(this_month),
            "members_by_region": count_by(members, lambda m: m.commune),
            "members_by_role": count_by(members, lambda m: m.role),
            "recent_activity": [
                {"type": "member_signup", "name": m.full_name, "timestamp": m.created_at}
                for m in recent
            ],
        }
