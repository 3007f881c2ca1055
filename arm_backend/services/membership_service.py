# arm_backend/services/membership_service.py
"""
Membership applications submitted from the public sign-up form.
"""
import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import ApplicationStatus
from arm_backend.core.exceptions import ConflictError, NotFoundError
from arm_backend.models.member import Member
from arm_backend.schemas.membership import MembershipApplicationCreate

logger = logging.getLogger(__name__)


class MembershipService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_application(self, data: MembershipApplicationCreate) -> Member:
        email = data.email.lower()
        existing = await self.db.scalar(select(Member).where(Member.email == email))
        if existing:
            logger.warning(f"Duplicate membership application for {email}")
            raise ConflictError("A membership application with this email already exists")

        member = Member(**data.model_dump(exclude={"email"}), email=email)
        self.db.add(member)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("A membership application with this email already exists")

        logger.info(f"Membership application received from {email} ({member.region})")
        return member

    async def list_applications(self, status: Optional[ApplicationStatus] = None) -> List[Member]:
        query = select(Member).order_by(Member.membership_date)
        if status:
            query = query.where(Member.status == status.value)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def update_status(self, member_id: uuid.UUID, status: ApplicationStatus) -> Member:
        member = await self.db.get(Member, member_id)
        if not member:
            raise NotFoundError("Member not found")

        member.status = status.value
        await self.db.commit()
        logger.info(f"Membership application {member_id} set to {status.value}")
        return member
