# arm_backend/services/election_service.py
"""
Polling station results reported by members ("sentinels") and verified
by an admin.
"""
import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import ElectionResultStatus
from arm_backend.core.exceptions import NotFoundError, ValidationError
from arm_backend.core.utils import utcnow
from arm_backend.models.election import ElectionResult
from arm_backend.schemas.election import ElectionResultSubmit
from arm_backend.services.member_service import MemberService

logger = logging.getLogger(__name__)


class ElectionService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.members = MemberService(db)

    async def submit(self, user_id: str, data: ElectionResultSubmit) -> ElectionResult:
        try:
            profile = await self.members.get_profile_for_user(user_id)
            if not profile:
                profile = await self.members.create_placeholder_profile(user_id)

            result = ElectionResult(
                member_id=profile.id,
                **data.model_dump(),
                status=ElectionResultStatus.PENDING.value,
            )
            self.db.add(result)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(
            f"Election results {result.id} submitted by {profile.membership_number} "
            f"for bureau {data.bureau_vote} ({data.commune})"
        )
        return result

    async def my_submissions(self, user_id: str) -> List[ElectionResult]:
        profile = await self.members.require_profile_for_user(user_id)
        result = await self.db.execute(
            select(ElectionResult)
            .where(ElectionResult.member_id == profile.id)
            .order_by(ElectionResult.submitted_at.desc())
        )
        return list(result.scalars().all())

    async def get(self, result_id: uuid.UUID) -> ElectionResult:
        result = await self.db.get(ElectionResult, result_id)
        if not result:
            raise NotFoundError("Result not found")
        return result

    async def pending(self) -> List[ElectionResult]:
        result = await self.db.execute(
            select(ElectionResult)
            .where(ElectionResult.status == ElectionResultStatus.PENDING.value)
            .order_by(ElectionResult.submitted_at.desc())
        )
        return list(result.scalars().all())

    async def verify(
        self,
        result_id: uuid.UUID,
        status: ElectionResultStatus,
        verified_by: str,
        notes: Optional[str] = None,
    ) -> ElectionResult:
        if status == ElectionResultStatus.PENDING:
            raise ValidationError("Status must be verified or rejected")

        result = await self.get(result_id)
        result.status = status.value
        result.verified_by = verified_by
        result.verified_at = utcnow()
        await self.db.commit()

        logger.info(
            f"Election results {result_id} {status.value} by {verified_by}"
            + (f": {notes}" if notes else "")
        )
        return result
