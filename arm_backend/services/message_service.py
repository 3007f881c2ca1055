# arm_backend/services/message_service.py
"""
Contact-form messages and internal party messages.
"""
import logging
import uuid
from typing import List, Optional

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import MessageStatus
from arm_backend.core.exceptions import NotFoundError
from arm_backend.models.member_profile import MemberProfile
from arm_backend.models.message import ContactMessage, InternalMessage
from arm_backend.schemas.message import ContactMessageCreate, InternalMessageCreate

logger = logging.getLogger(__name__)


class ContactMessageService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: ContactMessageCreate) -> ContactMessage:
        message = ContactMessage(**data.model_dump(), status=MessageStatus.UNREAD.value)
        self.db.add(message)
        await self.db.commit()
        logger.info(f"Contact message {message.id} from {data.sender_email}")
        return message

    async def list(self, status: Optional[MessageStatus] = None) -> List[ContactMessage]:
        query = select(ContactMessage).order_by(ContactMessage.created_at)
        if status:
            query = query.where(ContactMessage.status == status.value)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def update_status(self, message_id: uuid.UUID, status: MessageStatus) -> ContactMessage:
        message = await self.db.get(ContactMessage, message_id)
        if not message:
            raise NotFoundError("Message not found")
        message.status = status.value
        await self.db.commit()
        logger.info(f"Contact message {message_id} marked {status.value}")
        return message


class InternalMessageService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def send(self, data: InternalMessageCreate, sender_id: str) -> InternalMessage:
        values = data.model_dump()
        if data.target_role:
            values["target_role"] = data.target_role.value
        message = InternalMessage(**values, sender_id=sender_id)
        self.db.add(message)
        await self.db.commit()
        logger.info(
            f"Internal message {message.id} sent by {sender_id} "
            f"(role={message.target_role}, region={message.target_region}, "
            f"cercle={message.target_cercle}, commune={message.target_commune})"
        )
        return message

    async def for_member(self, profile: MemberProfile) -> List[InternalMessage]:
        """
        Messages addressed to everyone, to the member's role, or to the area
        they live in. Profiles only record a commune, so it is matched
        against every geographic target.
        """
        untargeted = and_(
            InternalMessage.target_role.is_(None),
            InternalMessage.target_region.is_(None),
            InternalMessage.target_cercle.is_(None),
            InternalMessage.target_commune.is_(None),
        )
        query = (
            select(InternalMessage)
            .where(
                or_(
                    untargeted,
                    InternalMessage.target_role == profile.role,
                    InternalMessage.target_region == profile.commune,
                    InternalMessage.target_cercle == profile.commune,
                    InternalMessage.target_commune == profile.commune,
                )
            )
            .order_by(InternalMessage.sent_at.desc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())
