# arm_backend/services/chat_service.py
import logging
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.config import get_settings
from arm_backend.models.chat import PublicChatMessage
from arm_backend.schemas.message import ChatMessageRead
from arm_backend.services.websockets.manager import ConnectionManager

logger = logging.getLogger(__name__)


def new_message_event(message: PublicChatMessage) -> Dict[str, Any]:
    """Frame pushed to chat sockets when a message is posted."""
    payload = ChatMessageRead.from_orm_model(message).model_dump(mode="json", by_alias=True)
    return {"type": "new_message", **payload}


class ChatService:
    def __init__(self, db: AsyncSession, connections: ConnectionManager):
        self.db = db
        self.connections = connections

    async def history(self) -> List[PublicChatMessage]:
        """Most recent messages, returned oldest first."""
        limit = get_settings().CHAT_HISTORY_LIMIT
        result = await self.db.execute(
            select(PublicChatMessage)
            .order_by(PublicChatMessage.created_at.desc())
            .limit(limit)
        )
        return list(reversed(result.scalars().all()))

    async def post(self, user_name: str, text: str) -> PublicChatMessage:
        """Persist a message, then push it to every connected socket."""
        message = PublicChatMessage(user_name=user_name, message=text)
        self.db.add(message)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        delivered = await self.connections.broadcast(new_message_event(message))
        logger.info(f"Chat message {message.id} from {user_name} delivered to {delivered} socket(s)")
        return message
