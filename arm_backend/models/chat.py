# arm_backend/models/chat.py
import uuid

from sqlalchemy import Column, String, Text, DateTime, Uuid
from sqlalchemy.sql import func

from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class PublicChatMessage(Base):
    __tablename__ = "public_chat"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_name = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<PublicChatMessage {self.user_name}: {self.message[:30]}>"
