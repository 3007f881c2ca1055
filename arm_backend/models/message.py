# arm_backend/models/message.py
import uuid

from sqlalchemy import Column, String, Text, DateTime, Uuid
from sqlalchemy.sql import func

from arm_backend.core.enums import MessageStatus
from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class ContactMessage(Base):
    """A message sent through the public contact form."""
    __tablename__ = "messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    sender_name = Column(String, nullable=False)
    sender_email = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), default=MessageStatus.UNREAD.value, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<ContactMessage {self.sender_email}: {self.subject}>"


class InternalMessage(Base):
    """
    A broadcast from the party to its members.

    Targeting columns are all optional; a message with none of them set
    goes to every member.
    """
    __tablename__ = "internal_messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    sender_id = Column(String, nullable=False)
    target_role = Column(String(20), nullable=True)
    target_region = Column(String, nullable=True)
    target_cercle = Column(String, nullable=True)
    target_commune = Column(String, nullable=True)
    sent_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<InternalMessage {self.title} from {self.sender_id}>"
