# arm_backend/models/conference.py
import uuid

from sqlalchemy import Column, String, Text, DateTime, Uuid
from sqlalchemy.sql import func

from arm_backend.core.enums import ConferenceStatus
from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class VideoConference(Base):
    __tablename__ = "video_conferences"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=False, index=True)
    meeting_url = Column(String, nullable=False)
    status = Column(String(20), default=ConferenceStatus.SCHEDULED.value, nullable=False)
    created_by = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<VideoConference {self.title} @ {self.scheduled_at}>"
