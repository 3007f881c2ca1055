# arm_backend/models/media.py
import uuid

from sqlalchemy import Column, String, Integer, DateTime, Uuid
from sqlalchemy.sql import func

from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class Media(Base):
    __tablename__ = "media"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    key = Column(String, nullable=False, unique=True)  # path relative to MEDIA_UPLOAD_DIR
    file_name = Column(String, nullable=False)
    mime_type = Column(String, nullable=False)
    size = Column(Integer, nullable=False)
    uploaded_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Media {self.key} ({self.size} bytes)>"
