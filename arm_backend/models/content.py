# arm_backend/models/content.py
"""
Public content managed from the admin area: party leadership, the
political program, news articles and upcoming events.
"""
import uuid

from sqlalchemy import Column, String, Text, Integer, DateTime, Uuid
from sqlalchemy.sql import func

from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class Leadership(Base):
    __tablename__ = "leadership"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    position = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    location = Column(String, nullable=True)
    order = Column(Integer, nullable=False, default=0)
    created_by = Column(String, nullable=True)

    def __repr__(self):
        return f"<Leadership {self.position}: {self.name}>"


class ProgramItem(Base):
    __tablename__ = "political_program"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    category = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    order = Column(Integer, nullable=False, default=0)
    created_by = Column(String, nullable=True)

    def __repr__(self):
        return f"<ProgramItem {self.category}/{self.order}: {self.title}>"


class News(Base):
    __tablename__ = "news"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    created_by = Column(String, nullable=True)
    published_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<News {self.title}>"


class Event(Base):
    __tablename__ = "events"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Event {self.title} @ {self.date}>"
