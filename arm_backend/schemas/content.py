"""
Schemas for leadership, political program, news and events.

Update schemas leave every field optional; only the fields present in
the request body are written.
"""
import uuid
from typing import Optional

from pydantic import Field

from .base import BaseSchema, UtcDatetime, not_null


class LeadershipCreate(BaseSchema):
    name: str = Field(min_length=1)
    position: str = Field(min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None
    location: Optional[str] = None
    order: int = 0


class LeadershipUpdate(BaseSchema):
    name: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None
    location: Optional[str] = None
    order: Optional[int] = None

    check_not_null = not_null("name", "position", "order")


class LeadershipRead(BaseSchema):
    id: uuid.UUID
    name: str
    position: str
    phone: Optional[str] = None
    address: Optional[str] = None
    location: Optional[str] = None
    order: int
    created_by: Optional[str] = None


class ProgramCreate(BaseSchema):
    category: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    order: int = 0


class ProgramUpdate(BaseSchema):
    category: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    order: Optional[int] = None

    check_not_null = not_null("category", "title", "description", "order")


class ProgramRead(BaseSchema):
    id: uuid.UUID
    category: str
    title: str
    description: str
    order: int
    created_by: Optional[str] = None


class NewsCreate(BaseSchema):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    image_url: Optional[str] = None
    video_url: Optional[str] = None


class NewsUpdate(BaseSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = None
    video_url: Optional[str] = None

    check_not_null = not_null("title", "content")


class NewsRead(BaseSchema):
    id: uuid.UUID
    title: str
    content: str
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    created_by: Optional[str] = None
    published_at: UtcDatetime


class EventCreate(BaseSchema):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    date: UtcDatetime
    location: str = Field(min_length=1)
    image_url: Optional[str] = None


class EventUpdate(BaseSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    date: Optional[UtcDatetime] = None
    location: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = None

    check_not_null = not_null("title", "description", "date", "location")


class EventRead(BaseSchema):
    id: uuid.UUID
    title: str
    description: str
    date: UtcDatetime
    location: str
    image_url: Optional[str] = None
    created_by: Optional[str] = None
    created_at: UtcDatetime
