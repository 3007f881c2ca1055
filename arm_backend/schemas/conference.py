"""
Schemas for video conferences.
"""
import uuid
from typing import Optional

from pydantic import Field

from arm_backend.core.enums import ConferenceStatus
from .base import BaseSchema, UtcDatetime, not_null


class ConferenceCreate(BaseSchema):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    scheduled_at: UtcDatetime
    meeting_url: str = Field(min_length=1)
    status: ConferenceStatus = ConferenceStatus.SCHEDULED


class ConferenceUpdate(BaseSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    scheduled_at: Optional[UtcDatetime] = None
    meeting_url: Optional[str] = Field(default=None, min_length=1)
    status: Optional[ConferenceStatus] = None

    check_not_null = not_null("title", "scheduled_at", "meeting_url", "status")


class ConferenceRead(BaseSchema):
    id: uuid.UUID
    title: str
    description: Optional[str] = None
    scheduled_at: UtcDatetime
    meeting_url: str
    status: ConferenceStatus
    created_by: str
    created_at: UtcDatetime
