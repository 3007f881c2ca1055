"""
Schemas for contact messages, internal messages and the public chat.
"""
import uuid
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from arm_backend.core.enums import MemberRole, MessageStatus
from .base import BaseSchema, UtcDatetime


class ContactMessageCreate(BaseSchema):
    sender_name: str = Field(min_length=1)
    sender_email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactMessageRead(BaseSchema):
    id: uuid.UUID
    sender_name: str
    sender_email: str
    subject: str
    message: str
    status: MessageStatus
    created_at: UtcDatetime


class ContactMessageStatusUpdate(BaseSchema):
    status: MessageStatus


class InternalMessageCreate(BaseSchema):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    target_role: Optional[MemberRole] = None
    target_region: Optional[str] = None
    target_cercle: Optional[str] = None
    target_commune: Optional[str] = None

    @field_validator("target_role", "target_region", "target_cercle", "target_commune", mode="before")
    @classmethod
    def blank_target_is_none(cls, v):
        # An empty target addresses everyone
        if isinstance(v, str) and not v.strip():
            return None
        return v


class InternalMessageRead(BaseSchema):
    id: uuid.UUID
    title: str
    content: str
    sender_id: str
    target_role: Optional[str] = None
    target_region: Optional[str] = None
    target_cercle: Optional[str] = None
    target_commune: Optional[str] = None
    sent_at: UtcDatetime
    created_at: UtcDatetime


class ChatMessageCreate(BaseSchema):
    user_name: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ChatMessageRead(BaseSchema):
    id: uuid.UUID
    user_name: str
    message: str
    created_at: UtcDatetime
