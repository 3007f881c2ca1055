"""
Schemas for uploaded media.
"""
import uuid

from .base import BaseSchema, UtcDatetime


class MediaRead(BaseSchema):
    id: uuid.UUID
    key: str
    file_name: str
    mime_type: str
    size: int
    uploaded_at: UtcDatetime


class MediaUploadResponse(BaseSchema):
    url: str
    key: str
    id: uuid.UUID
