"""
Schemas for polling-station election results.
"""
import uuid
from typing import Dict, Optional

from pydantic import Field

from arm_backend.core.enums import ElectionResultStatus
from .base import BaseSchema, UtcDatetime


class ElectionResultSubmit(BaseSchema):
    election_type: str = Field(min_length=1)
    region: str = Field(min_length=1)
    cercle: str = Field(min_length=1)
    commune: str = Field(min_length=1)
    bureau_vote: str = Field(min_length=1)
    results_data: Dict[str, int]
    pv_photo_url: Optional[str] = None


class ElectionSubmitResponse(BaseSchema):
    result_id: uuid.UUID
    status: ElectionResultStatus
    message: str


class ElectionResultRead(BaseSchema):
    id: uuid.UUID
    member_id: uuid.UUID
    election_type: str
    region: str
    cercle: str
    commune: str
    bureau_vote: str
    results_data: Dict[str, int]
    pv_photo_url: Optional[str] = None
    submitted_at: UtcDatetime
    verified_by: Optional[str] = None
    verified_at: Optional[UtcDatetime] = None
    status: ElectionResultStatus


class ElectionVerifyRequest(BaseSchema):
    status: ElectionResultStatus
    notes: Optional[str] = None
