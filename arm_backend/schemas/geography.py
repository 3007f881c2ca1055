"""
Schemas for regions, cercles and communes.
"""
import uuid
from typing import List

from pydantic import Field

from .base import BaseSchema, UtcDatetime


class LegacyCercle(BaseSchema):
    name: str = Field(min_length=1)
    communes: List[str] = []


class LegacyRegionCreate(BaseSchema):
    name: str = Field(min_length=1)
    cercles: List[LegacyCercle] = []


class LegacyRegionRead(BaseSchema):
    id: uuid.UUID
    name: str
    cercles: List[LegacyCercle]


class CommuneRead(BaseSchema):
    id: uuid.UUID
    cercle_id: uuid.UUID
    name: str
    code: str
    created_at: UtcDatetime


class CercleRead(BaseSchema):
    id: uuid.UUID
    region_id: uuid.UUID
    name: str
    code: str
    created_at: UtcDatetime


class CercleWithCommunes(CercleRead):
    communes: List[CommuneRead] = []


class RegionRead(BaseSchema):
    id: uuid.UUID
    name: str
    code: str
    member_count: int
    created_at: UtcDatetime


class RegionWithCercles(RegionRead):
    cercles: List[CercleWithCommunes] = []


class CartographyResponse(BaseSchema):
    regions: List[RegionWithCercles]
    total_members: int


class GeographyInitResponse(BaseSchema):
    success: bool = True
    message: str
    regions: int
    cercles: int
    communes: int
