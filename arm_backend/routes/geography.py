# arm_backend/routes/geography.py
import uuid
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.security import require_admin, require_session
from arm_backend.dependencies import get_db
from arm_backend.schemas.geography import (
    CartographyResponse,
    CercleRead,
    CommuneRead,
    GeographyInitResponse,
    LegacyRegionCreate,
    LegacyRegionRead,
    RegionRead,
)
from arm_backend.services.geography_service import GeographyService

router = APIRouter(prefix="/api", tags=["geography"])


@router.post("/regions", response_model=LegacyRegionRead, dependencies=[Depends(require_session)])
async def create_region(data: LegacyRegionCreate, db: AsyncSession = Depends(get_db)):
    return await GeographyService(db).create_legacy_region(data)


@router.get("/regions", response_model=List[RegionRead])
async def list_regions(db: AsyncSession = Depends(get_db)):
    return await GeographyService(db).list_regions()


@router.get("/regions/{region_id}/cercles", response_model=List[CercleRead])
async def list_cercles(region_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await GeographyService(db).list_cercles(region_id)


@router.get("/cercles/{cercle_id}/communes", response_model=List[CommuneRead])
async def list_communes(cercle_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await GeographyService(db).list_communes(cercle_id)


@router.get("/cartography", response_model=CartographyResponse)
async def cartography(db: AsyncSession = Depends(get_db)):
    return await GeographyService(db).cartography()


@router.post("/admin/init-geography", response_model=GeographyInitResponse, dependencies=[Depends(require_admin)])
async def init_geography(db: AsyncSession = Depends(get_db)):
    counts = await GeographyService(db).init_geography()
    return GeographyInitResponse(message="Geographic data initialized", **counts)
