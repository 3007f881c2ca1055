# arm_backend/routes/media.py
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.exceptions import ValidationError
from arm_backend.core.security import require_session
from arm_backend.dependencies import get_db
from arm_backend.schemas.media import MediaRead, MediaUploadResponse
from arm_backend.services.media_service import MediaService

router = APIRouter(prefix="/api/media", tags=["media"])


@router.post("/upload", response_model=MediaUploadResponse)
async def upload_media(file: Optional[UploadFile] = File(None), db: AsyncSession = Depends(get_db)):
    if file is None or not file.filename:
        raise ValidationError("No file provided")

    service = MediaService(db)
    limit = service.settings.MEDIA_MAX_UPLOAD_BYTES
    # One byte past the limit is enough to reject oversized uploads
    content = await file.read(limit + 1)

    media = await service.store(file.filename, content, file.content_type)
    return {"url": service.public_url(media.key), "key": media.key, "id": media.id}


@router.get("", response_model=List[MediaRead], dependencies=[Depends(require_session)])
async def list_media(db: AsyncSession = Depends(get_db)):
    return await MediaService(db).list()
