# arm_backend/services/media_service.py
"""
Uploaded media stored on local disk and served from MEDIA_URL_PATH.
"""
import logging
import re
import time
from pathlib import Path
from typing import List

import aiofiles
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.config import get_settings
from arm_backend.core.exceptions import MediaTooLargeError, ValidationError
from arm_backend.models.media import Media

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def safe_filename(name: str) -> str:
    """Keep letters, digits, dot, dash and underscore; everything else becomes '_'."""
    base = Path(name).name.strip() or "file"
    return re.sub(r"[^A-Za-z0-9._-]", "_", base)


class MediaService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.settings = get_settings()

    @property
    def root(self) -> Path:
        return Path(self.settings.MEDIA_UPLOAD_DIR)

    def public_url(self, key: str) -> str:
        return f"{self.settings.MEDIA_URL_PATH.rstrip('/')}/{key}"

    async def store(self, file_name: str, content: bytes, mime_type: str = None) -> Media:
        if not file_name:
            raise ValidationError("No file provided")
        if len(content) > self.settings.MEDIA_MAX_UPLOAD_BYTES:
            logger.warning(f"Rejected upload {file_name}: {len(content)} bytes")
            raise MediaTooLargeError("File too large")

        key = f"media/{int(time.time() * 1000)}-{safe_filename(file_name)}"
        path = self.root / key
        path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(path, "wb") as out_file:
            await out_file.write(content)

        media = Media(
            key=key,
            file_name=file_name,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            size=len(content),
        )
        self.db.add(media)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            path.unlink(missing_ok=True)
            raise

        logger.info(f"Stored media {key} ({len(content)} bytes)")
        return media

    async def list(self) -> List[Media]:
        result = await self.db.execute(select(Media).order_by(Media.uploaded_at))
        return list(result.scalars().all())
