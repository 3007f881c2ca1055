# arm_backend/routes/health.py
import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.security import has_admin_headers
from arm_backend.core.utils import utcnow
from arm_backend.dependencies import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

STARTED_AT = time.monotonic()


def _base_status() -> dict:
    return {
        "status": "healthy",
        "timestamp": utcnow().isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 2),
    }


async def _database_status(db: AsyncSession) -> bool:
    try:
        await db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False


@router.get("/status")
async def status_check():
    """Basic liveness check"""
    return _base_status()


@router.get("/api/health")
async def api_health(db: AsyncSession = Depends(get_db)):
    """Liveness plus database connectivity"""
    body = _base_status()
    if await _database_status(db):
        body["database"] = "connected"
        return body

    body.update(status="unhealthy", database="disconnected")
    return JSONResponse(status_code=503, content=body)


@router.get("/api/admin/health")
async def admin_health(request: Request, db: AsyncSession = Depends(get_db)):
    """Same as /api/health, and reports whether admin headers were sent (not checked)."""
    body = _base_status()
    body["authentication"] = "present" if has_admin_headers(request) else "missing"
    if await _database_status(db):
        body["database"] = "connected"
        return body

    body.update(status="unhealthy", database="disconnected")
    return JSONResponse(status_code=503, content=body)
