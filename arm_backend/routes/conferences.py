# arm_backend/routes/conferences.py
from fastapi import APIRouter

from arm_backend.routes.content import register_content_routes
from arm_backend.schemas.conference import ConferenceCreate, ConferenceRead, ConferenceUpdate
from arm_backend.services.conference_service import ConferenceService

router = APIRouter(prefix="/api", tags=["conferences"])

# Public list; writes are admin only
register_content_routes(
    router,
    "conferences",
    ConferenceService,
    ConferenceCreate,
    ConferenceUpdate,
    ConferenceRead,
    session_writes=False,
)
