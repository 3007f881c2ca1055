# arm_backend/services/conference_service.py
from datetime import timedelta

from sqlalchemy import select

from arm_backend.core.utils import utcnow
from arm_backend.models.conference import VideoConference
from arm_backend.services.content_service import ContentService

# Conferences stay listed for a day after their start time
RECENT_WINDOW = timedelta(hours=24)


class ConferenceService(ContentService):
    model = VideoConference
    label = "Conference"

    def list_query(self):
        return (
            select(VideoConference)
            .where(VideoConference.scheduled_at >= utcnow() - RECENT_WINDOW)
            .order_by(VideoConference.scheduled_at)
        )
