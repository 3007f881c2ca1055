# arm_backend/routes/ai.py
from typing import Optional

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.dependencies import get_db
from arm_backend.schemas.analytics import AIChatRequest
from arm_backend.services.ai_assistant import AIAssistant

router = APIRouter(prefix="/api/ai", tags=["ai"])


def get_ai_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for the AI provider client; None means the default network transport."""
    return None


@router.post("/chat")
async def ai_chat(
    data: AIChatRequest,
    db: AsyncSession = Depends(get_db),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_ai_transport),
):
    stream = await AIAssistant(db, transport=transport).open_stream(data.message, data.context)
    return StreamingResponse(
        stream,
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )
