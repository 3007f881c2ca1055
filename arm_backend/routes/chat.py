# arm_backend/routes/chat.py
import json
import logging
from typing import List

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.dependencies import get_db
from arm_backend.schemas.message import ChatMessageCreate, ChatMessageRead
from arm_backend.services.chat_service import ChatService
from arm_backend.services.websockets.manager import manager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

INVALID_FORMAT = {"type": "error", "content": "Invalid message format"}
SEND_FAILED = {"type": "error", "content": "Failed to send message"}


@router.get("/api/chat/public", response_model=List[ChatMessageRead])
async def chat_history(db: AsyncSession = Depends(get_db)):
    return await ChatService(db, manager).history()


@router.post("/api/chat/public", response_model=ChatMessageRead)
async def post_chat_message(data: ChatMessageCreate, db: AsyncSession = Depends(get_db)):
    return await ChatService(db, manager).post(data.user_name, data.message)


def parse_chat_frame(raw: str):
    """
    Returns (user_name, message) for a send_message frame, None for frames
    of another type. Raises ValueError when the frame is malformed.
    """
    frame = json.loads(raw)
    if not isinstance(frame, dict):
        raise ValueError("Frame is not an object")
    if frame.get("type") != "send_message":
        return None
    user_name = frame.get("userName")
    message = frame.get("message")
    if not isinstance(user_name, str) or not isinstance(message, str) or not user_name or not message:
        raise ValueError("send_message requires userName and message")
    return user_name, message


@router.websocket("/ws/chat")
async def chat_socket(websocket: WebSocket, db: AsyncSession = Depends(get_db)):
    chat = ChatService(db, manager)
    await manager.connect(websocket)
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                parsed = parse_chat_frame(raw)
            except ValueError:
                # json.JSONDecodeError is a ValueError
                await manager.send_personal_message(INVALID_FORMAT, websocket)
                continue
            if parsed is None:
                continue

            user_name, message = parsed
            try:
                await chat.post(user_name, message)
            except SQLAlchemyError as e:
                logger.error(f"Chat message from {user_name} not stored: {e}")
                await manager.send_personal_message(SEND_FAILED, websocket)
    except WebSocketDisconnect:
        manager.disconnect(websocket)
        logger.info("Chat client disconnected")
    except Exception:
        manager.disconnect(websocket)
        logger.exception("Chat socket closed after an error")
        raise
