# arm_backend/services/websockets/manager.py
from typing import Any, Dict, Set
from fastapi import WebSocket
import json
import logging

logger = logging.getLogger(__name__)

class ConnectionManager:
    """
    Process-local set of public chat sockets.

    Broadcast is fire-and-forget: a socket that fails to receive is dropped
    and the fan-out continues with the rest.
    """
    def __init__(self):
        self.active_connections: Set[WebSocket] = set()

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.active_connections.add(websocket)
        logger.info(f"Chat socket connected. Total connections: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket):
        self.active_connections.discard(websocket)
        logger.info(f"Chat socket disconnected. Total connections: {len(self.active_connections)}")

    async def send_personal_message(self, message: Dict[str, Any], websocket: WebSocket):
        await websocket.send_text(json.dumps(message))

    async def broadcast(self, message: Dict[str, Any]) -> int:
        """Send to every connected socket. Returns how many sends succeeded."""
        json_message = json.dumps(message)
        disconnected = []
        delivered = 0

        # Copy: a socket may disconnect while we await a send
        for connection in list(self.active_connections):
            try:
                await connection.send_text(json_message)
                delivered += 1
            except Exception as e:
                logger.error(f"Error sending to chat socket: {e}")
                disconnected.append(connection)

        # Clean up disconnected clients
        for connection in disconnected:
            self.disconnect(connection)

        return delivered

# Global connection manager instance
manager = ConnectionManager()
