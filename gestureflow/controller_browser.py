"""
Browser controller that forwards gesture commands to websocket clients.
"""
import logging
from typing import Set

from fastapi import WebSocket

from .types import FrameResult

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Tracks websocket clients and broadcasts JSON messages to them."""

    def __init__(self):
        self.active_connections: Set[WebSocket] = set()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept a new client and send the initial status."""
        await websocket.accept()
        self.active_connections.add(websocket)
        logger.info(f"🔌 Client connected ({len(self.active_connections)} active)")
        await websocket.send_json({"type": "status", "connected": True})

    async def disconnect(self, websocket: WebSocket) -> None:
        self.active_connections.discard(websocket)
        logger.info(f"🔌 Client disconnected ({len(self.active_connections)} active)")

    async def broadcast(self, message: dict) -> None:
        """Broadcast message to all connected clients, dropping broken ones."""
        disconnected = set()
        for connection in list(self.active_connections):
            try:
                await connection.send_json(message)
            except Exception as e:
                logger.warning(f"Dropping client after send failure: {e}")
                disconnected.add(connection)

        for conn in disconnected:
            self.active_connections.discard(conn)


class BrowserController:
    """Controller whose commands are executed by the browser page."""

    def __init__(self, manager: ConnectionManager):
        self.manager = manager

    async def scroll(self, dy_px: int) -> None:
        await self.manager.broadcast({"type": "scroll", "dy_px": dy_px})

    async def toggle_content(self) -> None:
        await self.manager.broadcast({"type": "toggle_content"})

    async def stop_capture(self) -> None:
        logger.info("📹 Stop capture sent to browser")
        await self.manager.broadcast({"type": "stop_capture"})

    async def publish_state(self, result: FrameResult) -> None:
        """Send label and countdown so the page can update its indicators."""
        await self.manager.broadcast(state_message(result))


def state_message(result: FrameResult) -> dict:
    return {
        "type": "gesture",
        "label": result.label.value,
        "feedback": result.feedback,
        "countdown": result.countdown,
    }
