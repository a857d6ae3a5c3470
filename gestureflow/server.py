"""
GestureFlow status server.

Exposes the current gesture, countdown and camera state over HTTP and
streams gesture commands to browser pages over a websocket.
"""
import json
import logging
from typing import Callable, Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from .controller_browser import ConnectionManager
from .gestures import GestureProcessor

logger = logging.getLogger(__name__)


class StatusResponse(BaseModel):
    label: str
    feedback: str
    countdown: int
    capture_active: bool


def processor_status(processor: GestureProcessor) -> StatusResponse:
    result = processor.last_result
    return StatusResponse(
        label=result.label.value,
        feedback=result.feedback,
        countdown=result.countdown,
        capture_active=processor.capture_active
    )


async def resume_session(processor: GestureProcessor, manager: ConnectionManager,
                         resume_action: Optional[Callable[[], None]] = None) -> StatusResponse:
    """Reset the session and tell every connected page about the new status."""
    logger.info("▶️ Resume requested")
    (resume_action or processor.resume)()
    status = processor_status(processor)
    await manager.broadcast({"type": "status", **status.model_dump()})
    return status


def create_app(processor: GestureProcessor, manager: ConnectionManager,
               on_resume: Optional[Callable[[], None]] = None) -> FastAPI:
    """
    Build the status server around a running gesture processor.

    Args:
        processor: Processor whose state is reported
        manager: Websocket connection manager shared with the BrowserController
        on_resume: Resume action, defaults to processor.resume

    Returns:
        FastAPI application
    """
    app = FastAPI(title="GestureFlow")

    def current_status() -> StatusResponse:
        return processor_status(processor)

    async def resume() -> StatusResponse:
        return await resume_session(processor, manager, on_resume)

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "status": "online",
            "service": "GestureFlow",
            "clients": len(manager.active_connections),
        }

    @app.get("/status", response_model=StatusResponse)
    async def get_status():
        """Get the current gesture and countdown"""
        return current_status()

    @app.post("/resume", response_model=StatusResponse)
    async def post_resume():
        """Restart gesture control after the camera was stopped"""
        return await resume()

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        await manager.connect(websocket)
        try:
            while True:
                message = await websocket.receive_text()
                try:
                    msg = json.loads(message)
                except json.JSONDecodeError:
                    await websocket.send_json({"type": "error", "message": "Invalid JSON"})
                    continue

                msg_type = msg.get("type") if isinstance(msg, dict) else None
                if msg_type == "resume":
                    await resume()
                elif msg_type == "status":
                    await websocket.send_json({"type": "status", **current_status().model_dump()})
                else:
                    logger.warning(f"Unknown message type: {msg_type}")
                    await websocket.send_json({"type": "error", "message": f"Unknown message type: {msg_type}"})
        except WebSocketDisconnect:
            await manager.disconnect(websocket)

    return app
