"""
Main application for gesture-controlled browsing.
"""
import asyncio
import logging
import os
import sys
import time
from typing import List, Optional

import cv2
import numpy as np
import uvicorn
from dotenv import load_dotenv

from .config import Cfg, load_config
from .controller_browser import BrowserController, ConnectionManager
from .controller_mock import MockController
from .gestures import GestureProcessor
from .landmarks import HandsTracker, draw_hand
from .server import create_app, resume_session
from .types import FrameResult, GestureLabel, Keypoint

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (0, 0, 255)


class GestureFlowApp:
    """Camera loop that drives gesture control."""

    def __init__(self, config: Cfg, use_browser: bool = False):
        """Initialize the application with configuration."""
        self.config = config
        self.tracker = HandsTracker(
            max_num_hands=config.mediapipe.max_num_hands,
            model_complexity=config.mediapipe.model_complexity,
            min_detection_conf=config.mediapipe.min_detection_confidence,
            min_tracking_conf=config.mediapipe.min_tracking_confidence
        )
        self.processor = GestureProcessor(config)
        self.manager = ConnectionManager()
        self.server_app = None

        if use_browser:
            self.controller = BrowserController(self.manager)
            self.server_app = create_app(self.processor, self.manager)
            logger.info("🌐 Using browser controller")
        else:
            self.controller = MockController()

        self.cap: Optional[cv2.VideoCapture] = None
        self._open_camera()

    def _open_camera(self) -> None:
        cam = self.config.camera
        self.cap = cv2.VideoCapture(cam.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, cam.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, cam.height)
        self.cap.set(cv2.CAP_PROP_FPS, cam.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {cam.index}")
        logger.info(f"📷 Camera {cam.index} opened")

    def _release_camera(self) -> None:
        if self.cap is not None:
            self.cap.release()
            self.cap = None
            logger.info("📷 Camera released")

    async def resume(self) -> None:
        """Resume gesture control; the camera reopens on the next loop iteration."""
        await resume_session(self.processor, self.manager)

    async def run(self):
        """Run the main application loop."""
        logger.info(f"Starting {self.config.display.window_name}")
        logger.info("🎯 Gestures: thumbs up/down = scroll, victory = toggle content, "
                    "hold middle finger = stop camera")
        logger.info("Press 'q' to quit, 'r' to resume a stopped camera")

        try:
            while True:
                if self.processor.capture_active:
                    if self.cap is None:
                        self._open_camera()

                    ret, frame = await asyncio.to_thread(self.cap.read)
                    if not ret:
                        logger.error("Failed to read frame from camera")
                        break

                    hands = self.tracker.process(frame)
                    result = self.processor.process_frame(hands, time.time())
                    await self.processor.execute(result, self.controller)
                    if isinstance(self.controller, BrowserController) and (
                            result.label_changed or result.countdown_changed):
                        await self.controller.publish_state(result)

                    self._draw_frame(frame, hands, result)
                    if not self.processor.capture_active:
                        self._release_camera()
                else:
                    frame = self._stopped_frame()

                cv2.imshow(self.config.display.window_name, frame)

                key = cv2.waitKey(1) & 0xFF
                if key == ord('q'):
                    break
                if key == ord('r') and not self.processor.capture_active:
                    await self.resume()

                # Let the status server handle requests between frames
                await asyncio.sleep(0 if self.processor.capture_active else 0.03)
        finally:
            self._release_camera()
            self.tracker.close()
            cv2.destroyAllWindows()

    def _draw_frame(self, frame: np.ndarray, hands: List[List[Keypoint]], result: FrameResult) -> None:
        if hands and self.config.display.show_landmarks:
            draw_hand(frame, hands[0])

        height, width = frame.shape[:2]

        if result.countdown > 0 and self.config.display.show_countdown:
            overlay = np.zeros_like(frame)
            cv2.addWeighted(frame, 0.6, overlay, 0.4, 0, dst=frame)
            text = str(result.countdown)
            (tw, th), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, 5, 10)
            cv2.putText(frame, text, ((width - tw) // 2, (height + th) // 2),
                        cv2.FONT_HERSHEY_SIMPLEX, 5, WHITE, 10)
            cv2.putText(frame, "Hold to Stop...", ((width - tw) // 2 - 60, (height + th) // 2 + 40),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.8, WHITE, 2)

        status = "No hand detected" if not hands else f"Gesture: {result.label.value}"
        color = GREEN if result.label != GestureLabel.NONE else RED
        cv2.putText(frame, status, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, WHITE, 2)
        cv2.putText(frame, result.feedback, (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 2)
        cv2.putText(frame, "Press 'q' to quit", (10, height - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, WHITE, 1)

    def _stopped_frame(self) -> np.ndarray:
        cam = self.config.camera
        frame = np.zeros((cam.height, cam.width, 3), dtype=np.uint8)
        cv2.putText(frame, "Camera Stopped", (cam.width // 2 - 130, cam.height // 2 - 10),
                    cv2.FONT_HERSHEY_SIMPLEX, 1.0, RED, 2)
        cv2.putText(frame, "Press 'r' to resume", (cam.width // 2 - 120, cam.height // 2 + 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, WHITE, 2)
        return frame


async def main():
    """Entry point for the application."""
    load_dotenv()

    # Check for --browser flag
    use_browser = "--browser" in sys.argv

    config = load_config(os.getenv("GESTUREFLOW_CONFIG") or None)
    camera_index = os.getenv("GESTUREFLOW_CAMERA_INDEX")
    if camera_index:
        config.camera.index = int(camera_index)

    logging.basicConfig(level=config.logging.level)

    app = GestureFlowApp(config, use_browser=use_browser)

    server = None
    server_task = None
    if app.server_app is not None:
        server = uvicorn.Server(uvicorn.Config(
            app.server_app,
            host=config.server.host,
            port=config.server.port,
            log_level=config.logging.level.lower()
        ))
        server_task = asyncio.create_task(server.serve())
        logger.info(f"🌐 Status server on http://{config.server.host}:{config.server.port}")

    try:
        await app.run()
    finally:
        if server is not None:
            server.should_exit = True
            server_task.cancel()


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


if __name__ == "__main__":
    run()
