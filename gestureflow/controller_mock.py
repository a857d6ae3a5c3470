"""
Mock controller implementation for testing gesture commands.
"""
import logging

logger = logging.getLogger(__name__)


class MockController:
    """Mock controller that logs actions instead of executing them."""

    def __init__(self):
        """Initialize the mock controller."""
        self.scroll_count = 0
        self.scroll_total_px = 0
        self.toggle_count = 0
        self.stop_count = 0
        self.content_visible = True
        self.capture_active = True

    async def scroll(self, dy_px: int) -> None:
        """Log scroll command instead of executing it."""
        self.scroll_count += 1
        self.scroll_total_px += dy_px
        logger.info(f"[MockController] Scroll: dy_px={dy_px} (call #{self.scroll_count})")

    async def toggle_content(self) -> None:
        """Flip content visibility."""
        self.toggle_count += 1
        self.content_visible = not self.content_visible
        logger.info(f"[MockController] Toggle content: visible={self.content_visible} (call #{self.toggle_count})")

    async def stop_capture(self) -> None:
        """Record that the camera should stop."""
        self.stop_count += 1
        self.capture_active = False
        logger.info(f"[MockController] Stop capture (call #{self.stop_count})")

    def reset_counters(self) -> None:
        """Reset action counters for testing."""
        self.scroll_count = 0
        self.scroll_total_px = 0
        self.toggle_count = 0
        self.stop_count = 0
