"""
Integration test: skeleton frames through the processor into a controller.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from gestureflow import GestureProcessor, MockController, load_config, GestureLabel

from hand_fixtures import (
    thumbs_up_hand, thumbs_down_hand, middle_finger_hand, victory_hand, relaxed_hand,
)

FRAME_S = 1 / 30


class TestPipeline(unittest.IsolatedAsyncioTestCase):
    """Run a scripted gesture session at 30 fps."""

    async def asyncSetUp(self):
        self.processor = GestureProcessor(load_config())
        self.controller = MockController()
        self.t = 0.0
        self.labels = []
        self.countdowns = []

    async def play(self, hand, frames: int):
        for _ in range(frames):
            hands = [hand] if hand is not None else []
            result = self.processor.process_frame(hands, self.t)
            await self.processor.execute(result, self.controller)
            self.labels.append(result.label)
            self.countdowns.append(result.countdown)
            self.t += FRAME_S

    async def test_scripted_session(self):
        # Scroll up then down
        await self.play(thumbs_up_hand(), 10)
        await self.play(thumbs_down_hand(), 4)
        self.assertEqual(self.controller.scroll_count, 14)
        self.assertEqual(self.controller.scroll_total_px, -10 * 15 + 4 * 15)

        # Victory with flicker toggles once
        await self.play(victory_hand(), 3)
        await self.play(None, 2)
        await self.play(victory_hand(), 3)
        self.assertEqual(self.controller.toggle_count, 1)
        self.assertFalse(self.controller.content_visible)

        # Interrupted hold, then a full hold
        await self.play(middle_finger_hand(), 45)
        await self.play(relaxed_hand(), 1)
        self.assertEqual(self.countdowns[-1], 0)
        self.assertEqual(self.controller.stop_count, 0)

        await self.play(middle_finger_hand(), 95)
        self.assertEqual(self.controller.stop_count, 1)
        self.assertFalse(self.processor.capture_active)
        hold = self.countdowns[-95:]
        self.assertEqual(hold, sorted(hold, reverse=True))
        self.assertEqual(hold[0], 3)
        self.assertEqual(hold[-1], 0)

        # Stopped: nothing fires
        await self.play(thumbs_up_hand(), 5)
        self.assertEqual(self.controller.scroll_count, 14)

        # Resume and scroll again
        self.processor.resume()
        await self.play(thumbs_up_hand(), 2)
        self.assertEqual(self.controller.scroll_count, 16)
        self.assertEqual(self.labels[-1], GestureLabel.THUMBS_UP)


if __name__ == '__main__':
    unittest.main()
