"""
Gesture session classes that turn per-frame labels into commands.
"""
import logging
import math
from typing import Any, Optional, Sequence

from .classifier import classify
from .config import Cfg, SessionConfig
from .types import (
    ControllerProto,
    FrameResult,
    GestureLabel,
    ScrollCommand,
    SessionState,
    StopCaptureCommand,
    ToggleContentCommand,
)

logger = logging.getLogger(__name__)


class GestureSession:
    """
    Debounced state machine over the per-frame gesture label stream.

    Features:
    - Hold-to-confirm countdown on the confirm label, cancelled by any other label
    - Continuous scroll while thumbs up/down is held
    - Edge-triggered toggle with a debounce window
    - Inert after the stop command until reset() is called
    """

    def __init__(self, cfg: SessionConfig):
        """Initialize session with timing configuration."""
        self.cfg = cfg
        self.state = SessionState()
        self.hold_duration_s = cfg.hold_duration_ms / 1000.0
        self.toggle_debounce_s = cfg.toggle_debounce_ms / 1000.0

    def update(self, label: GestureLabel, t_now: float) -> FrameResult:
        """
        Advance the session by one frame.

        Args:
            label: Classifier output for this frame
            t_now: Current timestamp in seconds

        Returns:
            FrameResult with display label, countdown and fired commands
        """
        label = GestureLabel(label)
        state = self.state
        if not state.capture_active:
            return FrameResult(label=state.last_label, countdown=0)

        result =FrameResult(label=state.last_label, countdown=state.countdown)
        prev_countdown = state.countdown

        self._update_hold(label, t_now, result)
        if label == GestureLabel.THUMBS_UP:
            result.commands.append(ScrollCommand(dy_px=-self.cfg.scroll_step_px))
        elif label == GestureLabel.THUMBS_DOWN:
            result.commands.append(ScrollCommand(dy_px=self.cfg.scroll_step_px))
        self._update_label(label, t_now, result)

        result.countdown = state.countdown
        result.countdown_changed = state.countdown != prev_countdown
        return result

    def _update_hold(self, label: GestureLabel, t_now: float, result: FrameResult) -> None:
        state = self.state
        if label != self.cfg.confirm_label:
            if state.hold_start_time is not None:
                logger.info("Hold cancelled")
                state.hold_start_time = None
                state.countdown = 0
            return

        if state.hold_start_time is None:
            state.hold_start_time = t_now

        elapsed = t_now - state.hold_start_time
        if elapsed >= self.hold_duration_s:
            logger.info(f"Hold completed after {elapsed:.2f}s, stopping capture")
            result.commands.append(StopCaptureCommand())
            state.hold_start_time = None
            state.countdown = 0
            state.capture_active = False
            return

        remaining = math.ceil(self.hold_duration_s - elapsed)
        if remaining != state.countdown:
            logger.info(f"Hold countdown: {remaining}")
            state.countdown = remaining

    def _update_label(self, label: GestureLabel, t_now: float, result: FrameResult) -> None:
        state = self.state
        if label == state.last_label:
            return

        logger.info(f"Gesture changed: {state.last_label.value} -> {label.value}")
        result.label = label
        result.label_changed = True
        state.last_label = label

        if label != self.cfg.toggle_label:
            return
        if state.last_toggle_time is None or t_now - state.last_toggle_time > self.toggle_debounce_s:
            result.commands.append(ToggleContentCommand())
            state.last_toggle_time = t_now
        else:
            logger.debug("Toggle suppressed by debounce")

    def reset(self) -> None:
        """Start a fresh session, keeping the toggle debounce timestamp."""
        state = self.state
        state.last_label = GestureLabel.NONE
        state.hold_start_time = None
        state.countdown = 0
        state.capture_active = True
        logger.info("Gesture session reset")


class GestureProcessor:
    """
    Main gesture processor that couples the classifier with the session.
    """

    def __init__(self, cfg: Cfg):
        """Initialize gesture processor with configuration."""
        self.cfg = cfg
        self.session = GestureSession(cfg.session)
        self.last_result = FrameResult(label=GestureLabel.NONE, countdown=0)

    @property
    def capture_active(self) -> bool:
        return self.session.state.capture_active

    def process_frame(self, hands: Optional[Sequence[Sequence[Any]]], t_now: float) -> FrameResult:
        """
        Process one frame of detected hands.

        Args:
            hands: Detected hands, each a 21-point skeleton; only the first is used
            t_now: Current timestamp in seconds

        Returns:
            FrameResult for this frame
        """
        label = GestureLabel.NONE
        if hands:
            label = classify(hands[0], self.cfg.classifier)

        self.last_result = self.session.update(label, t_now)
        return self.last_result

    def resume(self) -> None:
        """Resume after a stop: reset the session and clear the displayed state."""
        self.session.reset()
        self.last_result = FrameResult(label=GestureLabel.NONE, countdown=0, label_changed=True)

    async def execute(self, result: FrameResult, controller: ControllerProto) -> None:
        """Send the commands of a frame to the controller, in firing order."""
        for command in result.commands:
            if isinstance(command, ScrollCommand):
                await controller.scroll(command.dy_px)
            elif isinstance(command, ToggleContentCommand):
                await controller.toggle_content()
            elif isinstance(command, StopCaptureCommand):
                await controller.stop_capture()
