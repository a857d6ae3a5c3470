"""
Type definitions for the gesture control system.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Union, runtime_checkable


class GestureLabel(str, Enum):
    """Discrete gestures the frame classifier can report."""
    THUMBS_UP = "thumbs_up"
    THUMBS_DOWN = "thumbs_down"
    MIDDLE_FINGER = "middle_finger"
    VICTORY = "victory"
    NONE = "none"


# Status text shown to the user for each gesture
GESTURE_FEEDBACK = {
    GestureLabel.THUMBS_UP: "Scrolling Up",
    GestureLabel.THUMBS_DOWN: "Scrolling Down",
    GestureLabel.MIDDLE_FINGER: "Stopping Camera",
    GestureLabel.VICTORY: "Toggling Content",
    GestureLabel.NONE: "Waiting for gesture...",
}


@dataclass(frozen=True)
class Keypoint:
    """One hand landmark in frame pixel coordinates (y grows downward)."""
    x: float
    y: float
    z: Optional[float] = None
    name: Optional[str] = None


@dataclass
class ScrollCommand:
    """Command to scroll by a pixel delta."""
    dy_px: int


@dataclass
class ToggleContentCommand:
    """Command to show or hide the content area."""


@dataclass
class StopCaptureCommand:
    """Command to stop the camera after a completed hold."""


Command = Union[ScrollCommand, ToggleContentCommand, StopCaptureCommand]


@dataclass
class SessionState:
    """Mutable state of one gesture-control session."""
    last_label: GestureLabel = GestureLabel.NONE
    last_toggle_time: Optional[float] = None
    hold_start_time: Optional[float] = None
    countdown: int = 0
    capture_active: bool = True


@dataclass
class FrameResult:
    """Outcome of feeding one frame's label through the session."""
    label: GestureLabel
    countdown: int
    commands: List[Command] = field(default_factory=list)
    label_changed: bool = False
    countdown_changed: bool = False

    @property
    def feedback(self) -> str:
        return GESTURE_FEEDBACK[self.label]


@runtime_checkable
class ControllerProto(Protocol):
    """Abstract protocol for controllers that execute gesture commands."""

    async def scroll(self, dy_px: int) -> None:
        """Execute a scroll command with the given pixel delta."""
        ...

    async def toggle_content(self) -> None:
        """Show or hide the content area."""
        ...

    async def stop_capture(self) -> None:
        """Stop the camera feed."""
        ...
