"""
GestureFlow

Classifies hand landmarks into discrete gestures (thumbs up/down, victory,
middle finger) and turns them into scroll, toggle and hold-to-stop commands.
"""

__version__ = "0.1.0"

from .types import (
    GestureLabel,
    Keypoint,
    ScrollCommand,
    ToggleContentCommand,
    StopCaptureCommand,
    SessionState,
    FrameResult,
    ControllerProto,
    GESTURE_FEEDBACK,
)
from .config import load_config, Cfg
from .classifier import classify
from .gestures import GestureSession, GestureProcessor
from .controller_mock import MockController

__all__ = [
    "GestureLabel",
    "Keypoint",
    "ScrollCommand",
    "ToggleContentCommand",
    "StopCaptureCommand",
    "SessionState",
    "FrameResult",
    "ControllerProto",
    "GESTURE_FEEDBACK",
    "load_config",
    "Cfg",
    "classify",
    "GestureSession",
    "GestureProcessor",
    "MockController",
]
