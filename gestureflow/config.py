"""
Configuration management for the gesture control system.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from .types import GestureLabel


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class ClassifierConfig:
    """Geometric thresholds for the frame classifier, in pixels."""
    extension_margin_px: float = 10.0
    thumb_margin_px: float = 10.0
    victory_min_separation_px: float = 20.0


@dataclass
class SessionConfig:
    """Gesture session timing and action settings."""
    confirm_label: GestureLabel = GestureLabel.MIDDLE_FINGER
    toggle_label: GestureLabel = GestureLabel.VICTORY
    hold_duration_ms: int = 3000
    toggle_debounce_ms: int = 1000
    scroll_step_px: int = 15


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    show_countdown: bool
    window_name: str


@dataclass
class ServerConfig:
    """Status server settings."""
    host: str
    port: int


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    classifier: ClassifierConfig
    session: SessionConfig
    display: DisplayConfig
    server: ServerConfig
    logging: LoggingConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses the packaged config.default.yaml

    Returns:
        Configuration object with all settings
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return _dict_to_config(data)


def _parse_label(value: str, key: str) -> GestureLabel:
    try:
        label = GestureLabel(value)
    except ValueError:
        raise ValueError(f"Invalid gesture label for session.{key}: {value!r}") from None
    if label is GestureLabel.NONE:
        raise ValueError(f"session.{key} cannot be 'none'")
    return label


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        model_complexity=mp_data['model_complexity'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    classifier_data = data['classifier']
    classifier = ClassifierConfig(
        extension_margin_px=float(classifier_data['extension_margin_px']),
        thumb_margin_px=float(classifier_data['thumb_margin_px']),
        victory_min_separation_px=float(classifier_data['victory_min_separation_px'])
    )

    session_data = data['session']
    session = SessionConfig(
        confirm_label=_parse_label(session_data['confirm_label'], 'confirm_label'),
        toggle_label=_parse_label(session_data['toggle_label'], 'toggle_label'),
        hold_duration_ms=int(session_data['hold_duration_ms']),
        toggle_debounce_ms=int(session_data['toggle_debounce_ms']),
        scroll_step_px=int(session_data['scroll_step_px'])
    )
    if session.hold_duration_ms <= 0:
        raise ValueError("session.hold_duration_ms must be positive")
    if session.toggle_debounce_ms < 0:
        raise ValueError("session.toggle_debounce_ms cannot be negative")
    if session.confirm_label == session.toggle_label:
        raise ValueError("session.confirm_label and session.toggle_label must differ")

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        show_countdown=display_data['show_countdown'],
        window_name=display_data['window_name']
    )

    server_data = data['server']
    server = ServerConfig(
        host=server_data['host'],
        port=int(server_data['port'])
    )

    logging_data = data['logging']
    logging_cfg = LoggingConfig(level=str(logging_data['level']).upper())

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        classifier=classifier,
        session=session,
        display=display,
        server=server,
        logging=logging_cfg
    )
