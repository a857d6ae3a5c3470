"""
Per-frame hand gesture classification from 21 hand landmarks.

Coordinates are frame pixels with y growing downward. Every vertical
comparison is mirrored when the hand is upside down (wrist above the
middle knuckle).
"""
import logging
from typing import Any, List, Optional, Sequence

from .config import ClassifierConfig
from .types import GestureLabel, Keypoint

logger = logging.getLogger(__name__)

NUM_LANDMARKS = 21

WRIST = 0
# Thumb, index, middle, ring, pinky
TIPS = (4, 8, 12, 16, 20)
PIPS = (3, 6, 10, 14, 18)
MCPS = (2, 5, 9, 13, 17)

THUMB, INDEX, MIDDLE, RING, PINKY = range(5)

_DEFAULT_CFG = ClassifierConfig()


def to_keypoint(point: Any) -> Keypoint:
    """
    Coerce a landmark into a Keypoint.

    Accepts Keypoint instances, objects with x/y attributes (e.g. MediaPipe
    landmarks), mappings with 'x'/'y' keys and (x, y[, z]) sequences.
    """
    if isinstance(point, Keypoint):
        return Keypoint(
            x=float(point.x),
            y=float(point.y),
            z=float(point.z) if point.z is not None else None,
            name=point.name
        )
    if isinstance(point, dict):
        return Keypoint(
            x=float(point['x']),
            y=float(point['y']),
            z=float(point['z']) if point.get('z') is not None else None,
            name=point.get('name')
        )
    if hasattr(point, 'x') and hasattr(point, 'y'):
        z = getattr(point, 'z', None)
        return Keypoint(x=float(point.x), y=float(point.y), z=float(z) if z is not None else None)
    x, y, *rest = point
    return Keypoint(x=float(x), y=float(y), z=float(rest[0]) if rest else None)


def to_keypoints(points: Sequence[Any]) -> List[Keypoint]:
    """Coerce a whole skeleton. Raises on malformed points."""
    return [to_keypoint(p) for p in points]


def is_hand_inverted(keypoints: Sequence[Keypoint]) -> bool:
    """True when the wrist sits above the middle-finger knuckle."""
    return keypoints[WRIST].y < keypoints[MCPS[MIDDLE]].y


def is_extended(keypoints: Sequence[Keypoint], finger: int, inverted: bool,
                margin: float = _DEFAULT_CFG.extension_margin_px) -> bool:
    """Strict check: tip past the PIP joint by more than `margin`, away from the palm."""
    tip = keypoints[TIPS[finger]].y
    pip = keypoints[PIPS[finger]].y
    if inverted:
        return tip > pip + margin
    return tip < pip - margin


def is_curled(keypoints: Sequence[Keypoint], finger: int, inverted: bool) -> bool:
    """Loose check: tip anywhere past the PIP joint toward the palm."""
    tip = keypoints[TIPS[finger]].y
    pip = keypoints[PIPS[finger]].y
    if inverted:
        return tip < pip
    return tip > pip


def classify(skeleton: Optional[Sequence[Any]], cfg: Optional[ClassifierConfig] = None) -> GestureLabel:
    """
    Classify one hand skeleton into a gesture label.

    Never raises: missing, short or malformed input yields GestureLabel.NONE.

    Args:
        skeleton: 21 landmarks in topology order (wrist first)
        cfg: Classifier thresholds, defaults used when None

    Returns:
        The detected gesture label
    """
    if skeleton is None:
        return GestureLabel.NONE

    try:
        if len(skeleton) < NUM_LANDMARKS:
            return GestureLabel.NONE
        keypoints = to_keypoints(list(skeleton)[:NUM_LANDMARKS])
        return _classify_keypoints(keypoints, cfg or _DEFAULT_CFG)
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        logger.debug(f"Malformed skeleton, treating as no gesture: {e}")
        return GestureLabel.NONE


def _classify_keypoints(kp: List[Keypoint], cfg: ClassifierConfig) -> GestureLabel:
    inverted = is_hand_inverted(kp)

    index_curled = is_curled(kp, INDEX, inverted)
    middle_curled = is_curled(kp, MIDDLE, inverted)
    ring_curled = is_curled(kp, RING, inverted)
    pinky_curled = is_curled(kp, PINKY, inverted)

    index_extended = is_extended(kp, INDEX, inverted, cfg.extension_margin_px)
    middle_extended = is_extended(kp, MIDDLE, inverted, cfg.extension_margin_px)

    thumb_tip = kp[TIPS[THUMB]]
    index_mcp = kp[MCPS[INDEX]]
    pinky_mcp = kp[MCPS[PINKY]]
    margin = cfg.thumb_margin_px

    # Fist: thumb direction decides up or down
    if index_curled and middle_curled and ring_curled and pinky_curled:
        if not inverted and thumb_tip.y < index_mcp.y - margin:
            return GestureLabel.THUMBS_UP
        if not inverted and thumb_tip.y > pinky_mcp.y + margin:
            return GestureLabel.THUMBS_DOWN
        # No inverted thumbs-up case
        if inverted and thumb_tip.y < pinky_mcp.y - margin:
            return GestureLabel.THUMBS_DOWN

    if middle_extended and index_curled and ring_curled and pinky_curled:
        return GestureLabel.MIDDLE_FINGER

    if index_extended and middle_extended and ring_curled and pinky_curled:
        separation = abs(kp[TIPS[INDEX]].x - kp[TIPS[MIDDLE]].x)
        if separation > cfg.victory_min_separation_px:
            return GestureLabel.VICTORY

    return GestureLabel.NONE
