"""
Synthetic 21-point hand skeletons for tests.

Upright hand in pixel space: wrist at y=300, knuckles (MCP) at y=200,
PIP joints at y=170. Extended tips sit 15 px past their PIP joint,
curled tips 10 px short of it.
"""
from typing import Dict, Iterable, List, Optional, Tuple

INDEX, MIDDLE, RING, PINKY = 1, 2, 3, 4

WRIST = (100.0, 300.0)
MCP_Y = 200.0
PIP_Y = 170.0
EXTENDED_TIP_Y = 155.0
CURLED_TIP_Y = 180.0
FINGER_X = {INDEX: 75.0, MIDDLE: 100.0, RING: 120.0, PINKY: 140.0}
FINGER_BASE = {INDEX: 5, MIDDLE: 9, RING: 13, PINKY: 17}

NEUTRAL_THUMB = (60.0, 195.0)
THUMB_UP = (60.0, MCP_Y - 15)
THUMB_DOWN = (60.0, MCP_Y + 15)


def make_hand(extended: Iterable[int] = (), thumb_tip: Tuple[float, float] = NEUTRAL_THUMB,
              tip_x: Optional[Dict[int, float]] = None,
              tip_y: Optional[Dict[int, float]] = None) -> List[Tuple[float, float]]:
    """Build an upright skeleton; fingers not listed in `extended` are curled."""
    extended = set(extended)
    tip_x = tip_x or {}
    tip_y = tip_y or {}

    points = [(0.0, 0.0)] * 21
    points[0] = WRIST
    points[1] = (75.0, 270.0)
    points[2] = (65.0, 240.0)
    points[3] = (60.0, 215.0)
    points[4] = thumb_tip

    for finger, x in FINGER_X.items():
        base = FINGER_BASE[finger]
        is_ext = finger in extended
        points[base] = (x, MCP_Y)
        points[base + 1] = (x, PIP_Y)
        points[base + 2] = (x, 160.0 if is_ext else 175.0)
        default_tip = EXTENDED_TIP_Y if is_ext else CURLED_TIP_Y
        points[base + 3] = (tip_x.get(finger, x), tip_y.get(finger, default_tip))

    return points


def mirror_vertically(points: List[Tuple[float, float]], axis: float = 400.0) -> List[Tuple[float, float]]:
    """Flip a skeleton upside down around y = axis / 2."""
    return [(x, axis - y) for x, y in points]


def thumbs_up_hand():
    return make_hand(thumb_tip=THUMB_UP)


def thumbs_down_hand():
    return make_hand(thumb_tip=THUMB_DOWN)


def middle_finger_hand():
    return make_hand(extended=[MIDDLE])


def victory_hand():
    return make_hand(extended=[INDEX, MIDDLE])


def relaxed_hand():
    return make_hand()
