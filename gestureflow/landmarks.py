"""
Hand landmark detection using MediaPipe, and skeleton drawing.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import List, Sequence

from .types import Keypoint

# Finger chains from the wrist, as (start, end) landmark indices
HAND_CONNECTIONS = [
    (0, 1), (1, 2), (2, 3), (3, 4),
    (0, 5), (5, 6), (6, 7), (7, 8),
    (0, 9), (9, 10), (10, 11), (11, 12),
    (0, 13), (13, 14), (14, 15), (15, 16),
    (0, 17), (17, 18), (18, 19), (19, 20),
]

BONE_COLOR = (246, 92, 139)   # BGR
WRIST_COLOR = (68, 68, 239)
JOINT_COLOR = (128, 222, 74)


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, model_complexity: int = 1,
                 min_detection_conf: float = 0.5, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            model_complexity: MediaPipe model complexity (0 or 1)
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )
        self.landmark_names = [lm.name.lower() for lm in self.mp_hands.HandLandmark]

    def process(self, frame_bgr: np.ndarray) -> List[List[Keypoint]]:
        """
        Process a frame and return hand skeletons.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            One list of 21 Keypoints in pixel coordinates per detected hand
        """
        height, width = frame_bgr.shape[:2]
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        hands = []
        for hand_landmarks in results.multi_hand_landmarks or []:
            hands.append([
                Keypoint(x=lm.x * width, y=lm.y * height, z=lm.z * width, name=name)
                for lm, name in zip(hand_landmarks.landmark, self.landmark_names)
            ])
        return hands

    def close(self) -> None:
        self.hands.close()


def draw_hand(frame: np.ndarray, keypoints: Sequence[Keypoint]) -> np.ndarray:
    """
    Draw the hand skeleton on the frame.

    Args:
        frame: Input frame
        keypoints: 21 Keypoints in pixel coordinates

    Returns:
        Frame with the skeleton drawn
    """
    if len(keypoints) < len(HAND_CONNECTIONS) + 1:
        return frame

    points = [(int(kp.x), int(kp.y)) for kp in keypoints]
    for start, end in HAND_CONNECTIONS:
        cv2.line(frame, points[start], points[end], BONE_COLOR, 4, cv2.LINE_AA)

    for i, point in enumerate(points):
        cv2.circle(frame, point, 6, WRIST_COLOR if i == 0 else JOINT_COLOR, -1)

    return frame
