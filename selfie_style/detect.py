# selfie_style/detect.py
from __future__ import annotations

from typing import List, Optional
import logging

import cv2
import numpy as np

from . import config
from .errors import InvalidImageError, ModelUnavailableError
from .landmarks import BoundingBox, Face, Keypoint, KeypointRole

# MediaPipe
try:
    import mediapipe as mp
except ImportError:
    mp = None

logger = logging.getLogger(__name__)

# FaceMesh landmark indices (468-point mesh) for each keypoint role
MESH_KEYPOINTS = {
    KeypointRole.LEFT_EYE:    33,
    KeypointRole.RIGHT_EYE:   263,
    KeypointRole.NOSE_TIP:    1,
    KeypointRole.MOUTH:       13,
    KeypointRole.LEFT_CHEEK:  234,
    KeypointRole.RIGHT_CHEEK: 454,
    KeypointRole.LEFT_EAR:    127,
    KeypointRole.RIGHT_EAR:   356,
    KeypointRole.CHIN:        152,
}


def decode_image(data: bytes) -> np.ndarray:
    """Decode uploaded bytes to an RGB array."""
    if not data:
        raise InvalidImageError("No image received.")
    arr = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(arr, cv2.IMREAD_COLOR)
    if img is None:
        raise InvalidImageError("Could not decode image.")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


class ImagePixels:
    """Read-only pixel access over an RGB(A) array of shape (h, w, C)."""

    def __init__(self, image: Optional[np.ndarray]):
        self._image = image
        if image is None or image.ndim != 3:
            self.width, self.height = 0, 0
        else:
            self.height, self.width = image.shape[:2]

    def sample_pixels(self, x: int, y: int, w: int, h: int) -> Optional[np.ndarray]:
        if self._image is None:
            return None
        return self._image[y:y + h, x:x + w]


def face_from_landmarks(points, img_w: int, img_h: int) -> Face:
    """Build a Face from normalized (x, y) mesh landmarks."""
    xs = [p[0] * img_w for p in points]
    ys = [p[1] * img_h for p in points]
    box = BoundingBox(width=max(xs) - min(xs), height=max(ys) - min(ys))
    keypoints = [
        Keypoint(role.value, xs[idx], ys[idx])
        for role, idx in MESH_KEYPOINTS.items()
        if idx < len(points)
    ]
    return Face(box=box, keypoints=keypoints)


class FaceMeshDetector:
    """Detector collaborator backed by MediaPipe FaceMesh."""

    def __init__(self, min_detection_confidence: float = config.MIN_DETECTION_CONFIDENCE):
        self.min_detection_confidence = min_detection_confidence
        self._mesh = None

    @property
    def ready(self) -> bool:
        return self._mesh is not None

    def initialize(self) -> None:
        if self._mesh is not None:
            return
        if mp is None:
            raise ModelUnavailableError("mediapipe is not available.")
        try:
            self._mesh = mp.solutions.face_mesh.FaceMesh(
                static_image_mode=True,
                max_num_faces=1,
                refine_landmarks=True,
                min_detection_confidence=self.min_detection_confidence,
            )
        except (AttributeError, RuntimeError) as e:
            raise ModelUnavailableError(f"Could not load FaceMesh: {e}") from e
        logger.info("FaceMesh initialized (min_detection_confidence=%.2f)", self.min_detection_confidence)

    def detect(self, image_rgb: np.ndarray) -> List[Face]:
        self.initialize()
        res = self._mesh.process(image_rgb)
        if not res.multi_face_landmarks:
            return []
        img_h, img_w = image_rgb.shape[:2]
        return [
            face_from_landmarks([(p.x, p.y) for p in lms.landmark], img_w, img_h)
            for lms in res.multi_face_landmarks
        ]

    def close(self) -> None:
        if self._mesh is not None:
            self._mesh.close()
            self._mesh = None

    def __enter__(self) -> "FaceMeshDetector":
        self.initialize()
        return self

    def __exit__(self, *exc) -> None:
        self.close()
