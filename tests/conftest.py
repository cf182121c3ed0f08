from __future__ import annotations

import cv2
import numpy as np
import pytest

from selfie_style.landmarks import BoundingBox, Face, Keypoint


class StubDetector:
    """Returns a fixed list of faces and records calls."""

    def __init__(self, faces=None):
        self.faces = faces or []
        self.calls = 0

    def detect(self, image):
        self.calls += 1
        return list(self.faces)


def make_face(width=200, height=200, **points) -> Face:
    return Face(
        box=BoundingBox(width=width, height=height),
        keypoints=[Keypoint(name, x, y) for name, (x, y) in points.items()],
    )


def solid_image(rgb=(210, 205, 200), w=100, h=100) -> np.ndarray:
    img = np.zeros((h, w, 3), dtype=np.uint8)
    img[:, :] = rgb
    return img


def png_bytes(rgb_image: np.ndarray) -> bytes:
    ok, buf = cv2.imencode(".png", cv2.cvtColor(rgb_image, cv2.COLOR_RGB2BGR))
    assert ok
    return buf.tobytes()


@pytest.fixture
def full_face() -> Face:
    return make_face(
        width=200, height=300,
        leftEye=(70, 120), rightEye=(130, 120),
        noseTip=(100, 170), mouth=(100, 210),
        leftCheek=(50, 180), rightCheek=(150, 180),
    )
