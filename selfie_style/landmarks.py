# selfie_style/landmarks.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class KeypointRole(str, Enum):
    LEFT_EYE = "leftEye"
    RIGHT_EYE = "rightEye"
    NOSE_TIP = "noseTip"
    MOUTH = "mouth"
    LEFT_CHEEK = "leftCheek"
    RIGHT_CHEEK = "rightCheek"
    LEFT_EAR = "leftEar"
    RIGHT_EAR = "rightEar"
    CHIN = "chin"


# Roles that count toward detection confidence
EXPECTED_ROLES: Tuple[KeypointRole, ...] = (
    KeypointRole.LEFT_EYE,
    KeypointRole.RIGHT_EYE,
    KeypointRole.NOSE_TIP,
    KeypointRole.MOUTH,
    KeypointRole.LEFT_CHEEK,
    KeypointRole.RIGHT_CHEEK,
)


@dataclass(frozen=True)
class Keypoint:
    name: str
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    width: float
    height: float


@dataclass
class Face:
    """One detection as returned by a detector collaborator."""
    box: BoundingBox
    keypoints: List[Keypoint] = field(default_factory=list)


class KeypointMap:
    """
    Keypoints indexed by role. A role with no landmark maps to None, so a
    missing point is an explicit state instead of a failed search.
    """

    def __init__(self, points: Optional[Dict[KeypointRole, Keypoint]] = None):
        self._points: Dict[KeypointRole, Optional[Keypoint]] = {role: None for role in KeypointRole}
        if points:
            self._points.update(points)

    @classmethod
    def from_keypoints(cls, keypoints: Iterable[Keypoint]) -> "KeypointMap":
        points: Dict[KeypointRole, Keypoint] = {}
        for kp in keypoints:
            try:
                role = KeypointRole(kp.name)
            except ValueError:
                continue
            # first occurrence wins
            points.setdefault(role, kp)
        return cls(points)

    def get(self, role: KeypointRole) -> Optional[Keypoint]:
        return self._points[role]

    def has(self, role: KeypointRole) -> bool:
        return self._points[role] is not None

    def pair(self, a: KeypointRole, b: KeypointRole) -> Optional[Tuple[Keypoint, Keypoint]]:
        pa, pb = self._points[a], self._points[b]
        if pa is None or pb is None:
            return None
        return pa, pb

    def present(self, roles: Iterable[KeypointRole]) -> int:
        return sum(1 for role in roles if self.has(role))
