# selfie_style/face_shape.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Callable, Dict, Iterable, Tuple
import logging
import math

from .errors import DegenerateMeasurementError
from .geometry import distance
from .landmarks import BoundingBox, Keypoint, KeypointMap, KeypointRole, EXPECTED_ROLES

logger = logging.getLogger(__name__)

# ---------------- Tunables ----------------
# Fallbacks when a landmark pair is missing (fractions of the bounding box)
EYE_DISTANCE_FALLBACK = 0.4
JAW_WIDTH_FALLBACK    = 0.85
CHIN_LENGTH_FALLBACK  = 0.2

FOREHEAD_FROM_EYES = 1.3
JAW_FROM_CHEEKS    = 0.9
CHIN_FROM_NOSE     = 1.5

# Cascade thresholds
OBLONG_MIN_RATIO   = 1.75
ROUND_MAX_RATIO    = 1.25
BALANCED_TOL       = 0.1
NARROW_FOREHEAD_FJ = 0.9
WIDE_FOREHEAD_FJ   = 1.1
SHORT_CHIN_RATIO   = 0.15
SQUARE_WH_MIN      = 0.65
SQUARE_WH_MAX      = 0.75
# ------------------------------------------


class FaceShape(str, Enum):
    OVAL = "Oval"
    ROUND = "Round"
    SQUARE = "Square"
    OBLONG = "Oblong"
    HEART = "Heart"
    TRIANGLE = "Triangle"
    DIAMOND = "Diamond"
    INVERTED_TRIANGLE = "InvertedTriangle"


@dataclass(frozen=True)
class Measurements:
    face_width: float
    face_height: float
    forehead_width: float
    jaw_width: float
    chin_length: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class MeasurementResult:
    measurements: Measurements
    confidence: float


@dataclass(frozen=True)
class ShapeRatios:
    ratio: float
    forehead_jaw_ratio: float
    width_height_ratio: float
    chin_ratio: float


@dataclass(frozen=True)
class ShapeRule:
    name: str
    predicate: Callable[[ShapeRatios], bool]
    shape: FaceShape


# ---------------- Measurement ----------------
def extract_measurements(box: BoundingBox, keypoints: Iterable[Keypoint]) -> MeasurementResult:
    """
    Derive the five face measurements from a detection.

    Missing landmark pairs fall back to fixed fractions of the bounding box,
    so this never fails; a zero-sized box yields zero measurements which
    classify_face_shape rejects.
    """
    kps = keypoints if isinstance(keypoints, KeypointMap) else KeypointMap.from_keypoints(keypoints)
    face_w = float(box.width)
    face_h = float(box.height)

    eyes = kps.pair(KeypointRole.LEFT_EYE, KeypointRole.RIGHT_EYE)
    if eyes:
        eye_distance = distance(*eyes)
    else:
        logger.debug("eyes missing, using %.2f * face width", EYE_DISTANCE_FALLBACK)
        eye_distance = face_w * EYE_DISTANCE_FALLBACK
    forehead_w = eye_distance * FOREHEAD_FROM_EYES

    cheeks = kps.pair(KeypointRole.LEFT_CHEEK, KeypointRole.RIGHT_CHEEK)
    if cheeks:
        jaw_w = distance(*cheeks) * JAW_FROM_CHEEKS
    else:
        logger.debug("cheeks missing, using %.2f * face width", JAW_WIDTH_FALLBACK)
        jaw_w = face_w * JAW_WIDTH_FALLBACK

    nose_mouth = kps.pair(KeypointRole.NOSE_TIP, KeypointRole.MOUTH)
    if nose_mouth:
        chin_len = distance(*nose_mouth) * CHIN_FROM_NOSE
    else:
        logger.debug("nose/mouth missing, using %.2f * face height", CHIN_LENGTH_FALLBACK)
        chin_len = face_h * CHIN_LENGTH_FALLBACK

    confidence = kps.present(EXPECTED_ROLES) / len(EXPECTED_ROLES)
    return MeasurementResult(
        Measurements(face_w, face_h, forehead_w, jaw_w, chin_len),
        confidence,
    )


# ---------------- Classification ----------------
def _check_measurements(m: Measurements) -> None:
    for field_name in ("face_width", "face_height", "jaw_width", "forehead_width"):
        value = getattr(m, field_name)
        if not math.isfinite(value) or value <= 0:
            raise DegenerateMeasurementError(f"{field_name} must be positive and finite, got {value!r}")


def shape_ratios(m: Measurements) -> ShapeRatios:
    _check_measurements(m)
    return ShapeRatios(
        ratio=m.face_height / m.face_width,
        forehead_jaw_ratio=m.forehead_width / m.jaw_width,
        width_height_ratio=m.face_width / m.face_height,
        chin_ratio=m.chin_length / m.face_height,
    )


def _balanced(r: ShapeRatios) -> bool:
    return abs(r.forehead_jaw_ratio - 1) < BALANCED_TOL


# Evaluated top to bottom; first match wins, Oval when nothing matches.
SHAPE_RULES: Tuple[ShapeRule, ...] = (
    ShapeRule("long", lambda r: r.ratio >= OBLONG_MIN_RATIO, FaceShape.OBLONG),
    ShapeRule("short-balanced", lambda r: r.ratio < ROUND_MAX_RATIO and _balanced(r), FaceShape.ROUND),
    ShapeRule("narrow-forehead-short-chin",
              lambda r: r.forehead_jaw_ratio < NARROW_FOREHEAD_FJ and r.chin_ratio < SHORT_CHIN_RATIO,
              FaceShape.TRIANGLE),
    ShapeRule("narrow-forehead", lambda r: r.forehead_jaw_ratio < NARROW_FOREHEAD_FJ, FaceShape.DIAMOND),
    ShapeRule("wide-forehead-short-chin",
              lambda r: r.forehead_jaw_ratio > WIDE_FOREHEAD_FJ and r.chin_ratio < SHORT_CHIN_RATIO,
              FaceShape.HEART),
    ShapeRule("wide-forehead", lambda r: r.forehead_jaw_ratio > WIDE_FOREHEAD_FJ, FaceShape.INVERTED_TRIANGLE),
    ShapeRule("angular-balanced",
              lambda r: SQUARE_WH_MIN < r.width_height_ratio < SQUARE_WH_MAX and _balanced(r),
              FaceShape.SQUARE),
)
DEFAULT_SHAPE = FaceShape.OVAL


def classify_face_shape(m: Measurements) -> FaceShape:
    ratios = shape_ratios(m)
    for rule in SHAPE_RULES:
        if rule.predicate(ratios):
            logger.debug("face shape rule %s matched: %s", rule.name, ratios)
            return rule.shape
    return DEFAULT_SHAPE


def describe_shape(face_shape: FaceShape) -> str:
    msgs = {
        FaceShape.OVAL: "Balanced proportions with gentle curves.",
        FaceShape.ROUND: "Width and length are similar with soft angles.",
        FaceShape.SQUARE: "Strong jawline with a forehead of similar width.",
        FaceShape.OBLONG: "Noticeably longer than it is wide.",
        FaceShape.HEART: "Wider forehead tapering to a short, narrow chin.",
        FaceShape.TRIANGLE: "Jaw is wider than the forehead with a short chin.",
        FaceShape.DIAMOND: "Narrow forehead with the width held through the jaw.",
        FaceShape.INVERTED_TRIANGLE: "Wide forehead narrowing toward a longer chin.",
    }
    return msgs.get(face_shape, "Face analyzed.")
