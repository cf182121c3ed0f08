# selfie_style/analyzer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol
import logging

import numpy as np

from .errors import AnalysisError, NoFaceDetectedError
from .face_shape import FaceShape, Measurements, classify_face_shape, extract_measurements
from .landmarks import Face
from .skin_tone import SkinTone, classify_skin_tone, sample_center_color
from .suggester import recommend
from .detect import FaceMeshDetector, ImagePixels

logger = logging.getLogger(__name__)


class Detector(Protocol):
    def detect(self, image: np.ndarray) -> List[Face]:
        ...


@dataclass
class AnalysisResult:
    face_shape: FaceShape
    skin_tone: SkinTone
    recommendations: List[str]
    measurements: Measurements
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "face_shape": self.face_shape.value,
            "skin_tone": self.skin_tone.value,
            "recommendations": list(self.recommendations),
            "measurements": self.measurements.to_dict(),
            "confidence": self.confidence,
        }


class FaceAnalyzer:
    """Runs detection, measurement, classification and recommendation for one photo."""

    def __init__(self, detector: Detector):
        self.detector = detector

    def analyze(self, image: np.ndarray) -> AnalysisResult:
        try:
            faces = self.detector.detect(image)
            if not faces:
                raise NoFaceDetectedError("No face detected in the image.")
            if len(faces) > 1:
                logger.debug("%d faces detected, using the first", len(faces))
            face = faces[0]

            measured = extract_measurements(face.box, face.keypoints)
            face_shape = classify_face_shape(measured.measurements)
            skin_tone = classify_skin_tone(sample_center_color(ImagePixels(image)))
        except AnalysisError as e:
            logger.warning("analysis failed: %s (%s)", e.kind, e.message)
            raise

        result = AnalysisResult(
            face_shape=face_shape,
            skin_tone=skin_tone,
            recommendations=recommend(face_shape, skin_tone),
            measurements=measured.measurements,
            confidence=measured.confidence,
        )
        logger.info("analyzed face: shape=%s tone=%s confidence=%.2f",
                    face_shape.value, skin_tone.value, measured.confidence)
        return result


def analyze_image(image: np.ndarray, detector: Optional[Detector] = None) -> AnalysisResult:
    """
    Analyze one RGB image. Without a detector a fresh FaceMeshDetector is
    built for this call and closed afterward.
    """
    if detector is not None:
        return FaceAnalyzer(detector).analyze(image)
    with FaceMeshDetector() as fm:
        return FaceAnalyzer(fm).analyze(image)
