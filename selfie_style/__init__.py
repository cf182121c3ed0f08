"""Face-shape and skin-tone styling analysis."""

from .analyzer import AnalysisResult, FaceAnalyzer, analyze_image
from .errors import (
    AnalysisError,
    DegenerateMeasurementError,
    InvalidImageError,
    ModelUnavailableError,
    NoFaceDetectedError,
    SamplingError,
)
from .face_shape import FaceShape, Measurements, classify_face_shape, extract_measurements
from .landmarks import BoundingBox, Face, Keypoint, KeypointRole
from .skin_tone import RGBSample, SkinTone, classify_skin_tone, sample_center_color
from .suggester import recommend

__version__ = "1.0.0"

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "BoundingBox",
    "DegenerateMeasurementError",
    "Face",
    "FaceAnalyzer",
    "FaceShape",
    "InvalidImageError",
    "Keypoint",
    "KeypointRole",
    "Measurements",
    "ModelUnavailableError",
    "NoFaceDetectedError",
    "RGBSample",
    "SamplingError",
    "SkinTone",
    "analyze_image",
    "classify_face_shape",
    "classify_skin_tone",
    "extract_measurements",
    "recommend",
    "sample_center_color",
]
