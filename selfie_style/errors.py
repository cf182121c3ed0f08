# selfie_style/errors.py
from typing import Optional


class AnalysisError(Exception):
    """Base for every failure the analysis pipeline reports to its caller."""

    kind = "analysis_error"
    status_code = 500
    default_hint: Optional[str] = None

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint if hint is not None else self.default_hint

    def to_detail(self) -> dict:
        return {"error": self.kind, "message": self.message, "hint": self.hint}


class ModelUnavailableError(AnalysisError):
    kind = "model_unavailable"
    status_code = 503
    default_hint = "The face model is still loading. Try again shortly."


class NoFaceDetectedError(AnalysisError):
    kind = "no_face_detected"
    status_code = 422
    default_hint = "Please try again with a clearer, well-lit, front-facing photo."


class SamplingError(AnalysisError):
    kind = "sampling_error"
    status_code = 400
    default_hint = "Use a photo of at least 50x50 pixels."


class InvalidImageError(SamplingError):
    kind = "invalid_image"
    default_hint = "Upload a JPG or PNG photo."


class DegenerateMeasurementError(AnalysisError):
    kind = "degenerate_measurement"
    status_code = 422
    default_hint = "The detected face is too small to measure. Move closer to the camera."
