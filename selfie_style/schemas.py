# selfie_style/schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional

from .face_shape import FaceShape
from .skin_tone import SkinTone


class Suggestion(BaseModel):
    id: str
    category: str
    text: str


class MeasurementsOut(BaseModel):
    face_width: float
    face_height: float
    forehead_width: float
    jaw_width: float
    chin_length: float


class AnalyzeResponse(BaseModel):
    face_shape: FaceShape
    skin_tone: SkinTone
    message: str
    recommendations: List[str]
    measurements: MeasurementsOut
    confidence: float = Field(..., ge=0.0, le=1.0)


class RecommendationsRequest(BaseModel):
    face_shape: FaceShape = Field(..., description="Detected face shape.")
    skin_tone: SkinTone = Field(..., description="Detected skin tone.")


class RecommendationsResponse(BaseModel):
    face_shape: FaceShape
    skin_tone: SkinTone
    suggestions: List[Suggestion]


class ErrorDetail(BaseModel):
    error: str
    message: str
    hint: Optional[str] = None
