# selfie_style/main.py
import logging
from typing import Any, Dict, Iterator

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware

import uvicorn

from . import __version__, config
from .analyzer import FaceAnalyzer
from .detect import FaceMeshDetector, decode_image
from .errors import AnalysisError
from .face_shape import describe_shape
from .schemas import (
    AnalyzeResponse,
    MeasurementsOut,
    RecommendationsRequest,
    RecommendationsResponse,
)
from .suggester import suggest_for_face

logger = logging.getLogger(__name__)

app = FastAPI(title="Selfie Style API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_analyzer() -> Iterator[FaceAnalyzer]:
    """Fresh detector per request; the model loads on first use."""
    detector = FaceMeshDetector()
    try:
        yield FaceAnalyzer(detector)
    finally:
        detector.close()


def _read_upload(file: UploadFile) -> bytes:
    data = file.file.read(config.MAX_UPLOAD_BYTES + 1)
    file.file.close()
    if len(data) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"Image larger than {config.MAX_UPLOAD_BYTES} bytes.")
    return data


@app.get("/health")
def health() -> Dict[str, Any]:
    return {"ok": True, "version": app.version}


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(
    file: UploadFile = File(..., description="Front-facing photo (JPG, PNG)"),
    analyzer: FaceAnalyzer = Depends(get_analyzer),
) -> AnalyzeResponse:
    data = _read_upload(file)
    try:
        image = decode_image(data)
        result = analyzer.analyze(image)
    except AnalysisError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except Exception as e:
        logger.exception("analyzer crashed on %s", file.filename)
        raise HTTPException(status_code=500, detail=f"Analyzer error: {e}")

    return AnalyzeResponse(
        face_shape=result.face_shape,
        skin_tone=result.skin_tone,
        message=describe_shape(result.face_shape),
        recommendations=result.recommendations,
        measurements=MeasurementsOut(**result.measurements.to_dict()),
        confidence=result.confidence,
    )


@app.post("/recommendations", response_model=RecommendationsResponse)
def recommendations(req: RecommendationsRequest) -> RecommendationsResponse:
    return RecommendationsResponse(
        face_shape=req.face_shape,
        skin_tone=req.skin_tone,
        suggestions=suggest_for_face(req.face_shape, req.skin_tone),
    )


if __name__ == "__main__":
    config.configure_logging()
    uvicorn.run("selfie_style.main:app", host=config.HOST, port=config.PORT,
                log_level=config.LOG_LEVEL, reload=False)
