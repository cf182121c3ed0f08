# selfie_style/suggester.py
from typing import List, Dict

from .face_shape import FaceShape
from .schemas import Suggestion
from .skin_tone import SkinTone

SHAPE_RECOMMENDATIONS: Dict[FaceShape, List[str]] = {
    FaceShape.OVAL: [
        "Your balanced face shape suits most hairstyles",
        "Try soft layers to maintain face-length proportion",
    ],
    FaceShape.ROUND: [
        "Long, layered cuts will help elongate your face",
        "Side-swept bangs create angles and definition",
    ],
    FaceShape.SQUARE: [
        "Soft layers and waves will soften angular features",
        "Side-parted styles complement your strong jawline",
    ],
    FaceShape.OBLONG: [
        "Add width with side-swept bangs and waves",
        "Avoid styles that add height at the crown",
    ],
    FaceShape.HEART: [
        "Side-swept bangs balance your features",
        "Medium-length cuts work well with your face shape",
    ],
    FaceShape.TRIANGLE: [
        "Add volume at the crown to balance jaw width",
        "Layered cuts that are fuller at the top",
    ],
    FaceShape.DIAMOND: [
        "Chin-length bobs add width at the jawline",
        "Fringes soften a narrow forehead",
        "Tuck-behind-the-ear styles show off your cheekbones",
    ],
    FaceShape.INVERTED_TRIANGLE: [
        "Volume below the ears balances a wider forehead",
        "Long side bangs narrow the upper face",
    ],
}

WARM_RECOMMENDATIONS: List[str] = [
    "Gold jewelry will complement your warm undertones",
    "Earth-toned and peachy makeup colors will enhance your complexion",
]

COOL_RECOMMENDATIONS: List[str] = [
    "Silver jewelry will complement your cool undertones",
    "Rose and blue-based makeup colors will enhance your complexion",
]


def palette_for(skin_tone: SkinTone) -> List[str]:
    # Fair and Deep carry no undertone and take the cool palette
    return WARM_RECOMMENDATIONS if skin_tone.is_warm else COOL_RECOMMENDATIONS


def recommend(face_shape: FaceShape, skin_tone: SkinTone) -> List[str]:
    return list(SHAPE_RECOMMENDATIONS[face_shape]) + list(palette_for(skin_tone))


def _slug(face_shape: FaceShape) -> str:
    return "".join("-" + c.lower() if c.isupper() else c for c in face_shape.value).lstrip("-")


def suggest_for_face(face_shape: FaceShape, skin_tone: SkinTone) -> List[Suggestion]:
    out: List[Suggestion] = []
    for i, text in enumerate(SHAPE_RECOMMENDATIONS[face_shape], start=1):
        out.append(Suggestion(id=f"{_slug(face_shape)}-{i}", category="hairstyle", text=text))
    palette = "warm" if skin_tone.is_warm else "cool"
    for i, text in enumerate(palette_for(skin_tone), start=1):
        out.append(Suggestion(id=f"{palette}-{i}", category="palette", text=text))
    return out
