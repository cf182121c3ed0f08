# selfie_style/geometry.py
import math


def distance(a, b) -> float:
    """Euclidean distance between two points exposing .x / .y."""
    return float(math.hypot(b.x - a.x, b.y - a.y))
