# selfie_style/skin_tone.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Optional, Protocol
import math

import numpy as np

from .errors import SamplingError

SAMPLE_SIZE = 50

FAIR_MIN_BRIGHTNESS = 200


class SkinTone(str, Enum):
    FAIR = "Fair"
    WARM_LIGHT = "WarmLight"
    COOL_LIGHT = "CoolLight"
    WARM_MEDIUM = "WarmMedium"
    COOL_MEDIUM = "CoolMedium"
    WARM_DEEP = "WarmDeep"
    COOL_DEEP = "CoolDeep"
    DEEP = "Deep"

    @property
    def is_warm(self) -> bool:
        return "Warm" in self.value


# (brightness floor, warmth cut, warm tone, cool tone), brightest first
TONE_BRACKETS = (
    (170, 60, SkinTone.WARM_LIGHT, SkinTone.COOL_LIGHT),
    (140, 40, SkinTone.WARM_MEDIUM, SkinTone.COOL_MEDIUM),
    (100, 30, SkinTone.WARM_DEEP, SkinTone.COOL_DEEP),
)


@dataclass(frozen=True)
class RGBSample:
    r: int
    g: int
    b: int

    @property
    def brightness(self) -> float:
        return (self.r + self.g + self.b) / 3

    @property
    def warmth(self) -> int:
        return self.r - self.b

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class PixelSource(Protocol):
    width: int
    height: int

    def sample_pixels(self, x: int, y: int, w: int, h: int) -> Optional[np.ndarray]:
        ...


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def sample_center_color(source: Optional[PixelSource], size: int = SAMPLE_SIZE) -> RGBSample:
    """Mean color of a size x size window centered on the image."""
    if source is None:
        raise SamplingError("Image has no readable pixel surface.")
    width, height = int(source.width), int(source.height)
    x0 = width // 2 - size // 2
    y0 = height // 2 - size // 2
    if x0 < 0 or y0 < 0 or x0 + size > width or y0 + size > height:
        raise SamplingError(f"{size}x{size} sample window does not fit a {width}x{height} image.")

    block = source.sample_pixels(x0, y0, size, size)
    if block is None or block.size == 0:
        raise SamplingError("Image has no readable pixel surface.")
    block = np.asarray(block)
    if block.ndim != 3 or block.shape[2] < 3 or block.shape[:2] != (size, size):
        raise SamplingError(f"Expected a {size}x{size} RGB block, got shape {block.shape}.")

    means = block[:, :, :3].reshape(-1, 3).astype(np.float64).mean(axis=0)
    r, g, b = (_round_half_up(v) for v in means)
    return RGBSample(r, g, b)


def classify_skin_tone(sample: RGBSample) -> SkinTone:
    brightness = sample.brightness
    warmth = sample.warmth
    if brightness > FAIR_MIN_BRIGHTNESS:
        return SkinTone.FAIR
    for floor, warm_cut, warm, cool in TONE_BRACKETS:
        if brightness > floor:
            return warm if warmth > warm_cut else cool
    return SkinTone.DEEP
