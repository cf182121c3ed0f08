"""Tests for center color sampling and skin-tone brackets."""

import numpy as np
import pytest

from selfie_style.detect import ImagePixels
from selfie_style.errors import SamplingError
from selfie_style.skin_tone import RGBSample, SkinTone, classify_skin_tone, sample_center_color

from conftest import solid_image


class TestClassifySkinTone:
    def test_fair(self):
        assert classify_skin_tone(RGBSample(210, 205, 200)) == SkinTone.FAIR

    def test_warm_deep(self):
        # brightness 116.67, warmth 70
        assert classify_skin_tone(RGBSample(150, 120, 80)) == SkinTone.WARM_DEEP

    def test_brightness_200_is_not_fair(self):
        assert classify_skin_tone(RGBSample(230, 200, 170)) == SkinTone.COOL_LIGHT
        assert classify_skin_tone(RGBSample(240, 200, 160)) == SkinTone.WARM_LIGHT

    def test_brightness_170_falls_to_medium(self):
        assert classify_skin_tone(RGBSample(200, 170, 140)) == SkinTone.WARM_MEDIUM

    def test_brightness_140_falls_to_deep_brackets(self):
        assert classify_skin_tone(RGBSample(150, 140, 130)) == SkinTone.COOL_DEEP

    def test_brightness_100_is_deep(self):
        assert classify_skin_tone(RGBSample(140, 100, 60)) == SkinTone.DEEP

    def test_warmth_threshold_is_strict(self):
        # brightness 180, warmth exactly 60
        assert classify_skin_tone(RGBSample(210, 180, 150)) == SkinTone.COOL_LIGHT

    def test_cool_medium(self):
        assert classify_skin_tone(RGBSample(150, 150, 150)) == SkinTone.COOL_MEDIUM

    def test_black_is_deep(self):
        assert classify_skin_tone(RGBSample(0, 0, 0)) == SkinTone.DEEP

    def test_is_warm(self):
        warm = {t for t in SkinTone if t.is_warm}
        assert warm == {SkinTone.WARM_LIGHT, SkinTone.WARM_MEDIUM, SkinTone.WARM_DEEP}


class TestSampleCenterColor:
    def test_solid_color(self):
        assert sample_center_color(ImagePixels(solid_image((150, 120, 80)))) == RGBSample(150, 120, 80)

    def test_only_center_window_counts(self):
        img = solid_image((0, 0, 0), w=200, h=200)
        img[75:125, 75:125] = (100, 110, 120)
        assert sample_center_color(ImagePixels(img)) == RGBSample(100, 110, 120)

    def test_rounds_half_up(self):
        img = solid_image((10, 10, 10), w=50, h=50)
        img[:25, :, 0] = 11  # red mean 10.5
        assert sample_center_color(ImagePixels(img)).r == 11

    def test_alpha_ignored(self):
        img = np.zeros((60, 60, 4), dtype=np.uint8)
        img[:, :] = (20, 30, 40, 255)
        assert sample_center_color(ImagePixels(img)) == RGBSample(20, 30, 40)

    def test_minimum_size(self):
        assert sample_center_color(ImagePixels(solid_image(w=50, h=50))) == RGBSample(210, 205, 200)

    @pytest.mark.parametrize("w,h", [(49, 100), (100, 49), (10, 10)])
    def test_too_small(self, w, h):
        with pytest.raises(SamplingError):
            sample_center_color(ImagePixels(solid_image(w=w, h=h)))

    def test_no_surface(self):
        with pytest.raises(SamplingError):
            sample_center_color(None)
        with pytest.raises(SamplingError):
            sample_center_color(ImagePixels(None))
