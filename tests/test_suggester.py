"""Tests for the recommendation tables."""

import pytest

from selfie_style.face_shape import FaceShape
from selfie_style.skin_tone import SkinTone
from selfie_style.suggester import (
    COOL_RECOMMENDATIONS,
    SHAPE_RECOMMENDATIONS,
    WARM_RECOMMENDATIONS,
    recommend,
    suggest_for_face,
)


@pytest.mark.parametrize("shape", list(FaceShape))
def test_every_shape_has_two_or_three_entries(shape):
    assert 2 <= len(SHAPE_RECOMMENDATIONS[shape]) <= 3


@pytest.mark.parametrize("shape", list(FaceShape))
@pytest.mark.parametrize("tone", list(SkinTone))
def test_recommend_segments(shape, tone):
    recs = recommend(shape, tone)
    head = SHAPE_RECOMMENDATIONS[shape]
    tail = WARM_RECOMMENDATIONS if tone.is_warm else COOL_RECOMMENDATIONS

    assert recs
    assert recs[:len(head)] == head
    assert recs[len(head):] == tail


def test_fair_and_deep_use_cool_palette():
    assert recommend(FaceShape.OVAL, SkinTone.FAIR)[-2:] == COOL_RECOMMENDATIONS
    assert recommend(FaceShape.OVAL, SkinTone.DEEP)[-2:] == COOL_RECOMMENDATIONS


def test_recommend_returns_fresh_list():
    recs = recommend(FaceShape.ROUND, SkinTone.WARM_DEEP)
    recs.append("mutated")
    assert "mutated" not in recommend(FaceShape.ROUND, SkinTone.WARM_DEEP)


def test_suggestion_ids():
    out = suggest_for_face(FaceShape.INVERTED_TRIANGLE, SkinTone.WARM_LIGHT)
    assert [s.id for s in out] == ["inverted-triangle-1", "inverted-triangle-2", "warm-1", "warm-2"]
    assert [s.category for s in out] == ["hairstyle", "hairstyle", "palette", "palette"]
    assert [s.text for s in out] == recommend(FaceShape.INVERTED_TRIANGLE, SkinTone.WARM_LIGHT)
