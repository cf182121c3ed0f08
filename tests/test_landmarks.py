"""Tests for keypoint lookup and the distance helper."""

import pytest

from selfie_style.geometry import distance
from selfie_style.landmarks import EXPECTED_ROLES, Keypoint, KeypointMap, KeypointRole


def test_distance():
    assert distance(Keypoint("a", 0, 0), Keypoint("b", 3, 4)) == pytest.approx(5.0)
    assert distance(Keypoint("a", 2, 2), Keypoint("b", 2, 2)) == 0.0


class TestKeypointMap:
    def test_missing_role_is_none(self):
        kps = KeypointMap.from_keypoints([Keypoint("noseTip", 1, 2)])
        assert kps.get(KeypointRole.MOUTH) is None
        assert kps.get(KeypointRole.NOSE_TIP) == Keypoint("noseTip", 1, 2)

    def test_first_occurrence_wins(self):
        kps = KeypointMap.from_keypoints([Keypoint("chin", 1, 1), Keypoint("chin", 9, 9)])
        assert kps.get(KeypointRole.CHIN).x == 1

    def test_pair(self):
        kps = KeypointMap.from_keypoints([Keypoint("leftEye", 0, 0)])
        assert kps.pair(KeypointRole.LEFT_EYE, KeypointRole.RIGHT_EYE) is None

    def test_present_counts_expected_roles(self):
        kps = KeypointMap.from_keypoints([Keypoint(r.value, 0, 0) for r in KeypointRole])
        assert kps.present(EXPECTED_ROLES) == 6
