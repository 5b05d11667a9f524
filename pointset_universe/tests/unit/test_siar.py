"""
Unit tests for ps_discovery/siar.py.

Covers:
- Known answers for r = 3 and r = 1 on collinear points
- Every reported MTP is a true MTP (maximal for its translator)
- Reported translators are a subset of SIA's
- Invalid window size
- Rounded points whose differences round to zero
"""

import random

import pytest

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.types import Point2DInt, Point2DRounded
from ps_discovery.sia import Sia
from ps_discovery.siar import SiaR


def _collinear():
    points = [Point2DInt(x, 1) for x in (1, 2, 3, 4)]
    return PointSet(points), points


class TestSiaRKnownAnswers:
    def test_window_three(self):
        point_set, (a, b, c, _d) = _collinear()
        mtps = sorted(SiaR(r=3).compute_mtps(point_set), key=lambda m: m.translator)

        assert len(mtps) == 2
        assert mtps[0].translator == Point2DInt(1, 0)
        assert mtps[0].pattern == Pattern([a, b, c])
        assert mtps[1].translator == Point2DInt(2, 0)
        assert mtps[1].pattern == Pattern([a, b])

    def test_window_one(self):
        point_set, (a, b, c, _d) = _collinear()
        mtps = sorted(SiaR(r=1).compute_mtps(point_set), key=lambda m: m.translator)

        assert [m.translator for m in mtps] == [Point2DInt(1, 0), Point2DInt(2, 0)]
        assert mtps[0].pattern == Pattern([a, b, c])
        assert mtps[1].pattern == Pattern([a, b])

    def test_most_frequent_difference_first(self):
        point_set, _ = _collinear()
        mtps = SiaR(r=3).compute_mtps(point_set)
        assert mtps[0].translator == Point2DInt(1, 0)


class TestSiaRProperties:
    def test_reported_mtps_match_sia(self):
        rng = random.Random(5)
        point_set = PointSet(Point2DInt(rng.randrange(15), rng.randrange(5)) for _ in range(25))
        sia = {mtp.translator: mtp.pattern for mtp in Sia().compute_mtps(point_set)}

        for r in (1, 2, 4):
            for mtp in SiaR(r=r).compute_mtps(point_set):
                assert mtp.translator in sia
                assert mtp.pattern == sia[mtp.translator]

    def test_rounded_points_skip_zero_difference(self):
        points = [Point2DRounded(x, 60) for x in (0.0000049, 0.0000051, 1.0000049, 1.0000051)]
        mtps = SiaR(r=3).compute_mtps(PointSet(points))

        assert len(mtps) == 1
        assert not mtps[0].translator.is_zero()
        assert mtps[0].pattern == Pattern(points[:2])


class TestSiaRValidation:
    @pytest.mark.parametrize("r", [0, -2])
    def test_non_positive_window_rejected(self, r):
        with pytest.raises(ValueError, match="window size"):
            SiaR(r=r)

    def test_empty_input(self):
        assert SiaR(r=2).compute_mtps(PointSet()) == []
