"""
Unit tests for ps_compress/siatec_compress.py.

Covers:
- Known answer: four collinear points compress to one TEC
- Full coverage, with a residual TEC for leftover points
- Every accepted (non-residual) TEC pays for itself
- Rounded points whose offsets round to zero
"""

import random

from ps_compress.siatec_compress import SiatecCompress
from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.types import Point2D, Point2DInt, Point2DRounded
from ps_discovery.siatec import Siatec
from ps_discovery.siatec_c import SiatecC


def _random_piece(seed: int, size: int = 25) -> PointSet:
    rng = random.Random(seed)
    return PointSet(Point2DInt(rng.randrange(16), rng.randrange(60, 65)) for _ in range(size))


class TestSiatecCompressKnownAnswers:
    def test_four_collinear_points(self):
        point_set = PointSet(Point2D(x, 0) for x in range(4))
        tecs = SiatecCompress(Siatec()).compute_tecs(point_set)

        assert len(tecs) == 1
        assert tecs[0].pattern == Pattern([Point2D(0, 0), Point2D(1, 0)])
        assert tecs[0].translators == (Point2D(2, 0),)

    def test_uncompressible_points_become_residual(self):
        point_set = PointSet([Point2D(0, 60), Point2D(1, 67), Point2D(3, 61)])
        tecs = SiatecCompress(Siatec()).compute_tecs(point_set)

        assert len(tecs) == 1
        assert tecs[0].pattern == Pattern([Point2D(0, 60)])
        assert tecs[0].translators == (Point2D(1, 7), Point2D(3, 1))


class TestSiatecCompressCoverage:
    def test_union_of_covered_sets_is_input(self):
        for seed in range(3):
            point_set = _random_piece(seed)
            for algorithm in (Siatec(), SiatecC(max_ioi=2.0)):
                covered = PointSet()
                for tec in SiatecCompress(algorithm).compute_tecs(point_set):
                    covered = covered.union(tec.covered_set())
                assert covered == point_set

    def test_empty_input(self):
        assert SiatecCompress(Siatec()).compute_tecs(PointSet()) == []

    def test_single_point(self):
        tecs = SiatecCompress(Siatec()).compute_tecs(PointSet([Point2D(1, 1)]))
        assert [tec.pattern for tec in tecs] == [Pattern([Point2D(1, 1)])]

    def test_points_straddling_rounding_boundary(self):
        point_set = PointSet(Point2DRounded(x, 60) for x in (0.0000049, 0.0000051, 1.0000049, 1.0000051))
        covered = PointSet()
        for tec in SiatecCompress(Siatec()).compute_tecs(point_set):
            assert not any(t.is_zero() for t in tec.translators)
            covered = covered.union(tec.covered_set())
        assert covered.intersect(point_set) == point_set


class TestSiatecCompressScoring:
    def test_coordinates_built_once(self, monkeypatch):
        calls = []
        to_array = PointSet.to_array

        def counting_to_array(self):
            calls.append(len(self))
            return to_array(self)

        monkeypatch.setattr(PointSet, "to_array", counting_to_array)
        SiatecCompress(Siatec()).compute_tecs(PointSet(Point2D(x, 0) for x in range(4)))

        assert calls == [4]
