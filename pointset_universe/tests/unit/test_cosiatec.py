"""
Unit tests for ps_compress/cosiatec.py.

Covers:
- Known answer: four evenly spaced collinear points
- Union of emitted covered sets equals the input
- Emitted covered sets are disjoint (each round works on the residual)
- Residual fallback when the wrapped algorithm finds nothing
- Rounded points whose offsets round to zero
"""

import random

from ps_compress.cosiatec import Cosiatec, residual_tec
from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.types import Point2D, Point2DInt, Point2DRounded
from ps_discovery.siatec import Siatec
from ps_discovery.siatec_c import SiatecC
from ps_discovery.siatec_ch import SiatecCH


def _random_piece(seed: int, size: int = 25) -> PointSet:
    rng = random.Random(seed)
    return PointSet(Point2DInt(rng.randrange(16), rng.randrange(60, 65)) for _ in range(size))


def _straddling_piece() -> PointSet:
    """Two pairs of onsets on either side of a rounding boundary."""
    return PointSet(Point2DRounded(x, 60) for x in (0.0000049, 0.0000051, 1.0000049, 1.0000051))


class TestCosiatecKnownAnswers:
    def test_four_collinear_points(self):
        point_set = PointSet(Point2D(x, 0) for x in range(4))
        tecs = Cosiatec(Siatec()).compute_tecs(point_set)

        assert tecs[0].pattern == Pattern([Point2D(0, 0), Point2D(1, 0)])
        assert tecs[0].translators == (Point2D(2, 0),)
        assert len(tecs) == 1

    def test_same_result_with_duplicate_removal(self):
        point_set = PointSet(Point2D(x, 0) for x in range(4))
        tecs = Cosiatec(Siatec(remove_duplicates=True)).compute_tecs(point_set)
        assert tecs[0].pattern == Pattern([Point2D(0, 0), Point2D(1, 0)])
        assert tecs[0].translators == (Point2D(2, 0),)


class TestCosiatecCoverage:
    def test_union_of_covered_sets_is_input(self):
        for seed in range(3):
            point_set = _random_piece(seed)
            for algorithm in (Siatec(), SiatecC(max_ioi=3.0), SiatecCH(max_ioi=3.0)):
                covered = PointSet()
                for tec in Cosiatec(algorithm).compute_tecs(point_set):
                    covered = covered.union(tec.covered_set())
                assert covered == point_set

    def test_rounds_cover_disjoint_points(self):
        point_set = _random_piece(4)
        seen = PointSet()
        for tec in Cosiatec(Siatec()).compute_tecs(point_set):
            cover = tec.covered_set()
            assert seen.intersect(cover).is_empty()
            seen = seen.union(cover)

    def test_at_most_one_round_per_point(self):
        point_set = _random_piece(5)
        assert len(Cosiatec(Siatec()).compute_tecs(point_set)) <= len(point_set)


class TestCosiatecResidual:
    def test_single_point(self):
        tecs = Cosiatec(Siatec()).compute_tecs(PointSet([Point2D(3, 60)]))
        assert len(tecs) == 1
        assert tecs[0].pattern == Pattern([Point2D(3, 60)])
        assert tecs[0].translators == ()

    def test_isolated_points_with_windowed_algorithm(self):
        point_set = PointSet([Point2D(0, 60), Point2D(10, 62), Point2D(20, 64)])
        tecs = Cosiatec(SiatecC(max_ioi=1.0)).compute_tecs(point_set)

        assert len(tecs) == 1
        assert tecs[0].pattern == Pattern([Point2D(0, 60)])
        assert tecs[0].translators == (Point2D(10, 2), Point2D(20, 4))

    def test_empty_input(self):
        assert Cosiatec(Siatec()).compute_tecs(PointSet()) == []

    def test_residual_with_offset_rounding_to_zero(self):
        residual = PointSet([Point2DRounded(0.0000049, 60), Point2DRounded(0.0000051, 60), Point2DRounded(3, 62)])
        tec = residual_tec(residual)

        assert tec.pattern == Pattern(residual.points)
        assert tec.translators == ()


class TestCosiatecRoundedPoints:
    def test_covers_points_straddling_rounding_boundary(self):
        point_set = _straddling_piece()
        covered = PointSet()
        for tec in Cosiatec(Siatec()).compute_tecs(point_set):
            assert not any(t.is_zero() for t in tec.translators)
            covered = covered.union(tec.covered_set())
        assert covered.intersect(point_set) == point_set


class TestCosiatecScoring:
    def test_coordinates_built_once_per_round(self, monkeypatch):
        calls = []
        to_array = PointSet.to_array

        def counting_to_array(self):
            calls.append(len(self))
            return to_array(self)

        monkeypatch.setattr(PointSet, "to_array", counting_to_array)
        tecs = Cosiatec(Siatec()).compute_tecs(PointSet(Point2D(x, 0) for x in range(4)))

        assert len(tecs) == 1
        assert calls == [4]
