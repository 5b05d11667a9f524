"""
Unit tests for ps_search (ExactMatcher, PartialMatcher).

Covers:
- Exact matches found as indices and as occurrences
- No match for a pattern absent from the set
- Partial matches respect min_match_size
- Streaming and eager variants agree
"""

import pytest

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.types import Point2D
from ps_search.exact_matcher import ExactMatcher
from ps_search.partial_matcher import PartialMatcher


def _piece() -> PointSet:
    return PointSet([
        Point2D(0.0, 72.0),
        Point2D(0.25, 74.0),
        Point2D(0.5, 72.0),
        Point2D(0.875, 72.0),
        Point2D(1.0, 45.0),
        Point2D(1.0, 60.0),
        Point2D(1.25, 47.0),
        Point2D(1.25, 62.0),
        Point2D(1.5, 45.0),
        Point2D(1.875, 45.0),
    ])


def _motif() -> Pattern:
    return Pattern([
        Point2D(0.0, 72.0),
        Point2D(0.25, 74.0),
        Point2D(0.5, 72.0),
        Point2D(0.875, 72.0),
    ])


class TestExactMatcher:
    def test_finds_indices(self):
        assert ExactMatcher().find_indices(_motif(), _piece()) == [[0, 1, 2, 3], [4, 6, 8, 9]]

    def test_finds_occurrences(self):
        occurrences = ExactMatcher().find_occurrences(_motif(), _piece())
        assert occurrences == [
            _motif(),
            Pattern([Point2D(1.0, 45.0), Point2D(1.25, 47.0), Point2D(1.5, 45.0), Point2D(1.875, 45.0)]),
        ]

    def test_absent_pattern(self):
        query = Pattern([Point2D(0.0, 72.0), Point2D(0.25, 74.0), Point2D(0.375, 72.0)])
        assert ExactMatcher().find_indices(query, _piece()) == []
        assert ExactMatcher().find_occurrences(query, _piece()) == []

    def test_query_longer_than_set(self):
        small = PointSet([Point2D(0, 0)])
        assert ExactMatcher().find_indices(_motif(), small) == []

    def test_streaming_matches_eager(self):
        streamed = []
        ExactMatcher().find_indices_to_output(_motif(), _piece(), streamed.append)
        assert streamed == ExactMatcher().find_indices(_motif(), _piece())


class TestPartialMatcher:
    def test_full_matches_found(self):
        indices = PartialMatcher(min_match_size=4).find_indices(_motif(), _piece())
        assert [0, 1, 2, 3] in indices
        assert [4, 6, 8, 9] in indices

    def test_partial_matches(self):
        """The first two query points recur at two transpositions."""
        query = Pattern([Point2D(0.0, 72.0), Point2D(0.25, 74.0), Point2D(0.5, 80.0)])
        indices = PartialMatcher(min_match_size=2).find_indices(query, _piece())
        assert [0, 1] in indices
        assert [4, 6] in indices
        assert [5, 7] in indices

    def test_min_match_size_filters(self):
        for size in (1, 2, 3):
            for match in PartialMatcher(min_match_size=size).find_indices(_motif(), _piece()):
                assert len(match) >= size

    def test_occurrences_are_points_of_the_set(self):
        piece = _piece()
        for occurrence in PartialMatcher(min_match_size=3).find_occurrences(_motif(), piece):
            assert all(point in piece for point in occurrence)

    def test_invalid_min_match_size(self):
        with pytest.raises(ValueError, match="min_match_size"):
            PartialMatcher(min_match_size=0)
