"""
Partial pattern matching: translated copies sharing at least
min_match_size points with the query.

Algorithm:
1. Compute (p[j] - q[i], j) for every query point q[i] and set point p[j]
2. Sort; each run of equal difference is the set of points matched under
   that translator
3. Report runs with at least min_match_size points
"""

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_discovery.algorithm import partition_differences

from .pattern_matcher import IndexSink, PatternMatcher


class PartialMatcher(PatternMatcher):
    """
    Args:
        min_match_size: Minimum number of matched points per occurrence, >= 1
    """

    def __init__(self, min_match_size: int):
        if min_match_size < 1:
            raise ValueError(f"min_match_size must be at least 1, got {min_match_size}")
        self.min_match_size = min_match_size

    def find_indices_to_output(
        self, query: Pattern, point_set: PointSet, on_output: IndexSink
    ) -> None:
        diffs = [(point - query_point, j) for query_point in query for j, point in enumerate(point_set)]
        diffs.sort()

        for _translator, indices in partition_differences(diffs):
            if len(indices) >= self.min_match_size:
                on_output(indices)
