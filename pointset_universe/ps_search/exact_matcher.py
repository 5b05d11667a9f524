"""
Exact pattern matching: every translated copy of the full query.

Algorithm:
1. Sort the query; anchor its first point on each point p[i] of the set
   (translator = p[i] - q[0])
2. Scan forward from p[i] up to the translated last query point, stepping
   the query pointer whenever the scan reaches its translated position
3. An occurrence is reported when all m query points were matched

O(n * m) comparisons in typical inputs.
"""

import logging

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet

from .pattern_matcher import IndexSink, PatternMatcher

logger = logging.getLogger(__name__)


class ExactMatcher(PatternMatcher):
    def find_indices_to_output(
        self, query: Pattern, point_set: PointSet, on_output: IndexSink
    ) -> None:
        query_points = sorted(query.points)
        m, n = len(query_points), len(point_set)
        if m == 0 or m > n:
            return

        matches = 0
        for i in range(n - m + 1):
            translator = point_set[i] - query_points[0]
            cutoff = query_points[-1] + translator

            candidate = []
            query_index, scan = 0, i
            while scan < n and query_index < m and point_set[scan] <= cutoff:
                expected = query_points[query_index] + translator
                current = point_set[scan]
                if current == expected:
                    candidate.append(scan)
                if expected <= current:
                    query_index += 1
                scan += 1

            if len(candidate) == m:
                matches += 1
                on_output(candidate)

        logger.debug(f"Exact match: {matches} occurrences of {m}-point query")
