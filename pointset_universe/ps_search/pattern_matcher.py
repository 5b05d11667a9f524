"""
Pattern search interface.

A matcher reports the occurrences of a query pattern inside a point set,
either as index lists into the point set or as the matched patterns. Both
forms come in a streaming (callback) and an eager variant.
"""

from abc import ABC, abstractmethod
from typing import Callable, List

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet

IndexSink = Callable[[List[int]], None]
PatternSink = Callable[[Pattern], None]


class PatternMatcher(ABC):
    @abstractmethod
    def find_indices_to_output(
        self, query: Pattern, point_set: PointSet, on_output: IndexSink
    ) -> None:
        """Emit the point-set indices of every occurrence of query."""

    def find_indices(self, query: Pattern, point_set: PointSet) -> List[List[int]]:
        found: List[List[int]] = []
        self.find_indices_to_output(query, point_set, found.append)
        return found

    def find_occurrences_to_output(
        self, query: Pattern, point_set: PointSet, on_output: PatternSink
    ) -> None:
        self.find_indices_to_output(
            query, point_set, lambda indices: on_output(point_set.get_pattern(indices))
        )

    def find_occurrences(self, query: Pattern, point_set: PointSet) -> List[Pattern]:
        found: List[Pattern] = []
        self.find_occurrences_to_output(query, point_set, found.append)
        return found
