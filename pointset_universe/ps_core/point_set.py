"""
PointSet: a sorted, duplicate-free collection of points.

Construction sorts the input and drops duplicates. Every derived set
(translate, intersect, union, difference) is again sorted and duplicate-free.

Algorithm (set operations):
1. Both operands are sorted sequences
2. A single merge walk decides membership for each point
3. Output is produced in sorted order, so no re-sort is needed
"""

from bisect import bisect_left
from typing import Generic, Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from .pattern import Pattern
from .types import P, points_to_array


class PointSet(Generic[P]):
    """Sorted, duplicate-free, immutable set of points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[P] = ()):
        deduped: List[P] = []
        for point in sorted(points):
            if not deduped or deduped[-1] != point:
                deduped.append(point)
        self._points: Tuple[P, ...] = tuple(deduped)

    @classmethod
    def _from_sorted(cls, points: Iterable[P]) -> "PointSet[P]":
        """Wrap points already known to be sorted and unique."""
        point_set = cls.__new__(cls)
        point_set._points = tuple(points)
        return point_set

    # =========================================================================
    # Sequence protocol
    # =========================================================================

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[P]:
        return iter(self._points)

    def __getitem__(self, index: int) -> P:
        return self._points[index]

    def __contains__(self, point: object) -> bool:
        found, _ = self.find_index(point)
        return found

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointSet):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"PointSet({list(self._points)!r})"

    @property
    def points(self) -> Tuple[P, ...]:
        return self._points

    def is_empty(self) -> bool:
        return not self._points

    def find_index(self, point: P) -> Tuple[bool, int]:
        """
        Binary search for a point.

        Returns:
            (True, index) if present, otherwise (False, insertion_index)
        """
        index = bisect_left(self._points, point)
        found = index < len(self._points) and self._points[index] == point
        return found, index

    def get_pattern(self, indices: Sequence[int]) -> Pattern[P]:
        """Pattern made of the points at the given indices, in the given order."""
        return Pattern(self._points[i] for i in indices)

    def to_array(self) -> np.ndarray:
        return points_to_array(self._points)

    # =========================================================================
    # Set algebra
    # =========================================================================

    def translate(self, vector: P) -> "PointSet[P]":
        # Sorting an already ordered sequence is linear; rounded points may collide
        return PointSet(point + vector for point in self._points)

    def intersect(self, other: "PointSet[P]") -> "PointSet[P]":
        result = []
        i, j = 0, 0
        left, right = self._points, other._points
        while i < len(left) and j < len(right):
            if left[i] < right[j]:
                i += 1
            elif right[j] < left[i]:
                j += 1
            else:
                result.append(left[i])
                i += 1
                j += 1
        return PointSet._from_sorted(result)

    def union(self, other: "PointSet[P]") -> "PointSet[P]":
        result = []
        i, j = 0, 0
        left, right = self._points, other._points
        while i < len(left) and j < len(right):
            if left[i] < right[j]:
                result.append(left[i])
                i += 1
            elif right[j] < left[i]:
                result.append(right[j])
                j += 1
            else:
                result.append(left[i])
                i += 1
                j += 1
        result.extend(left[i:])
        result.extend(right[j:])
        return PointSet._from_sorted(result)

    def difference(self, other: "PointSet[P]") -> "PointSet[P]":
        result = []
        i, j = 0, 0
        left, right = self._points, other._points
        while i < len(left):
            if j >= len(right) or left[i] < right[j]:
                result.append(left[i])
                i += 1
            elif right[j] < left[i]:
                j += 1
            else:
                i += 1
                j += 1
        return PointSet._from_sorted(result)
