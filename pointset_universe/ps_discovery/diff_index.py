"""
Bounded difference index for the windowed SIATEC variants.

Maps each forward difference vector d = p[j] - p[i] (with onset gap at most
max_ioi) to the (i, j) index pairs producing it. Pairs for one difference
are ordered by source index, which is also target order.

Provides:
- DifferenceIndex: lookup interface (find_pairs raises DifferenceIndexMiss)
- SortedDifferenceIndex: sorted keys + binary search (SIATEC-C)
- HashDifferenceIndex: dict keyed by difference (SIATEC-CH)
- match_forward / match_backward: two-pointer chain steps over index pairs
- onset(): component 0 of a point, or ValueError
"""

import logging
from abc import ABC, abstractmethod
from bisect import bisect_left
from itertools import groupby
from operator import itemgetter
from typing import Dict, Iterator, List, Sequence, Tuple

from ps_core.point_set import PointSet
from ps_core.types import P, Point

logger = logging.getLogger(__name__)

IndexPair = Tuple[int, int]


class DifferenceIndexMiss(LookupError):
    """A difference vector expected in the index was not found."""


def onset(point: Point) -> float:
    """Component 0 of a point; raises ValueError when the point has none."""
    value = point.component(0)
    if value is None:
        raise ValueError(f"Point {point!r} has no onset component (index 0)")
    return value


def bounded_forward_differences(
    point_set: PointSet[P], max_ioi: float
) -> Iterator[Tuple[P, IndexPair]]:
    """
    Yield (p[j] - p[i], (i, j)) for i < j while onset(p[j] - p[i]) <= max_ioi.

    Points are sorted by onset, so the inner scan stops at the first target
    beyond the bound.
    """
    points = point_set.points
    n = len(points)
    for i in range(n - 1):
        for j in range(i + 1, n):
            diff = points[j] - points[i]
            if onset(diff) > max_ioi:
                break
            yield diff, (i, j)


class DifferenceIndex(ABC):
    """Difference vector -> index pairs producing it."""

    @abstractmethod
    def find_pairs(self, difference: P) -> Sequence[IndexPair]:
        """Pairs (i, j) with p[j] - p[i] == difference, ordered by i."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of distinct differences."""

    @classmethod
    @abstractmethod
    def build(cls, point_set: PointSet, max_ioi: float) -> "DifferenceIndex":
        """Index every forward difference with onset gap <= max_ioi."""

    def _miss(self, difference: P) -> DifferenceIndexMiss:
        return DifferenceIndexMiss(
            f"Difference {difference!r} not present in {type(self).__name__} "
            f"({len(self)} entries)"
        )


class SortedDifferenceIndex(DifferenceIndex):
    """Differences kept sorted; lookup by binary search."""

    def __init__(self, entries: Sequence[Tuple[P, List[IndexPair]]]):
        self._keys = [difference for difference, _ in entries]
        self._pairs = [pairs for _, pairs in entries]

    @classmethod
    def build(cls, point_set: PointSet, max_ioi: float) -> "SortedDifferenceIndex":
        diffs = sorted(bounded_forward_differences(point_set, max_ioi))
        entries = [
            (difference, [pair for _, pair in run])
            for difference, run in groupby(diffs, key=itemgetter(0))
        ]
        logger.debug(f"Sorted difference index: {len(diffs)} pairs, {len(entries)} keys")
        return cls(entries)

    def __len__(self) -> int:
        return len(self._keys)

    def find_pairs(self, difference: P) -> Sequence[IndexPair]:
        position = bisect_left(self._keys, difference)
        if position < len(self._keys) and self._keys[position] == difference:
            return self._pairs[position]
        raise self._miss(difference)


class HashDifferenceIndex(DifferenceIndex):
    """Differences in a dict; expected O(1) lookup."""

    def __init__(self, table: Dict[P, List[IndexPair]]):
        self._table = table

    @classmethod
    def build(cls, point_set: PointSet, max_ioi: float) -> "HashDifferenceIndex":
        table: Dict[P, List[IndexPair]] = {}
        count = 0
        # Generation order is ascending i then j, so each list is source ordered
        for difference, pair in bounded_forward_differences(point_set, max_ioi):
            table.setdefault(difference, []).append(pair)
            count += 1
        logger.debug(f"Hash difference index: {count} pairs, {len(table)} keys")
        return cls(table)

    def __len__(self) -> int:
        return len(self._table)

    def find_pairs(self, difference: P) -> Sequence[IndexPair]:
        try:
            return self._table[difference]
        except KeyError:
            raise self._miss(difference) from None


# =============================================================================
# Chain matching
# =============================================================================


def match_forward(sources: Sequence[int], pairs: Sequence[IndexPair]) -> List[int]:
    """
    Targets j of every pair (i, j) whose source i is in sources.

    Both inputs are ascending (sources by value, pairs by i).
    """
    matched = []
    s, p = 0, 0
    while s < len(sources) and p < len(pairs):
        source, (pair_source, pair_target) = sources[s], pairs[p]
        if source < pair_source:
            s += 1
        elif pair_source < source:
            p += 1
        else:
            matched.append(pair_target)
            s += 1
            p += 1
    return matched


def match_backward(targets: Sequence[int], pairs: Sequence[IndexPair]) -> List[int]:
    """
    Sources i of every pair (i, j) whose target j is in targets.

    Both inputs are ascending (targets by value, pairs by j).
    """
    matched = []
    t, p = 0, 0
    while t < len(targets) and p < len(pairs):
        target, (pair_source, pair_target) = targets[t], pairs[p]
        if target < pair_target:
            t += 1
        elif pair_target < target:
            p += 1
        else:
            matched.append(pair_source)
            t += 1
            p += 1
    return matched
