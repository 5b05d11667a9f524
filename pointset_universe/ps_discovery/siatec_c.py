"""
SIATEC-C: SIATEC with patterns bounded by a maximum inter-onset interval.

Candidate patterns never contain two consecutive points further than
max_ioi apart in onset, so long pieces can be processed window by window
instead of through a full n x n difference table.

Algorithm:
1. Build a difference index over forward differences with onset gap <= max_ioi
2. Windowed candidate generation, one window step per iteration:
   - each source point i keeps a target pointer and an onset bound
     (onset(i) + max_ioi, raised by max_ioi every time the pointer stops)
   - collect (p[j] - p[i], i, j) until p[j] passes the bound
   - stop once every source pointer has run off the end
3. Partition the window's differences into MTP patterns
4. Split each pattern wherever consecutive onsets differ by more than max_ioi;
   keep sub-patterns with more than one point
5. Translators of a sub-pattern: chain its vectorized steps through the
   index (match_forward) and subtract the last point from each chain end

A step missing from the index raises DifferenceIndexMiss.
"""

import logging
from itertools import groupby
from operator import itemgetter
from typing import Iterator, List, Tuple, Type

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.tec import Tec
from ps_core.types import P

from .algorithm import TecAlgorithm, TecSink
from .diff_index import DifferenceIndex, SortedDifferenceIndex, match_forward, onset

logger = logging.getLogger(__name__)

# (pattern, source indices, target indices)
Candidate = Tuple[Pattern, List[int], List[int]]


class SiatecC(TecAlgorithm):
    """
    Args:
        max_ioi: Maximum onset gap between consecutive pattern points, > 0

    Raises:
        ValueError: If max_ioi is not positive, or a point has no onset component
    """

    name = "SIATEC-C"
    index_type: Type[DifferenceIndex] = SortedDifferenceIndex

    def __init__(self, max_ioi: float = 10.0):
        if not max_ioi > 0:
            raise ValueError(f"Invalid max_ioi={max_ioi!r}. Must be > 0")
        self.max_ioi = float(max_ioi)

    def compute_tecs_to_output(self, point_set: PointSet, on_output: TecSink) -> None:
        if len(point_set) < 2:
            return

        diff_index = self.index_type.build(point_set, self.max_ioi)
        for pattern, _sources, _targets in self.split_candidates(point_set):
            targets = self.chain_targets(pattern, diff_index)
            on_output(Tec(pattern, self.translators_from_targets(point_set, pattern, targets)))

    # =========================================================================
    # Candidate generation
    # =========================================================================

    def split_candidates(self, point_set: PointSet[P]) -> Iterator[Candidate]:
        """Windowed, gap-split candidate patterns in window order."""
        n = len(point_set)
        target_indices = list(range(n))
        window_bounds = [onset(point) + self.max_ioi for point in point_set]

        iteration = 0
        while any(target_indices[i] < n for i in range(n - 1)):
            window_diffs = self._window_differences(point_set, target_indices, window_bounds)
            iteration += 1
            logger.debug(f"{self.name}: window {iteration}, {len(window_diffs)} differences")

            for sources, targets in _partition_window(window_diffs):
                yield from self._split_on_gaps(point_set, sources, targets)

    def _window_differences(
        self,
        point_set: PointSet[P],
        target_indices: List[int],
        window_bounds: List[float],
    ) -> List[Tuple[P, int, int]]:
        points = point_set.points
        n = len(points)
        diffs = []
        for i in range(n - 1):
            if target_indices[i] >= n:
                continue
            origin = points[i]
            for j in range(target_indices[i], n):
                if j == i:
                    continue
                if onset(points[j]) > window_bounds[i]:
                    target_indices[i] = j
                    window_bounds[i] += self.max_ioi
                    break
                diffs.append((points[j] - origin, i, j))
            else:
                target_indices[i] = n
        return diffs

    def _split_on_gaps(
        self, point_set: PointSet[P], sources: List[int], targets: List[int]
    ) -> Iterator[Candidate]:
        start = 0
        for k in range(1, len(sources) + 1):
            at_end = k == len(sources)
            if at_end or onset(point_set[sources[k]] - point_set[sources[k - 1]]) > self.max_ioi:
                if k - start > 1:
                    yield (
                        point_set.get_pattern(sources[start:k]),
                        sources[start:k],
                        targets[start:k],
                    )
                start = k

    # =========================================================================
    # Translator resolution
    # =========================================================================

    @staticmethod
    def chain_targets(pattern: Pattern[P], diff_index: DifferenceIndex) -> List[int]:
        """Indices of the last point of every occurrence of the pattern."""
        steps = pattern.vectorize()
        targets = [target for _, target in diff_index.find_pairs(steps[0])]
        for step in steps.points[1:]:
            targets = match_forward(targets, diff_index.find_pairs(step))
        return targets

    @staticmethod
    def translators_from_targets(
        point_set: PointSet[P], pattern: Pattern[P], targets: List[int]
    ) -> List[P]:
        last = pattern[len(pattern) - 1]
        translators = (point_set[target] - last for target in targets)
        return [t for t in translators if not t.is_zero()]


def _partition_window(window_diffs: List[Tuple[P, int, int]]) -> Iterator[Tuple[List[int], List[int]]]:
    """Group window differences by vector into (sources, targets), sorted by (vector, source)."""
    window_diffs.sort(key=itemgetter(0, 1))
    for _, run in groupby(window_diffs, key=itemgetter(0)):
        run = list(run)
        yield [i for _, i, _ in run], [j for _, _, j in run]
