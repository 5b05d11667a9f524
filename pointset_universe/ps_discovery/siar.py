"""
SIAR: SIA restricted to a sliding window of r successors.

Algorithm:
1. Forward differences only for j in i+1 .. i+r (sorted by (difference, i))
2. Partition into candidate patterns
3. Collect intra-pattern differences (all ordered pairs within each candidate)
4. Count each distinct difference, most frequent first
5. For each difference t emit the true MTP:
   MTP(t) = P ∩ (P - t)   (points whose translate by t is in P)

Trades completeness for memory: translators never seen inside a windowed
candidate pattern are not reported.
"""

import logging
from itertools import groupby
from typing import List, Tuple

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.tec import Mtp
from ps_core.types import P

from .algorithm import MtpAlgorithm, MtpSink, partition_differences

logger = logging.getLogger(__name__)


class SiaR(MtpAlgorithm):
    """
    Args:
        r: Window size (number of successors paired with each point), r >= 1

    Raises:
        ValueError: If r is not a positive integer
    """

    name = "SIAR"

    def __init__(self, r: int = 3):
        if not isinstance(r, int) or r < 1:
            raise ValueError(f"Invalid window size r={r!r}. Must be a positive integer")
        self.r = r

    def compute_mtps_to_output(self, point_set: PointSet, on_output: MtpSink) -> None:
        patterns = self._windowed_patterns(point_set)
        frequencies = self._difference_frequencies(patterns)
        logger.debug(
            f"SIAR(r={self.r}): {len(patterns)} candidate patterns, "
            f"{len(frequencies)} distinct intra-pattern differences"
        )

        for translator, _count in frequencies:
            if translator.is_zero():
                continue
            matched = point_set.intersect(point_set.translate(translator * -1))
            on_output(Mtp(translator, Pattern(matched.points)))

    def _windowed_patterns(self, point_set: PointSet[P]) -> List[Pattern[P]]:
        points = point_set.points
        n = len(points)
        diffs = [
            (points[j] - points[i], i)
            for i in range(n - 1)
            for j in range(i + 1, min(n, i + self.r + 1))
        ]
        diffs.sort()
        return [point_set.get_pattern(indices) for _, indices in partition_differences(diffs)]

    @staticmethod
    def _difference_frequencies(patterns: List[Pattern[P]]) -> List[Tuple[P, int]]:
        intra_diffs = []
        for pattern in patterns:
            points = pattern.points
            for i in range(len(points) - 1):
                for j in range(i + 1, len(points)):
                    intra_diffs.append(points[j] - points[i])
        intra_diffs.sort()

        frequencies = [(diff, len(list(run))) for diff, run in groupby(intra_diffs)]
        # Stable sort keeps ascending difference order among equal counts
        frequencies.sort(key=lambda item: item[1], reverse=True)
        return frequencies
