"""
SIATEC: every MTP pattern together with all of its translators.

Algorithm:
1. Build the full difference table: table[i][j] = p[j] - p[i]
   (row i is sorted ascending because the points are)
2. Partition the sorted forward differences into MTP patterns, keeping the
   source indices and the vectorized form of each
3. Optionally keep a single pattern per vectorized form
4. For each pattern, find every translator by walking the table rows of
   its points in lock-step (find_translators)

O(n^3) time worst case, O(n^2) memory.
"""

import logging
from itertools import groupby
from typing import List, Sequence, Tuple

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.tec import Tec
from ps_core.types import P

from .algorithm import TecAlgorithm, TecSink, partition_differences

logger = logging.getLogger(__name__)

DifferenceTable = List[List[P]]


class Siatec(TecAlgorithm):
    """
    Args:
        remove_duplicates: Keep only one pattern per vectorized form
    """

    name = "SIATEC"

    def __init__(self, remove_duplicates: bool = False):
        self.remove_duplicates = remove_duplicates

    def compute_tecs_to_output(self, point_set: PointSet, on_output: TecSink) -> None:
        n = len(point_set)
        if n < 2:
            return

        table, forward_diffs = compute_difference_table(point_set)
        candidates = []
        for _, indices in partition_differences(forward_diffs):
            pattern = point_set.get_pattern(indices)
            candidates.append((pattern, pattern.vectorize(), indices))

        if self.remove_duplicates:
            before = len(candidates)
            candidates = _remove_vectorized_duplicates(candidates)
            logger.debug(f"SIATEC: {before - len(candidates)} duplicate patterns removed")

        for pattern, _vectorized, indices in candidates:
            translators = find_translators(n, indices, table)
            on_output(Tec(pattern, translators))


def compute_difference_table(
    point_set: PointSet[P],
) -> Tuple[DifferenceTable, List[Tuple[P, int]]]:
    """
    Returns:
        (table, forward_diffs) where table[i][j] = p[j] - p[i] and forward_diffs
        holds (table[i][j], i) for i < j sorted by (difference, i)
    """
    points = point_set.points
    n = len(points)
    table = [[points[j] - points[i] for j in range(n)] for i in range(n)]
    forward_diffs = [(table[i][j], i) for i in range(n - 1) for j in range(i + 1, n)]
    forward_diffs.sort()
    return table, forward_diffs


def find_translators(n: int, pattern_indices: Sequence[int], table: DifferenceTable) -> List[P]:
    """
    All non-zero translators mapping the pattern (given by point indices)
    inside the point set.

    Algorithm:
    1. Candidate vector v = table[i0][r0] for each row r0 of the first point
    2. For each further pattern point k, advance row pointer r_k along
       table[i_k] while its entry is < v (pointers only move forward, since
       v grows with r0 and r_k >= r0 + k)
    3. v is a translator when every pattern point finds an equal entry

    Returns:
        Translators in ascending order
    """
    pattern_len = len(pattern_indices)
    if pattern_len == 0:
        return []

    translators = []
    first_row = table[pattern_indices[0]]
    row_ind = [0] * pattern_len

    while row_ind[0] <= n - pattern_len:
        vector = first_row[row_ind[0]]
        found = False
        for col in range(1, pattern_len):
            row_ind[col] = max(row_ind[col], row_ind[0] + col)
            column = table[pattern_indices[col]]
            while row_ind[col] < n and column[row_ind[col]] < vector:
                row_ind[col] += 1
            if row_ind[col] >= n or column[row_ind[col]] != vector:
                break
            if col == pattern_len - 1:
                found = True

        if (found or pattern_len == 1) and not vector.is_zero():
            translators.append(vector)
        row_ind[0] += 1

    return translators


def _remove_vectorized_duplicates(
    candidates: List[Tuple[Pattern, Pattern, List[int]]],
) -> List[Tuple[Pattern, Pattern, List[int]]]:
    keyed = sorted(candidates, key=lambda c: (len(c[1]), c[1]))
    return [next(group) for _, group in groupby(keyed, key=lambda c: c[1])]
