"""
SIATEC-CH: SIATEC-C with a hash index and cover-array pruning.

Same candidate generation as SIATEC-C. A per-point cover array records the
size of the largest pattern already reported as covering each point:
- a candidate is processed only if one of its source or target points has
  cover < len(candidate)
- after reporting, every point of every occurrence (found by walking the
  vectorized steps backwards from the chain ends) is raised to len(candidate)

Cover values never decrease.
"""

import logging
from itertools import chain
from typing import List

from ps_core.pattern import Pattern
from ps_core.point_set import PointSet
from ps_core.tec import Tec

from .algorithm import TecSink
from .diff_index import DifferenceIndex, HashDifferenceIndex, match_backward
from .siatec_c import SiatecC

logger = logging.getLogger(__name__)


class SiatecCH(SiatecC):
    name = "SIATEC-CH"
    index_type = HashDifferenceIndex

    def compute_tecs_to_output(self, point_set: PointSet, on_output: TecSink) -> None:
        n = len(point_set)
        if n < 2:
            return

        diff_index = self.index_type.build(point_set, self.max_ioi)
        cover = [0] * n
        skipped = 0

        for pattern, sources, targets in self.split_candidates(point_set):
            size = len(pattern)
            if all(cover[index] >= size for index in chain(sources, targets)):
                skipped += 1
                continue

            chain_ends = self.chain_targets(pattern, diff_index)
            on_output(Tec(pattern, self.translators_from_targets(point_set, pattern, chain_ends)))
            self.update_cover(cover, pattern, chain_ends, diff_index)

        logger.debug(f"{self.name}: {skipped} candidates pruned by cover")

    def update_cover(
        self,
        cover: List[int],
        pattern: Pattern,
        chain_ends: List[int],
        diff_index: DifferenceIndex,
    ) -> None:
        """Raise cover to len(pattern) on every point of every occurrence."""
        size = len(pattern)
        indices = chain_ends
        for index in indices:
            cover[index] = max(cover[index], size)
        for step in reversed(pattern.vectorize().points):
            indices = match_backward(indices, diff_index.find_pairs(step))
            for index in indices:
                cover[index] = max(cover[index], size)
