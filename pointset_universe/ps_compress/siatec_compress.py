"""
SIATECCompress: single-pass covering from one ranked list of TECs.

Algorithm:
1. Run the wrapped TEC algorithm once; add the conjugate of every TEC
2. Remove redundant translators and compute TecStats for each candidate
3. Sort best-first with TecStats.is_better_than
4. Walk the ranking; accept a TEC when the points it newly covers outnumber
   its representation (|pattern| + |translators|)
5. Stop once every point is covered; otherwise emit one residual TEC for
   the points left over
"""

import logging
from functools import cmp_to_key

from ps_core.point_set import PointSet
from ps_discovery.algorithm import TecAlgorithm, TecSink

from .cosiatec import residual_tec
from .heuristic import better_first, compute_tec_stats

logger = logging.getLogger(__name__)


class SiatecCompress(TecAlgorithm):
    """
    Args:
        tec_algorithm: Algorithm producing the candidate TECs
    """

    name = "SIATEC-COMPRESS"

    def __init__(self, tec_algorithm: TecAlgorithm):
        self.tec_algorithm = tec_algorithm

    def compute_tecs_to_output(self, point_set: PointSet, on_output: TecSink) -> None:
        if point_set.is_empty():
            return

        tecs = self.tec_algorithm.compute_tecs(point_set)
        candidates = tecs + [tec.conjugate() for tec in tecs]
        coords = point_set.to_array()
        ranked = sorted(
            (
                compute_tec_stats(tec.remove_redundant_translators(), point_set, coords)
                for tec in candidates
            ),
            key=cmp_to_key(better_first),
        )
        logger.debug(f"SIATEC-COMPRESS: ranked {len(ranked)} candidates")

        covered = PointSet()
        accepted = 0
        for stats in ranked:
            tec = stats.tec
            new_points = len(stats.covered_set.difference(covered))
            if new_points > len(tec.pattern) + len(tec.translators):
                on_output(tec)
                accepted += 1
                covered = covered.union(stats.covered_set)
                if len(covered) == len(point_set):
                    break

        residual = point_set.difference(covered)
        logger.debug(
            f"SIATEC-COMPRESS: accepted {accepted} TECs, {len(residual)} residual points"
        )
        if not residual.is_empty():
            on_output(residual_tec(residual))
