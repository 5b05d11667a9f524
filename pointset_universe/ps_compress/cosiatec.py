"""
COSIATEC: greedy covering by repeatedly taking the best TEC.

Algorithm:
1. residual = input point set
2. Run the wrapped TEC algorithm on the residual
3. For every TEC and its conjugate (both with redundant translators
   removed), keep the best by TecStats.is_better_than
4. Emit the best TEC and subtract its covered set from the residual
5. Repeat until the residual is empty (at most |input| rounds)

If the wrapped algorithm finds nothing in a non-empty residual (isolated
points, or gaps wider than a windowed algorithm's max_ioi), the residual is
emitted as one TEC anchored at its first point and the loop stops.
"""

import logging
from typing import Optional

from ps_core.point_set import PointSet
from ps_core.tec import Tec
from ps_discovery.algorithm import TecAlgorithm, TecSink

from .heuristic import TecStats, compute_tec_stats, placeholder_stats

logger = logging.getLogger(__name__)


class Cosiatec(TecAlgorithm):
    """
    Args:
        tec_algorithm: Algorithm producing candidate TECs for each residual
    """

    name = "COSIATEC"

    def __init__(self, tec_algorithm: TecAlgorithm):
        self.tec_algorithm = tec_algorithm

    def compute_tecs_to_output(self, point_set: PointSet, on_output: TecSink) -> None:
        residual = point_set
        iterations = 0

        while not residual.is_empty() and iterations < len(point_set):
            iterations += 1
            best = self.find_best_tec(residual)
            if best is None:
                logger.debug(f"COSIATEC: no candidate for {len(residual)} residual points")
                on_output(residual_tec(residual))
                return

            on_output(best.tec)
            residual = residual.difference(best.covered_set)
            logger.debug(
                f"COSIATEC round {iterations}: pattern size {len(best.tec.pattern)}, "
                f"ratio {best.compression_ratio:.3f}, {len(residual)} points left"
            )

    def find_best_tec(self, point_set: PointSet) -> Optional[TecStats]:
        """Best TEC (or conjugate) of point_set, None when there is no candidate."""
        best = placeholder_stats()
        coords = point_set.to_array()
        for tec in self.tec_algorithm.compute_tecs(point_set):
            for candidate in (tec, tec.conjugate()):
                stats = compute_tec_stats(
                    candidate.remove_redundant_translators(), point_set, coords
                )
                if stats.is_better_than(best):
                    best = stats
        return None if best.tec.pattern.is_empty() else best


def residual_tec(residual: PointSet) -> Tec:
    """
    Single TEC covering residual: first point, translated onto each other point.

    When an offset from the first point is zero (rounded points closer than
    the rounding step), the residual becomes the pattern with no translators.
    """
    first = residual[0]
    translators = [point - first for point in residual.points[1:]]
    if any(t.is_zero() for t in translators):
        return Tec(residual.points, ())
    return Tec([first], translators)
