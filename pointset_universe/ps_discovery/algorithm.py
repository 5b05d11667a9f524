"""
Algorithm interfaces for MTP and TEC discovery.

Every algorithm streams results through a callback (`*_to_output`) so a
caller can flush to disk incrementally. The eager forms collect the same
stream into a list.

Provides:
- MtpAlgorithm: SIA, SIAR
- TecAlgorithm: SIATEC, SIATEC-C, SIATEC-CH, COSIATEC, SIATECCompress
- compute_forward_differences / partition_differences: shared SIA-family helpers
"""

from abc import ABC, abstractmethod
from itertools import groupby
from operator import itemgetter
from typing import Callable, Iterator, List, Sequence, Tuple

from ps_core.point_set import PointSet
from ps_core.tec import Mtp, Tec
from ps_core.types import P

MtpSink = Callable[[Mtp], None]
TecSink = Callable[[Tec], None]


class MtpAlgorithm(ABC):
    """Computes maximal translatable patterns."""

    name = "MTP"

    @abstractmethod
    def compute_mtps_to_output(self, point_set: PointSet, on_output: MtpSink) -> None:
        """Emit every MTP of point_set through on_output."""

    def compute_mtps(self, point_set: PointSet) -> List[Mtp]:
        mtps: List[Mtp] = []
        self.compute_mtps_to_output(point_set, mtps.append)
        return mtps


class TecAlgorithm(ABC):
    """Computes translational equivalence classes."""

    name = "TEC"

    @abstractmethod
    def compute_tecs_to_output(self, point_set: PointSet, on_output: TecSink) -> None:
        """Emit every TEC of point_set through on_output."""

    def compute_tecs(self, point_set: PointSet) -> List[Tec]:
        tecs: List[Tec] = []
        self.compute_tecs_to_output(point_set, tecs.append)
        return tecs


def compute_forward_differences(point_set: PointSet[P]) -> List[Tuple[P, int]]:
    """
    All forward differences (p[j] - p[i], i) for i < j, sorted by (difference, i).
    """
    points = point_set.points
    n = len(points)
    diffs = [(points[j] - points[i], i) for i in range(n - 1) for j in range(i + 1, n)]
    diffs.sort()
    return diffs


def partition_differences(
    sorted_diffs: Sequence[Tuple[P, int]],
) -> Iterator[Tuple[P, List[int]]]:
    """
    Group runs of equal difference into (difference, [source indices]).

    Indices within a run are ascending and unique. A source can repeat in a
    run only for rounded points, where two raw differences from the same
    source compare equal.
    """
    for difference, run in groupby(sorted_diffs, key=itemgetter(0)):
        indices = [index for _, index in run]
        yield difference, [index for index, _ in groupby(indices)]


def mtp_from_run(point_set: PointSet[P], difference: P, indices: List[int]) -> Mtp[P]:
    return Mtp(difference, point_set.get_pattern(indices))

