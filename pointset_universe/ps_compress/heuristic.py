"""
TEC quality statistics for compression-driven selection.

TecStats fields:
- compression_ratio = |covered set| / (|pattern| + |translators|)
- compactness       = max over occurrences of |pattern| / (points of the
                      point set inside the occurrence's bounding box)
- covered_set, pattern_width (onset range), pattern_area (onset range x
                      pitch range)

is_better_than compares two stats criterion by criterion, first difference
decides:
1. compression_ratio (higher wins)
2. compactness (higher wins)
3. |covered set| (larger wins)
4. |pattern| (larger wins)
5. pattern_width (smaller wins)
6. pattern_area (smaller wins)
Fully tied stats are not better than each other.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ps_core.point_set import PointSet
from ps_core.tec import Tec


@dataclass(frozen=True)
class TecStats:
    tec: Tec
    compression_ratio: float
    compactness: float
    covered_set: PointSet
    pattern_width: float
    pattern_area: float

    def criteria(self) -> List[Tuple[float, float]]:
        """(value, sign) pairs; sign +1 means larger is better."""
        return [
            (self.compression_ratio, 1.0),
            (self.compactness, 1.0),
            (float(len(self.covered_set)), 1.0),
            (float(len(self.tec.pattern)), 1.0),
            (self.pattern_width, -1.0),
            (self.pattern_area, -1.0),
        ]

    def is_better_than(self, other: "TecStats") -> bool:
        for (mine, sign), (theirs, _) in zip(self.criteria(), other.criteria()):
            if mine != theirs:
                return sign * (mine - theirs) > 0
        return False


def placeholder_stats() -> TecStats:
    """Stats every real TEC beats on compression ratio."""
    return TecStats(
        tec=Tec((), ()),
        compression_ratio=-1.0,
        compactness=0.0,
        covered_set=PointSet(),
        pattern_width=0.0,
        pattern_area=0.0,
    )


def compute_tec_stats(
    tec: Tec, point_set: PointSet, coords: Optional[np.ndarray] = None
) -> TecStats:
    """
    Compute TecStats for tec relative to point_set.

    Bounding boxes span the true minimum and maximum of each axis.

    Args:
        tec: Candidate TEC
        point_set: Points the TEC was discovered in
        coords: point_set.to_array(), when the caller scores many TECs
            against the same point set
    """
    if coords is None:
        coords = point_set.to_array()
    covered = tec.covered_set()
    pattern_size = len(tec.pattern)
    representation = pattern_size + len(tec.translators)
    ratio = len(covered) / representation if representation else 0.0

    width, area = 0.0, 0.0
    if pattern_size:
        lower, upper = _bounding_box(tec.pattern.to_array())
        extent = upper - lower
        width = float(extent[0])
        area = float(extent[0] * extent[1]) if len(extent) > 1 else 0.0

    return TecStats(
        tec=tec,
        compression_ratio=ratio,
        compactness=compute_compactness(tec, coords),
        covered_set=covered,
        pattern_width=width,
        pattern_area=area,
    )


def compute_compactness(tec: Tec, coords: np.ndarray) -> float:
    """Best occurrence density: |pattern| / points (rows of coords) inside its bounding box."""
    if tec.pattern.is_empty() or len(coords) == 0:
        return 0.0

    pattern_size = len(tec.pattern)
    best = 0.0
    for occurrence in tec.expand():
        lower, upper = _bounding_box(occurrence.to_array())
        inside = np.all((coords >= lower) & (coords <= upper), axis=1)
        count = int(np.count_nonzero(inside))
        if count:
            best = max(best, pattern_size / count)
    return best


def _bounding_box(coords: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    return coords.min(axis=0), coords.max(axis=0)


def better_first(left: TecStats, right: TecStats) -> int:
    """Comparator for functools.cmp_to_key: better stats sort first, ties keep input order."""
    if left.is_better_than(right):
        return -1
    if right.is_better_than(left):
        return 1
    return 0
