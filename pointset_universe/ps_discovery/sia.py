"""
SIA: maximal translatable patterns from all forward differences.

Algorithm:
1. For every pair i < j compute (p[j] - p[i], i)
2. Sort by (difference, i)
3. Each run of equal non-zero difference is one MTP: the run's source points

O(n^2 log n) time, O(n^2) memory.
"""

import logging

from ps_core.point_set import PointSet

from .algorithm import (
    MtpAlgorithm,
    MtpSink,
    compute_forward_differences,
    mtp_from_run,
    partition_differences,
)

logger = logging.getLogger(__name__)


class Sia(MtpAlgorithm):
    name = "SIA"

    def compute_mtps_to_output(self, point_set: PointSet, on_output: MtpSink) -> None:
        forward_diffs = compute_forward_differences(point_set)
        logger.debug(f"SIA: {len(forward_diffs)} forward differences for {len(point_set)} points")

        for translator, indices in partition_differences(forward_diffs):
            # Distinct rounded points can differ by a vector that rounds to zero
            if translator.is_zero():
                continue
            on_output(mtp_from_run(point_set, translator, indices))
