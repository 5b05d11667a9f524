"""
ps_compress: Compression-driven covering on top of TEC discovery.

Provides:
- heuristic: TecStats (compression ratio, compactness, ...) and is_better_than
- cosiatec: COSIATEC greedy covering
- siatec_compress: SIATECCompress single-pass covering
"""

from .cosiatec import Cosiatec
from .heuristic import TecStats, compute_tec_stats
from .siatec_compress import SiatecCompress

__all__ = [
    "Cosiatec",
    "SiatecCompress",
    "TecStats",
    "compute_tec_stats",
]
