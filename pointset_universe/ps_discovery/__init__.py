"""
ps_discovery: MTP and TEC discovery algorithms.

Provides:
- algorithm: MtpAlgorithm / TecAlgorithm interfaces (streaming + eager)
- sia: SIA (all forward differences)
- siar: SIAR (windowed SIA, r successors)
- siatec: SIATEC (MTP patterns with all translators)
- diff_index: sorted and hashed difference indexes with chain matching
- siatec_c: SIATEC-C (max inter-onset interval windows)
- siatec_ch: SIATEC-CH (hash index + cover pruning)
- registry: AlgorithmConfig, build_algorithm, describe

registry is not imported here; it depends on ps_compress, which in turn
imports this package.
"""

from .algorithm import MtpAlgorithm, TecAlgorithm
from .sia import Sia
from .siar import SiaR
from .siatec import Siatec
from .siatec_c import SiatecC
from .siatec_ch import SiatecCH

__all__ = [
    "MtpAlgorithm",
    "Sia",
    "SiaR",
    "Siatec",
    "SiatecC",
    "SiatecCH",
    "TecAlgorithm",
]
