"""
Algorithm selection by name.

AlgorithmConfig carries every tunable parameter; build_algorithm turns it
into a ready-to-run instance and describe renders the display name used in
output file names and logs.

Names (case-insensitive): SIA, SIAR, SIATEC, SIATEC-C, SIATEC-CH.
Coverings: COSIATEC, SIATEC-COMPRESS (TEC algorithms only).
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from ps_compress.cosiatec import Cosiatec
from ps_compress.siatec_compress import SiatecCompress

from .algorithm import MtpAlgorithm, TecAlgorithm
from .sia import Sia
from .siar import SiaR
from .siatec import Siatec
from .siatec_c import SiatecC
from .siatec_ch import SiatecCH

MTP_ALGORITHMS = ["SIA", "SIAR"]
TEC_ALGORITHMS = ["SIATEC", "SIATEC-C", "SIATEC-CH"]
COVERINGS = ["COSIATEC", "SIATEC-COMPRESS"]

DEFAULT_R = 3
DEFAULT_MAX_IOI = 10.0


@dataclass(frozen=True)
class AlgorithmConfig:
    """
    Parameters selecting and tuning one discovery algorithm.

    Attributes:
        name: Algorithm name, normalised to upper case
        r: SIAR window size
        max_ioi: SIATEC-C / SIATEC-CH maximum inter-onset interval
        remove_duplicates: SIATEC keeps one pattern per vectorized form
        covering: Optional covering algorithm wrapped around a TEC algorithm
    """
    name: str
    r: int = DEFAULT_R
    max_ioi: float = DEFAULT_MAX_IOI
    remove_duplicates: bool = False
    covering: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "name", self.name.upper())
        valid_names = MTP_ALGORITHMS + TEC_ALGORITHMS
        if self.name not in valid_names:
            raise ValueError(f"Invalid algorithm '{self.name}'. Must be one of {valid_names}")

        if not isinstance(self.r, int) or self.r < 1:
            raise ValueError(f"r must be a positive integer, got {self.r!r}")

        if not self.max_ioi > 0:
            raise ValueError(f"max_ioi must be positive, got {self.max_ioi!r}")
        object.__setattr__(self, "max_ioi", float(self.max_ioi))

        if self.covering is not None:
            object.__setattr__(self, "covering", self.covering.upper())
            if self.covering not in COVERINGS:
                raise ValueError(
                    f"Invalid covering '{self.covering}'. Must be one of {COVERINGS}"
                )
            if self.name in MTP_ALGORITHMS:
                raise ValueError(
                    f"Covering {self.covering} requires a TEC algorithm, got {self.name}"
                )

    @property
    def produces_mtps(self) -> bool:
        return self.name in MTP_ALGORITHMS

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlgorithmConfig":
        known = {"name", "r", "max_ioi", "remove_duplicates", "covering"}
        return cls(**{key: value for key, value in data.items() if key in known})


def build_algorithm(config: AlgorithmConfig) -> Union[MtpAlgorithm, TecAlgorithm]:
    """
    Instantiate the algorithm described by config.

    Returns:
        An MtpAlgorithm for SIA/SIAR, otherwise a TecAlgorithm (wrapped in the
        covering algorithm when one is configured)
    """
    if config.name == "SIA":
        return Sia()
    if config.name == "SIAR":
        return SiaR(r=config.r)

    if config.name == "SIATEC":
        algorithm: TecAlgorithm = Siatec(remove_duplicates=config.remove_duplicates)
    elif config.name == "SIATEC-C":
        algorithm = SiatecC(max_ioi=config.max_ioi)
    else:
        algorithm = SiatecCH(max_ioi=config.max_ioi)

    if config.covering == "COSIATEC":
        return Cosiatec(algorithm)
    if config.covering == "SIATEC-COMPRESS":
        return SiatecCompress(algorithm)
    return algorithm


def describe(config: AlgorithmConfig) -> str:
    """Display name, e.g. 'SIAR (r=3)' or 'COSIATEC over SIATEC-C (max-ioi=10.0)'."""
    if config.name == "SIAR":
        base = f"SIAR (r={config.r})"
    elif config.name in ("SIATEC-C", "SIATEC-CH"):
        base = f"{config.name} (max-ioi={config.max_ioi})"
    elif config.name == "SIATEC" and config.remove_duplicates:
        base = "SIATEC (remove-duplicates)"
    else:
        base = config.name

    if config.covering is not None:
        return f"{config.covering} over {base}"
    return base
