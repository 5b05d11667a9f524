"""
Batched pattern output for streaming discovery.

OutputWriter is the sink handed to the `*_to_output` entry points. TECs are
buffered and written in batches of batch_size to

    <output_dir>/patterns_<piece>_<algorithm>_<batch>.json

MTPs are converted to one-translator TECs first. With output_dir
"/dev/null" nothing is written but patterns are still counted.
"""

import logging
from pathlib import Path
from typing import List, Union

from ps_core.tec import Mtp, Tec

from .json_writer import write_tecs_to_json

logger = logging.getLogger(__name__)

NULL_OUTPUT = Path("/dev/null")
DEFAULT_BATCH_SIZE = 100


class OutputWriter:
    """
    Args:
        piece: Piece name used in file names and the JSON "piece" field
        algorithm: Algorithm display name (JSON "source" field)
        output_dir: Destination directory, or /dev/null to discard
        batch_size: TECs per output file, >= 1
    """

    def __init__(
        self,
        piece: str,
        algorithm: str,
        output_dir: Union[str, Path],
        batch_size: int = DEFAULT_BATCH_SIZE,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.piece = piece
        self.algorithm = algorithm
        self.output_dir = Path(output_dir)
        self.batch_size = batch_size
        self.batch: List[Tec] = []
        self.batch_number = 0
        self.output_count = 0
        self.written_files: List[Path] = []

    @property
    def discards_output(self) -> bool:
        return self.output_dir == NULL_OUTPUT

    def output_mtp(self, mtp: Mtp) -> None:
        self.output_tec(mtp.to_tec())

    def output_tec(self, tec: Tec) -> None:
        self.batch.append(tec)
        if len(self.batch) >= self.batch_size:
            self.flush()

    def flush(self) -> None:
        """Write the current batch (if any) and start the next one."""
        if not self.batch:
            return

        if not self.discards_output:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            file_name = f"patterns_{_safe_name(self.piece)}_{_safe_name(self.algorithm)}_{self.batch_number}.json"
            output_path = self.output_dir / file_name
            write_tecs_to_json(
                self.piece, self.algorithm, self.batch, output_path, start_label=self.output_count
            )
            self.written_files.append(output_path)

        self.output_count += len(self.batch)
        logger.debug(f"Flushed batch {self.batch_number} ({len(self.batch)} patterns)")
        self.batch = []
        self.batch_number += 1


def _safe_name(name: str) -> str:
    # Display names contain spaces and parentheses, e.g. "SIAR (r=3)"
    return "".join(c if c.isalnum() or c in "-_=." else "_" for c in name).strip("_")
