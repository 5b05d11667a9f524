"""
ps_io: Reading point sets and writing discovered patterns.

Provides:
- csv_reader: CSV -> points for each point type
- json_writer: TEC -> JSON (single file or one file per TEC)
- output_writer: OutputWriter batching sink for streaming discovery
"""

from .csv_reader import read_point_set, read_points
from .json_writer import write_tecs_to_json, write_tecs_to_json_files
from .output_writer import OutputWriter

__all__ = [
    "OutputWriter",
    "read_point_set",
    "read_points",
    "write_tecs_to_json",
    "write_tecs_to_json_files",
]
