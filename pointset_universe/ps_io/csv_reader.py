"""
CSV point readers.

Expected layout:
- a header row
- x (onset) in the first column
- y (pitch) in the second column
- any further columns are ignored
"""

import csv
import logging
from pathlib import Path
from typing import List, Type, Union

from ps_core.point_set import PointSet
from ps_core.types import Point, Point2D, Point2DInt

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_points(path: PathLike, point_type: Type[Point] = Point2D) -> List[Point]:
    """
    Read points from a CSV file.

    Args:
        path: CSV file path
        point_type: Point2D, Point2DRounded or Point2DInt

    Returns:
        Points in file order (duplicates kept)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If a row lacks x or y, or a value does not parse
    """
    parse = int if point_type is Point2DInt else float
    points = []
    with open(path, "r", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for row_number, row in enumerate(reader, start=2):
            if not row:
                continue
            x = _value_at(row, 0, row_number, parse)
            y = _value_at(row, 1, row_number, parse)
            points.append(point_type(x, y))

    logger.debug(f"Read {len(points)} points from {path}")
    return points


def _value_at(row: List[str], column: int, row_number: int, parse):
    if column >= len(row) or not row[column].strip():
        raise ValueError(f"Value missing at row {row_number}, column {column}")
    try:
        return parse(row[column].strip())
    except ValueError as e:
        raise ValueError(
            f"Invalid value '{row[column]}' at row {row_number}, column {column}"
        ) from e


def read_point_set(path: PathLike, point_type: Type[Point] = Point2D) -> PointSet:
    return PointSet(read_points(path, point_type))
