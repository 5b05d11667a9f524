"""
JSON serialization of TECs.

Each TEC becomes one object:

    {
      "piece": "<piece name>",
      "pattern": {"label": "P3", "source": "<algorithm>",
                  "data_type": "point_set", "data": [[x, y], ...]},
      "occurrences": [<pattern object per translated copy>, ...]
    }

Labels are "P<i>" with i counted from start_label.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from ps_core.pattern import Pattern
from ps_core.tec import Tec

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def pattern_to_json(label: str, source: str, pattern: Pattern) -> Dict[str, Any]:
    return {
        "label": label,
        "source": source,
        "data_type": "point_set",
        "data": [list(point.components()) for point in pattern],
    }


def tec_to_json(piece: str, source: str, label: str, tec: Tec) -> Dict[str, Any]:
    expanded = tec.expand()
    return {
        "piece": piece,
        "pattern": pattern_to_json(label, source, expanded[0]),
        "occurrences": [pattern_to_json(label, source, p) for p in expanded[1:]],
    }


def tecs_to_json(
    piece: str, source: str, tecs: Sequence[Tec], start_label: int = 0
) -> List[Dict[str, Any]]:
    return [
        tec_to_json(piece, source, f"P{start_label + i}", tec) for i, tec in enumerate(tecs)
    ]


def write_tecs_to_json(
    piece: str, source: str, tecs: Sequence[Tec], path: PathLike, start_label: int = 0
) -> None:
    """Write all TECs as one JSON list to path."""
    with open(path, "w") as f:
        json.dump(tecs_to_json(piece, source, tecs, start_label), f, indent=2)
    logger.debug(f"Wrote {len(tecs)} TECs to {path}")


def write_tecs_to_json_files(
    piece: str, source: str, tecs: Sequence[Tec], directory: PathLike
) -> List[Path]:
    """
    Write one JSON file per TEC (P0.json, P1.json, ...) into directory.

    Returns:
        Paths of the written files
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    written = []
    for i, tec in enumerate(tecs):
        label = f"P{i}"
        tec_file = directory / f"{label}.json"
        with open(tec_file, "w") as f:
            json.dump(tec_to_json(piece, source, label, tec), f, indent=2)
        written.append(tec_file)
    return written
