"""
Utility functions for discovery runs over CSV pieces.

Provides:
- Input discovery (single CSV file or directory of CSV files)
- Receipt generation and saving
- Summary statistics over receipts
- Logging setup
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


def get_data_dir() -> Path:
    """Get the absolute path to the data directory."""
    # pointset_universe/integration_tests/utils.py -> pointset_universe -> parent -> data
    return Path(__file__).parent.parent.parent / "data"


def list_pieces(input_path: Path, limit: Optional[int] = None) -> List[Path]:
    """
    List CSV pieces to process.

    Args:
        input_path: A CSV file, or a directory searched (non-recursively) for *.csv
        limit: Optional limit on number of pieces

    Returns:
        CSV paths in sorted order

    Raises:
        FileNotFoundError: If input_path doesn't exist
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input not found: {input_path}")

    if input_path.is_dir():
        pieces = sorted(input_path.glob("*.csv"))
    else:
        pieces = [input_path]

    if limit is not None:
        pieces = pieces[:limit]

    return pieces


def piece_name(csv_path: Path) -> str:
    """Piece name derived from the file name (without extension)."""
    return csv_path.stem


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for discovery runs.

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def build_receipt(
    piece: str,
    algorithm: str,
    num_points: Optional[int] = None,
    num_patterns: Optional[int] = None,
    seconds: Optional[float] = None,
    output_files: Optional[List[str]] = None,
    status: str = "PASS",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one piece.

    Args:
        piece: Piece name
        algorithm: Algorithm display name
        num_points: Size of the loaded point set
        num_patterns: Number of MTPs/TECs produced
        seconds: Wall-clock discovery time
        output_files: JSON files written for the piece
        status: "PASS" or "FAIL"
        error: Error message if status is FAIL

    Returns:
        Receipt dictionary
    """
    receipt = {
        "piece": piece,
        "algorithm": algorithm,
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if num_points is not None:
        receipt["num_points"] = num_points

    if num_patterns is not None:
        receipt["num_patterns"] = num_patterns

    if seconds is not None:
        receipt["seconds"] = seconds

    if output_files is not None:
        receipt["output_files"] = output_files

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> None:
    """
    Save receipt to JSON file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt (e.g., receipts/siatec/)
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{receipt['piece']}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Compute summary statistics from a list of receipts.

    Args:
        receipts: List of receipt dictionaries

    Returns:
        Summary statistics dictionary
    """
    total = len(receipts)
    passed = sum(1 for r in receipts if r["status"] == "PASS")

    stats = {
        "total_pieces": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": passed / total if total > 0 else 0.0,
    }

    timed = [r for r in receipts if "seconds" in r]
    if timed:
        seconds = [r["seconds"] for r in timed]
        stats["timing"] = {
            "total_seconds": sum(seconds),
            "avg_seconds": sum(seconds) / len(seconds),
            "max_seconds": max(seconds),
        }

    counted = [r for r in receipts if "num_patterns" in r]
    if counted:
        patterns = [r["num_patterns"] for r in counted]
        stats["patterns"] = {
            "total": sum(patterns),
            "avg_per_piece": sum(patterns) / len(patterns),
            "max_per_piece": max(patterns),
        }

    return stats
