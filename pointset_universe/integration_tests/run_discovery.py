#!/usr/bin/env python3
"""
Discovery runner: SIA-family pattern discovery over CSV pieces.

Loads each CSV piece, runs the selected algorithm streaming into an
OutputWriter (batched JSON files), and records one receipt per piece.

A failing piece is logged with its traceback, gets a FAIL receipt, and the
run continues with the next piece.

Usage:
    python run_discovery.py -a SIATEC-C -i ../../data -o out/ --max-ioi 4
    python run_discovery.py -a SIAR --sub-diag 5 -i piece.csv -o /dev/null
    python run_discovery.py -a SIATEC --covering COSIATEC -i piece.csv -o out/
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add parent directory to path to import ps_core and friends
sys.path.insert(0, str(Path(__file__).parent.parent))

from ps_core.types import POINT_TYPES, point_type_from_name
from ps_discovery.algorithm import MtpAlgorithm
from ps_discovery.registry import (
    COVERINGS,
    DEFAULT_MAX_IOI,
    DEFAULT_R,
    MTP_ALGORITHMS,
    TEC_ALGORITHMS,
    AlgorithmConfig,
    build_algorithm,
    describe,
)
from ps_io.csv_reader import read_point_set
from ps_io.output_writer import DEFAULT_BATCH_SIZE, OutputWriter

from utils import (
    build_receipt,
    compute_summary_stats,
    get_data_dir,
    list_pieces,
    piece_name,
    save_receipt,
    setup_logger,
)


def config_from_args(args: argparse.Namespace) -> AlgorithmConfig:
    return AlgorithmConfig(
        name=args.algo,
        r=args.sub_diag,
        max_ioi=args.max_ioi,
        remove_duplicates=args.remove_duplicates,
        covering=args.covering,
    )


def run_piece(
    csv_path: Path,
    config: AlgorithmConfig,
    point_type: str,
    output_dir: Path,
    batch_size: int,
    logger,
    piece: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Run discovery on a single CSV piece.

    Returns:
        Receipt dictionary
    """
    piece = piece or piece_name(csv_path)
    algorithm_name = describe(config)

    try:
        point_set = read_point_set(csv_path, point_type_from_name(point_type))
        logger.info(f"Piece {piece}: loaded {len(point_set)} points from {csv_path}")

        algorithm = build_algorithm(config)
        writer = OutputWriter(piece, algorithm_name, output_dir, batch_size)

        start = time.perf_counter()
        if isinstance(algorithm, MtpAlgorithm):
            algorithm.compute_mtps_to_output(point_set, writer.output_mtp)
        else:
            algorithm.compute_tecs_to_output(point_set, writer.output_tec)
        writer.flush()
        elapsed = time.perf_counter() - start

        logger.info(
            f"Piece {piece}: executed {algorithm_name} and saved "
            f"{writer.output_count} patterns in {elapsed:.3f}s"
        )

        return build_receipt(
            piece=piece,
            algorithm=algorithm_name,
            num_points=len(point_set),
            num_patterns=writer.output_count,
            seconds=elapsed,
            output_files=[str(p) for p in writer.written_files],
        )

    except Exception as e:
        logger.exception(f"Piece {piece}: Exception - {type(e).__name__}: {e}")
        return build_receipt(
            piece=piece, algorithm=algorithm_name, status="FAIL", error=str(e)
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translational pattern discovery over CSV point sets"
    )
    parser.add_argument(
        "--algo",
        "-a",
        type=str,
        required=True,
        help=f"Algorithm to run, one of {MTP_ALGORITHMS + TEC_ALGORITHMS}",
    )
    parser.add_argument(
        "--piece",
        "-p",
        type=str,
        default=None,
        help="Piece name (default: CSV file name; ignored for directories)",
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=None,
        help="CSV file or directory of CSV files (default: data/)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("/dev/null"),
        help="Output directory for JSON pattern files; /dev/null disables writing",
    )
    parser.add_argument(
        "--batch-size",
        "-b",
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help=f"Patterns per output file (default: {DEFAULT_BATCH_SIZE})",
    )
    parser.add_argument(
        "--max-ioi",
        type=float,
        default=DEFAULT_MAX_IOI,
        help=f"Maximum inter-onset interval for SIATEC-C/CH (default: {DEFAULT_MAX_IOI})",
    )
    parser.add_argument(
        "--sub-diag",
        type=int,
        default=DEFAULT_R,
        help=f"Number of subdiagonals for SIAR (default: {DEFAULT_R})",
    )
    parser.add_argument(
        "--remove-duplicates",
        action="store_true",
        help="SIATEC: keep one pattern per translational shape",
    )
    parser.add_argument(
        "--covering",
        type=str,
        default=None,
        help=f"Wrap the TEC algorithm in a covering algorithm, one of {COVERINGS}",
    )
    parser.add_argument(
        "--point-type",
        type=str,
        default="rounded",
        choices=sorted(POINT_TYPES),
        help="Point representation (default: rounded)",
    )
    parser.add_argument(
        "--limit", type=int, default=None, help="Maximum number of pieces to process"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup paths
    integration_dir = Path(__file__).parent
    logs_dir = integration_dir / "logs"
    receipts_dir = integration_dir / "receipts" / args.algo.lower()

    logger = setup_logger("discovery", logs_dir / "discovery.log")

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    input_path = args.input or get_data_dir()
    pieces = list_pieces(input_path, limit=args.limit)

    logger.info("=" * 80)
    logger.info(f"Discovery run: {describe(config)}")
    logger.info(f"Input: {input_path} ({len(pieces)} pieces)")
    logger.info(f"Output: {args.output}")
    logger.info(f"Point type: {args.point_type}")
    logger.info("=" * 80)

    receipts = []
    for csv_path in pieces:
        logger.info(f"\n--- Processing piece {csv_path.name} ---")
        piece = args.piece if args.piece and len(pieces) == 1 else None
        receipt = run_piece(
            csv_path, config, args.point_type, args.output, args.batch_size, logger, piece
        )
        receipts.append(receipt)
        save_receipt(receipt, receipts_dir)

    stats = compute_summary_stats(receipts)

    logger.info("\n" + "=" * 80)
    logger.info("SUMMARY STATISTICS")
    logger.info("=" * 80)
    logger.info(f"Total pieces: {stats['total_pieces']}")
    logger.info(f"Passed: {stats['passed']}")
    logger.info(f"Failed: {stats['failed']}")
    logger.info(f"Pass rate: {stats['pass_rate']:.2%}")

    if "patterns" in stats:
        logger.info(f"Patterns: {stats['patterns']['total']} total, "
                    f"{stats['patterns']['avg_per_piece']:.1f} per piece")
    if "timing" in stats:
        logger.info(f"Time: {stats['timing']['total_seconds']:.3f}s total, "
                    f"{stats['timing']['max_seconds']:.3f}s slowest piece")

    logger.info(f"Receipts saved to: {receipts_dir}")
    return receipts


if __name__ == "__main__":
    main()
