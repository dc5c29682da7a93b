#!/usr/bin/env python3
"""Label a LOB snapshot CSV with forward-looking direction labels.

Reads top-5 book snapshots, computes features per snapshot, labels each row
down/flat/up from the mid price horizon_sec later, and writes the labeled
rows to a CSV file or an Iceberg table.

Usage:
    loblabel -i book.csv.gz -o labeled.csv.gz [--horizon-sec 1.0]
    loblabel -i book.csv.gz --iceberg-table research.labeled_btc

Environment variables (Iceberg output only):
    ICEBERG_CATALOG_URI: SQL connection string for the Iceberg catalog
    ICEBERG_WAREHOUSE: Warehouse path (gs://... or file://...)
"""

import argparse
import logging
import sys
from collections.abc import Sequence

import pyarrow as pa

from loblabel.config import LabelingConfig
from loblabel.ingest.csv_reader import SnapshotDecodeError, SnapshotReader
from loblabel.pipeline import DEFAULT_PROGRESS_EVERY, LabelingSummary, run_pipeline
from loblabel.storage.csv_writer import LabeledCsvWriter
from loblabel.storage.iceberg_sink import (
    LabeledTableWriter,
    create_labeled_table,
    get_catalog,
)
from loblabel.storage.streams import open_input_stream

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    defaults = LabelingConfig()
    parser = argparse.ArgumentParser(
        description="LOB streaming featurizer + labeler."
    )
    parser.add_argument(
        "-i", "--input", required=True, help="Input snapshot file (.csv or .csv.gz)"
    )
    output = parser.add_mutually_exclusive_group(required=True)
    output.add_argument(
        "-o", "--output", help="Output file (.csv or .csv.gz, .gz recommended)"
    )
    output.add_argument(
        "--iceberg-table",
        help="Write to this Iceberg table (namespace.table) instead of a file",
    )
    parser.add_argument(
        "--horizon-sec",
        type=float,
        default=defaults.horizon_sec,
        help=f"Forecast horizon in seconds (default: {defaults.horizon_sec})",
    )
    parser.add_argument(
        "--eps-min",
        type=float,
        default=defaults.eps_min,
        help=f"Minimum deadband, e.g. 3e-4 = 3 bp (default: {defaults.eps_min})",
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=defaults.alpha,
        help=f"Multiplier on the relative spread (default: {defaults.alpha})",
    )
    parser.add_argument(
        "--cost-bp",
        type=float,
        default=defaults.cost_bp,
        help=f"Fixed cost floor as a fraction, e.g. 2e-4 = 2 bp (default: {defaults.cost_bp})",
    )
    parser.add_argument(
        "--progress-every",
        type=int,
        default=DEFAULT_PROGRESS_EVERY,
        help="Log progress every N input rows, 0 to disable "
        f"(default: {DEFAULT_PROGRESS_EVERY})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def label_file(args: argparse.Namespace, config: LabelingConfig) -> LabelingSummary:
    """Run the pipeline from args.input to the selected output.

    The input is opened before the output so a bad input path leaves any
    existing output untouched.
    """
    with open_input_stream(args.input) as stream:
        snapshots = SnapshotReader(stream)

        if args.iceberg_table:
            table = create_labeled_table(get_catalog(), args.iceberg_table)
            with LabeledTableWriter(table) as sink:
                return run_pipeline(
                    snapshots, sink, config, progress_every=args.progress_every
                )

        with LabeledCsvWriter(args.output) as sink:
            return run_pipeline(
                snapshots, sink, config, progress_every=args.progress_every
            )


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = LabelingConfig(
            horizon_sec=args.horizon_sec,
            eps_min=args.eps_min,
            alpha=args.alpha,
            cost_bp=args.cost_bp,
        )
        logger.info(f"Labeling {args.input} with {config}")
        summary = label_file(args, config)
    except SnapshotDecodeError as e:
        logger.error(f"Failed to decode {args.input}: {e}")
        return 1
    except (OSError, ValueError, pa.ArrowException) as e:
        logger.error(f"Labeling failed: {e}")
        return 1

    logger.info(summary.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
