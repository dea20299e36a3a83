"""
Main Entry Point - Placement Statistics

Loads placements.json, aggregates it and prints the statistics page.

Usage:
    placement-stats report --source data/placements.json
    placement-stats report --source https://example.org/data/placements.json --dry-run
"""

import argparse
import logging
import sys
from typing import List, Optional

from placement_stats.coreutils import env
from placement_stats.coreutils.logging import setup_logging
from placement_stats.extract.exceptions import PlacementDataError
from placement_stats.orchestration.pipeline import StatsPipeline
from placement_stats.presentation.report import render_stats_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Campus Placement Statistics")
    parser.add_argument("command", choices=["report"], help="Command to run")
    parser.add_argument(
        "--source",
        default=None,
        help="Path or URL of placements.json (env: PLACEMENTS_SOURCE)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for exported statistics (env: PLACEMENTS_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report without saving any files",
    )
    parser.add_argument(
        "--show-students",
        action="store_true",
        help="List every placed student",
    )
    parser.add_argument(
        "--expand",
        default=None,
        metavar="COMPANY",
        help="Expand one company card to list its placed students",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logger = setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_dir=env.log_dir(),
    )

    pipeline = StatsPipeline(
        source=args.source or env.placements_source(),
        output_dir=args.output_dir or env.output_dir(),
        dry_run=args.dry_run,
        timeout=env.http_timeout(),
    )

    try:
        result = pipeline.run()
    except PlacementDataError as e:
        logger.error(f"❌ Statistics unavailable: {e}")
        return 1

    print(
        render_stats_report(
            result.summary,
            result.companies,
            records=result.records if args.show_students else None,
            expanded_company=args.expand,
            placements=result.records,
        )
    )
    for kind, path in result.saved_files.items():
        print(f"✅ Saved {kind}: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
