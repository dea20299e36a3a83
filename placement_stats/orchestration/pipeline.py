"""
Statistics Pipeline Orchestrator

Load → aggregate → (optionally) save. A failed load is logged and
re-raised; aggregation never runs on a partial or failed load.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

# Extract layer imports
from placement_stats.extract.data_fetcher import load_placements
from placement_stats.extract.exceptions import PlacementDataError
from placement_stats.extract.schemas import PlacementRecord

# Transform layer imports
from placement_stats.transformation.aggregator import aggregate
from placement_stats.transformation.schemas import CompanyStatistics, SummaryStatistics

# Load layer imports
from placement_stats.load.local_storage import save_stats

import logging

logger = logging.getLogger(__name__)


@dataclass
class StatsResult:
    """Everything the presentation layer needs for one page load"""

    records: List[PlacementRecord]
    summary: SummaryStatistics
    companies: Tuple[CompanyStatistics, ...]
    saved_files: Dict[str, str] = field(default_factory=dict)


class StatsPipeline:
    """Orchestrates loading, aggregating and exporting placement statistics"""

    def __init__(
        self,
        source: str,
        output_dir: str = "output",
        dry_run: bool = False,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the statistics pipeline

        Args:
            source: Path or URL of placements.json
            output_dir: Directory for exported statistics
            dry_run: If true, skip writing output files
            timeout: HTTP timeout in seconds for URL sources
        """
        self.source = source
        self.output_dir = output_dir
        self.dry_run = dry_run
        self.timeout = timeout

        if self.dry_run:
            logger.info("🔍 DRY RUN MODE: statistics will not be saved")

    def run(self) -> StatsResult:
        """
        Run the full pipeline

        Returns:
            StatsResult: Loaded records, statistics and saved file paths

        Raises:
            PlacementDataError: When the source is unavailable or malformed
        """
        logger.info(f"🚀 Starting statistics pipeline for {self.source}")

        # Step 1: Load records (all-or-nothing)
        logger.info("🔄 Step 1: Loading placement records...")
        try:
            records = load_placements(self.source, timeout=self.timeout)
        except PlacementDataError as e:
            logger.error(f"❌ Could not load placements: {e}")
            raise

        # Step 2: Aggregate
        logger.info("🔄 Step 2: Aggregating statistics...")
        summary, companies = aggregate(records)
        logger.info(
            f"✅ {summary.total_count} placements across "
            f"{summary.unique_company_count} companies"
        )

        # Step 3: Save
        saved_files: Dict[str, str] = {}
        if not self.dry_run:
            logger.info("🔄 Step 3: Saving statistics...")
            saved_files = save_stats(summary, companies, self.output_dir)

        logger.info("🎉 Statistics pipeline completed successfully!")
        return StatsResult(
            records=records,
            summary=summary,
            companies=companies,
            saved_files=saved_files,
        )
