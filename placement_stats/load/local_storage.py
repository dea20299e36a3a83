"""
Local Storage - Load Layer

Pure functions for writing aggregation results to the output directory.
"""

import polars as pl
import json
import os
from dataclasses import asdict
from datetime import date
from typing import Any, Dict, Optional, Sequence

from placement_stats.transformation.aggregator import companies_to_frame
from placement_stats.transformation.schemas import CompanyStatistics, SummaryStatistics
import logging

logger = logging.getLogger(__name__)


def _ensure_parent(filepath: str) -> None:
    parent = os.path.dirname(filepath)
    if parent:
        os.makedirs(parent, exist_ok=True)


def save_parquet(df: pl.DataFrame, filepath: str) -> str:
    """
    Save DataFrame to Parquet file

    Args:
        df: DataFrame to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving DataFrame to Parquet: {filepath}")

    _ensure_parent(filepath)
    df.write_parquet(filepath)

    logger.info(f"Saved {df.height} records to {filepath}")
    return filepath


def save_json(data: Any, filepath: str) -> str:
    """
    Save a JSON-serialisable payload to file

    Args:
        data: Payload to save
        filepath: Path to save file

    Returns:
        str: Path to saved file
    """
    logger.info(f"Saving JSON: {filepath}")

    _ensure_parent(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)

    logger.info(f"Saved JSON to {filepath}")
    return filepath


def stats_to_dict(
    summary: SummaryStatistics, companies: Sequence[CompanyStatistics]
) -> Dict[str, Any]:
    """Plain-dict form of an aggregation result, companies kept in order"""
    return {
        "summary": asdict(summary),
        "companies": [
            {**asdict(c), "distinct_profiles": list(c.distinct_profiles)}
            for c in companies
        ],
    }


def save_stats(
    summary: SummaryStatistics,
    companies: Sequence[CompanyStatistics],
    output_dir: str = "output",
    today: Optional[str] = None,
) -> Dict[str, str]:
    """
    Save an aggregation result to files

    Args:
        summary: Headline statistics
        companies: Company statistics in presentation order
        output_dir: Output directory
        today: Date string for file naming (defaults to today)

    Returns:
        Dict: Paths to saved files
    """
    today = today or date.today().strftime("%Y-%m-%d")

    json_path = os.path.join(output_dir, f"stats_{today}.json")
    parquet_path = os.path.join(output_dir, f"company_stats_{today}.parquet")

    return {
        "json": save_json(stats_to_dict(summary, companies), json_path),
        "parquet": save_parquet(companies_to_frame(companies), parquet_path),
    }
