"""
Statistics Aggregator - Transform Layer

Pure functions turning a sequence of placement records into headline
summary statistics and per-company statistics.
"""

from typing import Sequence, Tuple

import polars as pl

from placement_stats.extract.schemas import RAW_PLACEMENTS_SCHEMA, PlacementRecord
from .schemas import (
    COMPANY_STATS_SCHEMA,
    EMPTY_SUMMARY,
    CompanyStatistics,
    SummaryStatistics,
)
import logging

logger = logging.getLogger(__name__)


def records_to_frame(records: Sequence[PlacementRecord]) -> pl.DataFrame:
    """
    Build a placements DataFrame, preserving input order

    Args:
        records: Placement records

    Returns:
        pl.DataFrame: One row per record with RAW_PLACEMENTS_SCHEMA
    """
    return pl.DataFrame(
        {
            "id": [r.id for r in records],
            "student_name": [r.student_name for r in records],
            "roll_number": [r.roll_number for r in records],
            "company": [r.company for r in records],
            "job_profile": [r.job_profile for r in records],
            "package": [float(r.package) for r in records],
            "placement_date": [r.placement_date for r in records],
            "course": [r.course for r in records],
        },
        schema=RAW_PLACEMENTS_SCHEMA,
    )


def median_of_sorted(values: Sequence[float]) -> float:
    """Median of ascending values; mean of the two central values when even"""
    n = len(values)
    if n == 0:
        return 0
    if n % 2 == 0:
        return (values[n // 2 - 1] + values[n // 2]) / 2
    return values[n // 2]


def company_stats_frame(df: pl.DataFrame) -> pl.DataFrame:
    """
    Group placements by exact company name in first-seen order

    Args:
        df: Placements DataFrame

    Returns:
        pl.DataFrame: One row per company with COMPANY_STATS_SCHEMA
    """
    return (
        df.group_by("company", maintain_order=True)
        .agg(
            [
                pl.len().alias("placed_count"),
                pl.col("package").mean().alias("average_package"),
                pl.col("job_profile")
                .unique(maintain_order=True)
                .alias("distinct_profiles"),
            ]
        )
        .cast(dict(COMPANY_STATS_SCHEMA))
    )


def summarize(df: pl.DataFrame, unique_company_count: int) -> SummaryStatistics:
    """
    Headline statistics for a placements DataFrame

    Args:
        df: Placements DataFrame
        unique_company_count: Number of company groups

    Returns:
        SummaryStatistics: Zeros for an empty frame
    """
    if df.height == 0:
        return EMPTY_SUMMARY

    packages = df.get_column("package")
    return SummaryStatistics(
        total_count=df.height,
        mean_package=packages.sum() / df.height,
        median_package=median_of_sorted(packages.sort().to_list()),
        max_package=packages.max(),
        unique_company_count=unique_company_count,
    )


def aggregate(
    records: Sequence[PlacementRecord],
) -> Tuple[SummaryStatistics, Tuple[CompanyStatistics, ...]]:
    """
    Compute summary and per-company statistics

    Company names are grouped verbatim (no trimming or case folding) and
    returned in the order each company first appears in ``records``.
    Never mutates ``records``; equal inputs give equal results.

    Args:
        records: Placement records, possibly empty

    Returns:
        Tuple: (SummaryStatistics, company statistics in first-seen order)
    """
    logger.debug(f"Aggregating {len(records)} placement records")

    df = records_to_frame(records)
    companies_df = company_stats_frame(df)

    companies = tuple(
        CompanyStatistics(
            company=row["company"],
            placed_count=row["placed_count"],
            average_package=row["average_package"],
            distinct_profiles=tuple(row["distinct_profiles"]),
        )
        for row in companies_df.iter_rows(named=True)
    )
    summary = summarize(df, unique_company_count=len(companies))

    logger.debug(
        f"Aggregated {summary.total_count} records into {len(companies)} companies"
    )
    return summary, companies


def companies_to_frame(companies: Sequence[CompanyStatistics]) -> pl.DataFrame:
    """
    Company statistics as a DataFrame (for export)

    Args:
        companies: Company statistics in presentation order

    Returns:
        pl.DataFrame: COMPANY_STATS_SCHEMA rows in the same order
    """
    return pl.DataFrame(
        {
            "company": [c.company for c in companies],
            "placed_count": [c.placed_count for c in companies],
            "average_package": [c.average_package for c in companies],
            "distinct_profiles": [list(c.distinct_profiles) for c in companies],
        },
        schema=COMPANY_STATS_SCHEMA,
    )
