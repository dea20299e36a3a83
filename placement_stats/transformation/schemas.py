"""
Transformation Layer Schemas

Aggregation results handed to the presentation and load layers. Both are
frozen, so results compare by value and cannot be mutated by consumers.
"""

from dataclasses import dataclass
from typing import Tuple

import polars as pl


@dataclass(frozen=True)
class SummaryStatistics:
    """Headline numbers over all placement records"""

    total_count: int
    mean_package: float
    median_package: float
    max_package: float
    unique_company_count: int


@dataclass(frozen=True)
class CompanyStatistics:
    """Numbers for one employer; distinct_profiles keeps first-seen order"""

    company: str
    placed_count: int
    average_package: float
    distinct_profiles: Tuple[str, ...]


EMPTY_SUMMARY = SummaryStatistics(
    total_count=0,
    mean_package=0,
    median_package=0,
    max_package=0,
    unique_company_count=0,
)

COMPANY_STATS_SCHEMA = pl.Schema(
    [
        ("company", pl.String()),
        ("placed_count", pl.UInt32()),
        ("average_package", pl.Float64()),
        ("distinct_profiles", pl.List(pl.String())),
    ]
)
