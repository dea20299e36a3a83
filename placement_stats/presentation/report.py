"""
Text rendering of the placement statistics page.
"""

from typing import List, Optional, Sequence

from placement_stats.extract.schemas import PlacementRecord
from placement_stats.transformation.schemas import CompanyStatistics, SummaryStatistics
from .formatters import format_date, format_package, format_profiles
from .selection import is_expanded

RULE = "=" * 60


def render_summary(summary: SummaryStatistics) -> List[str]:
    return [
        f"Total Placements: {summary.total_count}",
        f"Average Package:  {format_package(summary.mean_package)}",
        f"Median Package:   {format_package(summary.median_package)}",
        f"Companies:        {summary.unique_company_count}",
    ]


def render_company(stats: CompanyStatistics) -> List[str]:
    return [
        stats.company,
        f"  Students Placed: {stats.placed_count}",
        f"  Avg Package:     {format_package(stats.average_package)}",
        f"  Profiles:        {format_profiles(stats.distinct_profiles)}",
    ]


def render_student(record: PlacementRecord) -> List[str]:
    return [
        f"{record.student_name} ({record.roll_number}) - {record.course}",
        f"  {record.company}, {record.job_profile}",
        f"  {format_package(record.package)} on {format_date(record.placement_date)}",
    ]


def render_stats_report(
    summary: SummaryStatistics,
    companies: Sequence[CompanyStatistics],
    records: Optional[Sequence[PlacementRecord]] = None,
    expanded_company: Optional[str] = None,
    placements: Sequence[PlacementRecord] = (),
) -> str:
    """
    Render the statistics page as plain text

    Args:
        summary: Headline statistics
        companies: Company statistics in presentation order
        records: Placed students to list; when omitted a short teaser with
            the highest and average package is shown instead
        expanded_company: Company whose card is expanded to list its placed
            students, taken from ``placements``
        placements: Records backing the expanded company card

    Returns:
        str: Multi-line report
    """
    lines = ["Placement Statistics", RULE]
    lines.extend(render_summary(summary))

    lines.extend(["", "Company-wise Placements", RULE])
    for stats in companies:
        lines.extend(render_company(stats))
        if is_expanded(expanded_company, stats.company):
            for record in placements:
                if record.company == stats.company:
                    lines.append(
                        f"    - {record.student_name} ({record.roll_number})"
                    )

    lines.extend(["", "Placed Students", RULE])
    if records is not None:
        for record in records:
            lines.extend(render_student(record))
    else:
        lines.append(
            f"{summary.total_count} students have been successfully placed"
        )
        lines.append(f"Highest Package: {format_package(summary.max_package)}")
        lines.append(f"Average Package: {format_package(summary.mean_package)}")

    return "\n".join(lines)
