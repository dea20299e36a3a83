"""
Test Presentation Helpers - formatting, category styles, selection, report text
"""

import sys
import os
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from placement_stats.extract.schemas import PlacementRecord
from placement_stats.presentation.formatters import format_date, format_package
from placement_stats.presentation.report import render_stats_report
from placement_stats.presentation.selection import is_expanded, toggle_selection
from placement_stats.presentation.styles import (
    DEFAULT_CATEGORY_STYLE,
    JOB_CATEGORY_STYLES,
    NOTICE_CATEGORY_STYLES,
    SOCIETY_CATEGORY_STYLES,
    category_style,
)
from placement_stats.transformation.aggregator import aggregate


def test_format_package_lpa_threshold():
    assert format_package(100000) == "₹1.0 LPA"
    assert format_package(1250000) == "₹12.5 LPA"
    assert format_package(4400000) == "₹44.0 LPA"


def test_format_package_below_threshold():
    assert format_package(99999) == "₹99,999"
    assert format_package(85000) == "₹85,000"
    assert format_package(0) == "₹0"


def test_format_package_does_not_change_value():
    amount = 1234567.0
    format_package(amount)
    assert amount == 1234567.0


def test_format_date():
    assert format_date(date(2024, 3, 5)) == "5 Mar 2024"
    assert format_date(date(2024, 11, 18)) == "18 Nov 2024"


def test_category_style_known_keys():
    assert category_style(NOTICE_CATEGORY_STYLES, "placement").startswith("bg-blue")
    assert category_style(SOCIETY_CATEGORY_STYLES, "Literary").startswith("bg-pink")
    assert category_style(JOB_CATEGORY_STYLES, 1).startswith("bg-red")


def test_category_style_unknown_falls_back_to_default():
    assert category_style(NOTICE_CATEGORY_STYLES, "misc") == DEFAULT_CATEGORY_STYLE
    assert category_style(SOCIETY_CATEGORY_STYLES, "technical") == DEFAULT_CATEGORY_STYLE
    assert category_style(JOB_CATEGORY_STYLES, 9) == DEFAULT_CATEGORY_STYLE
    assert category_style(JOB_CATEGORY_STYLES, None) == DEFAULT_CATEGORY_STYLE


def test_toggle_selection():
    selected = toggle_selection(None, "job-1")
    assert selected == "job-1"
    assert is_expanded(selected, "job-1")

    selected = toggle_selection(selected, "job-2")
    assert selected == "job-2"
    assert not is_expanded(selected, "job-1")

    selected = toggle_selection(selected, "job-2")
    assert selected is None
    assert not is_expanded(selected, "job-2")


def make_records():
    return [
        PlacementRecord(
            id="p-1",
            student_name="Aarav Sharma",
            roll_number="21103045",
            company="Microsoft",
            job_profile="Software Engineer",
            package=4400000.0,
            placement_date=date(2024, 9, 12),
            course="B.Tech CSE",
        ),
        PlacementRecord(
            id="p-2",
            student_name="Ananya Gupta",
            roll_number="21104007",
            company="Infosys",
            job_profile="Systems Engineer",
            package=360000.0,
            placement_date=date(2024, 11, 18),
            course="B.Tech IT",
        ),
    ]


def test_render_report_with_teaser():
    records = make_records()
    summary, companies = aggregate(records)

    text = render_stats_report(summary, companies)

    assert "Total Placements: 2" in text
    assert "Companies:        2" in text
    assert text.index("Microsoft") < text.index("Infosys")
    assert "2 students have been successfully placed" in text
    assert "Highest Package: ₹44.0 LPA" in text
    assert "Aarav Sharma" not in text


def test_render_report_with_student_list():
    records = make_records()
    summary, companies = aggregate(records)

    text = render_stats_report(summary, companies, records=records)

    assert "Aarav Sharma (21103045) - B.Tech CSE" in text
    assert "₹3.6 LPA on 18 Nov 2024" in text
    assert "successfully placed" not in text


def test_render_report_empty():
    summary, companies = aggregate([])

    text = render_stats_report(summary, companies)

    assert "Total Placements: 0" in text
    assert "Average Package:  ₹0" in text
    assert "0 students have been successfully placed" in text


def test_render_report_expands_one_company():
    records = make_records()
    summary, companies = aggregate(records)

    text = render_stats_report(
        summary, companies, expanded_company="Infosys", placements=records
    )

    assert "    - Ananya Gupta (21104007)" in text
    assert "    - Aarav Sharma (21103045)" not in text


def test_render_report_unknown_expanded_company_lists_nobody():
    records = make_records()
    summary, companies = aggregate(records)

    text = render_stats_report(
        summary, companies, expanded_company="Google", placements=records
    )

    assert "    - " not in text
