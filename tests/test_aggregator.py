"""
Test Statistics Aggregator - Verify summary and company statistics
"""

import sys
import os
import random
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from placement_stats.extract.schemas import PlacementRecord
from placement_stats.transformation.aggregator import (
    aggregate,
    companies_to_frame,
    median_of_sorted,
)
from placement_stats.transformation.schemas import (
    COMPANY_STATS_SCHEMA,
    CompanyStatistics,
    SummaryStatistics,
)


def make_record(
    index: int,
    company: str = "Acme",
    package: float = 100.0,
    job_profile: str = "Engineer",
) -> PlacementRecord:
    return PlacementRecord(
        id=f"p-{index}",
        student_name=f"Student {index}",
        roll_number=f"R{index:05d}",
        company=company,
        job_profile=job_profile,
        package=package,
        placement_date=date(2024, 9, 1),
        course="B.Tech CSE",
    )


def make_records(packages, company="Acme"):
    return [make_record(i, company=company, package=p) for i, p in enumerate(packages)]


def test_empty_input_returns_zeros():
    summary, companies = aggregate([])

    assert summary == SummaryStatistics(
        total_count=0,
        mean_package=0,
        median_package=0,
        max_package=0,
        unique_company_count=0,
    )
    assert companies == ()


def test_median_odd_count():
    summary, _ = aggregate(make_records([300, 100, 200]))
    assert summary.median_package == 200


def test_median_even_count():
    summary, _ = aggregate(make_records([400, 100, 300, 200]))
    assert summary.median_package == 250


def test_median_single_value():
    summary, _ = aggregate(make_records([750]))
    assert summary.median_package == 750
    assert summary.mean_package == 750
    assert summary.max_package == 750


def test_median_of_sorted_rules():
    assert median_of_sorted([]) == 0
    assert median_of_sorted([1.0, 2.0, 3.0]) == 2.0
    assert median_of_sorted([1.0, 2.0, 3.0, 10.0]) == 2.5


def test_mean_times_count_equals_sum():
    packages = [350000, 1200000, 475000.5, 980000, 0, 2250000]
    summary, _ = aggregate(make_records(packages))

    assert summary.total_count == len(packages)
    assert summary.mean_package * summary.total_count == pytest.approx(sum(packages))


def test_max_package_is_order_independent():
    packages = [120, 5000, 42, 5000, 17, 999]
    records = make_records(packages)
    shuffled = list(records)
    random.Random(7).shuffle(shuffled)

    summary, _ = aggregate(records)
    shuffled_summary, _ = aggregate(shuffled)

    assert summary.max_package == max(packages)
    assert shuffled_summary.max_package == max(packages)


def test_grouping_preserves_first_seen_order():
    records = [
        make_record(1, company="A", package=100),
        make_record(2, company="B", package=200),
        make_record(3, company="A", package=300),
    ]

    summary, companies = aggregate(records)

    assert [c.company for c in companies] == ["A", "B"]
    assert companies[0].placed_count == 2
    assert companies[0].average_package == 200
    assert companies[1].placed_count == 1
    assert companies[1].average_package == 200
    assert summary.unique_company_count == 2


def test_company_names_are_grouped_verbatim():
    records = [
        make_record(1, company="Acme"),
        make_record(2, company="acme"),
        make_record(3, company="Acme "),
        make_record(4, company="Acme"),
    ]

    summary, companies = aggregate(records)

    assert [c.company for c in companies] == ["Acme", "acme", "Acme "]
    assert [c.placed_count for c in companies] == [2, 1, 1]
    assert summary.unique_company_count == len(companies)


def test_distinct_profiles_keep_first_seen_order():
    records = [
        make_record(1, company="Acme", job_profile="SDE"),
        make_record(2, company="Acme", job_profile="Analyst"),
        make_record(3, company="Acme", job_profile="SDE"),
        make_record(4, company="Other", job_profile="SDE"),
        make_record(5, company="Acme", job_profile="Data Scientist"),
    ]

    _, companies = aggregate(records)

    assert companies[0] == CompanyStatistics(
        company="Acme",
        placed_count=4,
        average_package=100.0,
        distinct_profiles=("SDE", "Analyst", "Data Scientist"),
    )
    assert companies[1].distinct_profiles == ("SDE",)


def test_aggregate_is_idempotent_and_does_not_mutate_input():
    records = [
        make_record(1, company="Zeta", package=900),
        make_record(2, company="Alpha", package=100),
        make_record(3, company="Zeta", package=300),
    ]
    snapshot = list(records)

    first = aggregate(records)
    second = aggregate(records)

    assert first == second
    assert records == snapshot


def test_unique_company_count_matches_company_stats_length():
    companies_in = ["A", "B", "C", "B", "D", "A", "E"]
    records = [make_record(i, company=c) for i, c in enumerate(companies_in)]

    summary, companies = aggregate(records)

    assert summary.unique_company_count == len(companies) == 5


def test_results_are_immutable():
    summary, companies = aggregate(make_records([100, 200]))

    with pytest.raises(AttributeError):
        summary.total_count = 10
    with pytest.raises(AttributeError):
        companies[0].placed_count = 10


def test_companies_to_frame_keeps_order_and_schema():
    records = [
        make_record(1, company="B", package=100, job_profile="SDE"),
        make_record(2, company="A", package=300, job_profile="QA"),
    ]
    _, companies = aggregate(records)

    df = companies_to_frame(companies)

    assert df.schema == COMPANY_STATS_SCHEMA
    assert df.get_column("company").to_list() == ["B", "A"]
    assert df.get_column("distinct_profiles").to_list() == [["SDE"], ["QA"]]


def test_companies_to_frame_empty():
    df = companies_to_frame(())
    assert df.height == 0
    assert df.schema == COMPANY_STATS_SCHEMA
