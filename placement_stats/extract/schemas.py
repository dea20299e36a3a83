"""
Extract Layer Schemas

Raw placement record shape as it appears in placements.json, plus the
typed record handed to the transformation layer.
"""

from dataclasses import dataclass
from datetime import date

import polars as pl

# Field names in the JSON document, in column order
PLACEMENT_FIELDS = (
    "id",
    "student_name",
    "roll_number",
    "company",
    "job_profile",
    "package",
    "placement_date",
    "course",
)

STRING_FIELDS = (
    "id",
    "student_name",
    "roll_number",
    "company",
    "job_profile",
    "course",
)

RAW_PLACEMENTS_SCHEMA = pl.Schema(
    [
        ("id", pl.String()),
        ("student_name", pl.String()),
        ("roll_number", pl.String()),
        ("company", pl.String()),
        ("job_profile", pl.String()),
        ("package", pl.Float64()),
        ("placement_date", pl.Date()),
        ("course", pl.String()),
    ]
)


@dataclass(frozen=True)
class PlacementRecord:
    """One confirmed placement: a student accepting an offer from a company"""

    id: str
    student_name: str
    roll_number: str
    company: str
    job_profile: str
    package: float
    placement_date: date
    course: str
