"""
Placement Data Validators

Boundary checks run by the loader before any record reaches the
aggregator. Every check is all-or-nothing: the first violation rejects
the whole load.
"""

from typing import Any, Dict, List

import polars as pl

from .exceptions import DataMalformed
from .schemas import PLACEMENT_FIELDS, STRING_FIELDS
from placement_stats.coreutils.time import parse_date
import logging

logger = logging.getLogger(__name__)


def validate_document_shape(data: Any, source: str) -> List[Dict[str, Any]]:
    """
    Check that the parsed JSON is an array of objects

    Args:
        data: Parsed JSON document
        source: Source description for error messages

    Returns:
        List[Dict]: The document, unchanged
    """
    if not isinstance(data, list):
        raise DataMalformed(
            source, f"expected a JSON array, got {type(data).__name__}"
        )

    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise DataMalformed(
                source,
                f"expected an object, got {type(item).__name__}",
                record_index=index,
            )

    return data


def coerce_record(raw: Dict[str, Any], source: str, index: int) -> Dict[str, Any]:
    """
    Map one raw JSON object onto the RAW_PLACEMENTS_SCHEMA columns

    Args:
        raw: JSON object for one placement
        source: Source description for error messages
        index: Position of the object in the document

    Returns:
        Dict: Row with typed values, extra fields dropped
    """
    missing = [name for name in PLACEMENT_FIELDS if name not in raw]
    if missing:
        raise DataMalformed(
            source, f"missing fields: {', '.join(missing)}", record_index=index
        )

    row: Dict[str, Any] = {}
    for name in STRING_FIELDS:
        value = raw[name]
        # Numeric ids are common in hand-written JSON
        if name == "id" and isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise DataMalformed(
                source,
                f"field '{name}' must be a string, got {type(value).__name__}",
                record_index=index,
            )
        row[name] = value

    package = raw["package"]
    if isinstance(package, bool) or not isinstance(package, (int, float)):
        raise DataMalformed(
            source,
            f"field 'package' must be a number, got {type(package).__name__}",
            record_index=index,
        )
    try:
        row["package"] = float(package)
    except OverflowError as e:
        raise DataMalformed(
            source,
            f"field 'package' out of range: {e}",
            record_index=index,
        ) from e

    placement_date = raw["placement_date"]
    if not isinstance(placement_date, str):
        raise DataMalformed(
            source,
            "field 'placement_date' must be an ISO date string",
            record_index=index,
        )
    try:
        row["placement_date"] = parse_date(placement_date)
    except ValueError as e:
        raise DataMalformed(
            source,
            f"invalid placement_date {placement_date!r}: {e}",
            record_index=index,
        ) from e

    return row


def validate_placements_frame(df: pl.DataFrame, source: str) -> bool:
    """
    Validate business rules on the typed placements DataFrame

    Args:
        df: Placements DataFrame with RAW_PLACEMENTS_SCHEMA
        source: Source description for error messages

    Returns:
        bool: True if valid, raises DataMalformed if invalid
    """
    if df.height == 0:
        logger.info(f"Placements validation passed: 0 records from {source}")
        return True

    # Package must be a finite, non-negative amount
    bad_packages = df.with_row_index("index").filter(
        pl.col("package").is_nan()
        | pl.col("package").is_infinite()
        | (pl.col("package") < 0)
    )
    if bad_packages.height > 0:
        first = bad_packages.row(0, named=True)
        raise DataMalformed(
            source,
            f"{bad_packages.height} records with negative or non-finite package "
            f"(first: {first['package']})",
            record_index=first["index"],
        )

    duplicate_ids = (
        df.group_by("id", maintain_order=True)
        .len()
        .filter(pl.col("len") > 1)
        .get_column("id")
        .to_list()
    )
    if duplicate_ids:
        raise DataMalformed(
            source, f"duplicate record ids: {', '.join(duplicate_ids)}"
        )

    logger.info(f"Placements validation passed: {df.height} records from {source}")
    return True
