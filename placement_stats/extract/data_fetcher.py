"""
Data Fetcher - Extract Layer

Loads placements.json from a local path or an http(s) URL and turns it
into validated PlacementRecord objects. One fetch per call, no retries,
no caching across calls.
"""

import json
import os
from typing import Any, List, Optional

import polars as pl
import requests

from placement_stats.coreutils.env import http_timeout
from placement_stats.coreutils.request import new_session, get_json
from .exceptions import DataMalformed, DataUnavailable
from .schemas import RAW_PLACEMENTS_SCHEMA, PlacementRecord
from .validators import (
    coerce_record,
    validate_document_shape,
    validate_placements_frame,
)
import logging

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_json_file(filepath: str) -> Any:
    """
    Read and parse a JSON document from disk

    Args:
        filepath: Path to JSON file

    Returns:
        Parsed JSON document
    """
    logger.info(f"Loading placements from file: {filepath}")

    if not os.path.exists(filepath):
        raise DataUnavailable(filepath, "file not found")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DataMalformed(filepath, f"invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise DataMalformed(filepath, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise DataUnavailable(filepath, f"could not read file: {e}") from e


def fetch_json_url(url: str, timeout: Optional[float] = None) -> Any:
    """
    Fetch and parse a JSON document over HTTP

    Args:
        url: URL of the JSON document
        timeout: Request timeout in seconds (PLACEMENTS_HTTP_TIMEOUT if omitted)

    Returns:
        Parsed JSON document
    """
    logger.info(f"Fetching placements from {url}")
    session = new_session()
    try:
        return get_json(
            session, url, timeout=timeout if timeout is not None else http_timeout()
        )
    except requests.exceptions.JSONDecodeError as e:
        raise DataMalformed(url, f"invalid JSON response: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Error fetching placements data: {e}")
        raise DataUnavailable(url, str(e)) from e
    finally:
        session.close()


def parse_placements(data: Any, source: str) -> List[PlacementRecord]:
    """
    Convert a parsed JSON document into validated placement records

    Args:
        data: Parsed JSON document (expected: array of placement objects)
        source: Source description for error messages

    Returns:
        List[PlacementRecord]: Records in document order
    """
    items = validate_document_shape(data, source)
    rows = [coerce_record(item, source, index) for index, item in enumerate(items)]

    # Explicit schema so an empty document still has typed columns
    df = pl.DataFrame(rows, schema=RAW_PLACEMENTS_SCHEMA)
    validate_placements_frame(df, source)

    return [PlacementRecord(**row) for row in df.iter_rows(named=True)]


def load_placements(
    source: str, timeout: Optional[float] = None
) -> List[PlacementRecord]:
    """
    Load the full placement record sequence from a file path or URL

    Args:
        source: Local path or http(s) URL of placements.json
        timeout: HTTP timeout in seconds, ignored for local files

    Returns:
        List[PlacementRecord]: Every record in the source, in order

    Raises:
        DataUnavailable: Source could not be read or fetched
        DataMalformed: Content is not an array of valid placement records
    """
    if is_url(source):
        data = fetch_json_url(source, timeout=timeout)
    else:
        data = read_json_file(source)

    records = parse_placements(data, source)
    logger.info(f"Loaded {len(records)} placement records from {source}")
    return records
