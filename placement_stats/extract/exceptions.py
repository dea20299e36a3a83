"""
Loader errors surfaced to the presentation layer.
"""

from typing import Optional


class PlacementDataError(Exception):
    """Base class for placement data loading failures"""

    def __init__(self, source: str, reason: str, record_index: Optional[int] = None):
        self.source = source
        self.reason = reason
        self.record_index = record_index
        location = f" (record {record_index})" if record_index is not None else ""
        super().__init__(f"{source}{location}: {reason}")


class DataUnavailable(PlacementDataError):
    """Source could not be fetched (missing file, HTTP error, timeout)"""


class DataMalformed(PlacementDataError):
    """Source content does not conform to the placement record shape"""
