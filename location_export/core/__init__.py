"""Core domain primitives for the location export."""

from .models import (
    LOCATION_COLUMNS,
    ExportSummary,
    GeoPosition,
    Placemark,
    SuggestQuery,
)
from .exceptions import (
    ExportError,
    FetchError,
    MissingFieldError,
    ParseError,
    WriteError,
)

__all__ = [
    "LOCATION_COLUMNS",
    "ExportSummary",
    "GeoPosition",
    "Placemark",
    "SuggestQuery",
    "ExportError",
    "FetchError",
    "MissingFieldError",
    "ParseError",
    "WriteError",
]
