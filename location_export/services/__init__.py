"""Service layer exports."""

from .suggest_client import SuggestClient
from .placemark_parser import parse_placemarks
from .row_mapper import FieldReader, RowMapper
from .csv_writer import CsvWriter

__all__ = [
    "SuggestClient",
    "parse_placemarks",
    "FieldReader",
    "RowMapper",
    "CsvWriter",
]
