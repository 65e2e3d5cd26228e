"""Domain models used throughout the location export."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..config import DEFAULT_BASE_URL
from ..utils.formatting import format_bool, format_float, format_optional_int


LOCATION_COLUMNS: tuple[str, ...] = (
    "_id",
    "key",
    "name",
    "fullName",
    "iata_airport_code",
    "type",
    "country",
    "latitude",
    "longitude",
    "locationId",
    "inEurope",
    "countryCode",
    "coreCountry",
    "distance",
)


@dataclass(frozen=True)
class SuggestQuery:
    """A city name bound to the endpoint that is asked for suggestions."""

    city_name: str
    base_url: str = DEFAULT_BASE_URL

    @property
    def url(self) -> str:
        # The city name is appended verbatim, without any URL escaping.
        return self.base_url + self.city_name


@dataclass(slots=True)
class GeoPosition:
    latitude: float
    longitude: float


@dataclass(slots=True)
class Placemark:
    """Representation of one location suggestion returned by the service."""

    identifier: int
    name: str
    full_name: str
    type: str
    country: str
    geo_position: GeoPosition
    in_europe: bool
    country_code: str
    core_country: bool
    key: str = ""
    iata_airport_code: str = ""
    location_id: int = 0
    distance: int = 0

    def as_row(self) -> list[str]:
        """Return the fixed-order string row written to CSV."""

        return [
            str(self.identifier),
            self.key,
            self.name,
            self.full_name,
            self.iata_airport_code,
            self.type,
            self.country,
            format_float(self.geo_position.latitude),
            format_float(self.geo_position.longitude),
            format_optional_int(self.location_id),
            format_bool(self.in_europe),
            self.country_code,
            format_bool(self.core_country),
            format_optional_int(self.distance),
        ]


@dataclass(slots=True)
class ExportSummary:
    """Information returned to callers after an export completes."""

    city_name: str
    url: str
    output_path: Path
    row_count: int
    created_at: datetime
    completed_at: datetime

    def as_dict(self) -> dict:
        return {
            "city": self.city_name,
            "url": self.url,
            "output_path": str(self.output_path),
            "row_count": self.row_count,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat(),
        }
