"""Map placemark JSON objects onto fixed-order location rows."""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from ..core import GeoPosition, MissingFieldError, Placemark
from ..utils import canonical_text


class FieldReader:
    """Typed accessor over one JSON object.

    Every accessor returns a value of the requested type. A required field that
    is absent or mistyped is recorded in :attr:`missing` and a neutral
    placeholder is returned, so a caller can read all fields and then decide
    once whether the object was usable.
    """

    def __init__(self, data: Mapping[str, object], *, prefix: str = ""):
        self.data = data
        self.prefix = prefix
        self.missing: list[str] = []

    def _required(self, name: str, types: tuple[type, ...], placeholder):
        value = self.data.get(name)
        # bool is an int subclass but never a valid number here
        if isinstance(value, types) and not (isinstance(value, bool) and bool not in types):
            return value
        self.missing.append(self.prefix + name)
        return placeholder

    def required_int(self, name: str) -> int:
        return self._required(name, (int,), 0)

    def required_float(self, name: str) -> float:
        return float(self._required(name, (int, float), 0.0))

    def required_str(self, name: str) -> str:
        return self._required(name, (str,), "")

    def required_bool(self, name: str) -> bool:
        return self._required(name, (bool,), False)

    def required_object(self, name: str) -> "FieldReader":
        value = self._required(name, (dict,), {})
        return FieldReader(value, prefix=f"{self.prefix}{name}.")

    def optional_str(self, name: str) -> str:
        return canonical_text(self.data.get(name))

    def optional_int(self, name: str) -> int:
        value = self.data.get(name)
        if value is None or isinstance(value, bool):
            return 0
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else 0
        if isinstance(value, str):
            try:
                return int(float(value.strip()))
            except (ValueError, OverflowError):
                return 0
        return 0


class RowMapper:
    """Convert placemark objects into :class:`Placemark` models and rows."""

    def to_placemark(self, data: Mapping[str, object], *, index: int | None = None) -> Placemark:
        fields = FieldReader(data)
        geo = fields.required_object("geo_position")

        placemark = Placemark(
            identifier=fields.required_int("_id"),
            key=fields.optional_str("key"),
            name=fields.required_str("name"),
            full_name=fields.required_str("fullName"),
            iata_airport_code=fields.optional_str("iata_airport_code"),
            type=fields.required_str("type"),
            country=fields.required_str("country"),
            geo_position=GeoPosition(
                latitude=geo.required_float("latitude"),
                longitude=geo.required_float("longitude"),
            ),
            location_id=fields.optional_int("locationId"),
            in_europe=fields.required_bool("inEurope"),
            country_code=fields.required_str("countryCode"),
            core_country=fields.required_bool("coreCountry"),
            distance=fields.optional_int("distance"),
        )

        missing = fields.missing + geo.missing
        if missing:
            raise MissingFieldError(missing, index=index)
        return placemark

    def map(self, data: Mapping[str, object], *, index: int | None = None) -> list[str]:
        return self.to_placemark(data, index=index).as_row()

    def map_all(self, placemarks: Iterable[Mapping[str, object]]) -> list[list[str]]:
        """Map every placemark; the first invalid one aborts the whole batch."""

        return [self.map(data, index=index) for index, data in enumerate(placemarks)]
