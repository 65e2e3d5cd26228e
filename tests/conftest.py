from __future__ import annotations

import json
from typing import Dict, List

import pytest


class DummyHttpClient:
    def __init__(self) -> None:
        self.responses: Dict[str, object] = {}
        self.requested: List[str] = []

    def queue(self, url: str, payload: object) -> None:
        """Register a response; bytes are returned as-is, anything else as JSON."""
        self.responses[url] = payload

    def get_bytes(self, url: str, timeout) -> bytes:
        self.requested.append(url)
        if url not in self.responses:
            raise AssertionError(f"Unexpected request for {url}")
        payload = self.responses[url]
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, bytes):
            return payload
        return json.dumps(payload).encode("utf-8")


def make_placemark(**overrides) -> dict:
    placemark = {
        "_id": 376217,
        "key": None,
        "name": "Berlin",
        "fullName": "Berlin, Germany",
        "iata_airport_code": None,
        "type": "location",
        "country": "Germany",
        "geo_position": {"latitude": 52.52437, "longitude": 13.41053},
        "locationId": 8384,
        "inEurope": True,
        "countryCode": "DE",
        "coreCountry": True,
        "distance": None,
    }
    placemark.update(overrides)
    return placemark


BERLIN_PLACEMARK = {
    "_id": 1,
    "name": "Berlin",
    "fullName": "Berlin, Germany",
    "type": "city",
    "country": "Germany",
    "geo_position": {"latitude": 52.52, "longitude": 13.405},
    "inEurope": True,
    "countryCode": "DE",
    "coreCountry": True,
}


@pytest.fixture()
def http_client() -> DummyHttpClient:
    return DummyHttpClient()
