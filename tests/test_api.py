from __future__ import annotations

from pathlib import Path

import pytest
from rq.exceptions import NoSuchJobError

from location_export import create_app
from location_export.api import routes
from location_export.config import SERVICE_CONFIG
from location_export.core import LOCATION_COLUMNS
from location_export.pipelines import ExportPipeline
from location_export.services import CsvWriter, RowMapper, SuggestClient

from conftest import BERLIN_PLACEMARK


class FakeJob:
    def __init__(self, job_id: str):
        self.id = job_id

    def get_status(self, refresh: bool = True) -> str:
        return "queued"


class FakeQueue:
    connection = None

    def __init__(self) -> None:
        self.enqueued: list[tuple[str, dict]] = []

    def enqueue(self, func: str, *, kwargs: dict, job_id: str, meta: dict) -> FakeJob:
        self.enqueued.append((func, kwargs))
        return FakeJob(job_id)


@pytest.fixture()
def queue() -> FakeQueue:
    return FakeQueue()


@pytest.fixture()
def client(tmp_path: Path, monkeypatch, http_client, queue):
    monkeypatch.chdir(tmp_path)
    pipeline = ExportPipeline(
        client=SuggestClient(http_client),
        mapper=RowMapper(),
        writer=CsvWriter(),
    )
    app = create_app(pipeline=pipeline, queue=queue)
    return app.test_client()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy"}


def test_locations_returns_rows(client, http_client):
    http_client.queue(SERVICE_CONFIG.base_url + "Berlin", [BERLIN_PLACEMARK])

    response = client.get("/api/locations/Berlin")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["columns"] == list(LOCATION_COLUMNS)
    assert payload["rows"] == [RowMapper().map(BERLIN_PLACEMARK)]


def test_locations_csv_download(client, http_client):
    http_client.queue(SERVICE_CONFIG.base_url + "Berlin", [BERLIN_PLACEMARK])

    response = client.get("/api/locations/Berlin/csv")

    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert 'filename="Berlin.csv"' in response.headers["Content-Disposition"]
    assert response.get_data(as_text=True).splitlines()[1] == (
        '1,,Berlin,"Berlin, Germany",,city,Germany,52.52,13.405,,true,DE,true,'
    )


def test_upstream_parse_failure_maps_to_bad_gateway(client, http_client):
    http_client.queue(SERVICE_CONFIG.base_url + "Berlin", {"error": "nope"})

    response = client.get("/api/locations/Berlin")

    assert response.status_code == 502
    assert "expected a JSON array" in response.get_json()["message"]


def test_create_export_enqueues_task(client, queue):
    response = client.post("/api/exports", json={"city": "Berlin"})

    assert response.status_code == 202
    payload = response.get_json()
    assert payload["status"] == "queued"
    func, kwargs = queue.enqueued[0]
    assert func == "location_export.tasks.process_export"
    assert kwargs["city"] == "Berlin"
    assert kwargs["job_id"] == payload["job_id"]


def test_create_export_requires_city(client, queue):
    response = client.post("/api/exports", json={})

    assert response.status_code == 400
    assert queue.enqueued == []


def test_unknown_export_job(client, monkeypatch):
    def fetch(job_id, connection=None):
        raise NoSuchJobError(job_id)

    monkeypatch.setattr(routes.Job, "fetch", staticmethod(fetch))

    response = client.get("/api/exports/does-not-exist")
    assert response.status_code == 404
