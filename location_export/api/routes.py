"""REST API blueprint."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from flask import Blueprint, Response, current_app, jsonify, request
from rq.exceptions import NoSuchJobError
from rq.job import Job

from ..core import LOCATION_COLUMNS, SuggestQuery
from ..services import CsvWriter
from ..utils.io import safe_filename

api_bp = Blueprint("api", __name__)


@api_bp.get("/locations/<city>/csv")
def location_csv(city: str):
    """Return the suggestions for ``city`` as a CSV attachment."""

    rows = _pipeline().rows(_query(city))
    filename = f"{safe_filename(city) or 'export'}.csv"
    return Response(
        CsvWriter().render(rows),
        mimetype="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@api_bp.get("/locations/<city>")
def locations(city: str):
    rows = _pipeline().rows(_query(city))
    return jsonify({"city": city, "columns": list(LOCATION_COLUMNS), "rows": rows})


@api_bp.post("/exports")
def create_export():
    """Queue a background export for the requested city."""

    payload = request.get_json(silent=True) or {}
    city = payload.get("city")
    if not isinstance(city, str) or not city:
        return jsonify({"error": "city field is required"}), 400

    job_id = str(uuid.uuid4())
    created_at = datetime.now(timezone.utc).isoformat()

    job = _queue().enqueue(
        "location_export.tasks.process_export",
        kwargs={
            "job_id": job_id,
            "city": city,
            "base_url": current_app.config["BASE_URL"],
        },
        job_id=job_id,
        meta={"created_at": created_at},
    )

    response = {
        "job_id": job.id,
        "status": job.get_status(refresh=False),
        "created_at": created_at,
    }
    return jsonify(response), 202


@api_bp.get("/exports/<job_id>")
def export_status(job_id: str):
    try:
        job = Job.fetch(job_id, connection=_connection())
    except NoSuchJobError:
        return jsonify({"error": "Job not found"}), 404

    payload: dict[str, object] = {
        "job_id": job.id,
        "status": job.get_status(refresh=True),
        "created_at": job.meta.get("created_at"),
    }

    if job.is_finished:
        payload["result"] = job.result or {}
        return jsonify(payload), 200
    if job.is_failed:
        payload["error"] = job.meta.get("error", job.exc_info)
        return jsonify(payload), 500

    payload["progress"] = job.meta.get("progress", 0)
    return jsonify(payload), 200


def _query(city: str) -> SuggestQuery:
    return SuggestQuery(city_name=city, base_url=current_app.config["BASE_URL"])


def _pipeline():
    return current_app.extensions["location_export"]["pipeline"]


def _queue():
    return current_app.extensions["rq"]["queue"]


def _connection():
    return current_app.extensions["rq"]["connection"]
