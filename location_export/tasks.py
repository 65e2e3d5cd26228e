"""RQ task definitions for background exports."""

from __future__ import annotations

from rq import get_current_job

from .config import SERVICE_CONFIG, STORAGE_PATHS
from .core import ExportError, SuggestQuery
from .pipelines import ExportPipeline
from .utils.io import ensure_directory, safe_filename


def process_export(*, job_id: str, city: str, base_url: str | None = None) -> dict:
    """Run one export for ``city`` and store the CSV under the outputs directory."""

    job = get_current_job()
    if job:
        job.meta["progress"] = 0
        job.save_meta()

    query = SuggestQuery(city_name=city, base_url=base_url or SERVICE_CONFIG.base_url)
    output_dir = ensure_directory(STORAGE_PATHS.outputs / safe_filename(job_id))
    output_file = output_dir / f"{safe_filename(city) or 'export'}.csv"

    pipeline = ExportPipeline.default()
    try:
        summary = pipeline.run(query, output_file)
    except ExportError as exc:
        if job:
            job.meta["error"] = exc.as_dict()
            job.save_meta()
        raise

    if job:
        job.meta["progress"] = 100
        job.save_meta()

    return summary.as_dict()
