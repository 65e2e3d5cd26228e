"""Flask application factory."""

from __future__ import annotations

import logging
from flask import Flask, jsonify
from flask_cors import CORS
from redis import Redis
from rq import Queue

from ..config import QUEUE_CONFIG, SERVICE_CONFIG, STORAGE_PATHS
from ..core import ExportError, WriteError
from ..pipelines import ExportPipeline
from .routes import api_bp

logger = logging.getLogger(__name__)


def create_app(pipeline: ExportPipeline | None = None, queue: Queue | None = None) -> Flask:
    """Create and configure the Flask application."""

    app = Flask(__name__)
    app.config["BASE_URL"] = SERVICE_CONFIG.base_url

    CORS(app)
    app.register_blueprint(api_bp, url_prefix="/api")

    STORAGE_PATHS.ensure()

    if queue is None:
        redis_connection = Redis.from_url(QUEUE_CONFIG.redis_url)
        queue = Queue(
            name=QUEUE_CONFIG.queue_name,
            connection=redis_connection,
            default_timeout=QUEUE_CONFIG.default_timeout,
        )
    app.extensions["rq"] = {"queue": queue, "connection": queue.connection}
    app.extensions["location_export"] = {"pipeline": pipeline or ExportPipeline.default()}

    @app.errorhandler(ExportError)
    def handle_export_error(error: ExportError):
        status = 500 if isinstance(error, WriteError) else 502
        logger.warning("Export failed: %s", error)
        return jsonify(error.as_dict()), status

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    logger.info("Flask application initialised")
    return app
