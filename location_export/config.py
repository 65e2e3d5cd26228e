"""Runtime configuration for the location export project."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_BASE_URL = "http://api.goeuro.com/api/v2/position/suggest/en/"


def _optional_float(value: str | None) -> float | None:
    if value in (None, ""):
        return None
    return float(value)


@dataclass(frozen=True)
class ServiceConfig:
    """Settings for the remote suggestion service."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None  # seconds; None keeps the urllib default
    encoding: str = "utf-8"


@dataclass(frozen=True)
class StoragePaths:
    """Collection of filesystem paths used by the API and workers."""

    outputs: Path

    def ensure(self) -> None:
        """Ensure the backing directories exist."""
        self.outputs.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class QueueConfig:
    """Configuration for the Redis-backed task queue."""

    redis_url: str = "redis://localhost:6379/0"
    queue_name: str = "location-export"
    default_timeout: int = 60 * 5  # seconds


SERVICE_CONFIG = ServiceConfig(
    base_url=os.environ.get("LOCATION_EXPORT_BASE_URL", ServiceConfig.base_url),
    timeout=_optional_float(os.environ.get("LOCATION_EXPORT_TIMEOUT")),
    encoding=os.environ.get("LOCATION_EXPORT_ENCODING", ServiceConfig.encoding),
)
STORAGE_PATHS = StoragePaths(
    outputs=Path(os.environ.get("LOCATION_EXPORT_OUTPUTS", "outputs")),
)
QUEUE_CONFIG = QueueConfig(
    redis_url=os.environ.get("LOCATION_EXPORT_REDIS_URL", QueueConfig.redis_url),
    queue_name=os.environ.get("LOCATION_EXPORT_QUEUE", QueueConfig.queue_name),
    default_timeout=int(
        os.environ.get("LOCATION_EXPORT_QUEUE_TIMEOUT", QueueConfig.default_timeout)
    ),
)
