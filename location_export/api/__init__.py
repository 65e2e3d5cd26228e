"""HTTP API for the location export."""

from .app_factory import create_app

__all__ = ["create_app"]
