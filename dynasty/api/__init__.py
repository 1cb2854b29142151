"""Dynasty trade calculator API."""

from dynasty.api.main import app, create_app

__all__ = ["app", "create_app"]
