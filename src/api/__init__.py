"""HTTP API for TaskTracker."""

from .http_server import app, create_app
from .endpoints import router

__all__ = ["app", "create_app", "router"]
