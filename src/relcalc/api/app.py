"""Flask app factory for the API server."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from ..config import get_settings
from ..utils.logging import setup_logging
from .routes import register_routes


def create_app() -> Flask:
    settings = get_settings()
    setup_logging()
    app = Flask(__name__)
    CORS(app, origins=settings.cors_origin_list())
    # Per-app limiter so each app instance counts independently
    Limiter(
        get_remote_address,
        app=app,
        default_limits=[settings.rate_limit],
        storage_uri="memory://",
    )
    register_routes(app)
    return app
