"""Request logging, CORS and ``Server`` header."""

import logging
import time

from flask import Flask, g, request
from flask_cors import CORS


logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = ["GET", "POST", "HEAD", "PUT", "DELETE", "PATCH"]


def parse_origins(raw: str) -> str | list[str]:
    """Split a comma-separated ``CORS_ORIGINS`` value; ``*`` stays a wildcard."""
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    if not origins or "*" in origins:
        return "*"
    return origins


def register_access_middleware(app: Flask) -> None:
    """Register CORS, request logging and the ``Server`` header.

    Args:
        app: Flask application instance.
    """
    CORS(
        app,
        origins=parse_origins(app.config.get("CORS_ORIGINS", "*")),
        methods=CORS_ALLOW_METHODS,
    )

    server_header = app.config.get("SERVER_HEADER", "tasktracker")

    @app.before_request
    def start_timer() -> None:
        g.access_start_time = time.perf_counter()

    @app.after_request
    def log_request(response):
        response.headers["Server"] = server_header

        start_time = getattr(g, "access_start_time", None)
        duration_ms = (time.perf_counter() - start_time) * 1000 if start_time else 0.0
        logger.info(
            f"{request.method} {request.path} {response.status_code} {duration_ms:.1f}ms",
            extra={"remote_addr": request.remote_addr},
        )
        return response
