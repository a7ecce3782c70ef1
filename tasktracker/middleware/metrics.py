"""HTTP metrics middleware."""

import time

from flask import Flask, g, request

from tasktracker.telemetry import get_meter


def register_metrics_middleware(app: Flask) -> None:
    """Record a request counter and a duration histogram per route.

    Args:
        app: Flask application instance.
    """
    meter = get_meter(__name__)

    requests_total = meter.create_counter(
        name="http_requests_total",
        description="Total HTTP requests",
        unit="1",
    )
    request_duration = meter.create_histogram(
        name="http_request_duration_ms",
        description="HTTP request duration in milliseconds",
        unit="ms",
    )

    @app.before_request
    def mark_start() -> None:
        g.metrics_start_time = time.perf_counter()

    @app.after_request
    def record(response):
        if request.path == "/health":
            return response

        start_time = getattr(g, "metrics_start_time", None)
        duration_ms = (time.perf_counter() - start_time) * 1000 if start_time else 0.0
        # Route template keeps label cardinality bounded
        attributes = {
            "method": request.method,
            "route": request.url_rule.rule if request.url_rule else "unmatched",
            "status": str(response.status_code),
        }
        requests_total.add(1, attributes)
        request_duration.record(duration_ms, attributes)
        return response
