"""Service errors and error handlers with OpenTelemetry trace context."""

import logging
from typing import Any

from flask import Flask, jsonify
from opentelemetry import trace


logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Malformed input, unparsable id or unresolved reference."""

    status_code = 400


class ValidationFailed(BadRequestError):
    """Payload failed schema validation."""

    def __init__(self, messages: dict[str, Any]):
        super().__init__(_format_messages(messages))
        self.messages = messages


class NotFoundError(ServiceError):
    status_code = 404


class InternalError(ServiceError):
    """Store failure not otherwise classified."""

    status_code = 500


def error_response(message: str, status_code: int, **extra: Any) -> tuple:
    """Create error response with trace context.

    Args:
        message: Human-readable error message.
        status_code: HTTP status code.
        **extra: Additional keys merged into the body.

    Returns:
        Tuple of (response, status_code).
    """
    response: dict[str, Any] = {"status": "error", "error": message, **extra}

    span = trace.get_current_span()
    span_context = span.get_span_context()
    if span_context.is_valid:
        response["trace_id"] = format(span_context.trace_id, "032x")

    return jsonify(response), status_code


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(ServiceError)
    def service_error(error: ServiceError):
        if error.status_code >= 500:
            logger.error(f"Service failure: {error.message}")
        if isinstance(error, ValidationFailed):
            return error_response(error.message, error.status_code, details=error.messages)
        return error_response(error.message, error.status_code)

    @app.errorhandler(400)
    def bad_request(error):
        return error_response("Bad request", 400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Unhandled exception: {getattr(error, 'original_exception', error)}")
        return error_response("Internal server error", 500)


def _format_messages(messages: dict[str, Any]) -> str:
    """Flatten marshmallow messages into ``field: reason`` pairs."""
    parts = []
    for field, reasons in sorted(messages.items()):
        if isinstance(reasons, list):
            reasons = " ".join(str(reason) for reason in reasons)
        parts.append(f"{field}: {reasons}")
    return "; ".join(parts)
