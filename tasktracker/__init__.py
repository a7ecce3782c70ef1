"""Flask application factory with OpenTelemetry instrumentation."""

import logging

from flask import Flask

from tasktracker.extensions import db, ma
from tasktracker.telemetry import telemetry_enabled


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    # Providers must exist before the app is instrumented
    if telemetry_enabled():
        from tasktracker.telemetry import get_otel_log_handler, instrument_flask_app, setup_telemetry

        setup_telemetry()

    app = Flask(__name__)

    if telemetry_enabled():
        instrument_flask_app(app)

    if config_class is None:
        from tasktracker.config import Config

        config_class = Config
    app.config.from_object(config_class)

    db.init_app(app)
    ma.init_app(app)

    from tasktracker.routes import health_bp, tasks_bp, users_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(users_bp)

    from tasktracker.errors import register_error_handlers

    register_error_handlers(app)

    from tasktracker.middleware import register_access_middleware, register_metrics_middleware

    register_access_middleware(app)
    if telemetry_enabled():
        register_metrics_middleware(app)

        handler = get_otel_log_handler()
        if handler:
            root_logger = logging.getLogger()
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)

    _configure_logging(app.config.get("LOG_LEVEL", "info"))

    with app.app_context():
        db.create_all()

    return app


def _configure_logging(level_name: str) -> None:
    """Apply LOG_LEVEL to the app loggers and quiet framework loggers."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.getLogger("tasktracker").setLevel(level)
    logging.getLogger("tasktracker").propagate = True

    # The access middleware already logs every request
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
