"""Health check endpoint."""

from flask import Blueprint, current_app, jsonify


health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health_check():
    """Liveness probe reporting the configured application name."""
    return jsonify({"status": "ok", "app": current_app.config["APP_NAME"]})
