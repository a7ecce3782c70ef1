"""User endpoints."""

from flask import Blueprint, jsonify, request

from tasktracker.extensions import db
from tasktracker.schemas import UserSchema
from tasktracker.services import UserService
from tasktracker.store import Store
from tasktracker.telemetry import get_meter, get_tracer


tracer = get_tracer(__name__)
meter = get_meter(__name__)

users_created = meter.create_counter(
    name="users.created",
    description="Users created",
    unit="1",
)

users_bp = Blueprint("users", __name__, url_prefix="/api/v1/users")


def _service() -> UserService:
    return UserService(Store(db.session))


@users_bp.route("", methods=["POST"])
def create_user():
    """Create a user.

    Returns:
        JSON envelope with the created user (without password) and 201 status.
    """
    with tracer.start_as_current_span("user.create") as span:
        user = _service().create_user(request.get_json(silent=True))

        span.set_attribute("user.id", user.id)
        users_created.add(1)

        return jsonify({"status": "success", "data": UserSchema().dump(user)}), 201


@users_bp.route("/<user_id>", methods=["GET"])
def get_user(user_id: str):
    user = _service().get_user(user_id)
    return jsonify({"status": "success", "data": UserSchema().dump(user)})


@users_bp.route("/username/<username>", methods=["GET"])
def get_user_by_username(username: str):
    user = _service().get_user_by_username(username)
    return jsonify({"status": "success", "data": UserSchema().dump(user)})


@users_bp.route("/<user_id>", methods=["DELETE"])
def delete_user(user_id: str):
    """Delete a user together with the tasks they own."""
    with tracer.start_as_current_span("user.delete") as span:
        span.set_attribute("user.id", user_id)
        _service().delete_user(user_id)
        return jsonify({"status": "success", "message": "User deleted successfully"})
