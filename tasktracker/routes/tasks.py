"""Task endpoints."""

from flask import Blueprint, jsonify, request

from tasktracker.extensions import db
from tasktracker.schemas import TaskSchema
from tasktracker.services import TaskService
from tasktracker.store import Store
from tasktracker.telemetry import get_meter, get_tracer


tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api/v1/tasks")


def _service() -> TaskService:
    return TaskService(Store(db.session))


def _task_list(tasks):
    return jsonify({"status": "success", "data": TaskSchema(many=True).dump(tasks)})


@tasks_bp.route("", methods=["POST"])
def create_task():
    """Create a task for an existing user.

    Returns:
        JSON envelope with the created task and 201 status.
    """
    with tracer.start_as_current_span("task.create") as span:
        task = _service().create_task(request.get_json(silent=True))

        span.set_attribute("task.id", task.id)
        span.set_attribute("user.id", task.user_id)
        tasks_created.add(1, {"status": task.status})

        return jsonify({"status": "success", "data": TaskSchema().dump(task)}), 201


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    return _task_list(_service().get_all_tasks())


@tasks_bp.route("/<task_id>", methods=["GET"])
def get_task(task_id: str):
    task = _service().get_task(task_id)
    return jsonify({"status": "success", "data": TaskSchema().dump(task)})


@tasks_bp.route("/<task_id>", methods=["PUT"])
def update_task(task_id: str):
    """Replace title, description and status of a task.

    Args:
        task_id: Task id from the path.

    Returns:
        JSON confirmation message.
    """
    with tracer.start_as_current_span("task.update") as span:
        span.set_attribute("task.id", task_id)
        _service().update_task(task_id, request.get_json(silent=True))
        return jsonify({"status": "success", "message": "Task updated"})


@tasks_bp.route("/<task_id>", methods=["DELETE"])
def delete_task(task_id: str):
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", task_id)
        _service().delete_task(task_id)
        return jsonify({"status": "success", "message": "Task deleted successfully"})


@tasks_bp.route("/user/<user_id>", methods=["GET"])
def list_tasks_by_user_id(user_id: str):
    return _task_list(_service().get_tasks_by_user_id(user_id))


@tasks_bp.route("/username/<username>", methods=["GET"])
def list_tasks_by_username(username: str):
    """List tasks owned by ``username``; unknown names give an empty list."""
    return _task_list(_service().get_tasks_by_username(username))
