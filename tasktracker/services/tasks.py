"""Task business rules.

Validates requests, enforces that every task references an existing user and
translates store signals into service errors.
"""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from tasktracker.errors import BadRequestError, InternalError, NotFoundError
from tasktracker.models import Task
from tasktracker.schemas import TaskCreateSchema, TaskUpdateSchema
from tasktracker.services.common import load_payload, parse_id
from tasktracker.store import ConstraintViolation, RecordNotFound, Store


logger = logging.getLogger(__name__)


class TaskService:
    """Stateless rule engine for tasks; build one per request."""

    def __init__(self, store: Store):
        self.store = store

    def create_task(self, payload: Any) -> Task:
        """Validate ``payload`` and insert the task.

        Args:
            payload: Decoded JSON body.

        Returns:
            The created task with its assigned id and timestamps.

        Raises:
            BadRequestError: Invalid body, failed validation or unknown user.
            InternalError: The store failed.
        """
        data = load_payload(TaskCreateSchema(), payload)

        try:
            self.store.get_user_by_id(data["user_id"])
        except RecordNotFound:
            raise BadRequestError("User not found") from None
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

        try:
            task = self.store.create_task(
                user_id=data["user_id"],
                title=data["title"],
                description=data["description"] or "",
                status=data["status"],
            )
        except ConstraintViolation:
            # Owner deleted between the lookup and the insert
            raise BadRequestError("User not found") from None
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

        logger.info(f"Task created: {task.id}", extra={"user_id": task.user_id})
        return task

    def get_all_tasks(self) -> list[Task]:
        try:
            return self.store.list_all_tasks()
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

    def get_task(self, raw_id: str) -> Task:
        task_id = parse_id(raw_id, "Invalid task ID")
        try:
            return self.store.get_task_by_id(task_id)
        except RecordNotFound:
            raise NotFoundError("Task not found") from None
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

    def update_task(self, raw_id: str, payload: Any) -> None:
        """Replace title, description and status of a task.

        All three fields are authoritative: a missing description clears it.
        """
        task_id = parse_id(raw_id, "Invalid task ID")
        data = load_payload(TaskUpdateSchema(), payload)

        if not data["title"] or not data["status"]:
            raise BadRequestError("Title and status are required")

        try:
            self.store.update_task(
                task_id,
                title=data["title"],
                description=data["description"] or "",
                status=data["status"],
            )
        except RecordNotFound:
            raise NotFoundError("Task not found") from None
        except (ConstraintViolation, SQLAlchemyError) as exc:
            raise InternalError(str(exc)) from exc

        logger.info(f"Task updated: {task_id}")

    def delete_task(self, raw_id: str) -> None:
        task_id = parse_id(raw_id, "Invalid task ID")
        try:
            self.store.delete_task(task_id)
        except RecordNotFound:
            raise NotFoundError("Task not found") from None
        except (ConstraintViolation, SQLAlchemyError) as exc:
            raise InternalError(str(exc)) from exc

        logger.info(f"Task deleted: {task_id}")

    def get_tasks_by_user_id(self, raw_user_id: str) -> list[Task]:
        user_id = parse_id(raw_user_id, "Invalid user ID")
        try:
            return self.store.list_tasks_by_user_id(user_id)
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

    def get_tasks_by_username(self, username: str) -> list[Task]:
        """List tasks by owner name. Unknown names give an empty list, not an error."""
        try:
            return self.store.list_tasks_by_username(username)
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc
