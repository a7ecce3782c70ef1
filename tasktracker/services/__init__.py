"""Service modules."""

from tasktracker.services.tasks import TaskService
from tasktracker.services.users import UserService


__all__ = ["TaskService", "UserService"]
