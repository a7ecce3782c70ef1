"""Marshmallow schemas for serialization and validation."""

from tasktracker.schemas.task import TaskCreateSchema, TaskSchema, TaskUpdateSchema
from tasktracker.schemas.user import UserCreateSchema, UserSchema


__all__ = [
    "TaskSchema",
    "TaskCreateSchema",
    "TaskUpdateSchema",
    "UserSchema",
    "UserCreateSchema",
]
