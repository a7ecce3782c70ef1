"""User business rules."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from tasktracker.errors import BadRequestError, InternalError, NotFoundError
from tasktracker.models import User
from tasktracker.schemas import UserCreateSchema
from tasktracker.services.common import load_payload, parse_id
from tasktracker.store import ConstraintViolation, RecordNotFound, Store


logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: Store):
        self.store = store

    def create_user(self, payload: Any) -> User:
        data = load_payload(UserCreateSchema(), payload)
        try:
            user = self.store.create_user(data["username"], data["password"])
        except ConstraintViolation:
            raise BadRequestError("Username already taken") from None
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

        logger.info(f"User created: {user.username}", extra={"user_id": user.id})
        return user

    def get_user(self, raw_id: str) -> User:
        user_id = parse_id(raw_id, "Invalid user ID")
        try:
            return self.store.get_user_by_id(user_id)
        except RecordNotFound:
            raise NotFoundError("User not found") from None
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

    def get_user_by_username(self, username: str) -> User:
        try:
            return self.store.get_user_by_username(username)
        except RecordNotFound:
            raise NotFoundError("User not found") from None
        except SQLAlchemyError as exc:
            raise InternalError(str(exc)) from exc

    def delete_user(self, raw_id: str) -> None:
        """Delete a user; their tasks go with them through the FK cascade."""
        user_id = parse_id(raw_id, "Invalid user ID")
        try:
            self.store.delete_user(user_id)
        except RecordNotFound:
            raise NotFoundError("User not found") from None
        except (ConstraintViolation, SQLAlchemyError) as exc:
            raise InternalError(str(exc)) from exc

        logger.info(f"User deleted: {user_id}", extra={"user_id": user_id})
