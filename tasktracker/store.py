"""Relational store for users and tasks.

Every operation runs a single SQLAlchemy statement with bound parameters
against the session handed to :class:`Store`. Writes are committed
immediately; there are no multi-statement transactions.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tasktracker.models import Task, User
from tasktracker.models.base import utcnow


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for store signals."""


class RecordNotFound(StoreError):
    """No row matched the lookup, or a write affected zero rows."""

    def __init__(self, entity: str, key: object):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key!r}")


class ConstraintViolation(StoreError):
    """The database rejected a write on an integrity constraint."""


class Store:
    """CRUD against the ``users`` and ``tasks`` tables.

    Args:
        session: The caller's session. One store per request; the store keeps
            no state of its own beyond it.
    """

    def __init__(self, session: Session):
        self._session = session

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(self, username: str, password: str) -> User:
        user = User(username=username, password=password)
        self._insert(user)
        return user

    def get_user_by_id(self, user_id: int) -> User:
        user = self._session.get(User, user_id, populate_existing=True)
        if user is None:
            raise RecordNotFound("user", user_id)
        return user

    def get_user_by_username(self, username: str) -> User:
        user = self._session.scalars(select(User).where(User.username == username)).first()
        if user is None:
            raise RecordNotFound("user", username)
        return user

    def delete_user(self, user_id: int) -> None:
        stmt = delete(User).where(User.id == user_id).execution_options(synchronize_session=False)
        self._execute_write(stmt, "user", user_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def create_task(self, user_id: int, title: str, description: str, status: str) -> Task:
        """Insert a task. The owner is not checked here; the FK rejects orphans."""
        task = Task(user_id=user_id, title=title, description=description, status=status)
        self._insert(task)
        return task

    def get_task_by_id(self, task_id: int) -> Task:
        task = self._session.get(Task, task_id, populate_existing=True)
        if task is None:
            raise RecordNotFound("task", task_id)
        return task

    def list_all_tasks(self) -> list[Task]:
        return list(self._session.scalars(select(Task)))

    def list_tasks_by_user_id(self, user_id: int) -> list[Task]:
        return list(self._session.scalars(select(Task).where(Task.user_id == user_id)))

    def list_tasks_by_username(self, username: str) -> list[Task]:
        """Tasks owned by ``username``; an unknown username yields ``[]``."""
        stmt = select(Task).join(User, Task.user_id == User.id).where(User.username == username)
        return list(self._session.scalars(stmt))

    def update_task(self, task_id: int, title: str, description: str, status: str) -> None:
        """Replace all mutable fields of a task and stamp ``updated_at``."""
        stmt = (
            update(Task)
            .where(Task.id == task_id)
            .values(title=title, description=description, status=status, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        self._execute_write(stmt, "task", task_id)

    def delete_task(self, task_id: int) -> None:
        stmt = delete(Task).where(Task.id == task_id).execution_options(synchronize_session=False)
        self._execute_write(stmt, "task", task_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _insert(self, row: User | Task) -> None:
        try:
            self._session.add(row)
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            logger.warning(f"Insert rejected by constraint: {exc.orig}")
            raise ConstraintViolation(str(exc.orig)) from exc
        except SQLAlchemyError:
            self._session.rollback()
            raise
        self._session.refresh(row)

    def _execute_write(self, stmt, entity: str, key: int) -> None:
        try:
            result = self._session.execute(stmt)
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            raise ConstraintViolation(str(exc.orig)) from exc
        except SQLAlchemyError:
            self._session.rollback()
            raise
        if result.rowcount == 0:
            raise RecordNotFound(entity, key)
