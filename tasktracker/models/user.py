"""User model."""

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tasktracker.extensions import db
from tasktracker.models.base import utcnow


class User(db.Model):
    """Task owner account.

    The password is stored as given; credential handling is left to callers.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)

    # Rows are removed by the FK cascade, not by the ORM
    tasks: Mapped[list["Task"]] = relationship(  # noqa: F821
        "Task", back_populates="owner", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<User {self.username}>"
