"""Task model."""

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_service.extensions import db


class Task(db.Model):
    """A single to-do item."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    done: Mapped[bool] = mapped_column(nullable=False)

    @classmethod
    def new(cls, name: str, done: bool) -> "Task":
        """Build a task with a fresh random identifier.

        Args:
            name: Display name.
            done: Completion flag.

        Returns:
            Unsaved Task instance.
        """
        return cls(id=str(uuid.uuid4()), name=name, done=done)

    def __repr__(self) -> str:
        return f"<Task {self.id}>"
