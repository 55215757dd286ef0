"""Task queries.

Each function runs exactly one statement against the session it is given.
SQLAlchemy errors are left to propagate to the caller.
"""

import logging
import uuid

from sqlalchemy.orm import Session

from task_service.models import Task


logger = logging.getLogger(__name__)


def find_all_tasks(session: Session) -> list[Task]:
    """Load every task in the table."""
    return session.query(Task).all()


def find_task_by_uid(session: Session, uid: uuid.UUID) -> Task | None:
    """Find a task by its identifier.

    Args:
        session: Database session.
        uid: Task identifier.

    Returns:
        The task, or None if no row matches.
    """
    return session.query(Task).filter(Task.id == str(uid)).first()


def insert_new_task(session: Session, name: str, done: bool) -> Task:
    """Insert a new task row and return it.

    Args:
        session: Database session.
        name: Display name.
        done: Completion flag.

    Returns:
        The persisted task with its generated identifier.
    """
    task = Task.new(name=name, done=done)
    session.add(task)
    session.commit()

    logger.debug(f"Inserted task {task.id}")
    return task


def destroy_task(session: Session, uid: uuid.UUID) -> int:
    """Delete a task by identifier.

    Returns:
        Number of rows deleted, 0 or 1.
    """
    deleted = session.query(Task).filter(Task.id == str(uid)).delete()
    session.commit()
    return deleted
