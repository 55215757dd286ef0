"""Service modules."""

from task_service.services.tasks import (
    destroy_task,
    find_all_tasks,
    find_task_by_uid,
    insert_new_task,
)


__all__ = ["find_all_tasks", "find_task_by_uid", "insert_new_task", "destroy_task"]
