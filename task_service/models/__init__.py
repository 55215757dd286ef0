"""Database models."""

from task_service.models.task import Task


__all__ = ["Task"]
