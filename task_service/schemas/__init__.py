"""Marshmallow schemas for serialization and validation."""

from task_service.schemas.task import NewTaskSchema, TaskSchema


__all__ = ["TaskSchema", "NewTaskSchema"]
