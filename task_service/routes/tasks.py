"""Task CRUD endpoints."""

import logging
import uuid

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from task_service.errors import error_response
from task_service.extensions import db
from task_service.schemas import NewTaskSchema, TaskSchema
from task_service.services.tasks import (
    destroy_task,
    find_all_tasks,
    find_task_by_uid,
    insert_new_task,
)
from task_service.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__)


@tasks_bp.route("/tasks", methods=["GET"])
def get_all_tasks():
    """List every task.

    Returns:
        JSON array of tasks.
    """
    tasks = find_all_tasks(db.session)
    return jsonify(TaskSchema(many=True).dump(tasks))


@tasks_bp.route("/task/<task_uid:task_uid>", methods=["GET"])
def get_task(task_uid: uuid.UUID):
    """Get a single task by identifier.

    Paths that are not a UUID, hyphenated or simple, never reach this view
    and return 404.

    Args:
        task_uid: Task identifier.

    Returns:
        JSON response with task data.
    """
    task = find_task_by_uid(db.session, task_uid)
    if task is None:
        return error_response(f"No task found with UID: {task_uid}", 404)

    return jsonify(TaskSchema().dump(task))


@tasks_bp.route("/task", methods=["POST"])
def add_task():
    """Create a new task from a JSON body with ``name`` and ``done``.

    Returns:
        JSON response with created task.
    """
    with tracer.start_as_current_span("task.create") as span:
        try:
            data = NewTaskSchema().load(request.get_json(silent=True) or {})
        except ValidationError as err:
            return jsonify(err.messages), 400

        task = insert_new_task(db.session, data["name"], data["done"])

        span.set_attribute("task.id", task.id)
        tasks_created.add(1)
        logger.info(f"Task created: {task.id}")

        return jsonify(TaskSchema().dump(task)), 201


@tasks_bp.route("/tasks/<task_uid:task_uid>", methods=["DELETE"])
def delete_task(task_uid: uuid.UUID):
    """Delete a task.

    Deleting an identifier with no row is not an error; only database
    failures change the response.

    Args:
        task_uid: Task identifier.

    Returns:
        JSON message confirming the deletion.
    """
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", str(task_uid))

        rows_deleted = destroy_task(db.session, task_uid)
        span.set_attribute("task.rows_deleted", rows_deleted)

        logger.info(f"Task deleted: {task_uid} ({rows_deleted} row(s))")

        return jsonify({"message": "deleted"})
