"""Middleware modules."""

from task_service.middleware.request_timing import register_request_middleware


__all__ = ["register_request_middleware"]
