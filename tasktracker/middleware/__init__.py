"""Middleware modules."""

from tasktracker.middleware.access import register_access_middleware
from tasktracker.middleware.metrics import register_metrics_middleware


__all__ = ["register_access_middleware", "register_metrics_middleware"]
