"""Data models for fieldplanner."""

from fieldplanner.models.position import Coordinate, Position, LocationAuthorizationStatus
from fieldplanner.models.task import Task, TaskStatus

__all__ = [
    "Coordinate",
    "Position",
    "LocationAuthorizationStatus",
    "Task",
    "TaskStatus",
]
