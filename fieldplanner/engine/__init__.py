"""Task prioritization engine for fieldplanner."""

from fieldplanner.engine.geo import distance_between, estimate_travel_time
from fieldplanner.engine.annotation import annotate, annotate_all
from fieldplanner.engine.ordering import order_tasks
from fieldplanner.engine.prioritization import (
    MalformedTaskError,
    PlanObservation,
    TaskPrioritizationEngine,
    TaskSource,
    validate_task_batch,
)

__all__ = [
    "distance_between",
    "estimate_travel_time",
    "annotate",
    "annotate_all",
    "order_tasks",
    "MalformedTaskError",
    "PlanObservation",
    "TaskPrioritizationEngine",
    "TaskSource",
    "validate_task_batch",
]
