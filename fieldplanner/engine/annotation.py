"""Distance/ETA annotation of tasks against the current position."""

from typing import Iterable, List, Optional

from fieldplanner.engine.geo import distance_between, estimate_travel_time
from fieldplanner.models.constants import DEFAULT_AVERAGE_SPEED_MPS
from fieldplanner.models.position import Position
from fieldplanner.models.task import Task


def annotate(
    task: Task,
    position: Optional[Position],
    average_speed_mps: float = DEFAULT_AVERAGE_SPEED_MPS,
) -> Task:
    """Return a copy of ``task`` with distance and travel time filled in.

    Pure function of (task.location, position). With an unknown position
    both derived fields are None. A task exactly at the current position
    gets distance 0.0 and no travel time.

    Args:
        task: Task to annotate (left unchanged)
        position: Current position, or None if unknown
        average_speed_mps: Speed used for the travel time estimate

    Returns:
        Annotated copy of the task
    """
    if position is None:
        distance = None
    else:
        distance = distance_between(position, task.location)

    return task.model_copy(
        update={
            "distance_from_current_location": distance,
            "estimated_travel_time": estimate_travel_time(distance, average_speed_mps),
        }
    )


def annotate_all(
    tasks: Iterable[Task],
    position: Optional[Position],
    average_speed_mps: float = DEFAULT_AVERAGE_SPEED_MPS,
) -> List[Task]:
    """Annotate every task against the same position."""
    return [annotate(task, position, average_speed_mps) for task in tasks]
