"""Location-aware task prioritization engine.

Combines a stream of task sets with a stream of positions and publishes a
distance-annotated, visiting-order-sorted task list every time either input
changes. Each emission is a full recompute from the latest value of both
sources; there is no incremental update.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional
from pydantic import ValidationError

from fieldplanner.config import get_planner_settings
from fieldplanner.engine.annotation import annotate, annotate_all
from fieldplanner.engine.ordering import order_tasks
from fieldplanner.models.position import Position
from fieldplanner.models.task import Task
from fieldplanner.streams.operators import combine_latest
from fieldplanner.streams.state import StateStream
from fieldplanner.streams.subscription import CompositeSubscription, Subscription

logger = logging.getLogger(__name__)


class MalformedTaskError(ValueError):
    """A task batch could not be accepted; the whole batch is rejected."""

    def __init__(self, message: str, *, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


def validate_task_batch(tasks: Iterable[Any]) -> List[Task]:
    """Validate a task batch, coercing mappings into ``Task``.

    Raises:
        MalformedTaskError: on the first invalid item or a duplicate id
    """
    if tasks is None:
        raise MalformedTaskError("Task batch is required")

    validated: List[Task] = []
    seen_ids = set()
    for index, item in enumerate(tasks):
        if isinstance(item, Task):
            task = item
        elif isinstance(item, dict):
            try:
                task = Task(**item)
            except ValidationError as e:
                raise MalformedTaskError(f"Task at index {index} is invalid: {e}", index=index) from e
        else:
            raise MalformedTaskError(
                f"Task at index {index} has unsupported type {type(item).__name__}", index=index
            )

        if task.id in seen_ids:
            raise MalformedTaskError(f"Duplicate task id {task.id} at index {index}", index=index)
        seen_ids.add(task.id)
        validated.append(task)
    return validated


class TaskSource(StateStream):
    """Stream of task sets that rejects malformed batches before publishing."""

    def __init__(self, tasks: Optional[Iterable[Any]] = None, name: str = "tasks"):
        super().__init__(name=name)
        if tasks is not None:
            self.update(tasks)

    def update(self, value: Iterable[Any]) -> None:
        super().update(validate_task_batch(value))


class PlanObservation:
    """One running observation of the engine.

    Exposes the ordered task list with replay-latest semantics: every
    subscriber, including late ones, immediately receives the most recent
    list. ``cancel()`` disconnects both upstream sources and releases all
    subscribers; nothing is delivered afterwards.
    """

    def __init__(self, stream: StateStream, upstream: Subscription):
        self._stream = stream
        self._upstream = upstream

    @property
    def stream(self) -> StateStream:
        return self._stream

    @property
    def latest(self) -> List[Task]:
        return self._stream.value

    @property
    def active(self) -> bool:
        return self._upstream.active

    def subscribe(self, callback: Callable[[List[Task]], None]) -> Subscription:
        return self._stream.subscribe(callback)

    def cancel(self) -> None:
        self._upstream.cancel()
        self._stream.close()

    def __enter__(self) -> "PlanObservation":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


class TaskPrioritizationEngine:
    """Annotates tasks with distance/ETA and orders them for the agent."""

    def __init__(self, average_speed_mps: Optional[float] = None):
        if average_speed_mps is None:
            average_speed_mps = get_planner_settings().average_speed_mps
        if average_speed_mps <= 0:
            raise ValueError(f"average_speed_mps must be positive, got {average_speed_mps}")
        self.average_speed_mps = average_speed_mps

    def annotate(self, task: Task, position: Optional[Position]) -> Task:
        return annotate(task, position, self.average_speed_mps)

    def order(self, tasks: Iterable[Task]) -> List[Task]:
        return order_tasks(tasks)

    def prioritize(self, tasks: Iterable[Task], position: Optional[Position]) -> List[Task]:
        """Annotate every task against ``position``, then order by visiting order."""
        tasks = list(tasks)
        prioritized = self.order(annotate_all(tasks, position, self.average_speed_mps))
        logger.debug(
            f"Prioritized {len(prioritized)} tasks "
            f"({'position known' if position is not None else 'position unknown'})"
        )
        return prioritized

    def observe(self, task_source: StateStream, position_source: StateStream) -> PlanObservation:
        """Start a combine-latest observation of the two sources.

        Emits immediately when both sources already hold a value, then once
        per change of either source. Observing again yields an independent
        sequence.

        A plain ``StateStream`` of task sets is mirrored through a
        ``TaskSource``, so mappings are coerced into ``Task`` and a malformed
        batch published later is rejected (and logged by the plain stream)
        while the last valid plan stays published.

        Args:
            task_source: Stream of task sets
            position_source: Stream of ``Optional[Position]``

        Returns:
            PlanObservation with replay-latest output

        Raises:
            MalformedTaskError: if the task source currently holds a malformed batch
        """
        upstream = CompositeSubscription()
        validated_source = task_source
        if not isinstance(task_source, TaskSource):
            if task_source.has_value:
                validate_task_batch(task_source.value)
            validated_source = TaskSource(name=f"validated({task_source.name})")
            upstream.add(task_source.subscribe(validated_source.update))

        stream, combined = combine_latest(
            validated_source,
            position_source,
            self.prioritize,
            name="prioritized_tasks",
        )
        upstream.add(combined)
        logger.info(f"Observing {task_source.name} with {position_source.name}")
        return PlanObservation(stream, upstream)
