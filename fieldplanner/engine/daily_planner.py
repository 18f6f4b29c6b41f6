"""Daily planning worker.

Binds the agent's task set and live position through the prioritization
engine into a single ``tasks`` stream the presentation layer renders.
"""

import logging
from typing import Any, Iterable, List, Optional

from fieldplanner.engine.prioritization import PlanObservation, TaskPrioritizationEngine, TaskSource
from fieldplanner.location.service import LocationService
from fieldplanner.models.task import Task
from fieldplanner.models.task_factory import create_mock_daily_plan
from fieldplanner.streams.state import StateStream
from fieldplanner.streams.subscription import CompositeSubscription

logger = logging.getLogger(__name__)


class DailyPlanner:
    """Keeps ``tasks`` up to date with distance-annotated, ordered visits.

    Until a backing store exists the task set defaults to the placeholder
    daily plan.
    """

    def __init__(
        self,
        location_service: LocationService,
        tasks: Optional[Iterable[Any]] = None,
        engine: Optional[TaskPrioritizationEngine] = None,
    ):
        self.location_service = location_service
        self.engine = engine or TaskPrioritizationEngine()
        self.task_source = TaskSource(tasks if tasks is not None else create_mock_daily_plan())
        self.tasks: StateStream[List[Task]] = StateStream([], name="daily_plan")
        self._observation: Optional[PlanObservation] = None
        self._bindings: Optional[CompositeSubscription] = None

    @property
    def is_started(self) -> bool:
        return self._observation is not None

    def start(self) -> None:
        if self.is_started:
            logger.warning("DailyPlanner already started")
            return

        self._observation = self.engine.observe(self.task_source, self.location_service.current_location)
        self._bindings = CompositeSubscription([self._observation.subscribe(self.tasks.update)])
        logger.info(f"DailyPlanner started with {len(self.task_source.value)} tasks")

    def stop(self) -> None:
        if not self.is_started:
            return
        self._bindings.cancel()
        self._observation.cancel()
        self._bindings = None
        self._observation = None
        logger.info("DailyPlanner stopped")

    def replace_tasks(self, tasks: Iterable[Any]) -> None:
        """Publish a new task set.

        Raises:
            MalformedTaskError: if the batch is invalid (the current set is kept)
        """
        self.task_source.update(tasks)
