"""Visit ordering for fieldplanner.

Sorts tasks by their externally assigned visiting order. Ties keep their
input order, so the result is deterministic for a given input sequence.
"""

from typing import Iterable, List

from fieldplanner.models.task import Task


def order_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Stable sort by visiting order (lowest first).

    Args:
        tasks: Tasks in supplier order

    Returns:
        New list sorted by ``visiting_order``; equal keys keep input order
    """
    return sorted(tasks, key=_visiting_order_sort_key)


def _visiting_order_sort_key(task: Task) -> int:
    return task.visiting_order
