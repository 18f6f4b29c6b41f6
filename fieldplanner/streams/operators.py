"""Stream operators."""

import threading
from typing import Any, Callable, Optional, Tuple, TypeVar

from fieldplanner.streams.state import StateStream, _UNSET
from fieldplanner.streams.subscription import CompositeSubscription, Subscription

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")


class _CombineLatest:
    """Holds the last-known value of two sources and recomputes on every change."""

    def __init__(self, combiner: Callable[[Any, Any], Any], output: StateStream):
        self._combiner = combiner
        self._output = output
        self._cells = [_UNSET, _UNSET]
        self._lock = threading.RLock()
        self._cancelled = False
        self._upstream = CompositeSubscription()

    def on_next(self, index: int, value: Any) -> None:
        # Cell update, recompute and emit form one critical section so the
        # output never mixes an old value of one source with a new one of the other.
        with self._lock:
            if self._cancelled:
                return
            self._cells[index] = value
            if _UNSET in self._cells:
                return
            self._output.update(self._combiner(self._cells[0], self._cells[1]))

    def connect(self, first: StateStream, second: StateStream) -> None:
        self._upstream.add(first.subscribe(lambda value: self.on_next(0, value)))
        self._upstream.add(second.subscribe(lambda value: self.on_next(1, value)))

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
        self._upstream.cancel()


def combine_latest(
    first: StateStream[A],
    second: StateStream[B],
    combiner: Callable[[A, B], R],
    name: Optional[str] = None,
) -> Tuple[StateStream[R], Subscription]:
    """Combine two streams, emitting whenever either one changes.

    Each emission uses the last known value of the other source; nothing is
    emitted until both have produced a value. Because sources replay their
    latest value on subscribe, the first emission happens during this call
    when both already hold one.

    Args:
        first: First source stream
        second: Second source stream
        combiner: Function of (latest first, latest second)
        name: Name of the output stream (for logging)

    Returns:
        Tuple of (output stream, subscription that disconnects both sources)
    """
    output: StateStream[R] = StateStream(name=name or f"combine({first.name}, {second.name})")
    state = _CombineLatest(combiner, output)
    state.connect(first, second)
    return output, Subscription(state.cancel)
