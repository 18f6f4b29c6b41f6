"""State container with replay-latest semantics.

A ``StateStream`` always holds the most recent value (once one has been
set). Subscribers receive that value immediately on subscription and every
subsequent update after it. Updates and deliveries are serialized by a
single re-entrant lock, so subscribers observe values in the order they were
set and never after their subscription has been cancelled.
"""

import logging
import threading
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from fieldplanner.streams.subscription import Subscription

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


class StateStream(Generic[T]):
    """Latest-value cell that pushes every change to its subscribers."""

    def __init__(self, initial: Any = _UNSET, name: Optional[str] = None):
        self.name = name or "stream"
        self._value = initial
        self._lock = threading.RLock()
        self._subscribers: List[Tuple[Subscription, Callable[[T], None]]] = []
        self._closed = False

    @property
    def has_value(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        """Latest value.

        Raises:
            LookupError: if no value has been set yet
        """
        with self._lock:
            if self._value is _UNSET:
                raise LookupError(f"{self.name} has no value yet")
            return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def update(self, value: T) -> None:
        """Store ``value`` and deliver it to every active subscriber."""
        with self._lock:
            if self._closed:
                logger.debug(f"Ignoring update on closed {self.name}")
                return
            self._value = value
            for subscription, callback in list(self._subscribers):
                self._deliver(subscription, callback, value)

    def update_value(self, transform: Callable[[T], T]) -> T:
        """Atomically replace the value with ``transform(current)``."""
        with self._lock:
            new_value = transform(self.value)
            self.update(new_value)
            return new_value

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        """Register ``callback``; it immediately receives the latest value, if any."""
        with self._lock:
            if self._closed:
                subscription = Subscription()
                subscription.cancel()
                return subscription

            subscription = Subscription(lambda: self._remove(subscription))
            self._subscribers.append((subscription, callback))
            if self._value is not _UNSET:
                self._deliver(subscription, callback, self._value)
            return subscription

    def close(self) -> None:
        """Cancel every subscription and ignore further updates."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            subscribers = list(self._subscribers)
        for subscription, _ in subscribers:
            subscription.cancel()
        logger.debug(f"Closed {self.name} ({len(subscribers)} subscribers released)")

    def _remove(self, subscription: Subscription) -> None:
        # Taking the lock waits out any delivery in progress on another thread.
        with self._lock:
            self._subscribers = [
                (sub, callback) for sub, callback in self._subscribers if sub is not subscription
            ]

    def _deliver(self, subscription: Subscription, callback: Callable[[T], None], value: T) -> None:
        if not subscription.active:
            return
        try:
            callback(value)
        except Exception:
            logger.exception(f"Subscriber of {self.name} failed")
