"""Cancellation handles for stream subscriptions."""

import logging
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by ``subscribe``.

    ``cancel()`` is idempotent and synchronous: once it returns, the
    subscribed callback receives nothing more.
    """

    def __init__(self, on_cancel: Optional[Callable[[], None]] = None):
        self._on_cancel = on_cancel
        self._active = True
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        with self._lock:
            if not self._active:
                return
            self._active = False
            on_cancel, self._on_cancel = self._on_cancel, None
        if on_cancel is not None:
            on_cancel()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


class CompositeSubscription(Subscription):
    """A bag of subscriptions cancelled together.

    Adding to a bag that was already cancelled cancels the new item at once.
    """

    def __init__(self, subscriptions: Optional[List[Subscription]] = None):
        super().__init__()
        self._children: List[Subscription] = []
        for subscription in subscriptions or []:
            self.add(subscription)

    def add(self, subscription: Subscription) -> Subscription:
        with self._lock:
            if self._active:
                self._children.append(subscription)
                return subscription
        subscription.cancel()
        return subscription

    def __len__(self) -> int:
        return len(self._children)

    def cancel(self) -> None:
        with self._lock:
            if not self._active:
                return
            self._active = False
            children, self._children = self._children, []
        for child in children:
            child.cancel()
        logger.debug(f"Cancelled {len(children)} subscriptions")
