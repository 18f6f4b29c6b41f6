"""Replay-latest state streams for fieldplanner."""

from fieldplanner.streams.state import StateStream
from fieldplanner.streams.subscription import Subscription, CompositeSubscription
from fieldplanner.streams.operators import combine_latest

__all__ = [
    "StateStream",
    "Subscription",
    "CompositeSubscription",
    "combine_latest",
]
