"""Location source adapter.

A platform location provider (the device's location manager) pushes fixes,
errors and permission changes into ``LocationService``; the service exposes
them as replay-latest streams. Any failure to locate the agent (error,
denied or restricted permission) is published as a ``None`` position rather
than terminating the stream. Retry and backoff belong to the provider.
"""

import logging
from typing import Optional, Sequence

from fieldplanner.config import get_planner_settings
from fieldplanner.engine.geo import distance_between
from fieldplanner.models.position import LocationAuthorizationStatus, Position
from fieldplanner.streams.state import StateStream

logger = logging.getLogger(__name__)


class LocationService:
    """Publishes the agent's current position and location permission state."""

    def __init__(self, distance_filter_m: Optional[float] = None):
        if distance_filter_m is None:
            distance_filter_m = get_planner_settings().distance_filter_m
        if distance_filter_m < 0:
            raise ValueError(f"distance_filter_m must not be negative, got {distance_filter_m}")
        self.distance_filter_m = distance_filter_m

        self.current_location: StateStream[Optional[Position]] = StateStream(None, name="current_location")
        self.authorization_status: StateStream[LocationAuthorizationStatus] = StateStream(
            LocationAuthorizationStatus.NOT_DETERMINED, name="authorization_status"
        )
        self.is_updating = False
        self.permission_requested = False

    def start(self, status: LocationAuthorizationStatus) -> None:
        """Record the provider's authorization status and begin updates if allowed."""
        self.authorization_status.update(status)
        if status == LocationAuthorizationStatus.NOT_DETERMINED:
            self.permission_requested = True
            logger.info("Location permission not determined; requested when-in-use authorization")
        elif status.is_authorized:
            self._start_updating()
        else:
            logger.warning(f"Location permission is {status.value}; position unavailable")
            self.current_location.update(None)
            self.stop()

    def stop(self) -> None:
        if self.is_updating:
            logger.info("Stopped location updates")
        self.is_updating = False

    def handle_location_update(self, positions: Sequence[Position]) -> None:
        """Accept a batch of fixes from the provider; only the last one matters.

        Fixes arriving while updates are stopped (not yet authorized, denied,
        or after ``stop()``) are dropped, as are fixes closer than
        ``distance_filter_m`` to the last published position.
        """
        if not positions:
            return
        if not self.is_updating:
            logger.debug("Dropped fix while location updates are stopped")
            return
        position = positions[-1]

        last = self.current_location.value
        if last is not None and distance_between(last, position) < self.distance_filter_m:
            logger.debug(f"Dropped fix within {self.distance_filter_m}m of last position")
            return

        logger.debug(f"Location update: {position.latitude:.5f}, {position.longitude:.5f}")
        self.current_location.update(position)

    def handle_location_error(self, error: Optional[BaseException] = None) -> None:
        """Publish an unknown position after a provider error."""
        if error is not None:
            logger.warning(f"Location provider error: {type(error).__name__}: {error}")
        else:
            logger.warning("Location provider error")
        self.current_location.update(None)

    def handle_authorization_change(self, status: LocationAuthorizationStatus) -> None:
        self.authorization_status.update(status)
        if status.is_authorized:
            self._start_updating()
        elif status in (LocationAuthorizationStatus.DENIED, LocationAuthorizationStatus.RESTRICTED):
            logger.warning(f"Location permission {status.value}; position unavailable")
            self.current_location.update(None)
            self.stop()

    def _start_updating(self) -> None:
        if not self.is_updating:
            logger.info(f"Started location updates (distance filter {self.distance_filter_m}m)")
        self.is_updating = True
