"""Location source adapter for fieldplanner."""

from fieldplanner.location.service import LocationService

__all__ = ["LocationService"]
