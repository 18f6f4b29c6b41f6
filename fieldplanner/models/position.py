"""Coordinate and position models for fieldplanner."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from fieldplanner.models.constants import MIN_LATITUDE, MAX_LATITUDE, MIN_LONGITUDE, MAX_LONGITUDE


class LocationAuthorizationStatus(str, Enum):
    """Location permission state reported by the device."""
    NOT_DETERMINED = "not_determined"
    RESTRICTED = "restricted"
    DENIED = "denied"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"
    AUTHORIZED_ALWAYS = "authorized_always"

    @property
    def is_authorized(self) -> bool:
        return self in (
            LocationAuthorizationStatus.AUTHORIZED_WHEN_IN_USE,
            LocationAuthorizationStatus.AUTHORIZED_ALWAYS,
        )


class Coordinate(BaseModel):
    """A point on the globe (WGS84 degrees)."""

    latitude: float = Field(..., ge=MIN_LATITUDE, le=MAX_LATITUDE, description="Latitude in degrees")
    longitude: float = Field(..., ge=MIN_LONGITUDE, le=MAX_LONGITUDE, description="Longitude in degrees")

    class Config:
        """Pydantic configuration."""
        frozen = True


class Position(Coordinate):
    """The agent's current position as reported by the location feed.

    An unknown position (permission denied, hardware error, timeout) is
    represented by ``None`` wherever an ``Optional[Position]`` is accepted.
    """

    accuracy_m: Optional[float] = Field(None, ge=0.0, description="Horizontal accuracy in meters")
    timestamp: Optional[datetime] = Field(None, description="When the fix was taken")
