"""Task data model for fieldplanner."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from fieldplanner.models.position import Coordinate


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PLANNED = "planned"
    EN_ROUTE = "enRoute"
    IN_PROGRESS = "inProgress"
    DONE = "done"
    CANCELLED = "cancelled"
    CANT_COMPLETE = "cantComplete"

    @property
    def display_name(self) -> str:
        """Human readable label shown to the agent."""
        return _STATUS_DISPLAY_NAMES[self]


_STATUS_DISPLAY_NAMES = {
    TaskStatus.PLANNED: "Planned",
    TaskStatus.EN_ROUTE: "En route",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
    TaskStatus.CANCELLED: "Cancelled",
    TaskStatus.CANT_COMPLETE: "Can't complete",
}


class Task(BaseModel):
    """A venue visit assigned to a field agent.

    Static attributes are set by the task supplier. The two derived attributes
    are only ever filled in by the prioritization engine, on a copy.
    """

    id: str = Field(..., min_length=1, description="Unique task identifier (UUID v4)")
    venue_name: str = Field(..., min_length=1, description="Name of the venue to visit")
    address: str = Field(..., description="Street address of the venue")
    opening_hours: str = Field("", description="Free-form opening hours text")
    planned_visit_time: datetime = Field(..., description="When the visit is planned")
    status: TaskStatus = Field(TaskStatus.PLANNED, description="Task status")
    visiting_order: int = Field(..., description="Base priority; lower visits first")
    photo_url: str = Field(..., min_length=1, description="URI of the venue photo")
    location: Coordinate = Field(..., description="Venue location")

    # Derived by the engine
    distance_from_current_location: Optional[float] = Field(
        None, ge=0.0, description="Meters from the current position, null if position unknown"
    )
    estimated_travel_time: Optional[float] = Field(
        None, ge=0.0, description="Seconds to reach the venue, null if distance unknown or zero"
    )

    class Config:
        """Pydantic configuration."""
        frozen = True
