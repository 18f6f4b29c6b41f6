"""Runtime configuration for fieldplanner.

Settings come from the process environment (optionally populated from a
``.env`` file):

- ``FIELDPLANNER_AVERAGE_SPEED_KMH``: speed used for travel time estimates (default 50)
- ``FIELDPLANNER_DISTANCE_FILTER_M``: minimum move reported by the location feed (default 100)
- ``FIELDPLANNER_LOG_LEVEL``: logging level for ``configure_logging`` (default WARNING)
"""

import logging
import os
from typing import Mapping, Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from fieldplanner.models.constants import DEFAULT_AVERAGE_SPEED_KMH, DEFAULT_DISTANCE_FILTER_M

load_dotenv()


class PlannerSettings(BaseModel):
    """Resolved configuration values."""

    average_speed_kmh: float = Field(DEFAULT_AVERAGE_SPEED_KMH, gt=0.0, description="Average travel speed in km/h")
    distance_filter_m: float = Field(DEFAULT_DISTANCE_FILTER_M, ge=0.0, description="Location distance filter in meters")
    log_level: str = Field("WARNING", description="Logging level name")

    @property
    def average_speed_mps(self) -> float:
        return self.average_speed_kmh * 1000 / 3600


def get_planner_settings(environ: Optional[Mapping[str, str]] = None) -> PlannerSettings:
    """Return settings resolved from ``environ`` (defaults to ``os.environ``).

    This is separated from module import so it can be unit tested
    deterministically.

    Raises:
        ValueError: if a value is not a number or out of range
    """
    env = os.environ if environ is None else environ
    return PlannerSettings(
        average_speed_kmh=float(env.get("FIELDPLANNER_AVERAGE_SPEED_KMH", DEFAULT_AVERAGE_SPEED_KMH)),
        distance_filter_m=float(env.get("FIELDPLANNER_DISTANCE_FILTER_M", DEFAULT_DISTANCE_FILTER_M)),
        log_level=env.get("FIELDPLANNER_LOG_LEVEL", "WARNING").upper(),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding fieldplanner."""
    level_name = (level or get_planner_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
