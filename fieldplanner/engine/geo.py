"""Distance and travel time estimation.

Distances are great-circle (haversine) distances on a spherical Earth.
At the scale of a single city this is within a fraction of a percent of
the ellipsoidal distance a device location API would report.
"""

import math
from typing import Optional

from fieldplanner.models.constants import EARTH_RADIUS_M, DEFAULT_AVERAGE_SPEED_MPS
from fieldplanner.models.position import Coordinate


def distance_between(origin: Coordinate, destination: Coordinate) -> float:
    """Haversine distance in meters between two coordinates.

    Always non-negative; exactly 0.0 for identical coordinates.
    """
    if origin.latitude == destination.latitude and origin.longitude == destination.longitude:
        return 0.0

    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(destination.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(destination.longitude - origin.longitude)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a)))

    return max(0.0, EARTH_RADIUS_M * c)


def estimate_travel_time(
    distance: Optional[float],
    average_speed_mps: float = DEFAULT_AVERAGE_SPEED_MPS,
) -> Optional[float]:
    """Estimate travel time in seconds at a constant average speed.

    Args:
        distance: Distance in meters, or None if unknown
        average_speed_mps: Average speed in meters per second

    Returns:
        Seconds, or None when the distance is unknown or zero

    Raises:
        ValueError: if average_speed_mps is not positive
    """
    if average_speed_mps <= 0:
        raise ValueError(f"average_speed_mps must be positive, got {average_speed_mps}")
    if distance is None or distance <= 0:
        return None
    return distance / average_speed_mps
