"""Constants for fieldplanner.

This module centralizes all magic numbers and default values used throughout the application.
"""

# Travel time estimation
DEFAULT_AVERAGE_SPEED_KMH = 50.0
DEFAULT_AVERAGE_SPEED_MPS = DEFAULT_AVERAGE_SPEED_KMH * 1000 / 3600  # ~13.9 m/s

# Geodesy
EARTH_RADIUS_M = 6371000.0  # Mean Earth radius in meters

# Location feed
DEFAULT_DISTANCE_FILTER_M = 100.0  # Ignore moves smaller than this

# Coordinate bounds
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
