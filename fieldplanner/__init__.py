"""fieldplanner - location-aware task prioritization for field agents."""

__version__ = "0.1.0"
