"""Pytest fixtures and configuration for fieldplanner tests."""

import pytest
from datetime import datetime
import uuid

from fieldplanner.engine.prioritization import TaskPrioritizationEngine, TaskSource
from fieldplanner.location.service import LocationService
from fieldplanner.models.constants import DEFAULT_AVERAGE_SPEED_MPS
from fieldplanner.models.position import Coordinate, LocationAuthorizationStatus, Position
from fieldplanner.models.task import Task, TaskStatus


SAN_FRANCISCO = Position(latitude=37.7749, longitude=-122.4194)


@pytest.fixture
def current_position():
    """Agent position in downtown San Francisco."""
    return SAN_FRANCISCO


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "venue_name": "Test Venue",
        "address": "1 Test Street, San Francisco, CA 94102",
        "opening_hours": "9:00 AM - 5:00 PM",
        "planned_visit_time": datetime(2024, 1, 1, 10, 0, 0),
        "status": TaskStatus.PLANNED,
        "visiting_order": 1,
        "photo_url": "https://example.com/venue.jpg",
        "location": Coordinate(latitude=37.7749, longitude=-122.4194),
    }


@pytest.fixture
def make_task(sample_task_base):
    """Factory for tasks with a fresh id and overridden fields."""
    def _make(**overrides):
        return Task(**{**sample_task_base, "id": str(uuid.uuid4()), **overrides})
    return _make


@pytest.fixture
def engine():
    """Engine with the default 50 km/h average speed."""
    return TaskPrioritizationEngine(average_speed_mps=DEFAULT_AVERAGE_SPEED_MPS)


@pytest.fixture
def location_service():
    """Location service with the default 100 m distance filter."""
    return LocationService(distance_filter_m=100.0)


@pytest.fixture
def active_location_service(location_service):
    """Location service with when-in-use permission granted and updates running."""
    location_service.start(LocationAuthorizationStatus.AUTHORIZED_WHEN_IN_USE)
    return location_service


@pytest.fixture
def task_source(make_task):
    """Task source holding two tasks."""
    return TaskSource([
        make_task(venue_name="Second", visiting_order=2),
        make_task(
            venue_name="First",
            visiting_order=1,
            location=Coordinate(latitude=37.7849, longitude=-122.4194),
        ),
    ])
