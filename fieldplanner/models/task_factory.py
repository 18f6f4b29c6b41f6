"""Task creation factory for fieldplanner.

This module centralizes task creation logic so every supplier builds tasks
with the same defaults. It also provides the placeholder daily plan used
until a real backing store is wired in.
"""

import uuid
from datetime import datetime, timedelta
from typing import List, Optional

from fieldplanner.models.position import Coordinate
from fieldplanner.models.task import Task, TaskStatus


PLACEHOLDER_PHOTO_URL = "https://images.unsplash.com/photo-1554118811-1e0d58224f24?w=800&q=80"

# (venue, address, opening hours, status, photo)
_MOCK_VENUES = [
    (
        "Downtown Coffee Shop",
        "123 Main Street, San Francisco, CA 94102",
        "7:00 AM - 6:00 PM",
        TaskStatus.PLANNED,
        "https://images.unsplash.com/photo-1554118811-1e0d58224f24?w=800&q=80",
    ),
    (
        "Main Street Pharmacy",
        "456 Market Street, San Francisco, CA 94103",
        "9:00 AM - 5:00 PM",
        TaskStatus.PLANNED,
        "https://images.unsplash.com/photo-1584308666744-24d5c474f2ae?w=800&q=80",
    ),
    (
        "City Center Grocery",
        "789 Mission Street, San Francisco, CA 94105",
        "8:00 AM - 8:00 PM",
        TaskStatus.EN_ROUTE,
        "https://images.unsplash.com/photo-1556910096-6f5e72db6803?w=800&q=80",
    ),
    (
        "Bay Area Hardware Store",
        "321 Folsom Street, San Francisco, CA 94107",
        "7:00 AM - 7:00 PM",
        TaskStatus.PLANNED,
        "https://images.unsplash.com/photo-1581091226825-a6a2a5aee158?w=800&q=80",
    ),
    (
        "Pacific Bookstore",
        "654 California Street, San Francisco, CA 94108",
        "10:00 AM - 6:00 PM",
        TaskStatus.DONE,
        "https://images.unsplash.com/photo-1481627834876-b7833e8f5570?w=800&q=80",
    ),
    (
        "Golden Gate Bakery",
        "987 Geary Street, San Francisco, CA 94109",
        "6:00 AM - 4:00 PM",
        TaskStatus.PLANNED,
        "https://images.unsplash.com/photo-1555507036-ab1f4038808a?w=800&q=80",
    ),
    (
        "Union Square Electronics",
        "147 Powell Street, San Francisco, CA 94102",
        "9:00 AM - 7:00 PM",
        TaskStatus.PLANNED,
        "https://images.unsplash.com/photo-1560472354-b33ff0c44a43?w=800&q=80",
    ),
    (
        "Mission District Florist",
        "258 Valencia Street, San Francisco, CA 94110",
        "8:00 AM - 6:00 PM",
        TaskStatus.IN_PROGRESS,
        "https://images.unsplash.com/photo-1563241527-3004b7be0ffd?w=800&q=80",
    ),
]

MOCK_ORIGIN = Coordinate(latitude=37.7749, longitude=-122.4194)
MOCK_COORDINATE_STEP = 0.01


def create_task(
    venue_name: str,
    location: Coordinate,
    visiting_order: int,
    address: str = "",
    opening_hours: str = "",
    planned_visit_time: Optional[datetime] = None,
    status: TaskStatus = TaskStatus.PLANNED,
    photo_url: str = PLACEHOLDER_PHOTO_URL,
    task_id: Optional[str] = None,
) -> Task:
    """Create a task with defaults, allowing overrides.

    Args:
        venue_name: Name of the venue (required)
        location: Venue coordinate (required)
        visiting_order: Base priority, lower visits first (required)
        address: Street address
        opening_hours: Free-form opening hours text
        planned_visit_time: When the visit is planned (defaults to now)
        status: Task status (defaults to planned)
        photo_url: Venue photo URI
        task_id: Explicit id (defaults to a new UUID v4)

    Returns:
        Task with derived attributes left empty
    """
    return Task(
        id=task_id or str(uuid.uuid4()),
        venue_name=venue_name,
        address=address,
        opening_hours=opening_hours,
        planned_visit_time=planned_visit_time if planned_visit_time is not None else datetime.now(),
        status=status,
        visiting_order=visiting_order,
        photo_url=photo_url,
        location=location,
    )


def create_mock_daily_plan(now: Optional[datetime] = None) -> List[Task]:
    """Build the placeholder plan of eight San Francisco venues.

    Visits are planned at today's midnight + 1h, 3h, ... 15h, with visiting
    orders 1..8 and each venue 0.01 degrees north-east of the previous one.
    """
    now = now or datetime.now()
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)

    tasks = []
    for index, (venue, address, hours, status, photo) in enumerate(_MOCK_VENUES):
        offset = index * MOCK_COORDINATE_STEP
        tasks.append(
            create_task(
                venue_name=venue,
                address=address,
                opening_hours=hours,
                planned_visit_time=today + timedelta(hours=1 + 2 * index),
                status=status,
                visiting_order=index + 1,
                photo_url=photo,
                location=Coordinate(
                    latitude=round(MOCK_ORIGIN.latitude + offset, 6),
                    longitude=round(MOCK_ORIGIN.longitude + offset, 6),
                ),
            )
        )
    return tasks
