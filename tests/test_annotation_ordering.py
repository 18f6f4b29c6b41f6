"""Tests for task annotation and visit ordering (deterministic).

These tests verify that annotation followed by ordering is a pure function
of the task set and position.
"""

import pytest

from fieldplanner.engine.annotation import annotate, annotate_all
from fieldplanner.engine.ordering import order_tasks
from fieldplanner.models.position import Coordinate, Position


class TestAnnotate:
    """Test annotate() derived fields."""

    def test_unknown_position_leaves_derived_fields_absent(self, make_task):
        task = make_task(location=Coordinate(latitude=37.8, longitude=-122.4))
        annotated = annotate(task, None)
        assert annotated.distance_from_current_location is None
        assert annotated.estimated_travel_time is None

    def test_unknown_position_clears_previous_annotation(self, make_task, current_position):
        task = make_task(location=Coordinate(latitude=37.7849, longitude=-122.4194))
        annotated = annotate(annotate(task, current_position), None)
        assert annotated.distance_from_current_location is None
        assert annotated.estimated_travel_time is None

    def test_task_at_current_position(self, make_task, current_position):
        task = make_task(location=Coordinate(latitude=37.7749, longitude=-122.4194))
        annotated = annotate(task, current_position)
        assert annotated.distance_from_current_location == 0.0
        assert annotated.estimated_travel_time is None

    def test_distant_task(self, make_task, current_position):
        task = make_task(location=Coordinate(latitude=37.7849, longitude=-122.4194))
        annotated = annotate(task, current_position)
        assert annotated.distance_from_current_location == pytest.approx(1112, rel=0.01)
        assert annotated.estimated_travel_time == pytest.approx(80, rel=0.01)

    def test_speed_is_configurable(self, make_task, current_position):
        task = make_task(location=Coordinate(latitude=37.7849, longitude=-122.4194))
        annotated = annotate(task, current_position, average_speed_mps=1.0)
        assert annotated.estimated_travel_time == pytest.approx(annotated.distance_from_current_location)

    def test_does_not_mutate_input(self, make_task, current_position):
        task = make_task(location=Coordinate(latitude=37.7849, longitude=-122.4194))
        annotate(task, current_position)
        assert task.distance_from_current_location is None
        assert task.estimated_travel_time is None

    def test_static_attributes_preserved(self, make_task, current_position):
        task = make_task(location=Coordinate(latitude=37.7849, longitude=-122.4194))
        annotated = annotate(task, current_position)
        assert annotated.id == task.id
        assert annotated.venue_name == task.venue_name
        assert annotated.visiting_order == task.visiting_order
        assert annotated.location == task.location

    def test_annotate_all_with_unknown_position(self, make_task):
        tasks = [make_task(visiting_order=i) for i in range(4)]
        for annotated in annotate_all(tasks, None):
            assert annotated.distance_from_current_location is None
            assert annotated.estimated_travel_time is None


class TestOrderTasks:
    """Test order_tasks() stable ordering."""

    def test_sorts_by_visiting_order(self, make_task):
        tasks = [make_task(visiting_order=o) for o in (5, 2, 9, 1)]
        assert [t.visiting_order for t in order_tasks(tasks)] == [1, 2, 5, 9]

    def test_ties_keep_input_order(self, make_task):
        a = make_task(venue_name="A", visiting_order=3)
        b = make_task(venue_name="B", visiting_order=1)
        c = make_task(venue_name="C", visiting_order=2)
        d = make_task(venue_name="D", visiting_order=1)

        ordered = order_tasks([a, b, c, d])
        assert [t.venue_name for t in ordered] == ["B", "D", "C", "A"]

    def test_empty(self):
        assert order_tasks([]) == []

    def test_returns_new_list(self, make_task):
        tasks = [make_task(visiting_order=2), make_task(visiting_order=1)]
        ordered = order_tasks(tasks)
        assert ordered is not tasks
        assert tasks[0].visiting_order == 2


class TestDeterminism:
    """Same inputs must always produce the same output."""

    def test_repeated_calls_identical(self, make_task, current_position):
        tasks = [
            make_task(visiting_order=2, location=Coordinate(latitude=37.79, longitude=-122.41)),
            make_task(visiting_order=1, location=Coordinate(latitude=37.80, longitude=-122.40)),
            make_task(visiting_order=2, location=Coordinate(latitude=37.77, longitude=-122.43)),
        ]
        position = Position(latitude=37.7749, longitude=-122.4194)

        first = order_tasks(annotate_all(tasks, position))
        for _ in range(5):
            assert order_tasks(annotate_all(tasks, position)) == first
