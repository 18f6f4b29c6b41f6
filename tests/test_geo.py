"""Tests for distance and travel time estimation."""

import pytest

from fieldplanner.engine.geo import distance_between, estimate_travel_time
from fieldplanner.models.constants import DEFAULT_AVERAGE_SPEED_MPS
from fieldplanner.models.position import Coordinate, Position


class TestDistanceBetween:
    """Test distance_between() for non-negativity and known distances."""

    def test_identical_coordinates_are_zero(self):
        point = Coordinate(latitude=37.7749, longitude=-122.4194)
        assert distance_between(point, point) == 0.0

    def test_position_and_coordinate_at_same_point_are_zero(self):
        position = Position(latitude=37.7749, longitude=-122.4194, accuracy_m=5.0)
        target = Coordinate(latitude=37.7749, longitude=-122.4194)
        assert distance_between(position, target) == 0.0

    def test_one_hundredth_degree_latitude(self):
        """0.01 degrees of latitude is about 1.11 km."""
        origin = Coordinate(latitude=37.7749, longitude=-122.4194)
        north = Coordinate(latitude=37.7849, longitude=-122.4194)
        assert distance_between(origin, north) == pytest.approx(1111.95, rel=1e-3)

    def test_symmetric(self):
        a = Coordinate(latitude=37.7749, longitude=-122.4194)
        b = Coordinate(latitude=37.8449, longitude=-122.3494)
        assert distance_between(a, b) == pytest.approx(distance_between(b, a))

    @pytest.mark.parametrize(
        "a, b",
        [
            ((0.0, 0.0), (0.0, 180.0)),
            ((90.0, 0.0), (-90.0, 0.0)),
            ((-33.8688, 151.2093), (51.5074, -0.1278)),
            ((37.7749, -122.4194), (37.7749000001, -122.4194)),
        ],
    )
    def test_never_negative(self, a, b):
        origin = Coordinate(latitude=a[0], longitude=a[1])
        destination = Coordinate(latitude=b[0], longitude=b[1])
        assert distance_between(origin, destination) >= 0.0

    def test_antipodal_is_half_circumference(self):
        origin = Coordinate(latitude=0.0, longitude=0.0)
        antipode = Coordinate(latitude=0.0, longitude=180.0)
        assert distance_between(origin, antipode) == pytest.approx(20015086.8, rel=1e-4)


class TestEstimateTravelTime:
    """Test estimate_travel_time() including the degenerate cases."""

    def test_unknown_distance(self):
        assert estimate_travel_time(None) is None

    def test_zero_distance_has_no_eta(self):
        assert estimate_travel_time(0.0) is None

    def test_default_speed_is_50_kmh(self):
        # 50 km/h covers 13888.9 m in 1000 s
        assert estimate_travel_time(13888.888888) == pytest.approx(1000.0, rel=1e-6)
        assert DEFAULT_AVERAGE_SPEED_MPS == pytest.approx(13.8889, rel=1e-4)

    def test_custom_speed(self):
        assert estimate_travel_time(1000.0, average_speed_mps=10.0) == pytest.approx(100.0)

    @pytest.mark.parametrize("speed", [0.0, -5.0])
    def test_rejects_non_positive_speed(self, speed):
        with pytest.raises(ValueError):
            estimate_travel_time(1000.0, average_speed_mps=speed)
