import math

import pytest

from pielayout.geometry import (
    add,
    check_angle,
    get_angle,
    get_direction,
    get_distance,
    get_length,
    is_angle_between,
    normalize_angle,
    subtract,
    to_degrees,
    to_radians,
)
from pielayout.models import LayoutInputError


def test_degree_radian_conversion():
    assert to_degrees(math.pi) == pytest.approx(180.0)
    assert to_radians(90.0) == pytest.approx(math.pi / 2)
    assert to_degrees(to_radians(123.4)) == pytest.approx(123.4)


def test_vector_helpers():
    assert get_length((3.0, 4.0)) == pytest.approx(5.0)
    assert get_distance((1.0, 1.0), (4.0, 5.0)) == pytest.approx(5.0)
    assert add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
    assert subtract((1.0, 2.0), (3.0, 5.0)) == (-2.0, -3.0)


@pytest.mark.parametrize(
    "vec, expected",
    [
        ((0.0, -1.0), 0.0),
        ((1.0, 0.0), 90.0),
        ((0.0, 1.0), 180.0),
        ((-1.0, 0.0), 270.0),
        ((5.0, -5.0), 45.0),
    ],
)
def test_get_angle_is_clockwise_from_top(vec, expected):
    assert get_angle(vec) == pytest.approx(expected)


def test_get_angle_in_canonical_range():
    for x, y in [(-1e-9, -1.0), (-0.5, -0.5), (0.3, 0.9)]:
        angle = get_angle((x, y))
        assert 0.0 <= angle < 360.0


def test_get_direction_top_is_negative_y():
    x, y = get_direction(0.0, 2.0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(-2.0)

    x, y = get_direction(90.0, 1.0)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(0.0, abs=1e-12)


def test_get_direction_inverts_get_angle():
    for angle in (0.0, 30.0, 135.0, 200.0, 359.0):
        vec = get_direction(angle, 3.0)
        assert get_length(vec) == pytest.approx(3.0)
        assert get_angle(vec) == pytest.approx(angle)


class TestIsAngleBetween:
    def test_plain_range(self):
        assert is_angle_between(10.0, 0.0, 20.0)
        assert not is_angle_between(30.0, 0.0, 20.0)

    def test_start_exclusive_end_inclusive(self):
        assert not is_angle_between(0.0, 0.0, 20.0)
        assert is_angle_between(20.0, 0.0, 20.0)

    def test_negative_start(self):
        assert is_angle_between(350.0, -45.0, 45.0)
        assert is_angle_between(10.0, -45.0, 45.0)
        assert not is_angle_between(315.0, -45.0, 45.0)

    def test_end_beyond_full_turn(self):
        assert is_angle_between(10.0, 315.0, 405.0)
        assert is_angle_between(320.0, 315.0, 405.0)
        assert not is_angle_between(50.0, 315.0, 405.0)


def test_normalize_angle():
    assert normalize_angle(370.0) == pytest.approx(10.0)
    assert normalize_angle(-90.0) == pytest.approx(270.0)


def test_normalize_angle_tiny_negative_stays_below_full_turn():
    assert -1e-20 % 360.0 == 360.0
    assert normalize_angle(-1e-20) == 0.0
    assert normalize_angle(-1e-14) < 360.0


def test_check_angle_rejects_non_finite():
    with pytest.raises(LayoutInputError):
        check_angle(float("nan"))
    with pytest.raises(LayoutInputError):
        check_angle(float("inf"))
    with pytest.raises(LayoutInputError):
        check_angle("north")
    assert check_angle(12) == 12.0
