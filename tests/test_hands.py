import math

import pytest

from termclock.clock import sample
from termclock.hands import hour_units, project, project_hands, project_hour
from termclock.layout import Point, Rect, analog_geometry

ORIGIN = Point(40.0, 22.0)


def angle(point, origin=ORIGIN):
    # canvas y grows downward
    return math.atan2(-(point.y - origin.y), point.x - origin.x)


@pytest.mark.parametrize("units", range(60))
def test_hand_length_is_constant(units):
    tip = project(units, 60, 10.0, ORIGIN)
    assert math.hypot(tip.x - ORIGIN.x, tip.y - ORIGIN.y) == pytest.approx(10.0)


def test_twelve_points_up():
    tip = project(0, 60, 10.0, ORIGIN)
    assert tip.x == pytest.approx(ORIGIN.x)
    assert tip.y == pytest.approx(ORIGIN.y - 10.0)


def test_quarter_turn_points_right():
    tip = project(15, 60, 10.0, ORIGIN)
    assert tip.x == pytest.approx(ORIGIN.x + 10.0)
    assert tip.y == pytest.approx(ORIGIN.y)


def test_half_turn_points_down():
    tip = project(30, 60, 10.0, ORIGIN)
    assert tip.x == pytest.approx(ORIGIN.x)
    assert tip.y == pytest.approx(ORIGIN.y + 10.0)


def test_hour_units_creep_with_minutes():
    assert hour_units(12, 0) == 0
    assert hour_units(3, 0) == 15
    assert hour_units(2, 30) == pytest.approx(12.5)
    assert hour_units(11, 59) == pytest.approx(55 + 59 / 12)


def test_hour_hand_halfway_at_half_past():
    start = angle(project_hour(2, 0, 10.0, ORIGIN))
    end = angle(project_hour(3, 0, 10.0, ORIGIN))
    middle = angle(project_hour(2, 30, 10.0, ORIGIN))
    assert middle == pytest.approx((start + end) / 2)


def test_project_hands_uses_geometry_scales(fixed_now):
    geometry = analog_geometry(Rect(0, 0, 80, 24))
    hands = project_hands(sample(fixed_now), geometry)
    origin = geometry.origin

    def length(p):
        return math.hypot(p.x - origin.x, p.y - origin.y)

    assert length(hands.hour) == pytest.approx(geometry.hour_scale)
    assert length(hands.minute) == pytest.approx(geometry.minute_scale)
    assert length(hands.second) == pytest.approx(geometry.second_scale)
    # 30 minutes points straight down
    assert hands.minute.x == pytest.approx(origin.x)
    assert hands.minute.y > origin.y


def test_degenerate_geometry_collapses_to_origin(fixed_now):
    geometry = analog_geometry(Rect(0, 0, 0, 24))
    hands = project_hands(sample(fixed_now), geometry)
    for tip in (hands.hour, hands.minute, hands.second):
        assert tip.x == pytest.approx(geometry.origin.x)
        assert tip.y == pytest.approx(geometry.origin.y)
