"""
Hand projection: clock units to canvas points.

12 o'clock is 0 degrees and angles run clockwise, so a reading is turned
into the usual counter-clockwise-from-x angle with (90 - degrees).
"""

import math
from dataclasses import dataclass

from .clock import ClockSample
from .layout import Point, ScreenGeometry

UNITS_PER_REVOLUTION = 60


@dataclass(frozen=True)
class HandSet:
    hour: Point
    minute: Point
    second: Point


def project(clock_units: float, units_per_revolution: int, scale: float, origin: Point) -> Point:
    """Tip of a hand `clock_units` along a dial of `units_per_revolution`."""
    degrees = clock_units * (360 / units_per_revolution)
    theta = (90 - degrees) * math.pi / 180
    # canvas y grows downward
    return Point(
        origin.x + math.cos(theta) * scale,
        origin.y - math.sin(theta) * scale,
    )


def hour_units(hour12: int, minute: int) -> float:
    """Hour position on a 60 unit dial, creeping with the minutes."""
    return (hour12 % 12) * 5 + minute / 12


def project_hour(hour12: int, minute: int, scale: float, origin: Point) -> Point:
    return project(hour_units(hour12, minute), UNITS_PER_REVOLUTION, scale, origin)


def project_hands(sample: ClockSample, geometry: ScreenGeometry) -> HandSet:
    origin = geometry.origin
    return HandSet(
        hour=project_hour(sample.hour12, sample.minute, geometry.hour_scale, origin),
        minute=project(sample.minute, UNITS_PER_REVOLUTION, geometry.minute_scale, origin),
        second=project(sample.second, UNITS_PER_REVOLUTION, geometry.second_scale, origin),
    )
