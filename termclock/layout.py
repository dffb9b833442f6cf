"""
Layout engine: where the digits go, and the canvas geometry for the
analog face.

Terminal cells are roughly twice as tall as they are wide, so the analog
canvas uses two vertical units per row.  Canvas y grows downward, like
terminal rows.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from .modes import DisplayMode, SizeTier

HOUR_RATIO = 0.6
SECOND_RATIO = 0.8
MINUTE_RATIO = 0.9

# (height, width) of the titled glyph block for an 8 character "HH:MM:SS"
FOOTPRINTS = {
    SizeTier.FULL: (8 + 1, 8 * 8 + 1),
    SizeTier.HALF: (8 + 1, 4 * 8 + 2),
    SizeTier.QUADRANT: (4 + 2, 4 * 8 + 2),
    SizeTier.SEXTANT: (3 + 2, 4 * 8 + 2),
}


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains_strictly(self, column: int, row: int) -> bool:
        """True when the cell is inside the rect and not on its edge cells."""
        return self.x < column < self.right - 1 and self.y < row < self.bottom - 1


@dataclass(frozen=True)
class ScreenGeometry:
    origin: Point
    hour_scale: float
    minute_scale: float
    second_scale: float
    shorter_axis: float
    longer_axis: float
    axis_is_vertical_short: bool
    content_rect: Rect
    canvas_rect: Rect
    x_bound: float
    y_bound: float


def split_axis(start: int, available: int, length: int) -> Tuple[int, int]:
    """Leading flex / fixed / trailing flex split along one axis.

    Returns the offset and size of the fixed part, clamped to `available`.
    """
    available = max(0, available)
    size = min(max(0, length), available)
    lead = (available - size) // 2
    return start + lead, size


def digital_rect(screen: Rect, tier: SizeTier) -> Rect:
    """Center the glyph block for `tier` inside `screen`."""
    height, width = FOOTPRINTS[tier]
    y, h = split_axis(screen.y, screen.height, height)
    x, w = split_axis(screen.x, screen.width, width)
    return Rect(x, y, w, h)


def canvas_area(screen: Rect) -> Rect:
    """Cells the analog canvas paints into: everything below the title row."""
    if screen.height <= 1:
        return Rect(screen.x, screen.y, max(0, screen.width), 0)
    return Rect(screen.x, screen.y + 1, max(0, screen.width), screen.height - 1)


def analog_geometry(screen: Rect) -> ScreenGeometry:
    right = float(max(0, screen.width))
    top = float(max(0, screen.height * 2 - 4))
    origin = Point(right / 2, top / 2)

    shorter = min(right, top)
    longer = max(right, top)
    half = shorter / 2 if shorter > 0 else 0.0

    canvas = canvas_area(screen)
    return ScreenGeometry(
        origin=origin,
        hour_scale=half * HOUR_RATIO,
        minute_scale=half * MINUTE_RATIO,
        second_scale=half * SECOND_RATIO,
        shorter_axis=shorter,
        longer_axis=longer,
        axis_is_vertical_short=top < right,
        content_rect=canvas,
        canvas_rect=canvas,
        x_bound=right,
        y_bound=top,
    )


def frame_geometry(screen: Rect, mode: DisplayMode) -> ScreenGeometry:
    """Geometry for the frame about to be drawn in `mode`."""
    geometry = analog_geometry(screen)
    if mode.analog:
        return geometry
    return replace(geometry, content_rect=digital_rect(screen, mode.tier))


def canvas_point(column: int, row: int, geometry: ScreenGeometry) -> Point:
    """Map the center of a terminal cell into canvas coordinates."""
    area = geometry.canvas_rect
    if area.width == 0 or area.height == 0:
        return Point(0.0, 0.0)
    x = (column - area.x + 0.5) * geometry.x_bound / area.width
    y = (row - area.y + 0.5) * geometry.y_bound / area.height
    return Point(x, y)
