"""
Braille dot canvas for the analog face.

Every terminal cell holds a 2x4 grid of dots, which gives lines roughly
four times the resolution of plain block characters.
"""

from typing import Dict, Iterator, List, Optional, Tuple

BRAILLE_BASE = 0x2800

# DOT_BITS[dy][dx]
DOT_BITS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """Integer points on the segment from (x0, y0) to (x1, y1)."""
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


class BrailleCanvas:
    """Maps canvas coordinates in [0, x_bound] x [0, y_bound] onto cells."""

    def __init__(self, columns: int, rows: int, x_bound: float, y_bound: float):
        self.columns = max(0, columns)
        self.rows = max(0, rows)
        self.x_bound = x_bound
        self.y_bound = y_bound
        self.cells: Dict[Tuple[int, int], int] = {}
        self.colors: Dict[Tuple[int, int], Optional[str]] = {}

    @property
    def dots_wide(self) -> int:
        return self.columns * 2

    @property
    def dots_high(self) -> int:
        return self.rows * 4

    def to_dot(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        if self.x_bound <= 0 or self.y_bound <= 0 or not self.columns or not self.rows:
            return None
        if not (0 <= x <= self.x_bound and 0 <= y <= self.y_bound):
            return None
        dot_x = int(x * (self.dots_wide - 1) / self.x_bound)
        dot_y = int(y * (self.dots_high - 1) / self.y_bound)
        return dot_x, dot_y

    def set_dot(self, dot_x: int, dot_y: int, color: Optional[str] = None):
        cell = (dot_x // 2, dot_y // 4)
        self.cells[cell] = self.cells.get(cell, 0) | DOT_BITS[dot_y % 4][dot_x % 2]
        self.colors[cell] = color

    def line(self, x1: float, y1: float, x2: float, y2: float, color: Optional[str] = None):
        start = self.to_dot(x1, y1)
        end = self.to_dot(x2, y2)
        if start is None or end is None:
            return
        for dot_x, dot_y in bresenham(*start, *end):
            self.set_dot(dot_x, dot_y, color)

    def cells_by_row(self) -> List[Tuple[int, int, str, Optional[str]]]:
        """(column, row, char, color) for every non-empty cell."""
        return [
            (column, row, chr(BRAILLE_BASE + bits), self.colors.get((column, row)))
            for (column, row), bits in sorted(self.cells.items(), key=lambda item: (item[0][1], item[0][0]))
        ]
