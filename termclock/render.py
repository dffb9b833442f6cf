"""
Frame composer: paints digits and hands onto a curses window.
"""

import curses
import logging

from .canvas import BrailleCanvas
from .clock import ClockSample
from .config import CONFIG
from .font import render_text
from .hands import HandSet
from .layout import Rect, ScreenGeometry
from .modes import SizeTier

log = logging.getLogger(__name__)

PAIR_ACCENT = 1
PAIR_MUTED = 2


def init_colors() -> bool:
    """Set up the accent and muted color pairs; False on monochrome terminals."""
    if not curses.has_colors():
        return False
    try:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_ACCENT, curses.COLOR_RED, -1)
        curses.init_pair(PAIR_MUTED, curses.COLOR_BLACK, -1)
    except curses.error:
        log.debug("terminal refused color setup")
        return False
    return True


class CursesComposer:
    """Draws one frame at a time on `stdscr`."""

    def __init__(self, stdscr, colors: bool = True, hint: str = CONFIG['hint']):
        self.stdscr = stdscr
        self.colors = colors
        self.hint = hint

    def attr(self, role: str) -> int:
        name = CONFIG['colors'].get(role, role)
        if name == 'accent':
            return curses.color_pair(PAIR_ACCENT) if self.colors else curses.A_BOLD
        if name == 'muted':
            return curses.color_pair(PAIR_MUTED) | curses.A_BOLD if self.colors else curses.A_DIM
        return curses.A_NORMAL

    def put(self, row: int, column: int, text: str, attr: int = curses.A_NORMAL):
        """addstr clipped to the window."""
        height, width = self.stdscr.getmaxyx()
        if row < 0 or row >= height or column >= width or not text:
            return
        if column < 0:
            text = text[-column:]
            column = 0
        text = text[:width - column]
        try:
            self.stdscr.addstr(row, column, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            pass

    def put_centered(self, row: int, rect: Rect, text: str, attr: int = curses.A_NORMAL):
        text = text[:rect.width]
        self.put(row, rect.x + (rect.width - len(text)) // 2, text, attr)

    def begin(self):
        self.stdscr.erase()

    def end(self):
        self.stdscr.refresh()

    def draw_digital(self, rect: Rect, sample: ClockSample, tier: SizeTier):
        if rect.width == 0 or rect.height == 0:
            return
        self.put(rect.y, rect.x, sample.title[:rect.width])
        for i, line in enumerate(render_text(sample.time_label, tier)):
            row = rect.y + 1 + i
            if row >= rect.bottom:
                break
            self.put(row, rect.x, line[:rect.width])
        if rect.height > 1:
            self.put_centered(rect.bottom - 1, rect, self.hint)

    def draw_analog(self, geometry: ScreenGeometry, hands: HandSet, sample: ClockSample):
        height, width = self.stdscr.getmaxyx()
        self.put_centered(0, Rect(0, 0, width, height), sample.title)

        area = geometry.canvas_rect
        canvas = BrailleCanvas(area.width, area.height, geometry.x_bound, geometry.y_bound)
        origin = geometry.origin
        # Drawn in this order so the hour hand ends up on top
        for tip, role in ((hands.second, 'second'), (hands.minute, 'minute'), (hands.hour, 'hour')):
            canvas.line(origin.x, origin.y, tip.x, tip.y, role)
        for column, row, char, role in canvas.cells_by_row():
            self.put(area.y + row, area.x + column, char, self.attr(role))
