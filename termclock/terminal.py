"""
Curses terminal driver: screen size and input events.
"""

import curses
import logging
from typing import Optional, Tuple

from .controls import LEFT_BUTTON, Event, KeyPress, MouseDown, Resize
from .errors import TerminalError

log = logging.getLogger(__name__)

MOUSE_MASK = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED


class CursesTerminal:
    """Wraps the curses window handed over by curses.wrapper()."""

    def __init__(self, stdscr, mouse: bool = True):
        self.stdscr = stdscr
        self.mouse_enabled = False
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        if mouse:
            self.set_mouse_enabled(True)

    def set_mouse_enabled(self, enabled: bool) -> bool:
        mask = MOUSE_MASK if enabled else 0
        try:
            avail, _ = curses.mousemask(mask)
        except curses.error:
            self.mouse_enabled = False
            return False
        if enabled:
            try:
                curses.mouseinterval(0)
            except curses.error:
                pass
        self.mouse_enabled = enabled and avail != 0
        log.debug("mouse capture %s", "on" if self.mouse_enabled else "off")
        return self.mouse_enabled

    def current_size(self) -> Tuple[int, int]:
        """(width, height) in cells."""
        height, width = self.stdscr.getmaxyx()
        return width, height

    def poll_event(self, timeout: float) -> Optional[Event]:
        """Wait up to `timeout` seconds for one input event."""
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        try:
            key = self.stdscr.getch()
        except curses.error as e:
            raise TerminalError(f"reading input failed: {e}") from e

        if key == -1:
            return None
        if key == curses.KEY_RESIZE:
            return Resize()
        if key == curses.KEY_MOUSE:
            return self._read_mouse()
        return KeyPress(key)

    def _read_mouse(self) -> Optional[Event]:
        try:
            _, column, row, _, bstate = curses.getmouse()
        except curses.error:
            # Events outside the window or unsupported reports
            return None
        if bstate & MOUSE_MASK:
            return MouseDown(LEFT_BUTTON, column, row)
        return None
