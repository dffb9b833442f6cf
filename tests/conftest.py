"""Shared fakes for the termclock test suite."""

from datetime import datetime

import pytest

from termclock.controls import KeyPress


class FakeTerminal:
    """Replays a list of events, then asks to quit."""

    def __init__(self, events, size=(80, 24)):
        self.events = list(events)
        self.size = size
        self.timeouts = []

    def current_size(self):
        return self.size

    def poll_event(self, timeout):
        self.timeouts.append(timeout)
        if self.events:
            return self.events.pop(0)
        return KeyPress(ord('q'))


class FakeComposer:
    """Records draw calls instead of painting."""

    def __init__(self):
        self.calls = []

    def begin(self):
        self.calls.append(('begin',))

    def end(self):
        self.calls.append(('end',))

    def draw_digital(self, rect, sample, tier):
        self.calls.append(('digital', rect, sample, tier))

    def draw_analog(self, geometry, hands, sample):
        self.calls.append(('analog', geometry, hands, sample))

    def draws(self):
        return [call for call in self.calls if call[0] in ('digital', 'analog')]


class FakeScreen:
    """Just enough of a curses window for the composer and the driver."""

    def __init__(self, width=80, height=24, keys=()):
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.writes = []
        self.timeouts = []
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, row, column, text, attr=0):
        self.writes.append((row, column, text, attr))

    def erase(self):
        self.erased += 1

    def refresh(self):
        self.refreshed += 1

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        if self.keys:
            key = self.keys.pop(0)
            if isinstance(key, Exception):
                raise key
            return key
        return -1


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 9, 14, 30, 15)
