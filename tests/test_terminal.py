import curses

import pytest

from termclock.controls import KeyPress, MouseDown, Resize
from termclock.errors import TerminalError
from termclock import terminal as terminal_module
from termclock.terminal import MOUSE_MASK, CursesTerminal

from tests.conftest import FakeScreen


@pytest.fixture
def fake_curses(monkeypatch):
    calls = {'mousemask': [], 'mouse': None}
    monkeypatch.setattr(curses, 'curs_set', lambda visibility: None)
    monkeypatch.setattr(curses, 'mouseinterval', lambda interval: 0)

    def mousemask(mask):
        calls['mousemask'].append(mask)
        return mask, 0

    monkeypatch.setattr(curses, 'mousemask', mousemask)
    monkeypatch.setattr(curses, 'getmouse', lambda: calls['mouse'])
    return calls


def test_size_is_width_then_height(fake_curses):
    term = CursesTerminal(FakeScreen(100, 30))
    assert term.current_size() == (100, 30)


def test_mouse_capture(fake_curses):
    term = CursesTerminal(FakeScreen(), mouse=True)
    assert term.mouse_enabled
    assert fake_curses['mousemask'] == [MOUSE_MASK]
    assert not term.set_mouse_enabled(False)
    assert fake_curses['mousemask'][-1] == 0


def test_mouse_off(fake_curses):
    term = CursesTerminal(FakeScreen(), mouse=False)
    assert not term.mouse_enabled
    assert fake_curses['mousemask'] == []


def test_mouse_unavailable(monkeypatch, fake_curses):
    def broken(mask):
        raise curses.error("no mouse")

    monkeypatch.setattr(curses, 'mousemask', broken)
    assert not CursesTerminal(FakeScreen()).mouse_enabled


def test_poll_event_kinds(fake_curses):
    screen = FakeScreen(keys=[-1, curses.KEY_RESIZE, ord('q'), curses.KEY_MOUSE, curses.KEY_MOUSE])
    term = CursesTerminal(screen)
    assert term.poll_event(0.25) is None
    assert term.poll_event(0.25) == Resize()
    assert term.poll_event(0.25) == KeyPress(ord('q'))
    fake_curses['mouse'] = (0, 10, 5, 0, curses.BUTTON1_PRESSED)
    assert term.poll_event(0.25) == MouseDown(1, 10, 5)
    fake_curses['mouse'] = (0, 10, 5, 0, curses.BUTTON3_PRESSED)
    assert term.poll_event(0.25) is None
    assert screen.timeouts == [250] * 5


def test_getmouse_error_is_dropped(monkeypatch, fake_curses):
    def broken():
        raise curses.error("getmouse")

    monkeypatch.setattr(terminal_module.curses, 'getmouse', broken)
    term = CursesTerminal(FakeScreen(keys=[curses.KEY_MOUSE]))
    assert term.poll_event(0.1) is None


def test_read_failure_is_fatal(fake_curses):
    term = CursesTerminal(FakeScreen(keys=[curses.error("no input")]))
    with pytest.raises(TerminalError, match="reading input failed"):
        term.poll_event(0.1)
