"""
Terminal Clock
Big digits or an analog face, redrawn in place until you quit.

Usage: python -m termclock [-s {full,half,quadrant,sextant,analog}]

Controls:
- Tab / Space: next display mode
- Left click on the clock: next display mode
- a / d: back to digital
- q / Esc: quit
"""

import argparse
import curses
import logging
from datetime import datetime
from typing import Callable, NamedTuple, Optional

from rich.console import Console

from . import __version__
from .clock import ClockSample, now_local, sample
from .config import load_config
from .controls import Action, apply, handle_event
from .errors import TerminalError
from .hands import HandSet, project_hands
from .layout import Rect, ScreenGeometry, frame_geometry
from .logging_setup import setup_logging
from .modes import MODE_NAMES, DisplayMode
from .render import CursesComposer, init_colors
from .terminal import CursesTerminal

log = logging.getLogger(__name__)


class Frame(NamedTuple):
    sample: ClockSample
    geometry: ScreenGeometry
    hands: HandSet


def compose_frame(now: datetime, width: int, height: int, mode: DisplayMode) -> Frame:
    """Everything needed to draw one frame, computed from scratch."""
    clock_sample = sample(now)
    geometry = frame_geometry(Rect(0, 0, max(0, width), max(0, height)), mode)
    return Frame(clock_sample, geometry, project_hands(clock_sample, geometry))


class ClockApp:
    """Main loop: poll input, update the mode, draw a frame."""

    def __init__(self, terminal, composer, mode: DisplayMode, interval: float = 0.25,
                 keys=None, clock: Callable[[], datetime] = now_local):
        self.terminal = terminal
        self.composer = composer
        self.mode = mode
        self.interval = interval
        self.keys = keys
        self.clock = clock
        self.running = True

    def step(self, event, geometry: Optional[ScreenGeometry]) -> Optional[ScreenGeometry]:
        """Handle one event and draw; returns the geometry just drawn."""
        action = handle_event(event, geometry, self.mode, self.keys)
        if action is Action.QUIT:
            log.info("quit requested")
            self.running = False
            return geometry

        mode = apply(action, self.mode)
        if mode != self.mode:
            log.info("display mode %s -> %s", self.mode.name, mode.name)
            self.mode = mode

        width, height = self.terminal.current_size()
        frame = compose_frame(self.clock(), width, height, self.mode)
        self.draw(frame)
        return frame.geometry

    def draw(self, frame: Frame):
        self.composer.begin()
        if self.mode.analog:
            self.composer.draw_analog(frame.geometry, frame.hands, frame.sample)
        else:
            self.composer.draw_digital(frame.geometry.content_rect, frame.sample, self.mode.tier)
        self.composer.end()

    def run(self) -> DisplayMode:
        # Geometry from the previous frame is what clicks are tested against
        geometry = None
        while self.running:
            event = self.terminal.poll_event(self.interval)
            geometry = self.step(event, geometry)
        return self.mode


def run_clock(stdscr, config) -> DisplayMode:
    """curses.wrapper() target."""
    try:
        terminal = CursesTerminal(stdscr, mouse=config['mouse'])
    except curses.error as e:
        raise TerminalError(f"terminal setup failed: {e}") from e
    composer = CursesComposer(stdscr, colors=init_colors(), hint=config['hint'])
    app = ClockApp(
        terminal,
        composer,
        DisplayMode.from_name(config['size']),
        interval=config['interval_ms'] / 1000,
        keys=config['keys'],
    )
    return app.run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termclock", description="Terminal clock with big digits and an analog face")
    parser.add_argument("-s", "--size", choices=MODE_NAMES,
                        help="Initial display mode (default: quadrant, or $TERMCLOCK_SIZE)")
    parser.add_argument("--interval", type=int, metavar="MS",
                        help="Input poll timeout and redraw interval in milliseconds (default: 250)")
    parser.add_argument("--no-mouse", action="store_true", help="Don't capture mouse clicks")
    parser.add_argument("--log-file", metavar="PATH", help="Write log messages to PATH")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (repeat for debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args)
    setup_logging(config['verbosity'], config['log_file'])
    console = Console(stderr=True)

    try:
        mode = curses.wrapper(run_clock, config)
    except KeyboardInterrupt:
        return 0
    except TerminalError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except curses.error as e:
        console.print(f"[red]Error: terminal setup failed: {e}[/red]")
        return 1

    log.info("exited in %s mode", mode.name)
    return 0
