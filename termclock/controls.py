"""
Input mapping: terminal events to display actions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Union

from .config import CONFIG
from .layout import ScreenGeometry, canvas_point
from .modes import DisplayMode

LEFT_BUTTON = 1


class Action(Enum):
    NONE = "none"
    QUIT = "quit"
    ADVANCE = "advance"
    FORCE_DIGITAL = "force_digital"


@dataclass(frozen=True)
class KeyPress:
    code: int
    kind: str = "press"


@dataclass(frozen=True)
class MouseDown:
    button: int
    column: int
    row: int


@dataclass(frozen=True)
class Resize:
    pass


Event = Union[KeyPress, MouseDown, Resize]


def handle_key(event: KeyPress, keys: Optional[Dict[str, Sequence[int]]] = None) -> Action:
    """Map a key press to an action; releases and repeats are ignored."""
    if event.kind != "press":
        return Action.NONE
    keys = keys or CONFIG['keys']
    if event.code in keys['quit']:
        return Action.QUIT
    if event.code in keys['advance']:
        return Action.ADVANCE
    if event.code in keys['digital']:
        return Action.FORCE_DIGITAL
    return Action.NONE


def _inside_face(column: int, row: int, geometry: ScreenGeometry) -> bool:
    """Hit test against the square the analog face is drawn in."""
    point = canvas_point(column, row, geometry)
    side = geometry.shorter_axis
    offset = (geometry.longer_axis - side) / 2
    if geometry.axis_is_vertical_short:
        left, top = offset, 0.0
    else:
        left, top = 0.0, offset
    return left < point.x < left + side and top < point.y < top + side


def handle_click(event: MouseDown, geometry: Optional[ScreenGeometry], mode: DisplayMode) -> Action:
    """Left clicks on the clock advance the mode.

    `geometry` is the one computed for the previous frame; before the first
    frame there is nothing to hit.
    """
    if event.button != LEFT_BUTTON or geometry is None:
        return Action.NONE
    if mode.analog:
        hit = _inside_face(event.column, event.row, geometry)
    else:
        hit = geometry.content_rect.contains_strictly(event.column, event.row)
    return Action.ADVANCE if hit else Action.NONE


def handle_event(event: Optional[Event], geometry: Optional[ScreenGeometry], mode: DisplayMode,
                 keys: Optional[Dict[str, Sequence[int]]] = None) -> Action:
    if isinstance(event, KeyPress):
        return handle_key(event, keys)
    if isinstance(event, MouseDown):
        return handle_click(event, geometry, mode)
    return Action.NONE


def apply(action: Action, mode: DisplayMode) -> DisplayMode:
    """Mode after `action`; QUIT and NONE leave it alone."""
    if action is Action.ADVANCE:
        return mode.advance()
    if action is Action.FORCE_DIGITAL:
        return mode.force_digital()
    return mode
