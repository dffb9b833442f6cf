"""Exceptions raised by termclock."""


class ClockError(Exception):
    """Base class for termclock errors."""


class TerminalError(ClockError):
    """The terminal could not be set up or read from."""
