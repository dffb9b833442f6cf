"""
Wall-clock sampling for the display loop.
"""

from dataclasses import dataclass
from datetime import datetime

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class ClockSample:
    """One reading of the local clock, taken once per frame."""
    hour12: int
    hour24: int
    minute: int
    second: int
    date_label: str
    weekday_label: str

    @property
    def time_label(self) -> str:
        return f"{self.hour24:02d}:{self.minute:02d}:{self.second:02d}"

    @property
    def title(self) -> str:
        return f" {self.date_label} {self.weekday_label} "


def now_local() -> datetime:
    """Current instant in the local timezone."""
    return datetime.now().astimezone()


def sample(now: datetime) -> ClockSample:
    """Derive the clock fields for `now`."""
    return ClockSample(
        hour12=now.hour % 12 or 12,
        hour24=now.hour,
        minute=now.minute,
        second=now.second,
        date_label=now.strftime("%Y-%m-%d"),
        weekday_label=WEEKDAYS[now.weekday()],
    )
