"""
Display modes: four digital size tiers plus the analog face.
"""

from dataclasses import dataclass, replace
from enum import Enum


class SizeTier(Enum):
    FULL = "full"
    HALF = "half"
    QUADRANT = "quadrant"
    SEXTANT = "sextant"


ANALOG = "analog"
MODE_NAMES = tuple(tier.value for tier in SizeTier) + (ANALOG,)

_NEXT_TIER = {
    SizeTier.FULL: SizeTier.HALF,
    SizeTier.HALF: SizeTier.QUADRANT,
    SizeTier.QUADRANT: SizeTier.SEXTANT,
}


@dataclass(frozen=True)
class DisplayMode:
    """Active tier and the analog flag.

    The tier is kept while analog is on so switching back to digital
    restores it.
    """
    tier: SizeTier = SizeTier.QUADRANT
    analog: bool = False

    @classmethod
    def from_name(cls, name: str) -> "DisplayMode":
        name = name.strip().lower()
        if name == ANALOG:
            return cls(SizeTier.QUADRANT, analog=True)
        try:
            return cls(SizeTier(name), analog=False)
        except ValueError:
            raise ValueError(
                f"unknown display mode {name!r}, expected one of {', '.join(MODE_NAMES)}"
            ) from None

    @property
    def name(self) -> str:
        return ANALOG if self.analog else self.tier.value

    def advance(self) -> "DisplayMode":
        """Next state in the Full > Half > Quadrant > Sextant > Analog cycle."""
        if self.analog:
            return DisplayMode(SizeTier.FULL, analog=False)
        if self.tier is SizeTier.SEXTANT:
            return replace(self, analog=True)
        return replace(self, tier=_NEXT_TIER[self.tier])

    def force_digital(self) -> "DisplayMode":
        return replace(self, analog=False)
