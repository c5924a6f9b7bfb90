"""Site models: setbacks and the buildable envelope."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .geometry import Rect

TINY_ENVELOPE_AREA = 350.0   # sq ft
SMALL_ENVELOPE_AREA = 500.0  # sq ft


class Setbacks(BaseModel):
    """Mandatory margins between plot boundary and building (feet)."""
    model_config = ConfigDict(frozen=True)

    front: float
    rear: float
    left: float
    right: float


class Envelope(BaseModel):
    """Buildable rectangle left after setbacks are taken off the plot."""
    model_config = ConfigDict(frozen=True)

    width: float
    depth: float
    setbacks: Setbacks

    @property
    def area(self) -> float:
        return self.width * self.depth

    @property
    def is_tiny(self) -> bool:
        return self.area < TINY_ENVELOPE_AREA

    @property
    def is_small(self) -> bool:
        # Tiny envelopes are small too.
        return self.area < SMALL_ENVELOPE_AREA

    @property
    def bounds(self) -> Rect:
        return Rect(x=0, y=0, width=self.width, height=self.depth)
