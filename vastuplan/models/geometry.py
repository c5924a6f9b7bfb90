"""Geometric primitives used throughout the layout engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


def iround(value: float) -> int:
    """Round half up to the nearest integer (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def at_least_one(value: float) -> float:
    """Clamp a computed dimension so it never drops below one foot."""
    return value if value >= 1 else 1


def fit_bands(total: float, sizes: list[float]) -> list[float]:
    """
    Fit fixed-size bands plus one remainder band into *total*.

    Returns ``sizes + [remainder]``. When the remainder would fall below
    one foot, the largest fixed bands give up space until it fits; no band
    is ever smaller than one foot.
    """
    bands = [at_least_one(s) for s in sizes]
    rest = total - sum(bands)
    while rest < 1:
        widest = max(range(len(bands)), key=lambda i: bands[i])
        spare = bands[widest] - 1
        if spare <= 0:
            break
        step = min(spare, 1 - rest)
        bands[widest] -= step
        rest += step
    return bands + [at_least_one(rest)]


class Rect(BaseModel):
    """Axis-aligned rectangle in envelope feet (y grows towards the road)."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def intersection_area(self, other: Rect) -> float:
        dx = min(self.right, other.right) - max(self.x, other.x)
        dy = min(self.bottom, other.bottom) - max(self.y, other.y)
        if dx <= 0 or dy <= 0:
            return 0.0
        return dx * dy

    def overlaps(self, other: Rect) -> bool:
        """True when the rectangles share a positive area (touching is fine)."""
        return self.intersection_area(other) > 0

    def contains(self, other: Rect) -> bool:
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def without_top(self, cut: float) -> Rect:
        """The part of this rectangle below a band of height *cut*."""
        cut = min(cut, self.height - 1)
        return Rect(x=self.x, y=self.y + cut, width=self.width,
                    height=at_least_one(self.height - cut))

    def without_bottom(self, cut: float) -> Rect:
        cut = min(cut, self.height - 1)
        return Rect(x=self.x, y=self.y, width=self.width,
                    height=at_least_one(self.height - cut))

    def without_right(self, cut: float) -> Rect:
        cut = min(cut, self.width - 1)
        return Rect(x=self.x, y=self.y, width=at_least_one(self.width - cut),
                    height=self.height)


class Segment(BaseModel):
    """Straight line segment between two envelope points."""
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)
