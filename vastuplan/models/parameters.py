"""Plan generation parameters."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Facing(str, Enum):
    """Cardinal direction of the road-side edge of the plot."""
    EAST = "E"
    NORTH = "N"
    WEST = "W"
    SOUTH = "S"

    @property
    def opposite(self) -> Facing:
        return _OPPOSITE[self]


_OPPOSITE = {
    Facing.EAST: Facing.WEST,
    Facing.WEST: Facing.EAST,
    Facing.NORTH: Facing.SOUTH,
    Facing.SOUTH: Facing.NORTH,
}

MAX_FLOORS = 3
MAX_BEDROOMS_PER_FLOOR = 2


class PlanConfig(BaseModel):
    """User-adjustable parameters for one plan generation run."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    plot_width: float = Field(30.0, gt=0)   # Feet
    plot_depth: float = Field(30.0, gt=0)   # Feet
    facing: Facing = Facing.EAST
    floors: int = 2                         # 1 = G, 2 = G+1, 3 = G+2
    bedrooms: int = 3
    bathrooms: int = 3
    has_pooja: bool = True
    has_balcony: bool = True
    has_parking: bool = False
    has_store: bool = True

    @model_validator(mode="after")
    def _clamp_counts(self) -> PlanConfig:
        # Counts are re-clamped rather than rejected; the form upstream
        # already bounds them, this only guards direct callers.
        floors = min(max(self.floors, 1), MAX_FLOORS)
        bedrooms = min(max(self.bedrooms, 1), MAX_BEDROOMS_PER_FLOOR * floors)
        bathrooms = min(max(self.bathrooms, 1), bedrooms + 1)
        object.__setattr__(self, "floors", floors)
        object.__setattr__(self, "bedrooms", bedrooms)
        object.__setattr__(self, "bathrooms", bathrooms)
        return self

    @property
    def has_stair(self) -> bool:
        return self.floors > 1
