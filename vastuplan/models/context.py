"""Plan context: accumulates state during a single generation pass."""

from __future__ import annotations
from pydantic import BaseModel

from .building import FloorPlan, Room
from .parameters import Facing, PlanConfig
from .site import Envelope


class PlanContext(BaseModel):
    """
    Holds all state during a single plan generation pass.

    The setback calculator fixes the envelope.
    Layout generators add floors.
    Compliance rules read the finished floors.
    """
    # Input
    config: PlanConfig

    # Derived site (populated before layout)
    envelope: Envelope

    # Output (populated floor by floor)
    floors: list[FloorPlan] = []

    @property
    def facing(self) -> Facing:
        return self.config.facing

    def add_floor(self, floor: FloorPlan) -> None:
        self.floors.append(floor)

    def all_rooms(self) -> list[Room]:
        """Rooms of every floor, ground floor first, in emission order."""
        return [room for floor in self.floors for room in floor.rooms]

    def find_room(self, token: str) -> Room | None:
        """First room whose id contains *token* or whose type equals it."""
        for room in self.all_rooms():
            if token in room.id or room.type.value == token:
                return room
        return None
