"""Abstract base class for floor layouts.

A layout works in two passes:
- ``plan()`` computes every room rectangle, door and window into a
  ``LayoutPlan``. Carving a room out of an earlier cell is done by
  subtracting rectangles before either room is placed.
- ``build()`` turns that plan into immutable ``Room`` records and a
  ``FloorPlan``.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from pydantic import BaseModel

from vastuplan.core.constants import ZONE_INFO, floor_label, floor_level
from vastuplan.core.zones import zone_position
from vastuplan.models import (
    Envelope, Facing, FloorPlan, Opening, OpeningType, PlanConfig, Rect,
    Room, RoomType, Side, Window, Zone, at_least_one,
)


def rationale(zone: Zone, text: str) -> str:
    """Explanation string prefixed with the zone and its Sanskrit name."""
    return f"{zone.value} ({ZONE_INFO[zone].name}): {text}"


class RoomSlot(BaseModel):
    """A room as planned: identity, rectangle and Vastu metadata."""
    id: str
    name: str
    type: RoomType
    rect: Rect
    zone: Zone
    is_wet: bool = False
    is_stair: bool = False
    is_open: bool = False
    is_outside: bool = False
    rationale: str = ""

    def to_room(self, facing: Facing) -> Room:
        return Room(
            id=self.id,
            name=self.name,
            type=self.type,
            x=self.rect.x,
            y=self.rect.y,
            width=at_least_one(self.rect.width),
            height=at_least_one(self.rect.height),
            zone=self.zone,
            anchor=zone_position(self.zone, facing),
            is_wet=self.is_wet,
            is_stair=self.is_stair,
            is_open=self.is_open,
            is_outside=self.is_outside,
            rationale=self.rationale,
        )


class LayoutPlan(BaseModel):
    """Ordered room slots, doors and windows computed for one floor."""
    slots: list[RoomSlot] = []
    doors: list[Opening] = []
    windows: list[Window] = []
    bands: dict[str, float] = {}

    def place(self, slot: RoomSlot) -> None:
        self.slots.append(slot)

    def door(self, x1: float, y1: float, x2: float, y2: float,
             type: OpeningType = OpeningType.DOOR) -> None:
        self.doors.append(Opening(x1=x1, y1=y1, x2=x2, y2=y2, type=type))

    def window(self, side: Side, position: float, length: float, room_id: str) -> None:
        self.windows.append(Window(side=side, position=position,
                                   length=at_least_one(length), room_id=room_id))


class FloorLayout(ABC):
    """
    Base class for floor layouts.

    The generator asks each registered layout whether it ``applies()`` to a
    floor index and builds the floor with the first one that does.
    """

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this layout (e.g., 'floor.ground')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def applies(self, config: PlanConfig, floor_index: int) -> bool:
        """Return True if this layout should produce the given floor."""
        ...

    @abstractmethod
    def plan(self, envelope: Envelope, config: PlanConfig, floor_index: int) -> LayoutPlan:
        """Compute all room rectangles, doors and windows for one floor."""
        ...

    def build(self, envelope: Envelope, config: PlanConfig, floor_index: int) -> FloorPlan:
        plan = self.plan(envelope, config, floor_index)
        return FloorPlan(
            floor=floor_index,
            label=floor_label(floor_index),
            level=floor_level(floor_index),
            width=envelope.width,
            depth=envelope.depth,
            rooms=[slot.to_room(config.facing) for slot in plan.slots],
            doors=plan.doors,
            windows=plan.windows,
            bands=plan.bands,
        )
