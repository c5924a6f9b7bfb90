"""Upper floor layout: bedrooms over a lobby row over stair and balcony.

    +--------------+---------------+   <- rear
    |  Bedroom A   |  Bedroom B    |
    |     (SW)     |  (or Hall)    |
    +-----+--------+---------+-----+
    |Bath |  Lobby / Passage |Bath |
    +-----+--------+---------+-----+
    | Staircase    |   Balcony     |
    +--------------+---------------+   <- front (road)
"""

from __future__ import annotations
from loguru import logger

from vastuplan.layouts.base import FloorLayout, LayoutPlan, RoomSlot, rationale
from vastuplan.models import (
    Envelope, FloorPlan, PlanConfig, Rect, RoomType, Side, Zone,
    at_least_one, fit_bands, iround,
)

LOBBY_RATIO = 0.18
MIN_LOBBY_DEPTH = 5
STAIR_RATIO = 0.28
MIN_STAIR_DEPTH = 8
BALCONY_RATIO = 0.16
MIN_BALCONY_DEPTH = 4
STAIR_WIDTH_RATIO = 0.32
MIN_STAIR_WIDTH = 7
LEFT_COLUMN_RATIO = 0.48
MAX_BEDROOMS_PER_FLOOR = 3
MIN_WIDTH_FOR_THIRD_BEDROOM = 22


def row_bands(envelope: Envelope, config: PlanConfig) -> tuple[float, float, float]:
    """Depths of the bedroom, lobby and bottom rows, rear to road."""
    bd = envelope.depth
    lobby_h = max(MIN_LOBBY_DEPTH, iround(bd * LOBBY_RATIO))
    stair_h = max(MIN_STAIR_DEPTH, iround(bd * STAIR_RATIO))
    balcony_h = max(MIN_BALCONY_DEPTH, iround(bd * BALCONY_RATIO)) if config.has_balcony else 0
    # Stair and balcony share the bottom row
    lobby_h, bot_h, top_h = fit_bands(bd, [lobby_h, max(stair_h, balcony_h)])
    return top_h, lobby_h, bot_h


def column_bands(envelope: Envelope) -> tuple[float, float]:
    left_w, right_w = fit_bands(envelope.width, [iround(envelope.width * LEFT_COLUMN_RATIO)])
    return left_w, right_w


def bedroom_capacity(envelope: Envelope, config: PlanConfig) -> int:
    """Bedrooms one upper floor can hold: a third only on wide, deep-enough rows."""
    top_h = row_bands(envelope, config)[0]
    right_w = column_bands(envelope)[1]
    if envelope.width > MIN_WIDTH_FOR_THIRD_BEDROOM and top_h >= 2 and right_w >= 2:
        return MAX_BEDROOMS_PER_FLOOR
    return MAX_BEDROOMS_PER_FLOOR - 1


def bedroom_demand(envelope: Envelope, config: PlanConfig, floor_index: int) -> int:
    """
    Bedrooms to place on upper floor *floor_index*.

    One bedroom always stays on the ground floor. Each upper floor, from the
    first up, takes as many of the rest as its envelope holds; whatever the
    floor below could not fit moves up.
    """
    capacity = bedroom_capacity(envelope, config)
    remaining = config.bedrooms - 1
    for _ in range(1, floor_index):
        remaining -= min(max(remaining, 0), capacity)
    return max(min(remaining, capacity), 0)


def bathroom_demand(config: PlanConfig) -> int:
    """At least the attached bath, at most attached plus common."""
    return min(max(config.bathrooms - 1, 1), 2)


def first_bedroom_number(envelope: Envelope, config: PlanConfig, floor_index: int) -> int:
    """Display number of the first bedroom on this floor (the master is 1)."""
    return 2 + sum(bedroom_demand(envelope, config, f) for f in range(1, floor_index))


class UpperFloorLayout(FloorLayout):
    """Bedrooms, baths, lobby, stair and balcony on floors 1 and 2."""

    def get_id(self) -> str:
        return "floor.upper"

    def get_name(self) -> str:
        return "Upper Floor Layout"

    def applies(self, config: PlanConfig, floor_index: int) -> bool:
        return 0 < floor_index < config.floors

    def plan(self, envelope: Envelope, config: PlanConfig, floor_index: int) -> LayoutPlan:
        plan = LayoutPlan()
        beds = bedroom_demand(envelope, config, floor_index)
        baths = bathroom_demand(config)

        top_h, lobby_h, bot_h = row_bands(envelope, config)
        left_w, right_w = column_bands(envelope)

        plan.bands = {
            "top_row": top_h,
            "lobby_row": lobby_h,
            "bottom_row": bot_h,
            "left_column": left_w,
            "right_column": right_w,
        }

        self._plan_bedrooms(plan, envelope, config, floor_index, beds, top_h, left_w, right_w)
        self._plan_lobby_row(plan, envelope, floor_index, baths, top_h, lobby_h, left_w)
        self._plan_bottom_row(plan, envelope, config, floor_index, top_h + lobby_h, bot_h)

        logger.debug(
            f"Floor {floor_index}: {beds} bedroom(s), {baths} bath(s), "
            f"rows {top_h}/{lobby_h}/{bot_h} ft"
        )
        return plan

    def _plan_bedrooms(
        self,
        plan: LayoutPlan,
        envelope: Envelope,
        config: PlanConfig,
        floor_index: int,
        beds: int,
        top_h: float, left_w: float, right_w: float,
    ) -> None:
        bw = envelope.width
        number = first_bedroom_number(envelope, config, floor_index)

        if beds == 0:
            # Every bedroom is already placed below; keep the row as one hall.
            plan.place(RoomSlot(
                id=f"hall_{floor_index}", name="Family Hall", type=RoomType.FAMILY_HALL,
                rect=Rect(x=0, y=0, width=bw, height=top_h), zone=Zone.NE,
                rationale=rationale(Zone.NE, "family gathering and study"),
            ))
            plan.window(Side.RIGHT, top_h * 0.4, min(5, right_w * 0.4), f"hall_{floor_index}")
            return

        bed_a = f"bed_{floor_index}_a"
        plan.place(RoomSlot(
            id=bed_a, name=f"Bedroom {number}", type=RoomType.BEDROOM,
            rect=Rect(x=0, y=0, width=left_w, height=top_h), zone=Zone.SW,
            rationale=rationale(Zone.SW, "primary bedroom, stability"),
        ))
        plan.window(Side.LEFT, top_h * 0.3, min(5, left_w * 0.35), bed_a)
        plan.window(Side.TOP, left_w * 0.25, min(4, left_w * 0.3), bed_a)

        right_cell = Rect(x=left_w, y=0, width=right_w, height=top_h)
        third = None
        if beds >= 3:
            # Only asked for when bedroom_capacity() allows it
            c_w = at_least_one(iround(right_w * 0.5))
            third = Rect(x=bw - c_w, y=0, width=c_w, height=at_least_one(iround(top_h * 0.5)))
            right_cell = right_cell.without_right(c_w)

        if beds >= 2:
            bed_b = f"bed_{floor_index}_b"
            plan.place(RoomSlot(
                id=bed_b, name=f"Bedroom {number + 1}", type=RoomType.BEDROOM,
                rect=right_cell, zone=Zone.NE,
                rationale=rationale(Zone.NE, "children or guest bedroom"),
            ))
            plan.window(Side.RIGHT, top_h * 0.35, min(5, right_w * 0.35),
                        f"bed_{floor_index}_c" if third is not None else bed_b)
            plan.window(Side.TOP, left_w + right_w * 0.35, min(4, right_w * 0.3), bed_b)
        else:
            hall = f"hall_{floor_index}"
            plan.place(RoomSlot(
                id=hall, name="Family Hall", type=RoomType.FAMILY_HALL,
                rect=right_cell, zone=Zone.NE,
                rationale=rationale(Zone.NE, "family gathering and study"),
            ))
            plan.window(Side.RIGHT, top_h * 0.4, min(5, right_w * 0.4), hall)

        if third is not None:
            plan.place(RoomSlot(
                id=f"bed_{floor_index}_c", name=f"Bedroom {number + 2}", type=RoomType.BEDROOM,
                rect=third, zone=Zone.E,
                rationale=rationale(Zone.E, "morning sun for children"),
            ))

        # Shared wall between the two top-row rooms, then bedroom B to lobby
        plan.door(left_w, top_h * 0.55, left_w, top_h * 0.55 + 3)
        if beds >= 2:
            plan.door(left_w + 1, top_h, left_w + 4, top_h)

    def _plan_lobby_row(
        self,
        plan: LayoutPlan,
        envelope: Envelope,
        floor_index: int,
        baths: int,
        y: float, lobby_h: float, left_w: float,
    ) -> None:
        bw = envelope.width
        # Baths never squeeze the lobby below one foot
        bath_w = at_least_one(min(max(4, iround(left_w * 0.4)), (bw - 1) // baths))

        plan.place(RoomSlot(
            id=f"bath_{floor_index}_a", name="Attached Bath", type=RoomType.TOILET,
            rect=Rect(x=0, y=y, width=bath_w, height=lobby_h), zone=Zone.NW,
            is_wet=True,
            rationale=rationale(Zone.NW, "water element for drainage"),
        ))
        if baths >= 2:
            plan.place(RoomSlot(
                id=f"bath_{floor_index}_c", name="Common Bath", type=RoomType.TOILET,
                rect=Rect(x=bw - bath_w, y=y, width=bath_w, height=lobby_h), zone=Zone.W,
                is_wet=True,
                rationale=rationale(Zone.W, "second bathroom"),
            ))

        lobby_w = bw - bath_w * (2 if baths >= 2 else 1)
        if lobby_w >= 1:
            plan.place(RoomSlot(
                id=f"lobby_{floor_index}", name="Lobby / Passage", type=RoomType.FAMILY_HALL,
                rect=Rect(x=bath_w, y=y, width=lobby_w, height=lobby_h), zone=Zone.CENTER,
                rationale=rationale(Zone.CENTER, "central passage connecting rooms"),
            ))

    def _plan_bottom_row(
        self,
        plan: LayoutPlan,
        envelope: Envelope,
        config: PlanConfig,
        floor_index: int,
        y: float, bot_h: float,
    ) -> None:
        bw = envelope.width
        stair_w = at_least_one(min(max(MIN_STAIR_WIDTH, iround(bw * STAIR_WIDTH_RATIO)), bw - 1))
        top_floor = floor_index >= config.floors - 1

        plan.place(RoomSlot(
            id=f"stair_{floor_index}",
            name="Stair → Terrace" if top_floor else "Staircase",
            type=RoomType.STAIRCASE,
            rect=Rect(x=0, y=y, width=stair_w, height=bot_h), zone=Zone.SW,
            is_stair=True,
            rationale=rationale(Zone.SW, "structural weight, clockwise ascent"),
        ))

        rest = Rect(x=stair_w, y=y, width=bw - stair_w, height=bot_h)
        if rest.width < 1:
            return
        if config.has_balcony:
            balcony = f"balcony_{floor_index}"
            plan.place(RoomSlot(
                id=balcony, name="Open Balcony", type=RoomType.BALCONY,
                rect=rest, zone=Zone.S, is_open=True,
                rationale=rationale(Zone.S, "sit-out, drying and plants"),
            ))
            plan.window(Side.BOTTOM, stair_w + 2, bw - stair_w - 4, balcony)
        else:
            plan.place(RoomSlot(
                id=f"util_{floor_index}", name="Utility / Wash", type=RoomType.UTILITY,
                rect=rest, zone=Zone.NW, is_wet=True,
                rationale=rationale(Zone.NW, "utility and washing area"),
            ))


def layout_upper_floor(envelope: Envelope, config: PlanConfig, floor_index: int) -> FloorPlan:
    """Plan and build upper floor *floor_index* (1 or 2)."""
    return UpperFloorLayout().build(envelope, config, floor_index)
