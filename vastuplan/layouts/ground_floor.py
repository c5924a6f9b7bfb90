"""Ground floor layout: proportional grid subdivision of the envelope.

    +--------------+---------------+   <- rear
    |  Master Bed  |  Living Room  |
    |     (SW)     |     (NE)      |
    +------+-------+---------------+
    | Bath |Passage|    Dining     |
    +------+---+---+---------------+
    |Staircase |Pooja|  Kitchen    |
    |  /Store  |     |    (SE)     |
    +----------+-----+-------------+
    |      Porch / Entrance        |   <- front (road)
    +------------------------------+

Rooms are planned in a fixed order; later rooms may be carved out of a
cell planned for an earlier one, so the order is part of the result.
"""

from __future__ import annotations

from vastuplan.layouts.base import FloorLayout, LayoutPlan, RoomSlot, rationale
from vastuplan.models import (
    Envelope, FloorPlan, OpeningType, PlanConfig, Rect, RoomType, Side, Zone,
    at_least_one, fit_bands, iround,
)

PORCH_RATIO = 0.12
MIN_PORCH_DEPTH = 4
TOP_ROW_RATIO = 0.42
TOP_ROW_RATIO_TINY = 0.5
MIDDLE_ROW_RATIO = 0.22
LEFT_COLUMN_RATIO = 0.48
MIN_SLICE = 4  # Narrowest leftover width that still hosts a pooja/store


class GroundFloorLayout(FloorLayout):
    """Bedroom, living, wet areas, kitchen, stair and entry on floor 0."""

    def get_id(self) -> str:
        return "floor.ground"

    def get_name(self) -> str:
        return "Ground Floor Layout"

    def applies(self, config: PlanConfig, floor_index: int) -> bool:
        return floor_index == 0

    def plan(self, envelope: Envelope, config: PlanConfig, floor_index: int = 0) -> LayoutPlan:
        plan = LayoutPlan()
        bw, bd = envelope.width, envelope.depth

        porch_d, main_d = fit_bands(bd, [max(MIN_PORCH_DEPTH, iround(bd * PORCH_RATIO))])
        top_ratio = TOP_ROW_RATIO_TINY if envelope.is_tiny else TOP_ROW_RATIO
        top_h, mid_h, bot_h = fit_bands(
            main_d, [iround(main_d * top_ratio), iround(main_d * MIDDLE_ROW_RATIO)]
        )
        left_w, right_w = fit_bands(bw, [iround(bw * LEFT_COLUMN_RATIO)])

        plan.bands = {
            "porch_depth": porch_d,
            "main_depth": main_d,
            "top_row": top_h,
            "middle_row": mid_h,
            "bottom_row": bot_h,
            "left_column": left_w,
            "right_column": right_w,
        }

        self._plan_top_row(plan, envelope, config, top_h, left_w, right_w)
        toilet_w = self._plan_middle_row(plan, config, top_h, mid_h, left_w, right_w)
        self._plan_bottom_row(plan, envelope, config, top_h + mid_h, bot_h, left_w, right_w)
        self._plan_entry(plan, envelope, config, main_d, porch_d, top_h, mid_h,
                         left_w, right_w, toilet_w)
        return plan

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def _plan_top_row(
        self,
        plan: LayoutPlan,
        envelope: Envelope,
        config: PlanConfig,
        top_h: float, left_w: float, right_w: float,
    ) -> None:
        master = Rect(x=0, y=0, width=left_w, height=top_h)
        living = Rect(x=left_w, y=0, width=right_w, height=top_h)

        # A single-storey home keeps its second bedroom downstairs, carved
        # from the rear corner of the living cell.
        second_bed = None
        if config.floors == 1 and config.bedrooms >= 2 and not envelope.is_tiny and top_h >= 2:
            second_bed = Rect(
                x=left_w, y=0,
                width=at_least_one(iround(right_w * 0.55)),
                height=at_least_one(iround(top_h * 0.55)),
            )
            living = living.without_top(second_bed.height)

        plan.place(RoomSlot(
            id="master", name="Master Bedroom", type=RoomType.MASTER_BED,
            rect=master, zone=Zone.SW,
            rationale=rationale(Zone.SW, "head of household, stability and grounding"),
        ))
        plan.window(Side.LEFT, top_h * 0.3, min(5, left_w * 0.4), "master")
        plan.window(Side.TOP, left_w * 0.3, min(5, left_w * 0.35), "master")

        plan.place(RoomSlot(
            id="living", name="Living Room", type=RoomType.LIVING,
            rect=living, zone=Zone.NE,
            rationale=rationale(Zone.NE, "positive energy flow, light and openness"),
        ))
        plan.window(Side.RIGHT, living.y + living.height * 0.25, min(5, right_w * 0.4), "living")

        if second_bed is not None:
            plan.place(RoomSlot(
                id="bed_g2", name="Bedroom 2", type=RoomType.BEDROOM,
                rect=second_bed, zone=Zone.N,
                rationale=rationale(Zone.N, "good for children or study"),
            ))
        plan.window(
            Side.TOP, left_w + right_w * 0.4, min(4, right_w * 0.3),
            "bed_g2" if second_bed is not None else "living",
        )

    def _plan_middle_row(
        self,
        plan: LayoutPlan,
        config: PlanConfig,
        top_h: float, mid_h: float, left_w: float, right_w: float,
    ) -> float:
        toilet_w = at_least_one(min(max(4, iround(left_w * 0.42)), left_w - 1))
        plan.place(RoomSlot(
            id="toilet_m", name="Attached Bath", type=RoomType.TOILET,
            rect=Rect(x=0, y=top_h, width=toilet_w, height=mid_h), zone=Zone.NW,
            is_wet=True,
            rationale=rationale(Zone.NW, "water element, drainage direction"),
        ))

        rest = Rect(x=toilet_w, y=top_h, width=left_w - toilet_w, height=mid_h)
        if rest.width >= 1:
            if config.bathrooms >= 2:
                plan.place(RoomSlot(
                    id="toilet_c", name="Common Bath", type=RoomType.TOILET,
                    rect=rest, zone=Zone.W, is_wet=True,
                    rationale=rationale(Zone.W, "acceptable for a second bathroom"),
                ))
            else:
                plan.place(RoomSlot(
                    id="passage_m", name="Passage", type=RoomType.PASSAGE,
                    rect=rest, zone=Zone.CENTER,
                    rationale=rationale(Zone.CENTER, "open circulation at the core"),
                ))

        plan.place(RoomSlot(
            id="dining", name="Dining", type=RoomType.DINING,
            rect=Rect(x=left_w, y=top_h, width=right_w, height=mid_h), zone=Zone.W,
            rationale=rationale(Zone.W, "nourishment, connects kitchen to living"),
        ))
        # Wide opening on the living/dining wall
        plan.door(left_w + 1, top_h, left_w + right_w - 1, top_h, OpeningType.OPENING)
        return toilet_w

    def _plan_bottom_row(
        self,
        plan: LayoutPlan,
        envelope: Envelope,
        config: PlanConfig,
        y: float, bot_h: float, left_w: float, right_w: float,
    ) -> None:
        if config.has_stair:
            stair_w = min(max(7, iround(left_w * 0.65)), left_w)
            plan.place(RoomSlot(
                id="staircase", name="Staircase", type=RoomType.STAIRCASE,
                rect=Rect(x=0, y=y, width=stair_w, height=bot_h), zone=Zone.SW,
                is_stair=True,
                rationale=rationale(Zone.SW, "clockwise ascent, heavy structure"),
            ))
            x = stair_w
            if left_w - stair_w >= MIN_SLICE:
                if config.has_pooja:
                    side = at_least_one(iround(min(left_w - stair_w, bot_h) * 0.6))
                    self._place_pooja(plan, Rect(x=x, y=y, width=side, height=min(side, bot_h)))
                    x += side
                if config.has_store and left_w - x >= 1:
                    self._place_store(plan, Rect(x=x, y=y, width=left_w - x, height=bot_h))
        elif config.has_pooja and config.has_store:
            pooja_w = at_least_one(min(iround(left_w * 0.4), left_w - 1))
            self._place_pooja(plan, Rect(x=0, y=y, width=pooja_w, height=min(pooja_w, bot_h)))
            if left_w - pooja_w >= 1:
                self._place_store(plan, Rect(x=pooja_w, y=y, width=left_w - pooja_w, height=bot_h))
        elif config.has_pooja:
            self._place_pooja(plan, Rect(x=0, y=y, width=left_w, height=bot_h))
        elif config.has_store:
            self._place_store(plan, Rect(x=0, y=y, width=left_w, height=bot_h))

        kitchen = Rect(x=left_w, y=y, width=right_w, height=bot_h)
        utility = None
        if bot_h > 8 and right_w > 10:
            u_w = max(4, iround(right_w * 0.35))
            u_h = max(3, iround(bot_h * 0.35))
            utility = Rect(x=envelope.width - u_w, y=y + bot_h - u_h, width=u_w, height=u_h)
            kitchen = kitchen.without_bottom(u_h)

        plan.place(RoomSlot(
            id="kitchen", name="Kitchen", type=RoomType.KITCHEN,
            rect=kitchen, zone=Zone.SE,
            rationale=rationale(Zone.SE, "fire corner, cook facing East"),
        ))
        plan.window(Side.RIGHT, y + kitchen.height * 0.4, min(4, right_w * 0.3), "kitchen")

        if utility is not None:
            plan.place(RoomSlot(
                id="utility", name="Utility", type=RoomType.UTILITY,
                rect=utility, zone=Zone.SE, is_wet=True,
                rationale=rationale(Zone.SE, "wash and utility beside the kitchen"),
            ))

    def _plan_entry(
        self,
        plan: LayoutPlan,
        envelope: Envelope,
        config: PlanConfig,
        main_d: float, porch_d: float, top_h: float, mid_h: float,
        left_w: float, right_w: float, toilet_w: float,
    ) -> None:
        bw = envelope.width
        facing_zone = Zone(config.facing.value)
        plan.place(RoomSlot(
            id="porch", name="Porch / Sit-out", type=RoomType.PORCH,
            rect=Rect(x=iround(bw * 0.2), y=main_d,
                      width=at_least_one(iround(bw * 0.6)), height=porch_d),
            zone=facing_zone, is_open=True,
            rationale=rationale(facing_zone, f"{config.facing.value} facing, welcoming entrance"),
        ))

        plan.door(iround(bw * 0.4), main_d, iround(bw * 0.55), main_d, OpeningType.MAIN_DOOR)
        # Porch into the living side
        plan.door(left_w + 1, main_d - 0.5, left_w + iround(right_w * 0.35), main_d - 0.5)
        # Master bedroom
        plan.door(left_w, top_h * 0.6, left_w, top_h * 0.6 + 3)
        # Attached bath
        plan.door(toilet_w * 0.3, top_h, toilet_w * 0.3 + 2.5, top_h)
        # Kitchen
        plan.door(left_w + 1, top_h + mid_h, left_w + 4, top_h + mid_h)

        if config.has_parking:
            setback = envelope.setbacks.left
            plan.place(RoomSlot(
                id="parking", name="Parking", type=RoomType.PARKING,
                rect=Rect(x=-setback, y=main_d - 6,
                          width=setback + iround(bw * 0.35), height=6 + porch_d),
                zone=Zone.NW, is_open=True, is_outside=True,
                rationale=rationale(Zone.NW, "vehicle parking in the setback"),
            ))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _place_pooja(self, plan: LayoutPlan, rect: Rect) -> None:
        plan.place(RoomSlot(
            id="pooja", name="Pooja", type=RoomType.POOJA,
            rect=rect, zone=Zone.NE,
            rationale=rationale(Zone.NE, "sacred space, face East while praying"),
        ))

    def _place_store(self, plan: LayoutPlan, rect: Rect) -> None:
        plan.place(RoomSlot(
            id="store", name="Store", type=RoomType.STORE,
            rect=rect, zone=Zone.S,
            rationale=rationale(Zone.S, "storage and utility"),
        ))


def layout_ground_floor(envelope: Envelope, config: PlanConfig) -> FloorPlan:
    """Plan and build floor 0 for *config* inside *envelope*."""
    return GroundFloorLayout().build(envelope, config, 0)
