"""Main plan generator: orchestrates setbacks, floor layouts and scoring."""

from __future__ import annotations
from loguru import logger

from vastuplan.core.constants import FACING_INFO
from vastuplan.core.scoring import ComplianceScorer
from vastuplan.core.setbacks import compute_envelope
from vastuplan.core.zones import side_labels
from vastuplan.layouts.base import FloorLayout
from vastuplan.layouts.ground_floor import GroundFloorLayout
from vastuplan.layouts.upper_floor import UpperFloorLayout
from vastuplan.models import FacingInfo, PlanConfig, PlanContext, PlanResult


class PlanGenerator:
    """
    Stateless plan generator.

    Takes a configuration, derives the envelope, lays out every floor,
    scores the result and returns a complete PlanResult.
    """

    def __init__(
        self,
        scorer: ComplianceScorer | None = None,
        layouts: list[FloorLayout] | None = None,
    ) -> None:
        self.scorer = scorer or ComplianceScorer()
        self.layouts = layouts or [GroundFloorLayout(), UpperFloorLayout()]

    def _layout_for(self, config: PlanConfig, floor_index: int) -> FloorLayout:
        for layout in self.layouts:
            if layout.applies(config, floor_index):
                return layout
        raise LookupError(f"No layout registered for floor {floor_index}")

    def generate(self, config: PlanConfig) -> PlanResult:
        # Site phase: setbacks and buildable envelope
        context = PlanContext(config=config, envelope=compute_envelope(config))

        # Layout phase: ground floor first, then each upper floor
        for floor_index in range(config.floors):
            layout = self._layout_for(config, floor_index)
            floor = layout.build(context.envelope, config, floor_index)
            logger.debug(f"{layout.get_name()}: {len(floor.rooms)} rooms on {floor.label}")
            context.add_floor(floor)

        placed = sum(1 for room in context.all_rooms() if room.is_bedroom)
        if placed < config.bedrooms:
            logger.warning(
                f"Only {placed} of {config.bedrooms} bedrooms fit a "
                f"{context.envelope.width}x{context.envelope.depth} ft envelope "
                f"over {config.floors} floor(s)"
            )

        # Scoring phase
        compliance = self.scorer.score(context)

        meta = FACING_INFO[config.facing]
        return PlanResult(
            config=config,
            facing=FacingInfo(
                code=config.facing.value,
                label=meta.label,
                vastu_rank=meta.vastu_rank,
                description=meta.description,
            ),
            setbacks=context.envelope.setbacks,
            envelope=context.envelope,
            side_labels=side_labels(config.facing),
            floors=context.floors,
            compliance=compliance,
        )
