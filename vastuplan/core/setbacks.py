"""Setback and buildable envelope calculator.

Applies typical Indian municipal margins: 3 ft on the road edge and
2 ft on every other edge, the rear included.
"""

from __future__ import annotations
from loguru import logger

from vastuplan.models import Envelope, Facing, PlanConfig, Setbacks

ROAD_SETBACK = 3.0
SIDE_SETBACK = 2.0

# Compass edge on the viewer's left when standing on the road.
LEFT_EDGE = {
    Facing.EAST: Facing.SOUTH,
    Facing.WEST: Facing.NORTH,
    Facing.NORTH: Facing.WEST,
    Facing.SOUTH: Facing.EAST,
}


def edge_margins(facing: Facing | str) -> dict[Facing, float]:
    """Margin in feet for every compass edge of a plot with one road edge."""
    facing = Facing(facing)
    return {
        edge: ROAD_SETBACK if edge == facing else SIDE_SETBACK
        for edge in Facing
    }


def compute_setbacks(facing: Facing | str) -> Setbacks:
    """Front/rear/left/right setbacks for a plot whose road edge is *facing*."""
    facing = Facing(facing)
    margins = edge_margins(facing)
    left = LEFT_EDGE[facing]
    return Setbacks(
        front=margins[facing],
        rear=margins[facing.opposite],
        left=margins[left],
        right=margins[left.opposite],
    )


def compute_envelope(config: PlanConfig) -> Envelope:
    """Buildable envelope left after setbacks; never fails on small plots."""
    setbacks = compute_setbacks(config.facing)
    width = config.plot_width - setbacks.left - setbacks.right
    depth = config.plot_depth - setbacks.front - setbacks.rear
    if width < 1 or depth < 1:
        logger.warning(
            f"Plot {config.plot_width}x{config.plot_depth} leaves no buildable "
            f"envelope after setbacks, clamping to 1 ft"
        )
    envelope = Envelope(width=max(width, 1.0), depth=max(depth, 1.0), setbacks=setbacks)
    logger.debug(
        f"Envelope {envelope.width}x{envelope.depth} ft "
        f"({envelope.area:.0f} sqft, tiny={envelope.is_tiny}, small={envelope.is_small})"
    )
    return envelope
