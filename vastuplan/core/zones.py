"""Zone geometry: where each compass zone sits once the plot is turned road-side down.

The drawn envelope always has the road edge at the bottom, so the compass
rotates with the facing. Both lookups are fixed tables indexed by facing.
"""

from __future__ import annotations
from types import MappingProxyType

from vastuplan.models import Facing, SideLabels, Zone

CENTER_POSITION = (0.5, 0.5)

# (x_fraction, y_fraction) of each zone centre; y = 0 is the rear edge.
ZONE_POSITIONS = MappingProxyType({
    Facing.EAST: {
        Zone.NW: (0.0, 0.0), Zone.N: (0.5, 0.0), Zone.NE: (1.0, 0.0),
        Zone.W: (0.0, 0.5), Zone.CENTER: (0.5, 0.5), Zone.E: (1.0, 0.5),
        Zone.SW: (0.0, 1.0), Zone.S: (0.5, 1.0), Zone.SE: (1.0, 1.0),
    },
    Facing.WEST: {
        Zone.SE: (0.0, 0.0), Zone.S: (0.5, 0.0), Zone.SW: (1.0, 0.0),
        Zone.E: (0.0, 0.5), Zone.CENTER: (0.5, 0.5), Zone.W: (1.0, 0.5),
        Zone.NE: (0.0, 1.0), Zone.N: (0.5, 1.0), Zone.NW: (1.0, 1.0),
    },
    Facing.NORTH: {
        Zone.SW: (0.0, 0.0), Zone.W: (0.5, 0.0), Zone.NW: (1.0, 0.0),
        Zone.S: (0.0, 0.5), Zone.CENTER: (0.5, 0.5), Zone.N: (1.0, 0.5),
        Zone.SE: (0.0, 1.0), Zone.E: (0.5, 1.0), Zone.NE: (1.0, 1.0),
    },
    Facing.SOUTH: {
        Zone.NE: (0.0, 0.0), Zone.E: (0.5, 0.0), Zone.SE: (1.0, 0.0),
        Zone.N: (0.0, 0.5), Zone.CENTER: (0.5, 0.5), Zone.S: (1.0, 0.5),
        Zone.NW: (0.0, 1.0), Zone.W: (0.5, 1.0), Zone.SW: (1.0, 1.0),
    },
})

SIDE_LABELS = MappingProxyType({
    Facing.EAST: SideLabels(top="WEST (Rear)", bottom="EAST (Road)", left="SOUTH", right="NORTH"),
    Facing.WEST: SideLabels(top="EAST (Rear)", bottom="WEST (Road)", left="NORTH", right="SOUTH"),
    Facing.NORTH: SideLabels(top="SOUTH (Rear)", bottom="NORTH (Road)", left="WEST", right="EAST"),
    Facing.SOUTH: SideLabels(top="NORTH (Rear)", bottom="SOUTH (Road)", left="EAST", right="WEST"),
})


def _as_zone(zone: Zone | str) -> Zone | None:
    if isinstance(zone, Zone):
        return zone
    try:
        return Zone(zone)
    except ValueError:
        return None


def zone_position(zone: Zone | str, facing: Facing | str) -> tuple[float, float]:
    """
    Relative centre of *zone* in the envelope drawn with *facing* at the bottom.

    Unknown zone tokens map to the centre instead of failing.
    """
    key = _as_zone(zone)
    if key is None:
        return CENTER_POSITION
    return ZONE_POSITIONS[Facing(facing)].get(key, CENTER_POSITION)


def side_labels(facing: Facing | str) -> SideLabels:
    """Compass labels for the top, bottom, left and right envelope edges."""
    return SIDE_LABELS[Facing(facing)].model_copy()
