"""Read-only reference tables shared by the layout engine and the scorer."""

from __future__ import annotations
from types import MappingProxyType
from typing import NamedTuple

from vastuplan.models import Facing, RoomType, Zone


class ZoneInfo(NamedTuple):
    name: str       # Sanskrit name of the direction
    element: str
    deity: str


class FacingMeta(NamedTuple):
    label: str
    vastu_rank: int
    description: str


class MinSize(NamedTuple):
    width: float
    height: float
    label: str


class RoomZoneCheck(NamedTuple):
    """One row of the room placement rule table."""
    token: str                  # Matched against room ids and type tags
    ideal: tuple[Zone, ...]
    acceptable: tuple[Zone, ...]
    weight: int
    label: str


ZONE_INFO = MappingProxyType({
    Zone.NE: ZoneInfo("Ishanya", "Water", "Shiva"),
    Zone.E: ZoneInfo("Purva", "Sun", "Indra"),
    Zone.SE: ZoneInfo("Agneya", "Fire", "Agni"),
    Zone.S: ZoneInfo("Dakshina", "Earth", "Yama"),
    Zone.SW: ZoneInfo("Nairutya", "Earth", "Nirrti"),
    Zone.W: ZoneInfo("Paschima", "Water", "Varuna"),
    Zone.NW: ZoneInfo("Vayavya", "Air", "Vayu"),
    Zone.N: ZoneInfo("Uttara", "Water", "Kubera"),
    Zone.CENTER: ZoneInfo("Brahmasthan", "Space", "Brahma"),
})

FACING_INFO = MappingProxyType({
    Facing.EAST: FacingMeta("East", 1, "Most auspicious, morning sun blesses the entrance"),
    Facing.NORTH: FacingMeta("North", 2, "Lord Kubera's direction, attracts prosperity"),
    Facing.WEST: FacingMeta("West", 3, "Acceptable with proper Vastu corrections"),
    Facing.SOUTH: FacingMeta("South", 4, "Needs careful planning, heavier construction in South"),
})

MIN_ROOM_SIZES = MappingProxyType({
    RoomType.MASTER_BED: MinSize(10, 10, "Master Bedroom"),
    RoomType.BEDROOM: MinSize(9, 9, "Bedroom"),
    RoomType.LIVING: MinSize(10, 10, "Living Room"),
    RoomType.KITCHEN: MinSize(7, 8, "Kitchen"),
    RoomType.DINING: MinSize(7, 7, "Dining"),
    RoomType.TOILET: MinSize(4, 5, "Toilet / Bath"),
    RoomType.POOJA: MinSize(4, 4, "Pooja Room"),
    RoomType.STAIRCASE: MinSize(7, 9, "Staircase"),
    RoomType.STORE: MinSize(4, 5, "Store Room"),
    RoomType.PORCH: MinSize(5, 4, "Porch / Sit-out"),
    RoomType.PASSAGE: MinSize(3, 3, "Passage"),
    RoomType.BALCONY: MinSize(6, 4, "Balcony"),
    RoomType.UTILITY: MinSize(4, 4, "Utility / Wash"),
    RoomType.PARKING: MinSize(9, 16, "Car Parking"),
    RoomType.FAMILY_HALL: MinSize(8, 7, "Family Hall / Lobby"),
})

# Facing bonus out of FACING_MAX_POINTS.
FACING_POINTS = MappingProxyType({
    Facing.EAST: 18,
    Facing.NORTH: 16,
    Facing.WEST: 8,
    Facing.SOUTH: 4,
})
FACING_MAX_POINTS = 18
FACING_GOOD_THRESHOLD = 16

# Share of a check's weight awarded for an acceptable zone.
ACCEPTABLE_CREDIT = 0.6

# Order is the order findings are reported in.
ROOM_ZONE_CHECKS: tuple[RoomZoneCheck, ...] = (
    RoomZoneCheck("kitchen", (Zone.SE,), (Zone.E, Zone.NW), 15, "Kitchen in SE (Agneya)"),
    RoomZoneCheck("master", (Zone.SW,), (Zone.S, Zone.W), 15, "Master Bedroom in SW (Nairutya)"),
    RoomZoneCheck("pooja", (Zone.NE,), (Zone.N, Zone.E), 12, "Pooja Room in NE (Ishanya)"),
    RoomZoneCheck("toilet", (Zone.NW, Zone.W), (Zone.N,), 10, "Toilets in NW (Vayavya)"),
    RoomZoneCheck("living", (Zone.NE, Zone.N, Zone.E), (Zone.CENTER,), 12, "Living Room in NE"),
    RoomZoneCheck("staircase", (Zone.SW, Zone.S, Zone.W), (Zone.NW,), 10, "Staircase in SW"),
    RoomZoneCheck("dining", (Zone.W, Zone.E, Zone.N), (Zone.S, Zone.CENTER), 8, "Dining in West zone"),
)

FLOOR_LABELS = ("Ground Floor", "First Floor", "Second Floor")
FLOOR_HEIGHT_M = 3


def floor_label(floor: int) -> str:
    if floor < len(FLOOR_LABELS):
        return FLOOR_LABELS[floor]
    return f"Floor {floor}"


def floor_level(floor: int) -> str:
    return f"+{floor * FLOOR_HEIGHT_M}.00m"
