"""Building element models: rooms, openings, windows and floor plans."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict

from .geometry import Rect, Segment


class RoomType(str, Enum):
    MASTER_BED = "master_bed"
    BEDROOM = "bedroom"
    LIVING = "living"
    KITCHEN = "kitchen"
    DINING = "dining"
    TOILET = "toilet"
    POOJA = "pooja"
    STAIRCASE = "staircase"
    STORE = "store"
    PORCH = "porch"
    PASSAGE = "passage"
    BALCONY = "balcony"
    UTILITY = "utility"
    PARKING = "parking"
    FAMILY_HALL = "family_hall"


BEDROOM_TYPES = (RoomType.MASTER_BED, RoomType.BEDROOM)


class Zone(str, Enum):
    """The nine Vastu compass sectors."""
    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    CENTER = "C"


class OpeningType(str, Enum):
    MAIN_DOOR = "main_door"
    DOOR = "door"
    OPENING = "opening"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Room(BaseModel):
    """A rectangular room placed in envelope coordinates (feet)."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: RoomType
    x: float
    y: float
    width: float
    height: float
    zone: Zone
    anchor: tuple[float, float] = (0.5, 0.5)  # Zone centre as envelope fractions
    is_wet: bool = False
    is_stair: bool = False
    is_open: bool = False
    is_outside: bool = False
    rationale: str = ""

    @property
    def rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_bedroom(self) -> bool:
        return self.type in BEDROOM_TYPES

    @property
    def undersized(self) -> bool:
        """Smaller than the nominal minimum for its type, in either axis."""
        from vastuplan.core.constants import MIN_ROOM_SIZES

        minimum = MIN_ROOM_SIZES[self.type]
        short, long_ = sorted((self.width, self.height))
        min_short, min_long = sorted((minimum.width, minimum.height))
        return short < min_short or long_ < min_long


class Opening(BaseModel):
    """A door or opening drawn as a segment on a wall line."""
    model_config = ConfigDict(frozen=True)

    x1: float
    y1: float
    x2: float
    y2: float
    type: OpeningType = OpeningType.DOOR

    @property
    def segment(self) -> Segment:
        return Segment(x1=self.x1, y1=self.y1, x2=self.x2, y2=self.y2)


class Window(BaseModel):
    """A window on an envelope edge, positioned from that edge's origin."""
    model_config = ConfigDict(frozen=True)

    side: Side
    position: float   # Distance along the side to the window start
    length: float
    room_id: str


class FloorStats(BaseModel):
    """Summary statistics for one generated floor."""
    model_config = ConfigDict(frozen=True)

    room_count: int = 0
    built_up_area: float = 0.0
    open_area: float = 0.0
    wet_rooms: int = 0
    undersized_rooms: int = 0

    @classmethod
    def from_rooms(cls, rooms: list[Room]) -> FloorStats:
        enclosed = [r for r in rooms if not r.is_open and not r.is_outside]
        return cls(
            room_count=len(rooms),
            built_up_area=sum(r.area for r in enclosed),
            open_area=sum(r.area for r in rooms if r.is_open and not r.is_outside),
            wet_rooms=sum(1 for r in rooms if r.is_wet),
            undersized_rooms=sum(1 for r in enclosed if r.undersized),
        )


class FloorPlan(BaseModel):
    """Rooms, openings and windows of a single floor."""
    model_config = ConfigDict(frozen=True)

    floor: int
    label: str
    level: str
    width: float      # Envelope width (feet)
    depth: float      # Envelope depth (feet)
    rooms: list[Room]
    doors: list[Opening] = []
    windows: list[Window] = []
    bands: dict[str, float] = {}  # Row/column sizes used by the subdivision
    stats: FloorStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        # Filled once at construction; the model is frozen afterwards
        if self.stats is None:
            object.__setattr__(self, "stats", FloorStats.from_rooms(self.rooms))

    def get_room(self, room_id: str) -> Room | None:
        for r in self.rooms:
            if r.id == room_id:
                return r
        return None

    def rooms_of_type(self, room_type: RoomType) -> list[Room]:
        return [r for r in self.rooms if r.type == room_type]
