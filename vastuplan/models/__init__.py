from .geometry import Rect, Segment, iround, at_least_one, fit_bands
from .parameters import Facing, PlanConfig
from .site import Setbacks, Envelope
from .building import (
    RoomType, Zone, OpeningType, Side,
    Room, Opening, Window, FloorStats, FloorPlan, BEDROOM_TYPES,
)
from .compliance import Severity, Finding, ComplianceResult
from .context import PlanContext
from .result import SideLabels, FacingInfo, PlanResult

__all__ = [
    "Rect", "Segment", "iround", "at_least_one", "fit_bands",
    "Facing", "PlanConfig",
    "Setbacks", "Envelope",
    "RoomType", "Zone", "OpeningType", "Side",
    "Room", "Opening", "Window", "FloorStats", "FloorPlan", "BEDROOM_TYPES",
    "Severity", "Finding", "ComplianceResult",
    "PlanContext",
    "SideLabels", "FacingInfo", "PlanResult",
]
