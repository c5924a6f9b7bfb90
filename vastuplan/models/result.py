"""Complete result of one generation run."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .building import FloorPlan
from .compliance import ComplianceResult
from .parameters import PlanConfig
from .site import Envelope, Setbacks


class SideLabels(BaseModel):
    """Real-world compass label shown on each edge of the drawn envelope."""
    model_config = ConfigDict(frozen=True)

    top: str
    bottom: str
    left: str
    right: str


class FacingInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    label: str
    vastu_rank: int
    description: str


class PlanResult(BaseModel):
    """Floors, site data and compliance report for one configuration."""
    model_config = ConfigDict(frozen=True)

    config: PlanConfig
    facing: FacingInfo
    setbacks: Setbacks
    envelope: Envelope
    side_labels: SideLabels
    floors: list[FloorPlan]
    compliance: ComplianceResult

    @property
    def built_up_area(self) -> float:
        return sum(f.stats.built_up_area for f in self.floors)

    @property
    def bedroom_count(self) -> int:
        return sum(1 for f in self.floors for r in f.rooms if r.is_bedroom)
