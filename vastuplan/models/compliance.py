"""Vastu compliance output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict

from .geometry import iround


class Severity(str, Enum):
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    POOR = "poor"


class Finding(BaseModel):
    """One explained outcome of a compliance rule."""
    model_config = ConfigDict(frozen=True)

    rule_id: str
    severity: Severity
    message: str
    points: int
    max_points: int


class ComplianceResult(BaseModel):
    """Weighted 0-100 score over all floors, with ordered findings."""
    model_config = ConfigDict(frozen=True)

    score: int
    findings: list[Finding]
    points: int = 0
    max_points: int = 0

    @classmethod
    def from_findings(cls, findings: list[Finding]) -> ComplianceResult:
        points = sum(f.points for f in findings)
        max_points = sum(f.max_points for f in findings)
        score = iround(100 * points / max_points) if max_points else 0
        return cls(score=score, findings=findings, points=points, max_points=max_points)
