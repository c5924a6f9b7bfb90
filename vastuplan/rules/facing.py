"""Facing bonus: the road-side direction of the plot itself."""

from __future__ import annotations

from vastuplan.core.constants import (
    FACING_GOOD_THRESHOLD, FACING_MAX_POINTS, FACING_POINTS,
)
from vastuplan.models import Finding, PlanContext, Severity
from vastuplan.rules.base import ComplianceRule


class FacingRule(ComplianceRule):
    """East and North entrances score best, South worst."""

    priority = 10  # Always the first finding

    def get_id(self) -> str:
        return "facing"

    def get_name(self) -> str:
        return "Plot facing"

    @property
    def weight(self) -> int:
        return FACING_MAX_POINTS

    def evaluate(self, context: PlanContext) -> Finding:
        facing = context.facing
        points = FACING_POINTS.get(facing, 0)
        if points >= FACING_GOOD_THRESHOLD:
            severity = Severity.GOOD
            message = f"{facing.value}-facing entrance: excellent Vastu alignment"
        else:
            severity = Severity.ACCEPTABLE
            message = f"{facing.value}-facing: consider Vastu remedies at the entrance"
        return Finding(
            rule_id=self.get_id(),
            severity=severity,
            message=message,
            points=points,
            max_points=self.weight,
        )
