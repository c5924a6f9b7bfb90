"""Room placement rules: is each key room in its preferred compass zone?"""

from __future__ import annotations

from vastuplan.core.constants import ACCEPTABLE_CREDIT, RoomZoneCheck
from vastuplan.models import Finding, PlanContext, Severity, iround
from vastuplan.rules.base import ComplianceRule


class RoomZoneRule(ComplianceRule):
    """Full weight in an ideal zone, 60% in an acceptable one, else nothing."""

    def __init__(self, check: RoomZoneCheck, priority: int = 100) -> None:
        self.check = check
        self.priority = priority

    def get_id(self) -> str:
        return f"room.{self.check.token}"

    def get_name(self) -> str:
        return self.check.label

    @property
    def weight(self) -> int:
        return self.check.weight

    def evaluate(self, context: PlanContext) -> Finding | None:
        check = self.check
        room = context.find_room(check.token)
        if room is None:
            # Optional rooms that were not built are not penalised
            return None

        if room.zone in check.ideal:
            severity = Severity.GOOD
            points = check.weight
            message = f"✓ {check.label}"
        elif room.zone in check.acceptable:
            severity = Severity.ACCEPTABLE
            points = iround(check.weight * ACCEPTABLE_CREDIT)
            message = (
                f"~ {room.name} in {room.zone.value}: acceptable, "
                f"but {check.ideal[0].value} is ideal"
            )
        else:
            severity = Severity.POOR
            points = 0
            ideal = "/".join(z.value for z in check.ideal)
            message = f"✗ {room.name} in {room.zone.value}: Vastu recommends {ideal}"

        return Finding(
            rule_id=self.get_id(),
            severity=severity,
            message=message,
            points=points,
            max_points=check.weight,
        )
