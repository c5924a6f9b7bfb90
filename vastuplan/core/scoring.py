"""Compliance scorer: runs the rule table over every floor of a plan."""

from __future__ import annotations

from vastuplan.core.registry import RuleRegistry, create_default_registry
from vastuplan.models import (
    ComplianceResult, Envelope, Facing, FloorPlan, PlanConfig, PlanContext, Setbacks,
)


class ComplianceScorer:
    """Stateless scorer: sums rule findings into a 0-100 score."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def score(self, context: PlanContext) -> ComplianceResult:
        findings = []
        for rule in self.registry.list_rules():
            finding = rule.evaluate(context)
            if finding is not None:
                findings.append(finding)
        return ComplianceResult.from_findings(findings)


def score_compliance(floors: list[FloorPlan], facing: Facing | str) -> ComplianceResult:
    """Score already generated *floors* for a plot facing *facing*."""
    facing = Facing(facing)
    width = floors[0].width if floors else 1.0
    depth = floors[0].depth if floors else 1.0
    # Rules only read floors and facing; the rest of the context is nominal.
    context = PlanContext(
        config=PlanConfig(facing=facing, floors=max(len(floors), 1)),
        envelope=Envelope(width=width, depth=depth,
                          setbacks=Setbacks(front=0, rear=0, left=0, right=0)),
        floors=floors,
    )
    return ComplianceScorer().score(context)
