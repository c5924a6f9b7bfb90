"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from vastuplan.api.schemas import FacingOption, RuleInfo
from vastuplan.core.constants import FACING_INFO
from vastuplan.core.zones import side_labels
from vastuplan.models import PlanConfig, PlanResult
from vastuplan.services.plan_service import PlanService

router = APIRouter()

# Shared service instance
_service = PlanService()


@router.post("/plans", response_model=PlanResult)
async def generate_plan(config: PlanConfig) -> PlanResult:
    """Generate every floor and the Vastu report for a configuration."""
    return _service.generate(config)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List the compliance rules in report order."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/facings", response_model=list[FacingOption])
async def list_facings() -> list[FacingOption]:
    """Facing choices ranked by Vastu preference."""
    options = [
        FacingOption(
            code=facing.value,
            label=meta.label,
            vastu_rank=meta.vastu_rank,
            description=meta.description,
            side_labels=side_labels(facing),
        )
        for facing, meta in FACING_INFO.items()
    ]
    return sorted(options, key=lambda o: o.vastu_rank)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
