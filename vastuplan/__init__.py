"""Vastu-compliant residential floor plan generator."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from loguru import logger

from vastuplan.models import PlanConfig, PlanResult

__version__ = "0.1.0"

# Silent as a library; setup_logging() turns output on for the server.
logger.disable("vastuplan")


def generate(config: PlanConfig | Mapping[str, Any] | None = None) -> PlanResult:
    """Generate every floor and the compliance report for *config*."""
    from vastuplan.services.plan_service import PlanService

    return PlanService().generate(config)


__all__ = ["PlanConfig", "PlanResult", "generate", "__version__"]
