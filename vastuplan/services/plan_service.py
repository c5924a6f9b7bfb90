"""High-level plan generation service: facade for callers and the API layer."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from loguru import logger

from vastuplan.core.generator import PlanGenerator
from vastuplan.core.registry import RuleRegistry, create_default_registry
from vastuplan.core.scoring import ComplianceScorer
from vastuplan.models import PlanConfig, PlanResult


class PlanService:
    """Validates input, delegates to the generator, logs the outcome."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = PlanGenerator(ComplianceScorer(self.registry))

    def generate(self, config: PlanConfig | Mapping[str, Any] | None = None) -> PlanResult:
        if config is None:
            config = PlanConfig()
        elif not isinstance(config, PlanConfig):
            config = PlanConfig.model_validate(config)

        result = self.generator.generate(config)
        logger.info(
            f"Generated {config.plot_width}x{config.plot_depth} ft "
            f"{config.facing.value}-facing plan: {len(result.floors)} floor(s), "
            f"{result.bedroom_count} bedroom(s), Vastu score {result.compliance.score}"
        )
        return result

    def list_rules(self) -> list[dict[str, Any]]:
        return [
            {"id": r.get_id(), "name": r.get_name(), "weight": r.weight}
            for r in self.registry.list_rules()
        ]
