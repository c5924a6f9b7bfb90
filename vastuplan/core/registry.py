"""Rule registry: stores compliance rules and returns them in report order."""

from __future__ import annotations

from vastuplan.rules.base import ComplianceRule


class RuleRegistry:
    """
    Central registry for all compliance rules.

    Rules are registered at startup. During scoring, the registry returns
    them sorted by priority; rules with equal priority keep their
    registration order.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ComplianceRule] = {}

    def register(self, rule: ComplianceRule) -> None:
        """Register a compliance rule, replacing any rule with the same id."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> ComplianceRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[ComplianceRule]:
        """Return all registered rules in report order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def __len__(self) -> int:
        return len(self._rules)


def create_default_registry() -> RuleRegistry:
    """Create a registry with the facing rule and the room placement table."""
    from vastuplan.core.constants import ROOM_ZONE_CHECKS
    from vastuplan.rules.facing import FacingRule
    from vastuplan.rules.room_zone import RoomZoneRule

    registry = RuleRegistry()
    registry.register(FacingRule())
    for index, check in enumerate(ROOM_ZONE_CHECKS):
        registry.register(RoomZoneRule(check, priority=100 + index))
    return registry
