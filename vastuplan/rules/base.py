"""Abstract base class for all compliance rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each scores one aspect of the plan
- Ordered: the registry sorts them by priority, which fixes finding order
- Conditional: a rule returns no finding when it has nothing to judge
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from vastuplan.models import Finding, PlanContext


class ComplianceRule(ABC):
    """
    Base class for all compliance rules.

    Subclasses implement `evaluate()`. The scorer asks the registry for the
    rules in priority order and sums the points of every finding returned.
    """

    # Lower priority = reported first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'room.kitchen')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Kitchen in SE (Agneya)')."""
        ...

    @property
    @abstractmethod
    def weight(self) -> int:
        """Maximum points this rule can award."""
        ...

    @abstractmethod
    def evaluate(self, context: PlanContext) -> Finding | None:
        """
        Score the finished plan held by *context*.

        Returns None when the rule does not apply; such a rule counts
        toward neither the score nor the maximum.
        """
        ...
