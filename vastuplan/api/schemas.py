"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from vastuplan.models import SideLabels


class RuleInfo(BaseModel):
    id: str
    name: str
    weight: int


class FacingOption(BaseModel):
    """One choice for the facing selector, with its drawn edge labels."""
    code: str
    label: str
    vastu_rank: int
    description: str
    side_labels: SideLabels
