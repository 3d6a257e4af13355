"""Read-only asset catalog (missions, objectives, competitive tiers)."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field

from companion.data.models import MissionInfo, ObjectiveInfo

PROGRESS_PLACEHOLDER = "[Progress]"
UNRANKED_TIER_NAME = "Unranked"


def localize_directive(template: str, number: int) -> str:
    """Fill an objective directive template with its target count.

    Args:
        template: Directive text, e.g. "Get [Progress] kills"
        number: Value substituted for the placeholder

    Returns:
        The directive with every placeholder replaced
    """
    return template.replace(PROGRESS_PLACEHOLDER, str(number))


class AssetCollection(BaseModel):
    """Display metadata looked up by identifier."""

    version: Optional[str] = None
    missions: Dict[str, MissionInfo] = Field(default_factory=dict)
    objectives: Dict[str, ObjectiveInfo] = Field(default_factory=dict)
    tiers: Dict[int, str] = Field(default_factory=dict)

    def mission(self, mission_id: str) -> Optional[MissionInfo]:
        return self.missions.get(mission_id)

    def objective(self, objective_id: Optional[str]) -> Optional[ObjectiveInfo]:
        if objective_id is None:
            return None
        return self.objectives.get(objective_id)

    def tier_name(self, tier: int) -> str:
        """Return the display name of a competitive tier ("Unranked" for 0)."""
        if tier in self.tiers:
            return self.tiers[tier]
        if tier <= 0:
            return UNRANKED_TIER_NAME
        return f"Tier {tier}"
