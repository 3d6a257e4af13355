"""Resolves how a mission is displayed: name, progress and target."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from companion.data.assets import AssetCollection, localize_directive
from companion.data.models import Mission, MissionInfo
from companion.errors import CorruptSnapshotError

UNNAMED_MISSION = "<Unnamed Mission>"


@dataclass
class ResolvedMission:
    """Display values of a mission."""

    name: str
    progress: Optional[int]
    to_complete: int
    is_complete: bool = False

    @property
    def fraction_complete(self) -> Optional[float]:
        """Progress over target, unclamped (progress may exceed the target).

        None when there is no progress record; 0.0 if the target is not positive.
        """
        if self.progress is None:
            return None
        if self.to_complete <= 0:
            return 0.0
        return self.progress / self.to_complete


def single_progress_entry(
    mission: Optional[Mission],
) -> Tuple[Optional[str], Optional[int]]:
    """Return the (objective ID, progress) pair of a mission record.

    Raises:
        CorruptSnapshotError: If the record tracks more than one objective
    """
    if mission is None or not mission.objective_progress:
        return None, None
    if len(mission.objective_progress) > 1:
        raise CorruptSnapshotError(
            f"Mission {mission.id} has {len(mission.objective_progress)} progress entries"
        )
    ((objective_id, progress),) = mission.objective_progress.items()
    return objective_id, progress


def resolve_mission(
    info: MissionInfo,
    mission: Optional[Mission] = None,
    assets: Optional[AssetCollection] = None,
) -> ResolvedMission:
    """Resolve a mission's display name, progress and target.

    Args:
        info: Catalog entry of the mission
        mission: Per-account record, or None if the mission hasn't started
        assets: Asset catalog holding objective directives

    Returns:
        ResolvedMission for rendering
    """
    objective_id, progress = single_progress_entry(mission)
    objective_value = info.objective(objective_id)

    # Known to be wrong for some objectives (e.g. "plant or defuse spikes"
    # has progress_to_complete 1 while its objective value is 5).
    to_complete = (
        objective_value.value if objective_value is not None else info.progress_to_complete
    )

    objective = None
    if assets is not None:
        lookup_id = objective_id or (objective_value.objective_id if objective_value else None)
        objective = assets.objective(lookup_id)

    if objective is not None and objective.directive is not None:
        name = localize_directive(objective.directive, to_complete)
    else:
        name = info.display_name or info.title or UNNAMED_MISSION

    return ResolvedMission(
        name=name,
        progress=progress,
        to_complete=to_complete,
        is_complete=mission is not None and mission.is_complete,
    )
