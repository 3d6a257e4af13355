"""Mission rows for the live screen's missions box."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from companion.data.assets import AssetCollection
from companion.data.models import ContractDetails, Mission, MissionInfo
from companion.missions.mission_progress import resolve_mission

logger = logging.getLogger(__name__)

UNKNOWN_MISSION = "Unknown mission!"
MISSIONS_NOT_LOADED = "Missions not loaded!"

COMPLETE = "complete"
IN_PROGRESS = "in_progress"
NOT_STARTED = "not_started"
UNKNOWN = "unknown"


@dataclass
class MissionRow:
    """One mission as drawn in the missions box.

    Complete missions show a checkmark instead of XP and no progress bar.
    Missions without a progress record still get an empty bar.
    """

    mission_id: str
    name: str
    status: str
    xp_text: Optional[str] = None
    progress_text: Optional[str] = None
    fraction_complete: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return self.status == COMPLETE


def mission_row(
    info: MissionInfo,
    mission: Optional[Mission] = None,
    assets: Optional[AssetCollection] = None,
) -> MissionRow:
    """Build the row for a catalog mission and its optional progress record."""
    resolved = resolve_mission(info, mission, assets)

    if resolved.is_complete:
        return MissionRow(mission_id=info.id, name=resolved.name, status=COMPLETE)

    row = MissionRow(
        mission_id=info.id,
        name=resolved.name,
        status=NOT_STARTED,
        xp_text=f"+{info.xp_grant} XP",
    )
    if resolved.progress is not None:
        row.status = IN_PROGRESS
        row.progress_text = f"{resolved.progress}/{resolved.to_complete}"
        row.fraction_complete = resolved.fraction_complete
    return row


def contract_rows(
    details: ContractDetails, assets: Optional[AssetCollection]
) -> List[MissionRow]:
    """Rows for every mission of a contract, in contract order.

    Missions missing from the asset catalog become "Unknown mission!" rows.
    """
    rows: List[MissionRow] = []
    for mission in details.missions:
        info = assets.mission(mission.id) if assets is not None else None
        if info is None:
            logger.info("Mission %s not found in asset catalog", mission.id)
            rows.append(MissionRow(mission_id=mission.id, name=UNKNOWN_MISSION, status=UNKNOWN))
            continue
        rows.append(mission_row(info, mission, assets))
    return rows


def catalog_rows(mission_ids: List[str], assets: AssetCollection) -> List[MissionRow]:
    """Rows for catalog missions without any progress data."""
    rows: List[MissionRow] = []
    for mission_id in mission_ids:
        info = assets.mission(mission_id)
        if info is None:
            rows.append(MissionRow(mission_id=mission_id, name=UNKNOWN_MISSION, status=UNKNOWN))
        else:
            rows.append(mission_row(info, None, assets))
    return rows
