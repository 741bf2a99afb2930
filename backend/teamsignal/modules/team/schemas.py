# teamsignal/modules/team/schemas.py
from pydantic import BaseModel
from typing import Optional

from teamsignal.shared.enums import SignalSource, TeamPlan, WowLevel, Zone


class PlanChangeIn(BaseModel):
    plan: TeamPlan


class LevelChangeOut(BaseModel):
    team_id: int
    previous_level: WowLevel
    level: WowLevel
    level_changed: bool
    plan: Optional[TeamPlan] = None


class CombinedSignalOut(BaseModel):
    """value None = "collecter des données", jamais 0."""
    team_id: int
    value: Optional[float] = None
    source: Optional[SignalSource] = None
    needs_attention: bool
    zone: Optional[Zone] = None
    vibe_score: Optional[float] = None
    wow_score: Optional[float] = None
