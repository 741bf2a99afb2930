# modules/team/repository.py
"""
Accès DB pour les équipes.

CRUD équipe hors périmètre : lecture, plus les deux seuls champs
que le moteur fait évoluer (wow_level, plan).
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List, Optional
from datetime import datetime, timezone

from teamsignal.shared.enums import TeamPlan, WowLevel
from teamsignal.shared.models import Team


class TeamRepository:

    async def get_team(self, db: AsyncSession, team_id: int) -> Optional[Team]:
        r = await db.execute(select(Team).where(Team.id == team_id))
        return r.scalar_one_or_none()

    async def get_teams(self, db: AsyncSession, team_ids: List[int]) -> List[Team]:
        r = await db.execute(select(Team).where(Team.id.in_(team_ids)))
        return r.scalars().all()

    async def update_level(self, db: AsyncSession, team: Team, level: WowLevel) -> Team:
        team.wow_level = level
        team.level_updated_at = datetime.now(timezone.utc)
        await db.commit()
        await db.refresh(team)
        return team

    async def update_plan(self, db: AsyncSession, team: Team, plan: TeamPlan) -> Team:
        team.plan = plan
        await db.commit()
        await db.refresh(team)
        return team
