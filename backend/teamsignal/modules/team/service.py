# modules/team/service.py
"""
Niveau Shu/Ha/Ri et signal combiné d'une équipe.

Le niveau n'avance que par un PULL explicite (promote_level), jamais
à la clôture d'une session. Le passage en plan free le remet à shu.
"""
import logging
from datetime import date, datetime, timezone
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from teamsignal.engine.signal.combined import combine_signal
from teamsignal.engine.wow.progression import (
    LevelProgress, SessionRecord, evaluate_level_progress, reset_level_for_plan,
)
from teamsignal.modules.team.repository import TeamRepository
from teamsignal.modules.vibe.service import VibeService
from teamsignal.modules.wow.repository import WowRepository
from teamsignal.shared.enums import TeamPlan, WowAngle, WowLevel
from teamsignal.shared.errors import InvalidTransitionError, NotFoundError
from teamsignal.shared.models import Team

logger = logging.getLogger(__name__)

team_repo = TeamRepository()
wow_repo = WowRepository()
vibe_service = VibeService()


def _today() -> date:
    return datetime.now(timezone.utc).date()


class TeamService:

    async def _get_team(self, db: AsyncSession, team_id: int) -> Team:
        team = await team_repo.get_team(db, team_id)
        if not team:
            raise NotFoundError("TEAM_NOT_FOUND")
        return team

    # ── Progression ──────────────────────────────────────────

    async def evaluate_level_progress(
        self, db: AsyncSession, team_id: int, today: Optional[date] = None
    ) -> LevelProgress:
        today = today or _today()
        team = await self._get_team(db, team_id)

        sessions = await wow_repo.get_closed_sessions(db, team_id)
        records = [
            SessionRecord(
                angle=WowAngle(s.angle),
                closed_on=s.closed_at.date(),
                overall_score=s.overall_score,
                participation_rate=s.participation_rate,
                follow_up_recorded=bool(s.follow_up_recorded),
            )
            for s in sessions
            if s.closed_at is not None
        ]
        return evaluate_level_progress(WowLevel(team.wow_level), records, today)

    async def promote_level(
        self, db: AsyncSession, team_id: int, today: Optional[date] = None
    ) -> Dict:
        """Avance d'un niveau exactement, si toutes les exigences sont remplies."""
        progress = await self.evaluate_level_progress(db, team_id, today)
        if not progress.can_unlock:
            unmet = [r.key for r in progress.requirements if not r.met]
            raise InvalidTransitionError("LEVEL_REQUIREMENTS_NOT_MET", details={"unmet": unmet})

        team = await self._get_team(db, team_id)
        previous = WowLevel(team.wow_level)
        team = await team_repo.update_level(db, team, progress.next_level)

        logger.info(f"Team {team_id} promoted: {previous.value} -> {progress.next_level.value}")

        return {
            "team_id":        team_id,
            "previous_level": previous,
            "level":          progress.next_level,
            "level_changed":  True,
        }

    async def change_plan(self, db: AsyncSession, team_id: int, plan: TeamPlan) -> Dict:
        """
        Transition déclenchée par la facturation : free → ha/ri redescendent à shu.
        La décision d'abonnement elle-même est externe.
        """
        team = await self._get_team(db, team_id)
        previous = WowLevel(team.wow_level)
        level = reset_level_for_plan(previous, plan)

        team = await team_repo.update_plan(db, team, plan)
        if level != previous:
            team = await team_repo.update_level(db, team, level)
            logger.info(f"Team {team_id} level reset on plan change: {previous.value} -> {level.value}")

        return {
            "team_id":        team_id,
            "plan":           plan,
            "previous_level": previous,
            "level":          level,
            "level_changed":  level != previous,
        }

    # ── Signal combiné ───────────────────────────────────────

    async def get_combined_signal(
        self, db: AsyncSession, team_id: int, today: Optional[date] = None
    ) -> Dict:
        """
        Vibe = valeur semaine (None sous le minimum de données),
        WoW  = moyenne des scores des sessions fermées notées.
        """
        metrics = await vibe_service.compute_team_metrics(db, team_id, today=today)

        sessions = await wow_repo.get_closed_sessions(db, team_id)
        scores = [s.overall_score for s in sessions if s.overall_score is not None]
        wow_score = round(sum(scores) / len(scores), 2) if scores else None

        signal = combine_signal(metrics.week_vibe.value, wow_score)
        payload = signal.to_dict()
        payload.update({
            "team_id":    team_id,
            "vibe_score": metrics.week_vibe.value,
            "wow_score":  wow_score,
        })
        return payload
