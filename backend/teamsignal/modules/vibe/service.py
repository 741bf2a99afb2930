# modules/vibe/service.py
"""
Vibe — check-in quotidien anonyme + métriques d'équipe.

Pipeline métriques :
1. Lecture des agrégats journaliers (repository, GROUP BY jour)
2. Résolution de la taille d'équipe (attendue, sinon participants distincts)
3. Calcul pur (engine/vibe/metrics.py)

Le device_id sert uniquement au dédoublonnage : jamais loggé, jamais exposé.
"""
import logging
from datetime import date, datetime, timedelta, timezone
from functools import partial
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from teamsignal.core.config import settings
from teamsignal.engine.batch import run_fanout
from teamsignal.engine.vibe.insights import VibeInsight, generate_insights
from teamsignal.engine.vibe.metrics import MIN_WINDOW_DAYS, TeamMetrics, compute_team_metrics
from teamsignal.modules.team.repository import TeamRepository
from teamsignal.modules.vibe.repository import VibeRepository
from teamsignal.shared.errors import DuplicateCheckinError, NotFoundError
from teamsignal.shared.models import Team

logger = logging.getLogger(__name__)

vibe_repo = VibeRepository()
team_repo = TeamRepository()


def _today() -> date:
    return datetime.now(timezone.utc).date()


class VibeService:

    # ── Check-in ──────────────────────────────────────────────

    async def submit_checkin(
        self,
        db: AsyncSession,
        team_id: int,
        device_id: str,
        score: int,
        today: Optional[date] = None,
    ) -> Dict:
        """Un check-in par device, par équipe, par jour calendaire."""
        today = today or _today()

        if not await team_repo.get_team(db, team_id):
            raise NotFoundError("TEAM_NOT_FOUND")

        if await vibe_repo.has_checked_in(db, team_id, device_id, today):
            raise DuplicateCheckinError()

        try:
            checkin = await vibe_repo.create_checkin(db, {
                "team_id":    team_id,
                "device_id":  device_id,
                "score":      score,
                "entry_date": today,
            })
        except IntegrityError:
            # Course entre deux envois simultanés : la contrainte unique tranche
            await db.rollback()
            raise DuplicateCheckinError()

        return {"status": "checked_in", "checkin_id": checkin.id, "entry_date": today}

    # ── Métriques ─────────────────────────────────────────────

    async def _resolve_team_size(self, db: AsyncSession, team: Team) -> int:
        if team.expected_team_size:
            return team.expected_team_size
        return await vibe_repo.count_participants(db, team.id)

    async def _load_inputs(
        self, db: AsyncSession, team: Team, window_days: int, today: date
    ):
        since = today - timedelta(days=window_days - 1)
        history = await vibe_repo.get_daily_aggregates(db, team.id, since)
        team_size = await self._resolve_team_size(db, team)
        return history, team_size

    @staticmethod
    def _window(window_days: Optional[int]) -> int:
        return max(window_days or settings.VIBE_WINDOW_DAYS, MIN_WINDOW_DAYS)

    async def compute_team_metrics(
        self,
        db: AsyncSession,
        team_id: int,
        window_days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> TeamMetrics:
        today = today or _today()
        window_days = self._window(window_days)

        team = await team_repo.get_team(db, team_id)
        if not team:
            raise NotFoundError("TEAM_NOT_FOUND")

        history, team_size = await self._load_inputs(db, team, window_days, today)
        return compute_team_metrics(history, team_size, today, window_days)

    async def get_insights(
        self, db: AsyncSession, team_id: int, today: Optional[date] = None
    ) -> List[VibeInsight]:
        metrics = await self.compute_team_metrics(db, team_id, today=today)
        return generate_insights(metrics)

    # ── Flotte ────────────────────────────────────────────────

    async def compute_fleet_metrics(
        self,
        db: AsyncSession,
        team_ids: List[int],
        window_days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> Dict:
        """
        Lecture séquentielle (une AsyncSession n'est pas partageable),
        puis calcul en parallèle : une équipe = une unité indépendante.
        Une équipe en échec n'empêche pas les autres d'aboutir.
        """
        today = today or _today()
        window_days = self._window(window_days)

        teams = {t.id: t for t in await team_repo.get_teams(db, team_ids)}
        errors: Dict[int, str] = {}
        units = {}

        for team_id in dict.fromkeys(team_ids):
            team = teams.get(team_id)
            if team is None:
                errors[team_id] = "TEAM_NOT_FOUND"
                continue
            history, team_size = await self._load_inputs(db, team, window_days, today)
            units[team_id] = partial(compute_team_metrics, history, team_size, today, window_days)

        results, unit_errors = run_fanout(units, max_workers=settings.FLEET_MAX_WORKERS)
        errors.update(unit_errors)

        return {
            "as_of":       today,
            "window_days": window_days,
            "results":     {team_id: metrics.to_dict() for team_id, metrics in results.items()},
            "errors":      errors,
        }
