# modules/wow/service.py
"""
Way of Work — cycle de vie d'une session et synthèse.

    create (active) → responses (1 par device) → close (une seule fois)

La synthèse est recalculée à la demande sur les sessions actives (aperçu),
puis figée à la clôture : le résultat d'une session fermée n'est jamais réécrit.
Les réponses individuelles et les device_id ne sont jamais exposés ni loggés.
"""
import logging
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from teamsignal.content.statements import get_statements
from teamsignal.engine.wow.comparison import comparable_sessions, compare_syntheses
from teamsignal.engine.wow.history import SessionSummary, compute_team_stats
from teamsignal.engine.wow.synthesis import SynthesisResult, synthesize
from teamsignal.modules.team.repository import TeamRepository
from teamsignal.modules.vibe.repository import VibeRepository
from teamsignal.modules.wow.repository import WowRepository
from teamsignal.shared.enums import SessionStatus, WowAngle
from teamsignal.shared.errors import (
    DuplicateResponseError, InvalidTransitionError, NotFoundError, SessionsNotComparableError,
)
from teamsignal.shared.models import WowSession

logger = logging.getLogger(__name__)

wow_repo = WowRepository()
team_repo = TeamRepository()
vibe_repo = VibeRepository()


class WowService:

    # ── Création ──────────────────────────────────────────────

    async def create_session(
        self,
        db: AsyncSession,
        team_id: int,
        angle: WowAngle,
        title: Optional[str] = None,
    ) -> WowSession:
        """La session est jouée au niveau courant de l'équipe, figé à la création."""
        team = await team_repo.get_team(db, team_id)
        if not team:
            raise NotFoundError("TEAM_NOT_FOUND")

        return await wow_repo.create_session(db, {
            "team_id": team_id,
            "angle":   angle,
            "level":   team.wow_level,
            "title":   title,
            "status":  SessionStatus.ACTIVE,
        })

    async def _get_session(self, db: AsyncSession, session_id: int) -> WowSession:
        session = await wow_repo.get_session(db, session_id)
        if not session:
            raise NotFoundError("SESSION_NOT_FOUND")
        return session

    async def _lock_active_session(self, db: AsyncSession, session_id: int, read: bool = False) -> WowSession:
        """Verrou tenu jusqu'au commit : aucune clôture ne s'intercale entre lecture et écriture."""
        session = await wow_repo.lock_session(db, session_id, read=read)
        if not session:
            raise NotFoundError("SESSION_NOT_FOUND")
        if session.status != SessionStatus.ACTIVE:
            raise InvalidTransitionError()
        return session

    # ── Réponse (anonyme) ─────────────────────────────────────

    async def submit_response(
        self,
        db: AsyncSession,
        session_id: int,
        device_id: str,
        answers: Dict,
    ) -> Dict:
        """
        Doublon (session, device) rejeté AVANT toute agrégation, jamais fusionné.
        Les réponses malformées sont stockées telles quelles et écartées à l'agrégation.
        """
        await self._lock_active_session(db, session_id, read=True)

        if await wow_repo.has_already_responded(db, session_id, device_id):
            raise DuplicateResponseError()

        try:
            response = await wow_repo.create_response(db, {
                "session_id": session_id,
                "device_id":  device_id,
                "answers":    answers,
            })
        except IntegrityError:
            await db.rollback()
            raise DuplicateResponseError()

        return {"status": "submitted", "response_id": response.id}

    # ── Synthèse ──────────────────────────────────────────────

    async def _synthesize(self, db: AsyncSession, session: WowSession) -> SynthesisResult:
        answers = await wow_repo.get_answers(db, session.id)
        result = synthesize(answers, get_statements(session.angle, session.level))
        if result.dropped_answers:
            logger.warning(
                f"Session {session.id}: {result.dropped_answers} malformed answer(s) dropped"
            )
        return result

    async def synthesize_session(self, db: AsyncSession, session_id: int) -> Optional[SynthesisResult]:
        """Aperçu sur session active. None tant que la session est "collecting" (< 3 réponses)."""
        session = await self._get_session(db, session_id)
        if session.status != SessionStatus.ACTIVE:
            raise InvalidTransitionError()

        result = await self._synthesize(db, session)
        return result if result.is_scored else None

    # ── Clôture ───────────────────────────────────────────────

    async def _participation_rate(self, db: AsyncSession, team_id: int, response_count: int) -> Optional[float]:
        team = await team_repo.get_team(db, team_id)
        team_size = team.expected_team_size if team else None
        if not team_size:
            team_size = await vibe_repo.count_participants(db, team_id)
        if not team_size:
            return None
        return round(min(response_count / team_size, 1.0), 2)

    async def close_session(
        self,
        db: AsyncSession,
        session_id: int,
        focus_area: Optional[str] = None,
        experiment: Optional[str] = None,
        experiment_owner: Optional[str] = None,
        followup_date: Optional[date] = None,
    ) -> Dict:
        """
        Une seule fois, sur session active. Persiste focus_area, experiment,
        overall_score (None sous 3 réponses) et les entrées de l'évaluateur
        de niveau. Un focus / une expérience fournis par l'appelant
        remplacent la suggestion.

        La ligne reste verrouillée de la lecture des réponses jusqu'à l'écriture,
        et l'écriture ne passe que si la session est encore active : deux
        clôtures concurrentes n'en laissent passer qu'une.
        """
        session = await self._lock_active_session(db, session_id)

        result = await self._synthesize(db, session)
        participation_rate = await self._participation_rate(db, session.team_id, result.response_count)

        closed = await wow_repo.close_session(db, session_id, {
            "focus_area":         focus_area or result.focus_area,
            "experiment":         experiment or result.suggested_experiment,
            "experiment_owner":   experiment_owner,
            "followup_date":      followup_date,
            "follow_up_recorded": followup_date is not None,
            "overall_score":      result.overall_score,
            "participation_rate": participation_rate,
            "response_count":     result.response_count,
            "closed_at":          datetime.now(timezone.utc),
        })
        if closed is None:
            raise InvalidTransitionError()
        session = closed

        logger.info(
            f"Session {session.id} closed: {result.response_count} response(s), "
            f"{'scored' if result.is_scored else 'collecting'}"
        )

        return {
            "session_id": session.id,
            "status":     session.status,
            "outcome":    self._outcome(session),
            "synthesis":  result.to_dict() if result.is_scored else None,
        }

    # ── Résultat public ──────────────────────────────────────

    @staticmethod
    def _outcome(session: WowSession, response_count: Optional[int] = None) -> Dict:
        return {
            "session_id":       session.id,
            "angle":            session.angle,
            "status":           session.status,
            "focus_area":       session.focus_area,
            "experiment":       session.experiment,
            "experiment_owner": session.experiment_owner,
            "followup_date":    session.followup_date,
            "overall_score":    session.overall_score,
            "response_count":   response_count if response_count is not None else session.response_count,
            "closed_at":        session.closed_at,
        }

    async def get_outcome(self, db: AsyncSession, session_id: int) -> Dict:
        session = await self._get_session(db, session_id)
        if session.status == SessionStatus.CLOSED:
            return self._outcome(session)
        # Session en cours : compteur réel, aucun score
        return self._outcome(session, await wow_repo.count_responses(db, session_id))

    # ── Historique équipe ────────────────────────────────────

    async def _summaries(self, db: AsyncSession, team_id: int) -> List[SessionSummary]:
        if not await team_repo.get_team(db, team_id):
            raise NotFoundError("TEAM_NOT_FOUND")

        rows = await wow_repo.get_team_sessions_with_counts(db, team_id)
        return [
            SessionSummary(
                id=s.id,
                angle=WowAngle(s.angle),
                status=SessionStatus(s.status),
                created_at=s.created_at,
                overall_score=s.overall_score,
                response_count=count,
            )
            for s, count in rows
        ]

    async def get_team_stats(self, db: AsyncSession, team_id: int) -> Dict:
        summaries = await self._summaries(db, team_id)
        return compute_team_stats(summaries).to_dict()

    # ── Comparaison ──────────────────────────────────────────

    async def compare_sessions(self, db: AsyncSession, first_id: int, second_id: int) -> Dict:
        """
        Deux sessions fermées de la même équipe, même angle et même niveau
        (sinon aucun énoncé en commun), chacune notée (≥ 3 réponses).
        """
        first = await self._get_session(db, first_id)
        second = await self._get_session(db, second_id)

        if first.status != SessionStatus.CLOSED or second.status != SessionStatus.CLOSED:
            raise SessionsNotComparableError(details={"reason": "session_not_closed"})
        if first.team_id != second.team_id:
            raise SessionsNotComparableError(details={"reason": "team_mismatch"})
        if first.angle != second.angle:
            raise SessionsNotComparableError(details={"reason": "angle_mismatch"})
        if first.level != second.level:
            raise SessionsNotComparableError(details={"reason": "level_mismatch"})

        first_synthesis = await self._synthesize(db, first)
        second_synthesis = await self._synthesize(db, second)
        if not (first_synthesis.is_scored and second_synthesis.is_scored):
            raise SessionsNotComparableError(details={"reason": "not_enough_responses"})

        comparison = compare_syntheses(WowAngle(first.angle), first_synthesis, second_synthesis)
        payload = comparison.to_dict()
        payload["first_session_id"] = first.id
        payload["second_session_id"] = second.id
        return payload

    async def get_comparable_sessions(self, db: AsyncSession, team_id: int) -> List[Dict]:
        summaries = await self._summaries(db, team_id)
        return [
            {
                "angle": angle.value,
                "sessions": [
                    {"id": s.id, "date": s.created_at, "score": s.overall_score}
                    for s in sessions
                ],
            }
            for angle, sessions in comparable_sessions(summaries).items()
        ]
