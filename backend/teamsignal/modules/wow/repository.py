# modules/wow/repository.py
"""
Accès DB pour les sessions Way of Work et leurs réponses anonymes.
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, update
from typing import Dict, List, Optional, Tuple

from teamsignal.shared.enums import SessionStatus
from teamsignal.shared.models import WowSession, WowResponse


class WowRepository:

    # ── Sessions ──────────────────────────────────────────────

    async def create_session(self, db: AsyncSession, data: Dict) -> WowSession:
        db_obj = WowSession(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get_session(self, db: AsyncSession, session_id: int) -> Optional[WowSession]:
        r = await db.execute(select(WowSession).where(WowSession.id == session_id))
        return r.scalar_one_or_none()

    async def lock_session(
        self, db: AsyncSession, session_id: int, read: bool = False
    ) -> Optional[WowSession]:
        """
        Ligne verrouillée jusqu'au commit de la transaction courante.
        read=True : FOR SHARE (les réponses passent en parallèle, la clôture attend).
        """
        r = await db.execute(
            select(WowSession)
            .where(WowSession.id == session_id)
            .with_for_update(read=read)
        )
        return r.scalar_one_or_none()

    async def get_team_sessions_with_counts(
        self, db: AsyncSession, team_id: int
    ) -> List[Tuple[WowSession, int]]:
        """Toutes les sessions de l'équipe avec leur nombre de réponses réel."""
        r = await db.execute(
            select(WowSession, func.count(WowResponse.id))
            .outerjoin(WowResponse, WowResponse.session_id == WowSession.id)
            .where(WowSession.team_id == team_id)
            .group_by(WowSession.id)
            .order_by(WowSession.created_at.desc())
        )
        return [(session, int(count)) for session, count in r.all()]

    async def get_closed_sessions(self, db: AsyncSession, team_id: int) -> List[WowSession]:
        r = await db.execute(
            select(WowSession)
            .where(WowSession.team_id == team_id, WowSession.status == SessionStatus.CLOSED)
            .order_by(WowSession.closed_at.desc())
        )
        return r.scalars().all()

    async def close_session(
        self, db: AsyncSession, session_id: int, data: Dict
    ) -> Optional[WowSession]:
        """
        Écriture conditionnelle : ne touche la ligne que si elle est encore active.
        None si un autre appelant l'a déjà fermée.
        """
        r = await db.execute(
            update(WowSession)
            .where(WowSession.id == session_id, WowSession.status == SessionStatus.ACTIVE)
            .values(**data, status=SessionStatus.CLOSED)
            .returning(WowSession)
            .execution_options(synchronize_session="fetch")
        )
        closed = r.scalar_one_or_none()
        if closed is None:
            await db.rollback()
            return None
        await db.commit()
        return closed

    # ── Réponses ──────────────────────────────────────────────

    async def has_already_responded(
        self, db: AsyncSession, session_id: int, device_id: str
    ) -> bool:
        r = await db.execute(
            select(WowResponse.id).where(
                WowResponse.session_id == session_id,
                WowResponse.device_id == device_id,
            )
        )
        return r.scalar_one_or_none() is not None

    async def create_response(self, db: AsyncSession, data: Dict) -> WowResponse:
        db_obj = WowResponse(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get_answers(self, db: AsyncSession, session_id: int) -> List[Dict]:
        """Maps {statement_id: score} brutes, dans l'ordre d'arrivée."""
        r = await db.execute(
            select(WowResponse.answers)
            .where(WowResponse.session_id == session_id)
            .order_by(WowResponse.id)
        )
        return list(r.scalars().all())

    async def count_responses(self, db: AsyncSession, session_id: int) -> int:
        r = await db.execute(
            select(func.count(WowResponse.id)).where(WowResponse.session_id == session_id)
        )
        return r.scalar() or 0
