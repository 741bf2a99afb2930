# modules/vibe/repository.py
"""
Accès DB pour les check-ins Vibe.

Les lignes brutes ne sortent jamais d'ici : le service ne reçoit que
des agrégats journaliers (une ligne par jour, GROUP BY entry_date).
"""
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from typing import Dict, List
from datetime import date

from teamsignal.engine.vibe.metrics import DailyAggregate
from teamsignal.shared.models import VibeCheckin


class VibeRepository:

    async def has_checked_in(
        self, db: AsyncSession, team_id: int, device_id: str, entry_date: date
    ) -> bool:
        r = await db.execute(
            select(VibeCheckin.id).where(
                VibeCheckin.team_id == team_id,
                VibeCheckin.device_id == device_id,
                VibeCheckin.entry_date == entry_date,
            )
        )
        return r.scalar_one_or_none() is not None

    async def create_checkin(self, db: AsyncSession, data: Dict) -> VibeCheckin:
        db_obj = VibeCheckin(**data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def get_daily_aggregates(
        self, db: AsyncSession, team_id: int, since: date
    ) -> List[DailyAggregate]:
        r = await db.execute(
            select(
                VibeCheckin.entry_date,
                func.avg(VibeCheckin.score),
                func.count(VibeCheckin.id),
                func.count(func.distinct(VibeCheckin.device_id)),
            )
            .where(VibeCheckin.team_id == team_id, VibeCheckin.entry_date >= since)
            .group_by(VibeCheckin.entry_date)
            .order_by(VibeCheckin.entry_date)
        )
        return [
            DailyAggregate(date=d, average=float(avg), count=int(count), participant_count=int(participants))
            for d, avg, count, participants in r.all()
        ]

    async def count_participants(self, db: AsyncSession, team_id: int) -> int:
        """Devices distincts ayant déjà fait un check-in — repli si la taille d'équipe n'est pas saisie."""
        r = await db.execute(
            select(func.count(func.distinct(VibeCheckin.device_id)))
            .where(VibeCheckin.team_id == team_id)
        )
        return r.scalar() or 0
