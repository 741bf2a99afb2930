# teamsignal/shared/models/Wow.py
"""
Way of Work :
WowSession (cycle draft → active → closed) → WowResponse (anonyme, 1 par device)

Le résultat de synthèse (focus_area, experiment, overall_score) est écrit
une seule fois à la clôture, puis n'est jamais réécrit.
"""
from sqlalchemy import (
    Column, Integer, String, Boolean, Float, Date, DateTime, JSON, ForeignKey,
    UniqueConstraint, Enum as SAEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from teamsignal.core.database import Base
from teamsignal.shared.enums import WowAngle, WowLevel, SessionStatus


def _values(enum_cls):
    return [m.value for m in enum_cls]


class WowSession(Base):
    __tablename__ = "wow_sessions"

    id      = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    title   = Column(String, nullable=True)

    angle  = Column(SAEnum(WowAngle, name="wowangle", values_callable=_values), nullable=False)
    # Niveau auquel la session a été jouée (figé à la création)
    level  = Column(SAEnum(WowLevel, name="wowlevel", values_callable=_values), nullable=False, default=WowLevel.SHU)
    status = Column(SAEnum(SessionStatus, name="sessionstatus", values_callable=_values),
                    nullable=False, default=SessionStatus.ACTIVE)

    # ── Résultat (rempli à la clôture) ───────────────────────
    focus_area         = Column(String, nullable=True)
    experiment         = Column(String, nullable=True)
    experiment_owner   = Column(String, nullable=True)
    followup_date      = Column(Date, nullable=True)
    follow_up_recorded = Column(Boolean, nullable=False, default=False)

    # Entrées de l'évaluateur de niveau
    overall_score      = Column(Float, nullable=True)    # None si < 3 réponses
    participation_rate = Column(Float, nullable=True)    # 0-1, None si taille inconnue
    response_count     = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    closed_at  = Column(DateTime(timezone=True), nullable=True)

    team      = relationship("Team", back_populates="wow_sessions")
    responses = relationship("WowResponse", back_populates="session", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<WowSession id={self.id} angle={self.angle} status={self.status}>"


class WowResponse(Base):
    __tablename__ = "wow_responses"

    id         = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("wow_sessions.id"), nullable=False, index=True)
    device_id  = Column(String, nullable=False)

    # {statement_id: score 1-5}, brut, validé à l'agrégation
    answers    = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("session_id", "device_id", name="uq_wow_session_device"),
    )

    session = relationship("WowSession", back_populates="responses")

    def __repr__(self):
        return f"<WowResponse id={self.id} session={self.session_id}>"
