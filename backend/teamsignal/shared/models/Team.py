# teamsignal/shared/models/Team.py
"""
Équipe — seul enregistrement partagé muté par le moteur (via l'appelant) :
le champ wow_level.

CRUD équipe hors périmètre : la table est lue ici, jamais créée par les services.
"""
from sqlalchemy import Column, Integer, String, DateTime, Enum as SAEnum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from teamsignal.core.database import Base
from teamsignal.shared.enums import WowLevel, TeamPlan


class Team(Base):
    __tablename__ = "teams"

    id   = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    # Taille attendue saisie par l'owner ; None = repli sur les participants distincts
    expected_team_size = Column(Integer, nullable=True)

    wow_level = Column(SAEnum(WowLevel, name="wowlevel", values_callable=lambda e: [m.value for m in e]),
                       nullable=False, default=WowLevel.SHU, server_default="shu")
    plan      = Column(SAEnum(TeamPlan, name="teamplan", values_callable=lambda e: [m.value for m in e]),
                       nullable=False, default=TeamPlan.FREE, server_default="free")

    level_updated_at = Column(DateTime(timezone=True), nullable=True)
    created_at       = Column(DateTime(timezone=True), server_default=func.now())

    # ── Relations ────────────────────────────────────────────
    vibe_checkins = relationship("VibeCheckin", back_populates="team", cascade="all, delete-orphan")
    wow_sessions  = relationship("WowSession", back_populates="team", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Team id={self.id} level={self.wow_level} plan={self.plan}>"
