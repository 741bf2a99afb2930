# teamsignal/shared/models/Vibe.py
"""
Vibe — check-in quotidien anonyme (score 1-5).

device_id est une clé de corrélation locale (dédoublonnage), jamais une identité.
Aucun commentaire libre n'est stocké.
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from teamsignal.core.database import Base


class VibeCheckin(Base):
    __tablename__ = "vibe_checkins"

    id         = Column(Integer, primary_key=True, index=True)
    team_id    = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    device_id  = Column(String, nullable=False)

    score      = Column(Integer, nullable=False)        # 1 à 5
    entry_date = Column(Date, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("team_id", "device_id", "entry_date", name="uq_vibe_team_device_day"),
    )

    team = relationship("Team", back_populates="vibe_checkins")

    def __repr__(self):
        return f"<VibeCheckin id={self.id} team={self.team_id} date={self.entry_date} score={self.score}>"
