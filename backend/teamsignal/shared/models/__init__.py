# teamsignal/shared/models/__init__.py
"""
Point d'entrée unique pour tous les modèles SQLAlchemy.

TOUJOURS importer les modèles depuis ce fichier :
  from teamsignal.shared.models import Team, WowSession, ...

→ Garantit que tous les modèles sont enregistrés dans Base.metadata
  avant la création des tables (Alembic, create_all).
"""

from teamsignal.shared.models.Team import Team
from teamsignal.shared.models.Vibe import VibeCheckin
from teamsignal.shared.models.Wow  import WowSession, WowResponse

__all__ = [
    # Team
    "Team",
    # Vibe
    "VibeCheckin",
    # Way of Work
    "WowSession",
    "WowResponse",
]
