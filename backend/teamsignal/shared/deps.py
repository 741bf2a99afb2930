# teamsignal/shared/deps.py
"""
Dépendances FastAPI réutilisables dans tous les routers.
Injectées via Depends() — jamais appelées directement.

Pas d'authentification ici : les appelants sont pré-autorisés et
l'isolation entre équipes est assurée en amont.
"""
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from teamsignal.core.database import get_db


# ── Type aliases pour les routers ─────────────────────────
DbDep = Annotated[AsyncSession, Depends(get_db)]
