# main.py
"""
Point d'entrée de l'API Team Signal.
Enregistre tous les modules via leurs routers.

Architecture : modules verticaux quasi-autonomes + engine transversal (ZÉRO accès DB).
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from teamsignal.core.config import settings

from teamsignal.modules.vibe.router import router as vibe_router
from teamsignal.modules.wow.router  import router as wow_router
from teamsignal.modules.team.router import router as team_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(vibe_router)
app.include_router(wow_router)
app.include_router(team_router)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "1.0.0"}
