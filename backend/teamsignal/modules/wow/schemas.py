# teamsignal/modules/wow/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional
from datetime import date, datetime

from teamsignal.shared.enums import SessionStatus, WowAngle, WowLevel


# ── Session ────────────────────────────────────────────────

class SessionCreateIn(BaseModel):
    angle: WowAngle
    title: Optional[str] = Field(None, max_length=200)


class SessionOut(BaseModel):
    id: int
    team_id: int
    angle: WowAngle
    level: WowLevel
    status: SessionStatus
    title: Optional[str] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class SessionCloseIn(BaseModel):
    """Champs optionnels : à défaut, la suggestion de la synthèse est enregistrée."""
    focus_area: Optional[str] = Field(None, max_length=200)
    experiment: Optional[str] = Field(None, max_length=500)
    experiment_owner: Optional[str] = Field(None, max_length=100)
    followup_date: Optional[date] = None


# ── Réponse anonyme ────────────────────────────────────────

class ResponseIn(BaseModel):
    """
    answers : {statement_id: score 1-5}.
    Volontairement permissif : une valeur hors échelle est écartée
    à l'agrégation (et comptée), pas rejetée en bloc.
    """
    device_id: str = Field(..., min_length=1, max_length=128)
    answers: Dict[str, Any] = Field(..., min_length=1)


class ResponseOut(BaseModel):
    status: str
    response_id: int


# ── Résultat public ────────────────────────────────────────

class SessionOutcomeOut(BaseModel):
    session_id: int
    angle: WowAngle
    status: SessionStatus
    focus_area: Optional[str] = None
    experiment: Optional[str] = None
    experiment_owner: Optional[str] = None
    followup_date: Optional[date] = None
    overall_score: Optional[float] = None     # None sous 3 réponses
    response_count: int = 0
    closed_at: Optional[datetime] = None
