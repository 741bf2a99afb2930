# teamsignal/modules/vibe/schemas.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import date


# ── Check-in ───────────────────────────────────────────────

class CheckinIn(BaseModel):
    """device_id : clé locale opaque générée côté client, jamais une identité."""
    device_id: str = Field(..., min_length=1, max_length=128)
    score: int = Field(..., ge=1, le=5)


class CheckinOut(BaseModel):
    status: str
    checkin_id: int
    entry_date: date


# ── Flotte ─────────────────────────────────────────────────

class FleetMetricsIn(BaseModel):
    team_ids: List[int] = Field(..., min_length=1)
    window_days: Optional[int] = Field(None, ge=1, le=365)


class FleetMetricsOut(BaseModel):
    as_of: date
    window_days: int
    results: Dict[int, dict]
    errors: Dict[int, str]
