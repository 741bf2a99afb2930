# modules/vibe/router.py
"""
Endpoints Vibe : check-in quotidien anonyme, métriques et insights d'équipe.

Règle : zéro accès DB ici. Tout passe par VibeService.
"""
from fastapi import APIRouter, HTTPException, Query, status
from typing import Optional

from teamsignal.shared.deps import DbDep
from teamsignal.shared.errors import DuplicateCheckinError, NotFoundError
from teamsignal.modules.vibe.service import VibeService
from teamsignal.modules.vibe.schemas import CheckinIn, CheckinOut, FleetMetricsIn, FleetMetricsOut

router = APIRouter(prefix="/vibe", tags=["Vibe"])
service = VibeService()


@router.post(
    "/teams/{team_id}/checkins",
    response_model=CheckinOut,
    status_code=status.HTTP_201_CREATED,
    summary="Check-in du jour",
    description="Un check-in par device et par jour. Un second envoi renvoie 409.",
)
async def submit_checkin(team_id: int, payload: CheckinIn, db: DbDep):
    try:
        return await service.submit_checkin(db, team_id, payload.device_id, payload.score)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    except DuplicateCheckinError:
        raise HTTPException(status.HTTP_409_CONFLICT, "Déjà enregistré aujourd'hui, merci !")


@router.get(
    "/teams/{team_id}/metrics",
    summary="Métriques Vibe d'une équipe",
    description=(
        "Live / jour / semaine / semaine précédente, momentum, participation, "
        "états jour et semaine, maturité. value=null tant que le minimum "
        "de check-ins n'est pas atteint."
    ),
)
async def get_team_metrics(
    team_id: int,
    db: DbDep,
    window_days: Optional[int] = Query(None, ge=1, le=365),
):
    try:
        metrics = await service.compute_team_metrics(db, team_id, window_days=window_days)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    return metrics.to_dict()


@router.get("/teams/{team_id}/insights", summary="Insights Vibe (max 3)")
async def get_team_insights(team_id: int, db: DbDep):
    try:
        insights = await service.get_insights(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    return [i.to_dict() for i in insights]


@router.post(
    "/fleet/metrics",
    response_model=FleetMetricsOut,
    summary="Métriques Vibe de plusieurs équipes",
    description="Une équipe en échec apparaît dans `errors` sans bloquer les autres.",
)
async def get_fleet_metrics(payload: FleetMetricsIn, db: DbDep):
    return await service.compute_fleet_metrics(db, payload.team_ids, window_days=payload.window_days)
