# modules/team/router.py
"""
Endpoints équipe : progression Shu/Ha/Ri, changement de plan, signal combiné.
"""
from fastapi import APIRouter, HTTPException, status

from teamsignal.shared.deps import DbDep
from teamsignal.shared.errors import InvalidTransitionError, NotFoundError
from teamsignal.modules.team.service import TeamService
from teamsignal.modules.team.schemas import CombinedSignalOut, LevelChangeOut, PlanChangeIn

router = APIRouter(prefix="/teams", tags=["Teams"])
service = TeamService()


@router.get(
    "/{team_id}/level",
    summary="Progression vers le niveau suivant",
    description="Exigences du niveau suivant (clé, seuil, valeur courante, atteint) et risque. Ne modifie rien.",
)
async def get_level_progress(team_id: int, db: DbDep):
    try:
        progress = await service.evaluate_level_progress(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    return progress.to_dict()


@router.post(
    "/{team_id}/level/promote",
    response_model=LevelChangeOut,
    summary="Passer au niveau suivant",
)
async def promote_level(team_id: int, db: DbDep):
    try:
        return await service.promote_level(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    except InvalidTransitionError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, e.to_dict())


@router.post(
    "/{team_id}/plan",
    response_model=LevelChangeOut,
    summary="Changement de plan",
    description="Le passage en free remet un niveau ha/ri à shu.",
)
async def change_plan(team_id: int, payload: PlanChangeIn, db: DbDep):
    try:
        return await service.change_plan(db, team_id, payload.plan)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)


@router.get("/{team_id}/signal", response_model=CombinedSignalOut, summary="Signal combiné Vibe + WoW")
async def get_combined_signal(team_id: int, db: DbDep):
    try:
        return await service.get_combined_signal(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
