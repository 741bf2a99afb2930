# modules/wow/router.py
"""
Endpoints Way of Work.

Deux acteurs :
- Facilitateur : crée, prévisualise, clôt les sessions, consulte l'historique
- Membre (anonyme) : soumet une réponse via son device_id
"""
from fastapi import APIRouter, HTTPException, status
from typing import List

from teamsignal.shared.deps import DbDep
from teamsignal.shared.errors import (
    DuplicateResponseError, InvalidTransitionError, NotFoundError, SessionsNotComparableError,
)
from teamsignal.modules.wow.service import WowService
from teamsignal.modules.wow.schemas import (
    SessionCreateIn,
    SessionOut,
    SessionCloseIn,
    ResponseIn,
    ResponseOut,
    SessionOutcomeOut,
)

router = APIRouter(prefix="/wow", tags=["Way of Work"])
service = WowService()


# ─────────────────────────────────────────────
# FACILITATEUR : sessions
# ─────────────────────────────────────────────

@router.post(
    "/teams/{team_id}/sessions",
    response_model=SessionOut,
    status_code=status.HTTP_201_CREATED,
    summary="Créer une session",
)
async def create_session(team_id: int, payload: SessionCreateIn, db: DbDep):
    try:
        return await service.create_session(db, team_id, payload.angle, payload.title)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)


@router.get(
    "/sessions/compare",
    summary="Comparer deux sessions du même angle",
)
async def compare_sessions(first: int, second: int, db: DbDep):
    try:
        return await service.compare_sessions(db, first, second)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    except SessionsNotComparableError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, e.to_dict())


@router.get(
    "/sessions/{session_id}/synthesis",
    summary="Aperçu de la synthèse",
    description="null tant que la session a moins de 3 réponses. 409 si la session n'est pas active.",
)
async def get_synthesis(session_id: int, db: DbDep):
    try:
        result = await service.synthesize_session(db, session_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    except InvalidTransitionError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, e.code)
    return result.to_dict() if result else None


@router.post(
    "/sessions/{session_id}/close",
    summary="Clôturer une session",
    description="Fige la synthèse. Une session déjà fermée renvoie 409, elle n'est jamais re-synthétisée.",
)
async def close_session(session_id: int, payload: SessionCloseIn, db: DbDep):
    try:
        return await service.close_session(
            db,
            session_id,
            focus_area=payload.focus_area,
            experiment=payload.experiment,
            experiment_owner=payload.experiment_owner,
            followup_date=payload.followup_date,
        )
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    except InvalidTransitionError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, e.code)


@router.get("/sessions/{session_id}/outcome", response_model=SessionOutcomeOut, summary="Résultat public")
async def get_outcome(session_id: int, db: DbDep):
    try:
        return await service.get_outcome(db, session_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)


@router.get("/teams/{team_id}/stats", summary="Statistiques Way of Work de l'équipe")
async def get_team_stats(team_id: int, db: DbDep):
    try:
        return await service.get_team_stats(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)


@router.get(
    "/teams/{team_id}/comparable",
    response_model=List[dict],
    summary="Sessions comparables (même angle, notées)",
)
async def get_comparable_sessions(team_id: int, db: DbDep):
    try:
        return await service.get_comparable_sessions(db, team_id)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)


# ─────────────────────────────────────────────
# MEMBRE : réponse anonyme
# ─────────────────────────────────────────────

@router.post(
    "/sessions/{session_id}/responses",
    response_model=ResponseOut,
    status_code=status.HTTP_201_CREATED,
    summary="Répondre à une session",
)
async def submit_response(session_id: int, payload: ResponseIn, db: DbDep):
    try:
        return await service.submit_response(db, session_id, payload.device_id, payload.answers)
    except NotFoundError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, e.code)
    except DuplicateResponseError:
        raise HTTPException(status.HTTP_409_CONFLICT, "Vous avez déjà répondu à cette session, merci !")
    except InvalidTransitionError as e:
        raise HTTPException(status.HTTP_409_CONFLICT, e.code)
