# tests/modules/vibe/test_service.py
"""
Tests unitaires pour modules.vibe.service — VibeService.

Couverture :
    submit_checkin        → succès, équipe introuvable, doublon, course (IntegrityError)
    compute_team_metrics  → fenêtre lue, taille d'équipe (attendue / participants)
    get_insights          → liste d'insights
    compute_fleet_metrics → équipe introuvable et unité en échec isolées
"""
import pytest
from datetime import timedelta
from unittest.mock import AsyncMock

from sqlalchemy.exc import IntegrityError

from teamsignal.engine.vibe import metrics as vibe_metrics
from teamsignal.modules.vibe.service import VibeService
from teamsignal.shared.errors import DuplicateCheckinError, NotFoundError
from tests.conftest import TODAY, make_async_db, make_checkin, make_history, make_team

pytestmark = pytest.mark.service

service = VibeService()

SERVICE = "teamsignal.modules.vibe.service"


# ── submit_checkin ────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_submit_checkin_succes(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mocker.patch(f"{SERVICE}.vibe_repo.has_checked_in", AsyncMock(return_value=False))
    mock_create = mocker.patch(
        f"{SERVICE}.vibe_repo.create_checkin", AsyncMock(return_value=make_checkin(id=7))
    )

    result = await service.submit_checkin(make_async_db(), 1, "device-abc", 4, today=TODAY)

    assert result == {"status": "checked_in", "checkin_id": 7, "entry_date": TODAY}
    data = mock_create.call_args.args[1]
    assert data["entry_date"] == TODAY
    assert data["score"] == 4


@pytest.mark.asyncio
async def test_submit_checkin_equipe_introuvable(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=None))

    with pytest.raises(NotFoundError) as exc:
        await service.submit_checkin(make_async_db(), 99, "device-abc", 4, today=TODAY)
    assert exc.value.code == "TEAM_NOT_FOUND"


@pytest.mark.asyncio
async def test_submit_checkin_doublon(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mocker.patch(f"{SERVICE}.vibe_repo.has_checked_in", AsyncMock(return_value=True))
    mock_create = mocker.patch(f"{SERVICE}.vibe_repo.create_checkin", AsyncMock())

    with pytest.raises(DuplicateCheckinError):
        await service.submit_checkin(make_async_db(), 1, "device-abc", 4, today=TODAY)
    mock_create.assert_not_called()


@pytest.mark.asyncio
async def test_submit_checkin_course_contrainte_unique(mocker):
    """Deux envois simultanés : la contrainte unique tranche, rollback puis 409."""
    db = make_async_db()
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mocker.patch(f"{SERVICE}.vibe_repo.has_checked_in", AsyncMock(return_value=False))
    mocker.patch(
        f"{SERVICE}.vibe_repo.create_checkin",
        AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("uq_vibe_team_device_day"))),
    )

    with pytest.raises(DuplicateCheckinError):
        await service.submit_checkin(db, 1, "device-abc", 4, today=TODAY)
    db.rollback.assert_awaited_once()


# ── compute_team_metrics ──────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_compute_team_metrics_fenetre_par_defaut(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mock_history = mocker.patch(
        f"{SERVICE}.vibe_repo.get_daily_aggregates",
        AsyncMock(return_value=make_history([4.0, 3.5, 3.0])),
    )

    metrics = await service.compute_team_metrics(make_async_db(), 1, today=TODAY)

    assert mock_history.call_args.args[2] == TODAY - timedelta(days=13)
    assert metrics.window_days == 14
    assert metrics.live_vibe.value == 4.0
    assert metrics.participation.team_size == 10
    assert metrics.as_of == TODAY


@pytest.mark.asyncio
async def test_compute_team_metrics_fenetre_elargie(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mock_history = mocker.patch(f"{SERVICE}.vibe_repo.get_daily_aggregates", AsyncMock(return_value=[]))

    metrics = await service.compute_team_metrics(make_async_db(), 1, window_days=30, today=TODAY)

    assert mock_history.call_args.args[2] == TODAY - timedelta(days=29)
    assert metrics.window_days == 30


@pytest.mark.asyncio
async def test_compute_team_metrics_taille_par_participants(mocker):
    """Sans taille attendue : nombre de devices distincts."""
    mocker.patch(
        f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team(expected_team_size=None))
    )
    mocker.patch(f"{SERVICE}.vibe_repo.get_daily_aggregates", AsyncMock(return_value=make_history([4.0], count=3)))
    mock_count = mocker.patch(f"{SERVICE}.vibe_repo.count_participants", AsyncMock(return_value=4))

    metrics = await service.compute_team_metrics(make_async_db(), 1, today=TODAY)

    mock_count.assert_awaited_once()
    assert metrics.participation.team_size == 4
    assert metrics.participation.rate == 75


@pytest.mark.asyncio
async def test_compute_team_metrics_equipe_introuvable(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=None))

    with pytest.raises(NotFoundError):
        await service.compute_team_metrics(make_async_db(), 99, today=TODAY)


# ── get_insights ──────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_insights(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mocker.patch(
        f"{SERVICE}.vibe_repo.get_daily_aggregates",
        AsyncMock(return_value=make_history([1.5, 1.5, 1.5, 1.5], count=8)),
    )

    insights = await service.get_insights(make_async_db(), 1, today=TODAY)

    assert "under_pressure" in [i.key for i in insights]
    assert len(insights) <= 3


# ── compute_fleet_metrics ─────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_compute_fleet_metrics_isole_les_echecs(mocker):
    teams = [make_team(id=1), make_team(id=2, expected_team_size=7)]
    mocker.patch(f"{SERVICE}.team_repo.get_teams", AsyncMock(return_value=teams))
    mocker.patch(
        f"{SERVICE}.vibe_repo.get_daily_aggregates",
        AsyncMock(return_value=make_history([4.0, 3.5])),
    )

    real = vibe_metrics.compute_team_metrics

    def flaky(history, team_size, today, window_days):
        if team_size == 7:
            raise RuntimeError("calcul impossible")
        return real(history, team_size, today, window_days)

    mocker.patch(f"{SERVICE}.compute_team_metrics", side_effect=flaky)

    result = await service.compute_fleet_metrics(make_async_db(), [1, 2, 3], today=TODAY)

    assert list(result["results"]) == [1]
    assert result["results"][1]["live_vibe"]["value"] == 4.0
    assert result["errors"] == {3: "TEAM_NOT_FOUND", 2: "calcul impossible"}
    assert result["as_of"] == TODAY
    assert result["window_days"] == 14


@pytest.mark.asyncio
async def test_compute_fleet_metrics_ids_dedoublonnes(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_teams", AsyncMock(return_value=[make_team(id=1)]))
    mock_history = mocker.patch(f"{SERVICE}.vibe_repo.get_daily_aggregates", AsyncMock(return_value=[]))

    result = await service.compute_fleet_metrics(make_async_db(), [1, 1], today=TODAY)

    assert mock_history.await_count == 1
    assert list(result["results"]) == [1]
    assert result["errors"] == {}
