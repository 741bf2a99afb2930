# tests/modules/team/test_service.py
"""
Tests unitaires pour modules.team.service — TeamService.

Couverture :
    evaluate_level_progress → sessions fermées → SessionRecord
    promote_level           → succès (un seul niveau), exigences non remplies, ri terminal
    change_plan             → free remet ha à shu, pro ne touche pas au niveau
    get_combined_signal     → pondération vibe / wow, aucune donnée
"""
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock

from teamsignal.modules.team.service import TeamService
from teamsignal.shared.enums import SignalSource, TeamPlan, WowAngle, WowLevel
from teamsignal.shared.errors import InvalidTransitionError, NotFoundError
from tests.conftest import TODAY, make_async_db, make_closed_session, make_team

pytestmark = pytest.mark.service

service = TeamService()

SERVICE = "teamsignal.modules.team.service"


def _shu_ready_sessions():
    return [
        make_closed_session(1, id=1, angle=WowAngle.SCRUM, overall_score=3.4, participation_rate=0.7),
        make_closed_session(5, id=2, angle=WowAngle.FLOW, overall_score=3.2, participation_rate=0.6),
        make_closed_session(10, id=3, angle=WowAngle.OWNERSHIP),
        make_closed_session(40, id=4, angle=WowAngle.COLLABORATION),
        make_closed_session(50, id=5, angle=WowAngle.RETRO),
    ]


def _with_level(team, level):
    team.wow_level = level
    return team


# ── evaluate_level_progress ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_evaluate_level_progress_shu_pret(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mocker.patch(f"{SERVICE}.wow_repo.get_closed_sessions", AsyncMock(return_value=_shu_ready_sessions()))

    progress = await service.evaluate_level_progress(make_async_db(), 1, today=TODAY)

    assert progress.level == WowLevel.SHU
    assert progress.can_unlock is True
    assert progress.stats.sessions_30d == 3
    assert progress.stats.last_2_avg_score == 3.3


@pytest.mark.asyncio
async def test_evaluate_level_progress_equipe_introuvable(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=None))

    with pytest.raises(NotFoundError) as exc:
        await service.evaluate_level_progress(make_async_db(), 99, today=TODAY)
    assert exc.value.code == "TEAM_NOT_FOUND"


# ── promote_level ─────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_promote_level_succes(mocker):
    team = make_team()
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=team))
    mocker.patch(f"{SERVICE}.wow_repo.get_closed_sessions", AsyncMock(return_value=_shu_ready_sessions()))
    mock_update = mocker.patch(
        f"{SERVICE}.team_repo.update_level",
        AsyncMock(side_effect=lambda db, t, level: _with_level(t, level)),
    )

    result = await service.promote_level(make_async_db(), 1, today=TODAY)

    mock_update.assert_awaited_once()
    assert mock_update.call_args.args[2] == WowLevel.HA
    assert result == {
        "team_id": 1,
        "previous_level": WowLevel.SHU,
        "level": WowLevel.HA,
        "level_changed": True,
    }


@pytest.mark.asyncio
async def test_promote_level_exigences_non_remplies(mocker):
    sessions = _shu_ready_sessions()
    sessions[0].overall_score = 3.18
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team()))
    mocker.patch(f"{SERVICE}.wow_repo.get_closed_sessions", AsyncMock(return_value=sessions))
    mock_update = mocker.patch(f"{SERVICE}.team_repo.update_level", AsyncMock())

    with pytest.raises(InvalidTransitionError) as exc:
        await service.promote_level(make_async_db(), 1, today=TODAY)

    assert exc.value.code == "LEVEL_REQUIREMENTS_NOT_MET"
    assert exc.value.details == {"unmet": ["score"]}
    mock_update.assert_not_called()


@pytest.mark.asyncio
async def test_promote_level_ri_terminal(mocker):
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=make_team(wow_level=WowLevel.RI)))
    mocker.patch(f"{SERVICE}.wow_repo.get_closed_sessions", AsyncMock(return_value=_shu_ready_sessions()))
    mock_update = mocker.patch(f"{SERVICE}.team_repo.update_level", AsyncMock())

    with pytest.raises(InvalidTransitionError):
        await service.promote_level(make_async_db(), 1, today=TODAY)
    mock_update.assert_not_called()


# ── change_plan ───────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_change_plan_free_remet_a_shu(mocker):
    team = make_team(wow_level=WowLevel.HA)
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=team))
    mocker.patch(f"{SERVICE}.team_repo.update_plan", AsyncMock(return_value=team))
    mock_level = mocker.patch(
        f"{SERVICE}.team_repo.update_level",
        AsyncMock(side_effect=lambda db, t, level: _with_level(t, level)),
    )

    result = await service.change_plan(make_async_db(), 1, TeamPlan.FREE)

    assert mock_level.call_args.args[2] == WowLevel.SHU
    assert result["previous_level"] == WowLevel.HA
    assert result["level"] == WowLevel.SHU
    assert result["level_changed"] is True
    assert result["plan"] == TeamPlan.FREE


@pytest.mark.asyncio
async def test_change_plan_pro_niveau_inchange(mocker):
    team = make_team(wow_level=WowLevel.RI, plan=TeamPlan.FREE)
    mocker.patch(f"{SERVICE}.team_repo.get_team", AsyncMock(return_value=team))
    mock_plan = mocker.patch(f"{SERVICE}.team_repo.update_plan", AsyncMock(return_value=team))
    mock_level = mocker.patch(f"{SERVICE}.team_repo.update_level", AsyncMock())

    result = await service.change_plan(make_async_db(), 1, TeamPlan.PRO)

    mock_plan.assert_awaited_once()
    mock_level.assert_not_called()
    assert result["level"] == WowLevel.RI
    assert result["level_changed"] is False


# ── get_combined_signal ───────────────────────────────────────────────────────

def _metrics(week_value):
    return SimpleNamespace(week_vibe=SimpleNamespace(value=week_value))


@pytest.mark.asyncio
async def test_combined_signal_pondere(mocker):
    mocker.patch(f"{SERVICE}.vibe_service.compute_team_metrics", AsyncMock(return_value=_metrics(4.0)))
    mocker.patch(
        f"{SERVICE}.wow_repo.get_closed_sessions",
        AsyncMock(return_value=[
            make_closed_session(2, overall_score=2.5),
            make_closed_session(9, overall_score=None),
            make_closed_session(20, overall_score=1.5),
        ]),
    )

    payload = await service.get_combined_signal(make_async_db(), 1, today=TODAY)

    assert payload["wow_score"] == 2.0
    assert payload["vibe_score"] == 4.0
    assert payload["value"] == 3.2
    assert payload["source"] == SignalSource.COMBINED.value
    assert payload["needs_attention"] is False
    assert payload["team_id"] == 1


@pytest.mark.asyncio
async def test_combined_signal_sans_donnees(mocker):
    mocker.patch(f"{SERVICE}.vibe_service.compute_team_metrics", AsyncMock(return_value=_metrics(None)))
    mocker.patch(f"{SERVICE}.wow_repo.get_closed_sessions", AsyncMock(return_value=[]))

    payload = await service.get_combined_signal(make_async_db(), 1, today=TODAY)

    assert payload["value"] is None
    assert payload["source"] is None
    assert payload["needs_attention"] is False


@pytest.mark.asyncio
async def test_combined_signal_equipe_introuvable(mocker):
    mocker.patch(
        f"{SERVICE}.vibe_service.compute_team_metrics",
        AsyncMock(side_effect=NotFoundError("TEAM_NOT_FOUND")),
    )

    with pytest.raises(NotFoundError):
        await service.get_combined_signal(make_async_db(), 99, today=TODAY)
