# tests/conftest.py
"""
Fixtures et factories partagées sur l'ensemble de la suite de tests.

Trois couches :
    1. Engine  — fonctions pures, aucun mock nécessaire (factories d'agrégats / réponses)
    2. Service — mocks AsyncSession + repos via pytest-mock
    3. Router  — httpx.AsyncClient + dependency_overrides FastAPI
"""
import pytest
from types import SimpleNamespace
from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from teamsignal.main import app
from teamsignal.core.database import get_db
from teamsignal.content.statements import get_statements
from teamsignal.engine.vibe.metrics import DailyAggregate
from teamsignal.shared.enums import SessionStatus, TeamPlan, WowAngle, WowLevel


# Mercredi : ni début ni fin de semaine
TODAY = date(2026, 3, 11)


# ── Agrégats Vibe (input principal du calculateur) ────────────────────────────

def make_day(days_ago: int, average: float = 3.5, count: int = 5, today: date = TODAY) -> DailyAggregate:
    return DailyAggregate(date=today - timedelta(days=days_ago), average=average, count=count)


def make_history(averages, count: int = 5, today: date = TODAY):
    """averages[0] = aujourd'hui, averages[1] = hier, etc. None = jour sans données."""
    return [
        make_day(i, average=avg, count=count, today=today)
        for i, avg in enumerate(averages)
        if avg is not None
    ]


# ── Réponses Way of Work ──────────────────────────────────────────────────────

def statement_ids(angle: WowAngle = WowAngle.SCRUM, level: WowLevel = WowLevel.SHU):
    return [s.id for s in get_statements(angle, level)]


def make_answers(scores, angle: WowAngle = WowAngle.SCRUM, level: WowLevel = WowLevel.SHU) -> dict:
    """scores[i] → i-ème énoncé (angle, niveau)."""
    return dict(zip(statement_ids(angle, level), scores))


# ── Factories de modèles ORM (SimpleNamespace, sans ORM) ──────────────

def make_team(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "name": "Team Alpha",
        "expected_team_size": 10,
        "wow_level": WowLevel.SHU,
        "plan": TeamPlan.PRO,
        "level_updated_at": None,
        "created_at": datetime(2026, 1, 1, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_session(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "team_id": 1,
        "title": None,
        "angle": WowAngle.SCRUM,
        "level": WowLevel.SHU,
        "status": SessionStatus.ACTIVE,
        "focus_area": None,
        "experiment": None,
        "experiment_owner": None,
        "followup_date": None,
        "follow_up_recorded": False,
        "overall_score": None,
        "participation_rate": None,
        "response_count": 0,
        "created_at": datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc),
        "closed_at": None,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_closed_session(days_ago: int, today: date = TODAY, **kwargs) -> SimpleNamespace:
    closed_at = datetime.combine(today - timedelta(days=days_ago), datetime.min.time(), tzinfo=timezone.utc)
    defaults = {
        "status": SessionStatus.CLOSED,
        "closed_at": closed_at,
        "created_at": closed_at - timedelta(days=1),
        "overall_score": 3.5,
        "participation_rate": 0.8,
    }
    defaults.update(kwargs)
    return make_session(**defaults)


def make_response(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "session_id": 1,
        "device_id": "device-abc",
        "answers": make_answers([4, 4, 4, 4, 4]),
        "created_at": datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_checkin(**kwargs) -> SimpleNamespace:
    defaults = {
        "id": 1,
        "team_id": 1,
        "device_id": "device-abc",
        "score": 4,
        "entry_date": TODAY,
        "created_at": datetime(2026, 3, 11, 8, 0, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


# ── DB mock factory ───────────────────────────────────────────────────────────

def make_async_db() -> AsyncMock:
    """
    AsyncMock simulant une AsyncSession SQLAlchemy.
    Fournit une side_effect sur refresh() pour simuler le SET d'ID par le DB.
    """
    db = AsyncMock(spec=AsyncSession)

    db.add = MagicMock()

    async def refresh_side_effect(obj):
        if not getattr(obj, "id", None):
            try:
                obj.id = 1
            except (AttributeError, TypeError):
                pass

    db.refresh = AsyncMock(side_effect=refresh_side_effect)
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.close = AsyncMock()

    return db


# ── Fixtures HTTP (httpx.AsyncClient + dependency_overrides) ─────────────────

@pytest.fixture
async def client():
    """Client sans auth — les routers sont appelés avec un service mocké."""
    mock_db = AsyncMock(spec=AsyncSession)
    app.dependency_overrides[get_db] = lambda: mock_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
