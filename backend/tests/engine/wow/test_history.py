# tests/engine/wow/test_history.py
"""
Tests unitaires pour engine.wow.history.compute_team_stats
"""
import pytest
from datetime import datetime, timezone

from teamsignal.engine.wow.history import SessionSummary, compute_team_stats
from teamsignal.shared.enums import SessionStatus, WowAngle

pytestmark = pytest.mark.engine


def summary(id, day, angle=WowAngle.SCRUM, score=3.5, status=SessionStatus.CLOSED, responses=5):
    return SessionSummary(
        id=id,
        angle=angle,
        status=status,
        created_at=datetime(2026, 3, day, 9, 0, tzinfo=timezone.utc),
        overall_score=score,
        response_count=responses,
    )


class TestComputeTeamStats:
    def test_sans_session(self):
        stats = compute_team_stats([])
        assert stats.total_sessions == 0
        assert stats.average_score is None
        assert stats.trend is None
        assert stats.to_dict()["sessions_by_angle"] == {}

    def test_compteurs(self):
        sessions = [
            summary(1, 1, score=3.0),
            summary(2, 2, WowAngle.FLOW, score=4.0),
            summary(3, 3, status=SessionStatus.ACTIVE, score=None, responses=2),
        ]
        stats = compute_team_stats(sessions)
        assert stats.total_sessions == 3
        assert stats.active_sessions == 1
        assert stats.closed_sessions == 2
        assert stats.total_responses == 12
        assert stats.average_score == 3.5
        assert stats.sessions_by_angle[WowAngle.SCRUM].count == 2
        assert stats.sessions_by_angle[WowAngle.SCRUM].avg_score == 3.0

    def test_tendance_hausse(self):
        sessions = [
            summary(1, 1, score=2.8),
            summary(2, 2, score=3.0),
            summary(3, 3, score=3.8),
            summary(4, 4, score=4.0),
        ]
        assert compute_team_stats(sessions).trend == "up"

    def test_tendance_baisse(self):
        sessions = [summary(1, 1, score=4.0), summary(2, 2, score=3.0)]
        assert compute_team_stats(sessions).trend == "down"

    def test_tendance_stable(self):
        sessions = [summary(1, 1, score=3.5), summary(2, 2, score=3.6), summary(3, 3, score=3.4)]
        assert compute_team_stats(sessions).trend == "stable"

    def test_une_seule_session_notee_pas_de_tendance(self):
        sessions = [summary(1, 1, score=3.5), summary(2, 2, status=SessionStatus.ACTIVE, score=None)]
        stats = compute_team_stats(sessions)
        assert stats.trend is None
        assert stats.trend_drivers == []

    def test_angles_moteurs(self):
        sessions = [
            summary(1, 1, WowAngle.FLOW, score=3.5),
            summary(2, 2, WowAngle.RETRO, score=2.5),
            summary(3, 3, WowAngle.SCRUM, score=4.5),
        ]
        stats = compute_team_stats(sessions)
        assert stats.average_score == 3.5
        assert stats.trend_drivers == [WowAngle.RETRO, WowAngle.SCRUM]

    def test_scores_recents(self):
        sessions = [summary(i, i, score=3.0 + i / 10) for i in range(1, 6)]
        recent = compute_team_stats(sessions).recent_scores
        assert [r["session_id"] for r in recent] == [5, 4, 3]
        assert recent[0] == {"session_id": 5, "angle": "scrum", "score": 3.5}
