# engine/wow/history.py
"""
Statistiques Way of Work d'une équipe — ZÉRO accès DB.

Les scores viennent des sessions fermées (overall_score figé à la clôture) :
rien n'est re-synthétisé ici.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence

import numpy as np

from teamsignal.shared.enums import SessionStatus, WowAngle


# --- SEUILS ---
TREND_GAP = 0.3         # moyenne récente vs ancienne
DRIVER_DEVIATION = 0.2  # écart d'un angle à la moyenne
MAX_DRIVERS = 2
RECENT_SCORES = 3


@dataclass
class SessionSummary:
    id: int
    angle: WowAngle
    status: SessionStatus
    created_at: datetime
    overall_score: Optional[float] = None
    response_count: int = 0


@dataclass
class AngleStats:
    count: int = 0
    avg_score: Optional[float] = None


@dataclass
class TeamWowStats:
    total_sessions: int = 0
    active_sessions: int = 0
    closed_sessions: int = 0
    total_responses: int = 0
    average_score: Optional[float] = None
    sessions_by_angle: Dict[WowAngle, AngleStats] = field(default_factory=dict)
    trend: Optional[str] = None             # up | down | stable, None sous 2 sessions notées
    trend_drivers: List[WowAngle] = field(default_factory=list)
    recent_scores: List[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_sessions": self.total_sessions,
            "active_sessions": self.active_sessions,
            "closed_sessions": self.closed_sessions,
            "total_responses": self.total_responses,
            "average_score": self.average_score,
            "sessions_by_angle": {
                angle.value: {"count": s.count, "avg_score": s.avg_score}
                for angle, s in self.sessions_by_angle.items()
            },
            "trend": self.trend,
            "trend_drivers": [a.value for a in self.trend_drivers],
            "recent_scores": self.recent_scores,
        }


def _mean(values: Sequence[float]) -> Optional[float]:
    return round(float(np.mean(values)), 2) if values else None


def compute_team_stats(sessions: Sequence[SessionSummary]) -> TeamWowStats:
    if not sessions:
        return TeamWowStats()

    recent_first = sorted(sessions, key=lambda s: (s.created_at, s.id), reverse=True)
    scored = [
        s for s in recent_first
        if s.status == SessionStatus.CLOSED and s.overall_score is not None
    ]
    average = _mean([s.overall_score for s in scored])

    by_angle: Dict[WowAngle, AngleStats] = {}
    for s in recent_first:
        by_angle.setdefault(s.angle, AngleStats()).count += 1
    for angle, stats in by_angle.items():
        stats.avg_score = _mean([s.overall_score for s in scored if s.angle == angle])

    trend, drivers = None, []
    if len(scored) >= 2:
        half = (len(scored) + 1) // 2
        diff = np.mean([s.overall_score for s in scored[:half]]) - np.mean([s.overall_score for s in scored[half:]])
        if diff > TREND_GAP:
            trend = "up"
        elif diff < -TREND_GAP:
            trend = "down"
        else:
            trend = "stable"

        deviations = sorted(
            ((angle, stats.avg_score - average) for angle, stats in by_angle.items() if stats.avg_score is not None),
            key=lambda item: (-abs(item[1]), item[0].value),
        )
        drivers = [angle for angle, dev in deviations[:MAX_DRIVERS] if abs(dev) > DRIVER_DEVIATION]

    return TeamWowStats(
        total_sessions=len(recent_first),
        active_sessions=sum(1 for s in recent_first if s.status == SessionStatus.ACTIVE),
        closed_sessions=sum(1 for s in recent_first if s.status == SessionStatus.CLOSED),
        total_responses=sum(s.response_count for s in recent_first),
        average_score=average,
        sessions_by_angle=by_angle,
        trend=trend,
        trend_drivers=drivers,
        recent_scores=[
            {"session_id": s.id, "angle": s.angle.value, "score": s.overall_score}
            for s in scored[:RECENT_SCORES]
        ],
    )
