# engine/wow/progression.py
"""
Progression Shu → Ha → Ri — ZÉRO accès DB.
Prédicat pur sur l'historique des sessions fermées d'une équipe.

┌─────────────────────────────────────────────────────────────┐
│  shu ──(toutes les exigences Ha)──▶ ha ──(exigences Ri)──▶ ri │
│   ▲                                                         │
│   └──────── plan → free (reset inconditionnel) ─────────────┘
└─────────────────────────────────────────────────────────────┘

La transition est un PULL : l'évaluateur dit si c'est possible,
l'appelant écrit le niveau. Le risque (LevelRisk) est un avertissement
et ne modifie jamais le niveau.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence

import numpy as np

from teamsignal.shared.enums import RiskState, TeamPlan, WowAngle, WowLevel


@dataclass
class SessionRecord:
    """Session fermée, telle que lue par l'évaluateur."""
    angle: WowAngle
    closed_on: date
    overall_score: Optional[float] = None
    participation_rate: Optional[float] = None     # 0-1
    follow_up_recorded: bool = False


@dataclass
class Requirement:
    key: str
    label: str
    stat: str           # attribut de ProgressStats
    threshold: float


# --- SEUILS ---
LEVEL_REQUIREMENTS: Dict[WowLevel, List[Requirement]] = {
    WowLevel.SHU: [
        Requirement("sessions",      "3 sessions in 30 days",           "sessions_30d",         3),
        Requirement("diversity",     "5 sessions with different angles", "unique_angles",        5),
        Requirement("score",         "Avg score ≥ 3.2",                  "last_2_avg_score",     3.2),
        Requirement("participation", "Participation ≥ 60%",              "last_2_participation", 0.60),
    ],
    WowLevel.HA: [
        Requirement("total_sessions", "6 total sessions",                 "sessions_total",       6),
        Requirement("diversity",      "7 sessions with different angles", "unique_angles",        7),
        Requirement("followups",      "4 sessions with follow-up",        "followups_count",      4),
        Requirement("recency",        "3 sessions in 45 days",            "sessions_45d",         3),
        Requirement("score",          "Avg score ≥ 3.5",                  "last_3_avg_score",     3.5),
        Requirement("participation",  "Participation ≥ 70%",              "last_3_participation", 0.70),
    ],
    WowLevel.RI: [],    # terminal
}

# Risque : (fenêtre de récence en jours, stat score, seuil, stat participation, seuil)
RISK_RULES = {
    WowLevel.HA: (30, "last_2_avg_score", 3.2, "last_2_participation", 0.60),
    WowLevel.RI: (45, "last_3_avg_score", 3.5, "last_3_participation", 0.70),
}

NEXT_LEVEL = {WowLevel.SHU: WowLevel.HA, WowLevel.HA: WowLevel.RI, WowLevel.RI: None}


# ── Résultats ────────────────────────────────────────────────

@dataclass
class ProgressStats:
    sessions_30d: int
    sessions_45d: int
    sessions_total: int
    followups_count: int
    unique_angles: int
    last_2_avg_score: Optional[float]
    last_3_avg_score: Optional[float]
    last_2_participation: Optional[float]
    last_3_participation: Optional[float]
    days_since_last_session: Optional[int]

    def to_dict(self) -> dict:
        return dict(self.__dict__)


@dataclass
class RequirementStatus:
    key: str
    label: str
    required: float
    current: Optional[float]
    met: bool

    def to_dict(self) -> dict:
        return {"key": self.key, "label": self.label, "required": self.required,
                "current": self.current, "met": self.met}


@dataclass
class LevelRisk:
    state: RiskState = RiskState.NONE
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        return {"state": self.state.value, "reason": self.reason}


@dataclass
class LevelProgress:
    level: WowLevel
    next_level: Optional[WowLevel]
    requirements: List[RequirementStatus]
    can_unlock: bool
    risk: LevelRisk
    stats: ProgressStats
    unlocked_levels: List[WowLevel] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "next_level": self.next_level.value if self.next_level else None,
            "requirements": [r.to_dict() for r in self.requirements],
            "can_unlock": self.can_unlock,
            "risk": self.risk.to_dict(),
            "stats": self.stats.to_dict(),
            "unlocked_levels": [lvl.value for lvl in self.unlocked_levels],
        }


# ── Statistiques ─────────────────────────────────────────────

def _rolling_mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return round(float(np.mean(values)), 2)


def compute_progress_stats(sessions: Sequence[SessionRecord], today: date) -> ProgressStats:
    """
    Fenêtre "N jours" = les N jours calendaires se terminant aujourd'hui.
    Moyennes glissantes = N dernières sessions renseignées, arrondies à 2 décimales.
    """
    recent_first = sorted(sessions, key=lambda s: s.closed_on, reverse=True)
    ages = [(today - s.closed_on).days for s in recent_first]

    scores = [s.overall_score for s in recent_first if s.overall_score is not None]
    participation = [s.participation_rate for s in recent_first if s.participation_rate is not None]

    return ProgressStats(
        sessions_30d=sum(1 for a in ages if 0 <= a < 30),
        sessions_45d=sum(1 for a in ages if 0 <= a < 45),
        sessions_total=len(recent_first),
        followups_count=sum(1 for s in recent_first if s.follow_up_recorded),
        unique_angles=len({s.angle for s in recent_first}),
        last_2_avg_score=_rolling_mean(scores[:2]),
        last_3_avg_score=_rolling_mean(scores[:3]),
        last_2_participation=_rolling_mean(participation[:2]),
        last_3_participation=_rolling_mean(participation[:3]),
        days_since_last_session=ages[0] if ages else None,
    )


# ── Exigences & risque ───────────────────────────────────────

def evaluate_requirements(level: WowLevel, stats: ProgressStats) -> List[RequirementStatus]:
    rows = []
    for req in LEVEL_REQUIREMENTS[level]:
        current = getattr(stats, req.stat)
        rows.append(RequirementStatus(
            key=req.key,
            label=req.label,
            required=req.threshold,
            current=current,
            met=current is not None and current >= req.threshold,
        ))
    return rows


def evaluate_risk(level: WowLevel, stats: ProgressStats) -> LevelRisk:
    """Priorité : stale > slipping > low_participation. Shu n'a rien à perdre."""
    if level not in RISK_RULES:
        return LevelRisk()

    window, score_stat, score_min, part_stat, part_min = RISK_RULES[level]

    if stats.days_since_last_session is None or stats.days_since_last_session >= window:
        return LevelRisk(RiskState.STALE, f"no_session_in_{window}_days")

    score = getattr(stats, score_stat)
    if score is not None and score < score_min:
        return LevelRisk(RiskState.SLIPPING, "score_below_level_threshold")

    participation = getattr(stats, part_stat)
    if participation is not None and participation < part_min:
        return LevelRisk(RiskState.LOW_PARTICIPATION, "participation_below_level_threshold")

    return LevelRisk()


def unlocked_levels(level: WowLevel) -> List[WowLevel]:
    order = list(WowLevel)
    return order[: order.index(level) + 1]


def evaluate_level_progress(
    level: WowLevel,
    sessions: Sequence[SessionRecord],
    today: date,
) -> LevelProgress:
    """
    Args:
        level:    niveau actuel (champ wow_level de l'équipe)
        sessions: sessions FERMÉES de l'équipe
        today:    date de référence
    """
    stats = compute_progress_stats(sessions, today)
    requirements = evaluate_requirements(level, stats)
    following = next_level(level)

    return LevelProgress(
        level=level,
        next_level=following,
        requirements=requirements,
        can_unlock=following is not None and all(r.met for r in requirements),
        risk=evaluate_risk(level, stats),
        stats=stats,
        unlocked_levels=unlocked_levels(level),
    )


# ── Transitions ──────────────────────────────────────────────

def next_level(level: WowLevel) -> Optional[WowLevel]:
    return NEXT_LEVEL[level]


def reset_level_for_plan(level: WowLevel, plan: TeamPlan) -> WowLevel:
    """Passage en free → ha/ri redescendent à shu. Aucun autre cas ne touche le niveau."""
    if plan == TeamPlan.FREE and level in (WowLevel.HA, WowLevel.RI):
        return WowLevel.SHU
    return level
