# engine/vibe/insights.py
"""
Insights Vibe — ZÉRO accès DB.
Règles déterministes sur un TeamMetrics → liste de VibeInsight.

Un insight est une clé + des paramètres : le rendu et la traduction
restent côté client. Maximum 3 insights, dans l'ordre de priorité
participation → tendance → motif → jalon.

Anti fausse alerte :
- tendances : has_enough_data ET confiance semaine ≠ low
- motifs    : has_enough_data ET ≥ 5 entrées sur la semaine
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from teamsignal.engine.vibe.metrics import TeamMetrics
from teamsignal.shared.enums import Confidence, InsightSeverity, InsightType, Trend, Zone


# --- SEUILS ---
MAX_INSIGHTS = 3
TRENDING_DAYS_MIN = 3
WEEK_DELTA_MIN = 0.5
PATTERN_MIN_ENTRIES = 5
PARTICIPATION_IMPROVING_RATE = 50
STREAK_MILESTONES = (30, 14, 7)


@dataclass
class VibeInsight:
    key: str
    type: InsightType
    severity: InsightSeverity
    params: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "type": self.type.value,
            "severity": self.severity.value,
            "params": self.params,
        }


def generate_insights(metrics: TeamMetrics) -> List[VibeInsight]:
    insights: List[VibeInsight] = []
    insights += _participation_insights(metrics)

    if metrics.has_enough_data and metrics.week_vibe.confidence != Confidence.LOW:
        insights += _trend_insights(metrics)

    if metrics.has_enough_data and metrics.week_vibe.entry_count >= PATTERN_MIN_ENTRIES:
        insights += _pattern_insights(metrics)

    insights += _milestone_insights(metrics)
    return insights[:MAX_INSIGHTS]


# ── Participation ────────────────────────────────────────────

def _participation_insights(metrics: TeamMetrics) -> List[VibeInsight]:
    out = []
    participation = metrics.participation

    if metrics.live_vibe.confidence == Confidence.LOW and participation.team_size > 0:
        out.append(VibeInsight(
            "low_participation", InsightType.PARTICIPATION, InsightSeverity.INFO,
            {"today": participation.today, "team_size": participation.team_size},
        ))

    if (
        participation.trend == Trend.RISING
        and participation.rate >= PARTICIPATION_IMPROVING_RATE
        and metrics.has_enough_data
    ):
        out.append(VibeInsight("participation_improving", InsightType.PARTICIPATION, InsightSeverity.INFO))
    return out


# ── Tendances ────────────────────────────────────────────────

def _trend_insights(metrics: TeamMetrics) -> List[VibeInsight]:
    out = []
    momentum = metrics.momentum

    if momentum.days_trending >= TRENDING_DAYS_MIN:
        if momentum.direction == Trend.DECLINING:
            out.append(VibeInsight(
                "declining_trend", InsightType.TREND, InsightSeverity.ATTENTION,
                {"days": momentum.days_trending},
            ))
        elif momentum.direction == Trend.RISING:
            out.append(VibeInsight(
                "rising_trend", InsightType.TREND, InsightSeverity.INFO,
                {"days": momentum.days_trending},
            ))

    week, previous = metrics.week_vibe.value, metrics.previous_week_vibe.value
    if week is not None and previous is not None:
        week_delta = round(week - previous, 1)
        if week_delta <= -WEEK_DELTA_MIN:
            out.append(VibeInsight(
                "week_drop", InsightType.TREND, InsightSeverity.ATTENTION,
                {"delta": abs(week_delta)},
            ))
        elif week_delta >= WEEK_DELTA_MIN:
            out.append(VibeInsight(
                "week_improvement", InsightType.TREND, InsightSeverity.INFO,
                {"delta": week_delta},
            ))
    return out


# ── Motifs (zone de la semaine) ──────────────────────────────

def _pattern_insights(metrics: TeamMetrics) -> List[VibeInsight]:
    zone = metrics.week_vibe.zone
    direction = metrics.momentum.direction

    if zone == Zone.CRITICAL:
        return [VibeInsight("under_pressure", InsightType.PATTERN, InsightSeverity.WARNING)]
    if zone == Zone.ATTENTION:
        return [VibeInsight("mixed_signals", InsightType.PATTERN, InsightSeverity.INFO)]
    if zone == Zone.STABLE and direction == Trend.STABLE:
        return [VibeInsight("consistently_stable", InsightType.PATTERN, InsightSeverity.INFO)]
    if zone == Zone.THRIVING and direction != Trend.DECLINING:
        return [VibeInsight("high_confidence", InsightType.PATTERN, InsightSeverity.INFO)]
    return []


# ── Jalons ───────────────────────────────────────────────────

def _milestone_insights(metrics: TeamMetrics) -> List[VibeInsight]:
    momentum = metrics.momentum
    if momentum.direction == Trend.DECLINING:
        return []

    for milestone in STREAK_MILESTONES:
        if momentum.days_trending >= milestone:
            # Affiché le jour du jalon et le lendemain seulement
            if momentum.days_trending in (milestone, milestone + 1):
                return [VibeInsight(
                    "streak_milestone", InsightType.MILESTONE, InsightSeverity.INFO,
                    {"days": milestone},
                )]
            return []
    return []
