# engine/vibe/metrics.py
"""
Calcul des métriques Vibe — ZÉRO accès DB.
Reçoit les agrégats journaliers d'une équipe, retourne un TeamMetrics.

Granularités :
- live : aujourd'hui
- day  : hier
- week : les 7 jours calendaires se terminant aujourd'hui (inclus)
- previous_week : les 7 jours précédents

Toutes les bornes sont des dates calendaires : le résultat ne dépend pas
de l'heure d'appel, seulement de `today`.
"""
import numpy as np
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence

from teamsignal.shared.enums import (
    Zone, Trend, Confidence, DayState, WeekState, MaturityLevel,
)


# --- SEUILS ---
MIN_CHECKINS = 3                  # en dessous : value=None, jamais un score calculé
MIN_WINDOW_DAYS = 14              # semaine + semaine précédente

ZONE_CRITICAL_BELOW  = 2.0
ZONE_ATTENTION_BELOW = 3.0
ZONE_STABLE_BELOW    = 4.0

TREND_THRESHOLD    = 0.2          # |delta| > 0.2 → rising / declining
MOMENTUM_THRESHOLD = 0.05         # pente en points par jour

CONFIDENCE_HIGH_RATE     = 0.6
CONFIDENCE_MODERATE_RATE = 0.3
CONFIDENCE_MIN_DAYS      = 3

DAY_EMERGING_RATE = 30            # en %
DAY_COMPLETE_RATE = 60

WEEK_COMPLETE_DAYS     = 5
WEEK_END_COMPLETE_DAYS = 3        # vendredi, samedi, dimanche
END_OF_WEEK_DAYS = (4, 5, 6)      # date.weekday()

CONSISTENCY_MIN_RATE = 0.3        # participation ≥ 30 % de l'équipe

# (niveau, jours minimum, consistance minimum en %), du plus exigeant au moins exigeant
MATURITY_THRESHOLDS = [
    (MaturityLevel.MATURE,      30, 70),
    (MaturityLevel.ESTABLISHED, 14, 50),
    (MaturityLevel.BUILDING,     7, 30),
]


# ── Types ────────────────────────────────────────────────────

@dataclass
class DailyAggregate:
    date: date
    average: float              # 1-5
    count: int
    participant_count: int = 0


@dataclass
class VibeMetric:
    value: Optional[float]      # None tant que MIN_CHECKINS n'est pas atteint
    zone: Optional[Zone]
    trend: Trend
    delta: float
    confidence: Confidence
    entry_count: int = 0

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "zone": self.zone.value if self.zone else None,
            "trend": self.trend.value,
            "delta": self.delta,
            "confidence": self.confidence.value,
            "entry_count": self.entry_count,
        }


@dataclass
class Momentum:
    direction: Trend
    velocity: float
    days_trending: int

    def to_dict(self) -> dict:
        return {"direction": self.direction.value, "velocity": self.velocity, "days_trending": self.days_trending}


@dataclass
class DataMaturity:
    level: MaturityLevel
    days_of_data: int
    consistency_rate: int       # %

    def to_dict(self) -> dict:
        return {"level": self.level.value, "days_of_data": self.days_of_data, "consistency_rate": self.consistency_rate}


@dataclass
class ParticipationState:
    today: int
    team_size: int
    rate: int                   # %
    trend: Trend

    def to_dict(self) -> dict:
        return {"today": self.today, "team_size": self.team_size, "rate": self.rate, "trend": self.trend.value}


@dataclass
class TeamMetrics:
    live_vibe: VibeMetric
    day_vibe: VibeMetric
    week_vibe: VibeMetric
    previous_week_vibe: VibeMetric
    momentum: Momentum
    participation: ParticipationState
    day_state: DayState
    week_state: WeekState
    maturity: DataMaturity
    has_enough_data: bool
    as_of: date
    window_days: int = MIN_WINDOW_DAYS

    def to_dict(self) -> dict:
        return {
            "live_vibe": self.live_vibe.to_dict(),
            "day_vibe": self.day_vibe.to_dict(),
            "week_vibe": self.week_vibe.to_dict(),
            "previous_week_vibe": self.previous_week_vibe.to_dict(),
            "momentum": self.momentum.to_dict(),
            "participation": self.participation.to_dict(),
            "day_state": self.day_state.value,
            "week_state": self.week_state.value,
            "maturity": self.maturity.to_dict(),
            "has_enough_data": self.has_enough_data,
            "as_of": self.as_of.isoformat(),
            "window_days": self.window_days,
        }


# ── Classifications élémentaires ─────────────────────────────

def calculate_zone(value: Optional[float]) -> Optional[Zone]:
    """Échelle commune Vibe / Way of Work : <2, [2,3), [3,4), ≥4."""
    if value is None:
        return None
    if value < ZONE_CRITICAL_BELOW:
        return Zone.CRITICAL
    if value < ZONE_ATTENTION_BELOW:
        return Zone.ATTENTION
    if value < ZONE_STABLE_BELOW:
        return Zone.STABLE
    return Zone.THRIVING


def calculate_trend(delta: float, threshold: float = TREND_THRESHOLD) -> Trend:
    if delta > threshold:
        return Trend.RISING
    if delta < -threshold:
        return Trend.DECLINING
    return Trend.STABLE


def has_minimum_data(entry_count: int) -> bool:
    return entry_count >= MIN_CHECKINS


def calculate_confidence(
    value: Optional[float],
    entry_count: int,
    distinct_days: int,
    team_size: int,
    window_days: int,
) -> Confidence:
    """
    Couverture moyenne quotidienne = entrées / (taille × jours distincts).
    HIGH exige en plus une répartition sur plusieurs jours (≥ 3, ou la
    longueur de la fenêtre si elle est plus courte).
    """
    if value is None:
        return Confidence.LOW
    if team_size <= 0:
        return Confidence.MODERATE

    coverage = entry_count / (team_size * max(distinct_days, 1))
    if coverage >= CONFIDENCE_HIGH_RATE and distinct_days >= min(CONFIDENCE_MIN_DAYS, window_days):
        return Confidence.HIGH
    if coverage >= CONFIDENCE_MODERATE_RATE:
        return Confidence.MODERATE
    return Confidence.LOW


def calculate_day_state(rate: int) -> DayState:
    if rate >= DAY_COMPLETE_RATE:
        return DayState.DAY_COMPLETE
    if rate >= DAY_EMERGING_RATE:
        return DayState.SIGNAL_EMERGING
    return DayState.NO_DATA


def calculate_week_state(unique_days: int, is_end_of_week: bool) -> WeekState:
    if unique_days == 0:
        return WeekState.NO_DATA
    if unique_days >= WEEK_COMPLETE_DAYS:
        return WeekState.WEEK_COMPLETE
    if is_end_of_week and unique_days >= WEEK_END_COMPLETE_DAYS:
        return WeekState.WEEK_COMPLETE
    return WeekState.SIGNAL_EMERGING


def calculate_data_maturity(days_of_data: int, consistency_rate: int) -> MaturityLevel:
    # Le volume seul ne suffit jamais : les deux seuils doivent tenir
    for level, min_days, min_rate in MATURITY_THRESHOLDS:
        if days_of_data >= min_days and consistency_rate >= min_rate:
            return level
    return MaturityLevel.NEW


# ── Construction d'une métrique ──────────────────────────────

def _weighted_mean(rows: Sequence[DailyAggregate]) -> Optional[float]:
    rows = [r for r in rows if r.count > 0]
    total = sum(r.count for r in rows)
    if total < MIN_CHECKINS:
        return None
    mean = np.average([r.average for r in rows], weights=[r.count for r in rows])
    return round(float(mean), 2)


def build_vibe_metric(
    current: Sequence[DailyAggregate],
    previous: Sequence[DailyAggregate],
    team_size: int,
    window_days: int = 1,
) -> VibeMetric:
    """
    value = moyenne des `average` pondérée par `count` (pas une moyenne de lignes).
    trend/delta : comparaison avec la fenêtre équivalente précédente.
    Pas de valeur précédente exploitable → STABLE, delta 0.
    """
    entry_count = sum(r.count for r in current)
    distinct_days = len({r.date for r in current if r.count > 0})

    value = _weighted_mean(current)
    previous_value = _weighted_mean(previous)

    if value is not None and previous_value is not None:
        delta = round(value - previous_value, 2)
    else:
        delta = 0.0

    return VibeMetric(
        value=value,
        zone=calculate_zone(value),
        trend=calculate_trend(delta),
        delta=delta,
        confidence=calculate_confidence(value, entry_count, distinct_days, team_size, window_days),
        entry_count=entry_count,
    )


# ── Momentum ─────────────────────────────────────────────────

def _sign(delta: float) -> Trend:
    return calculate_trend(round(delta, 2), threshold=0)


def calculate_momentum(rows: Sequence[DailyAggregate]) -> Momentum:
    """
    Direction = signe de la pente (moindres carrés) des moyennes journalières
    contre le décalage en jours — les trous sont respectés, pas compressés.

    days_trending : nombre de variations jour après jour consécutives (en
    partant du jour le plus récent) allant dans la direction courante.
    Remis à 0 par un changement de signe ou un jour manquant.
    """
    days = sorted((r for r in rows if r.count > 0), key=lambda r: r.date)
    if len(days) < 2:
        return Momentum(direction=Trend.STABLE, velocity=0.0, days_trending=0)

    origin = days[0].date
    x = np.array([(d.date - origin).days for d in days], dtype=float)
    y = np.array([d.average for d in days], dtype=float)
    slope = float(np.polyfit(x, y, 1)[0])

    direction = calculate_trend(slope, threshold=MOMENTUM_THRESHOLD)

    days_trending = 0
    for prev, curr in zip(reversed(days[:-1]), reversed(days[1:])):
        if (curr.date - prev.date).days != 1:
            break
        if _sign(curr.average - prev.average) != direction:
            break
        days_trending += 1

    return Momentum(direction=direction, velocity=round(abs(slope), 2), days_trending=days_trending)


# ── Agrégat équipe ───────────────────────────────────────────

def _between(rows: Sequence[DailyAggregate], start: date, end: date) -> List[DailyAggregate]:
    return [r for r in rows if start <= r.date <= end]


def compute_team_metrics(
    history: Sequence[DailyAggregate],
    team_size: int,
    today: date,
    window_days: int = MIN_WINDOW_DAYS,
) -> TeamMetrics:
    """
    Point d'entrée du calculateur Vibe.

    Args:
        history:     agrégats journaliers (une ligne par jour, ordre libre)
        team_size:   taille attendue, ou à défaut nombre de participants distincts
        today:       date de référence (UTC normalisée par l'appelant)
        window_days: profondeur de la fenêtre, jamais < 14
    """
    window_days = max(window_days, MIN_WINDOW_DAYS)
    yesterday = today - timedelta(days=1)
    week_start = today - timedelta(days=6)
    previous_start = week_start - timedelta(days=7)
    previous_end = week_start - timedelta(days=1)

    window = _between(history, today - timedelta(days=window_days - 1), today)

    today_rows = _between(window, today, today)
    yesterday_rows = _between(window, yesterday, yesterday)
    week_rows = _between(window, week_start, today)
    previous_rows = _between(window, previous_start, previous_end)

    live_vibe = build_vibe_metric(today_rows, yesterday_rows, team_size, window_days=1)
    day_vibe = build_vibe_metric(yesterday_rows, [], team_size, window_days=1)
    week_vibe = build_vibe_metric(week_rows, previous_rows, team_size, window_days=7)
    previous_week_vibe = build_vibe_metric(previous_rows, [], team_size, window_days=7)

    # --- Participation du jour ---
    today_entries = sum(r.count for r in today_rows)
    yesterday_entries = sum(r.count for r in yesterday_rows)
    # Taille attendue parfois sous-estimée : le taux reste borné à 100
    rate = min(100, round(today_entries / team_size * 100)) if team_size > 0 else 0
    participation = ParticipationState(
        today=today_entries,
        team_size=team_size,
        rate=rate,
        trend=calculate_trend(today_entries - yesterday_entries, threshold=0),
    )

    # --- États jour / semaine ---
    unique_days_this_week = len({r.date for r in week_rows if r.count > 0})
    week_state = calculate_week_state(unique_days_this_week, today.weekday() in END_OF_WEEK_DAYS)

    # --- Maturité ---
    days_with_data = [r for r in window if r.count > 0]
    consistent_days = [
        r for r in days_with_data
        if team_size > 0 and r.count / team_size >= CONSISTENCY_MIN_RATE
    ]
    consistency_rate = round(len(consistent_days) / len(days_with_data) * 100) if days_with_data else 0
    maturity = DataMaturity(
        level=calculate_data_maturity(len(days_with_data), consistency_rate),
        days_of_data=len(days_with_data),
        consistency_rate=consistency_rate,
    )

    return TeamMetrics(
        live_vibe=live_vibe,
        day_vibe=day_vibe,
        week_vibe=week_vibe,
        previous_week_vibe=previous_week_vibe,
        momentum=calculate_momentum(window),
        participation=participation,
        day_state=calculate_day_state(rate),
        week_state=week_state,
        maturity=maturity,
        has_enough_data=has_minimum_data(week_vibe.entry_count),
        as_of=today,
        window_days=window_days,
    )
