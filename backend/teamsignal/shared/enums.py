# teamsignal/shared/enums.py
"""
Toutes les énumérations du projet Team Signal.

Source unique de vérité pour les statuts, niveaux et catégories.
Importé par les modèles, schemas, services et engine.
"""

from enum import Enum


# ── Santé d'équipe (échelle commune Vibe + Way of Work) ──────

class Zone(str, Enum):
    CRITICAL  = "critical"    # < 2
    ATTENTION = "attention"   # [2, 3)
    STABLE    = "stable"      # [3, 4)
    THRIVING  = "thriving"    # >= 4


class Trend(str, Enum):
    RISING    = "rising"
    DECLINING = "declining"
    STABLE    = "stable"


class Confidence(str, Enum):
    LOW      = "low"
    MODERATE = "moderate"
    HIGH     = "high"


class DayState(str, Enum):
    NO_DATA         = "no_data"
    SIGNAL_EMERGING = "signal_emerging"
    DAY_COMPLETE    = "day_complete"


class WeekState(str, Enum):
    NO_DATA         = "no_data"
    SIGNAL_EMERGING = "signal_emerging"
    WEEK_COMPLETE   = "week_complete"


class MaturityLevel(str, Enum):
    NEW         = "new"
    BUILDING    = "building"
    ESTABLISHED = "established"
    MATURE      = "mature"


# ── Way of Work ──────────────────────────────────────────────

class WowAngle(str, Enum):
    SCRUM                = "scrum"
    FLOW                 = "flow"
    OWNERSHIP            = "ownership"
    COLLABORATION        = "collaboration"
    TECHNICAL_EXCELLENCE = "technical_excellence"
    REFINEMENT           = "refinement"
    PLANNING             = "planning"
    RETRO                = "retro"
    DEMO                 = "demo"
    OBEYA                = "obeya"
    DEPENDENCIES         = "dependencies"
    PSYCHOLOGICAL_SAFETY = "psychological_safety"
    DEVOPS               = "devops"
    STAKEHOLDER          = "stakeholder"
    LEADERSHIP           = "leadership"


class WowLevel(str, Enum):
    SHU = "shu"   # 守: apprendre les bases
    HA  = "ha"    # 破: adapter intentionnellement
    RI  = "ri"    # 離: maîtrise (terminal)


class SessionStatus(str, Enum):
    DRAFT  = "draft"
    ACTIVE = "active"
    CLOSED = "closed"


class RiskState(str, Enum):
    NONE              = "none"
    SLIPPING          = "slipping"
    LOW_PARTICIPATION = "low_participation"
    STALE             = "stale"


class TeamPlan(str, Enum):
    FREE = "free"
    PRO  = "pro"


# ── Signal combiné ───────────────────────────────────────────

class SignalSource(str, Enum):
    COMBINED = "combined"
    VIBE     = "vibe"
    WOW      = "wow"


# ── Insights Vibe ────────────────────────────────────────────

class InsightType(str, Enum):
    PARTICIPATION = "participation"
    TREND         = "trend"
    PATTERN       = "pattern"
    MILESTONE     = "milestone"


class InsightSeverity(str, Enum):
    INFO      = "info"
    ATTENTION = "attention"
    WARNING   = "warning"
