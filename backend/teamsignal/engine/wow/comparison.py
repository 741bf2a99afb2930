# engine/wow/comparison.py
"""
Comparaison de deux sessions du même angle — ZÉRO accès DB.
Énoncé par énoncé : variation > 0.3 → improved, < -0.3 → declined.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from teamsignal.engine.wow.history import SessionSummary
from teamsignal.engine.wow.synthesis import SynthesisResult
from teamsignal.shared.enums import SessionStatus, WowAngle


# --- SEUILS ---
CHANGE_THRESHOLD = 0.3
MIN_COMPARABLE = 2


@dataclass
class StatementChange:
    id: str
    text: str
    first_score: float
    second_score: float
    change: float
    status: str             # improved | declined | unchanged

    def to_dict(self) -> dict:
        return dict(self.__dict__)


@dataclass
class SessionComparison:
    angle: WowAngle
    first_overall: float
    second_overall: float
    statements: List[StatementChange] = field(default_factory=list)

    @property
    def overall_change(self) -> float:
        return round(self.second_overall - self.first_overall, 2)

    def count(self, status: str) -> int:
        return sum(1 for s in self.statements if s.status == status)

    def to_dict(self) -> dict:
        return {
            "angle": self.angle.value,
            "first_overall": self.first_overall,
            "second_overall": self.second_overall,
            "statements": [s.to_dict() for s in self.statements],
            "summary": {
                "improved_count": self.count("improved"),
                "declined_count": self.count("declined"),
                "unchanged_count": self.count("unchanged"),
                "overall_change": self.overall_change,
            },
        }


def _status(change: float) -> str:
    if change > CHANGE_THRESHOLD:
        return "improved"
    if change < -CHANGE_THRESHOLD:
        return "declined"
    return "unchanged"


def compare_syntheses(angle: WowAngle, first: SynthesisResult, second: SynthesisResult) -> SessionComparison:
    """
    Les deux synthèses doivent être notées (≥ 3 réponses) : l'appelant vérifie.
    Seuls les énoncés présents des deux côtés sont comparés.
    """
    second_by_id = {s.statement.id: s for s in second.all_scores}
    changes = []
    for score in first.all_scores:
        other = second_by_id.get(score.statement.id)
        if other is None:
            continue
        change = round(other.score - score.score, 2)
        changes.append(StatementChange(
            id=score.statement.id,
            text=score.statement.text,
            first_score=score.score,
            second_score=other.score,
            change=change,
            status=_status(change),
        ))

    # Plus forte amélioration en tête, id pour départager
    changes.sort(key=lambda c: (-c.change, c.id))

    return SessionComparison(
        angle=angle,
        first_overall=first.overall_score,
        second_overall=second.overall_score,
        statements=changes,
    )


def comparable_sessions(sessions: Sequence[SessionSummary]) -> Dict[WowAngle, List[SessionSummary]]:
    """Sessions fermées et notées, groupées par angle (angles avec ≥ 2 sessions)."""
    by_angle: Dict[WowAngle, List[SessionSummary]] = {}
    for s in sorted(sessions, key=lambda s: (s.created_at, s.id), reverse=True):
        if s.status != SessionStatus.CLOSED or s.overall_score is None:
            continue
        by_angle.setdefault(s.angle, []).append(s)
    return {angle: items for angle, items in by_angle.items() if len(items) >= MIN_COMPARABLE}
