# engine/wow/synthesis.py
"""
Synthèse d'une session Way of Work — ZÉRO accès DB.
Consomme l'agrégation, retourne un SynthesisResult.

Déterministe et idempotente : mêmes réponses → même résultat, au bit près.
Aucune génération de texte : l'expérience vient de la table (angle, zone).

Classement : score décroissant, puis variance croissante (le consensus
gagne l'égalité), puis id d'énoncé.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

import numpy as np

from teamsignal.content.experiments import get_experiment, get_focus_area
from teamsignal.content.statements import Statement
from teamsignal.engine.vibe.metrics import calculate_zone
from teamsignal.engine.wow.aggregation import StatementScore, aggregate_responses


# --- SEUILS ---
DISAGREEMENT_VARIANCE = 1.0     # variance > 1.0 → désaccord marqué
FOCUS_CLUSTER_GAP = 0.3         # énoncés à ≤ 0.3 du plus bas → même cluster
MAX_HIGHLIGHTS = 2

CAVEAT_HIGH_DISAGREEMENT = "high_disagreement"


@dataclass
class SynthesisResult:
    strengths: List[StatementScore]
    tensions: List[StatementScore]
    all_scores: List[StatementScore]
    overall_score: Optional[float]
    disagreement_count: int
    focus_area: Optional[str]
    suggested_experiment: Optional[str]
    response_count: int
    focus_cluster: List[str] = field(default_factory=list)
    focus_consensus: bool = False
    caveat: Optional[str] = None
    dropped_answers: int = 0

    @property
    def is_scored(self) -> bool:
        return self.overall_score is not None

    def to_dict(self) -> dict:
        return {
            "strengths": [s.to_dict() for s in self.strengths],
            "tensions": [s.to_dict() for s in self.tensions],
            "all_scores": [s.to_dict() for s in self.all_scores],
            "overall_score": self.overall_score,
            "disagreement_count": self.disagreement_count,
            "focus_area": self.focus_area,
            "focus_cluster": list(self.focus_cluster),
            "focus_consensus": self.focus_consensus,
            "suggested_experiment": self.suggested_experiment,
            "caveat": self.caveat,
            "response_count": self.response_count,
            "dropped_answers": self.dropped_answers,
            "is_scored": self.is_scored,
        }


def rank_scores(scores: Sequence[StatementScore]) -> List[StatementScore]:
    return sorted(scores, key=lambda s: (-s.score, s.variance, s.statement.id))


def select_highlights(ranked: Sequence[StatementScore]):
    """
    strengths = tête du classement, tensions = queue (la plus basse en premier).
    Jamais de chevauchement : avec 3 énoncés → 2 forces + 1 tension.
    """
    n = len(ranked)
    n_strengths = min(MAX_HIGHLIGHTS, (n + 1) // 2)
    strengths = list(ranked[:n_strengths])
    n_tensions = min(MAX_HIGHLIGHTS, n - n_strengths)
    tensions = list(reversed(ranked[n_strengths:]))[:n_tensions]
    return strengths, tensions


def focus_cluster(ranked: Sequence[StatementScore]) -> List[StatementScore]:
    if not ranked:
        return []
    lowest = ranked[-1].score
    return [s for s in reversed(ranked) if round(s.score - lowest, 2) <= FOCUS_CLUSTER_GAP]


def _cluster_angle(cluster: Sequence[StatementScore]):
    counts = Counter(s.statement.angle for s in cluster)
    top = max(counts.values())
    # Égalité → angle de l'énoncé le plus bas (cluster trié croissant)
    for s in cluster:
        if counts[s.statement.angle] == top:
            return s.statement.angle


def synthesize(
    responses: Sequence[Mapping[str, Any]],
    statements: Sequence[Statement],
) -> SynthesisResult:
    """
    Sous 3 réponses : overall_score=None, aucune force/tension finalisée,
    ni focus ni expérience — la session est "collecting".
    """
    aggregation = aggregate_responses(responses, statements)
    ranked = rank_scores(aggregation.statement_scores)
    disagreement_count = sum(1 for s in ranked if s.variance > DISAGREEMENT_VARIANCE)

    if not aggregation.is_scored:
        return SynthesisResult(
            strengths=[],
            tensions=[],
            all_scores=ranked,
            overall_score=None,
            disagreement_count=disagreement_count,
            focus_area=None,
            suggested_experiment=None,
            response_count=aggregation.response_count,
            dropped_answers=aggregation.dropped_answers,
        )

    strengths, tensions = select_highlights(ranked)

    cluster = focus_cluster(ranked)
    angle = _cluster_angle(cluster)
    cluster_mean = round(float(np.mean([s.score for s in cluster])), 2)

    return SynthesisResult(
        strengths=strengths,
        tensions=tensions,
        all_scores=ranked,
        overall_score=aggregation.overall_score,
        disagreement_count=disagreement_count,
        focus_area=get_focus_area(angle),
        suggested_experiment=get_experiment(angle, calculate_zone(cluster_mean)),
        response_count=aggregation.response_count,
        focus_cluster=[s.statement.id for s in cluster],
        # Un seul énoncé faible, ou du désaccord : on ne revendique pas de consensus
        focus_consensus=len(cluster) > 1 and disagreement_count == 0,
        caveat=CAVEAT_HIGH_DISAGREEMENT if disagreement_count > 0 else None,
        dropped_answers=aggregation.dropped_answers,
    )
