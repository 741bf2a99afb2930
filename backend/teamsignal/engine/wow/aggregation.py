# engine/wow/aggregation.py
"""
Agrégation des réponses Way of Work — ZÉRO accès DB.

Par énoncé ayant au moins une réponse valide :
    - score moyen
    - distribution [nb de 1, nb de 2, ..., nb de 5]
    - variance de population (0 = unanimité, élevée = désaccord)

Une réponse malformée (hors 1-5, non entière, énoncé inconnu de la session)
est ignorée et comptée dans dropped_answers : la session n'échoue jamais
à cause d'une entrée anonyme.
"""
import numpy as np
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from teamsignal.content.statements import Statement


# --- SEUILS ---
MIN_RESPONSES = 3       # en dessous : session "collecting", pas "scored"
SCORE_MIN = 1
SCORE_MAX = 5


@dataclass
class StatementScore:
    statement: Statement
    score: float
    response_count: int
    distribution: List[int]     # index 0 → nb de 1, ..., index 4 → nb de 5
    variance: float

    def to_dict(self) -> dict:
        return {
            "statement": self.statement.to_dict(),
            "score": self.score,
            "response_count": self.response_count,
            "distribution": list(self.distribution),
            "variance": self.variance,
        }


@dataclass
class AggregationResult:
    statement_scores: List[StatementScore]
    response_count: int
    answer_count: int
    overall_score: Optional[float]
    dropped_answers: int = 0

    @property
    def is_scored(self) -> bool:
        return self.overall_score is not None


def is_valid_score(value: Any) -> bool:
    # bool est un int en Python : True ne doit pas passer pour un 1
    return isinstance(value, int) and not isinstance(value, bool) and SCORE_MIN <= value <= SCORE_MAX


def aggregate_responses(
    responses: Sequence[Mapping[str, Any]],
    statements: Sequence[Statement],
) -> AggregationResult:
    """
    Args:
        responses:  une map {statement_id: score} par réponse anonyme
        statements: énoncés de la session (angle × niveau), dans l'ordre du catalogue
    """
    known = {s.id: s for s in statements}
    answers_by_statement: Dict[str, List[int]] = {s.id: [] for s in statements}
    all_answers: List[int] = []
    dropped = 0

    for answers in responses:
        if not isinstance(answers, Mapping):
            dropped += 1
            continue
        for statement_id, value in answers.items():
            if statement_id not in known or not is_valid_score(value):
                dropped += 1
                continue
            answers_by_statement[statement_id].append(value)
            all_answers.append(value)

    scores = [
        _score_statement(known[statement_id], values)
        for statement_id, values in answers_by_statement.items()
        if values
    ]

    response_count = len(responses)
    overall = None
    if response_count >= MIN_RESPONSES and all_answers:
        # Moyenne de toutes les réponses individuelles, pas des moyennes par énoncé
        overall = round(float(np.mean(all_answers)), 2)

    return AggregationResult(
        statement_scores=scores,
        response_count=response_count,
        answer_count=len(all_answers),
        overall_score=overall,
        dropped_answers=dropped,
    )


def _score_statement(statement: Statement, values: List[int]) -> StatementScore:
    arr = np.array(values, dtype=float)
    distribution = [int(np.sum(arr == v)) for v in range(SCORE_MIN, SCORE_MAX + 1)]
    return StatementScore(
        statement=statement,
        score=round(float(arr.mean()), 2),
        response_count=len(values),
        distribution=distribution,
        variance=round(float(np.var(arr)), 2),
    )
