# teamsignal/shared/errors.py
"""
Erreurs métier typées.

Toutes héritent de ValueError : les routers peuvent continuer à
brancher sur `str(e)` (code machine) comme pour les ValueError("CODE")
historiques. Aucune n'est fatale — elles sont toutes récupérables
localement par l'appelant.

InsufficientData et MalformedAnswer ne sont PAS des exceptions :
    - données insuffisantes → état typé (value=None, is_scored=False, NO_DATA)
    - réponse malformée    → ignorée à l'agrégation, comptée dans dropped_answers
"""
from typing import Any, Dict, Optional


class SignalError(ValueError):
    """Base : chaque erreur porte un `code` stable pour les clients."""
    code: str = "SIGNAL_ERROR"

    def __init__(self, code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        if code:
            self.code = code
        self.details = details or {}
        super().__init__(self.code)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code}
        if self.details:
            payload["details"] = self.details
        return payload


class DuplicateResponseError(SignalError):
    """Second envoi du même device sur la même session — jamais fusionné."""
    code = "ALREADY_RESPONDED"


class DuplicateCheckinError(SignalError):
    """Second check-in Vibe du même device le même jour."""
    code = "ALREADY_CHECKED_IN"


class InvalidTransitionError(SignalError):
    """Synthèse / clôture / réponse sur une session non active, ou promotion refusée."""
    code = "SESSION_NOT_ACTIVE"


class NotFoundError(SignalError):
    code = "NOT_FOUND"


class SessionsNotComparableError(SignalError):
    """Angles différents, ou une des deux sessions sous 3 réponses."""
    code = "SESSIONS_NOT_COMPARABLE"
