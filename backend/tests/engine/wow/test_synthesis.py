# tests/engine/wow/test_synthesis.py
"""
Tests unitaires pour engine.wow.synthesis

Couverture :
    collecting (< 3 réponses) → aucun score ni suggestion
    forces / tensions         → jamais de chevauchement, ordre du classement
    égalités                  → variance puis id
    cluster de focus          → écart 0.3, consensus, caveat de désaccord
    expérience                → table (angle, zone du cluster)
    idempotence
"""
import pytest

from teamsignal.content.experiments import EXPERIMENTS
from teamsignal.content.statements import get_statements
from teamsignal.engine.wow.synthesis import synthesize, CAVEAT_HIGH_DISAGREEMENT
from teamsignal.shared.enums import WowAngle, WowLevel, Zone
from tests.conftest import make_answers

pytestmark = pytest.mark.engine

STATEMENTS = get_statements(WowAngle.SCRUM, WowLevel.SHU)


def ids(scores):
    return [s.statement.id for s in scores]


class TestCollecting:
    def test_deux_reponses_pas_de_synthese(self):
        responses = [make_answers([5, 4, 3, 2, 1]) for _ in range(2)]
        result = synthesize(responses, STATEMENTS)

        assert result.overall_score is None
        assert result.is_scored is False
        assert result.strengths == []
        assert result.tensions == []
        assert result.focus_area is None
        assert result.suggested_experiment is None
        assert result.response_count == 2
        assert len(result.all_scores) == 5
        assert result.to_dict()["is_scored"] is False

    def test_aucune_reponse(self):
        result = synthesize([], STATEMENTS)
        assert result.is_scored is False
        assert result.all_scores == []


class TestForcesEtTensions:
    def test_classement_et_selection(self):
        responses = [make_answers([5, 4, 3, 2, 1]) for _ in range(3)]
        result = synthesize(responses, STATEMENTS)

        assert result.overall_score == 3.0
        assert ids(result.strengths) == ["scrum_shu_1", "scrum_shu_2"]
        assert ids(result.tensions) == ["scrum_shu_5", "scrum_shu_4"]
        assert ids(result.all_scores) == [f"scrum_shu_{i}" for i in range(1, 6)]

    def test_trois_enonces_sans_chevauchement(self):
        responses = [make_answers([5, 3, 1]) for _ in range(3)]
        result = synthesize(responses, STATEMENTS)

        assert ids(result.strengths) == ["scrum_shu_1", "scrum_shu_2"]
        assert ids(result.tensions) == ["scrum_shu_3"]
        assert not set(ids(result.strengths)) & set(ids(result.tensions))

    def test_un_seul_enonce(self):
        responses = [make_answers([4]) for _ in range(3)]
        result = synthesize(responses, STATEMENTS)
        assert ids(result.strengths) == ["scrum_shu_1"]
        assert result.tensions == []

    def test_egalite_consensus_d_abord(self):
        """Même moyenne 4.0 : la variance nulle passe devant."""
        responses = [make_answers([3, 4]), make_answers([4, 4]), make_answers([5, 4])]
        result = synthesize(responses, STATEMENTS)
        assert ids(result.all_scores) == ["scrum_shu_2", "scrum_shu_1"]

    def test_egalite_parfaite_par_id(self):
        responses = [make_answers([4, 4, 4, 4, 4]) for _ in range(3)]
        result = synthesize(responses, STATEMENTS)
        assert ids(result.all_scores) == [f"scrum_shu_{i}" for i in range(1, 6)]


class TestFocus:
    def test_enonce_le_plus_bas_seul(self):
        responses = [make_answers([5, 4, 3, 2, 1]) for _ in range(3)]
        result = synthesize(responses, STATEMENTS)

        assert result.focus_cluster == ["scrum_shu_5"]
        assert result.focus_consensus is False
        assert result.focus_area == "Scrum events"
        assert result.suggested_experiment == EXPERIMENTS[WowAngle.SCRUM][Zone.CRITICAL]

    def test_cluster_et_consensus(self):
        """2.0 et 2.2 à moins de 0.3 l'un de l'autre, 3.0 trop loin."""
        responses = [make_answers([5, 4, 3, 2, 2]) for _ in range(4)]
        responses.append(make_answers([5, 4, 3, 3, 2]))
        result = synthesize(responses, STATEMENTS)

        assert result.focus_cluster == ["scrum_shu_5", "scrum_shu_4"]
        assert result.focus_consensus is True
        assert result.caveat is None
        # moyenne du cluster 2.1 → zone attention
        assert result.suggested_experiment == EXPERIMENTS[WowAngle.SCRUM][Zone.ATTENTION]

    def test_desaccord_caveat(self):
        responses = [
            make_answers([1, 4, 4]),
            make_answers([5, 4, 4]),
            make_answers([1, 4, 4]),
            make_answers([5, 4, 4]),
        ]
        result = synthesize(responses, STATEMENTS)

        assert result.disagreement_count == 1
        assert result.caveat == CAVEAT_HIGH_DISAGREEMENT
        assert result.focus_consensus is False

    def test_zone_thriving(self):
        responses = [make_answers([5, 5, 5, 4, 4]) for _ in range(3)]
        result = synthesize(responses, STATEMENTS)
        assert result.focus_cluster == ["scrum_shu_5", "scrum_shu_4"]
        assert result.suggested_experiment == EXPERIMENTS[WowAngle.SCRUM][Zone.THRIVING]


class TestRobustesse:
    def test_reponse_malformee_ne_fait_pas_echouer(self):
        responses = [make_answers([4, 4]) for _ in range(3)]
        responses[0]["bogus"] = 9
        result = synthesize(responses, STATEMENTS)
        assert result.is_scored is True
        assert result.dropped_answers == 1

    def test_idempotente(self):
        responses = [
            make_answers([5, 2, 4, 1, 3]),
            make_answers([4, 2, 5, 2, 3]),
            make_answers([3, 1, 4, 2, 5]),
            make_answers([5, 3, 2, 1, 4]),
        ]
        first = synthesize(responses, STATEMENTS)
        second = synthesize(responses, STATEMENTS)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_ordre_des_reponses_indifferent(self):
        responses = [make_answers([5, 2, 4]), make_answers([4, 2, 5]), make_answers([3, 1, 4])]
        assert synthesize(responses, STATEMENTS).to_dict() == synthesize(responses[::-1], STATEMENTS).to_dict()
