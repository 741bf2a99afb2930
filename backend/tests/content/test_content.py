# tests/content/test_content.py
"""
Catalogue statique : énoncés et table des expériences.
"""
import pytest
from collections import Counter

from teamsignal.content.experiments import EXPERIMENTS, get_experiment, get_focus_area
from teamsignal.content.statements import (
    ALL_STATEMENTS,
    FREE_ANGLES,
    PRO_ANGLES,
    get_statement,
    get_statements,
    get_statements_for_level,
)
from teamsignal.shared.enums import WowAngle, WowLevel, Zone

pytestmark = pytest.mark.engine


class TestStatements:
    def test_cinq_enonces_par_angle_et_niveau(self):
        counts = Counter((s.angle, s.level) for s in ALL_STATEMENTS)
        assert len(counts) == len(WowAngle) * len(WowLevel)
        assert set(counts.values()) == {5}

    def test_ids_uniques(self):
        ids = [s.id for s in ALL_STATEMENTS]
        assert len(ids) == len(set(ids)) == 225

    def test_get_statements_niveau_par_defaut(self):
        statements = get_statements(WowAngle.RETRO)
        assert all(s.level == WowLevel.SHU for s in statements)
        assert len(statements) == 5

    def test_get_statement(self):
        assert get_statement("scrum_ha_1").level == WowLevel.HA
        assert get_statement("inconnu") is None

    def test_par_niveau(self):
        assert len(get_statements_for_level(WowLevel.RI)) == 75

    def test_angles_free_et_pro(self):
        assert len(FREE_ANGLES) == 5
        assert set(FREE_ANGLES) | set(PRO_ANGLES) == set(WowAngle)
        assert not set(FREE_ANGLES) & set(PRO_ANGLES)


class TestExperiments:
    @pytest.mark.parametrize("angle", list(WowAngle))
    def test_table_exhaustive(self, angle):
        for zone in Zone:
            assert get_experiment(angle, zone)
        assert get_focus_area(angle)

    def test_experiences_distinctes_par_zone(self):
        for angle, by_zone in EXPERIMENTS.items():
            assert len(set(by_zone.values())) == len(Zone), angle
