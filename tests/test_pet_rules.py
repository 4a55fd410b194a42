"""
Unit tests for the pet lifecycle and interaction rules.
"""

from datetime import datetime, timedelta

import pytest

from tamagotchi_api.domain.pet_rules import (
    FEEDINGS,
    INTERACTIONS,
    PLAYTIMES,
    SCOLDINGS,
    apply_interaction,
    get_interaction,
    is_dead,
)

NOW = datetime(2024, 6, 1, 12, 0, 0)


class TestIsDead:
    def test_fresh_pet_is_alive(self):
        assert is_dead(NOW, 0, 0, NOW) is False

    def test_exactly_three_days_is_alive(self):
        assert is_dead(NOW - timedelta(days=3), 0, 0, NOW) is False

    def test_neglected_over_three_days_is_dead(self):
        assert is_dead(NOW - timedelta(days=3, seconds=1), 0, 0, NOW) is True

    @pytest.mark.parametrize("hunger,expected", [(50, False), (51, True), (-500, False)])
    def test_hunger_ceiling(self, hunger, expected):
        assert is_dead(NOW, hunger, 0, NOW) is expected

    @pytest.mark.parametrize("happiness,expected", [(-50, False), (-51, True), (500, False)])
    def test_happiness_floor(self, happiness, expected):
        assert is_dead(NOW, 0, happiness, NOW) is expected

    def test_depends_on_given_time_only(self):
        last = NOW - timedelta(days=2)
        assert is_dead(last, 0, 0, NOW) is False
        assert is_dead(last, 0, 0, NOW + timedelta(days=2)) is True


class TestInteractions:
    def test_feeding_lowers_hunger_and_raises_happiness(self):
        assert apply_interaction(10, 0, INTERACTIONS[FEEDINGS]) == (5, 3)

    def test_playtime_raises_both(self):
        assert apply_interaction(10, 0, INTERACTIONS[PLAYTIMES]) == (13, 5)

    def test_scolding_only_lowers_happiness(self):
        assert apply_interaction(10, 0, INTERACTIONS[SCOLDINGS]) == (10, -5)

    def test_deltas_are_not_clamped(self):
        hunger, happiness = 0, 0
        for _ in range(30):
            hunger, happiness = apply_interaction(hunger, happiness, INTERACTIONS[FEEDINGS])
        assert hunger == -150
        assert happiness == 90

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            get_interaction("cuddles")
