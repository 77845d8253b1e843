import pytest

from wordle_duel.config import Settings
from wordle_duel.scoring import diversity, entropy, score


def test_entropy_of_fully_separating_guess():
    assert entropy("EARTH", ["EARTH", "WATER"]) == pytest.approx(1.0)


def test_entropy_of_uninformative_guess_and_empty_pool():
    assert entropy("XXXXX", ["EARTH", "WATER", "SOLAR"]) == 0.0
    assert entropy("EARTH", []) == 0.0
    assert entropy("EARTH", ["EARTH"]) == 0.0


def test_score_rewards_possible_answers():
    # 0.7 * 1 bit + 0.1 * 0.1 membership + 0.2 * 5/5 diversity
    assert score("EARTH", ("EARTH", "WATER")) == pytest.approx(0.91)
    assert score("SOLAR", ("EARTH", "WATER")) == pytest.approx(0.9)


def test_score_with_repeated_letters():
    assert diversity("GRASS") == pytest.approx(0.8)
    assert score("XXXXX", ["EARTH", "WATER"]) == pytest.approx(0.2 * 0.2)


def test_weights_come_from_settings():
    settings = Settings(info_weight=1.0, member_weight=0.0, diversity_weight=0.0)
    assert score("EARTH", ["EARTH", "WATER"], settings) == pytest.approx(1.0)
