import pytest

from wordle_duel.config import DEFAULT_SETTINGS, Difficulty, Strategy, Settings
from wordle_duel.errors import ConfigError
from wordle_duel.vocabulary import load_vocabulary, normalise


def test_defaults_follow_difficulty_ladder():
    depths = [DEFAULT_SETTINGS.profile(d).max_depth for d in Difficulty]
    delays = [DEFAULT_SETTINGS.profile(d).delay for d in Difficulty]
    assert depths == [0, 1, 2, 3]
    assert delays == sorted(delays)
    assert DEFAULT_SETTINGS.profile("easy").strategy is Strategy.GREEDY
    assert DEFAULT_SETTINGS.profile(Difficulty.EXPERT).use_opener


def test_yaml_overrides(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("max_attempts: 8\nopeners: [plant]\nprofiles:\n  hard: {max_depth: 3, delay: 0.5}\n")
    settings = Settings.from_yaml(path)
    assert settings.max_attempts == 8
    assert settings.openers == ("PLANT",)
    assert settings.profile(Difficulty.HARD).max_depth == 3
    assert settings.profile(Difficulty.HARD).strategy is Strategy.ALPHABETA
    assert settings.profile(Difficulty.EASY) == DEFAULT_SETTINGS.profile(Difficulty.EASY)


@pytest.mark.parametrize("text", [
    "colour: blue\n",
    "profiles:\n  impossible: {max_depth: 9}\n",
    "profiles:\n  hard: {strategy: montecarlo}\n",
    "profiles:\n  hard: {depth: 3}\n",
    "max_attempts: 0\n",
    "- just\n- a list\n",
])
def test_bad_settings_are_rejected(tmp_path, text):
    path = tmp_path / "settings.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        Settings.from_yaml(path)


def test_vocabulary_is_clean():
    vocabulary = load_vocabulary()
    assert "EARTH" in vocabulary
    assert "CARBON" not in vocabulary and "JUTE" not in vocabulary
    assert len(vocabulary) == len(set(vocabulary))
    assert all(len(w) == 5 and w.isupper() for w in vocabulary)


def test_normalise():
    assert normalise(["earth", "Water", "EARTH", "sol4r", "tree"]) == ("EARTH", "WATER")
