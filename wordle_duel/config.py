"""Tunable constants and the Settings bundle passed around the engine."""
from dataclasses import dataclass, field, fields, replace
from enum import Enum

import yaml

from wordle_duel.errors import ConfigError

# Toggles
WORD_LENGTH = 5
MAX_ATTEMPTS = 6
CANDIDATE_CAP = 10              # root guesses considered by the minimax family
INFO_WEIGHT = 0.7
MEMBER_WEIGHT = 0.1
DIVERSITY_WEIGHT = 0.2
MEMBER_BONUS = 0.1              # raw bonus before MEMBER_WEIGHT is applied
SMALL_POOL = 2                  # pools this small are picked at random
OPENERS = ("EARTH", "SOLAR", "WATER", "CLEAN")


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class Strategy(Enum):
    GREEDY = "greedy"
    MINIMAX = "minimax"
    ALPHABETA = "alphabeta"


@dataclass(frozen=True)
class Profile:
    strategy: Strategy
    max_depth: int
    delay: float                # simulated thinking time in seconds
    use_opener: bool = False


DEFAULT_PROFILES = {
    Difficulty.EASY: Profile(Strategy.GREEDY, 0, 0.8),
    Difficulty.MEDIUM: Profile(Strategy.MINIMAX, 1, 1.2),
    Difficulty.HARD: Profile(Strategy.ALPHABETA, 2, 1.8),
    Difficulty.EXPERT: Profile(Strategy.ALPHABETA, 3, 2.5, use_opener=True),
}


@dataclass(frozen=True)
class Settings:
    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_ATTEMPTS
    candidate_cap: int = CANDIDATE_CAP
    info_weight: float = INFO_WEIGHT
    member_weight: float = MEMBER_WEIGHT
    diversity_weight: float = DIVERSITY_WEIGHT
    member_bonus: float = MEMBER_BONUS
    small_pool: int = SMALL_POOL
    openers: tuple = OPENERS
    profiles: dict = field(default_factory=lambda: dict(DEFAULT_PROFILES))

    def profile(self, difficulty):
        return self.profiles[Difficulty(difficulty)]

    @classmethod
    def from_yaml(cls, path):
        """Build settings from a YAML mapping, overriding only the keys it names.

        Profiles are given per difficulty name, e.g.::

            max_attempts: 6
            profiles:
              hard: {max_depth: 3, delay: 1.0}
        """
        with open(path) as f:
            raw = yaml.load(f, Loader=yaml.FullLoader) or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"{path}: expected a mapping, got {type(raw).__name__}")
        return cls().override(raw)

    def override(self, raw):
        known = {f.name for f in fields(self)}
        unknown = set(raw) - known
        if unknown:
            raise ConfigError(f"unknown settings: {', '.join(sorted(unknown))}")
        changes = dict(raw)
        if "openers" in changes:
            changes["openers"] = tuple(w.upper() for w in changes["openers"])
        if "profiles" in changes:
            changes["profiles"] = self._merge_profiles(changes["profiles"])
        settings = replace(self, **changes)
        if settings.max_attempts < 1 or settings.candidate_cap < 1:
            raise ConfigError("max_attempts and candidate_cap must be positive")
        return settings

    def _merge_profiles(self, raw):
        profiles = dict(self.profiles)
        for name, values in (raw or {}).items():
            try:
                difficulty = Difficulty(name)
            except ValueError:
                raise ConfigError(f"unknown difficulty {name!r}") from None
            values = dict(values)
            if "strategy" in values:
                try:
                    values["strategy"] = Strategy(values["strategy"])
                except ValueError:
                    raise ConfigError(f"unknown strategy {values['strategy']!r}") from None
            try:
                profiles[difficulty] = replace(profiles[difficulty], **values)
            except TypeError as e:
                raise ConfigError(f"bad profile for {name}: {e}") from None
        return profiles


DEFAULT_SETTINGS = Settings()
