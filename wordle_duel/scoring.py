import math
from collections import Counter
from functools import lru_cache

from wordle_duel.config import DEFAULT_SETTINGS
from wordle_duel.feedback import evaluate


@lru_cache(maxsize=100000)
def pattern_distribution(guess, pool_tuple):
    """How many pool words fall into each feedback pattern `guess` can produce."""
    return Counter(evaluate(guess, target) for target in pool_tuple)


def entropy(guess, pool):
    """Expected bits of information gained by guessing `guess` against `pool`."""
    pool = tuple(pool)  # cache key for pattern_distribution
    if not pool:
        return 0.0
    total = len(pool)
    return sum(count / total * -math.log2(count / total)
               for count in pattern_distribution(guess, pool).values())


def diversity(guess):
    return len(set(guess)) / len(guess)


def score(guess, pool, settings=DEFAULT_SETTINGS):
    """Weighted desirability of a guess: information gain, answer-candidacy and letter diversity."""
    if not isinstance(pool, tuple):
        pool = tuple(pool)
    could_be_answer = settings.member_bonus if guess in pool else 0.0
    return (entropy(guess, pool) * settings.info_weight
            + could_be_answer * settings.member_weight
            + diversity(guess) * settings.diversity_weight)
