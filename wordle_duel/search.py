"""
Guess selection strategies for the computer opponent.

Every strategy works on a fixed candidate pool (the words still consistent
with the opponent's knowledge at the start of its turn) and draws all of its
randomness from the injected `rng`. The minimax family is a heuristic
sampling of the game tree: each feedback bucket is explored through one
randomly chosen representative word, ties are broken at random, and only the
first `candidate_cap` pool words are tried at the root. Two runs with
different seeds may therefore pick different guesses from the same pool.
"""
import math
from collections import Counter

from wordle_duel.config import DEFAULT_SETTINGS, Strategy
from wordle_duel.feedback import partition
from wordle_duel.scoring import score


def pick_best(candidates, value, rng):
    """Evaluate every candidate and choose uniformly among those tied for the top value."""
    best_words = []
    best_value = -math.inf
    for word in candidates:
        v = value(word)
        if v > best_value:
            best_value = v
            best_words = [word]
        elif v == best_value:
            best_words.append(word)
    return rng.choice(best_words)


def greedy_pick(pool, rng):
    # document frequency: each word counts each of its distinct letters once
    letter_frequency = Counter()
    for word in pool:
        letter_frequency.update(set(word))
    return pick_best(pool, lambda word: sum(letter_frequency[c] for c in set(word)), rng)


def _branch_values(word, pool, recurse, rng, settings):
    """Yield one value per feedback bucket of `word`, lazily so callers can stop early."""
    for bucket in partition(word, pool).values():
        # nothing to learn from an empty bucket or one that keeps the whole pool
        if not bucket or len(bucket) == len(pool):
            yield score(word, pool, settings)
        else:
            yield recurse(rng.choice(bucket))


def minimax_value(word, pool, depth, max_depth, maximizing, rng, settings=DEFAULT_SETTINGS):
    if depth >= max_depth:
        return score(word, pool, settings)
    values = list(_branch_values(
        word, pool,
        lambda nxt: minimax_value(nxt, pool, depth + 1, max_depth, not maximizing, rng, settings),
        rng, settings))
    if not values:  # empty pool
        return score(word, pool, settings)
    return max(values) if maximizing else min(values)


def alphabeta_value(word, pool, depth, max_depth, alpha, beta, maximizing, rng, settings=DEFAULT_SETTINGS):
    if depth >= max_depth:
        return score(word, pool, settings)
    best = -math.inf if maximizing else math.inf
    # the lambda reads alpha and beta when called, so children see the tightened window
    values = _branch_values(
        word, pool,
        lambda nxt: alphabeta_value(nxt, pool, depth + 1, max_depth, alpha, beta, not maximizing, rng, settings),
        rng, settings)
    for value in values:
        if maximizing:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if beta <= alpha:
            break
    if math.isinf(best):  # no buckets at all (empty pool)
        return score(word, pool, settings)
    return best


def minimax_pick(pool, rng, max_depth, settings=DEFAULT_SETTINGS):
    pool = tuple(pool)
    if len(pool) <= max_depth:
        return rng.choice(pool)
    candidates = pool[:settings.candidate_cap]
    return pick_best(
        candidates,
        lambda word: minimax_value(word, pool, 1, max_depth, False, rng, settings),
        rng)


def alphabeta_pick(pool, rng, max_depth, settings=DEFAULT_SETTINGS):
    pool = tuple(pool)
    if len(pool) <= max_depth:
        return rng.choice(pool)
    candidates = pool[:settings.candidate_cap]
    return pick_best(
        candidates,
        lambda word: alphabeta_value(word, pool, 1, max_depth, -math.inf, math.inf, False, rng, settings),
        rng)


def opener_pick(rng, settings=DEFAULT_SETTINGS):
    """A strategic first word, or None when no opener fits the configured word length."""
    openers = [w for w in settings.openers if len(w) == settings.word_length]
    if not openers:
        return None
    return rng.choice(openers)


def choose_guess(pool, profile, rng, first_turn=False, settings=DEFAULT_SETTINGS):
    """Dispatch to the strategy the difficulty profile names. `pool` must not be empty."""
    if len(pool) <= settings.small_pool:  # edge case: too few words to be worth scoring
        return rng.choice(list(pool))
    if profile.use_opener and first_turn:
        guess = opener_pick(rng, settings)
        if guess is not None:
            return guess
    if profile.strategy is Strategy.GREEDY:
        return greedy_pick(pool, rng)
    if profile.strategy is Strategy.MINIMAX:
        return minimax_pick(pool, rng, profile.max_depth, settings)
    return alphabeta_pick(pool, rng, profile.max_depth, settings)
