import random
from collections import Counter

import pytest

from wordle_duel.feedback import Verdict, evaluate, is_solved, partition, render

C, P, A = Verdict.CORRECT, Verdict.PRESENT, Verdict.ABSENT


def test_shifted_letters_against_water():
    # A sits in the second slot of both words, the rest of E/R/T is shifted
    assert evaluate("EARTH", "WATER") == (P, C, P, P, A)


def test_exact_match_is_all_correct():
    assert evaluate("SOLAR", "SOLAR") == (C, C, C, C, C)
    assert is_solved(evaluate("SOLAR", "SOLAR"))


def test_repeated_letters_are_not_over_counted():
    # EAGER has two E's: one green at 0, one left for a single yellow
    assert evaluate("EERIE", "EAGER") == (C, P, P, A, A)


def test_greens_are_claimed_before_yellows():
    assert evaluate("LEVEL", "HOTEL") == (A, A, A, C, C)


def test_lengths_must_match():
    with pytest.raises(ValueError):
        evaluate("TREE", "TREES")


def test_counts_never_exceed_target_multiplicity():
    rng = random.Random(3)
    for _ in range(500):
        guess = "".join(rng.choice("ABE") for _ in range(5))
        target = "".join(rng.choice("ABE") for _ in range(5))
        verdicts = evaluate(guess, target)
        assert verdicts.count(C) == sum(g == t for g, t in zip(guess, target))
        credited = Counter(letter for letter, v in zip(guess, verdicts) if v is not A)
        target_counts = Counter(target)
        for letter, count in credited.items():
            assert count <= target_counts[letter]


def test_partition_keeps_pool_order_within_buckets():
    pool = ["WATER", "EARTH", "SOLAR", "POLAR"]
    buckets = partition("XXXXX", pool)
    assert list(buckets.values()) == [pool]
    buckets = partition("EARTH", pool)
    assert sum(len(b) for b in buckets.values()) == len(pool)
    assert buckets[(C, C, C, C, C)] == ["EARTH"]


def test_render():
    assert render((C, P, A, A, C)) == "GY..G"
