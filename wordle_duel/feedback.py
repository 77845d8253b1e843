from enum import Enum
from functools import lru_cache


class Verdict(Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


@lru_cache(maxsize=None)
def evaluate(guess, target):
    """Return one Verdict per position of `guess` against `target`.

    Greens are matched first and consume their target slot; the remaining
    guess letters then consume the leftmost unmatched target occurrence, so a
    repeated letter is never credited more often than the target holds it.
    """
    if len(guess) != len(target):
        raise ValueError(f"cannot compare {guess!r} with {target!r}: lengths differ")
    result = [Verdict.ABSENT] * len(guess)
    remaining = list(target)
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result[i] = Verdict.CORRECT
            remaining[i] = None
    for i, letter in enumerate(guess):
        if result[i] is Verdict.CORRECT:
            continue
        if letter in remaining:
            result[i] = Verdict.PRESENT
            remaining[remaining.index(letter)] = None
    return tuple(result)


def is_solved(verdicts):
    return all(v is Verdict.CORRECT for v in verdicts)


def partition(guess, pool):
    """Group pool members by the feedback pattern `guess` would get against each of them."""
    buckets = {}
    for target in pool:
        buckets.setdefault(evaluate(guess, target), []).append(target)
    return buckets


def render(verdicts):
    # compact form for logs: G / Y / . like the solver's feedback strings
    symbols = {Verdict.CORRECT: "G", Verdict.PRESENT: "Y", Verdict.ABSENT: "."}
    return "".join(symbols[v] for v in verdicts)
