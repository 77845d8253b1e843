"""Constraints learnt from feedback and the filter that applies them to a word pool."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from wordle_duel.config import WORD_LENGTH
from wordle_duel.feedback import Verdict


class PositionStatus(Enum):
    CONFIRMED_HERE = "confirmed"
    FORBIDDEN_HERE = "forbidden"


@dataclass
class KnowledgeBase:
    word_length: int = WORD_LENGTH
    must_contain: set = field(default_factory=set)
    positional_facts: Optional[list] = None  # one list of facts per position, built from word_length
    excluded: set = field(default_factory=set)

    def __post_init__(self):
        if self.positional_facts is None:
            self.positional_facts = [[] for _ in range(self.word_length)]

    def reset(self):
        self.must_contain.clear()
        self.excluded.clear()
        self.positional_facts = [[] for _ in range(self.word_length)]

    def update(self, guess, verdicts):
        if len(guess) != len(verdicts) or len(guess) != self.word_length:
            raise ValueError(f"{guess!r} does not match {len(verdicts)} verdicts / length {self.word_length}")
        for i, (letter, verdict) in enumerate(zip(guess, verdicts)):
            if verdict is Verdict.CORRECT:
                self.must_contain.add(letter)
                self.positional_facts[i].append((letter, PositionStatus.CONFIRMED_HERE))
            elif verdict is Verdict.PRESENT:
                self.must_contain.add(letter)
                self.positional_facts[i].append((letter, PositionStatus.FORBIDDEN_HERE))
            elif not self._credited_elsewhere(guess, verdicts, i):
                self.excluded.add(letter)
        return self

    @staticmethod
    def _credited_elsewhere(guess, verdicts, i):
        # a grey duplicate only means "not here" if another copy scored
        letter = guess[i]
        return any(j != i and guess[j] == letter and verdicts[j] is not Verdict.ABSENT
                   for j in range(len(guess)))

    def allows(self, word):
        if any(letter not in word for letter in self.must_contain):
            return False
        for i, facts in enumerate(self.positional_facts):
            for letter, status in facts:
                if status is PositionStatus.CONFIRMED_HERE and word[i] != letter:
                    return False
                if status is PositionStatus.FORBIDDEN_HERE and word[i] == letter:
                    return False
        return not any(letter in self.excluded for letter in word)


def filter_pool(pool, kb):
    return [word for word in pool if kb.allows(word)]
