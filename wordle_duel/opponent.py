import logging
import random

from wordle_duel.config import DEFAULT_SETTINGS, Difficulty
from wordle_duel.feedback import render
from wordle_duel.knowledge import KnowledgeBase, filter_pool
from wordle_duel.search import choose_guess

log = logging.getLogger(__name__)


class Opponent:
    """
        The computer player: keeps what it has learnt about its own target word
        and picks the next guess with the strategy of its difficulty.
    """
    def __init__(self, vocabulary, difficulty=Difficulty.MEDIUM, rng=None, settings=DEFAULT_SETTINGS):
        self.vocabulary = tuple(vocabulary)
        self.difficulty = Difficulty(difficulty)
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.knowledge = KnowledgeBase(settings.word_length)
        self.candidates = list(self.vocabulary)
        self._tried = []

    @property
    def profile(self):
        return self.settings.profile(self.difficulty)

    def restart_game(self):
        self.knowledge.reset()
        self.candidates = list(self.vocabulary)
        self._tried = []

    def get_guess(self):
        """Re-filter the pool with everything learnt so far and choose a guess. Does not record it."""
        self.candidates = filter_pool(self.candidates, self.knowledge)
        if not self.candidates:
            # the target is always consistent with real feedback, so this means a bug upstream
            log.warning("candidate pool is empty after %s; guessing from the full vocabulary", self._tried)
            return self.rng.choice(self.vocabulary)
        guess = choose_guess(self.candidates, self.profile, self.rng,
                             first_turn=not self._tried, settings=self.settings)
        log.debug("%s picked %s from %d candidates", self.difficulty.value, guess, len(self.candidates))
        return guess

    def observe(self, guess, verdicts):
        self._tried.append(guess)
        self.knowledge.update(guess, verdicts)
        log.debug("%s -> %s", guess, render(verdicts))
