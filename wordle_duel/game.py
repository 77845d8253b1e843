"""
Turn sequence and scoring rules for a human-vs-computer duel.

Each side plays its own sub-game against its own secret word. The human's
guesses are free text of the right shape; the opponent's guesses come from
`Opponent`, whose knowledge is only ever touched by the opponent turn.
"""
import asyncio
import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from wordle_duel.config import DEFAULT_SETTINGS, Difficulty, Settings
from wordle_duel.errors import AlreadyTerminal, InvalidGuess, SessionAbandoned, SessionNotOver
from wordle_duel.feedback import evaluate, is_solved
from wordle_duel.opponent import Opponent
from wordle_duel.vocabulary import is_valid_word

log = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Winner(Enum):
    HUMAN = "human"
    OPPONENT = "opponent"
    DRAW = "draw"


@dataclass
class PlayerGame:
    target: str
    max_attempts: int
    history: list = field(default_factory=list)  # (guess, verdicts) pairs
    state: GameState = GameState.IN_PROGRESS

    @property
    def attempts(self):
        return len(self.history)

    @property
    def terminal(self):
        return self.state is not GameState.IN_PROGRESS

    def record(self, guess, verdicts):
        if self.terminal:
            raise AlreadyTerminal(f"sub-game already {self.state.value}")
        self.history.append((guess, verdicts))
        if is_solved(verdicts):
            self.state = GameState.SOLVED
        elif self.attempts >= self.max_attempts:
            self.state = GameState.EXHAUSTED


@dataclass
class GameSession:
    difficulty: Difficulty
    human: PlayerGame
    computer: PlayerGame
    opponent: Opponent
    settings: Settings = DEFAULT_SETTINGS
    abandoned: bool = False

    @property
    def is_over(self):
        return self.human.terminal and self.computer.terminal

    def abandon(self):
        self.abandoned = True


@dataclass(frozen=True)
class GuessResult:
    verdicts: tuple
    state: GameState        # the guessing player's sub-game after this guess
    session_over: bool


@dataclass(frozen=True)
class SessionOutcome:
    winner: Winner
    human_attempts: int
    opponent_attempts: int
    human_target: str
    opponent_target: str


def new_session(vocabulary, difficulty=Difficulty.MEDIUM, rng=None, settings=DEFAULT_SETTINGS, opponent=None):
    """Draw two distinct targets and set up both sub-games.

    A previous game's `opponent` may be passed in; it is restarted and
    switched to `difficulty` instead of building a new one.
    """
    vocabulary = tuple(vocabulary)
    if len(vocabulary) < 2:
        raise ValueError("a duel needs at least two words to draw distinct targets")
    rng = rng if rng is not None else random.Random()
    difficulty = Difficulty(difficulty)
    human_target, computer_target = rng.sample(vocabulary, 2)
    log.debug("new %s session, targets %s / %s", difficulty.value, human_target, computer_target)
    if opponent is None:
        opponent = Opponent(vocabulary, difficulty, rng, settings)
    else:
        opponent.difficulty = difficulty
        opponent.restart_game()
    return GameSession(
        difficulty=difficulty,
        human=PlayerGame(human_target, settings.max_attempts),
        computer=PlayerGame(computer_target, settings.max_attempts),
        opponent=opponent,
        settings=settings,
    )


def submit_human_guess(session, word):
    guess = str(word).strip().upper()
    if not is_valid_word(guess, session.settings.word_length):
        raise InvalidGuess(f"please enter a {session.settings.word_length}-letter word, got {word!r}")
    if session.human.terminal:
        raise AlreadyTerminal(f"your game is already {session.human.state.value}")
    verdicts = evaluate(guess, session.human.target)
    session.human.record(guess, verdicts)
    return GuessResult(verdicts, session.human.state, session.is_over)


def play_opponent_turn(session):
    """Choose, evaluate and apply the opponent's next guess in one uninterrupted step."""
    if session.computer.terminal:
        raise AlreadyTerminal(f"opponent game is already {session.computer.state.value}")
    guess = session.opponent.get_guess()
    verdicts = evaluate(guess, session.computer.target)
    session.computer.record(guess, verdicts)
    session.opponent.observe(guess, verdicts)
    return guess


async def request_opponent_guess(session, delay=None):
    """Let the opponent "think" for its difficulty's delay, then play its turn.

    Raises SessionAbandoned if the session was replaced while waiting, in
    which case no state is touched.
    """
    if session.computer.terminal:
        raise AlreadyTerminal(f"opponent game is already {session.computer.state.value}")
    if delay is None:
        delay = session.settings.profile(session.difficulty).delay
    await asyncio.sleep(delay)
    if session.abandoned:
        raise SessionAbandoned("session was restarted while the opponent was thinking")
    return play_opponent_turn(session)


def decide_winner(human, computer):
    if human.state is GameState.SOLVED and computer.state is GameState.SOLVED:
        if human.attempts < computer.attempts:
            return Winner.HUMAN
        if computer.attempts < human.attempts:
            return Winner.OPPONENT
        return Winner.DRAW
    if human.state is GameState.SOLVED:
        return Winner.HUMAN
    if computer.state is GameState.SOLVED:
        return Winner.OPPONENT
    return Winner.DRAW


def get_session_outcome(session):
    if not session.is_over:
        raise SessionNotOver("both players must finish before the duel is scored")
    return SessionOutcome(
        winner=decide_winner(session.human, session.computer),
        human_attempts=session.human.attempts,
        opponent_attempts=session.computer.attempts,
        human_target=session.human.target,
        opponent_target=session.computer.target,
    )


class Match:
    """
        Keeps the current session for a front end. Starting a new game abandons
        the previous session and cancels any opponent turn still in flight.
    """
    def __init__(self, vocabulary, difficulty=Difficulty.MEDIUM, rng=None, settings=DEFAULT_SETTINGS,
                 use_delay=True):
        self.vocabulary = tuple(vocabulary)
        self.difficulty = Difficulty(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.settings = settings
        self.use_delay = use_delay
        self.session = None
        self._pending = None
        self.new_game()

    def new_game(self):
        if self.session is not None:
            self.session.abandon()
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
        opponent = self.session.opponent if self.session is not None else None
        self.session = new_session(self.vocabulary, self.difficulty, self.rng, self.settings, opponent)
        return self.session

    def set_difficulty(self, difficulty):
        difficulty = Difficulty(difficulty)
        if difficulty is self.difficulty:
            return
        self.difficulty = difficulty
        if self.session.is_over:  # takes effect from the next game
            return
        # changing difficulty mid-game restarts it
        if self.session.human.attempts or self.session.computer.attempts:
            self.new_game()
            return
        self.session.difficulty = difficulty
        self.session.opponent.difficulty = difficulty

    async def opponent_turn(self):
        session = self.session
        delay = None if self.use_delay else 0
        self._pending = asyncio.ensure_future(request_opponent_guess(session, delay))
        try:
            return await self._pending
        finally:
            if session is self.session:
                self._pending = None

    async def play_turn(self, word):
        """Submit the human guess, then let the opponent answer unless it is done.

        Returns the human GuessResult and the opponent's guess (None if it did not play).
        """
        result = submit_human_guess(self.session, word)
        opponent_guess = None
        if not self.session.computer.terminal:
            opponent_guess = await self.opponent_turn()
        return result, opponent_guess

    async def play_out(self):
        """Let the opponent finish alone once the human's game is over."""
        guesses = []
        while not self.session.computer.terminal:
            guesses.append(await self.opponent_turn())
        return guesses

    def outcome(self):
        return get_session_outcome(self.session)
