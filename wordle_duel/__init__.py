from wordle_duel.config import Difficulty, Settings
from wordle_duel.errors import (AlreadyTerminal, ConfigError, InvalidGuess, PoolExhausted,
                                SessionAbandoned, SessionNotOver, WordleDuelError)
from wordle_duel.feedback import Verdict, evaluate
from wordle_duel.game import (GameSession, GameState, Match, SessionOutcome, Winner, get_session_outcome,
                              new_session, play_opponent_turn, request_opponent_guess, submit_human_guess)
from wordle_duel.knowledge import KnowledgeBase, filter_pool
from wordle_duel.opponent import Opponent
from wordle_duel.scoring import score
from wordle_duel.vocabulary import load_vocabulary

__version__ = "0.1.0"
