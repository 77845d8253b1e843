"""Opponent-only simulations to compare the difficulty levels."""
import random
from collections import Counter

import numpy as np
from tqdm import tqdm

from wordle_duel.config import DEFAULT_SETTINGS, Difficulty
from wordle_duel.game import GameState, new_session, play_opponent_turn


def simulate_opponent_game(vocabulary, difficulty, rng, settings=DEFAULT_SETTINGS):
    session = new_session(vocabulary, difficulty, rng, settings)
    while not session.computer.terminal:
        play_opponent_turn(session)
    return session.computer


def summarise(attempts, solved):
    attempts = np.asarray(attempts, dtype=float)
    solved = np.asarray(solved, dtype=bool)
    if attempts.size == 0:
        return {'games': 0, 'solve_rate': 0.0, 'avg_attempts': 0.0, 'std_attempts': 0.0,
                'min_attempts': 0, 'max_attempts': 0, 'distribution': {}}
    return {
        'games': int(attempts.size),
        'solve_rate': 100 * float(np.mean(solved)),
        'avg_attempts': float(np.mean(attempts)),
        'std_attempts': float(np.std(attempts)),
        'min_attempts': int(np.min(attempts)),
        'max_attempts': int(np.max(attempts)),
        'distribution': dict(sorted(Counter(int(a) for a in attempts[solved]).items())),
    }


def run_benchmark(vocabulary, difficulties=tuple(Difficulty), games=100, seed=None,
                  settings=DEFAULT_SETTINGS, progress=True):
    """Play `games` opponent games per difficulty and summarise attempts and solve rate."""
    results = {}
    for difficulty in difficulties:
        difficulty = Difficulty(difficulty)
        rng = random.Random(seed)
        attempts, solved = [], []
        for _ in tqdm(range(games), desc=difficulty.value, disable=not progress):
            game = simulate_opponent_game(vocabulary, difficulty, rng, settings)
            attempts.append(game.attempts)
            solved.append(game.state is GameState.SOLVED)
        results[difficulty] = summarise(attempts, solved)
    return results
