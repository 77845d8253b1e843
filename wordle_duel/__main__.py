import argparse
import asyncio
import logging
import random
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from wordle_duel.bench import run_benchmark
from wordle_duel.config import DEFAULT_SETTINGS, Difficulty, Settings
from wordle_duel.errors import AlreadyTerminal, ConfigError, InvalidGuess
from wordle_duel.feedback import Verdict
from wordle_duel.game import Match, Winner
from wordle_duel.vocabulary import load_vocabulary

log = logging.getLogger("wordle_duel")

STYLES = {Verdict.CORRECT: "bold white on green",
          Verdict.PRESENT: "bold black on yellow",
          Verdict.ABSENT: "white on grey37"}


def colour(guess, verdicts):
    return " ".join(f"[{STYLES[v]}] {letter} [/]" for letter, v in zip(guess, verdicts))


COMMANDS = ("play", "bench")


def parse_args(argv=None):
    # options shared by every subcommand so they can follow it on the command line
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="YAML file overriding the default settings")
    common.add_argument("--seed", type=int, default=None)
    common.add_argument("-v", "--verbose", action="store_true", help="show engine debug logs")

    parser = argparse.ArgumentParser(prog="wordle_duel", description="Play Wordle against a computer opponent.")
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", parents=[common], help="play a duel in the terminal (default)")
    play.add_argument("--difficulty", choices=[d.value for d in Difficulty], default=Difficulty.MEDIUM.value)
    play.add_argument("--no-delay", action="store_true", help="skip the opponent's thinking time")

    bench = sub.add_parser("bench", parents=[common], help="measure the opponent at each difficulty")
    bench.add_argument("--games", type=int, default=100)
    bench.add_argument("--difficulty", action="append", choices=[d.value for d in Difficulty])

    argv = sys.argv[1:] if argv is None else list(argv)
    if not any(arg in COMMANDS for arg in argv) and not {"-h", "--help"} & set(argv):
        argv = ["play"] + argv
    return parser.parse_args(argv)


async def play(console, vocabulary, args, settings):
    match = Match(vocabulary, args.difficulty, random.Random(args.seed), settings, use_delay=not args.no_delay)
    session = match.session
    console.print(f"Opponent difficulty: [bold]{session.difficulty.value}[/]. "
                  f"Guess the {settings.word_length}-letter eco-word in {settings.max_attempts} tries.")
    console.print("Word bank: " + " ".join(vocabulary))
    while not session.human.terminal:
        guess = console.input("Your guess:\n")
        if guess is None:
            guess = ""
        try:
            with console.status("The opponent is analysing eco-friendly possibilities..."):
                result, opponent_guess = await match.play_turn(guess)
        except InvalidGuess as e:
            console.print(f"[red]{e}[/]")
            continue
        console.print("You:      " + colour(session.human.history[-1][0], result.verdicts))
        if opponent_guess is not None:
            console.print("Opponent: " + colour(*session.computer.history[-1]))
    if not session.computer.terminal:
        with console.status("The opponent keeps going..."):
            guesses = await match.play_out()
        for guess, verdicts in session.computer.history[-len(guesses):]:
            console.print("Opponent: " + colour(guess, verdicts))
    report(console, match.outcome())


def report(console, outcome):
    headline = {Winner.HUMAN: "[green]You win![/]",
                Winner.OPPONENT: "[red]The opponent wins![/]",
                Winner.DRAW: "[yellow]It's a draw![/]"}[outcome.winner]
    console.print(headline)
    console.print(f"You took {outcome.human_attempts}, the opponent took {outcome.opponent_attempts}.")
    console.print(f"Your eco-word was: {outcome.human_target}")
    console.print(f"The opponent's eco-word was: {outcome.opponent_target}")


def bench(console, vocabulary, args, settings):
    difficulties = [Difficulty(d) for d in args.difficulty] if args.difficulty else list(Difficulty)
    results = run_benchmark(vocabulary, difficulties, args.games, args.seed, settings)
    table = Table(title=f"{args.games} games per difficulty over {len(vocabulary)} words")
    for column in ("difficulty", "solved %", "avg", "std", "min", "max", "distribution"):
        table.add_column(column)
    for difficulty, stats in results.items():
        table.add_row(difficulty.value, f"{stats['solve_rate']:.2f}", f"{stats['avg_attempts']:.4f}",
                      f"{stats['std_attempts']:.4f}", str(stats['min_attempts']), str(stats['max_attempts']),
                      str(stats['distribution']))
    console.print(table)


def main(argv=None):
    args = parse_args(argv)
    console = Console()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(message)s", handlers=[RichHandler(console=console)])
    try:
        settings = Settings.from_yaml(args.config) if args.config else DEFAULT_SETTINGS
    except (ConfigError, OSError) as e:
        log.error("could not load settings: %s", e)
        return 2
    vocabulary = load_vocabulary(word_length=settings.word_length)
    if args.command == "bench":
        bench(console, vocabulary, args, settings)
        return 0
    try:
        asyncio.run(play(console, vocabulary, args, settings))
    except AlreadyTerminal as e:
        log.error("%s", e)
        return 1
    except (KeyboardInterrupt, EOFError):
        console.print("\nBye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
