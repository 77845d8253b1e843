class WordleDuelError(Exception):
    pass


class ConfigError(WordleDuelError):
    pass


class InvalidGuess(WordleDuelError):
    """Raised for a human guess of the wrong length or with non-letters. Nothing is consumed."""


class AlreadyTerminal(WordleDuelError):
    """Raised when a player who has already solved or run out of attempts tries to guess."""


class SessionNotOver(WordleDuelError):
    pass


class SessionAbandoned(WordleDuelError):
    """The session was replaced while the opponent was thinking; the late guess is dropped."""


class PoolExhausted(WordleDuelError):
    """Reserved for engines that do not fall back when the candidate pool empties."""
