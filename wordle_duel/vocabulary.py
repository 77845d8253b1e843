import logging
import re
from pathlib import Path

import yaml

from wordle_duel.config import WORD_LENGTH

log = logging.getLogger(__name__)

WORDLIST_PATH = Path(__file__).parent / "data" / "wordlist.yaml"
ALPHABET = re.compile(r"^[A-Z]+$")


def is_valid_word(word, word_length=WORD_LENGTH):
    return isinstance(word, str) and len(word) == word_length and bool(ALPHABET.match(word))


def normalise(words, word_length=WORD_LENGTH):
    """Uppercase, keep only well-formed words of the right length, drop repeats (first one wins)."""
    seen = set()
    vocabulary = []
    for word in words:
        word = str(word).strip().upper()
        if not is_valid_word(word, word_length):
            log.debug("dropping %r from vocabulary", word)
            continue
        if word in seen:
            continue
        seen.add(word)
        vocabulary.append(word)
    return tuple(vocabulary)


def load_vocabulary(path=WORDLIST_PATH, word_length=WORD_LENGTH):
    with open(path) as f:
        words = yaml.load(f, Loader=yaml.FullLoader) or []
    vocabulary = normalise(words, word_length)
    log.debug("loaded %d words from %s", len(vocabulary), path)
    return vocabulary
