"""
T9 Suggestion Engine

Predictive text over a telephone keypad: given a text corpus and a sequence
of digits 2-9, return the corpus words whose keypad code matches the digits
exactly (most frequent first) and the longer corpus words that start with
any of those matches.

Main entry points:
    Engine: build(paths) a dictionary from corpus files, then suggest(seq)
    encode(word): keypad code of a lowercase word ("cats" -> "2287")
    normalize_token(token): corpus token -> set of dictionary words

Example Usage:
    from t9engine import Engine

    eng = Engine()
    eng.build(["corpus.txt"])
    result = eng.suggest("2287")
    for r in result.exact:
        print(r.word, r.count)
    print(sorted(result.completions))
"""

from .codec import encode, is_valid_digit_sequence, InvalidCharacter
from .engine import Engine, InvalidDigitSequence
from .index import DictionaryIndex
from .loader import SourceUnavailable
from .models import RankedWord, Suggestions
from .normalize import normalize_token
from .search import suggest
from .trie import PrefixTrie

__version__ = "1.0.0"
__all__ = [
    "DictionaryIndex",
    "Engine",
    "InvalidCharacter",
    "InvalidDigitSequence",
    "PrefixTrie",
    "RankedWord",
    "SourceUnavailable",
    "Suggestions",
    "encode",
    "is_valid_digit_sequence",
    "normalize_token",
    "suggest",
]
