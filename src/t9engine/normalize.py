from __future__ import annotations
import re
from typing import FrozenSet, List

from .codec import encode, InvalidCharacter

# Negative short forms ("don't", "can't") are dropped whole
_NEGATIVE = "'t"

# 2-char endings stripped once ("cat's" -> "cat")
_SHORT_SUFFIXES = ("'s", "'d", "'m")

# 3-char endings; compared against a 2-char tail, so they never match
_LONG_SUFFIXES = ("'ve", "'ll")

# Removed anywhere in the token
ESCAPE_CHARS = ("'", '"', "_", ".", ",", "?", ":", "!", ";", "(", ")", "[", "]", "{", "}")

# Chapter numbering, removed as plain substrings in this order
ROMAN_NUMERALS = ("ii", "iii", "iv", "v", "vi", "vii", "viii", "ix", "x", "xi", "xii")

_EMPTY: FrozenSet[str] = frozenset()

_ws_re = re.compile(r"\s+")


def tokenize_line(line: str) -> List[str]:
    """Split a corpus line into raw whitespace-delimited tokens."""
    return [tok for tok in _ws_re.split(line.strip()) if tok]


def _strip_suffixes(s: str) -> str:
    if len(s) > 1 and s[-2:] in _SHORT_SUFFIXES:
        s = s[:-2]
    # the tail slice is 2 chars long while the suffixes are 3
    if len(s) > 2 and s[-2:] in _LONG_SUFFIXES:
        s = s[:-3]
    return s


def _strip_chars(s: str) -> str:
    for ch in ESCAPE_CHARS:
        s = s.replace(ch, "")
    for numeral in ROMAN_NUMERALS:
        s = s.replace(numeral, "")
    return s


def normalize_token(token: str) -> FrozenSet[str]:
    """
    Turn one raw corpus token into zero or more dictionary words.

    Rules, in order:
      * lower-case; anything containing "'t" is discarded
      * strip a trailing 's / 'd / 'm
      * drop escape characters and roman numerals wherever they occur
      * hyphenated tokens are split and each piece normalized again
      * whatever is left must be keypad-encodable (a-z only), else nothing
    """
    if not token:
        return _EMPTY

    s = token.lower()
    if _NEGATIVE in s:
        return _EMPTY

    s = _strip_chars(_strip_suffixes(s))

    if "-" in s:
        words: set[str] = set()
        for piece in s.split("-"):
            words.update(normalize_token(piece))
        return frozenset(words)

    if not s:
        return _EMPTY
    try:
        encode(s)
    except InvalidCharacter:
        return _EMPTY
    return frozenset((s,))
