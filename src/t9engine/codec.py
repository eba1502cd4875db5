# t9engine/codec.py
from __future__ import annotations
from typing import Dict

# Telephone keypad letter groups
KEYPAD: Dict[str, str] = {
    "abc": "2",
    "def": "3",
    "ghi": "4",
    "jkl": "5",
    "mno": "6",
    "pqrs": "7",
    "tuv": "8",
    "wxyz": "9",
}

# letter -> digit, flattened once at import
_LETTER_TO_DIGIT: Dict[str, str] = {
    ch: digit for letters, digit in KEYPAD.items() for ch in letters
}

_VALID_DIGITS = frozenset("23456789")


class InvalidCharacter(ValueError):
    """Raised by encode() for any character outside lowercase a-z."""

    def __init__(self, char: str, word: str) -> None:
        super().__init__(f"Can't convert char {char!r} in {word!r}")
        self.char = char
        self.word = word


def encode(word: str) -> str:
    """
    Convert a lowercase word to its keypad code, e.g. "cat" -> "228".
    One digit per letter; raises InvalidCharacter on anything but a-z.
    """
    digits = []
    for ch in word:
        digit = _LETTER_TO_DIGIT.get(ch)
        if digit is None:
            raise InvalidCharacter(ch, word)
        digits.append(digit)
    return "".join(digits)


def is_valid_digit_sequence(seq: str) -> bool:
    """True iff every character is a digit 2-9. The empty sequence is valid."""
    return all(ch in _VALID_DIGITS for ch in seq)
