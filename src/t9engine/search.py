from __future__ import annotations
from typing import Set

from .index import DictionaryIndex
from .models import Suggestions


def suggest(sequence: str, index: DictionaryIndex) -> Suggestions:
    """
    Two-stage keypad lookup:
      1) exact matches for the digit sequence, ranked by corpus frequency
      2) union of the trie completions of every exact match

    `sequence` must already be a valid [2-9]* string. The empty sequence
    short-circuits to an empty result without touching the index.
    """
    if not sequence:
        return Suggestions(sequence=sequence)

    exact = index.exact_matches(sequence)

    trie = index.trie
    completions: Set[str] = set()
    for ranked in exact:
        if trie.contains_path(ranked.word):
            completions |= trie.completions_of(ranked.word)

    return Suggestions(
        sequence=sequence,
        exact=tuple(exact),
        completions=frozenset(completions),
    )
