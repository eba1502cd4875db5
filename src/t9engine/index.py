# t9engine/index.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from .codec import encode, InvalidCharacter
from .models import RankedWord
from .normalize import normalize_token, tokenize_line
from .trie import PrefixTrie

log = logging.getLogger(__name__)


class DictionaryIndex:
    """
    Corpus-derived dictionary:
      - exact table: keypad code -> {word: count}
      - prefix trie over the same words (for completions)
    Every normalized word goes into both structures in one step.
    """

    def __init__(self) -> None:
        self._exact: Dict[str, Dict[str, int]] = {}
        self._trie = PrefixTrie()
        self.token_count = 0           # words indexed, repeats included
        self.lines_read = 0

    # ---- Build ----
    @classmethod
    def build(cls, lines: Iterable[str]) -> "DictionaryIndex":
        idx = cls()
        for line in lines:
            idx.add_line(line)
        log.info(
            "Index built: lines=%d words=%d distinct=%d codes=%d",
            idx.lines_read, idx.token_count, len(idx), idx.code_count,
        )
        return idx

    def add_line(self, line: str) -> None:
        for token in tokenize_line(line):
            self.add_token(token)
        self.lines_read += 1

    def add_token(self, token: str) -> int:
        """Normalize one raw token and index what comes out. Returns words added."""
        added = 0
        for word in normalize_token(token):
            if self.add_word(word):
                added += 1
        return added

    def add_word(self, word: str) -> bool:
        try:
            code = encode(word)
        except InvalidCharacter as e:
            log.debug("Skipping %r: %s", word, e)
            return False
        bucket = self._exact.setdefault(code, {})
        bucket[word] = bucket.get(word, 0) + 1
        self._trie.insert(word)
        self.token_count += 1
        return True

    # ---- Query ----
    def exact_matches(self, code: str) -> List[RankedWord]:
        """
        Words stored under `code`, highest count first.
        Equal counts keep first-seen order, which callers must not rely on.
        """
        bucket = self._exact.get(code)
        if not bucket:
            return []
        ranked = sorted(bucket.items(), key=lambda kv: -kv[1])
        return [RankedWord(word, count) for word, count in ranked]

    # ---- Getters ----
    @property
    def trie(self) -> PrefixTrie:
        return self._trie

    @property
    def code_count(self) -> int:
        return len(self._exact)

    def __len__(self) -> int:
        return len(self._trie)
