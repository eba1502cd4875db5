# t9engine/engine.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

from .codec import is_valid_digit_sequence
from .index import DictionaryIndex
from .loader import iter_corpus_lines, SourceUnavailable
from .models import Suggestions
from .search import suggest

log = logging.getLogger(__name__)


class InvalidDigitSequence(ValueError):
    """Query contains something other than the digits 2-9."""


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus reading (loader.iter_corpus_lines),
      - the dictionary index (exact table + prefix trie),
      - the two-stage keypad lookup (search.suggest).

    Public API (used by CLI/Flask):
      * build(paths):           read corpus files -> index
      * build_from_lines(lines): index already-read text
      * suggest(sequence):      ranked exact matches + completions
      * shutdown():             drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[DictionaryIndex] = None

    # /* ~~~ Read corpus files/folders and build the index ~~~ */
    def build(self, paths: Iterable[str], *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        paths = list(paths)
        if not paths:
            raise ValueError("build(): at least one corpus path is required")

        # an unavailable source leaves an empty index behind
        self.index = DictionaryIndex()
        log.info("Loading corpus from %s", paths)
        try:
            self.index = DictionaryIndex.build(iter_corpus_lines(paths, verbose=verbose or None))
        except SourceUnavailable as e:
            log.warning("Corpus unavailable, index is empty: %s", e)
            raise
        log.info("Engine build() complete: words=%d", len(self.index))

    def build_from_lines(self, lines: Iterable[str]) -> None:
        self.index = DictionaryIndex.build(lines)

    # ------------- query -------------

    # /* ~~~ Validate the digit sequence and run the keypad lookup ~~~ */
    def suggest(self, sequence: str) -> Suggestions:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        if not is_valid_digit_sequence(sequence):
            raise InvalidDigitSequence(f"Invalid input sequence: {sequence}")
        return suggest(sequence, self.index)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")
