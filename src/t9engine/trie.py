# t9engine/trie.py
# Prefix tree over lowercase letters, used to find the longer corpus words
# that start with an exact keypad match.

from __future__ import annotations
from typing import Dict, Optional, Set


class TrieNode:
    """
    One letter position in the trie.
    letter: the character on the edge into this node (None for the root)
    children: letter -> TrieNode, at most one child per letter
    is_word: the path from the root to here spells a stored word
    """

    __slots__ = ("letter", "children", "is_word")

    def __init__(self, letter: Optional[str] = None) -> None:
        self.letter = letter
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False

    def child(self, letter: str) -> Optional["TrieNode"]:
        return self.children.get(letter)


class PrefixTrie:
    """
    26-ary trie holding every dictionary word of the corpus.
    Built once while the corpus is read; queries never modify it.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """Add a word. Re-inserting an existing word changes nothing."""
        if not word:
            return
        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode(ch)
            node = nxt
        if not node.is_word:
            node.is_word = True
            self._size += 1

    # lookup --------------------------------------------------------
    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def contains_path(self, word: str) -> bool:
        """True if a node exists for every prefix of `word`, ending at `word`."""
        return self._walk(word) is not None

    def __contains__(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def __len__(self) -> int:
        return self._size

    # completions ---------------------------------------------------
    def completions_of(self, word: str) -> Set[str]:
        """
        Every stored word that starts with `word` and is strictly longer.
        `word` itself is never part of the result.
        """
        node = self._walk(word)
        if node is None:
            return set()
        return self._collect(node, word)

    def _collect(self, start: TrieNode, prefix: str) -> Set[str]:
        """DFS below the query word's node, with an explicit stack."""
        results: Set[str] = set()
        stack = [(child, prefix) for child in start.children.values()]
        while stack:
            node, parent = stack.pop()
            current = parent + node.letter
            if node.is_word:
                results.add(current)
            stack.extend((child, current) for child in node.children.values())
        return results
