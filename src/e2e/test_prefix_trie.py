# src/e2e/test_prefix_trie.py

import pytest

from t9engine.trie import PrefixTrie


@pytest.fixture
def trie():
    t = PrefixTrie()
    for w in ("cat", "catalog", "cater", "dog"):
        t.insert(w)
    return t


def test_inserted_words_are_found(trie):
    for w in ("cat", "catalog", "cater", "dog"):
        assert trie.contains_path(w)
        assert w in trie
    assert len(trie) == 4


def test_path_exists_for_prefix_that_is_not_a_word(trie):
    assert trie.contains_path("ca")
    assert "ca" not in trie
    assert not trie.contains_path("cow")
    assert not trie.contains_path("cats")


def test_words_survive_inserting_disjoint_words():
    t = PrefixTrie()
    t.insert("keypad")
    assert t.contains_path("keypad")
    for w in ("zebra", "moon", "quiz"):
        t.insert(w)
        assert t.contains_path("keypad")
        assert t.contains_path(w)


def test_insert_is_idempotent():
    t = PrefixTrie()
    t.insert("cat")
    t.insert("cat")
    assert len(t) == 1
    assert t.completions_of("cat") == set()


def test_insert_empty_word_is_a_noop():
    t = PrefixTrie()
    t.insert("")
    assert len(t) == 0
    assert "" not in t


def test_completions_exclude_the_word_itself(trie):
    out = trie.completions_of("cat")
    assert out == {"catalog", "cater"}
    assert "cat" not in out


def test_completions_of_a_path_prefix(trie):
    assert trie.completions_of("ca") == {"cat", "catalog", "cater"}


def test_completions_of_leaf_or_missing_word_are_empty(trie):
    assert trie.completions_of("catalog") == set()
    assert trie.completions_of("dog") == set()
    assert trie.completions_of("xyz") == set()


def test_completions_reach_deep_descendants():
    t = PrefixTrie()
    for w in ("in", "inn", "inner", "innermost", "into"):
        t.insert(w)
    assert t.completions_of("in") == {"inn", "inner", "innermost", "into"}
    assert t.completions_of("inn") == {"inner", "innermost"}


def test_completions_of_very_long_word_do_not_overflow_the_stack():
    t = PrefixTrie()
    t.insert("a")
    t.insert("a" * 1500)
    assert t.completions_of("a") == {"a" * 1500}
    assert t.contains_path("a" * 1500)
