# src/e2e/test_dictionary_index_ranking.py

from t9engine.codec import encode
from t9engine.index import DictionaryIndex
from t9engine.models import RankedWord


def _count(idx, word):
    return {r.word: r.count for r in idx.exact_matches(encode(word))}.get(word, 0)


def test_most_frequent_word_comes_first():
    idx = DictionaryIndex.build(["dog dog cat dog cat"])
    assert idx.exact_matches("364") == [RankedWord("dog", 3)]
    assert idx.exact_matches("228") == [RankedWord("cat", 2)]


def test_words_sharing_a_code_are_ranked_by_count():
    idx = DictionaryIndex.build(["cat cat bat"])
    assert idx.exact_matches("228") == [RankedWord("cat", 2), RankedWord("bat", 1)]


def test_ranking_holds_across_lines_and_order_of_appearance():
    idx = DictionaryIndex.build(["act bat", "bat cat cat", "cat"])
    ranked = idx.exact_matches("228")
    assert [r.word for r in ranked] == ["cat", "bat", "act"]
    assert [r.count for r in ranked] == [3, 2, 1]


def test_equal_counts_are_all_returned():
    # tie order is not part of the contract
    idx = DictionaryIndex.build(["bat cat act"])
    ranked = idx.exact_matches("228")
    assert {r.word for r in ranked} == {"bat", "cat", "act"}
    assert all(r.count == 1 for r in ranked)


def test_unknown_code_has_no_matches():
    idx = DictionaryIndex.build(["cat"])
    assert idx.exact_matches("999") == []
    assert idx.exact_matches("") == []


def test_tokens_are_normalized_before_indexing():
    idx = DictionaryIndex.build(["Well-known cat's don't CAT, 42"])
    assert _count(idx, "well") == 1
    assert _count(idx, "known") == 1
    assert _count(idx, "cat") == 2
    assert _count(idx, "don") == 0
    assert len(idx) == 3


def test_every_indexed_word_is_in_the_trie():
    lines = ["The quick brown fox", "jumps over the lazy dog."]
    idx = DictionaryIndex.build(lines)
    for word in ("the", "quick", "brown", "fo", "jumps", "oer", "lazy", "dog"):
        assert word in idx.trie
        assert _count(idx, word) >= 1
    assert _count(idx, "the") == 2


def test_build_statistics():
    idx = DictionaryIndex.build(line for line in ["a b a", "", "c"])
    assert idx.lines_read == 3
    assert idx.token_count == 4
    assert len(idx) == 3
    assert idx.code_count == 1   # a, b, c all encode to "2"


def test_add_word_rejects_unencodable_input_without_raising():
    idx = DictionaryIndex()
    assert idx.add_word("ok") is True
    assert idx.add_word("not ok") is False
    assert len(idx) == 1
    assert "not ok" not in idx.trie


def test_empty_corpus_builds_empty_index():
    idx = DictionaryIndex.build([])
    assert len(idx) == 0
    assert idx.exact_matches("228") == []
