# tests/test_queries.py
# prefix search, enumeration and counting

import pytest

from freq_trie.core import (
    TrieNode,
    add,
    fetch,
    items,
    iter_words,
    put_words,
    search,
    search_ranked,
    word_count,
    words,
)

WORDS = ["damn", "dang", "hello", "helm", "hey", "hi", "oh", "ohh", "ohhhhhh"]


@pytest.fixture
def trie():
    return put_words(WORDS)


def test_words_returns_the_loaded_words(trie):
    assert sorted(words(trie)) == sorted(WORDS)
    assert word_count(trie) == len(WORDS)


@pytest.mark.parametrize("prefix, expected", [
    ("h", ["hi", "hey", "helm", "hello"]),
    ("he", ["hey", "helm", "hello"]),
    ("hel", ["helm", "hello"]),
    ("d", ["dang", "damn"]),
    ("da", ["dang", "damn"]),
    ("dam", ["damn"]),
    ("dan", ["dang"]),
    ("o", ["ohhhhhh", "ohh", "oh"]),
    ("oh", ["ohhhhhh", "ohh", "oh"]),
    ("ohh", ["ohhhhhh", "ohh"]),
    ("ohhh", ["ohhhhhh"]),
])
def test_search_with_existing_prefixes(trie, prefix, expected):
    assert sorted(search(trie, prefix)) == sorted(expected)
    # char sequence prefixes behave the same
    assert sorted(search(trie, list(prefix))) == sorted(expected)


def test_search_with_missing_prefix():
    t = put_words(["a", "b", "c"])
    assert search(t, "x") == []
    assert search(t, "ax") == []


def test_search_empty_prefix_lists_everything(trie):
    assert sorted(search(trie, "")) == sorted(WORDS)


def test_search_exact_word_includes_itself(trie):
    assert search(trie, "hello") == ["hello"]


def test_word_count_counts_words_not_frequencies():
    t = put_words([("a", 5), ("ab", 3), "abc"])
    assert word_count(t) == 3
    assert word_count(fetch(t, "ab")) == 2


def test_words_from_a_subtree_start_with_its_key(trie):
    assert sorted(words(fetch(trie, "he"))) == ["ello", "elm", "ey"]


def test_iter_words_is_lazy(trie):
    it = iter_words(trie)
    first = next(it)
    assert first in WORDS
    assert sorted([first] + list(it)) == sorted(WORDS)


def test_items_carry_frequencies():
    t = put_words([("tea", 4), ("ten", 2), ("tons", 3)])
    assert sorted(items(t)) == [("tea", 4), ("ten", 2), ("tons", 3)]


def test_search_ranked_orders_by_frequency_then_word():
    t = put_words([("tea", 4), ("ten", 2), ("tons", 3), ("team", 2)])
    assert search_ranked(t, "t") == [("tea", 4), ("tons", 3), ("team", 2), ("ten", 2)]
    assert search_ranked(t, "te", limit=2) == [("tea", 4), ("team", 2)]
    assert search_ranked(t, "x") == []


def test_empty_trie():
    root = TrieNode()
    assert words(root) == []
    assert word_count(root) == 0
    assert search(root, "a") == []


def test_enumeration_matches_input_set():
    vocab = {"alpha", "alp", "beta", "bet", "b", "gamma", "γάμμα", "日本"}
    t = put_words(sorted(vocab))
    assert set(words(t)) == vocab
    assert word_count(t) == len(vocab)


def test_empty_word_counts_when_inserted():
    t = add(put_words(["a"]), "")
    assert word_count(t) == 2
    assert "" in words(t)
