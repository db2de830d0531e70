"""
freq_trie.core

The persistent trie engine, as plain functions over immutable nodes.
Contains:
 - the node model (TrieNode)
 - the path traversal engine (to_path, validate_word, resolve, rebuild)
 - mutations returning new roots (add, add_all, pop, get_and_update, ...)
 - queries (fetch, get, search, words, word_count, ...)
"""

from .errors import InvalidKeyError, NotFound, TrieError
from .node import TrieNode
from .paths import rebuild, resolve, resolve_or_create, to_path, validate_word
from .mutations import (
    POP,
    add,
    add_all,
    get_and_update,
    pop,
    put_in,
    put_word,
    put_words,
    update_in,
)
from .queries import (
    fetch,
    get,
    items,
    iter_words,
    search,
    search_ranked,
    word_count,
    words,
)

__all__ = [
    "TrieNode",
    "TrieError",
    "InvalidKeyError",
    "NotFound",
    "to_path",
    "validate_word",
    "resolve",
    "resolve_or_create",
    "rebuild",
    "POP",
    "add",
    "add_all",
    "put_word",
    "put_words",
    "pop",
    "get_and_update",
    "put_in",
    "update_in",
    "fetch",
    "get",
    "search",
    "search_ranked",
    "items",
    "iter_words",
    "words",
    "word_count",
]
