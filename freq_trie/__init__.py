"""
freq_trie - persistent, frequency-weighted prefix tree.

Basic usage:
    from freq_trie import Trie

    trie = Trie.from_words(["hello", ("help", 3), "hey"])
    trie.search("hel")             # ["hello", "help"] in any order
    trie.search_ranked("he", 2)    # [("help", 3), ("hello", 1)]
    popped, smaller = trie.pop("hey")
"""

from freq_trie.core import POP, InvalidKeyError, NotFound, TrieError, TrieNode
from freq_trie.trie import Trie

__version__ = "0.1.0"

__all__ = [
    "Trie",
    "TrieNode",
    "POP",
    "TrieError",
    "InvalidKeyError",
    "NotFound",
    "__version__",
]
