# trie.py
# Frequency-weighted Trie (prefix tree) for prefix-based autocompletion.
# Thin value object over freq_trie.core: each "mutating" method returns a new
# Trie and the old one stays valid, sharing every untouched subtree.

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

from freq_trie.core import mutations, queries
from freq_trie.core.errors import NotFound
from freq_trie.core.mutations import Entry, Updater
from freq_trie.core.node import TrieNode
from freq_trie.core.paths import Key, validate_word
from freq_trie.core.queries import Candidate


class Trie:
    """
    Persistent trie storing words with usage frequencies, used for:
     - prefix-based suggestions (search, search_ranked)
     - frequency dictionaries (items, word_count)
     - path-addressed access to nodes (fetch / [] / get, pop, get_and_update)

    Given ["ten", "tons", "tea"] loaded with frequencies 2, 3 and 4:

        root (0)
        └── t (0)
            ├── e (0)
            │   ├── a (4)
            │   └── n (2)
            └── o (0)
                └── n (0)
                    └── s (3)

    Only tea, ten and tons are complete words; t, te, to and ton are not.
    """

    __slots__ = ("_root",)

    def __init__(self, root: Optional[TrieNode] = None) -> None:
        object.__setattr__(self, "_root", root if root is not None else TrieNode())

    def __setattr__(self, name, value):
        raise AttributeError("Trie is immutable")

    @classmethod
    def from_words(cls, entries: Iterable[Entry]) -> "Trie":
        """Build from words and/or (word, frequency) pairs, in order."""
        return cls(mutations.put_words(entries))

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def add(self, word: Key, frequency: int = 1) -> "Trie":
        return Trie(mutations.add(self._root, word, frequency))

    def add_all(self, entries: Iterable[Entry]) -> "Trie":
        return Trie(mutations.add_all(self._root, entries))

    # path access -----------------------------------------------------
    def fetch(self, key: Key) -> TrieNode:
        return queries.fetch(self._root, key)

    def get(self, key: Key, default: Any = None) -> Any:
        return queries.get(self._root, key, default)

    def __getitem__(self, key: Key) -> TrieNode:
        return queries.fetch(self._root, key)

    def pop(self, key: Key) -> Tuple[Optional[TrieNode], "Trie"]:
        popped, root = mutations.pop(self._root, key)
        return popped, Trie(root)

    def get_and_update(self, key: Key, updater: Updater) -> Tuple[Any, "Trie"]:
        old_value, root = mutations.get_and_update(self._root, key, updater)
        return old_value, Trie(root)

    def put_in(self, key: Key, node: TrieNode) -> "Trie":
        return Trie(mutations.put_in(self._root, key, node))

    def update_in(self, key: Key, fn: Callable[[Optional[TrieNode]], TrieNode]) -> "Trie":
        return Trie(mutations.update_in(self._root, key, fn))

    # search/traversal ---------------------------------------------------------
    def search(self, prefix: Key) -> List[str]:
        return queries.search(self._root, prefix)

    def search_ranked(self, prefix: Key, limit: Optional[int] = None) -> List[Candidate]:
        return queries.search_ranked(self._root, prefix, limit)

    def words(self) -> List[str]:
        return queries.words(self._root)

    def items(self) -> Iterator[Candidate]:
        return queries.items(self._root)

    def word_count(self) -> int:
        return queries.word_count(self._root)

    def frequency(self, word: Key) -> int:
        """Times `word` was inserted (0 when absent or only a prefix)."""
        node = queries.get(self._root, word)
        return node.frequency if node is not None else 0

    # convenience -----------------------------------------------------
    def __iter__(self) -> Iterator[str]:
        return queries.iter_words(self._root)

    def __len__(self) -> int:
        return queries.word_count(self._root)

    def __contains__(self, word: object) -> bool:
        """Membership of complete words only, prefixes do not count."""
        try:
            return queries.fetch(self._root, validate_word(word)).is_word  # type: ignore[arg-type]
        except (NotFound, ValueError):
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return self._root == other._root

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Trie(words={len(self)})"
