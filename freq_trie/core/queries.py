# queries.py
# Read-only operations: path lookup, prefix search, enumeration and counting.

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, TypeVar

from .errors import NotFound
from .node import TrieNode
from .paths import Key, resolve, to_path

Word = str
Frequency = int
Candidate = Tuple[Word, Frequency]

T = TypeVar("T")


# lookup ----------------------------------------------------------------------
def fetch(node: TrieNode, key: Key) -> TrieNode:
    """Node at `key`. The empty key gives `node` back. Raises NotFound."""
    return resolve(node, to_path(key))


def get(node: TrieNode, key: Key, default: Optional[T] = None):
    """Like fetch, but returns `default` instead of raising for missing keys."""
    try:
        return fetch(node, key)
    except NotFound:
        return default


# enumeration ----------------------------------------------------------------
def _walk(node: TrieNode, prefix: str) -> Iterator[Candidate]:
    """DFS yielding (word, frequency) for every terminator at or under `node`."""
    stack: List[Tuple[TrieNode, str]] = [(node, prefix)]
    while stack:
        current, head = stack.pop()
        if current.key is not None:
            head += current.key
        if current.frequency > 0:
            yield head, current.frequency
        stack.extend((child, head) for child in current.children.values())


def items(node: TrieNode) -> Iterator[Candidate]:
    """
    Lazily yield (word, frequency) pairs. Words start with `node`'s own key
    unless `node` is a root. No particular order.
    """
    return _walk(node, "")


def iter_words(node: TrieNode) -> Iterator[Word]:
    for word, _ in _walk(node, ""):
        yield word


def words(node: TrieNode) -> List[Word]:
    """All complete words found under `node`. No particular order is guaranteed."""
    return list(iter_words(node))


def word_count(node: TrieNode) -> int:
    """
    Number of terminator nodes (frequency > 0) at or under `node`:
    distinct inserted words, not the sum of their frequencies.
    """
    total = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if current.frequency > 0:
            total += 1
        stack.extend(current.children.values())
    return total


# prefix search -------------------------------------------------------------
def _subtree(node: TrieNode, prefix: Key) -> Tuple[Optional[TrieNode], str]:
    path = to_path(prefix)
    try:
        sub = resolve(node, path)
    except NotFound:
        return None, ""
    # enumeration from `sub` already starts with its key
    return sub, "".join(path[:-1])


def search(node: TrieNode, prefix: Key) -> List[Word]:
    """
    All complete words starting with `prefix`, in no particular order.
    A prefix that does not resolve gives an empty list.
    """
    sub, head = _subtree(node, prefix)
    if sub is None:
        return []
    return [head + word for word in iter_words(sub)]


def search_ranked(
    node: TrieNode, prefix: Key, limit: Optional[int] = None
) -> List[Candidate]:
    """
    (word, frequency) matches for `prefix` ranked for autocompletion:
     - higher frequency first
     - lexicographically second
    Optionally truncated to `limit` entries.
    """
    sub, head = _subtree(node, prefix)
    if sub is None:
        return []
    out = [(head + word, freq) for word, freq in _walk(sub, "")]
    out.sort(key=lambda t: (-t[1], t[0]))
    if limit is not None:
        return out[:limit]
    return out
