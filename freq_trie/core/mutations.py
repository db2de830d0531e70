# mutations.py
# Persistent mutation operations: every function returns a new root and
# leaves the node it was given untouched.

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from .errors import NotFound
from .node import Path, TrieNode
from .paths import Key, reattach, rebuild, resolve, to_path, validate_word
from .queries import word_count

logger = logging.getLogger(__name__)

Entry = Union[Key, Tuple[Key, int]]
PopResult = Tuple[Optional[TrieNode], TrieNode]


class _Pop:
    """Directive an updater returns to ask get_and_update to delete the path."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "POP"


POP = _Pop()

Updater = Callable[[Path], Union[Tuple[Any, TrieNode], _Pop]]


def _check_frequency(frequency: Any) -> int:
    if not isinstance(frequency, int) or isinstance(frequency, bool):
        raise TypeError(f"frequency must be an int, got {type(frequency).__name__}")
    return frequency


def _add_path(node: TrieNode, path: Path, frequency: int) -> TrieNode:
    def bump(terminal: TrieNode) -> TrieNode:
        total = terminal.frequency + frequency
        if total < 0:
            raise ValueError(
                f"frequency of {''.join(path)!r} would drop below zero ({total})"
            )
        return terminal.with_frequency(total)

    return rebuild(node, path, bump)


# insertion -----------------------------------------------------------------
def add(node: TrieNode, word: Key, frequency: int = 1) -> TrieNode:
    """
    Insert `word` below `node`, adding `frequency` to the count at its last
    character. Repeated inserts accumulate. The empty word bumps `node` itself.
    Raises InvalidKeyError for non-printable words.
    """
    path = validate_word(word)
    return _add_path(node, path, _check_frequency(frequency))


def _normalize_entry(entry: Entry) -> Tuple[Path, int]:
    if isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[1], int):
        word, frequency = entry
        return validate_word(word), _check_frequency(frequency)
    return validate_word(entry), 1


def add_all(node: TrieNode, entries: Iterable[Entry]) -> TrieNode:
    """
    Fold `add` over `entries`, in order. Each entry is a bare word (frequency 1)
    or a (word, frequency) pair, and any mix of the two is accepted, e.g.
    ["one", ("word", 2), ("another", 5), "day"].
    All entries are validated before the first insert.
    """
    normalized: List[Tuple[Path, int]] = [_normalize_entry(e) for e in entries]
    for path, frequency in normalized:
        node = _add_path(node, path, frequency)
    logger.debug("loaded %d entries", len(normalized))
    return node


def put_word(word: Key, frequency: int = 1) -> TrieNode:
    """New trie holding a single word."""
    return add(TrieNode(), word, frequency)


def put_words(entries: Iterable[Entry]) -> TrieNode:
    """New trie loaded from words and/or (word, frequency) pairs."""
    return add_all(TrieNode(), entries)


# deletion ------------------------------------------------------------------
def _pop_path(node: TrieNode, path: Path) -> PopResult:
    ancestors: List[TrieNode] = []
    current = node
    for ch in path[:-1]:
        child = current.children.get(ch)
        if child is None:
            return None, node
        ancestors.append(current)
        current = child
    popped = current.children.get(path[-1])
    if popped is None:
        return None, node
    return popped, reattach(ancestors, path[:-1], current.without_child(path[-1]))


def pop(node: TrieNode, key: Key) -> PopResult:
    """
    Detach the subtree at `key`. Returns (popped, modified).

    popped is the removed node (None if `key` does not resolve, in which case
    `node` itself comes back unchanged). Ancestors left childless with zero
    frequency are kept. The empty key returns (None, TrieNode()): an empty
    trie, not the original one.
    """
    path = to_path(key)
    if not path:
        return None, TrieNode()
    popped, modified = _pop_path(node, path)
    if popped is not None and logger.isEnabledFor(logging.DEBUG):
        logger.debug("popped %r (%d words)", "".join(path), word_count(popped))
    return popped, modified


# replacement ---------------------------------------------------------------
def get_and_update(node: TrieNode, key: Key, updater: Updater) -> Tuple[Any, TrieNode]:
    """
    Replace the node at `key` with whatever `updater` decides.

    updater(path) gets the key as a tuple of characters and returns either
    (old_value, new_node) or POP. With POP this is exactly `pop`. Otherwise
    new_node replaces the node at the path verbatim (no merging), missing
    intermediate nodes are created, and (old_value, new_root) is returned.
    old_value is passed through as given.
    """
    path = to_path(key)
    directive = updater(path)
    if directive is POP:
        return pop(node, path)
    if not (isinstance(directive, tuple) and len(directive) == 2):
        raise TypeError(f"updater must return (old_value, TrieNode) or POP, got {directive!r}")
    old_value, new_node = directive
    if not isinstance(new_node, TrieNode):
        raise TypeError(f"replacement must be a TrieNode, got {type(new_node).__name__}")
    logger.debug("replacing node at %r", "".join(path))
    return old_value, rebuild(node, path, lambda _current: new_node)


def put_in(node: TrieNode, key: Key, new_node: TrieNode) -> TrieNode:
    """Replace the node at `key` with `new_node`, returning the new root."""
    _, root = get_and_update(node, key, lambda _path: (None, new_node))
    return root


def update_in(
    node: TrieNode, key: Key, fn: Callable[[Optional[TrieNode]], TrieNode]
) -> TrieNode:
    """
    Replace the node at `key` with fn(current), where current is the existing
    node or None when the path does not exist yet.
    """
    path = to_path(key)

    def updater(p: Path) -> Tuple[Optional[TrieNode], TrieNode]:
        try:
            current: Optional[TrieNode] = resolve(node, p)
        except NotFound:
            current = None
        return current, fn(current)

    _, root = get_and_update(node, path, updater)
    return root
