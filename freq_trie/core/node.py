# node.py
# Immutable trie node. One character per node, frequency marks word ends.

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

Char = str
Path = Tuple[Char, ...]

_EMPTY: Mapping[Char, "TrieNode"] = MappingProxyType({})


class TrieNode:
    """
    A single node of the trie.
    key: the character this node stands for (None at the root)
    children: read-only mapping char -> TrieNode
    frequency: how many times the word ending here was inserted (0 = prefix only)

    Nodes never change after construction. "Mutating" helpers return a new
    node and reuse every child that did not change.
    """

    __slots__ = ("key", "children", "frequency")

    key: Optional[Char]
    children: Mapping[Char, "TrieNode"]
    frequency: int

    def __init__(
        self,
        key: Optional[Char] = None,
        children: Optional[Mapping[Char, "TrieNode"]] = None,
        frequency: int = 0,
    ) -> None:
        if frequency < 0:
            raise ValueError(f"frequency must be non-negative, got {frequency}")
        object.__setattr__(self, "key", key)
        object.__setattr__(
            self, "children", MappingProxyType(dict(children)) if children else _EMPTY
        )
        object.__setattr__(self, "frequency", frequency)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # copy helpers ---------------------------------------------------------
    def with_frequency(self, frequency: int) -> "TrieNode":
        return TrieNode(self.key, self.children, frequency)

    def with_child(self, child: "TrieNode", char: Optional[Char] = None) -> "TrieNode":
        """Copy of this node with `child` placed under `char` (default: child.key)."""
        char = child.key if char is None else char
        children: Dict[Char, TrieNode] = dict(self.children)
        children[char] = child
        return TrieNode(self.key, children, self.frequency)

    def without_child(self, char: Char) -> "TrieNode":
        children = dict(self.children)
        del children[char]
        return TrieNode(self.key, children, self.frequency)

    # inspection ------------------------------------------------------------
    @property
    def is_word(self) -> bool:
        return self.frequency > 0

    @property
    def is_root(self) -> bool:
        return self.key is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        # pairwise walk with a stack, shared subtrees are skipped
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if (
                a.key != b.key
                or a.frequency != b.frequency
                or a.children.keys() != b.children.keys()
            ):
                return False
            stack.extend((child, b.children[ch]) for ch, child in a.children.items())
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"TrieNode(key={self.key!r}, frequency={self.frequency}, "
            f"children={sorted(self.children)!r})"
        )
