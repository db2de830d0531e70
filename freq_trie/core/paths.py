# paths.py
# Path traversal engine shared by every trie operation.
# A key (str, bytes or a sequence of characters / code points) is normalized
# to a tuple of characters, then walked one level at a time from a node.

from __future__ import annotations

from typing import Callable, Iterable, List, Union

from .errors import InvalidKeyError, NotFound
from .node import Char, Path, TrieNode

Key = Union[str, bytes, bytearray, Iterable[Union[str, int]]]

# control characters accepted as printable in words (common escapes)
_PRINTABLE_ESCAPES = frozenset("\n\r\t\v\b\f\x1b\x7f\x07")


def _to_char(item: Union[str, int]) -> Char:
    if isinstance(item, str):
        if len(item) != 1:
            raise InvalidKeyError(f"path elements must be single characters, got {item!r}")
        return item
    if isinstance(item, int) and not isinstance(item, bool):
        try:
            return chr(item)
        except (ValueError, OverflowError) as e:
            raise InvalidKeyError(f"invalid code point {item!r}") from e
    raise InvalidKeyError(f"unsupported path element {item!r}")


def to_path(key: Key) -> Path:
    """
    Normalize a key into a tuple of characters.
    "abc", b"abc", ["a", "b", "c"] and [97, 98, 99] all give ("a", "b", "c").
    """
    if isinstance(key, str):
        return tuple(key)
    if isinstance(key, (bytes, bytearray)):
        try:
            return tuple(bytes(key).decode("utf-8"))
        except UnicodeDecodeError as e:
            raise InvalidKeyError(f"key is not valid UTF-8: {key!r}") from e
    try:
        items = iter(key)
    except TypeError:
        raise InvalidKeyError(f"unsupported key type {type(key).__name__}") from None
    return tuple(_to_char(item) for item in items)


def is_printable(ch: Char) -> bool:
    return ch.isprintable() or ch in _PRINTABLE_ESCAPES


def validate_word(word: Key) -> Path:
    """Normalize `word` and reject it if any character is non-printable."""
    path = to_path(word)
    for ch in path:
        if not is_printable(ch):
            raise InvalidKeyError(
                f"word {''.join(path)!r} contains non-printable character {ch!r}"
            )
    return path


def resolve(node: TrieNode, path: Path) -> TrieNode:
    """
    Walk `path` down from `node` and return the node at its end.
    The empty path resolves to `node` itself. Raises NotFound on a missing step.
    """
    current = node
    for ch in path:
        child = current.children.get(ch)
        if child is None:
            raise NotFound(path)
        current = child
    return current


def resolve_or_create(node: TrieNode, char: Char) -> TrieNode:
    """Child of `node` under `char`, or a fresh empty node keyed `char`."""
    child = node.children.get(char)
    if child is None:
        return TrieNode(key=char)
    return child


def reattach(ancestors: List[TrieNode], path: Path, node: TrieNode) -> TrieNode:
    """
    Copy each ancestor bottom-up so it points at the rebuilt child below it.
    ancestors[i] is the parent reached before stepping through path[i].
    """
    for parent, ch in zip(reversed(ancestors), reversed(path)):
        node = parent.with_child(node, ch)
    return node


def rebuild(node: TrieNode, path: Path, fn: Callable[[TrieNode], TrieNode]) -> TrieNode:
    """
    Path copying: apply `fn` to the node at `path` (creating missing nodes on
    the way down) and return a new `node` whose ancestors along the path are
    copies pointing at the updated child. Everything off the path is shared.
    """
    ancestors: List[TrieNode] = []
    current = node
    for ch in path:
        ancestors.append(current)
        current = resolve_or_create(current, ch)
    return reattach(ancestors, path, fn(current))
