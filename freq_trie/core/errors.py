# errors.py
# Exception types raised by the trie engine.

from __future__ import annotations

from typing import Tuple


class TrieError(Exception):
    """Base class for every error raised by freq_trie."""


class InvalidKeyError(TrieError, ValueError):
    """
    A word or key could not be turned into a character path, or it contains
    non-printable characters and cannot be stored as a word.
    """


class NotFound(TrieError, KeyError):
    """A read-only lookup did not resolve the full path."""

    def __init__(self, path: Tuple[str, ...]) -> None:
        self.path = tuple(path)
        super().__init__("".join(self.path))

    def __str__(self) -> str:
        return f"no node at path {''.join(self.path)!r}"
