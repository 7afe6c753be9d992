"""Trie over ASCII letters that counts how many times each word was inserted."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    count: int = 0


def _letters(word: str) -> Iterator[str]:
    for ch in word:
        if ch == " ":
            continue
        if not (ch.isascii() and ch.isalpha()):
            raise ValueError(f"unsupported character {ch!r}")
        yield ch


class LetterTrie:
    """Word-count trie; spaces in words are ignored."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add one occurrence of word."""
        node = self._root
        for ch in _letters(word):
            node = node.children.setdefault(ch, _TrieNode())
        node.count += 1

    def search(self, word: str) -> int:
        """How many times word was inserted; a word with no letters yields 1."""
        node = self._root
        seen = False
        for ch in _letters(word):
            seen = True
            child = node.children.get(ch)
            if child is None:
                return 0
            node = child
        if not seen:
            return 1
        return node.count