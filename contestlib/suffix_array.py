"""Cyclic-shift suffix array and substring search over it."""

from __future__ import annotations

from itertools import pairwise


def build_suffix_array(text: str) -> list[int]:
    """Start indices of the cyclic shifts of text in sorted order."""
    n = len(text)
    if n == 0:
        return []
    order = sorted(range(n), key=lambda i: (text[i], -i))
    classes = [0] * n
    for prev, cur in pairwise(order):
        classes[cur] = classes[prev] + (text[cur] != text[prev])
    shift = 1
    while shift < n:
        shifted = [(start - shift) % n for start in order]
        order = sorted(shifted, key=classes.__getitem__)
        updated = [0] * n
        for prev, cur in pairwise(order):
            current = (classes[cur], classes[(cur + shift) % n])
            previous = (classes[prev], classes[(prev + shift) % n])
            updated[cur] = updated[prev] + (current != previous)
        classes = updated
        shift <<= 1
    return order


class SubstringIndex:
    """Answers whether a pattern occurs in a text, by binary search on its suffix array."""

    def __init__(self, text: str) -> None:
        self.text = text + "$"
        self.suffixes = build_suffix_array(self.text)

    def _compare(self, start: int, pattern: str) -> int:
        segment = self.text[start:start + len(pattern)]
        return (segment > pattern) - (segment < pattern)

    def contains(self, pattern: str) -> bool:
        """True when pattern is a substring of the indexed text."""
        low, high = 0, len(self.suffixes) - 1
        while low <= high:
            mid = (low + high) // 2
            outcome = self._compare(self.suffixes[mid], pattern)
            if outcome == 0:
                return True
            if outcome < 0:
                low = mid + 1
            else:
                high = mid - 1
        return False