"""Longest common substring of several strings by hashing and binary search."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from contestlib.hashing import DoubleHash


def common_substring_of_length(hashes: Iterable[DoubleHash], length: int) -> str:
    """A substring of the given length common to every hashed text, or "" if none."""
    if length < 0:
        raise ValueError("length must not be negative")
    hashes = list(hashes)
    full = (1 << len(hashes)) - 1
    seen1: defaultdict[int, int] = defaultdict(int)
    seen2: defaultdict[int, int] = defaultdict(int)
    for bit, hashed in enumerate(hashes):
        flag = 1 << bit
        for start in range(1, len(hashed.text) - length + 2):
            h1, h2 = hashed.substring_hash(start, start + length - 1)
            seen1[h1] |= flag
            seen2[h2] |= flag
            if seen1[h1] == full and seen2[h2] == full:
                return hashed.text[start - 1:start - 1 + length]
    return ""


def longest_common_substring(strings: Sequence[str]) -> str:
    """A longest string occurring as a substring of every given string."""
    if not strings:
        raise ValueError("at least one string is required")
    hashes = [DoubleHash(s) for s in strings]
    low, high = 0, min(len(s) for s in strings)
    answer = ""
    while low <= high:
        mid = (low + high) // 2
        found = common_substring_of_length(hashes, mid)
        if found:
            answer = found
            low = mid + 1
        else:
            high = mid - 1
    return answer