"""Polynomial string hashing: double hashes, a single modular hash and Rabin-Karp."""

from __future__ import annotations

MOD1 = 2018331097
MOD2 = 1000004119
BASE1 = 1021
BASE2 = 2017

SINGLE_BASE = 153
SINGLE_MOD = 1000000009

RABIN_KARP_BASE = 31
RABIN_KARP_MOD = 10**9 + 9


def _letter_id(ch: str) -> int:
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 1
    return ord(ch) - ord("A") + 27


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


class DoubleHash:
    """Prefix hashes of a text under two moduli; substring positions are 1-based."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._prefix1 = [0]
        self._prefix2 = [0]
        self._pow1 = [1]
        self._pow2 = [1]
        for ch in text:
            value = _letter_id(ch)
            self._prefix1.append((BASE1 * self._prefix1[-1] + value) % MOD1)
            self._prefix2.append((BASE2 * self._prefix2[-1] + value) % MOD2)
            self._pow1.append(self._pow1[-1] * BASE1 % MOD1)
            self._pow2.append(self._pow2[-1] * BASE2 % MOD2)

    def hash_of(self, text: str) -> tuple[int, int]:
        """Hash pair of an arbitrary string, comparable with substring_hash."""
        h1 = h2 = 0
        for ch in text:
            value = _letter_id(ch)
            h1 = (BASE1 * h1 + value) % MOD1
            h2 = (BASE2 * h2 + value) % MOD2
        return h1, h2

    def _check(self, left: int, right: int) -> None:
        if not (1 <= left and left - 1 <= right <= len(self.text)):
            raise ValueError(f"invalid range [{left}, {right}] for length {len(self.text)}")

    def substring_hash(self, left: int, right: int) -> tuple[int, int]:
        """Hash pair of text[left..right], inclusive and 1-based."""
        self._check(left, right)
        length = right - left + 1
        h1 = (self._prefix1[right] - self._prefix1[left - 1] * self._pow1[length]) % MOD1
        h2 = (self._prefix2[right] - self._prefix2[left - 1] * self._pow2[length]) % MOD2
        return h1, h2

    def compare_substrings(self, left1: int, right1: int, left2: int, right2: int) -> int:
        """-1, 0 or 1 as text[left1..right1] is below, equal to or above text[left2..right2]."""
        self._check(left1, right1)
        self._check(left2, right2)
        len1 = right1 - left1 + 1
        len2 = right2 - left2 + 1
        shortest = min(len1, len2)
        low, high = 0, shortest
        equal = 0
        while low <= high:
            mid = (low + high) // 2
            if self.substring_hash(left1, left1 + mid - 1) == self.substring_hash(
                left2, left2 + mid - 1
            ):
                equal = mid
                low = mid + 1
            else:
                high = mid - 1
        if equal == shortest:
            return (len1 > len2) - (len1 < len2)
        if self.text[left1 + equal - 1] < self.text[left2 + equal - 1]:
            return -1
        return 1


def find_occurrences(text: str, pattern: str) -> list[int]:
    """1-based starting positions of pattern in text, found with double hashing."""
    _require_pattern(pattern)
    hashed = DoubleHash(text)
    target = hashed.hash_of(pattern)
    width = len(pattern)
    return [
        start
        for start in range(1, len(text) - width + 2)
        if hashed.substring_hash(start, start + width - 1) == target
    ]


class PolynomialHash:
    """Single-modulus prefix hashes of a text; substring positions are 1-based."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._powers = [1]
        self._prefix = [0]
        for ch in text:
            self._powers.append(self._powers[-1] * SINGLE_BASE % SINGLE_MOD)
            self._prefix.append((self._prefix[-1] + ord(ch) * self._powers[-1]) % SINGLE_MOD)
        self.value = self._prefix[-1]

    def substring_hash(self, left: int, right: int) -> int:
        """Hash of text[left..right], scaled to match the hash of that string alone."""
        if not (1 <= left and left - 1 <= right <= len(self.text)):
            raise ValueError(f"invalid range [{left}, {right}] for length {len(self.text)}")
        difference = self._prefix[right] - self._prefix[left - 1]
        inverse = pow(self._powers[left - 1], SINGLE_MOD - 2, SINGLE_MOD)
        return difference * inverse % SINGLE_MOD


def single_hash_occurrences(text: str, pattern: str) -> list[int]:
    """0-based starting positions of pattern in text, found with a single hash."""
    _require_pattern(pattern)
    needed = PolynomialHash(pattern).value
    hashed = PolynomialHash(text)
    width = len(pattern)
    return [
        start
        for start in range(len(text) - width + 1)
        if hashed.substring_hash(start + 1, start + width) == needed
    ]


def rabin_karp(pattern: str, text: str) -> list[int]:
    """0-based starting positions of pattern in text by the Rabin-Karp method."""
    _require_pattern(pattern)
    powers = [1]
    for _ in range(max(len(pattern), len(text)) - 1):
        powers.append(powers[-1] * RABIN_KARP_BASE % RABIN_KARP_MOD)

    def value(ch: str) -> int:
        return ord(ch) - ord("a") + 1

    prefix = [0]
    for ch, power in zip(text, powers):
        prefix.append((prefix[-1] + value(ch) * power) % RABIN_KARP_MOD)
    pattern_hash = sum(value(ch) * power for ch, power in zip(pattern, powers)) % RABIN_KARP_MOD

    width = len(pattern)
    return [
        start
        for start in range(len(text) - width + 1)
        if (prefix[start + width] - prefix[start]) % RABIN_KARP_MOD
        == pattern_hash * powers[start] % RABIN_KARP_MOD
    ]