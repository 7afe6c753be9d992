"""Prime sieves and trial-division factorisation."""

from __future__ import annotations

import math
from collections.abc import Sequence


def simple_sieve(limit: int) -> list[int]:
    """Primes below limit, by crossing out multiples of every number up to the root."""
    if limit <= 2:
        return []
    composite = bytearray(limit + 1)
    composite[0] = composite[1] = 1
    for i in range(2, math.isqrt(limit) + 1):
        if not composite[i]:
            composite[i * i:limit + 1:i] = bytes(len(range(i * i, limit + 1, i)))
            for j in range(i * i, limit + 1, i):
                composite[j] = 1
    return [n for n in range(2, limit) if not composite[n]]


def odd_sieve(limit: int) -> list[int]:
    """Primes below limit, sieving odd numbers only."""
    if limit <= 2:
        return []
    composite = bytearray(limit + 1)
    for i in range(3, math.isqrt(limit) + 1, 2):
        if not composite[i]:
            for j in range(i * i, limit + 1, 2 * i):
                composite[j] = 1
    return [2] + [n for n in range(3, limit, 2) if not composite[n]]


def _is_marked(marks: bytearray, number: int) -> bool:
    return bool(marks[number >> 4] & (1 << ((number & 15) >> 1)))


def _mark(marks: bytearray, number: int) -> None:
    marks[number >> 4] |= 1 << ((number & 15) >> 1)


def bitwise_sieve(limit: int) -> list[int]:
    """Primes up to and including limit, one bit per odd number."""
    if limit < 2:
        return []
    marks = bytearray((limit >> 4) + 1)
    for i in range(3, math.isqrt(limit) + 1, 2):
        if not _is_marked(marks, i):
            for j in range(i * i, limit + 1, 2 * i):
                _mark(marks, j)
    return [2] + [n for n in range(3, limit + 1, 2) if not _is_marked(marks, n)]


def segmented_sieve(lower: int, upper: int, primes: Sequence[int]) -> list[int]:
    """Primes in [lower, upper]; primes must hold every prime up to sqrt(upper)."""
    if lower < 1:
        raise ValueError("lower bound must be at least 1")
    if upper < lower:
        raise ValueError("upper bound must not be below lower bound")
    composite = bytearray(upper - lower + 1)
    if lower == 1:
        composite[0] = 1
    for prime in primes:
        if prime * prime > upper:
            break
        start = -(-lower // prime) * prime
        if start == prime:
            start += prime
        for multiple in range(start, upper + 1, prime):
            composite[multiple - lower] = 1
    return [lower + offset for offset, flag in enumerate(composite) if not flag]


def prime_factorization(n: int, primes: Sequence[int]) -> list[tuple[int, int]]:
    """Factor n into (prime, exponent) pairs using primes up to sqrt(n)."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: list[tuple[int, int]] = []
    for prime in primes:
        if prime * prime > n:
            break
        exponent = 0
        while n % prime == 0:
            n //= prime
            exponent += 1
        if exponent:
            factors.append((prime, exponent))
    if n > 1:
        factors.append((n, 1))
    return factors