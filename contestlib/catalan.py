"""Modular binomial coefficients and Catalan numbers."""

from __future__ import annotations

MOD = 100000007


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """base ** exponent modulo modulus."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return pow(base, exponent, modulus)


def modular_inverse(value: int, modulus: int) -> int:
    """Inverse of value modulo a prime modulus, by Fermat's little theorem."""
    if value % modulus == 0:
        raise ValueError(f"{value} has no inverse modulo {modulus}")
    return power_mod(value, modulus - 2, modulus)


class BinomialTable:
    """Factorials below limit, modulo a prime, for binomials and Catalan numbers."""

    def __init__(self, limit: int, modulus: int = MOD) -> None:
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self.modulus = modulus
        self._factorials = [1] * limit
        for i in range(1, limit):
            self._factorials[i] = self._factorials[i - 1] * i % modulus

    def n_choose_r(self, n: int, r: int) -> int:
        """C(n, r) modulo the table's modulus; zero when r lies outside 0..n."""
        if not 0 <= n < self.limit:
            raise ValueError(f"n={n} outside the table (limit {self.limit})")
        if not 0 <= r <= n:
            return 0
        denominator = self._factorials[r] * self._factorials[n - r] % self.modulus
        return self._factorials[n] * modular_inverse(denominator, self.modulus) % self.modulus

    def catalan(self, n: int) -> int:
        """The n-th Catalan number modulo the table's modulus."""
        if n < 0:
            raise ValueError("n must not be negative")
        central = self.n_choose_r(2 * n, n)
        return central * modular_inverse(n + 1, self.modulus) % self.modulus