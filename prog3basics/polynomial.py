"""Polynomials in one variable with real coefficients."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest


class Polynomial:
    """Coefficients in increasing order: [a, b, c] is a + bx + cx^2."""

    def __init__(self, coefficients: Iterable[float]) -> None:
        self._coeffs = [float(c) for c in coefficients]
        if not self._coeffs:
            raise ValueError("a polynomial needs at least one coefficient")

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    @property
    def coefficients(self) -> tuple[float, ...]:
        return tuple(self._coeffs)

    def __getitem__(self, index: int) -> float:
        return self._coeffs[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._coeffs[index] = float(value)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            a + b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0.0)
        )

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            a - b for a, b in zip_longest(self._coeffs, other._coeffs, fillvalue=0.0)
        )

    def __mul__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = [0.0] * (self.degree + other.degree + 1)
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                result[i + j] += a * b
        return Polynomial(result)

    def __str__(self) -> str:
        terms = [
            f"{c:g}" if power == 0 else f"{c:g}x^{power}"
            for power, c in enumerate(self._coeffs)
        ]
        return "".join(f"{term} " for term in terms) + "\n"

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs!r})"


def evaluate(polynomial: Polynomial, value: float) -> float:
    """Value of the polynomial at the given point."""
    return sum(c * value**power for power, c in enumerate(polynomial.coefficients))