"""Integer fractions reduced by their greatest common divisor."""

from __future__ import annotations

import math


class Fraction:
    """A numerator over a denominator; results of arithmetic are reduced."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 1, denominator: int = 1) -> None:
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __add__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        if self._denominator == other._denominator:
            return simplify(self._numerator + other._numerator, self._denominator)
        return simplify(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __sub__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        if self._denominator == other._denominator:
            return simplify(self._numerator - other._numerator, self._denominator)
        return simplify(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __mul__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return simplify(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __truediv__(self, other: Fraction) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        return simplify(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._numerator * other._denominator == self._denominator * other._numerator

    __hash__ = None  # equality is by cross-multiplication

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"


def simplify(numerator: int, denominator: int) -> Fraction:
    """Divide both parts by their greatest common divisor.

    Raises ZeroDivisionError when both parts are zero.
    """
    divisor = math.gcd(numerator, denominator)
    if divisor == 0:
        raise ZeroDivisionError("cannot simplify 0/0")
    return Fraction(numerator // divisor, denominator // divisor)