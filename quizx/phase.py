"""Phases measured in half-turns, kept as exact rationals in the range (-1, 1]."""

from __future__ import annotations

from fractions import Fraction
from typing import Union

PhaseLike = Union["Phase", Fraction, int, float, tuple]


def limit_denominator(fraction: Fraction, max_denom: int) -> Fraction:
    """Return the closest fraction to ``fraction`` whose denominator is at most ``max_denom``.

    Raises ``ValueError`` if ``max_denom`` is not greater than 1.
    """
    if max_denom <= 1:
        raise ValueError("max_denom must be greater than 1")

    fraction = Fraction(fraction)
    if fraction.denominator <= max_denom:
        return fraction

    p0, q0, p1, q1 = 0, 1, 1, 0
    n, d = fraction.numerator, fraction.denominator
    while True:
        a = n // d
        q2 = q0 + a * q1
        if q2 > max_denom:
            break
        p0, q0, p1, q1 = p1, q1, p0 + a * p1, q2
        n, d = d, n - a * d

    k = (max_denom - q0) // q1
    if 2 * d * (q0 + k * q1) <= fraction.denominator:
        return Fraction(p1, q1)
    return Fraction(p0 + k * p1, q0 + k * q1)


def _to_fraction(value: PhaseLike) -> Fraction:
    if isinstance(value, Phase):
        return value.to_rational()
    if isinstance(value, tuple):
        numer, denom = value
        return Fraction(numer, denom)
    if isinstance(value, (Fraction, int, float)):
        return Fraction(value)
    raise TypeError(f"cannot interpret {value!r} as a phase")


class Phase:
    """A phase in half-turns, normalised to lie in the range (-1, 1]."""

    __slots__ = ("_r",)

    def __init__(self, value: PhaseLike = 0) -> None:
        self._r = _to_fraction(value)
        self._r = self.normalize()._r

    @classmethod
    def _raw(cls, r: Fraction) -> "Phase":
        phase = object.__new__(cls)
        phase._r = r
        return phase

    @classmethod
    def from_float(cls, f: float) -> "Phase":
        """Build a phase from a floating point number of half-turns."""
        return cls(Fraction(f))

    @classmethod
    def zero(cls) -> "Phase":
        return cls(0)

    @classmethod
    def one(cls) -> "Phase":
        return cls(1)

    def to_rational(self) -> Fraction:
        return self._r

    def to_float(self) -> float:
        return float(self._r)

    def normalize(self) -> "Phase":
        """Return the equivalent phase in (-1, 1], shifting by multiples of 2."""
        denom = self._r.denominator
        num = self._r.numerator
        if -denom < num <= denom:
            return Phase._raw(self._r)
        num %= 2 * denom
        if num > denom:
            num -= 2 * denom
        return Phase._raw(Fraction(num, denom))

    def is_zero(self) -> bool:
        return self._r == 0

    def is_one(self) -> bool:
        return self._r == 1

    def is_clifford(self) -> bool:
        """True if the phase is a multiple of 1/2."""
        return self._r.denominator <= 2

    def is_proper_clifford(self) -> bool:
        """True if the phase is 1/2 or -1/2."""
        return self._r in (Fraction(1, 2), Fraction(-1, 2))

    def is_pauli(self) -> bool:
        """True if the phase is 0 or 1."""
        return self.is_zero() or self.is_one()

    def is_t(self) -> bool:
        """True if the phase is a non-Clifford multiple of 1/4."""
        return self._r.denominator == 4

    def limit_denominator(self, max_denom: int) -> "Phase":
        return Phase(limit_denominator(self._r, max_denom))

    def __neg__(self) -> "Phase":
        return Phase(-self._r)

    def __add__(self, other: PhaseLike) -> "Phase":
        return Phase(self._r + _to_fraction(other))

    __radd__ = __add__

    def __sub__(self, other: PhaseLike) -> "Phase":
        return Phase(self._r - _to_fraction(other))

    def __rsub__(self, other: PhaseLike) -> "Phase":
        return Phase(_to_fraction(other) - self._r)

    def __mul__(self, other: PhaseLike) -> "Phase":
        return Phase(self._r * _to_fraction(other))

    __rmul__ = __mul__

    def __truediv__(self, other: PhaseLike) -> "Phase":
        return Phase(self._r / _to_fraction(other))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Phase):
            return self._r == other._r
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._r)

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return str(self._r)

    def __repr__(self) -> str:
        return f"Phase({self._r})"