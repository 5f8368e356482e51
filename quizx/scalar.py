"""Exact scalars in the ring generated by the 8th roots of unity over dyadic rationals."""

from __future__ import annotations

import copy
import math
from fractions import Fraction
from typing import Iterable, List, Optional, Tuple, Union

from quizx.dyadic import Dyadic
from quizx.phase import Phase, PhaseLike

SQRT_2 = math.sqrt(2.0)

_Coeff = Union[Dyadic, int, float]


def _as_dyadic(c: _Coeff) -> Dyadic:
    if isinstance(c, Dyadic):
        return copy.copy(c)
    if isinstance(c, int):
        return Dyadic(c, 0)
    if isinstance(c, float):
        return Dyadic.from_float(c)
    raise TypeError(f"cannot use {c!r} as a scalar coefficient")


class Scalar4:
    """A complex number ``a + b ω + c ω² + d ω³`` with ω = exp(i π/4).

    The coefficients are dyadic rationals, so every scalar arising from a
    Clifford+T diagram is represented exactly. Other complex numbers are
    stored approximately as ``a + c ω² = a + i c``.
    """

    __slots__ = ("_coeffs",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, coeffs: Iterable[_Coeff]) -> None:
        values = [_as_dyadic(c) for c in coeffs]
        if len(values) != 4:
            raise ValueError("a Scalar4 needs exactly four coefficients")
        self._coeffs: List[Dyadic] = values

    @property
    def coeffs(self) -> Tuple[Dyadic, ...]:
        return tuple(self._coeffs)

    @classmethod
    def new(cls, coeffs: Iterable[int], pow: int) -> "Scalar4":
        """Build ``2**pow * (a + b ω + c ω² + d ω³)`` from integer coefficients."""
        return cls(Dyadic(c, pow) for c in coeffs)

    @classmethod
    def real(cls, r: float) -> "Scalar4":
        return cls([float(r), 0, 0, 0])

    @classmethod
    def complex(cls, re: float, im: float) -> "Scalar4":
        return cls([float(re), 0, float(im), 0])

    @classmethod
    def from_complex(cls, value: complex) -> "Scalar4":
        value = complex(value)
        return cls([value.real, 0.0, value.imag, 0.0])

    @classmethod
    def zero(cls) -> "Scalar4":
        return cls([0, 0, 0, 0])

    @classmethod
    def one(cls) -> "Scalar4":
        return cls([1, 0, 0, 0])

    @classmethod
    def minus_one(cls) -> "Scalar4":
        return cls([-1, 0, 0, 0])

    @classmethod
    def sqrt2_pow(cls, p: int) -> "Scalar4":
        """The ``p``-th power of sqrt(2), exactly."""
        if p % 2 == 0:
            return cls([Dyadic(1, p // 2), 0, 0, 0])
        d = Dyadic(1, (p - 1) // 2)
        return cls([0, d, 0, -d])

    @classmethod
    def sqrt2(cls) -> "Scalar4":
        return cls.sqrt2_pow(1)

    @classmethod
    def one_over_sqrt2(cls) -> "Scalar4":
        return cls.sqrt2_pow(-1)

    @classmethod
    def from_phase(cls, phase: PhaseLike) -> "Scalar4":
        """The scalar ``exp(i π phase)``; exact when the phase is a multiple of 1/4."""
        r: Fraction = Phase(phase).to_rational()
        if 4 % r.denominator == 0:
            pos = (r.numerator * (4 // r.denominator)) % 8
            coeffs = [0, 0, 0, 0]
            if pos >= 4:
                coeffs[pos - 4] = -1
            else:
                coeffs[pos] = 1
            return cls(coeffs)
        angle = math.pi * float(r)
        return cls([math.cos(angle), 0.0, math.sin(angle), 0.0])

    @classmethod
    def one_plus_phase(cls, phase: PhaseLike) -> "Scalar4":
        """The scalar ``1 + exp(i π phase)``."""
        return cls.one() + cls.from_phase(phase)

    def mul_sqrt2_pow(self, p: int) -> None:
        """Multiply in place by sqrt(2) to the power ``p``."""
        self._coeffs = (self * Scalar4.sqrt2_pow(p))._coeffs

    def mul_phase(self, phase: PhaseLike) -> None:
        """Multiply in place by ``exp(i π phase)``."""
        self._coeffs = (self * Scalar4.from_phase(phase))._coeffs

    def mul_one_plus_phase(self, phase: PhaseLike) -> None:
        """Multiply in place by ``1 + exp(i π phase)``."""
        self._coeffs = (self * Scalar4.one_plus_phase(phase))._coeffs

    def conj(self) -> "Scalar4":
        a, b, c, d = self._coeffs
        return Scalar4([a, -d, -c, -b])

    def complex_value(self) -> complex:
        """Convert to a Python complex; raises DyadicExponentOverflowError if out of range."""
        a, b, c, d = self._coeffs
        re = a.to_float() + (b - d).to_float() * 0.5 * SQRT_2
        im = c.to_float() + (b + d).to_float() * 0.5 * SQRT_2
        return complex(re, im)

    def __complex__(self) -> complex:
        return self.complex_value()

    def approx(self) -> bool:
        return any(c.approx() for c in self._coeffs)

    def set_approx(self, approx: bool) -> None:
        for c in self._coeffs:
            c.set_approx(approx)

    def is_zero(self) -> bool:
        return all(c.is_zero() for c in self._coeffs)

    def is_one(self) -> bool:
        return self == Scalar4.one()

    def _num_coeffs(self) -> int:
        return sum(1 for c in self._coeffs if not c.is_zero())

    def exact_phase_and_sqrt2_pow(self) -> Optional[Tuple[Phase, int]]:
        """Return ``(k/4, p)`` if the scalar is exactly ``exp(i k π/4) * sqrt(2)**p``."""
        s = Scalar4(self._coeffs)
        if s._num_coeffs() != 1:
            p = -1
            s = s * Scalar4.sqrt2()
            if s._num_coeffs() != 1:
                return None
        else:
            p = 0

        i, c = next((i, c) for i, c in enumerate(s._coeffs) if not c.is_zero())
        if c.val() == 1:
            return (Phase(Fraction(i, 4)), c.exp() * 2 + p)
        if c.val() == -1:
            return (Phase(Fraction(i + 4, 4)), c.exp() * 2 + p)
        return None

    def abs_diff_eq(self, other: "Scalar4", epsilon: float = 1e-10) -> bool:
        """Compare the complex values of two scalars up to ``epsilon`` in each part."""
        c1 = self.complex_value()
        c2 = other.complex_value()
        return abs(c1.real - c2.real) <= epsilon and abs(c1.imag - c2.imag) <= epsilon

    def __add__(self, other: object) -> "Scalar4":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar4(a + b for a, b in zip(self._coeffs, rhs._coeffs))

    def __radd__(self, other: object) -> "Scalar4":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> "Scalar4":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Scalar4(a - b for a, b in zip(self._coeffs, rhs._coeffs))

    def __rsub__(self, other: object) -> "Scalar4":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Scalar4":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        out = [Dyadic.zero() for _ in range(4)]
        for i, a in enumerate(self._coeffs):
            if a.is_zero():
                continue
            for j, b in enumerate(rhs._coeffs):
                pos = i + j
                if pos < 4:
                    out[pos] = out[pos] + a * b
                else:
                    out[pos - 4] = out[pos - 4] + (-a) * b
        return Scalar4(out)

    def __rmul__(self, other: object) -> "Scalar4":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar4):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __str__(self) -> str:
        parts: List[str] = []
        suffixes = ("", " ω", " ω²", " ω³")
        for i, dy in enumerate(self._coeffs):
            v, e = dy.val_and_exp()
            if -1024 < v < 1024 and 0 < e <= 10:
                v *= 2**e
                e = 0
            if v == 0:
                continue
            if not parts:
                text = f"{v}"
            elif v > 0:
                text = f" + {v}"
            else:
                text = f" - {-v}"
            if e != 0:
                text += f"e{e}"
            parts.append(text + suffixes[i])
        return "".join(parts) if parts else "0"

    def __repr__(self) -> str:
        return f"Scalar4({self})"


def _coerce(value: object) -> Optional[Scalar4]:
    if isinstance(value, Scalar4):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Scalar4([value, 0, 0, 0])
    if isinstance(value, float):
        return Scalar4([value, 0.0, 0.0, 0.0])
    if isinstance(value, complex):
        return Scalar4.from_complex(value)
    return None