"""Dyadic rationals: numbers of the form ``val * 2**exp`` with a 64-bit mantissa.

A dyadic behaves much like a floating point number, but its precision is
controlled explicitly and it records whether any rounding has happened.
"""

from __future__ import annotations

import struct
from functools import total_ordering
from typing import Optional, Tuple

_MANTISSA_BITS = 64
_MANTISSA_MASK = (1 << _MANTISSA_BITS) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1

_SIGN = 0x01
_APPROX = 0x02

_F64_MIN_EXP = -1021
_F64_MAX_EXP = 1024


class DyadicExponentOverflowError(OverflowError):
    """The exponent is too small or too large for the destination type."""

    def __init__(self, message: str = "exponent is too small or large for destination type"):
        super().__init__(message)


def _trailing_zeros(v: int) -> int:
    if v == 0:
        return _MANTISSA_BITS
    return (v & -v).bit_length() - 1


def _leading_zeros(v: int) -> int:
    return _MANTISSA_BITS - v.bit_length()


def _as_i64(v: int) -> int:
    """Reinterpret an unsigned 64-bit value as a signed one."""
    v &= _MANTISSA_MASK
    return v - (1 << _MANTISSA_BITS) if v > _I64_MAX else v


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


@total_ordering
class Dyadic:
    """A signed 64-bit mantissa with a binary exponent and an approximation flag."""

    __slots__ = ("_flags", "_exp", "_val")

    def __init__(self, val: int = 0, exp: int = 0) -> None:
        if not _I64_MIN <= val <= _I64_MAX:
            raise ValueError(f"mantissa {val} does not fit in 64 signed bits")
        if val < 0:
            self._flags = _SIGN
            self._val = -val
        else:
            self._flags = 0
            self._val = val
        self._exp = exp
        self._normalize()

    @classmethod
    def _raw(cls, flags: int, exp: int, val: int) -> "Dyadic":
        d = object.__new__(cls)
        d._flags = flags
        d._exp = exp
        d._val = val
        return d

    def _copy(self) -> "Dyadic":
        return Dyadic._raw(self._flags, self._exp, self._val)

    @classmethod
    def zero(cls) -> "Dyadic":
        return cls._raw(0, 0, 0)

    @classmethod
    def from_float(cls, value: float) -> "Dyadic":
        """Convert a float losslessly; the result is marked approximate."""
        (bits,) = struct.unpack(">Q", struct.pack(">d", float(value)))
        negative = bool(bits >> 63)
        biased = (bits >> 52) & 0x7FF
        frac = bits & 0xFFFFFFFFFFFFF
        if biased == 0:
            mantissa = frac << 1
        else:
            mantissa = frac | 0x10000000000000
        exponent = biased - 1075
        d = cls._raw((_SIGN if negative else 0) | _APPROX, exponent, mantissa)
        d._normalize()
        return d

    def to_float(self) -> float:
        """Convert to a float, raising DyadicExponentOverflowError if out of range."""
        if not _F64_MIN_EXP <= self._exp <= _F64_MAX_EXP:
            raise DyadicExponentOverflowError()
        v, e = self.val_and_exp()
        try:
            scale = 2.0**e
        except OverflowError:
            scale = float("inf")
        return float(v) * scale

    def __float__(self) -> float:
        return self.to_float()

    def sign(self) -> bool:
        """True if the number is negative."""
        return self._flags & _SIGN == _SIGN

    def approx(self) -> bool:
        """True if the value may have been rounded."""
        return self._flags & _APPROX == _APPROX

    def set_approx(self, approx: bool) -> None:
        if approx:
            self._flags |= _APPROX
        else:
            self._flags &= ~_APPROX & 0xFF

    def val_and_exp(self) -> Tuple[int, int]:
        """Return ``(v, e)`` with ``v`` odd (or zero) and the value equal to ``v * 2**e``."""
        if self.is_zero():
            return (0, 0)
        shift = _trailing_zeros(self._val)
        v = _as_i64(self._val >> shift)
        return (-v if self.sign() else v, self._exp + shift)

    def val(self) -> int:
        shift = _trailing_zeros(self._val) % _MANTISSA_BITS
        v = _as_i64(self._val >> shift)
        return -v if self.sign() else v

    def exp(self) -> int:
        if self.is_zero():
            return 0
        return self._exp + _trailing_zeros(self._val)

    def is_zero(self) -> bool:
        return self._val == 0

    def _normalize(self) -> None:
        if self._val == 0:
            self._exp = 0
            self._flags &= ~_SIGN & 0xFF
        else:
            head = _leading_zeros(self._val)
            self._exp -= head
            self._val = (self._val << head) & _MANTISSA_MASK

    def abs(self) -> "Dyadic":
        d = self._copy()
        d._flags &= ~_SIGN & 0xFF
        return d

    __abs__ = abs

    def abs_diff_eq(self, other: "Dyadic", epsilon: Optional["Dyadic"] = None) -> bool:
        """True if ``|self - other| < epsilon`` (default ``2**-100``)."""
        if epsilon is None:
            epsilon = Dyadic(1, -100)
        return (self - other).abs() < epsilon

    def _order(self, other: "Dyadic") -> int:
        if self.sign() != other.sign():
            ordering = 1
        elif self._exp == other._exp:
            ordering = _cmp(self._val, other._val)
        else:
            ordering = _cmp(self._exp, other._exp)
        return -ordering if self.sign() else ordering

    def __neg__(self) -> "Dyadic":
        d = self._copy()
        if d._val != 0:
            d._flags ^= _SIGN
        return d

    def __add__(self, other: "Dyadic") -> "Dyadic":
        if not isinstance(other, Dyadic):
            return NotImplemented
        if self._val == 0:
            return other._copy()
        if other._val == 0:
            return self._copy()

        s = self._copy()
        r = other._copy()

        if s._exp > r._exp:
            shift = s._exp - r._exp
            if _trailing_zeros(r._val) < shift:
                s._flags |= _APPROX
            r._val = 0 if shift >= _MANTISSA_BITS else r._val >> shift
        elif r._exp > s._exp:
            shift = r._exp - s._exp
            if _trailing_zeros(s._val) < shift:
                s._flags |= _APPROX
            s._val = 0 if shift >= _MANTISSA_BITS else s._val >> shift
            s._exp = r._exp
        else:
            shift = 0

        if s.sign() != r.sign():
            if s._val > r._val:
                s._val -= r._val
                s._flags |= r._flags & _APPROX
                s._normalize()
            elif s._val < r._val:
                s._val = r._val - s._val
                s._flags = r._flags | (s._flags & _APPROX)
                s._normalize()
            else:
                s._val = 0
                s._exp = 0
                s._flags = (s._flags & _APPROX) | (r._flags & _APPROX)
        else:
            overflow = shift == 0
            if not overflow:
                total = s._val + r._val
                if total > _MANTISSA_MASK:
                    overflow = True
                else:
                    s._val = total
            if overflow:
                if s._val & 1 or r._val & 1:
                    s._flags |= _APPROX
                s._val = (s._val >> 1) + (r._val >> 1)
                s._exp += 1
            s._flags |= r._flags & _APPROX

        return s

    def __sub__(self, other: "Dyadic") -> "Dyadic":
        if not isinstance(other, Dyadic):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: "Dyadic") -> "Dyadic":
        if not isinstance(other, Dyadic):
            return NotImplemented
        if self.is_zero():
            return self._copy()
        if other.is_zero():
            return other._copy()

        d = self._copy()
        d._exp += other._exp
        d._flags |= other._flags & _APPROX
        d._flags ^= other._flags & _SIGN

        v = self._val * other._val
        lead = 2 * _MANTISSA_BITS - v.bit_length()
        if lead < _MANTISSA_BITS:
            shift = _MANTISSA_BITS - lead
            if _trailing_zeros_wide(v) < shift:
                d._flags |= _APPROX
            v >>= shift
            d._exp += shift

        d._val = v & _MANTISSA_MASK
        return d

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dyadic):
            return NotImplemented
        return (self._flags, self._exp, self._val) == (other._flags, other._exp, other._val)

    def __lt__(self, other: "Dyadic") -> bool:
        if not isinstance(other, Dyadic):
            return NotImplemented
        return self._order(other) < 0

    def __hash__(self) -> int:
        return hash((self._flags, self._exp, self._val))

    def __str__(self) -> str:
        v, e = self.val_and_exp()
        if -1024 < v < 1024 and 0 < e < 10:
            v *= 2**e
            e = 0
        return f"{v}e{e}" if e != 0 else f"{v}"

    def __repr__(self) -> str:
        return str(self) + ("~" if self.approx() else "")


def _trailing_zeros_wide(v: int) -> int:
    if v == 0:
        return 2 * _MANTISSA_BITS
    return (v & -v).bit_length() - 1