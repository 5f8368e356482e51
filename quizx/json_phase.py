"""Text encoding of vertex phases, compatible with the PyZX JSON format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from quizx.phase import Phase, PhaseLike, limit_denominator

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


class JsonError(ValueError):
    """Base class for errors raised while encoding or decoding JSON data."""


class InvalidPhaseError(JsonError):
    """A phase string could not be decoded."""

    def __init__(self, phase: str) -> None:
        super().__init__(f"invalid phase: {phase!r}")
        self.phase = phase


@dataclass(frozen=True)
class PhaseOptions:
    """Options for encoding phases.

    ``ignore_value``: a phase that is written as the empty string.
    ``ignore_approx``: do not prefix approximated values with ``~``.
    ``ignore_pi``: do not write the ``pi`` symbol.
    ``limit_denom``: approximate phases to this maximum denominator.
    """

    ignore_value: Optional[PhaseLike] = None
    ignore_approx: bool = False
    ignore_pi: bool = False
    limit_denom: Optional[int] = 256


def encode_phase(phase: PhaseLike, options: Optional[PhaseOptions] = None) -> str:
    """Encode a phase as a string such as ``"pi/2"`` or ``"-3*pi/4"``."""
    if options is None:
        options = PhaseOptions()
    phase = Phase(phase)

    if options.ignore_value is not None and phase == Phase(options.ignore_value):
        return ""

    r: Fraction = phase.to_rational()
    if r == 0:
        return "0"

    approx_mark = ""
    if options.limit_denom is not None and r.denominator > options.limit_denom:
        if not options.ignore_approx:
            approx_mark = "~"
        r = limit_denominator(r, options.limit_denom)

    n = r.numerator
    if options.ignore_pi:
        numer = f"{n}"
    elif n == 1:
        numer = "pi"
    elif n == -1:
        numer = "-pi"
    else:
        numer = f"{n}*pi"

    denom = "" if r.denominator == 1 else f"/{r.denominator}"
    return f"{approx_mark}{numer}{denom}"


def _parse_int(text: str, original: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise InvalidPhaseError(original)
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        raise InvalidPhaseError(original)
    return value


def decode_phase(text: str) -> Optional[Phase]:
    """Decode a phase string; return None for the empty string.

    Raises InvalidPhaseError if the string is not a valid phase.
    """
    if not text:
        return None

    cleaned = "".join(
        c.lower() if c.isascii() else c
        for c in text
        if not c.isspace() and c not in ("π", "~")
    )
    cleaned = cleaned.replace("\\pi", "").replace("pi", "")
    s = cleaned.lstrip("*").rstrip("*")

    if not s:
        return Phase.one()
    if s == "-":
        return -Phase.one()

    if "." in s or "e" in s:
        try:
            f = float(s)
            return Phase.from_float(f).limit_denominator(256)
        except (ValueError, OverflowError):
            raise InvalidPhaseError(text) from None

    if "/" in s:
        parts = s.split("/")
        num = parts[0].rstrip("*")
        den = _parse_int(parts[1], text)
        if den == 0:
            raise InvalidPhaseError(text)
        if num == "":
            numer = 1
        elif num == "-":
            numer = -1
        else:
            numer = _parse_int(num, text)
        return Phase(Fraction(numer, den))

    return Phase(_parse_int(s, text))