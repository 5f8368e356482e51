"""Boolean parameter expressions: XORs of variables and conjunctions of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

_MISSING = object()


def _merge_cancel(xs: Iterable[int], ys: Iterable[int]) -> Iterator[int]:
    """Merge two sorted sequences, dropping pairs of equal elements."""
    it_x, it_y = iter(xs), iter(ys)
    x = next(it_x, _MISSING)
    y = next(it_y, _MISSING)
    while x is not _MISSING or y is not _MISSING:
        if y is _MISSING or (x is not _MISSING and x < y):
            yield x
            x = next(it_x, _MISSING)
        elif x is _MISSING or y < x:
            yield y
            y = next(it_y, _MISSING)
        else:
            x = next(it_x, _MISSING)
            y = next(it_y, _MISSING)


@dataclass(frozen=True, order=True)
class Parity:
    """An XOR of variables plus a constant bit.

    ``Parity((0, 3, 4), True)`` stands for b0 ⊕ b3 ⊕ b4 ⊕ 1.
    """

    variables: tuple = field(default=())
    flip: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", tuple(self.variables))
        object.__setattr__(self, "flip", bool(self.flip))

    @classmethod
    def from_vars(cls, variables: Iterable[int]) -> "Parity":
        """Sort the variables into a parity; duplicates are not cancelled."""
        return cls(tuple(sorted(variables)), False)

    @classmethod
    def single(cls, var: int) -> "Parity":
        return cls((var,), False)

    @classmethod
    def one(cls) -> "Parity":
        return cls((), True)

    @classmethod
    def zero(cls) -> "Parity":
        return cls((), False)

    def is_one(self) -> bool:
        return len(self.variables) == 1 and self.variables[0] == 0

    def is_zero(self) -> bool:
        return not self.variables and not self.flip

    def negated(self) -> "Parity":
        return Parity(self.variables, not self.flip)

    def __add__(self, other: "Parity") -> "Parity":
        if not isinstance(other, Parity):
            return NotImplemented
        return Parity(
            tuple(_merge_cancel(self.variables, other.variables)),
            self.flip ^ other.flip,
        )

    def __len__(self) -> int:
        return len(self.variables)

    def __iter__(self) -> Iterator[int]:
        return iter(self.variables)

    def __getitem__(self, index: int) -> int:
        return self.variables[index]


ParityLike = Union[Parity, Iterable[int]]


def _as_parity(p: ParityLike) -> Parity:
    return p if isinstance(p, Parity) else Parity.from_vars(p)


@dataclass(frozen=True, order=True)
class Expr:
    """A boolean expression: the conjunction of a sequence of parities."""

    parities: tuple = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "parities", tuple(self.parities))

    @classmethod
    def linear(cls, p: ParityLike) -> "Expr":
        return cls((_as_parity(p),))

    @classmethod
    def quadratic(cls, p1: ParityLike, p2: ParityLike) -> "Expr":
        a, b = _as_parity(p1), _as_parity(p2)
        if a > b:
            a, b = b, a
        if a.is_one() or a == b:
            return cls((b,))
        return cls((a, b))

    def is_linear(self) -> bool:
        return len(self.parities) == 1

    def __len__(self) -> int:
        return len(self.parities)

    def __iter__(self) -> Iterator[Parity]:
        return iter(self.parities)

    def __getitem__(self, index: int) -> Parity:
        return self.parities[index]