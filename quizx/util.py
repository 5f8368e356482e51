"""Small general-purpose helpers."""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar

T = TypeVar("T")


def pmax(iterable: Iterable[T]) -> Optional[T]:
    """Maximum of items that may only be partially ordered.

    Incomparable items keep the earlier one. Returns None for an empty iterable.
    """
    best: Optional[T] = None
    first = True
    for item in iterable:
        if first or best < item:  # type: ignore[operator]
            best = item
            first = False
    return best