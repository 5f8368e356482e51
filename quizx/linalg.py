"""Matrices and linear algebra over the two-element field F2."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union


class RowOps:
    """Something that can follow along with primitive row operations.

    The base class ignores every operation, which makes it a convenient
    "do not record" receiver for Gaussian elimination.
    """

    def row_add(self, r0: int, r1: int) -> None:
        """Add row ``r0`` to row ``r1``."""

    def row_swap(self, r0: int, r1: int) -> None:
        """Swap rows ``r0`` and ``r1``."""


Index = Union[int, Tuple[int, int]]


class Mat2(RowOps):
    """A dense matrix over F2, stored as a list of rows of 0/1 integers."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        self._d: List[List[int]] = [[int(x) for x in row] for row in rows]

    @classmethod
    def build(cls, rows: int, cols: int, f: Callable[[int, int], bool]) -> "Mat2":
        """A ``rows`` x ``cols`` matrix with a 1 wherever ``f(i, j)`` is true."""
        return cls([[1 if f(i, j) else 0 for j in range(cols)] for i in range(rows)])

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Mat2":
        return cls.build(rows, cols, lambda _i, _j: False)

    @classmethod
    def ones(cls, rows: int, cols: int) -> "Mat2":
        return cls.build(rows, cols, lambda _i, _j: True)

    @classmethod
    def identity(cls, dim: int) -> "Mat2":
        return cls.build(dim, dim, lambda i, j: i == j)

    @classmethod
    def unit_vector(cls, dim: int, i: int) -> "Mat2":
        """A column vector with a single 1 at index ``i``."""
        return cls.build(dim, 1, lambda x, _y: x == i)

    def num_rows(self) -> int:
        return len(self._d)

    def num_cols(self) -> int:
        return len(self._d[0]) if self._d else 0

    def copy(self) -> "Mat2":
        return Mat2(self._d)

    def transpose(self) -> "Mat2":
        return Mat2.build(self.num_cols(), self.num_rows(), lambda i, j: self._d[j][i] == 1)

    def _gauss(self, full_reduce: bool, blocksize: int, x: RowOps) -> int:
        """Row-reduce in place, mirroring every row operation on ``x``.

        Uses the block-wise Patel/Markov/Hayes elimination of duplicate row
        chunks. Returns the rank.
        """
        if blocksize <= 0:
            raise ValueError("blocksize must be positive")
        rows = self.num_rows()
        cols = self.num_cols()
        d = self._d
        pivot_row = 0
        pivot_cols: List[int] = []
        num_blocks = -(-cols // blocksize)

        def add(r0: int, r1: int) -> None:
            self.row_add(r0, r1)
            x.row_add(r0, r1)

        for sec in range(num_blocks):
            i0 = sec * blocksize
            i1 = min(cols, (sec + 1) * blocksize)

            chunks: Dict[Tuple[int, ...], int] = {}
            for r in range(pivot_row, rows):
                ch = tuple(d[r][i0:i1])
                if not any(ch):
                    continue
                if ch in chunks:
                    add(chunks[ch], r)
                else:
                    chunks[ch] = r

            for p in range(i0, i1):
                for r0 in range(pivot_row, rows):
                    if d[r0][p]:
                        if r0 != pivot_row:
                            add(r0, pivot_row)
                        for r1 in range(pivot_row + 1, rows):
                            if d[r1][p]:
                                add(pivot_row, r1)
                        pivot_cols.append(p)
                        pivot_row += 1
                        break

        rank = pivot_row

        if full_reduce and rank != 0:
            pivot_row -= 1
            remaining = list(pivot_cols)

            for sec in reversed(range(num_blocks)):
                i0 = sec * blocksize
                i1 = min(cols, (sec + 1) * blocksize)

                chunks = {}
                for r in reversed(range(pivot_row + 1)):
                    ch = tuple(d[r][i0:i1])
                    if not any(ch):
                        continue
                    if ch in chunks:
                        add(chunks[ch], r)
                    else:
                        chunks[ch] = r

                while remaining:
                    pcol = remaining[-1]
                    if i0 > pcol or pcol >= i1:
                        break
                    remaining.pop()
                    for r in range(pivot_row):
                        if d[r][pcol]:
                            add(pivot_row, r)
                    pivot_row = max(pivot_row - 1, 0)

        return rank

    def gauss(self, full_reduce: bool = False) -> int:
        """Compute the (optionally fully reduced) echelon form in place; return the rank."""
        return self._gauss(full_reduce, 3, RowOps())

    def gauss_x(self, full_reduce: bool, blocksize: int, x: Optional[RowOps] = None) -> int:
        """Like :meth:`gauss`, applying each row operation to ``x`` as well.

        If ``g * m = m'`` is the reduction, ``x`` becomes ``g * x``.
        """
        return self._gauss(full_reduce, blocksize, x if x is not None else RowOps())

    def rank(self) -> int:
        return self.copy().gauss(False)

    def inverse(self) -> Optional["Mat2"]:
        """The inverse matrix, or None if the matrix is not square or is singular."""
        if self.num_rows() != self.num_cols():
            return None
        m = self.copy()
        inv = Mat2.identity(self.num_rows())
        if m._gauss(True, 3, inv) < self.num_rows():
            return None
        return inv

    def row_weight(self, i: int) -> int:
        """Hamming weight of row ``i``."""
        return sum(self._d[i])

    def weight(self) -> int:
        """Hamming weight of the whole matrix."""
        return sum(sum(row) for row in self._d)

    def unit_rows(self) -> List[int]:
        """Indices of rows containing exactly one 1."""
        return [i for i, row in enumerate(self._d) if sum(row) == 1]

    def nullspace(self) -> List["Mat2"]:
        """A basis of the nullspace, each vector as a 1 x n row matrix."""
        mat = self.copy()
        rank = mat.gauss(True)
        n = self.num_cols()
        if rank == n:
            return []

        pivot_cols: List[int] = []
        for col in range(n):
            if len(pivot_cols) == rank:
                break
            if mat._d[len(pivot_cols)][col] == 1:
                pivot_cols.append(col)

        pivot_set = set(pivot_cols)
        free_vars = [col for col in range(n) if col not in pivot_set]

        basis: List[Mat2] = []
        for free_var in free_vars:
            vec = Mat2.zeros(1, n)
            vec._d[0][free_var] = 1
            for row, pivot_col in reversed(list(enumerate(pivot_cols))):
                if free_var > pivot_col and mat._d[row][free_var] == 1:
                    vec._d[0][pivot_col] = 1
            basis.append(vec)
        return basis

    def vstack(self, other: "Mat2") -> "Mat2":
        if self.num_cols() != other.num_cols():
            raise ValueError(
                "Matrices must have the same number of columns for vertical stacking"
            )
        return Mat2(self._d + other._d)

    def hstack(self, other: "Mat2") -> "Mat2":
        if self.num_rows() != other.num_rows():
            raise ValueError(
                "Matrices must have the same number of rows for horizontal stacking"
            )
        return Mat2(a + b for a, b in zip(self._d, other._d))

    def row_add(self, r0: int, r1: int) -> None:
        src = self._d[r0]
        self._d[r1] = [a ^ b for a, b in zip(self._d[r1], src)]

    def row_swap(self, r0: int, r1: int) -> None:
        self._d[r0], self._d[r1] = self._d[r1], self._d[r0]

    def col_add(self, c0: int, c1: int) -> None:
        """Add column ``c0`` to column ``c1``."""
        for row in self._d:
            row[c1] ^= row[c0]

    def col_swap(self, c0: int, c1: int) -> None:
        for row in self._d:
            row[c0], row[c1] = row[c1], row[c0]

    def __getitem__(self, idx: Index):
        if isinstance(idx, tuple):
            i, j = idx
            return self._d[i][j]
        return self._d[idx]

    def __setitem__(self, idx: Index, value) -> None:
        if isinstance(idx, tuple):
            i, j = idx
            self._d[i][j] = int(value)
        else:
            self._d[idx] = [int(v) for v in value]

    def __matmul__(self, other: "Mat2") -> "Mat2":
        if not isinstance(other, Mat2):
            return NotImplemented
        if self.num_cols() != other.num_rows():
            raise ValueError("Cannot multiply matrices with mismatched dimensions.")
        cols = list(zip(*other._d)) if other._d else []
        return Mat2(
            [sum(a & b for a, b in zip(row, col)) % 2 for col in cols] for row in self._d
        ) if cols else Mat2.zeros(self.num_rows(), other.num_cols())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat2):
            return NotImplemented
        return self._d == other._d

    def __str__(self) -> str:
        return "".join("[ " + "".join(f"{x} " for x in row) + "]\n" for row in self._d)

    def __repr__(self) -> str:
        return f"Mat2({self._d!r})"