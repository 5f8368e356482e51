# quizx

Building blocks for working with ZX-diagrams in pure Python, with no
dependencies outside the standard library:

- `quizx.phase`: `Phase`, a rational number of half-turns normalised to the
  range (-1, 1], and `limit_denominator` for approximating fractions by ones
  with a bounded denominator.
- `quizx.params`: `Parity` (an XOR of boolean variables plus a constant bit)
  and `Expr` (a conjunction of parities).
- `quizx.dyadic`: `Dyadic`, a number `val * 2**exp` with a 64-bit mantissa and
  a flag recording whether rounding has happened, and
  `DyadicExponentOverflowError` for values too large or small for a float.
- `quizx.scalar`: `Scalar4`, exact scalars of the form
  `a + b ω + c ω² + d ω³` with `ω = exp(iπ/4)` and dyadic coefficients.
- `quizx.linalg`: `Mat2`, matrices over F2 with Gaussian elimination, rank,
  inverse, nullspace and stacking; `RowOps` for following row operations.
- `quizx.json_phase`: `encode_phase` and `decode_phase` for the text form of
  phases used in ZX-diagram JSON files, with `PhaseOptions` to control the
  encoding and `InvalidPhaseError` (a `JsonError`) for strings that cannot be
  decoded.
- `quizx.util`: `pmax`, a maximum over partially ordered items.

## Installation

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```

## Examples

Phases wrap around and keep exact rational values:

```python
from fractions import Fraction
from quizx.phase import Phase

p = Phase(Fraction(7, 4))
print(p)            # -1/4
print(p.is_t())     # True
```

Parities add by XOR, cancelling shared variables:

```python
from quizx.params import Parity

p = Parity.from_vars([0, 3, 6]) + Parity.from_vars([3, 4])
print(p.variables)  # (0, 4, 6)
```

Dyadic numbers:

```python
from quizx.dyadic import Dyadic

print(Dyadic(12, 10).val_and_exp())  # (3, 12)
print(Dyadic(2048, 0))               # 1e11
```

Exact Clifford+T scalars:

```python
from fractions import Fraction
from quizx.phase import Phase
from quizx.scalar import Scalar4

omega = Scalar4.from_phase(Phase(Fraction(1, 4)))
print(omega * omega)                        # 1 ω²
print(Scalar4.sqrt2_pow(3).complex_value())
print((omega * Scalar4.sqrt2()).exact_phase_and_sqrt2_pow())
```

Linear algebra over F2:

```python
from quizx.linalg import Mat2

m = Mat2([[1, 1, 1], [0, 1, 1], [0, 0, 1]])
print(m.rank())                        # 3
inv = m.inverse()
print(m @ inv == Mat2.identity(3))     # True
```

Phase strings:

```python
from fractions import Fraction
from quizx.json_phase import PhaseOptions, decode_phase, encode_phase
from quizx.phase import Phase

print(encode_phase(Phase(Fraction(2, 3)), PhaseOptions()))  # 2*pi/3
print(decode_phase("-pi/3"))                                # -1/3
```

## What the package does not do

Only phases have a JSON text encoding here: there is no encoding or decoding
of `Scalar4` values or of whole diagrams to JSON. There are no graphs,
circuits, simplification rules or tensor evaluation, and no command-line tool.