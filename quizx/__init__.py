"""Exact phases, dyadic scalars, parity expressions, phase strings and F2 linear algebra."""

__version__ = "0.1.0"

__all__ = [
    "dyadic",
    "json_phase",
    "linalg",
    "params",
    "phase",
    "scalar",
    "util",
]