import cmath
import math
from fractions import Fraction

import pytest

from quizx.dyadic import Dyadic, DyadicExponentOverflowError
from quizx.phase import Phase
from quizx.scalar import SQRT_2, Scalar4


def test_display():
    assert str(Scalar4.zero()) == "0"
    assert str(Scalar4([1, 2, 3, 4])) == "1 + 2 ω + 3 ω² + 4 ω³"
    assert str(Scalar4([-1, -2, -3, -4])) == "-1 - 2 ω - 3 ω² - 4 ω³"
    assert str(Scalar4([0, 2, 0, 4])) == "2 ω + 4 ω³"
    assert str(Scalar4([0.5, 0.25, 0.125, 0.0625])) == "1e-1 + 1e-2 ω + 1e-3 ω² + 1e-4 ω³"
    s = Scalar4([2.0**11, 2.0**21, 2.0**31, 2.0**41])
    assert str(s) == "1e11 + 1e21 ω + 1e31 ω² + 1e41 ω³"


def test_int_arith():
    s4 = Scalar4([4, 0, 0, 0])
    s10 = Scalar4([10, 0, 0, 0])
    s14 = Scalar4([14, 0, 0, 0])
    sm1 = Scalar4([-1, 0, 0, 0])
    s40 = Scalar4([40, 0, 0, 0])
    sm14 = Scalar4([-14, 0, 0, 0])
    sm40 = Scalar4([-40, 0, 0, 0])

    assert s4 + s10 == s14
    assert s4 * s10 == s40
    assert sm1 * sm1 == Scalar4.one()
    assert sm1 * s40 == sm40
    assert sm1 * (s4 + s10) == sm14
    assert sm1 * s4 + sm1 * s10 == sm14


def test_int_coercion_and_sum():
    assert Scalar4([4, 0, 0, 0]) + 10 == Scalar4([14, 0, 0, 0])
    assert sum([Scalar4([4, 0, 0, 0]), Scalar4([10, 0, 0, 0])]) == Scalar4([14, 0, 0, 0])


def test_real_arith():
    a, b, c, d = 4.3, 2e-11, 0.3333333, -1000000.0
    sa, sb, sc, sd = (Scalar4.real(x) for x in (a, b, c, d))
    assert (sa * sa).abs_diff_eq(Scalar4.real(a * a))
    assert (sa * sb).abs_diff_eq(Scalar4.real(a * b))
    assert (sc + sa * sb).abs_diff_eq(Scalar4.real(c + a * b))
    assert (sd - sa * sb).abs_diff_eq(Scalar4.real(d - a * b))


def test_complex_arith():
    one = Scalar4.one()
    i = Scalar4([0, 0, 1, 0])
    om = Scalar4([0, 1, 0, 0])
    sqrt2 = Scalar4.sqrt2_pow(1)
    assert om * om == i
    assert (one + i) * (one + i).conj() == one + one
    assert om + om.conj() == sqrt2

    assert (one + i + i).complex_value() == complex(1.0, 2.0)

    c1 = (Scalar4.sqrt2_pow(3) + i * sqrt2).complex_value()
    assert c1.real == pytest.approx(2.0 * SQRT_2)
    assert c1.imag == pytest.approx(SQRT_2)


def test_sqrt2():
    sqrt2 = Scalar4.sqrt2_pow(1)
    c = sqrt2.complex_value()
    assert c.real == SQRT_2
    assert c.imag == 0.0

    c7 = Scalar4.sqrt2_pow(7).complex_value()
    assert c7.real == 2.0 * 2.0 * 2.0 * SQRT_2
    assert c7.imag == 0.0

    two = Scalar4([2, 0, 0, 0])
    a = Scalar4.sqrt2_pow(10)
    b = Scalar4.sqrt2_pow(11)
    assert two == sqrt2 * sqrt2
    assert a * sqrt2 == b
    assert a == Scalar4([32, 0, 0, 0])


def test_sqrt2_helpers():
    assert Scalar4.sqrt2() == Scalar4.sqrt2_pow(1)
    assert Scalar4.sqrt2() * Scalar4.one_over_sqrt2() == Scalar4.one()
    assert Scalar4.one_over_sqrt2().complex_value().real == pytest.approx(1 / SQRT_2)


@pytest.mark.parametrize(
    "phase, coeffs",
    [
        (Fraction(0, 1), [1, 0, 0, 0]),
        (Fraction(1, 4), [0, 1, 0, 0]),
        (Fraction(1, 2), [0, 0, 1, 0]),
        (Fraction(3, 4), [0, 0, 0, 1]),
        (Fraction(1, 1), [-1, 0, 0, 0]),
        (Fraction(5, 4), [0, -1, 0, 0]),
        (Fraction(3, 2), [0, 0, -1, 0]),
        (Fraction(7, 4), [0, 0, 0, -1]),
        (Fraction(-7, 4), [0, 1, 0, 0]),
        (Fraction(-3, 2), [0, 0, 1, 0]),
        (Fraction(-5, 4), [0, 0, 0, 1]),
        (Fraction(-1, 1), [-1, 0, 0, 0]),
        (Fraction(-3, 4), [0, -1, 0, 0]),
        (Fraction(-1, 2), [0, 0, -1, 0]),
        (Fraction(-1, 4), [0, 0, 0, -1]),
    ],
)
def test_from_t_phase(phase, coeffs):
    assert Scalar4.from_phase(Phase(phase)) == Scalar4(coeffs)


@pytest.mark.parametrize("r", [Fraction(-5, 37), Fraction(12, 117)])
def test_from_gen_phase(r):
    s1 = Scalar4.from_phase(Phase(r))
    c = cmath.exp(complex(0.0, math.pi * float(r)))
    assert s1 == Scalar4.from_complex(c)


@pytest.mark.parametrize(
    "scalar",
    [
        Scalar4.zero(),
        Scalar4.one(),
        Scalar4.from_phase(1),
        Scalar4.from_phase((1, 2)),
        Scalar4.from_phase((-1, 2)),
        Scalar4.real(2.0),
        Scalar4.complex(1.0, 1.0),
        Scalar4.new([0, 1, 0, -1], 3),
        Scalar4.new([0, 7, 0, 7], -2),
        Scalar4.new([-2, 0, -2, 0], 0),
        Scalar4.new([2, 0, -2, 0], 30),
        Scalar4.new([2, 0, 0, 0], -10),
    ],
)
def test_roundtrip(scalar):
    back = Scalar4.from_complex(scalar.complex_value())
    assert scalar.abs_diff_eq(back)


def test_exact_phases():
    sqrt2 = Scalar4.sqrt2()
    phase = Scalar4.new([0, 1, 0, 0], 0)
    quarter = Phase(Fraction(1, 4))

    assert phase.exact_phase_and_sqrt2_pow() == (quarter, 0)
    assert (phase * sqrt2).exact_phase_and_sqrt2_pow() == (quarter, 1)
    assert (phase * sqrt2 * sqrt2).exact_phase_and_sqrt2_pow() == (quarter, 2)
    assert (phase * phase * sqrt2).exact_phase_and_sqrt2_pow() == (Phase(Fraction(1, 2)), 1)


def test_exact_phase_negative_and_missing():
    assert Scalar4.minus_one().exact_phase_and_sqrt2_pow() == (Phase(1), 0)
    assert Scalar4([3, 0, 0, 0]).exact_phase_and_sqrt2_pow() is None
    assert Scalar4([1, 2, 3, 0]).exact_phase_and_sqrt2_pow() is None


def test_one_plus_phase_and_mul_helpers():
    assert Scalar4.one_plus_phase(1).is_zero()
    assert Scalar4.one_plus_phase(0) == Scalar4([2, 0, 0, 0])

    s = Scalar4.one()
    s.mul_phase((1, 2))
    assert s == Scalar4([0, 0, 1, 0])

    s = Scalar4.one()
    s.mul_sqrt2_pow(2)
    assert s == Scalar4([2, 0, 0, 0])

    s = Scalar4.one()
    s.mul_one_plus_phase(1)
    assert s.is_zero()


def test_is_one_and_approx_flags():
    assert Scalar4.one().is_one()
    assert not Scalar4.minus_one().is_one()
    s = Scalar4.real(1.5)
    assert s.approx()
    s.set_approx(False)
    assert not s.approx()
    assert not Scalar4.one().approx()


def test_complex_value_overflow():
    s = Scalar4([Dyadic(1, 1_000_000), 0, 0, 0])
    with pytest.raises(DyadicExponentOverflowError):
        s.complex_value()


def test_wrong_number_of_coeffs():
    with pytest.raises(ValueError):
        Scalar4([1, 2, 3])