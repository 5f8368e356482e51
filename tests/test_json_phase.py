from fractions import Fraction

import pytest

from quizx.json_phase import (
    InvalidPhaseError,
    JsonError,
    PhaseOptions,
    decode_phase,
    encode_phase,
)
from quizx.phase import Phase


@pytest.mark.parametrize(
    "phase, expected",
    [
        (0, "0"),
        (1, "pi"),
        ((1, 2), "pi/2"),
        ((1, 3), "pi/3"),
        ((-1, 2), "-pi/2"),
        ((-1, 3), "-pi/3"),
        ((2, 3), "2*pi/3"),
    ],
)
def test_encode_phase(phase, expected):
    assert encode_phase(Phase(phase), PhaseOptions()) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("1", 1),
        ("1/2", (1, 2)),
        ("1/3", (1, 3)),
        ("-1/2", (-1, 2)),
        ("-1", 1),
        ("pi", 1),
        ("-pi", 1),
        ("pi/3", (1, 3)),
        ("-pi/3", (-1, 3)),
        ("1/3 * pi", (1, 3)),
        ("2*pi/3", (2, 3)),
        ("-0.3333333333333333*pi", (-1, 3)),
        ("1*π", 1),
        ("π", 1),
        ("~-pi/2", (-1, 2)),
        ("7\\pi/4", (7, 4)),
    ],
)
def test_decode_phase(text, expected):
    phase = decode_phase(text)
    if phase is None:
        phase = Phase.zero()
    assert phase == Phase(expected)


def test_decode_empty_is_none():
    assert decode_phase("") is None


def test_encode_default_options():
    assert encode_phase(Fraction(3, 4)) == "3*pi/4"


def test_encode_ignore_value():
    assert encode_phase(Phase(0), PhaseOptions(ignore_value=Phase(0))) == ""
    assert encode_phase(Phase(1), PhaseOptions(ignore_value=Phase(1))) == ""
    assert encode_phase(Phase(1), PhaseOptions(ignore_value=Phase(0))) == "pi"


def test_encode_ignore_pi():
    assert encode_phase(Fraction(1, 3), PhaseOptions(ignore_pi=True)) == "1/3"
    assert encode_phase(Fraction(-1, 2), PhaseOptions(ignore_pi=True)) == "-1/2"
    assert encode_phase(1, PhaseOptions(ignore_pi=True)) == "1"


def test_encode_approximation_marker():
    assert encode_phase(Fraction(1, 257)) == "~pi/256"
    assert encode_phase(Fraction(1, 257), PhaseOptions(ignore_approx=True)) == "pi/256"


def test_encode_without_limit_keeps_denominator():
    assert encode_phase(Fraction(1, 257), PhaseOptions(limit_denom=None)) == "pi/257"


@pytest.mark.parametrize(
    "phase", [Fraction(1, 4), Fraction(-3, 4), Fraction(5, 7), Fraction(1, 1), Fraction(-1, 8)]
)
def test_roundtrip(phase):
    assert decode_phase(encode_phase(phase)) == Phase(phase)


@pytest.mark.parametrize("text", ["abc", "x/3", "1/y", "1/0", "1.2.3"])
def test_invalid_phase(text):
    with pytest.raises(InvalidPhaseError) as info:
        decode_phase(text)
    assert info.value.phase == text


def test_invalid_phase_is_json_error():
    with pytest.raises(JsonError):
        decode_phase("nonsense")