import math

import pytest

from svgpathxform.misctools import round3, format_number, fmt, isclose


@pytest.mark.parametrize('x, expected', [
    (1.23456, 1.235),
    (2.0004, 2.0),
    (0.0625, 0.063),
    (-0.0625, -0.063),
    (-12.5, -12.5),
])
def test_round3(x, expected):
    assert round3(x) == expected


def test_round3_halves_away_from_zero():
    assert round3(2.5, digits=0) == 3.0
    assert round3(-2.5, digits=0) == -3.0


def test_round3_drops_negative_zero():
    assert math.copysign(1, round3(-0.0004)) == 1
    assert math.copysign(1, round3(-0.0)) == 1


@pytest.mark.parametrize('x, expected', [
    (2.0, '2'),
    (-0.25, '-0.25'),
    (100.0, '100'),
    (0.001, '0.001'),
    (-0.0, '0'),
])
def test_format_number(x, expected):
    assert format_number(x) == expected


def test_fmt():
    assert fmt(1.23456) == '1.235'
    assert fmt(-0.0001) == '0'


def test_isclose():
    assert isclose(1.0, 1.0 + 1e-9)
    assert isclose(0.0, 1e-9)
    assert not isclose(1.0, 1.001)
    assert not isclose(0.0, 1e-6)


def test_huge_numbers_are_not_rounded():
    assert round3(1e308) == 1e308
    assert round3(-1e308) == -1e308
    assert fmt(1e308) == str(int(1e308))
    assert fmt(-1e306) == str(int(-1e306))


def test_non_finite_numbers():
    assert round3(float('inf')) == float('inf')
    assert format_number(float('inf')) == '0'
    assert format_number(float('-inf')) == '0'
    assert format_number(float('nan')) == '0'
