import sys
import math
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from radian import Angle

PI = math.pi


def test_math_ops():
    assert (Angle.PI - Angle(PI / 2.0)).radians == PI / 2.0
    assert (Angle.PI * 2.0).radians == 0.0
    assert (Angle.PI / 2.0).radians == PI / 2.0


def test_addition_wraps():
    assert math.isclose((Angle(3.0) + Angle(1.0)).radians, 4.0 - 2.0 * PI)
    assert (Angle(0.25) + 0.5).radians == 0.75
    assert (0.5 + Angle(0.25)).radians == 0.75


def test_subtraction_wraps():
    assert math.isclose((Angle(-3.0) - Angle(1.0)).radians, 2.0 * PI - 4.0)
    assert (1.0 - Angle(0.25)).radians == 0.75


def test_multiplication():
    assert (2.0 * Angle(1.0)) == Angle(2.0)
    assert math.isclose((Angle(2.0) * Angle(3.0)).radians, 6.0 - 2.0 * PI)
    assert (Angle(1.0) * 0) == Angle.ZERO


def test_division():
    assert (Angle(3.0) / Angle(1.5)).radians == 2.0
    assert (Angle(-2.0) / 4).radians == -0.5


def test_division_by_zero_yields_nan():
    assert math.isnan((Angle(1.0) / 0.0).radians)
    assert math.isnan((Angle(1.0) / Angle.ZERO).radians)
    assert math.isnan((Angle.ZERO / 0.0).radians)


def test_negation():
    assert -Angle(1.0) == Angle(-1.0)
    assert -Angle.ZERO == Angle.ZERO
    # -pi is outside the interval, so negating pi yields pi
    assert (-Angle.PI).radians == PI
    assert (-Angle.NEG_PI).radians == PI


def test_augmented_assignment_rebinds():
    a = Angle(3.0)
    original = a
    a += Angle(1.0)
    assert math.isclose(a.radians, 4.0 - 2.0 * PI)
    assert original.radians == 3.0
    a *= 0.0
    assert a == Angle.ZERO
    a -= 0.5
    assert a.radians == -0.5
    a /= 0.5
    assert a.radians == -1.0


def test_sum_of_angles():
    total = sum([Angle(1.0)] * 4)
    assert isinstance(total, Angle)
    assert math.isclose(total.radians, 4.0 - 2.0 * PI)


def test_results_stay_normalized():
    values = [-7.5, -PI, -1.0, 0.0, 0.3, PI, 9.0]
    for x in values:
        for y in values:
            a, b = Angle(x), Angle(y)
            for result in (a + b, a - b, a * b, a * 3.7, -a):
                assert -PI < result.radians <= PI
            if b.radians != 0.0:
                assert -PI < (a / b).radians <= PI


def test_unsupported_operands():
    with pytest.raises(TypeError):
        Angle(1.0) + "x"
    with pytest.raises(TypeError):
        Angle(1.0) * [1]
    with pytest.raises(TypeError):
        Angle(1.0) < "x"
