import sys
import math
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parents[1]))

from radian import normalize, normalize_array


def test_matches_scalar_normalize():
    values = np.array([-20.0, -math.pi - 0.1, -math.pi, -1.0, 0.0, 2.0, math.pi, math.pi + 0.1, 5 * math.pi, 1e4])
    expected = [normalize(v).radians for v in values]
    np.testing.assert_array_equal(normalize_array(values), expected)


def test_boundaries():
    out = normalize_array([-math.pi, math.pi, 2 * math.pi])
    assert out[0] == math.pi
    assert out[1] == math.pi
    assert out[2] == 0.0


def test_shape_preserved():
    grid = np.linspace(-10.0, 10.0, 12).reshape(3, 4)
    out = normalize_array(grid)
    assert out.shape == (3, 4)
    assert np.all(out > -math.pi) and np.all(out <= math.pi)


def test_non_finite_become_nan():
    out = normalize_array([np.inf, -np.inf, np.nan, 1.0])
    assert np.isnan(out[:3]).all()
    assert out[3] == 1.0


def test_scalar_input():
    out = normalize_array(3 * math.pi)
    assert out.shape == ()
    assert float(out) == normalize(3 * math.pi).radians
