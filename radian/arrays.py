"""Vectorized normalization for numpy arrays of radians.

Applies the same reduction as :class:`~radian.angle.Angle` element-wise, so
bulk data (scan bearings, heading logs) can be normalized without building an
Angle per sample.
"""
from __future__ import annotations

from typing import Union
import math

import numpy as np

TWO_PI = 2.0 * math.pi


def normalize_array(values: Union[float, np.ndarray]) -> np.ndarray:
    """Normalize radian value(s) into ``(-pi, pi]``.

    Accepts scalars, sequences or arrays and returns a float ndarray of the
    same shape.  Non-finite entries become NaN, matching the scalar core.
    """
    arr = np.asarray(values, dtype=float)
    with np.errstate(invalid="ignore"):
        reduced = np.fmod(arr, TWO_PI)
    reduced = np.where(reduced > math.pi, reduced - TWO_PI, reduced)
    reduced = np.where(reduced <= -math.pi, reduced + TWO_PI, reduced)
    return reduced
