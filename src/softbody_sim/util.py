# MIT License (see LICENSE)
"""
Polygon geometry helpers.

All polygon helpers take parallel x/y coordinate arrays in ring order
(vertex i is joined to vertex (i + 1) mod N).
"""
from __future__ import annotations

import numpy as np


def signed_area(x: np.ndarray, y: np.ndarray) -> float:
    """
    Signed polygon area from the shoelace formula.

    A = 1/2 * sum(x_i * y_{i+1} - x_{i+1} * y_i)

    Positive when the vertices run counter-clockwise in a y-up frame, which
    is clockwise on a y-down display.

    Reference: https://en.wikipedia.org/wiki/Shoelace_formula
    """
    xn = np.roll(x, -1)
    yn = np.roll(y, -1)
    return float(0.5 * np.sum(x * yn - xn * y))


def shoelace_area(x: np.ndarray, y: np.ndarray) -> float:
    """Unsigned polygon area (absolute value of signed_area)."""
    return abs(signed_area(x, y))
