"""
This module provides:
    - is_zero          (shared scaled epsilon test, auto epsilon from config)
    - cross2d / dot2d
    - line_intersect
    - calculateAngle
    - checkIfParallel  (with auto threshold from config)
    - pairwise_intersections
"""

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import get_active_params


# ----------------------------------------------------------------------
#  ZERO TEST
# ----------------------------------------------------------------------

def is_zero(value: float, scale: float = 1.0, epsilon: Optional[float] = None) -> bool:
    """
    |value| <= epsilon * scale

    `scale` is the magnitude the value was computed from (e.g. the product
    of the two normal lengths for a determinant), so the test does not
    depend on how large the coefficients are. scale=0 means exact zero.

    Every degenerate-case decision in the line model goes through here so
    that parallel, perpendicular and determinant checks agree.
    """
    if epsilon is None:
        epsilon = get_active_params()["EPSILON"]
    return math.isclose(value, 0.0, rel_tol=0.0, abs_tol=epsilon * scale)


# ----------------------------------------------------------------------
#  2D PRODUCTS
# ----------------------------------------------------------------------

def cross2d(u: Sequence[float], v: Sequence[float]) -> float:
    """z-component of u × v, i.e. the 2x2 determinant |u v|."""
    return u[0] * v[1] - v[0] * u[1]


def dot2d(u: Sequence[float], v: Sequence[float]) -> float:
    return u[0] * v[0] + u[1] * v[1]


# ----------------------------------------------------------------------
#  LINE INTERSECTION
# ----------------------------------------------------------------------

def line_intersect(l1, l2) -> Optional[Tuple[float, float]]:
    """
    Compute intersection point between two Line objects.

    Returns:
        (x, y) or None if parallel (including coincident lines)
    """
    if l1.is_parallel_to(l2):
        return None
    return l1.intersection(l2)


# ----------------------------------------------------------------------
#  ANGLE BETWEEN TWO LINES
# ----------------------------------------------------------------------

def calculateAngle(line1, line2) -> float:
    """
    Returns the acute angle (degrees) between two Line objects.

    Computed from the normal vectors, so vertical lines need no special case.
    """
    return line1.angle_to(line2)


# ----------------------------------------------------------------------
#  NEAR-PARALLEL CHECK (AUTO-THRESHOLD FROM CONFIG)
# ----------------------------------------------------------------------

def checkIfParallel(l1, l2, angle_threshold: Optional[float] = None) -> bool:
    """
    Returns True if two Line objects are within angle_threshold degrees of
    being parallel.

    Looser than Line.is_parallel_to, which uses the coefficient epsilon.
    """
    if angle_threshold is None:
        params = get_active_params()
        angle_threshold = params["PARALLEL_ANGLE_THRESHOLD"]

    return calculateAngle(l1, l2) < angle_threshold


# ----------------------------------------------------------------------
#  ALL PAIRWISE INTERSECTIONS
# ----------------------------------------------------------------------

def pairwise_intersections(lines: List) -> Tuple[np.ndarray, List[Tuple[int, int]]]:
    """
    Intersects every pair of lines, skipping parallel pairs.

    Returns:
        points: (N, 2) float array of intersection points
        idx_pairs: list of (i, j) index tuples, aligned with points
    """
    points = []
    idx_pairs = []

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            inter = line_intersect(lines[i], lines[j])
            if inter is None:
                continue
            points.append(inter)
            idx_pairs.append((i, j))

    return np.asarray(points, dtype=float).reshape(-1, 2), idx_pairs
