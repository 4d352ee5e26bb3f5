"""
Utility Functions

Provides geometry operations over lines, pairwise intersections and
grouping helpers used alongside the Line model.
"""

from .geometry import (
    is_zero,
    cross2d,
    dot2d,
    line_intersect,
    calculateAngle,
    checkIfParallel,
    pairwise_intersections,
)
from .clustering import (
    connected_components,
    group_parallel_lines,
    deduplicate_close_points,
)

__all__ = [
    "is_zero",
    "cross2d",
    "dot2d",
    "line_intersect",
    "calculateAngle",
    "checkIfParallel",
    "pairwise_intersections",
    "connected_components",
    "group_parallel_lines",
    "deduplicate_close_points",
]
