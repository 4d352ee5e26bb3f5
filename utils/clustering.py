"""
This module provides:
    • connected_components()
    • group_parallel_lines()
    • deduplicate_close_points()
"""

from itertools import combinations
from typing import Callable, Dict, List, Sequence

import numpy as np


# -------------------------------------------------------------------------
#  CONNECTED COMPONENTS (UNION-FIND OVER INDICES)
# -------------------------------------------------------------------------

def connected_components(count: int, is_connected: Callable[[int, int], bool]) -> List[List[int]]:
    """
    Partitions indices 0..count-1 into the transitive closure of
    is_connected(i, j).

    Groups are ordered by their smallest index, members ascending.
    """
    parent = list(range(count))

    def find(i):
        while parent[i] != i:
            parent[i] = parent[parent[i]]  # path halving
            i = parent[i]
        return i

    for i, j in combinations(range(count), 2):
        if not is_connected(i, j):
            continue
        ri, rj = find(i), find(j)
        if ri != rj:
            # smaller root wins so the root is the group's first index
            parent[max(ri, rj)] = min(ri, rj)

    groups: Dict[int, List[int]] = {}
    for i in range(count):
        groups.setdefault(find(i), []).append(i)

    return list(groups.values())


# -------------------------------------------------------------------------
#  PARALLEL FAMILIES
# -------------------------------------------------------------------------

def group_parallel_lines(lines: List) -> List[List]:
    """
    Splits lines into families of mutually parallel lines.
    Coincident lines land in the same family.
    """
    families = connected_components(
        len(lines), lambda i, j: lines[i].is_parallel_to(lines[j])
    )
    return [[lines[i] for i in family] for family in families]


# -------------------------------------------------------------------------
#  POINT DEDUPLICATION
# -------------------------------------------------------------------------

def deduplicate_close_points(points: Sequence[Sequence[float]], tolerance: float) -> np.ndarray:
    """
    Merges points that lie within `tolerance` distance of each other
    (transitively) into the centroid of their cluster.

    Returns an (M, 2) array in first-seen order.
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(pts) == 0:
        return pts

    clusters = connected_components(
        len(pts), lambda i, j: np.linalg.norm(pts[i] - pts[j]) <= tolerance
    )

    return np.array([pts[cluster].mean(axis=0) for cluster in clusters])
