"""
Standard-Form Line Package

This package provides an immutable two-dimensional line in standard
form (a*x + b*y = c), including:

- Construction from slope-intercept, point-slope and two points
- Solving, slope and intercept queries
- Parallel / perpendicular / coincident tests and intersection
- Scaling, addition and subtraction of equations
- Helpers for pairwise intersections and parallel grouping
"""
__all__ = [
    "config",
    "models",
    "utils",
]
