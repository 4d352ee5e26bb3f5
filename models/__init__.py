"""
Data Models

Defines the core data structures:
- Line
- the LinearEquationError family
"""

from .line import Line
from .errors import (
    LinearEquationError,
    InvalidEquationError,
    DegenerateOperationError,
    ParallelLinesError,
)

__all__ = [
    "Line",
    "LinearEquationError",
    "InvalidEquationError",
    "DegenerateOperationError",
    "ParallelLinesError",
]
