class LinearEquationError(Exception):
    """Base class for every failure raised by the line model."""


class InvalidEquationError(LinearEquationError):
    """Raised when a line would be built with a = b = 0, or from two equal points."""


class DegenerateOperationError(LinearEquationError):
    """Raised when a query needs a coefficient that is zero (vertical/horizontal line)."""


class ParallelLinesError(LinearEquationError):
    """Raised when intersecting two parallel or coincident lines."""
