import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional, Sequence, Tuple

import numpy as np

from config import get_active_params
from models.errors import (
    DegenerateOperationError,
    InvalidEquationError,
    ParallelLinesError,
)
from utils.geometry import cross2d, dot2d, is_zero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Line:
    """
    Immutable line in standard form: a*x + b*y = c

    Supports:
      - construction from slope-intercept, point-slope and two points
      - solving for x / y, slope and intercepts
      - parallel / perpendicular / coincident tests via cross and dot
        products of the normal vectors (vertical lines need no branch)
      - intersection by Cramer's rule
      - scaling, addition and subtraction (always re-validated)
      - point distance, projection and direction helpers

    Invariant: a and b are never both zero (within EPSILON).
    """

    a: float
    b: float
    c: float

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __post_init__(self):
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "a", float(self.a))
        object.__setattr__(self, "b", float(self.b))
        object.__setattr__(self, "c", float(self.c))

        if not all(math.isfinite(v) for v in (self.a, self.b, self.c)):
            logger.debug("Rejected non-finite line a=%s b=%s c=%s", self.a, self.b, self.c)
            raise InvalidEquationError(
                "Invalid linear equation: coefficients must be finite"
            )

        # a single nonzero coefficient, however small, is a valid line
        if self.a == 0.0 and self.b == 0.0:
            logger.debug("Rejected degenerate line a=%s b=%s c=%s", self.a, self.b, self.c)
            raise InvalidEquationError(
                "Invalid linear equation: both a and b cannot be zero"
            )

    @classmethod
    def _combined(cls, a: float, b: float, c: float, scale: float) -> "Line":
        """
        Builds the result of an addition/subtraction whose operands had
        normal length `scale`; a normal that cancelled down to rounding
        noise counts as a = b = 0.
        """
        if is_zero(math.hypot(a, b), scale):
            logger.debug("Rejected cancelled line a=%s b=%s c=%s", a, b, c)
            raise InvalidEquationError(
                "Invalid linear equation: both a and b cannot be zero"
            )
        return cls(a, b, c)

    @classmethod
    def from_slope_intercept(cls, m: float, k: float) -> "Line":
        """y = m x + k  -->  -m x + 1 y = k"""
        return cls(-m, 1.0, k)

    @classmethod
    def from_point_slope(cls, m: float, x1: float, y1: float) -> "Line":
        """y - y1 = m (x - x1)  -->  -m x + 1 y = -m x1 + y1"""
        return cls(-m, 1.0, -m * x1 + y1)

    @classmethod
    def from_two_points(cls, x1: float, y1: float, x2: float, y2: float) -> "Line":
        """
        Line through (x1, y1) and (x2, y2).

        A vertical pair (x1 == x2) has no slope, so it becomes 1 x + 0 y = x1
        instead of going through the point-slope path.
        """
        dx = x2 - x1
        dy = y2 - y1
        magnitude = max(abs(x1), abs(y1), abs(x2), abs(y2))

        if is_zero(math.hypot(dx, dy), magnitude):
            logger.debug("Rejected identical points (%s, %s)", x1, y1)
            raise InvalidEquationError("Cannot create equation: points are identical")

        if is_zero(dx, abs(dy)):
            logger.debug("Vertical line through x=%s", x1)
            return cls(1.0, 0.0, x1)

        return cls.from_point_slope(dy / dx, x1, y1)

    @classmethod
    def from_points(cls, p1: Sequence[float], p2: Sequence[float]) -> "Line":
        """Same as from_two_points, taking (x, y) pairs."""
        (x1, y1), (x2, y2) = p1, p2
        return cls.from_two_points(float(x1), float(y1), float(x2), float(y2))

    # ------------------------------------------------------------
    # Orientation
    # ------------------------------------------------------------
    @property
    def is_vertical(self) -> bool:
        return is_zero(self.b, self.norm)

    @property
    def is_horizontal(self) -> bool:
        return is_zero(self.a, self.norm)

    @property
    def normal(self) -> Tuple[float, float]:
        return (self.a, self.b)

    @property
    def norm(self) -> float:
        """Length of the normal vector (a, b)."""
        return math.hypot(self.a, self.b)

    # ------------------------------------------------------------
    # Solving & basic geometric properties
    # ------------------------------------------------------------
    def _require_a(self, message: str):
        if self.is_horizontal:
            logger.debug("%s (line %s)", message, self)
            raise DegenerateOperationError(message)

    def _require_b(self, message: str):
        if self.is_vertical:
            logger.debug("%s (line %s)", message, self)
            raise DegenerateOperationError(message)

    def solve_for_x(self, y: float) -> float:
        self._require_a("Cannot solve for x: coefficient of x is zero")
        return (self.c - self.b * y) / self.a

    def solve_for_y(self, x: float) -> float:
        self._require_b("Cannot solve for y: coefficient of y is zero")
        return (self.c - self.a * x) / self.b

    def slope(self) -> float:
        self._require_b("Vertical line has undefined slope")
        return -self.a / self.b

    def y_intercept(self) -> float:
        self._require_b("Vertical line has no y-intercept")
        return self.c / self.b

    def x_intercept(self) -> float:
        self._require_a("Horizontal line has no x-intercept")
        return self.c / self.a

    def points_at_x(self, xs) -> np.ndarray:
        """
        Vectorised solve_for_y: returns an (N, 2) array of points on the
        line for every x in xs.
        """
        self._require_b("Cannot solve for y: coefficient of y is zero")
        xs = np.asarray(xs, dtype=float).ravel()
        ys = (self.c - self.a * xs) / self.b
        return np.column_stack((xs, ys))

    def points_at_y(self, ys) -> np.ndarray:
        """Vectorised solve_for_x, same layout as points_at_x."""
        self._require_a("Cannot solve for x: coefficient of x is zero")
        ys = np.asarray(ys, dtype=float).ravel()
        xs = (self.c - self.b * ys) / self.a
        return np.column_stack((xs, ys))

    def direction(self) -> float:
        """
        Angle of the direction vector (b, -a) in degrees, folded into
        [0, 180) since a line has no orientation.
        """
        angle = math.degrees(math.atan2(-self.a, self.b)) % 180.0
        if angle >= 180.0:
            angle -= 180.0
        return angle

    # ------------------------------------------------------------
    # Distance & projection
    # ------------------------------------------------------------
    def _residual(self, point) -> float:
        x0, y0 = point
        return self.a * x0 + self.b * y0 - self.c

    def distance_from_point(self, point) -> float:
        """|a x0 + b y0 - c| / sqrt(a^2 + b^2)"""
        return abs(self._residual(point)) / self.norm

    def closest_point(self, point) -> Tuple[float, float]:
        """Orthogonal projection of point onto the line."""
        x0, y0 = point
        t = self._residual(point) / (self.a * self.a + self.b * self.b)
        return (x0 - t * self.a, y0 - t * self.b)

    def contains_point(self, point, tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            tolerance = get_active_params()["POINT_ON_LINE_TOLERANCE"]
        return self.distance_from_point(point) <= tolerance

    # ------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------
    def determinant(self, other: "Line") -> float:
        """a * other.b - other.a * b; zero iff the lines are parallel."""
        return cross2d(self.normal, other.normal)

    def _det_is_zero(self, det: float, other: "Line") -> bool:
        # relative to |n1| |n2|: compares the sine of the angle between normals
        return is_zero(det, self.norm * other.norm)

    def is_parallel_to(self, other: "Line") -> bool:
        return self._det_is_zero(self.determinant(other), other)

    def is_perpendicular_to(self, other: "Line") -> bool:
        return is_zero(dot2d(self.normal, other.normal), self.norm * other.norm)

    def is_coincident_with(self, other: "Line") -> bool:
        """Parallel, with the constants in the same ratio as the coefficients."""
        scale = math.hypot(self.norm, self.c) * math.hypot(other.norm, other.c)
        return (
            self.is_parallel_to(other)
            and is_zero(cross2d((self.a, self.c), (other.a, other.c)), scale)
            and is_zero(cross2d((self.b, self.c), (other.b, other.c)), scale)
        )

    def angle_to(self, other: "Line") -> float:
        """Acute angle between the lines in degrees, in [0, 90]."""
        cross = abs(self.determinant(other))
        dot = abs(dot2d(self.normal, other.normal))
        return math.degrees(math.atan2(cross, dot))

    def intersection(self, other: "Line") -> Tuple[float, float]:
        """
        Solves
            a1 x + b1 y = c1
            a2 x + b2 y = c2
        by Cramer's rule.

        Raises ParallelLinesError when the determinant is zero, which also
        covers coincident lines (infinitely many solutions).
        """
        det = self.determinant(other)
        if self._det_is_zero(det, other):
            logger.debug("No intersection between %s and %s (det=%s)", self, other, det)
            raise ParallelLinesError("Cannot find intersection: lines are parallel")

        x = (self.c * other.b - other.c * self.b) / det
        y = (self.a * other.c - other.a * self.c) / det
        return (x, y)

    # ------------------------------------------------------------
    # Algebraic combination
    # ------------------------------------------------------------
    def scale(self, scalar: float) -> "Line":
        if scalar == 0:
            raise InvalidEquationError("Cannot scale by zero")
        return Line(self.a * scalar, self.b * scalar, self.c * scalar)

    def add(self, other: "Line") -> "Line":
        # l + (-l) has a = b = 0, so the sum is re-validated
        return Line._combined(
            self.a + other.a, self.b + other.b, self.c + other.c,
            self.norm + other.norm,
        )

    def subtract(self, other: "Line") -> "Line":
        return Line._combined(
            self.a - other.a, self.b - other.b, self.c - other.c,
            self.norm + other.norm,
        )

    def __add__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __neg__(self):
        return self.scale(-1.0)

    def is_close(self, other: "Line", epsilon: Optional[float] = None) -> bool:
        """Coefficient-wise equality within epsilon; == stays exact."""
        return (
            is_zero(self.a - other.a, epsilon=epsilon)
            and is_zero(self.b - other.b, epsilon=epsilon)
            and is_zero(self.c - other.c, epsilon=epsilon)
        )

    def as_array(self) -> np.ndarray:
        return np.array([self.a, self.b, self.c])

    # ------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------
    def __str__(self):
        p = get_active_params()["DISPLAY_PRECISION"]
        op = "-" if self.b < 0 else "+"
        return f"{self.a:.{p}f}x {op} {abs(self.b):.{p}f}y = {self.c:.{p}f}"
