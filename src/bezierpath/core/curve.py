"""Cubic Bezier curve evaluation and differential geometry.

A `Curve` is the segment between two consecutive anchors of a path. It holds
its four control points plus the control polygons of its first and second
derivative (the hodographs), which are computed once at construction:

    B'(t)  is a quadratic Bezier with control points 3 * (P[i+1] - P[i])
    B''(t) is a linear Bezier with control points 2 * (Q[i+1] - Q[i])

All evaluation functions take the curve-local parameter t in [0, 1]. Arc
length uses fixed-order Gauss-Legendre quadrature of the speed |B'(t)|.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from bezierpath.core._gauss import ABSCISSAE, WEIGHTS
from bezierpath.domain import Anchor, Vector

LINEAR_TOLERANCE = 1e-4


def derive_control_polygons(points: Sequence[Vector]) -> list[list[Vector]]:
    """Build the control polygons of every derivative of a Bezier curve.

    The derivative of a degree-n Bezier is a degree-(n-1) Bezier with control
    points n * (P[i+1] - P[i]); this is applied repeatedly down to a single
    point.

    Args:
        points: Control points of the curve

    Returns:
        One control polygon per derivative order, first derivative first

    Examples:
        >>> polys = derive_control_polygons([Vector(0, 0), Vector(0, 0), Vector(3, 0), Vector(3, 0)])
        >>> [len(p) for p in polys]
        [3, 2, 1]
    """
    result = []
    current = list(points)
    while len(current) > 1:
        n = len(current) - 1
        current = [
            Vector(n * (p2.x - p1.x), n * (p2.y - p1.y))
            for p1, p2 in zip(current, current[1:])
        ]
        result.append(current)
    return result


def evaluate(points: Sequence[Vector], t: float) -> Vector:
    """Evaluate a Bezier curve of degree 0 to 3 at t.

    The endpoints are returned exactly at t=0 and t=1, and a control polygon
    that has collapsed onto one point returns that point, so no round-off is
    introduced in those cases.

    Args:
        points: 1 to 4 control points
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    if t == 0:
        return points[0]
    degree = len(points) - 1
    if t == 1:
        return points[degree]

    first = points[0]
    if degree == 0 or all(p == first for p in points[1:]):
        return first

    mt = 1 - t
    if degree == 1:
        p0, p1 = points
        return Vector(mt * p0.x + t * p1.x, mt * p0.y + t * p1.y)

    if degree == 2:
        p0, p1, p2 = points
        a = mt * mt
        b = mt * t * 2
        c = t * t
        return Vector(
            a * p0.x + b * p1.x + c * p2.x,
            a * p0.y + b * p1.y + c * p2.y,
        )

    p0, p1, p2, p3 = points
    mt2 = mt * mt
    t2 = t * t
    a = mt2 * mt
    b = mt2 * t * 3
    c = mt * t2 * 3
    d = t * t2
    return Vector(
        a * p0.x + b * p1.x + c * p2.x + d * p3.x,
        a * p0.y + b * p1.y + c * p2.y + d * p3.y,
    )


def _align(points: Sequence[Vector], start: Vector, end: Vector) -> list[Vector]:
    """Rotate and translate points so that start->end lies on the positive x-axis."""
    angle = -math.atan2(end.y - start.y, end.x - start.x)
    cos = math.cos(angle)
    sin = math.sin(angle)
    aligned = []
    for p in points:
        dx = p.x - start.x
        dy = p.y - start.y
        aligned.append(Vector(dx * cos - dy * sin, dx * sin + dy * cos))
    return aligned


@dataclass(frozen=True, slots=True)
class CurveDerivatives:
    """Control polygons of a cubic's first and second derivative.

    Attributes:
        first: Three control points of the quadratic hodograph
        second: Two control points of the linear second derivative
    """

    first: tuple[Vector, Vector, Vector]
    second: tuple[Vector, Vector]

    @classmethod
    def from_points(cls, points: Sequence[Vector]) -> "CurveDerivatives":
        first, second, *_ = derive_control_polygons(points)
        return cls(first=tuple(first), second=tuple(second))  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Curve:
    """A cubic Bezier segment.

    Degree is always 3. A straight segment keeps four points, with its inner
    control points on its endpoints.

    Attributes:
        points: Control points (P0, P1, P2, P3)
        derivatives: Precomputed derivative control polygons
    """

    degree: ClassVar[int] = 3

    points: tuple[Vector, Vector, Vector, Vector]
    derivatives: CurveDerivatives

    @classmethod
    def from_points(cls, p0: Vector, p1: Vector, p2: Vector, p3: Vector) -> "Curve":
        """Create a curve from its four control points.

        Args:
            p0: Start point
            p1: Control point leaving the start point
            p2: Control point arriving at the end point
            p3: End point

        Returns:
            Curve with its derivative polygons computed
        """
        points = (p0, p1, p2, p3)
        return cls(points=points, derivatives=CurveDerivatives.from_points(points))

    @property
    def start(self) -> Vector:
        """First control point, on the curve."""
        return self.points[0]

    @property
    def end(self) -> Vector:
        """Last control point, on the curve."""
        return self.points[3]

    def point_at(self, t: float) -> Vector:
        """Point on the curve at parameter t."""
        return evaluate(self.points, t)

    def derivative(self, t: float) -> Vector:
        """First derivative B'(t)."""
        return evaluate(self.derivatives.first, t)

    def speed(self, t: float) -> float:
        """Magnitude of the first derivative, the integrand of arc length."""
        return self.derivative(t).length()

    def tangent_at(self, t: float) -> Vector:
        """Unit tangent at t.

        Where the derivative vanishes (for example on a zero-length curve or
        at a straight segment's endpoints) the result is (nan, nan).
        """
        return self.derivative(t).normalize()

    def normal_at(self, t: float) -> Vector:
        """Unit normal at t: the tangent turned by +90 degrees, (x, y) -> (-y, x)."""
        tangent = self.tangent_at(t)
        return Vector(-tangent.y, tangent.x)

    def _curvature(self, t: float) -> tuple[float, float]:
        d = self.derivative(t)
        dd = evaluate(self.derivatives.second, t)
        numerator = d.x * dd.y - d.y * dd.x
        denominator = (d.x * d.x + d.y * d.y) ** 1.5

        # Degenerate curves report zero for both, never inf or nan.
        if numerator == 0 or denominator == 0:
            return 0.0, 0.0
        return numerator / denominator, denominator / numerator

    def curvature_at(self, t: float) -> float:
        """Signed curvature at t, 0 where it is undefined or the curve is straight."""
        return self._curvature(t)[0]

    def radius_at(self, t: float) -> float:
        """Signed radius of curvature at t, 0 where curvature is 0."""
        return self._curvature(t)[1]

    def is_linear(self, tolerance: float = LINEAR_TOLERANCE) -> bool:
        """Check whether all control points lie on the chord P0->P3.

        Args:
            tolerance: Maximum allowed distance from the chord

        Returns:
            True if the curve is a straight segment
        """
        aligned = _align(self.points, self.points[0], self.points[self.degree])
        return all(abs(p.y) <= tolerance for p in aligned)

    def length(self) -> float:
        """Arc length by 24-point Gauss-Legendre quadrature.

        Nodes on [-1, 1] are mapped to [0, 1] with t = 0.5 * x + 0.5.

        Returns:
            Approximate arc length
        """
        z = 0.5
        total = 0.0
        for x, w in zip(ABSCISSAE, WEIGHTS):
            total += w * self.speed(z * x + z)
        return z * total

    def clear_handles(self) -> "Curve":
        """Straight-line curve between the same endpoints."""
        return make_curve(Anchor(self.start), Anchor(self.end))


def make_curve(anchor1: Anchor, anchor2: Anchor) -> Curve:
    """Build the cubic connecting two anchors.

    A missing handle falls back to its anchor's point.

    Args:
        anchor1: Start anchor, contributes its point and outgoing handle
        anchor2: End anchor, contributes its incoming handle and point

    Returns:
        Curve from anchor1.point to anchor2.point
    """
    return Curve.from_points(
        anchor1.point,
        anchor1.handle_out if anchor1.handle_out is not None else anchor1.point,
        anchor2.handle_in if anchor2.handle_in is not None else anchor2.point,
        anchor2.point,
    )
