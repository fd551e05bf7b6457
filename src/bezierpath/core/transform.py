"""Affine transformation matrices.

A transform maps source coordinates (x, y) to (x', y') by treating them as a
column vector multiplied by a 3x3 matrix with an implied last row [0 0 1]:

    [ x' ]   [ a  c  tx ] [ x ]   [ a * x + c * y + tx ]
    [ y' ] = [ b  d  ty ] [ y ] = [ b * x + d * y + ty ]
    [ 1  ]   [ 0  0  1  ] [ 1 ]   [         1          ]

`translate`, `scale` and `rotate` build single-purpose matrices relative to
the identity; `merge_transforms` chains several of them.
"""

import math
from dataclasses import dataclass

from bezierpath.domain import Vector

ORIGIN = Vector(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Matrix:
    """A 2x3 affine transformation matrix."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "Matrix":
        """The identity transform."""
        return cls()

    def is_identity(self) -> bool:
        return self == Matrix.identity()

    def append(self, other: "Matrix") -> "Matrix":
        """Compose with another matrix, self * other.

        The result applies `other` first, in this matrix's coordinate space,
        then this matrix.

        Args:
            other: Matrix to append

        Returns:
            The composed matrix
        """
        a1, b1, c1, d1, tx1, ty1 = self.to_tuple()
        a2, b2, c2, d2, tx2, ty2 = other.to_tuple()
        return Matrix(
            a=a1 * a2 + c1 * b2,
            b=b1 * a2 + d1 * b2,
            c=a1 * c2 + c1 * d2,
            d=b1 * c2 + d1 * d2,
            tx=tx1 + (a1 * tx2 + c1 * ty2),
            ty=ty1 + (b1 * tx2 + d1 * ty2),
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map a coordinate pair."""
        return (self.a * x + self.c * y + self.tx, self.b * x + self.d * y + self.ty)

    def to_tuple(self) -> tuple[float, float, float, float, float, float]:
        """Convert to (a, b, c, d, tx, ty)."""
        return (self.a, self.b, self.c, self.d, self.tx, self.ty)


def translate(x: float = 0.0, y: float = 0.0) -> Matrix:
    """Translation by (x, y)."""
    return Matrix(tx=x, ty=y)


def scale(sx: float = 1.0, sy: float = 1.0, origin: Vector = ORIGIN) -> Matrix:
    """Scaling about an origin, which stays fixed.

    Translates origin to (0, 0), scales, and translates back.

    Args:
        sx: Horizontal scale factor
        sy: Vertical scale factor
        origin: Fixed point of the scaling

    Returns:
        Scaling matrix
    """
    return merge_transforms(
        translate(origin.x, origin.y),
        Matrix(a=sx, d=sy),
        translate(-origin.x, -origin.y),
    )


def rotate(angle: float = 0.0, origin: Vector = ORIGIN) -> Matrix:
    """Rotation about an origin, which stays fixed.

    Args:
        angle: Rotation in degrees
        origin: Center of rotation

    Returns:
        Rotation matrix
    """
    radians = math.radians(angle)
    sin = math.sin(radians)
    cos = math.cos(radians)
    x, y = origin.x, origin.y
    return Matrix(
        a=cos,
        b=sin,
        c=-sin,
        d=cos,
        tx=x - x * cos + y * sin,
        ty=y - x * sin - y * cos,
    )


def merge_transforms(*matrices: Matrix) -> Matrix:
    """Chain matrices into one, starting from the identity.

    merge_transforms(A, B) == A.append(B): points are mapped by B, then by A.

    Args:
        *matrices: Matrices to compose, left to right

    Returns:
        The composed matrix
    """
    result = Matrix.identity()
    for matrix in matrices:
        result = result.append(matrix)
    return result


def apply_to_coordinates(matrix: Matrix, x: float, y: float) -> tuple[float, float]:
    """Map a coordinate pair through a matrix."""
    return matrix.apply(x, y)


def apply_to_point(matrix: Matrix, point: Vector) -> Vector:
    """Map a point through a matrix."""
    return Vector(*matrix.apply(point.x, point.y))
