"""Immutable 2D vector type.

Vectors double as points: a curve's control points, a path's anchors and
the tangents and normals returned by queries are all `Vector` instances.
Every operation returns a new vector; none mutates its receiver.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Vector:
    """A vector (or point) in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def add(self, other: "Vector") -> "Vector":
        """Component-wise sum."""
        return Vector(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector") -> "Vector":
        """Component-wise difference."""
        return Vector(self.x - other.x, self.y - other.y)

    def multiply(self, scalar: float) -> "Vector":
        """Scale both components by a scalar."""
        return Vector(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> "Vector":
        """Divide both components by a scalar.

        Raises:
            ZeroDivisionError: If scalar is zero
        """
        return Vector(self.x / scalar, self.y / scalar)

    def dot(self, other: "Vector") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def distance(self, other: "Vector") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector":
        """Return the unit vector with the same direction.

        The zero vector has no direction; normalizing it yields NaN
        coordinates, which callers can detect with `is_finite()`.

        Returns:
            Vector of length 1, or (nan, nan) for the zero vector
        """
        length = self.length()
        if length == 0:
            return Vector(math.nan, math.nan)
        return self.divide(length)

    def limit(self, max_length: float) -> "Vector":
        """Clamp the length of the vector to max_length.

        Args:
            max_length: Maximum allowed length

        Returns:
            This vector's direction scaled to max_length if it is longer,
            otherwise a copy of this vector
        """
        length_sq = self.x * self.x + self.y * self.y
        if length_sq > max_length * max_length:
            return self.divide(math.sqrt(length_sq)).multiply(max_length)
        return self.copy()

    def rotation(self) -> float:
        """Angle from the positive x-axis in degrees, in (-180, 180]."""
        return math.degrees(math.atan2(self.y, self.x))

    def angle(self, other: "Vector") -> float:
        """Unsigned angle between two vectors in degrees.

        The cosine is clamped to [-1, 1] so floating point overshoot on
        (anti)parallel vectors does not leave the domain of acos.

        Args:
            other: The second vector

        Returns:
            Angle in degrees in [0, 180]
        """
        cos_angle = self.dot(other) / (self.length() * other.length())
        return math.degrees(math.acos(max(-1.0, min(1.0, cos_angle))))

    def rotate(self, angle: float = 0.0) -> "Vector":
        """Rotate around the origin.

        Args:
            angle: Rotation in degrees, counter-clockwise for a y-up system

        Returns:
            Rotated vector
        """
        radians = math.radians(angle)
        cos = math.cos(radians)
        sin = math.sin(radians)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def is_zero(self) -> bool:
        """Check whether both components are exactly zero."""
        return self.x == 0 and self.y == 0

    def is_finite(self) -> bool:
        """Check whether both components are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def copy(self) -> "Vector":
        """Return an equal, distinct vector."""
        return Vector(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Vector instance
        """
        return cls(x=data["x"], y=data["y"])

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector":
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector":
        return self.divide(scalar)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
