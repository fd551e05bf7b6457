"""Axis-aligned bounding box."""

from dataclasses import dataclass
from typing import Any

from bezierpath.domain.vector import Vector


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned rectangle given by its minimum corner and size.

    Attributes:
        x: Minimum x coordinate
        y: Minimum y coordinate
        width: Extent along x
        height: Extent along y
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, points: list[Vector]) -> "BoundingBox":
        """Smallest box enclosing all points.

        Args:
            points: Points to enclose

        Returns:
            Bounding box, or a zero box at the origin for no points
        """
        if not points:
            return cls(0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        min_x, min_y = min(xs), min(ys)
        return cls(min_x, min_y, max(xs) - min_x, max(ys) - min_y)

    @property
    def center(self) -> Vector:
        """Center point of the box."""
        return Vector(self.x + self.width / 2, self.y + self.height / 2)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}
