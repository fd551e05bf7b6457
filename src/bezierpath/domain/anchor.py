"""Anchor: one vertex of a piecewise Bezier path."""

from dataclasses import dataclass, replace
from typing import Any

from bezierpath.domain.vector import Vector


@dataclass(frozen=True, slots=True)
class Anchor:
    """An on-curve point with optional tangent handles.

    Handles are absolute control-point positions, not offsets from the
    anchor. A missing handle means the adjacent segment meets the anchor
    as a straight corner.

    Attributes:
        point: The on-curve point
        handle_in: Control point of the segment arriving at this anchor
        handle_out: Control point of the segment leaving this anchor
    """

    point: Vector
    handle_in: Vector | None = None
    handle_out: Vector | None = None

    def has_handles(self) -> bool:
        """Check whether either handle is present."""
        return self.handle_in is not None or self.handle_out is not None

    def remove_handles(self) -> "Anchor":
        """Return the same anchor without handles."""
        return Anchor(self.point)

    def with_handle_out(self, handle_out: Vector | None) -> "Anchor":
        """Return a copy with the outgoing handle replaced."""
        return replace(self, handle_out=handle_out)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with point, handle_in and handle_out fields
        """
        return {
            "point": self.point.to_dict(),
            "handle_in": self.handle_in.to_dict() if self.handle_in else None,
            "handle_out": self.handle_out.to_dict() if self.handle_out else None,
        }
