"""Drawing commands: the source of truth of a path.

A path is an ordered sequence of four command kinds:
- MoveTo(x, y): start a new pen position
- LineTo(x, y): straight segment to (x, y)
- CurveTo(x1, y1, x2, y2, x3, y3): cubic Bezier segment ending at (x3, y3)
- Close(): close the current subpath

Commands are plain immutable records. Their dictionary form (`to_dict`) is
the interchange format used by `Path.to_dict` and `Path.from_dict`.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

PointMapper = Callable[[float, float], tuple[float, float]]


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Move the pen to (x, y)."""

    command: ClassVar[str] = "moveTo"

    x: float
    y: float

    def map_points(self, fn: PointMapper) -> "MoveTo":
        """Return a copy with its coordinate pair mapped through fn."""
        return MoveTo(*fn(self.x, self.y))

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to (x, y)."""

    command: ClassVar[str] = "lineTo"

    x: float
    y: float

    def map_points(self, fn: PointMapper) -> "LineTo":
        """Return a copy with its coordinate pair mapped through fn."""
        return LineTo(*fn(self.x, self.y))

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class CurveTo:
    """Cubic Bezier segment from the current point.

    Attributes:
        x1, y1: Control point leaving the current point
        x2, y2: Control point arriving at the end point
        x3, y3: End point, which becomes the new current point
    """

    command: ClassVar[str] = "curveTo"

    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    def map_points(self, fn: PointMapper) -> "CurveTo":
        """Return a copy with each of its three coordinate pairs mapped through fn."""
        return CurveTo(*fn(self.x1, self.y1), *fn(self.x2, self.y2), *fn(self.x3, self.y3))

    def to_dict(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "x1": self.x1,
            "y1": self.y1,
            "x2": self.x2,
            "y2": self.y2,
            "x3": self.x3,
            "y3": self.y3,
        }


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath."""

    command: ClassVar[str] = "close"

    def map_points(self, fn: PointMapper) -> "Close":  # noqa: ARG002
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command}


PathCommand = MoveTo | LineTo | CurveTo | Close

_COMMAND_TYPES: dict[str, type[PathCommand]] = {
    MoveTo.command: MoveTo,
    LineTo.command: LineTo,
    CurveTo.command: CurveTo,
    Close.command: Close,
}


def command_from_dict(data: dict[str, Any]) -> PathCommand:
    """Deserialize any command from its dictionary form.

    Args:
        data: Dictionary with a "command" field and the command's coordinates

    Returns:
        The matching command instance

    Raises:
        ValueError: If the command name is unknown
    """
    name = data.get("command")
    try:
        command_type = _COMMAND_TYPES[name]  # type: ignore[index]
    except KeyError:
        raise ValueError(f"Unknown path command: {name!r}") from None

    fields = {key: value for key, value in data.items() if key != "command"}
    return command_type(**fields)


def move_to(x: float, y: float) -> MoveTo:
    """moveTo command."""
    return MoveTo(x, y)


def line_to(x: float, y: float) -> LineTo:
    """lineTo command."""
    return LineTo(x, y)


def curve_to(x1: float, y1: float, x2: float, y2: float, x3: float, y3: float) -> CurveTo:
    """curveTo command."""
    return CurveTo(x1, y1, x2, y2, x3, y3)


def close() -> Close:
    """close command."""
    return Close()
