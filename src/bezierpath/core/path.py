"""Path engine: command interpretation, caching and global parameterization.

A `Path` owns an immutable command stream. Anchors, curves and arc lengths are
derived from it on first use and memoized on the instance, as is the bounding
box. Every transform returns a new `Path` whose caches start out empty.

Location queries take a global parameter t in [0, 1] that runs along the arc
length of the whole path, across all of its subpaths. They are resolved in two
linear scans: first the subpath containing the target arc length, then the
curve within that subpath, then the curve-local parameter.

Thread safety: the memo caches are written on first read without locking.
Share a Path across threads only after warming it (e.g. calling length() and
bounding_box()) or under external synchronization.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from bezierpath.core.curve import Curve, make_curve
from bezierpath.core.transform import Matrix, merge_transforms, rotate, scale, translate
from bezierpath.domain import (
    Anchor,
    BoundingBox,
    Close,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Vector,
    command_from_dict,
)
from bezierpath.exceptions import EmptyPathError
from bezierpath.io.svg import parse_svg_path, to_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BezierPath:
    """One subpath: anchors, the curves connecting them and their lengths.

    Attributes:
        anchors: Vertices in drawing order
        closed: Whether the subpath ends with a close command
        curves: Curves between consecutive anchors, plus last->first if closed
        curve_lengths: Arc length of each curve
        length: Total arc length
    """

    anchors: tuple[Anchor, ...]
    closed: bool
    curves: tuple[Curve, ...]
    curve_lengths: tuple[float, ...]
    length: float

    @classmethod
    def from_anchors(cls, anchors: Sequence[Anchor], closed: bool) -> "BezierPath":
        """Build the curves of a subpath and measure them.

        Args:
            anchors: Vertices in drawing order
            closed: Whether to connect the last anchor back to the first

        Returns:
            BezierPath instance
        """
        curves = [make_curve(a1, a2) for a1, a2 in zip(anchors, anchors[1:])]
        if closed and anchors:
            curves.append(make_curve(anchors[-1], anchors[0]))

        lengths = tuple(curve.length() for curve in curves)
        return cls(
            anchors=tuple(anchors),
            closed=closed,
            curves=tuple(curves),
            curve_lengths=lengths,
            length=float(sum(lengths)),
        )


@dataclass(frozen=True, slots=True)
class SubpathLocation:
    """A subpath and the subpath-local parameter within it."""

    subpath: BezierPath
    t: float


@dataclass(frozen=True, slots=True)
class CurveLocation:
    """A curve, the arc length into it and the curve-local parameter.

    Attributes:
        curve: The resolved curve
        location: Arc length from the curve start
        t: Curve parameter passed to the curve's evaluation methods
    """

    curve: Curve
    location: float
    t: float


def split_subpaths(commands: Iterable[PathCommand]) -> list[list[PathCommand]]:
    """Split a command stream into subpath runs.

    Only close commands end a run. A trailing run without close becomes a
    final open run. A move inside a run does not start a new one.

    Args:
        commands: The command stream

    Returns:
        Runs of commands, each ending with Close except possibly the last
    """
    runs: list[list[PathCommand]] = []
    current: list[PathCommand] = []
    for command in commands:
        current.append(command)
        if isinstance(command, Close):
            runs.append(current)
            current = []
    if current:
        runs.append(current)
    return runs


def interpret_subpath(commands: Iterable[PathCommand]) -> tuple[list[Anchor], bool]:
    """Turn one subpath run into anchors.

    - MoveTo and LineTo append an anchor without handles.
    - CurveTo sets the outgoing handle of the previous anchor to (x1, y1),
      keeping its incoming handle, and appends an anchor at (x3, y3) with
      incoming handle (x2, y2).
    - Close marks the run closed and adds no anchor.

    A CurveTo with no preceding anchor is a malformed stream; producing a
    well-formed one is the caller's responsibility.

    Args:
        commands: Commands of one subpath

    Returns:
        Tuple of (anchors, closed)
    """
    anchors: list[Anchor] = []
    closed = False
    for command in commands:
        if isinstance(command, (MoveTo, LineTo)):
            anchors.append(Anchor(Vector(command.x, command.y)))
        elif isinstance(command, CurveTo):
            anchors[-1] = anchors[-1].with_handle_out(Vector(command.x1, command.y1))
            anchors.append(
                Anchor(
                    Vector(command.x3, command.y3),
                    handle_in=Vector(command.x2, command.y2),
                )
            )
        elif isinstance(command, Close):
            closed = True
    return anchors, closed


def derive_subpaths(commands: Iterable[PathCommand]) -> list[BezierPath]:
    """Derive every subpath of a command stream.

    Args:
        commands: The command stream

    Returns:
        Subpaths in drawing order
    """
    return [
        BezierPath.from_anchors(*interpret_subpath(run)) for run in split_subpaths(commands)
    ]


def _scan(lengths: Sequence[float], offset: float) -> tuple[int, float] | None:
    """Find the first segment whose running length total exceeds offset.

    Returns:
        Tuple of (index, arc length into that segment), or None if the scan
        falls through
    """
    total = 0.0
    for index, length in enumerate(lengths):
        start = total
        total += length
        if total > offset:
            return index, offset - start
    return None


class Path:
    """An immutable path with lazily derived geometry.

    Args:
        source: SVG path data, or a sequence of drawing commands

    Examples:
        >>> from bezierpath.domain import move_to, line_to, close
        >>> path = Path([move_to(0, 0), line_to(10, 0), line_to(10, 10), close()])
        >>> len(path.subpaths())
        1
    """

    def __init__(self, source: str | Iterable[PathCommand]) -> None:
        if isinstance(source, str):
            source = parse_svg_path(source)
        self._commands: tuple[PathCommand, ...] = tuple(source)
        self._cached_subpaths: tuple[BezierPath, ...] | None = None
        self._cached_length: float | None = None
        self._cached_bbox: BoundingBox | None = None

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        """The command stream."""
        return self._commands

    def _ensure_computed(self) -> tuple[BezierPath, ...]:
        if self._cached_subpaths is None:
            subpaths = tuple(derive_subpaths(self._commands))
            self._cached_length = float(sum(subpath.length for subpath in subpaths))
            self._cached_subpaths = subpaths
            logger.debug(
                "Derived %d subpaths with %d curves, length %.6g",
                len(subpaths),
                sum(len(subpath.curves) for subpath in subpaths),
                self._cached_length,
            )
        return self._cached_subpaths

    def subpaths(self) -> tuple[BezierPath, ...]:
        """Derived subpaths in drawing order.

        Result is cached for efficiency.
        """
        return self._ensure_computed()

    def anchors(self) -> list[Anchor]:
        """Anchors of all subpaths in drawing order."""
        return [anchor for subpath in self._ensure_computed() for anchor in subpath.anchors]

    def curves(self) -> list[Curve]:
        """Curves of all subpaths in drawing order."""
        return [curve for subpath in self._ensure_computed() for curve in subpath.curves]

    def length(self) -> float:
        """Total arc length over all subpaths.

        Result is cached for efficiency.
        """
        self._ensure_computed()
        return self._cached_length  # type: ignore[return-value]

    def bounding_box(self) -> BoundingBox:
        """Bounds of all anchor points.

        Handles and the curve extrema between anchors are not included, so a
        curved path can extend past this box.

        Result is cached for efficiency.
        """
        if self._cached_bbox is None:
            self._cached_bbox = BoundingBox.from_points(
                [anchor.point for anchor in self.anchors()]
            )
        return self._cached_bbox

    def subpath_at(self, t: float) -> SubpathLocation:
        """Resolve a global parameter to a subpath.

        Args:
            t: Global parameter in [0, 1]. Values >= 1 resolve to the end of
                the last subpath; negative values are outside the contract.

        Returns:
            The subpath and its local parameter

        Raises:
            EmptyPathError: If the path has no subpaths
        """
        subpaths = self._ensure_computed()
        if not subpaths:
            raise EmptyPathError()

        offset = self.length() * t
        found = _scan([subpath.length for subpath in subpaths], offset)
        if found is None:
            return SubpathLocation(subpath=subpaths[-1], t=1.0)

        index, into = found
        subpath = subpaths[index]
        return SubpathLocation(subpath=subpath, t=into / subpath.length)

    def location_at(self, t: float) -> CurveLocation:
        """Resolve a global parameter to a curve and its local parameter.

        Args:
            t: Global parameter in [0, 1]

        Returns:
            The curve, the arc length into it and its local parameter

        Raises:
            EmptyPathError: If the path has no curves
        """
        resolved = self.subpath_at(t)
        subpath = resolved.subpath
        if not subpath.curves:
            raise EmptyPathError("Subpath has no curves to query")

        offset = subpath.length * resolved.t
        found = _scan(subpath.curve_lengths, offset)
        if found is None:
            return CurveLocation(
                curve=subpath.curves[-1],
                location=subpath.curve_lengths[-1],
                t=1.0,
            )

        index, into = found
        return CurveLocation(
            curve=subpath.curves[index],
            location=into,
            t=into / subpath.curve_lengths[index],
        )

    def point_at(self, t: float) -> Vector:
        """Point at global parameter t."""
        location = self.location_at(t)
        return location.curve.point_at(location.t)

    def tangent_at(self, t: float) -> Vector:
        """Unit tangent at global parameter t, (nan, nan) where the derivative is zero."""
        location = self.location_at(t)
        return location.curve.tangent_at(location.t)

    def normal_at(self, t: float) -> Vector:
        """Unit normal at global parameter t."""
        location = self.location_at(t)
        return location.curve.normal_at(location.t)

    def curvature_at(self, t: float) -> float:
        """Curvature at global parameter t, 0 where undefined."""
        location = self.location_at(t)
        return location.curve.curvature_at(location.t)

    def radius_at(self, t: float) -> float:
        """Radius of curvature at global parameter t, 0 where undefined."""
        location = self.location_at(t)
        return location.curve.radius_at(location.t)

    def transform(self, *matrices: Matrix) -> "Path":
        """Apply transforms to every coordinate.

        Args:
            *matrices: Matrices merged with merge_transforms

        Returns:
            New path
        """
        matrix = merge_transforms(*matrices)
        return Path([command.map_points(matrix.apply) for command in self._commands])

    def translate(self, x: float = 0.0, y: float = 0.0) -> "Path":
        """Move the path by (x, y)."""
        return self.transform(translate(x, y))

    def scale(self, sx: float, sy: float | None = None) -> "Path":
        """Scale about the bounding box center.

        Args:
            sx: Horizontal scale factor
            sy: Vertical scale factor, defaults to sx

        Returns:
            New path
        """
        if sy is None:
            sy = sx
        return self.transform(scale(sx, sy, origin=self.bounding_box().center))

    def rotate(self, angle: float) -> "Path":
        """Rotate by angle degrees about the bounding box center."""
        return self.transform(rotate(angle, origin=self.bounding_box().center))

    def to_instructions(self) -> tuple[PathCommand, ...]:
        """The command stream."""
        return self._commands

    def to_svg(self) -> str:
        """Render the command stream as SVG path data."""
        return to_svg(self._commands)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the command list
        """
        return {"commands": [command.to_dict() for command in self._commands]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Path":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a command list

        Returns:
            Path instance
        """
        return cls([command_from_dict(item) for item in data["commands"]])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    def __hash__(self) -> int:
        return hash(self._commands)

    def __repr__(self) -> str:
        return f"Path({self.to_svg()!r})"
