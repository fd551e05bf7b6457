"""Unit tests for the path engine."""

import math

import pytest

from bezierpath.core.path import (
    BezierPath,
    Path,
    derive_subpaths,
    interpret_subpath,
    split_subpaths,
)
from bezierpath.domain import (
    Anchor,
    BoundingBox,
    Close,
    LineTo,
    MoveTo,
    Vector,
    close,
    curve_to,
    line_to,
    move_to,
)
from bezierpath.exceptions import EmptyPathError, GeometryError

SQUARE = "M 0 0 L 10 0 L 10 10 L 0 10 Z"
TWO_SQUARES = SQUARE + " M 20 0 L 30 0 L 30 10 L 20 10 Z"


def assert_vector_close(actual: Vector, expected: Vector, tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)


@pytest.fixture
def square() -> Path:
    """A closed 10x10 square starting at the origin."""
    return Path(SQUARE)


class TestSplitSubpaths:
    """Tests for splitting command streams into runs."""

    def test_close_ends_run(self) -> None:
        """Test each close command ends a run."""
        commands = [move_to(0, 0), line_to(1, 0), close(), move_to(5, 5), line_to(6, 5), close()]
        runs = split_subpaths(commands)
        assert len(runs) == 2
        assert all(isinstance(run[-1], Close) for run in runs)

    def test_trailing_run_is_kept(self) -> None:
        """Test an unclosed run at the end becomes its own run."""
        runs = split_subpaths([move_to(0, 0), line_to(1, 0), close(), move_to(5, 5), line_to(6, 5)])
        assert len(runs) == 2
        assert runs[1] == [MoveTo(5, 5), LineTo(6, 5)]

    def test_move_does_not_start_run(self) -> None:
        """Test a move without a preceding close continues the run."""
        runs = split_subpaths([move_to(0, 0), line_to(1, 0), move_to(5, 5), line_to(6, 5)])
        assert len(runs) == 1

    def test_empty_stream(self) -> None:
        """Test no commands yields no runs."""
        assert split_subpaths([]) == []


class TestInterpretSubpath:
    """Tests for turning commands into anchors."""

    def test_lines_make_plain_anchors(self) -> None:
        """Test move and line commands append anchors without handles."""
        anchors, closed = interpret_subpath([move_to(0, 0), line_to(10, 0), close()])
        assert anchors == [Anchor(Vector(0, 0)), Anchor(Vector(10, 0))]
        assert closed

    def test_curve_sets_handles(self) -> None:
        """Test curveTo sets the previous outgoing handle and the new incoming one."""
        anchors, closed = interpret_subpath([move_to(0, 0), curve_to(0, 10, 10, 10, 10, 0)])
        assert anchors[0] == Anchor(Vector(0, 0), handle_out=Vector(0, 10))
        assert anchors[1] == Anchor(Vector(10, 0), handle_in=Vector(10, 10))
        assert not closed

    def test_consecutive_curves_keep_incoming_handle(self) -> None:
        """Test an anchor between two curves carries both handles."""
        anchors, _ = interpret_subpath(
            [move_to(0, 0), curve_to(1, 1, 2, 2, 3, 3), curve_to(4, 4, 5, 5, 6, 6)]
        )
        middle = anchors[1]
        assert middle.handle_in == Vector(2, 2)
        assert middle.handle_out == Vector(4, 4)


class TestBezierPath:
    """Tests for subpath construction."""

    def test_open_subpath_curves(self) -> None:
        """Test an open subpath has one curve per consecutive anchor pair."""
        anchors = [Anchor(Vector(0, 0)), Anchor(Vector(3, 4)), Anchor(Vector(3, 10))]
        subpath = BezierPath.from_anchors(anchors, closed=False)
        assert len(subpath.curves) == 2
        assert subpath.curve_lengths == pytest.approx((5.0, 6.0))
        assert subpath.length == pytest.approx(11.0)

    def test_closed_subpath_adds_closing_curve(self) -> None:
        """Test closing connects the last anchor back to the first."""
        anchors = [Anchor(Vector(0, 0)), Anchor(Vector(3, 4)), Anchor(Vector(3, 10))]
        subpath = BezierPath.from_anchors(anchors, closed=True)
        assert len(subpath.curves) == 3
        assert subpath.curves[-1].start == Vector(3, 10)
        assert subpath.curves[-1].end == Vector(0, 0)

    def test_single_anchor_has_no_curves(self) -> None:
        """Test one anchor gives no open curves."""
        subpath = BezierPath.from_anchors([Anchor(Vector(1, 1))], closed=False)
        assert subpath.curves == ()
        assert subpath.length == 0.0

    def test_derive_subpaths(self) -> None:
        """Test subpaths are derived in drawing order."""
        subpaths = derive_subpaths(Path(TWO_SQUARES).commands)
        assert [s.anchors[0].point for s in subpaths] == [Vector(0, 0), Vector(20, 0)]


class TestPathQueries:
    """Tests for length, bounds and anchors."""

    def test_length(self, square: Path) -> None:
        """Test the perimeter of the square."""
        assert square.length() == pytest.approx(40.0)

    def test_bounding_box(self, square: Path) -> None:
        """Test the bounding box of the square."""
        assert square.bounding_box() == BoundingBox(0, 0, 10, 10)

    def test_anchors_and_curves(self, square: Path) -> None:
        """Test flattened anchors and curves."""
        assert [a.point for a in square.anchors()] == [
            Vector(0, 0),
            Vector(10, 0),
            Vector(10, 10),
            Vector(0, 10),
        ]
        assert len(square.curves()) == 4

    def test_bounding_box_ignores_handles(self) -> None:
        """Test only anchor points contribute to the bounds."""
        path = Path([move_to(0, 0), curve_to(0, 50, 10, 50, 10, 0)])
        assert path.bounding_box() == BoundingBox(0, 0, 10, 0)

    def test_results_are_cached(self, square: Path) -> None:
        """Test derived geometry is computed once and reused."""
        assert square.subpaths() is square.subpaths()
        assert square.bounding_box() is square.bounding_box()

    def test_caches_start_empty(self, square: Path) -> None:
        """Test nothing is derived until first queried."""
        assert square._cached_subpaths is None
        assert square._cached_length is None
        assert square._cached_bbox is None
        square.length()
        assert square._cached_subpaths is not None
        assert square._cached_bbox is None


class TestPathLocation:
    """Tests for global parameter resolution."""

    def test_start_point(self, square: Path) -> None:
        """Test t=0 is the first anchor."""
        assert square.point_at(0) == Vector(0, 0)

    def test_midpoint(self, square: Path) -> None:
        """Test t=0.5 is halfway around the perimeter."""
        assert_vector_close(square.point_at(0.5), Vector(10, 10))

    def test_end_point(self, square: Path) -> None:
        """Test t=1 returns to the start of a closed path."""
        assert_vector_close(square.point_at(1), Vector(0, 0))

    def test_inside_first_side(self, square: Path) -> None:
        """Test geometry halfway along the first side."""
        assert_vector_close(square.point_at(0.125), Vector(5, 0))
        assert_vector_close(square.tangent_at(0.125), Vector(1, 0))
        assert_vector_close(square.normal_at(0.125), Vector(0, 1))
        assert square.curvature_at(0.125) == 0.0
        assert square.radius_at(0.125) == 0.0

    @pytest.mark.parametrize("t", [0, 0.25, 0.5, 1])
    def test_corner_tangents_are_not_finite(self, square: Path, t: float) -> None:
        """Test queries at the corners of a polygon return instead of raising."""
        assert not square.tangent_at(t).is_finite()
        assert not square.normal_at(t).is_finite()
        assert square.curvature_at(t) == 0.0

    def test_location_details(self, square: Path) -> None:
        """Test the resolved curve, arc length offset and local parameter."""
        location = square.location_at(0.375)
        assert location.curve.start == Vector(10, 0)
        assert location.location == pytest.approx(5.0)
        assert location.t == pytest.approx(0.5)

    def test_beyond_end_clamps_to_last_curve(self, square: Path) -> None:
        """Test t>1 resolves to the end of the last curve."""
        location = square.location_at(1.5)
        assert location.t == 1.0
        assert location.curve.end == Vector(0, 0)

    def test_subpath_at(self) -> None:
        """Test the subpath lookup and its local parameter."""
        path = Path(TWO_SQUARES)
        resolved = path.subpath_at(0.75)
        assert resolved.subpath.anchors[0].point == Vector(20, 0)
        assert resolved.t == pytest.approx(0.5)

    def test_multiple_subpaths(self) -> None:
        """Test the parameter runs across subpaths."""
        path = Path(TWO_SQUARES)
        assert path.length() == pytest.approx(80.0)
        assert len(path.subpaths()) == 2
        assert_vector_close(path.point_at(0.75), Vector(30, 10))
        assert_vector_close(path.point_at(0.25), Vector(10, 10))

    def test_curve_parameter_is_passed_through(self) -> None:
        """Test the arc length fraction is used directly as the curve parameter."""
        arch = Path([move_to(0, 0), curve_to(0, 10, 10, 10, 10, 0)])
        assert_vector_close(arch.point_at(0.5), Vector(5, 7.5))

    def test_zero_length_path(self) -> None:
        """Test a path whose curves have zero length still resolves."""
        path = Path("M 3 3 L 3 3")
        assert path.length() == 0.0
        assert path.point_at(0.5) == Vector(3, 3)


class TestPathStructure:
    """Tests for subpath interpretation edge cases."""

    def test_trailing_open_subpath(self) -> None:
        """Test an unclosed final run is kept as an open subpath."""
        path = Path("M 0 0 L 10 0 L 10 10 Z M 20 0 L 30 0")
        subpaths = path.subpaths()
        assert len(subpaths) == 2
        assert subpaths[0].closed
        assert not subpaths[1].closed
        assert len(subpaths[1].curves) == 1
        assert path.length() == pytest.approx(30.0 + math.sqrt(200))

    def test_open_path(self) -> None:
        """Test an open path ends at its last anchor."""
        path = Path("M 0 0 L 10 0 L 10 10")
        assert path.length() == pytest.approx(20.0)
        assert_vector_close(path.point_at(1), Vector(10, 10))

    def test_moves_without_close_share_a_subpath(self) -> None:
        """Test a second move joins the current subpath with a connecting curve."""
        path = Path([move_to(0, 0), line_to(10, 0), move_to(20, 0), line_to(30, 0)])
        assert len(path.subpaths()) == 1
        assert len(path.curves()) == 3
        assert path.length() == pytest.approx(30.0)


class TestEmptyPath:
    """Tests for paths without curves."""

    def test_empty_path_measurements(self) -> None:
        """Test an empty path has zero length and a zero box."""
        path = Path([])
        assert path.length() == 0.0
        assert path.bounding_box() == BoundingBox(0.0, 0.0, 0.0, 0.0)
        assert path.subpaths() == ()

    def test_empty_path_location_raises(self) -> None:
        """Test location queries on an empty path raise."""
        with pytest.raises(EmptyPathError):
            Path([]).point_at(0.5)

    def test_move_only_path_location_raises(self) -> None:
        """Test a lone move has no curve to query."""
        path = Path([move_to(1, 1)])
        assert path.length() == 0.0
        with pytest.raises(GeometryError):
            path.location_at(0)

    def test_empty_string(self) -> None:
        """Test blank path data gives an empty path."""
        assert Path("   ").commands == ()


class TestPathTransforms:
    """Tests for transformations returning new paths."""

    def test_translate(self, square: Path) -> None:
        """Test translation moves the bounds."""
        moved = square.translate(5, 5)
        assert moved.bounding_box() == BoundingBox(5, 5, 10, 10)
        assert square.bounding_box() == BoundingBox(0, 0, 10, 10)

    def test_scale_about_center(self, square: Path) -> None:
        """Test scaling keeps the bounding box center."""
        bbox = square.scale(2).bounding_box()
        assert bbox.to_tuple() == pytest.approx((-5, -5, 15, 15))

    def test_non_uniform_scale(self, square: Path) -> None:
        """Test independent horizontal and vertical factors."""
        bbox = square.scale(2, 0.5).bounding_box()
        assert bbox.to_tuple() == pytest.approx((-5, 2.5, 15, 7.5))

    def test_rotate_about_center(self, square: Path) -> None:
        """Test a quarter turn maps the square onto itself."""
        bbox = square.rotate(90).bounding_box()
        assert bbox.to_tuple() == pytest.approx((0, 0, 10, 10), abs=1e-9)

    def test_transform_returns_fresh_path(self, square: Path) -> None:
        """Test transformed paths do not share caches."""
        square.length()
        moved = square.translate(1, 0)
        assert moved is not square
        assert moved._cached_subpaths is None
        assert moved.length() == pytest.approx(40.0)

    def test_transform_keeps_command_kinds(self) -> None:
        """Test curve commands stay curves under transformation."""
        path = Path([move_to(0, 0), curve_to(0, 10, 10, 10, 10, 0), close()])
        moved = path.translate(1, 2)
        assert [c.command for c in moved.commands] == ["moveTo", "curveTo", "close"]
        assert moved.commands[1].to_dict()["x1"] == 1


class TestPathSerialization:
    """Tests for equality and serialization."""

    def test_to_svg(self, square: Path) -> None:
        """Test rendering back to path data."""
        assert square.to_svg() == SQUARE

    def test_string_and_commands_are_equal(self, square: Path) -> None:
        """Test paths compare by their command streams."""
        built = Path([move_to(0, 0), line_to(10, 0), line_to(10, 10), line_to(0, 10), close()])
        assert square == built
        assert hash(square) == hash(built)

    def test_to_instructions(self, square: Path) -> None:
        """Test the command stream is exposed."""
        assert square.to_instructions() == square.commands
        assert square.commands[0] == MoveTo(0, 0)

    def test_dict_serialization(self, square: Path) -> None:
        """Test serialize and deserialize."""
        assert Path.from_dict(square.to_dict()) == square

    def test_repr(self, square: Path) -> None:
        """Test repr shows the path data."""
        assert repr(square) == f"Path({SQUARE!r})"
