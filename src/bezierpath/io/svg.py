"""SVG path data parsing and serialization.

Parsing is delegated to svgelements, which tokenizes the grammar and
resolves relative and shorthand commands to absolute segments. Each segment
is then normalized into the four primitive commands:

- Move -> MoveTo, Line -> LineTo, CubicBezier -> CurveTo, Close -> Close
- QuadraticBezier -> CurveTo by degree elevation
- Arc -> one CurveTo per cubic approximating it
"""

import logging
from collections.abc import Iterable

from svgelements import Arc, CubicBezier, Line, Move, QuadraticBezier
from svgelements import Close as SvgClose
from svgelements import Path as SvgPath

from bezierpath.domain import Close, CurveTo, LineTo, MoveTo, PathCommand
from bezierpath.exceptions import PathParseError

logger = logging.getLogger(__name__)


def _cubic_command(segment: CubicBezier) -> CurveTo:
    return CurveTo(
        segment.control1.x,
        segment.control1.y,
        segment.control2.x,
        segment.control2.y,
        segment.end.x,
        segment.end.y,
    )


def _quadratic_command(segment: QuadraticBezier) -> CurveTo:
    # Degree elevation: both cubic controls sit 2/3 of the way to the quad control.
    start, control, end = segment.start, segment.control, segment.end
    return CurveTo(
        start.x + 2 / 3 * (control.x - start.x),
        start.y + 2 / 3 * (control.y - start.y),
        end.x + 2 / 3 * (control.x - end.x),
        end.y + 2 / 3 * (control.y - end.y),
        end.x,
        end.y,
    )


def parse_svg_path(data: str) -> list[PathCommand]:
    """Parse SVG path data into primitive commands.

    A drawing segment that directly follows a close command starts its
    subpath with an explicit MoveTo at its start point.

    Args:
        data: Path data, e.g. "M 0 0 L 10 0 Z"

    Returns:
        Commands with absolute coordinates; empty for blank input

    Raises:
        PathParseError: If the data is malformed or does not start with a move
    """
    if not data.strip():
        return []

    try:
        segments = list(SvgPath(data).segments())
    except (ValueError, IndexError, TypeError, AttributeError) as exc:
        # svgelements often raises with an empty message
        raise PathParseError(data, str(exc) or type(exc).__name__) from exc

    commands: list[PathCommand] = []
    needs_move = True
    for segment in segments:
        if isinstance(segment, Move):
            commands.append(MoveTo(segment.end.x, segment.end.y))
            needs_move = False
            continue

        if isinstance(segment, SvgClose):
            commands.append(Close())
            needs_move = True
            continue

        if needs_move:
            if not commands or segment.start is None:
                raise PathParseError(data, "path data must start with a move command")
            commands.append(MoveTo(segment.start.x, segment.start.y))
            needs_move = False

        if isinstance(segment, Line):
            commands.append(LineTo(segment.end.x, segment.end.y))
        elif isinstance(segment, CubicBezier):
            commands.append(_cubic_command(segment))
        elif isinstance(segment, QuadraticBezier):
            commands.append(_quadratic_command(segment))
        elif isinstance(segment, Arc):
            commands.extend(_cubic_command(cubic) for cubic in segment.as_cubic_curves())
        else:
            raise PathParseError(data, f"unsupported segment type {type(segment).__name__}")

    if commands and not isinstance(commands[0], MoveTo):
        raise PathParseError(data, "path data must start with a move command")

    logger.debug("Parsed path data into %d commands", len(commands))
    return commands


def format_number(value: float) -> str:
    """Format a coordinate with default decimal formatting.

    Integral values are written without a fractional part.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(2.5)
        '2.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_command(command: PathCommand) -> str:
    if isinstance(command, MoveTo):
        return f"M {format_number(command.x)} {format_number(command.y)}"
    if isinstance(command, LineTo):
        return f"L {format_number(command.x)} {format_number(command.y)}"
    if isinstance(command, CurveTo):
        coords = (command.x1, command.y1, command.x2, command.y2, command.x3, command.y3)
        return "C " + " ".join(format_number(c) for c in coords)
    return "Z"


def to_svg(commands: Iterable[PathCommand]) -> str:
    """Render commands as space-joined SVG path data.

    Args:
        commands: Commands to render

    Returns:
        Path data string, e.g. "M 0 0 L 10 0 Z"
    """
    return " ".join(_format_command(command) for command in commands)
