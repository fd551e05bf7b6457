"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bezierpath.core import Path
from bezierpath.domain import Vector

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def fmt(value: float, precision: int) -> str:
    """Format a number with fixed precision."""
    return f"{value:.{precision}f}"


def fmt_vector(vector: Vector, precision: int) -> str:
    """Format a vector as (x, y), or a dash when it is not finite."""
    if not vector.is_finite():
        return "-"
    return f"({fmt(vector.x, precision)}, {fmt(vector.y, precision)})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]bezierpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_measurements(path: Path, precision: int, linear_tolerance: float) -> None:
    """Print length, bounds and subpath breakdown of a path.

    Args:
        path: Path to measure
        precision: Decimal places
        linear_tolerance: Tolerance for counting a curve as a straight segment
    """
    bbox = path.bounding_box()
    subpaths = path.subpaths()
    curve_count = sum(len(subpath.curves) for subpath in subpaths)
    linear_count = sum(
        1 for subpath in subpaths for curve in subpath.curves if curve.is_linear(linear_tolerance)
    )

    console.print(f"  Length        {fmt(path.length(), precision)}")
    console.print(
        f"  Bounding box  x={fmt(bbox.x, precision)} y={fmt(bbox.y, precision)} "
        f"width={fmt(bbox.width, precision)} height={fmt(bbox.height, precision)}"
    )
    console.print(f"  Subpaths      {len(subpaths)}")
    console.print(f"  Curves        {curve_count}")
    console.print(f"  Linear        {linear_count}")

    for index, subpath in enumerate(subpaths, start=1):
        state = "closed" if subpath.closed else "open"
        plural = "curve" if len(subpath.curves) == 1 else "curves"
        console.print(
            f"    {index}: {state} {SYM_DOT} {len(subpath.curves)} {plural} "
            f"{SYM_DOT} length {fmt(subpath.length, precision)}"
        )


def print_samples(
    rows: list[tuple[float, Vector, Vector, float]],
    precision: int,
) -> None:
    """Print sampled points as a table.

    Args:
        rows: Tuples of (t, point, tangent, curvature)
        precision: Decimal places
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("t", justify="right")
    table.add_column("point")
    table.add_column("tangent")
    table.add_column("curvature", justify="right")

    for t, point, tangent, curvature in rows:
        table.add_row(
            fmt(t, precision),
            fmt_vector(point, precision),
            fmt_vector(tangent, precision),
            fmt(curvature, precision),
        )

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message.

    Args:
        message: Main error message
        details: Optional additional details
    """
    line = Text(f"{SYM_ERR} ", style="bold red")
    line.append(message)
    err_console.print(line)
    if details:
        err_console.print(Text(f"  {details}", style="dim"))
