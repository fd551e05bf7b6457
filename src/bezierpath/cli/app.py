"""CLI application entry point for bezierpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path as FilePath
from typing import Annotated

import structlog
import typer

from bezierpath import __version__
from bezierpath.cli.output import (
    console,
    print_error,
    print_header,
    print_measurements,
    print_samples,
    print_step,
)
from bezierpath.config import BezierPathSettings, LoggingConfig, OutputConfig
from bezierpath.core import Path
from bezierpath.exceptions import BezierPathError, ConfigurationError
from bezierpath.utils import configure_logging

logger = structlog.get_logger("bezierpath.cli")

# Create the Typer app
app = typer.Typer(
    name="bezierpath",
    help="Measure, sample and transform SVG path data made of cubic Bezier segments.",
    add_completion=False,
    no_args_is_help=True,
)

PathData = Annotated[
    str,
    typer.Argument(
        help='SVG path data, e.g. "M 0 0 L 10 0 L 10 10 Z"',
        show_default=False,
    ),
]

Precision = Annotated[
    int,
    typer.Option(
        "--precision",
        "-p",
        help="Decimal places in printed numbers",
        min=0,
        max=15,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bezierpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        FilePath | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Measure, sample and transform SVG path data."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = BezierPathSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


def _settings(ctx: typer.Context) -> BezierPathSettings:
    if isinstance(ctx.obj, BezierPathSettings):
        return ctx.obj
    return BezierPathSettings()


def _load_path(data: str) -> Path:
    path = Path(data)
    if not path.commands:
        raise ConfigurationError("PATH_DATA", "path data contains no commands")
    return path


@app.command()
def measure(
    ctx: typer.Context,
    data: PathData,
    precision: Precision = 4,
) -> None:
    """Print the length, bounding box and subpaths of a path.

    Example:
        bezierpath measure "M 0 0 L 10 0 L 10 10 L 0 10 Z"
    """
    settings = _settings(ctx).model_copy(
        update={"output": OutputConfig(precision=precision)}
    )

    try:
        path = _load_path(data)
        print_header(__version__)
        print_step("Measuring path")
        print_measurements(
            path,
            settings.output.precision,
            settings.geometry.linear_tolerance,
        )
        logger.info(
            "Path measured",
            length=path.length(),
            subpaths=len(path.subpaths()),
            curves=len(path.curves()),
        )
    except BezierPathError as e:
        logger.error("Measure failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def sample(
    ctx: typer.Context,
    data: PathData,
    samples: Annotated[
        int,
        typer.Option(
            "--samples",
            "-n",
            help="Number of evenly spaced samples, including both ends",
            min=2,
            max=1000,
        ),
    ] = 11,
    precision: Precision = 4,
) -> None:
    """Print point, tangent and curvature at evenly spaced positions along a path.

    Positions are measured by arc length over the whole path, so t=0.5 is
    halfway along its total length.
    """
    settings = _settings(ctx).model_copy(
        update={"output": OutputConfig(precision=precision, samples=samples)}
    )

    try:
        path = _load_path(data)
        count = settings.output.samples
        rows = []
        for i in range(count):
            t = i / (count - 1)
            location = path.location_at(t)
            curve = location.curve
            rows.append(
                (
                    t,
                    curve.point_at(location.t),
                    curve.tangent_at(location.t),
                    curve.curvature_at(location.t),
                )
            )

        print_header(__version__)
        print_step(f"Sampling {count} positions")
        print_samples(rows, settings.output.precision)
        logger.info("Path sampled", samples=count, length=path.length())
    except BezierPathError as e:
        logger.error("Sample failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def transform(
    data: PathData,
    dx: Annotated[
        float,
        typer.Option("--dx", help="Horizontal translation, applied last"),
    ] = 0.0,
    dy: Annotated[
        float,
        typer.Option("--dy", help="Vertical translation, applied last"),
    ] = 0.0,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            "-s",
            help="Uniform scale factor about the bounding box center",
        ),
    ] = 1.0,
    rotate: Annotated[
        float,
        typer.Option(
            "--rotate",
            "-r",
            help="Rotation in degrees about the bounding box center",
        ),
    ] = 0.0,
) -> None:
    """Scale, rotate and translate a path, then print its path data.

    Scaling and rotation use the center of the path's bounding box as their
    fixed point; translation is applied after both.
    """
    try:
        path = _load_path(data)
        if scale != 1.0:
            path = path.scale(scale)
        if rotate != 0.0:
            path = path.rotate(rotate)
        if dx != 0.0 or dy != 0.0:
            path = path.translate(dx, dy)
        logger.info("Path transformed", scale=scale, rotate=rotate, dx=dx, dy=dy)
    except BezierPathError as e:
        logger.error("Transform failed", error=str(e), error_type=type(e).__name__)
        print_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(path.to_svg())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
