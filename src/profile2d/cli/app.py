"""CLI application entry point for profile2d.

This module provides the main CLI interface using Typer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from profile2d import __version__
from profile2d.cli.output import (
    console,
    print_document_info,
    print_error,
    print_header,
    print_no_crossing,
    print_regions_table,
    print_segments_table,
    print_step,
    print_success,
)
from profile2d.config import (
    CornerConfig,
    CornerStyle,
    LoggingConfig,
    OutputConfig,
    Profile2DSettings,
)
from profile2d.core import ProfileProcessor
from profile2d.domain import CornerFilter, Point, PointCornerFilter
from profile2d.exceptions import (
    InvariantViolationError,
    Profile2DError,
    ProfileLoadError,
    ProfileSaveError,
)
from profile2d.io import ProfileWriter

# Create the Typer app
app = typer.Typer(
    name="profile2d",
    help="Organise, intersect and round the corners of 2D profile loops.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class GlobalOptions:
    """Options shared by every command."""

    log_file: Path | None = None
    log_level: str = "WARNING"
    decimals: int = 6
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]profile2d[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
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
    decimals: Annotated[
        int,
        typer.Option(
            "--decimals",
            help="Decimals kept for coordinates in output (0-12)",
            min=0,
            max=12,
        ),
    ] = 6,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Organise, intersect and round the corners of 2D profile loops.

    Input documents are JSON files listing closed loops made of lines and
    circular arcs.
    """
    ctx.obj = GlobalOptions(
        log_file=log_file,
        log_level=log_level.upper(),
        decimals=decimals,
        quiet=quiet,
    )


def _options(ctx: typer.Context) -> GlobalOptions:
    return ctx.obj if isinstance(ctx.obj, GlobalOptions) else GlobalOptions()


def _build_settings(options: GlobalOptions, corner: CornerConfig | None = None) -> Profile2DSettings:
    return Profile2DSettings(
        corner=corner or CornerConfig(),
        output=OutputConfig(decimals=options.decimals),
        logging=LoggingConfig(
            log_file=options.log_file,
            log_level=options.log_level if not options.quiet else "ERROR",
        ),
    )


def _check_input(input_profile: Path) -> None:
    if not input_profile.exists():
        print_error(
            f"Input file not found: {input_profile}",
            details=f"The file '{input_profile}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_profile.is_file():
        print_error(
            f"Input path is not a file: {input_profile}",
            details="Please provide a path to a JSON profile document.",
        )
        raise typer.Exit(code=1)


def _handle_error(error: Profile2DError) -> None:
    if isinstance(error, ProfileLoadError):
        print_error(f"Could not load profile: {error.reason}")
    elif isinstance(error, ProfileSaveError):
        print_error(f"Could not save profile: {error.reason}")
    elif isinstance(error, InvariantViolationError):
        print_error("Internal error", details=str(error))
    else:
        print_error(str(error))
    raise typer.Exit(code=1)


def parse_point(value: str) -> Point:
    """Parse an ``x,y`` command line value.

    Raises:
        typer.BadParameter: If the value is not two comma-separated numbers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"Expected 'x,y', got '{value}'")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise typer.BadParameter(f"Expected 'x,y', got '{value}'") from None


InputArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to input JSON profile document",
        show_default=False,
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output path (default: {name}-{operation}.json)",
    ),
]

AtOption = Annotated[
    list[str] | None,
    typer.Option(
        "--at",
        help="Only modify the corner at x,y (repeatable)",
    ),
]


@app.command()
def organize(
    ctx: typer.Context,
    input_profile: InputArgument,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the organised regions to this path",
        ),
    ] = None,
) -> None:
    """Organise loops into outer boundaries with holes.

    Example:
        profile2d organize plate.json -o plate-regions.json
    """
    options = _options(ctx)
    _check_input(input_profile)

    if not options.quiet:
        print_header(__version__)
        print_step("Organising loops")

    processor = ProfileProcessor(_build_settings(options), quiet=options.quiet)
    try:
        regions, stats = processor.organize(input_profile, output)
    except Profile2DError as e:
        _handle_error(e)
        return

    if not options.quiet:
        print_document_info(str(input_profile), stats.input_loops)
        print_regions_table(regions, min(options.decimals, 3))
        print_success(
            str(output) if output else None,
            regions=stats.output_regions,
            total_time_s=stats.duration_seconds,
        )


def _modify_corners(
    ctx: typer.Context,
    style: CornerStyle,
    size: float,
    input_profile: Path,
    output: Path | None,
    at: list[str] | None,
) -> None:
    options = _options(ctx)
    _check_input(input_profile)

    try:
        corner = CornerConfig(size=size, style=style)
    except ValidationError:
        print_error(
            f"Invalid {style.value} size: {size}",
            details="The size must be strictly positive.",
        )
        raise typer.Exit(code=1) from None

    corner_filter: CornerFilter | None = None
    if at:
        corner_filter = PointCornerFilter([parse_point(value) for value in at])

    output_path = output or ProfileWriter.get_output_path(input_profile, style.value)

    if not options.quiet:
        print_header(__version__)
        print_step(f"Applying {style.value} of size {size}")

    processor = ProfileProcessor(_build_settings(options, corner), quiet=options.quiet)
    try:
        _, stats = processor.modify_corners(input_profile, output_path, corner_filter)
    except Profile2DError as e:
        _handle_error(e)
        return

    if not options.quiet:
        print_document_info(str(input_profile), stats.input_loops)
        print_success(
            str(output_path),
            regions=stats.output_regions,
            total_time_s=stats.duration_seconds,
        )


@app.command()
def fillet(
    ctx: typer.Context,
    input_profile: InputArgument,
    radius: Annotated[
        float,
        typer.Option(
            "--radius",
            "-r",
            help="Fillet radius",
        ),
    ] = 1.0,
    output: OutputOption = None,
    at: AtOption = None,
) -> None:
    """Round the corners of every region with tangent arcs.

    Example:
        profile2d fillet plate.json -r 2 --at 10,0
    """
    _modify_corners(ctx, CornerStyle.FILLET, radius, input_profile, output, at)


@app.command()
def chamfer(
    ctx: typer.Context,
    input_profile: InputArgument,
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Chamfer size",
        ),
    ] = 1.0,
    output: OutputOption = None,
    at: AtOption = None,
) -> None:
    """Bevel the corners of every region with straight cuts."""
    _modify_corners(ctx, CornerStyle.CHAMFER, size, input_profile, output, at)


@app.command()
def dogbone(
    ctx: typer.Context,
    input_profile: InputArgument,
    radius: Annotated[
        float,
        typer.Option(
            "--radius",
            "-r",
            help="Relief radius",
        ),
    ] = 1.0,
    output: OutputOption = None,
    at: AtOption = None,
) -> None:
    """Relieve the corners of every region with dogbone arcs."""
    _modify_corners(ctx, CornerStyle.DOGBONE, radius, input_profile, output, at)


@app.command()
def intersect(
    ctx: typer.Context,
    input_profile: InputArgument,
    first: Annotated[
        int,
        typer.Option(
            "--first",
            help="Index of the first loop in the document",
            min=0,
        ),
    ] = 0,
    second: Annotated[
        int,
        typer.Option(
            "--second",
            help="Index of the second loop in the document",
            min=0,
        ),
    ] = 1,
) -> None:
    """Pair the runs of two loops between their crossing points.

    Example:
        profile2d intersect shapes.json --first 0 --second 2
    """
    options = _options(ctx)
    _check_input(input_profile)

    if not options.quiet:
        print_header(__version__)
        print_step(f"Intersecting loops {first} and {second}")

    processor = ProfileProcessor(_build_settings(options), quiet=options.quiet)
    try:
        segments, stats = processor.intersect(input_profile, first, second)
    except IndexError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except Profile2DError as e:
        _handle_error(e)
        return

    if options.quiet:
        return
    print_document_info(str(input_profile), stats.input_loops)
    if segments is None:
        print_no_crossing()
    else:
        print_segments_table(segments, min(options.decimals, 3))
    print_success(None, regions=stats.output_regions, total_time_s=stats.duration_seconds)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
