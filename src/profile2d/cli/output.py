"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from profile2d.core.segments import IntersectionSegment, end_of_run, start_of_run
from profile2d.domain import Blueprint, Blueprints, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]profile2d[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(path: str, loop_count: int) -> None:
    """Print profile document information.

    Args:
        path: Path to the document
        loop_count: Number of loops read
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    plural = "loop" if loop_count == 1 else "loops"
    console.print(f"  {loop_count} {plural}")


def _format_point(point: Point, decimals: int) -> str:
    return f"({point.x:.{decimals}f}, {point.y:.{decimals}f})"


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_regions_table(regions: Blueprints, decimals: int = 3) -> None:
    """Print one row per organised region.

    Args:
        regions: Organised regions
        decimals: Decimals shown for coordinates
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Holes", justify="right")
    table.add_column("Curves", justify="right")
    table.add_column("Bounds")

    for i, region in enumerate(regions):
        if isinstance(region, Blueprint):
            kind, holes, curves = "blueprint", 0, len(region.curves)
        else:
            kind = "compound"
            holes = len(region.holes)
            curves = sum(len(bp.curves) for bp in region.blueprints)
        box = region.bounding_box
        bounds = (
            f"{_format_point(Point(box.min_x, box.min_y), decimals)} {SYM_DOT} "
            f"{_format_point(Point(box.max_x, box.max_y), decimals)}"
        )
        table.add_row(str(i + 1), kind, str(holes), str(curves), bounds)

    console.print(table)


def print_segments_table(segments: list[IntersectionSegment], decimals: int = 3) -> None:
    """Print one row per paired run.

    Args:
        segments: Paired runs of two loops
        decimals: Decimals shown for coordinates
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("From")
    table.add_column("To")
    table.add_column("A curves", justify="right")
    table.add_column("B curves", justify="right")

    for i, (run_a, run_b) in enumerate(segments):
        other = "same" if isinstance(run_b, str) else str(len(run_b))
        table.add_row(
            str(i + 1),
            _format_point(start_of_run(run_a), decimals),
            _format_point(end_of_run(run_a), decimals),
            str(len(run_a)),
            other,
        )

    console.print(table)


def print_no_crossing() -> None:
    """Print the outcome of loops that do not cross."""
    console.print(f"  {SYM_DOT} Loops do not cross")


def print_success(output_path: str | None, regions: int, total_time_s: float) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file (None when nothing was written)
        regions: Number of regions (or paired runs) produced
        total_time_s: Total processing time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)
    console.print(f"  {regions} results")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
