"""Command-line interface for profile2d.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Region tables for organised profiles
- Fillet, chamfer and dogbone corner treatments
- Run tables for intersecting loops
- Quiet mode and detailed log files
"""

from profile2d.cli.app import cli, main

__all__ = ["cli", "main"]
