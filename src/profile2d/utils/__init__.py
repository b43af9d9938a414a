"""Utility functions for profile2d.

This module provides utility functions including:

- Logging setup and configuration
- Operation statistics for the command line
"""

from profile2d.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
]
