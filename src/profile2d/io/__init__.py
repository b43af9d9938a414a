"""Profile document I/O layer for profile2d.

This module handles reading and writing JSON profile documents. It
provides a clean abstraction layer between the document schema and the
domain models.

Key responsibilities:
- Load and validate profile documents
- Convert documents to blueprints
- Write shapes back as JSON with rounded coordinates

Key classes:
- ProfileReader: Load documents and extract loops
- ProfileWriter: Save shapes
- ProfileDocument: Pydantic schema of input documents
"""

from profile2d.io.converter import region_count, shape_to_dict, shape_to_loops
from profile2d.io.reader import ProfileReader
from profile2d.io.schema import ProfileDocument
from profile2d.io.writer import ProfileWriter

__all__ = [
    "ProfileDocument",
    "ProfileReader",
    "ProfileWriter",
    "region_count",
    "shape_to_dict",
    "shape_to_loops",
]
