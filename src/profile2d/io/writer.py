"""Profile writer for saving shapes as JSON documents."""

import json
from pathlib import Path

from profile2d.domain import Shape2D
from profile2d.exceptions import ProfileSaveError
from profile2d.io.converter import shape_to_dict


class ProfileWriter:
    """Writes shapes as JSON shape documents.

    Written documents can be read back with ``ProfileReader``.

    Example:
        writer = ProfileWriter(decimals=6)
        writer.save(shape, Path("plate-fillet.json"))
    """

    def __init__(self, decimals: int | None = 6, indent: int = 2) -> None:
        """Initialize the profile writer.

        Args:
            decimals: Decimals kept for every coordinate (no rounding if None)
            indent: JSON indentation, 0 for a compact document
        """
        self._decimals = decimals
        self._indent = indent

    def save(self, shape: Shape2D, output_path: Path) -> None:
        """Write a shape to a file.

        Args:
            shape: Shape to save
            output_path: Destination path

        Raises:
            ProfileSaveError: If there is nothing to save or the file cannot be written
        """
        if shape is None:
            raise ProfileSaveError(str(output_path), "no shape to save")

        data = shape_to_dict(shape, self._decimals)
        try:
            output_path.write_text(
                json.dumps(data, indent=self._indent or None) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise ProfileSaveError(str(output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path, operation: str) -> Path:
        """Generate the default output path for an operation.

        Args:
            input_path: Original document path
            operation: Operation name used as suffix

        Returns:
            Path with the operation appended (e.g., plate.json → plate-fillet.json)
        """
        return input_path.parent / f"{input_path.stem}-{operation}.json"
