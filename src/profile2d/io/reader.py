"""Profile reader for loading loops from JSON documents.

This module provides the ProfileReader class. It accepts two document
kinds:
- profile documents (``{"loops": [...]}``, see ``profile2d.io.schema``)
- shape documents, as written by ``ProfileWriter``
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from profile2d.domain import Blueprint, shape_from_dict
from profile2d.exceptions import Profile2DError, ProfileFormatError, ProfileLoadError
from profile2d.io.converter import document_to_blueprints, shape_to_loops
from profile2d.io.schema import ProfileDocument


class ProfileReader:
    """Loads profile documents and converts them to blueprints.

    Example:
        reader = ProfileReader(Path("plate.json"))
        reader.load()
        for blueprint in reader.blueprints:
            print(blueprint)
    """

    def __init__(self, profile_path: Path) -> None:
        """Initialize the profile reader.

        Args:
            profile_path: Path to the JSON document
        """
        self._profile_path = profile_path
        self._blueprints: list[Blueprint] | None = None
        self._format: str | None = None

    def load(self) -> None:
        """Read and validate the document.

        Raises:
            ProfileLoadError: If the file is missing or is not valid JSON
            ProfileFormatError: If the JSON does not describe loops
        """
        path = str(self._profile_path)
        if not self._profile_path.is_file():
            raise ProfileLoadError(path, "file not found")

        try:
            data = json.loads(self._profile_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise ProfileLoadError(path, str(e)) from e
        except json.JSONDecodeError as e:
            raise ProfileLoadError(path, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProfileFormatError(path, "top-level value must be an object")

        if "loops" in data:
            self._blueprints = self._load_profile(path, data)
            self._format = "profile"
        elif "type" in data:
            self._blueprints = self._load_shape(path, data)
            self._format = "shape"
        else:
            raise ProfileFormatError(path, "expected a 'loops' or a 'type' key")

    @staticmethod
    def _load_profile(path: str, data: dict[str, Any]) -> list[Blueprint]:
        try:
            document = ProfileDocument.model_validate(data)
        except ValidationError as e:
            raise ProfileFormatError(path, str(e)) from e
        try:
            return document_to_blueprints(document)
        except Profile2DError as e:
            raise ProfileFormatError(path, str(e)) from e

    @staticmethod
    def _load_shape(path: str, data: dict[str, Any]) -> list[Blueprint]:
        try:
            loops = shape_to_loops(shape_from_dict(data))
        except (KeyError, TypeError, ValueError, Profile2DError) as e:
            raise ProfileFormatError(path, f"invalid shape document: {e}") from e
        if not loops:
            raise ProfileFormatError(path, "document holds no loop")
        return loops

    def _require_loaded(self) -> list[Blueprint]:
        if self._blueprints is None:
            raise RuntimeError("Profile not loaded. Call load() first.")
        return self._blueprints

    @property
    def format(self) -> str:
        """Return the document kind.

        Returns:
            'profile' for loop documents, 'shape' for written shapes

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        self._require_loaded()
        assert self._format is not None
        return self._format

    @property
    def blueprints(self) -> list[Blueprint]:
        """Return the loops of the document, in document order.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        return list(self._require_loaded())

    @property
    def loop_count(self) -> int:
        """Return the number of loops in the document."""
        return len(self._require_loaded())
