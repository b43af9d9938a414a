"""Document-level orchestration of profile operations.

This module provides the ProfileProcessor class that ties the algorithms to
profile documents: it loads loops, runs an operation, writes the result and
records logging and statistics along the way.
"""

from pathlib import Path

from profile2d.config import CornerStyle, Profile2DSettings
from profile2d.core.corners import chamfer_2d, dogbone_2d, fillet_2d
from profile2d.core.organizer import organise_blueprints
from profile2d.core.segments import IntersectionSegment, find_intersection_segments
from profile2d.domain import Blueprint, Blueprints, CornerFilter, Shape2D
from profile2d.exceptions import Profile2DError
from profile2d.io import ProfileReader, ProfileWriter, region_count
from profile2d.utils.logging import OperationLogger, OperationStats, configure_logging

CORNER_OPERATIONS = {
    CornerStyle.FILLET: fillet_2d,
    CornerStyle.CHAMFER: chamfer_2d,
    CornerStyle.DOGBONE: dogbone_2d,
}


class ProfileProcessor:
    """Runs profile operations on documents.

    Example:
        settings = Profile2DSettings(corner=CornerConfig(size=2.0))
        processor = ProfileProcessor(settings)
        shape, stats = processor.modify_corners(
            input_path=Path("plate.json"),
            output_path=Path("plate-fillet.json"),
        )
    """

    def __init__(self, config: Profile2DSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Settings for corners, output and logging
            quiet: Suppress console logging except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.writer = ProfileWriter(
            decimals=config.output.decimals,
            indent=config.output.indent,
        )

    def load(self, input_path: Path, operation: OperationLogger) -> list[Blueprint]:
        """Load the loops of a document.

        Raises:
            ProfileLoadError: If the file cannot be read
            ProfileFormatError: If the document is invalid
        """
        operation.log_operation_start(str(input_path))
        reader = ProfileReader(input_path)
        reader.load()
        operation.log_loops_loaded(str(input_path), reader.loop_count)
        return reader.blueprints

    def _run(self, name: str, input_path: Path) -> tuple[OperationLogger, list[Blueprint]]:
        operation = OperationLogger(self.logger, name)
        try:
            return operation, self.load(input_path, operation)
        except Profile2DError as e:
            operation.log_operation_error(e)
            raise

    def organize(
        self, input_path: Path, output_path: Path | None = None
    ) -> tuple[Blueprints, OperationStats]:
        """Organise the loops of a document into regions.

        Args:
            input_path: Profile document to read
            output_path: Where to write the regions (not written if None)

        Returns:
            Tuple of (regions, operation statistics)
        """
        operation, blueprints = self._run("organize", input_path)
        try:
            regions = organise_blueprints(blueprints)
            if output_path is not None:
                self.writer.save(regions, output_path)
        except Profile2DError as e:
            operation.log_operation_error(e)
            raise

        operation.log_operation_complete(region_count(regions))
        return regions, operation.stats

    def modify_corners(
        self,
        input_path: Path,
        output_path: Path,
        corner_filter: CornerFilter | None = None,
    ) -> tuple[Shape2D, OperationStats]:
        """Organise a document and apply the configured corner style.

        Args:
            input_path: Profile document to read
            output_path: Where to write the modified shape
            corner_filter: Restricts the corners modified (all when None)

        Returns:
            Tuple of (modified shape, operation statistics)
        """
        style = self.config.corner.style
        operation, blueprints = self._run(style.value, input_path)
        try:
            regions = organise_blueprints(blueprints)
            shape = CORNER_OPERATIONS[style](regions, self.config.corner.size, corner_filter)
            self.writer.save(shape, output_path)
        except Profile2DError as e:
            operation.log_operation_error(e)
            raise

        operation.log_operation_complete(region_count(shape))
        return shape, operation.stats

    def intersect(
        self, input_path: Path, first: int = 0, second: int = 1
    ) -> tuple[list[IntersectionSegment] | None, OperationStats]:
        """Pair the runs of two loops of a document.

        Args:
            input_path: Profile document to read
            first: Index of loop A in the document
            second: Index of loop B in the document

        Returns:
            Tuple of (paired runs or None, operation statistics)

        Raises:
            IndexError: If a loop index is out of range
        """
        operation, blueprints = self._run("intersect", input_path)
        for index in (first, second):
            if not 0 <= index < len(blueprints):
                error = IndexError(
                    f"Loop index {index} out of range (document has {len(blueprints)} loops)"
                )
                operation.log_operation_error(error)
                raise error

        try:
            segments = find_intersection_segments(blueprints[first], blueprints[second])
        except Profile2DError as e:
            operation.log_operation_error(e)
            raise

        operation.log_operation_complete(len(segments) if segments else 0)
        return segments, operation.stats
