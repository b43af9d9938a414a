"""Logging utilities for profile2d."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_PREFIX = "profile2d"


@dataclass
class OperationStats:
    """Statistics from one CLI operation."""

    operation: str = ""
    input_loops: int = 0
    output_regions: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate operation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by a previous call are replaced.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(f"{_HANDLER_PREFIX}-file")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(f"{_HANDLER_PREFIX}-console")
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("profile2d")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class OperationLogger:
    """Logger for tracking a CLI operation and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, operation: str) -> None:
        self._logger = logger
        self._stats = OperationStats(operation=operation)

    def log_operation_start(self, source: str) -> None:
        """Log start of the operation."""
        self._stats.start_time = time.perf_counter()
        self._logger.debug("Operation started", operation=self._stats.operation, source=source)

    def log_loops_loaded(self, source: str, count: int) -> None:
        """Log the loops read from a document."""
        self._logger.info("Loops loaded", source=source, loops=count)
        self._stats.input_loops = count

    def log_operation_complete(self, output_regions: int) -> None:
        """Log successful completion."""
        self._stats.end_time = time.perf_counter()
        self._stats.output_regions = output_regions
        self._logger.info(
            "Operation complete",
            operation=self._stats.operation,
            loops=self._stats.input_loops,
            regions=output_regions,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    def log_operation_error(self, error: Exception) -> None:
        """Log operation failure."""
        self._logger.error(
            "Operation failed",
            operation=self._stats.operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((self._stats.operation, str(error)))

    @property
    def stats(self) -> OperationStats:
        """Get current operation statistics."""
        return self._stats
