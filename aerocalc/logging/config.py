"""
Centralized logging configuration for the aerocalc library.

Calculation modules obtain stdlib-backed loggers through get_logger(). A
NullHandler on the "aerocalc" logger keeps the library silent until an
embedding application calls configure_logging() or configures the logging
module itself; configure_logging() only attaches a handler to that namespace.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import Processor

LIBRARY_LOGGER = "aerocalc"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def _build_processors(include_timestamp: bool, include_caller: bool, format_json: bool,
                      extra_processors: Optional[list[Processor]]) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME]
        ))

    processors.extend(extra_processors or [])

    # Renderer must come last
    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[IO[str]] = None
) -> None:
    """
    Configure structlog output for the calculators.

    Calculation results are logged at DEBUG, dubious inputs at WARNING and
    failures wrapped by AviationCalculator at ERROR.

    Args:
        level: Logging level for the aerocalc namespace (DEBUG, INFO, WARNING, ...)
        format_json: If True, render one JSON object per line
        include_timestamp: Add an ISO-8601 UTC timestamp
        include_caller: Add the calling module and function
        extra_processors: Additional structlog processors inserted before rendering
        stream: Output stream, stderr by default
    """
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.setLevel(getattr(logging, level.upper()))

    for handler in list(library_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            library_logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(handler)

    structlog.configure(
        processors=_build_processors(include_timestamp, include_caller, format_json, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger over the stdlib logger of that name, typically get_logger(__name__)."""
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def log_calculation(
    logger: structlog.stdlib.BoundLogger,
    metric_name: str,
    result: Any,
    inputs: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed calculation with standardized fields.

    Args:
        logger: Structlog logger instance
        metric_name: Name of the metric that was calculated
        result: Calculated value or result record
        inputs: Input values the result was derived from
    """
    bound_logger = logger.bind(
        metric_name=metric_name,
        result=result,
    )

    if inputs:
        bound_logger = bound_logger.bind(inputs=inputs)

    bound_logger.debug("Calculation completed")
