"""Logging setup for rdfconv.

Example:
    from rdfconv.observability import configure_logging, LogContext

    logger = configure_logging(level="DEBUG", log_file="log/myLog.txt")
    with LogContext(operation="convert", source="res/ISWC2010.rdf"):
        logger.info("Converting")
"""

from rdfconv.observability.logging import (
    FILE_LOG_FORMAT,
    ConsoleFormatter,
    JsonFormatter,
    LogContext,
    configure_logging,
)

__all__ = [
    "FILE_LOG_FORMAT",
    "ConsoleFormatter",
    "JsonFormatter",
    "LogContext",
    "configure_logging",
]
