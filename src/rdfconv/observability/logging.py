"""Logging configuration for the command line tool.

Provides:
- A plain file log in the classic ``timestamp LEVEL [logger] message`` layout
- JSON-formatted or human-readable console logs on stderr
- Operation/source context propagation via context variables

Usage:
    from rdfconv.observability.logging import configure_logging

    # At the CLI boundary only
    logger = configure_logging(level="DEBUG", log_file="log/myLog.txt")

    # Library code receives that logger (or a child) explicitly
    converter = GraphConverter(logger=logger.getChild("converter"))
"""

from __future__ import annotations

import contextvars
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "rdfconv"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Layout of the appended plaintext log file
FILE_LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"

# Context variables for the running CLI operation
operation_var: contextvars.ContextVar[str] = contextvars.ContextVar("operation", default="")
source_var: contextvars.ContextVar[str] = contextvars.ContextVar("source", default="")


class JsonFormatter(logging.Formatter):
    """JSON log formatter with operation context support.

    Output format:
    {
        "timestamp": "2026-01-10T12:34:56.789Z",
        "level": "DEBUG",
        "logger": "rdfconv.converter",
        "message": "Write success. Time taken = 0.01 seconds",
        "module": "converter",
        "function": "_emit_format",
        "line": 42,
        "operation": "convert",
        "source": "res/ISWC2010.rdf"
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        operation = operation_var.get()
        if operation:
            log_data["operation"] = operation

        source = source_var.get()
        if source:
            log_data["source"] = source

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, default=str, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for interactive use.

    Output format:
    2026-01-10 12:34:56 | DEBUG    | rdfconv.converter | Reading success | op=convert
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for console output."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname

        if self.use_colors:
            color = self.COLORS.get(level, "")
            level = f"{color}{level}{self.RESET}"

        message = record.getMessage()

        context_parts = []
        operation = operation_var.get()
        if operation:
            context_parts.append(f"op={operation}")
        source = source_var.get()
        if source:
            context_parts.append(f"src={source}")

        context = f" | {' '.join(context_parts)}" if context_parts else ""

        result = f"{timestamp} | {level:8} | {record.name} | {message}{context}"

        if record.exc_info:
            result += "\n" + self.formatException(record.exc_info)

        return result


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | str | None = None,
    use_colors: bool = True,
    verbose: bool = False,
) -> logging.Logger:
    """Configure the rdfconv logger and return it.

    Handlers are attached to the package logger rather than the root logger,
    and any handlers from a previous call are closed and replaced.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON format on stderr
        log_file: Append plaintext records to this file when set
        use_colors: Use ANSI colors in console format
        verbose: Echo every record to stderr, not only warnings and errors

    Returns:
        The configured package logger

    Raises:
        ValueError: If level is not one of LOG_LEVELS
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False

    # Remove existing handlers
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    if json_format:
        stream_handler.setFormatter(JsonFormatter())
    else:
        stream_handler.setFormatter(ConsoleFormatter(use_colors=use_colors))
    if not verbose:
        stream_handler.setLevel(logging.WARNING)
    package_logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        package_logger.addHandler(file_handler)

    # Reduce noise from rdflib
    logging.getLogger("rdflib").setLevel(logging.WARNING)

    return package_logger


class LogContext:
    """Context manager for adding temporary log context.

    Usage:
        with LogContext(operation="convert", source="res/ISWC2010.rdf"):
            logger.info("Converting")  # JSON logs include operation and source
    """

    def __init__(self, **kwargs: Any) -> None:
        self.extra = kwargs
        self._tokens: dict[str, contextvars.Token[str]] = {}

    def __enter__(self) -> LogContext:
        if "operation" in self.extra:
            self._tokens["operation"] = operation_var.set(str(self.extra["operation"]))
        if "source" in self.extra:
            self._tokens["source"] = source_var.set(str(self.extra["source"]))
        return self

    def __exit__(self, *args: Any) -> None:
        for key, token in self._tokens.items():
            if key == "operation":
                operation_var.reset(token)
            elif key == "source":
                source_var.reset(token)

