"""Structured logging configuration using structlog + rich."""

import logging
import sys

import structlog
from rich.traceback import install as install_rich_traceback

# Install rich traceback handler for readable exception formatting
install_rich_traceback(show_locals=False, width=120)


def _level(log_level: str) -> int:
    return getattr(logging, log_level.upper(), logging.INFO)


# uvicorn's access log duplicates the per-request event emitted by the server
QUIET_LOGGERS = ["uvicorn.access"]


def build_processors(json_logs: bool) -> list[structlog.types.Processor]:
    """Processor chain ending in a JSON or console renderer."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback)
        )
    return processors


def setup_logging(*, json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog for the server and the demo client.

    Args:
        json_logs: Emit one JSON object per event instead of console lines.
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR).
    """
    level = _level(log_level)
    structlog.configure(
        processors=build_processors(json_logs),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Third-party stdlib loggers (uvicorn, httpx) keep their own plain format
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__).

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def get_server_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for server module."""
    return get_logger("playground.server")


def get_request_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for per-request access logs."""
    return get_logger("playground.request")


def get_client_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for the HTTP client."""
    return get_logger("playground.client")
