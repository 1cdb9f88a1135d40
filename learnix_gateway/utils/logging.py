"""Logging configuration for the code execution gateway."""

# Standard library imports
import logging
import logging.handlers
import sys
from pathlib import Path

# Third-party imports
import structlog

# Local application imports
from .._version import __version__
from ..config import settings

SERVICE_NAME = "learnix-code-gateway"


def setup_logging() -> None:
    """Configure structured logging for the application."""
    log_config = settings.logging

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_config.level.upper(), logging.INFO),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        add_service_context,
    ]

    if log_config.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if log_config.file:
        setup_file_logging()

    configure_third_party_loggers()


def setup_file_logging() -> None:
    """Setup file-based logging with rotation."""
    log_config = settings.logging
    if not log_config.file:
        return

    log_file_path = Path(log_config.file)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=log_config.max_size_mb * 1024 * 1024,
        backupCount=log_config.backup_count,
        encoding="utf-8",
    )

    if log_config.format == "json":
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler.setFormatter(formatter)
    file_handler.setLevel(getattr(logging, log_config.level.upper(), logging.INFO))

    logging.getLogger().addHandler(file_handler)


def configure_third_party_loggers() -> None:
    """Configure logging levels for third-party libraries."""
    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    if settings.enable_access_logs:
        logging.getLogger("uvicorn.access").setLevel(logging.INFO)


def add_service_context(logger, method_name, event_dict):
    """Add service context information to log entries."""
    event_dict["service"] = SERVICE_NAME
    event_dict["version"] = __version__
    return event_dict
