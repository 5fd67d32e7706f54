"""Logging configuration for the storefront.

structlog renders on top of the standard library: colored console output in
development, JSON lines in production and staging. File handlers are only
attached when ``LOG_DIR`` is set.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

JSON_ENVIRONMENTS = ("production", "staging")
DEFAULT_LEVELS = {"production": "INFO", "staging": "INFO", "development": "DEBUG", "test": "WARNING"}
LOG_FILE_BYTES = 10 * 1024 * 1024


def get_environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LEVELS.get(get_environment(), "INFO"))


def _rotating_file(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=LOG_FILE_BYTES, backupCount=5, encoding="utf-8")
    handler.setLevel(level)
    return handler


def setup_stdlib_logging() -> None:
    level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [logging.StreamHandler(sys.stdout)]

    log_dir = os.getenv("LOG_DIR")
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(_rotating_file(log_path / "storefront.log", level))
        root_logger.addHandler(_rotating_file(log_path / "storefront_error.log", logging.ERROR))

    # Protean logs every command and unit of work at INFO
    logging.getLogger("protean").setLevel(logging.WARNING)


def setup_structlog() -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
    ]

    if get_environment() in JSON_ENVIRONMENTS:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    setup_stdlib_logging()
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind values (e.g. ``session_id``) onto every log line of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
