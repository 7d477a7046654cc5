"""Logging configuration for the storefront.

stdlib logging owns the handlers and structlog renders events on top of it.
Both the HTTP app and the management CLI go through ``configure_logging()``
(called from the catalogue domain module), so it only runs once per process
unless forced.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

# Inline photos (data URLs) can be megabytes long
MAX_LOGGED_VALUE_LENGTH = 200

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_configured = False


def get_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """LOG_LEVEL wins; otherwise the level follows the environment."""
    return os.getenv("LOG_LEVEL", _LEVEL_BY_ENVIRONMENT.get(get_environment(), "INFO"))


def _rotating_file_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(log_dir: str | None = None, log_file_prefix: str = "storefront") -> None:
    """Console output always; rotating files only when a log directory is given.

    The directory comes from ``log_dir`` or the LOG_DIR environment variable.
    """
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    log_dir = log_dir or os.getenv("LOG_DIR")
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(_rotating_file_handler(log_path / f"{log_file_prefix}.log", log_level))
        root_logger.addHandler(_rotating_file_handler(log_path / f"{log_file_prefix}_error.log", logging.ERROR))

    for noisy in ("urllib3", "asyncio", "httpx", "multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def shorten_long_values(logger, method_name: str, event_dict: dict) -> dict:
    """structlog processor: clip oversized string values such as inline photos."""
    for key, value in event_dict.items():
        if key != "event" and isinstance(value, str) and len(value) > MAX_LOGGED_VALUE_LENGTH:
            event_dict[key] = f"{value[:MAX_LOGGED_VALUE_LENGTH]}... ({len(value)} chars)"
    return event_dict


def setup_structlog() -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        shorten_long_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if get_environment() in ("production", "staging"):
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stdout.isatty(),
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
        )

    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(log_dir: str | None = None, log_file_prefix: str = "storefront", force: bool = False) -> None:
    global _configured
    if _configured and not force:
        return
    setup_stdlib_logging(log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind values (e.g. the request path) to every log event on this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
