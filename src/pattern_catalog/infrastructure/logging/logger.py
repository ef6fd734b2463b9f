"""Structured logging for the catalog, built on structlog over stdlib logging."""

import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from pattern_catalog.config.schemas import LoggingConfig

_configure_lock = threading.Lock()
_structlog_configured = False


class DetailedFormatter(logging.Formatter):
    """Formatter that includes caller information."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"


def _configure_structlog() -> None:
    """Route structlog through stdlib logging so handlers and levels apply."""
    global _structlog_configured
    if _structlog_configured:
        return
    with _configure_lock:
        if _structlog_configured:
            return
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
                structlog.processors.KeyValueRenderer(
                    key_order=["event"], drop_missing=True
                ),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _structlog_configured = True


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the catalog using structlog.

    Args:
        config: Logging configuration. If None, defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    handlers = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(file_handler)

    if config.destination in ("console", "both"):
        # Demo output owns stdout; log records go to stderr.
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(LOG_FORMAT))
        handlers.append(console_handler)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("pattern_catalog")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name."""
    _configure_structlog()
    return structlog.get_logger(name)
