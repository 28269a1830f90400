"""
Logging configuration
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from .config import ChronoConfig, get_config

_configured_level: Optional[int] = None


def setup_logger(
    name: Optional[str] = None,
    level: str = "WARNING",
    log_file: Optional[str] = None
) -> structlog.BoundLogger:
    """
    Set up structured logging.

    The first call (or any call that changes the level or adds a log file)
    configures the standard library root handlers and structlog; later calls
    only hand out a named logger. Library modules never call this; it is for
    applications that want chrono to own the logging setup.
    """
    global _configured_level

    log_level = getattr(logging, level.upper())

    if _configured_level != log_level or log_file:
        handlers = [logging.StreamHandler(sys.stdout)]

        if log_file:
            # Ensure log directory exists
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        logging.basicConfig(
            format="%(message)s",
            level=log_level,
            handlers=handlers
        )

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.dev.set_exc_info,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.dev.ConsoleRenderer()
            ],
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False
        )
        _configured_level = log_level

    return structlog.get_logger(name)


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Named logger that renders through whatever structlog setup the host has."""
    return structlog.get_logger(name)


def configure_logging(config: Optional[ChronoConfig] = None) -> structlog.BoundLogger:
    """Apply the ``logging`` section of the configuration via ``setup_logger``."""
    config = config or get_config()
    return setup_logger("chrono", level=config.logging.level, log_file=config.logging.file)
