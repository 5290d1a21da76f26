"""Structured logging configuration for the receiver-mock client"""
import logging
import os
import sys
from typing import Any, Dict, Optional
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer
from .config import Config


def setup_structured_logging(config: Config) -> None:
    """Setup structured logging with JSON format by default and console output for development"""

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    is_development = os.getenv("ENVIRONMENT", "production").lower() == "development"
    if is_development:
        processors.append(ConsoleRenderer())
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, config.log_level.upper())
    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(config.log_file))
        file_handler.setLevel(level)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True,
    )

    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger of the same name

    Events are handed to stdlib logging, so nothing is printed until the
    application configures handlers (e.g. via setup_structured_logging).
    """
    return structlog.wrap_logger(logging.getLogger(name))


def log_receiver_request(logger: structlog.stdlib.BoundLogger, endpoint: str, url: str, params: Optional[Dict[str, Any]] = None) -> None:
    """Log an outgoing receiver-mock request"""
    logger.debug(
        "Querying receiver-mock",
        endpoint=endpoint,
        url=url,
        params=params or {},
        event_type="receiver_request"
    )


def log_receiver_response(logger: structlog.stdlib.BoundLogger, endpoint: str, status_code: int, result_size: int) -> None:
    """Log a decoded receiver-mock response"""
    logger.debug(
        "Receiver-mock responded",
        endpoint=endpoint,
        status_code=status_code,
        result_size=result_size,
        event_type="receiver_response"
    )


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Dict[str, Any] = None) -> None:
    """Log error with structured context"""
    logger.error(
        "Error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="error",
    )
