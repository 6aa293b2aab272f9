"""Structured logging configuration for the StatsD line parser"""
import logging
import sys
from typing import Any, Dict
import structlog
from structlog.stdlib import LoggerFactory
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, StackInfoRenderer


def setup_structured_logging(config) -> None:
    """Setup structured logging with JSON format for production and console for development"""
    
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    
    if config.environment == "development":
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
    
    # stdout carries parsed metrics, so logs go to stderr
    handlers = []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    handlers.append(console_handler)
    
    if config.log_file:
        file_handler = logging.FileHandler(str(config.log_file))
        file_handler.setLevel(level)
        handlers.append(file_handler)
    
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=handlers,
        force=True
    )


def setup_fallback_logging() -> None:
    """Route logs to stderr until the configuration has been loaded"""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)


def log_startup(logger: structlog.stdlib.BoundLogger, config) -> None:
    """Log startup with configuration details"""
    logger.info(
        "Parser starting up",
        **config.get_service_attributes(),
        encoding=config.encoding,
        strict=config.strict,
        input=str(config.input_file) if config.input_file else "stdin",
        event_type="startup"
    )


def log_ingest_summary(logger: structlog.stdlib.BoundLogger, accepted: int, rejected: int, elapsed: float) -> None:
    """Log the outcome of ingesting one payload"""
    logger.info(
        "Payload ingested",
        metrics_count=accepted,
        rejected_count=rejected,
        ingest_time_seconds=round(elapsed, 3),
        event_type="ingest_complete"
    )


def log_error(logger: structlog.stdlib.BoundLogger, error: Exception, context: Dict[str, Any] = None) -> None:
    """Log error with structured context"""
    logger.error(
        "Error occurred",
        error=str(error),
        error_type=type(error).__name__,
        context=context or {},
        event_type="error",
        exc_info=True
    )
