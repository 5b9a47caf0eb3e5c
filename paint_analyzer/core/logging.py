"""Structured logging configuration."""

import logging
import sys
from typing import Any

LOGGER_NAME = "paint_analyzer"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure structured logging for the application.

    Module loggers created with ``logging.getLogger(__name__)`` inside the
    package are children of this logger and share its handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    # Format: timestamp - level - module - message
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


# Global logger instance
logger = setup_logging()


def _format_extra(kwargs: dict[str, Any]) -> str:
    return " ".join(f"{k}={v}" for k, v in kwargs.items())


def log_request(method: str, path: str, **kwargs: Any) -> None:
    """Log an incoming request."""
    logger.info(f"REQUEST {method} {path} {_format_extra(kwargs)}".strip())


def log_response(method: str, path: str, status: int, duration_ms: float) -> None:
    """Log an outgoing response."""
    logger.info(
        f"RESPONSE {method} {path} status={status} duration_ms={duration_ms:.2f}"
    )


def log_error(message: str, exc: Exception | None = None, **kwargs: Any) -> None:
    """Log an error with optional exception."""
    extra = _format_extra(kwargs)
    if exc:
        logger.error(f"ERROR {message} {extra}".strip(), exc_info=exc)
    else:
        logger.error(f"ERROR {message} {extra}".strip())


def log_analysis(
    make: str, model: str, year: str, risk_score: float, found: bool
) -> None:
    """Log a completed risk analysis."""
    status = "matched" if found else "unmatched"
    logger.info(
        f"ANALYSIS vehicle='{make} {model} {year}' {status} risk_score={risk_score:g}"
    )
