"""
Core Logging Module

Centralized logging configuration with trace_id injection for request tracing.
The trace_id lives in a ContextVar so it follows a request through async code.

Usage:
    from tutormatch.core.logging import setup_logging, set_trace_id
    import logging

    setup_logging()
    set_trace_id("abc123")
    logging.getLogger(__name__).info("Ranking tutors")  # includes trace_id
"""

import logging
import sys
from contextvars import ContextVar
from typing import Optional


# ==================== Context Variables ====================

TRACE_ID: ContextVar[str] = ContextVar("trace_id", default="-")


def set_trace_id(trace_id: str) -> None:
    """Set the trace_id for the current context."""
    TRACE_ID.set(trace_id)


def get_trace_id() -> str:
    """
    Get the trace_id for the current context.

    Returns:
        Current trace_id or "-" if not set
    """
    return TRACE_ID.get()


# ==================== Log Filters ====================

class TraceIdFilter(logging.Filter):
    """Logging filter that copies the current trace_id onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id()
        return True


# ==================== Logging Setup ====================

_logging_setup_done = False


def setup_logging(log_level: Optional[str] = None, force: bool = False) -> None:
    """
    Configure application-wide logging with trace_id support.

    Sets the root level (from settings unless overridden), installs a stdout
    handler with a trace_id-aware format and the TraceIdFilter. Idempotent
    unless force=True.

    Args:
        log_level: Optional level override (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force: Reconfigure even if already set up
    """
    global _logging_setup_done

    if _logging_setup_done and not force:
        return

    if log_level is None:
        from tutormatch.core.config import settings
        log_level = settings.LOG_LEVEL

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if force:
        root_logger.handlers.clear()

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)

        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] [%(trace_id)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        console_handler.setFormatter(formatter)
        console_handler.addFilter(TraceIdFilter())

        root_logger.addHandler(console_handler)

    _logging_setup_done = True

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level.upper()}")


def reset_logging() -> None:
    """
    Reset logging setup state.

    Does not remove handlers - call setup_logging(force=True) after this.
    """
    global _logging_setup_done
    _logging_setup_done = False

