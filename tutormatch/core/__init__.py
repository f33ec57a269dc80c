"""
Core Package

Centralized configuration, logging and error handling for the tutor matching
service.

Modules:
- config: Environment configuration and settings
- logging: Structured logging with trace_id support
- errors: Standardized error classes and HTTP conversion

Usage:
    from tutormatch.core import settings, setup_logging, set_trace_id
    from tutormatch.core import ValidationError, NotFoundError
"""

# Configuration
from tutormatch.core.config import settings, get_settings, is_production

# Logging
from tutormatch.core.logging import (
    setup_logging,
    set_trace_id,
    get_trace_id,
)

# Errors
from tutormatch.core.errors import (
    AppError,
    ValidationError,
    NotFoundError,
    ServiceUnavailableError,
    InternalError,
    from_http_exception
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "is_production",

    # Logging
    "setup_logging",
    "set_trace_id",
    "get_trace_id",

    # Errors
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ServiceUnavailableError",
    "InternalError",
    "from_http_exception",
]
