"""
Core Errors Module

Standardized error classes for the tutor matching service, plus mapping of
tutor store HTTP errors onto them.

Usage:
    from tutormatch.core.errors import ValidationError

    raise ValidationError("Cell outside the editor grid", details={"minute": 1500})
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


# ==================== Base Error Class ====================

class AppError(Exception):
    """
    Base application error class.

    Attributes:
        code: Error code (e.g., "validation_error", "not_found")
        message: Human-readable error message
        details: Optional additional error context
        status_code: HTTP status code for this error type
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._default_code()
        self.details = details or {}
        self.status_code = status_code

    def _default_code(self) -> str:
        """snake_case version of the class name without the Error suffix."""
        name = self.__class__.__name__
        if name.endswith("Error"):
            name = name[:-5]

        result = []
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                result.append("_")
            result.append(char.lower())

        return "".join(result)

    def to_dict(self, trace_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON responses.

        Args:
            trace_id: Optional request trace ID

        Returns:
            Error dict with code, message, details, trace_id
        """
        result = {
            "code": self.code,
            "message": self.message,
        }

        if self.details:
            result["details"] = self.details

        if trace_id:
            result["trace_id"] = trace_id

        return result


# ==================== Specific Error Classes ====================

class ValidationError(AppError):
    """Validation error (400). Raised at call boundaries on bad input."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="validation_error",
            details=details,
            status_code=400
        )


class NotFoundError(AppError):
    """Not found error (404). Raised when the store has no such tutor."""

    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="not_found",
            details=details,
            status_code=404
        )


class ServiceUnavailableError(AppError):
    """Service unavailable error (503). The tutor store is unreachable or failing."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="service_unavailable",
            details=details,
            status_code=503
        )


class InternalError(AppError):
    """Internal server error (500)."""

    def __init__(
        self,
        message: str = "Internal server error",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="internal_error",
            details=details,
            status_code=500
        )


# ==================== Helper Functions ====================

def from_http_exception(
    e: Exception,
    default_code: str = "service_error",
    safe_message: bool = True
) -> AppError:
    """
    Convert an HTTP exception to AppError.

    Maps httpx.HTTPStatusError (and anything carrying a status_code) to the
    matching AppError subclass. With safe_message=True the backend's own error
    text is replaced by a generic message.

    Args:
        e: Exception to convert
        default_code: Error code when no subclass fits
        safe_message: Hide backend error details

    Returns:
        AppError instance
    """
    status_code = getattr(e, "status_code", 500)
    detail = str(e)

    if hasattr(e, "detail"):
        detail = e.detail

    response = getattr(e, "response", None)
    if response is not None:
        status_code = response.status_code
        try:
            error_data = response.json()
            if isinstance(error_data, dict):
                detail = error_data.get("message") or error_data.get("detail") or str(error_data)
        except ValueError:
            detail = response.text or f"HTTP {status_code}"

    if safe_message:
        if status_code == 404:
            detail = "Resource not found"
        elif status_code >= 500:
            detail = "Service error"
            logger.error(f"Service error ({status_code}): {e}")

    if status_code in (400, 422):
        return ValidationError(message=detail)
    elif status_code == 404:
        return NotFoundError(message=detail)
    elif 500 <= status_code < 600:
        return ServiceUnavailableError(message=detail)
    else:
        return AppError(
            message=detail,
            code=default_code,
            status_code=status_code
        )
