"""
Shared endpoint helpers: trace id access and the {message, data, proofs} envelope.
"""

from typing import Any, Dict, List, Optional

from tutormatch.constants import short_request_id
from tutormatch.core.logging import get_trace_id
from tutormatch.schemas.base import ApiResponse, Proofs


def current_trace_id() -> Optional[str]:
    trace_id = get_trace_id()
    return None if trace_id == "-" else trace_id


def store_request_id() -> Optional[str]:
    """Short trace id forwarded to the tutor store as x-request-id."""
    trace_id = current_trace_id()
    return short_request_id(trace_id) if trace_id else None


def standard_response(
    message: str,
    data: Optional[Dict[str, Any]] = None,
    algorithm: Optional[str] = None,
    sources: Optional[List[str]] = None
) -> Dict[str, Any]:
    """Build the standard response body."""
    response = ApiResponse(
        message=message,
        data=data or {},
        proofs=Proofs(
            trace_id=current_trace_id(),
            algorithm=algorithm,
            sources=sources,
            status="success"
        )
    )
    return response.model_dump(exclude_none=True)
