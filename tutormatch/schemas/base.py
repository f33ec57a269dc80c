"""
Base Schemas

Response envelope shared by every endpoint: {message, data, proofs}.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict


class Proofs(BaseModel):
    """
    Tracing information included in all responses.

    - trace_id: Request trace ID
    - algorithm: Algorithm identifier (e.g., "weighted_factor_matching")
    - sources: Data sources used (tutor store, request body)
    - status: Execution status (success/failed)
    """
    trace_id: Optional[str] = Field(None, description="Request trace ID")
    algorithm: Optional[str] = Field(None, description="Algorithm identifier")
    sources: Optional[List[str]] = Field(None, description="Data sources used")
    status: Optional[str] = Field(None, description="Execution status")

    model_config = ConfigDict(extra="allow")


class ApiResponse(BaseModel):
    """Standard response structure."""
    message: str = Field(..., description="User-facing response message")
    data: Dict[str, Any] = Field(default_factory=dict, description="Response data payload")
    proofs: Proofs = Field(default_factory=Proofs, description="Tracing information")

    model_config = ConfigDict(extra="allow")
