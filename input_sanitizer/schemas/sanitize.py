"""
Schemas for the sanitize API.
Note: inputs are user data - NEVER log instances.
"""
from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field


class SanitizeRequest(BaseModel):
    """Request model for /v1/sanitize."""

    inputs: Dict[str, Any] = Field(
        ...,
        description="Named input values to sanitize",
        examples=[{"email": "  A@B.COM ", "name": " john "}]
    )
    pipelines: Dict[str, Union[str, List[str]]] = Field(
        default_factory=dict,
        description=(
            "Pipeline per input key: a pipe-delimited string such as "
            "'trim|date:m/d/Y' or a list of single tokens"
        ),
        examples=[{"email": "trim|lower", "name": ["trim", "ucfirst"]}]
    )


class SanitizeMetadata(BaseModel):
    """Metadata for sanitize responses."""
    request_id: str = Field(..., alias="requestId", description="Request ID for tracing")
    latency_ms: int = Field(..., alias="latencyMs", description="Processing time in ms")
    field_count: int = Field(..., alias="fieldCount", description="Number of input keys")
    sanitized_fields: List[str] = Field(
        default_factory=list,
        alias="sanitizedFields",
        description="Input keys that had a pipeline applied"
    )

    class Config:
        populate_by_name = True


class SanitizeResponse(BaseModel):
    """Successful sanitize response."""
    success: Literal[True] = True
    data: Dict[str, Any] = Field(..., description="Sanitized inputs")
    metadata: SanitizeMetadata

    class Config:
        populate_by_name = True


class TransformCatalogResponse(BaseModel):
    """Registered transform names."""
    transforms: List[str]
    count: int


class ErrorMetadata(BaseModel):
    """Metadata included in error responses."""
    request_id: str = Field(..., alias="requestId", description="Request ID for tracing")

    class Config:
        populate_by_name = True


class ErrorDetail(BaseModel):
    """Error details for failed requests."""
    code: Literal[
        "BAD_REQUEST",
        "UNKNOWN_TRANSFORM",
        "PAYLOAD_TOO_LARGE",
        "NOT_FOUND",
        "INTERNAL_ERROR",
    ] = Field(
        ...,
        description="Error code"
    )
    message: str = Field(..., description="Human-readable error message")
    retryable: bool = Field(default=False, description="Whether the request can be retried")


class ErrorResponse(BaseModel):
    """Error response envelope."""
    success: Literal[False] = False
    error: ErrorDetail
    metadata: ErrorMetadata

    class Config:
        populate_by_name = True
