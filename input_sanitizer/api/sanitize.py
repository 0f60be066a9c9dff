"""
Sanitize API endpoints.
Value-safe: logs key counts and transform names, never input values.
"""
import time
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, status

from input_sanitizer.core.config import get_settings
from input_sanitizer.core.logging import get_safe_logger
from input_sanitizer.schemas.sanitize import (
    SanitizeMetadata,
    SanitizeRequest,
    SanitizeResponse,
    TransformCatalogResponse,
)
from input_sanitizer.services.engine import Sanitizer
from input_sanitizer.services.registry import get_registry

router = APIRouter(prefix="/v1", tags=["sanitize"])
logger = get_safe_logger(__name__)


def get_request_id(
    x_request_id: Annotated[str | None, Header(alias="X-Request-ID")] = None
) -> str:
    """
    Get or generate request ID from header.
    """
    if x_request_id and len(x_request_id) <= 100:
        return x_request_id
    return str(uuid.uuid4())


def get_sanitizer() -> Sanitizer:
    """FastAPI dependency returning an engine bound to the process-wide registry."""
    return Sanitizer(get_registry())


@router.post(
    "/sanitize",
    response_model=SanitizeResponse,
    status_code=status.HTTP_200_OK,
    summary="Sanitize named inputs",
    description="Applies each configured pipeline to its input value and returns the sanitized mapping"
)
async def sanitize_inputs(
    body: SanitizeRequest,
    request_id: Annotated[str, Depends(get_request_id)],
    sanitizer: Annotated[Sanitizer, Depends(get_sanitizer)],
) -> SanitizeResponse:
    """
    Sanitize the request inputs.

    Every referenced transform name is checked before any value is touched,
    so a misconfigured pipeline fails the whole request with UNKNOWN_TRANSFORM.
    """
    settings = get_settings()
    start = time.perf_counter()

    if len(body.inputs) > settings.max_fields:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Too many input fields (max {settings.max_fields})"
        )

    sanitizer.validate(body.pipelines)
    data = sanitizer.run(body.inputs, body.pipelines)

    latency_ms = int((time.perf_counter() - start) * 1000)
    sanitized_fields = [key for key in body.pipelines if key in body.inputs]

    logger.info(
        "Sanitize request completed",
        request_id=request_id,
        field_count=len(body.inputs),
        latency_ms=latency_ms
    )

    return SanitizeResponse(
        data=data,
        metadata=SanitizeMetadata(
            requestId=request_id,
            latencyMs=latency_ms,
            fieldCount=len(body.inputs),
            sanitizedFields=sanitized_fields
        )
    )


@router.get(
    "/transforms",
    response_model=TransformCatalogResponse,
    status_code=status.HTTP_200_OK,
    summary="List transforms",
    description="Returns the names of all registered transforms"
)
async def list_transforms() -> TransformCatalogResponse:
    """
    List registered transform names.
    Returns 404 when the catalog is not exposed.
    """
    settings = get_settings()
    if not settings.expose_transform_catalog:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    names = get_registry().names()
    return TransformCatalogResponse(transforms=names, count=len(names))
