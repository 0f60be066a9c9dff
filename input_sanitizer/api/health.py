"""
Health check endpoints.
No user data in responses.
"""
from typing import Dict

from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from input_sanitizer.services.registry import get_registry
from input_sanitizer.services.transforms import BUILTIN_TRANSFORMS

SERVICE_NAME = "input-sanitizer"
SERVICE_VERSION = "0.1.0"

router = APIRouter(tags=["health"])


# === Response Models ===

class HealthResponse(BaseModel):
    """Basic health check response."""
    ok: bool


class ReadyResponse(BaseModel):
    """Readiness check response."""
    ready: bool
    checks: Dict[str, bool]


class DetailedHealthResponse(BaseModel):
    """Detailed health response for /v1/health."""
    ok: bool
    service: str = Field(default=SERVICE_NAME)
    version: str
    transform_count: int = Field(alias="transformCount")

    class Config:
        populate_by_name = True


def _registry_checks() -> Dict[str, bool]:
    registry = get_registry()
    return {
        "builtins_registered": all(registry.is_registered(name) for name in BUILTIN_TRANSFORMS),
    }


# === Endpoints ===

@router.get(
    "/healthz",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
    description="Returns 200 if the service is alive"
)
async def health_check() -> HealthResponse:
    """Liveness check. Returns ok=true if the service is running."""
    return HealthResponse(ok=True)


@router.get(
    "/readyz",
    response_model=ReadyResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check",
    description="Returns 200 if the service is ready to handle requests"
)
async def readiness_check() -> ReadyResponse:
    """
    Readiness check.
    Ready once every built-in transform resolves. A custom override of a
    built-in still counts as registered.
    """
    checks = _registry_checks()
    return ReadyResponse(ready=all(checks.values()), checks=checks)


@router.get(
    "/v1/health",
    response_model=DetailedHealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Detailed health check",
    description="Returns service version and registry size"
)
async def detailed_health_check() -> DetailedHealthResponse:
    checks = _registry_checks()
    return DetailedHealthResponse(
        ok=all(checks.values()),
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        transform_count=len(get_registry())
    )
