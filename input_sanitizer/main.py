"""
Input Sanitizer Service - FastAPI Application Entry Point.

Applies named transformation pipelines to request inputs.
"""
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from input_sanitizer.api.health import SERVICE_VERSION, router as health_router
from input_sanitizer.api.sanitize import router as sanitize_router
from input_sanitizer.core.config import get_settings
from input_sanitizer.core.logging import get_safe_logger, setup_logging
from input_sanitizer.schemas.sanitize import ErrorDetail, ErrorMetadata, ErrorResponse
from input_sanitizer.services.exceptions import SanitizerError
from input_sanitizer.services.registry import get_registry


# Initialize logging first
setup_logging()
logger = get_safe_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Seeds the registry before the first request is served.
    """
    registry = get_registry()
    logger.info("Starting Input Sanitizer Service", transform_count=len(registry))

    yield

    logger.info("Shutting down Input Sanitizer Service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Input Sanitizer Service",
        description="Named transformation pipelines for request inputs",
        version=SERVICE_VERSION,
        docs_url="/docs" if settings.service_env == "dev" else None,
        redoc_url="/redoc" if settings.service_env == "dev" else None,
        openapi_url="/openapi.json" if settings.service_env == "dev" else None,
        lifespan=lifespan
    )

    # Register routes
    app.include_router(health_router)
    app.include_router(sanitize_router)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SanitizerError, sanitizer_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app


def _error_response(
    request_id: str,
    status_code: int,
    code: str,
    message: str,
    retryable: bool = False
) -> JSONResponse:
    error_response = ErrorResponse(
        error=ErrorDetail(code=code, message=message, retryable=retryable),
        metadata=ErrorMetadata(requestId=request_id)
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(by_alias=True)
    )


def _request_id(request: Request) -> str:
    request_id = request.headers.get("X-Request-ID")
    if request_id and len(request_id) <= 100:
        return request_id
    return str(uuid.uuid4())


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.
    Don't include validation details; they echo input values.
    """
    request_id = _request_id(request)

    logger.error(
        "Request validation failed",
        error_code="BAD_REQUEST",
        request_id=request_id,
        status_code=400
    )

    return _error_response(
        request_id,
        status.HTTP_400_BAD_REQUEST,
        "BAD_REQUEST",
        "Invalid request format"
    )


async def sanitizer_exception_handler(
    request: Request,
    exc: SanitizerError
) -> JSONResponse:
    """
    Handle sanitizer errors (unknown transform names).
    The message carries the transform name only, which is configuration, not user data.
    """
    request_id = _request_id(request)

    logger.error(
        "Sanitizer error",
        error_code=exc.error_code.value,
        request_id=request_id,
        status_code=exc.status_code,
        transform=getattr(exc, "name", None)
    )

    return _error_response(
        request_id,
        exc.status_code,
        exc.error_code.value,
        exc.message,
        exc.retryable
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions (payload limits, disabled endpoints).
    """
    request_id = _request_id(request)

    if exc.status_code == 404:
        error_code = "NOT_FOUND"
    elif exc.status_code == 413:
        error_code = "PAYLOAD_TOO_LARGE"
    elif exc.status_code < 500:
        error_code = "BAD_REQUEST"
    else:
        error_code = "INTERNAL_ERROR"

    logger.error(
        "HTTP exception",
        error_code=error_code,
        request_id=request_id,
        status_code=exc.status_code
    )

    return _error_response(
        request_id,
        exc.status_code,
        error_code,
        exc.detail if isinstance(exc.detail, str) else "Request failed",
        exc.status_code >= 500
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions, e.g. a custom transform that raised.
    Never log exception details; they may contain input values.
    """
    request_id = _request_id(request)

    logger.error(
        "Unexpected error",
        error_code="INTERNAL_ERROR",
        request_id=request_id,
        status_code=500,
        exception_class=type(exc).__name__
    )

    return _error_response(
        request_id,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "Internal server error",
        retryable=True
    )


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "input_sanitizer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.service_env == "dev"
    )
