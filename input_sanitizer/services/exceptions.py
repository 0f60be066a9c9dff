"""
Custom exceptions for the sanitizer core.
Value-safe: these exceptions carry transform names only, never input values.
"""
from enum import Enum


class SanitizerErrorCode(str, Enum):
    """Error codes safe to log and return to clients."""
    UNKNOWN_TRANSFORM = "UNKNOWN_TRANSFORM"


class SanitizerError(Exception):
    """
    Base exception for sanitizer errors.

    Attributes:
        error_code: Error code for logging and response
        status_code: HTTP status code to return
        retryable: Whether the client should retry
        message: Value-safe message
    """

    def __init__(
        self,
        error_code: SanitizerErrorCode,
        message: str = "Sanitization failed",
        status_code: int = 500,
        retryable: bool = False
    ):
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.retryable = retryable
        super().__init__(message)


class UnknownTransformError(SanitizerError, LookupError):
    """
    Raised when a pipeline names a transform that is not registered.

    This is a configuration error: it aborts the whole run and is not retried.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            error_code=SanitizerErrorCode.UNKNOWN_TRANSFORM,
            message=f"Unknown transform: {name}",
            status_code=400,
            retryable=False
        )
