"""
Value-safe logging module.
CRITICAL: Never log input values. They are user data.
Only log: requestId, latencyMs, status, errorCode, transform names, key counts.
"""
import logging
import sys
from typing import Any, Optional

from input_sanitizer.core.config import get_settings


def setup_logging() -> None:
    """Configure application logging with a value-safe format."""
    settings = get_settings()

    log_level = logging.DEBUG if settings.service_env == "dev" else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


class SafeLogger:
    """
    Value-safe logger wrapper.
    Only renders allow-listed context fields; anything else is dropped.
    """

    SAFE_FIELDS = frozenset({
        "request_id",
        "latency_ms",
        "status",
        "status_code",
        "error_code",
        "method",
        "path",
        "transform",
        "field_count",
        "transform_count",
        "exception_class",
    })

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _format_safe_context(self, context: dict[str, Any]) -> str:
        """Format only safe fields from context."""
        safe_items = []
        for key, value in context.items():
            if key in self.SAFE_FIELDS:
                safe_items.append(f"{key}={value}")
        return " | ".join(safe_items) if safe_items else ""

    def _render(self, message: str, context: dict[str, Any]) -> str:
        ctx = self._format_safe_context(context)
        return f"{message} | {ctx}" if ctx else message

    def info(self, message: str, **context: Any) -> None:
        """Log info with safe context only."""
        self._logger.info(self._render(message, context))

    def warning(self, message: str, **context: Any) -> None:
        """Log warning with safe context only."""
        self._logger.warning(self._render(message, context))

    def error(
        self,
        message: str,
        error_code: Optional[str] = None,
        **context: Any
    ) -> None:
        """
        Log error with safe context only.
        NEVER log exception messages raised by custom transforms; they may
        echo the value being sanitized.
        """
        if error_code:
            context["error_code"] = error_code
        self._logger.error(self._render(message, context))

    def debug(self, message: str, **context: Any) -> None:
        """Log debug with safe context only."""
        self._logger.debug(self._render(message, context))


def get_safe_logger(name: str) -> SafeLogger:
    """Get a value-safe logger instance."""
    return SafeLogger(name)
