"""
Sanitizer core: registry, pipeline parser and engine.
"""
from input_sanitizer.services.engine import Sanitizer, sanitize
from input_sanitizer.services.exceptions import (
    SanitizerError,
    SanitizerErrorCode,
    UnknownTransformError,
)
from input_sanitizer.services.pipeline import InlineStep, NamedStep, parse
from input_sanitizer.services.registry import (
    TransformRegistry,
    get_registry,
    register_transform,
)

__all__ = [
    "Sanitizer",
    "sanitize",
    "SanitizerError",
    "SanitizerErrorCode",
    "UnknownTransformError",
    "InlineStep",
    "NamedStep",
    "parse",
    "TransformRegistry",
    "get_registry",
    "register_transform",
]
